from __future__ import annotations

import pytest

from rackcoach.core.reroll import (
    PASS_ONE_LABEL,
    PASS_ONE_PHASE,
    PASS_TWO_LABEL,
    PASS_TWO_PHASE,
    suggest_rerolls,
)

BALANCED_NOTE = "Rack already balanced — optional reroll"


def _rack(text: str) -> list[str]:
    return list(text)


def test_empty_rack_has_no_advice() -> None:
    assert suggest_rerolls([], 7, 6) == []


def test_both_passes_for_unbalanced_long_target() -> None:
    advice = suggest_rerolls(_rack("ABCDINT"), 7, 6)
    assert len(advice) == 2
    first, second = advice

    assert first.target_word == PASS_ONE_LABEL
    assert first.phase == PASS_ONE_PHASE
    assert first.reroll_letters == ()
    assert first.success_probability is None
    assert BALANCED_NOTE in first.notes
    assert any(note.startswith("Hold glue consonants") for note in first.notes)

    assert second.target_word == PASS_TWO_LABEL
    assert second.phase == PASS_TWO_PHASE
    assert second.missing_letters == ("S", "G", "E", "R", "I", "N", "L", "Y", "D")
    assert second.reroll_letters == ("B",)
    assert second.keep_letters == ("A", "C", "D", "I", "N", "T")
    assert second.success_probability == pytest.approx(47 / 92)
    assert BALANCED_NOTE not in second.notes
    assert "Swap B to upgrade your multiplier letters" in second.notes
    assert second.focus_tags == ("Find S hook", "Chase lengtheners", "Upgrade multipliers")


def test_balanced_rack_skips_pass_two() -> None:
    advice = suggest_rerolls(_rack("SINGERH"), 7, 6)
    assert len(advice) == 1
    only = advice[0]
    assert only.reroll_letters == ()
    assert only.keep_letters == tuple("SINGERH")
    assert only.notes == (
        "Preserve blends (SH, GR, SN)",
        "Keep S for easy hooks",
        "Hold glue consonants (R, T, L, N, D, M, P, C, H)",
        BALANCED_NOTE,
    )
    assert only.focus_tags == ("Protect blends", "Keep S hot", "Keep glue consonants", "Fine-tune only")


def test_trims_third_copy_and_beyond() -> None:
    first = suggest_rerolls(_rack("EEEETSR"), 7, 6)[0]
    assert first.reroll_letters == ("E", "E")
    assert first.keep_letters == ("E", "E", "T", "S", "R")
    assert "Trim extra E" in first.notes
    assert "Preserve blends (ST, TR)" in first.notes
    assert first.missing_letters == ()
    assert first.success_probability is None


def test_baseline_word_letters_are_kept() -> None:
    first = suggest_rerolls(_rack("EEEETSR"), 7, 6, baseline_word="EEET")[0]
    assert first.reroll_letters == ("E",)
    assert first.keep_letters.count("E") == 3


def test_baseline_blocks_vowel_trimming() -> None:
    without = suggest_rerolls(_rack("EEEERIS"), 7, 6)[0]
    assert without.reroll_letters == ("E", "E")
    with_baseline = suggest_rerolls(_rack("EEEERIS"), 7, 6, baseline_word="EERIE")[0]
    assert with_baseline.reroll_letters == ("E",)


def test_q_without_u_is_dumped() -> None:
    first = suggest_rerolls(_rack("QAERSTN"), 7, 6)[0]
    assert first.reroll_letters == ("Q",)
    assert "Dump Q (no U)" in first.notes
    assert "Fix Q support" in first.focus_tags


def test_q_in_baseline_asks_for_u() -> None:
    first = suggest_rerolls(_rack("QAERSTN"), 7, 6, baseline_word="QAT")[0]
    assert first.reroll_letters == ()
    assert first.missing_letters == ("U",)
    assert "Need U to unlock your Q for TL/DL plays" in first.notes


def test_v_dropped_without_core_vowel() -> None:
    first = suggest_rerolls(_rack("VUSTRNL"), 7, 6)[0]
    assert first.reroll_letters == ("V",)
    assert first.missing_letters == ("E", "A", "I")
    assert "Drop V until you secure A/E/I/O" in first.notes
    assert "Aim for two reliable vowels (E/A/I)" in first.notes
    assert first.success_probability == pytest.approx(30 / 92)


def test_excess_vowels_are_trimmed_least_flexible_first() -> None:
    first = suggest_rerolls(_rack("AEIOUTS"), 7, 6)[0]
    assert first.reroll_letters == ("O", "U")
    assert "Trim excess vowels (U, O)" in first.notes


def test_consonant_rack_frees_slots_for_vowels() -> None:
    advice = suggest_rerolls(_rack("BCDFGHK"), 7, 6)
    first, second = advice
    assert first.reroll_letters == ("B", "F")
    assert "Reroll F, B to fish for stronger vowels" in first.notes
    assert first.missing_letters == ("E", "A", "I")
    assert "Add vowels" in first.focus_tags
    # pass two rerolls everything pass one did, plus its own swaps
    assert second.reroll_letters == ("B", "F", "K")
    assert second.keep_letters == ("C", "D", "G", "H")


def test_blend_letter_is_not_dropped_for_vowels() -> None:
    first = suggest_rerolls(_rack("BRTSNLD"), 7, 6)[0]
    assert first.reroll_letters == ()
    assert "Preserve blends (ST, TR, BR, DR, SL, SN)" in first.notes
    assert BALANCED_NOTE in first.notes


def test_long_target_chases_tl_hitter_and_lengtheners() -> None:
    second = suggest_rerolls(_rack("AEINRST"), 7, 6)[1]
    assert second.missing_letters == ("G", "E", "R", "I", "N", "L", "Y", "D", "S", "J")
    assert second.reroll_letters == ("A",)
    assert "Fish for a TL hitter (J/X/Z/K/H/F/W/Y)" in second.notes
    assert "Find TL hitter" in second.focus_tags


def test_short_target_swaps_at_most_two() -> None:
    second = suggest_rerolls(_rack("ABCO"), 4, 6)[1]
    assert second.reroll_letters == ("B", "A")
    assert second.keep_letters == ("C", "O")
    assert "Swap B, A to upgrade your multiplier letters" in second.notes


def test_zero_target_means_rack_length() -> None:
    assert suggest_rerolls(_rack("ABCDINT"), 0, 6) == suggest_rerolls(_rack("ABCDINT"), 7, 6)


def test_limit_truncates_advice() -> None:
    advice = suggest_rerolls(_rack("ABCDINT"), 7, 1)
    assert len(advice) == 1
    assert advice[0].phase == PASS_ONE_PHASE


def test_input_rack_is_not_modified() -> None:
    rack = _rack("EEEETSR")
    suggest_rerolls(rack, 7, 6)
    assert rack == _rack("EEEETSR")


def test_short_target_stops_swapping_lengtheners_at_two() -> None:
    # Y goes first; with only G and E left, G is held as a lengthener
    second = suggest_rerolls(_rack("YGEATK"), 5, 6)[1]
    assert second.reroll_letters == ("Y",)
    assert second.keep_letters == ("G", "E", "A", "T", "K")
    assert second.missing_letters == ("S",)
    assert "Swap Y to upgrade your multiplier letters" in second.notes


def test_last_tl_hitter_is_never_swapped() -> None:
    # Y has the highest drop weight but is the only kept TL hitter
    second = suggest_rerolls(_rack("YGEAT"), 5, 6)[1]
    assert "Y" in second.keep_letters
    assert second.reroll_letters == ("G",)
    assert second.keep_letters == ("Y", "E", "A", "T")


def test_long_target_rechecks_triads_after_each_swap() -> None:
    # dropping I breaks the I-N-G triad, so E must stay
    second = suggest_rerolls(_rack("INGERSDA"), 8, 6)[1]
    assert second.reroll_letters == ("I",)
    assert second.keep_letters == ("N", "G", "E", "R", "S", "D", "A")
    assert second.missing_letters == ("J", "X", "Z", "K", "H", "F", "W", "Y", "V", "M")
