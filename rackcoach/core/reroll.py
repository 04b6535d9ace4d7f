"""Reroll advisor: which letters to keep and which to throw back.

Two passes run over the rack:

1. "Balance rack" (foundation) trims duplicates, fixes Q without U, keeps
   the vowel count in range and notes which useful letters to hold.
2. "Target the board" (target) looks for an S, lengtheners for long words
   and a high-value letter for triple-letter squares, and swaps up to two
   more letters to chase them.

Both passes respect the baseline word: a letter is never dropped when the
best word currently playable would no longer fit the kept letters.
Each step is a function `RackState -> RackState`.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .heuristics import (
    CORE_VOWELS,
    GLUE_CONSONANTS,
    LENGTHENER_LETTERS,
    LENGTHENER_TRIADS,
    LONG_WORD_LENGTH,
    PREMIUM_HITTERS,
    TARGET_VOWEL_PRIORITY,
    TL_HITTERS,
    RackState,
    collect_protected_pairs,
    consonant_drop_priority,
    desired_vowel_range,
    format_letters,
    is_glue_consonant,
    is_lengthener,
    is_tl_hitter,
    is_vowel,
    vowel_trim_weight,
    would_break_protected_pair,
)
from .letters import ALPHABET, char_index
from .probability import approximate_draw_probability
from .types import RerollAdvice

log = logging.getLogger("rackcoach.reroll")

PASS_ONE_LABEL = "Pass 1 – Balance rack"
PASS_TWO_LABEL = "Pass 2 – Target the board"
PASS_ONE_PHASE = "foundation"
PASS_TWO_PHASE = "target"

PASS_ONE_DESIRED_LIMIT = 8
PASS_TWO_DESIRED_LIMIT = 10
MAX_TARGET_SWAPS = 2
MAX_DUPLICATES = 2


# ========== Pass one: balance rack ==========


def trim_duplicates(state: RackState) -> RackState:
    """Reroll copies beyond the second, latest positions first."""
    for letter in ALPHABET:
        positions = state.positions_of(letter)
        if len(positions) <= MAX_DUPLICATES:
            continue
        extras = len(positions) - MAX_DUPLICATES
        for pos in reversed(positions):
            if extras == 0:
                break
            if state.violates_baseline(letter):
                continue
            state = state.drop(pos)
            extras -= 1
        state = state.with_note(f"Trim extra {letter}", "Trim duplicates")
    return state


def fix_q_without_u(state: RackState) -> RackState:
    """Dump a kept Q when no U is kept, or ask for a U when Q must stay."""
    if state.kept("Q") == 0 or state.kept("U") > 0:
        return state

    dropped_q = False
    for pos in state.positions_of("Q"):
        if state.violates_baseline("Q"):
            continue
        state = state.drop(pos)
        dropped_q = True

    if dropped_q:
        return state.with_note("Dump Q (no U)", "Fix Q support")
    state = state.with_desired("U")
    return state.with_note("Need U to unlock your Q for TL/DL plays", "Fix Q support")


def drop_v_without_core_vowel(state: RackState) -> RackState:
    """Without A/E/I/O a V is nearly unplayable, so throw it back."""
    if any(ch in CORE_VOWELS for ch in state.keep_letters):
        return state
    if state.kept("V") == 0:
        return state
    for pos in state.positions_of("V"):
        if state.violates_baseline("V"):
            continue
        state = state.drop(pos)
    return state.with_note("Drop V until you secure A/E/I/O", "Balance vowels")


def trim_excess_vowels(state: RackState, vowel_max: int) -> RackState:
    """Reroll the least flexible vowels until at most `vowel_max` remain."""
    kept_vowels = state.kept_vowels
    if kept_vowels <= vowel_max:
        return state

    excess = kept_vowels - vowel_max
    kept_counts = state.kept_counts
    weighted = []
    for idx in state.kept_positions():
        ch = state.letters[idx]
        if not is_vowel(ch):
            continue
        duplicates = max(kept_counts[char_index(ch)] - 1, 0) * 12
        weighted.append((vowel_trim_weight(ch) + duplicates, idx))
    weighted.sort(key=lambda item: -item[0])

    trimmed: list[str] = []
    for _, idx in weighted:
        if len(trimmed) >= excess:
            break
        ch = state.letters[idx]
        if state.violates_baseline(ch):
            continue
        state = state.drop(idx)
        trimmed.append(ch)

    if trimmed:
        state = state.with_note(f"Trim excess vowels ({format_letters(trimmed)})", "Balance vowels")
    return state


def add_vowels(state: RackState, vowel_min: int) -> RackState:
    """Free consonant slots so the reroll can bring in vowels."""
    kept_vowels = state.kept_vowels
    if kept_vowels >= vowel_min:
        return state

    needed = vowel_min - kept_vowels
    kept_counts = state.kept_counts
    weighted = []
    for idx in state.kept_positions():
        ch = state.letters[idx]
        if is_vowel(ch):
            continue
        duplicates = max(kept_counts[char_index(ch)] - 1, 0) * 8
        weighted.append((consonant_drop_priority(ch) + duplicates, idx))
    weighted.sort(key=lambda item: -item[0])

    dropped: list[str] = []
    for _, idx in weighted:
        if needed == 0:
            break
        ch = state.letters[idx]
        if ch == "S" or is_glue_consonant(ch):
            continue
        if would_break_protected_pair(ch, state.kept_counts):
            continue
        if state.violates_baseline(ch):
            continue
        state = state.drop(idx)
        dropped.append(ch)
        needed -= 1

    if dropped:
        state = state.with_note(
            f"Reroll {format_letters(dropped)} to fish for stronger vowels", "Add vowels"
        )
    state = state.with_desired("E", "A", "I")
    return state.with_note("Aim for two reliable vowels (E/A/I)", "Add vowels")


def note_keepers(state: RackState) -> RackState:
    """Explain which parts of the final keep set are worth holding."""
    pairs = collect_protected_pairs(state.kept_counts)
    if pairs:
        state = state.with_note(f"Preserve blends ({', '.join(pairs)})", "Protect blends")

    keep = state.keep_letters
    if "S" in keep:
        state = state.with_note("Keep S for easy hooks", "Keep S hot")
    if any(is_glue_consonant(ch) and ch != "S" for ch in keep):
        glue = ", ".join(ch for ch in GLUE_CONSONANTS if ch != "S")
        state = state.with_note(f"Hold glue consonants ({glue})", "Keep glue consonants")
    if any(ch in PREMIUM_HITTERS for ch in keep):
        state = state.with_note("Keep one premium hitter ready for TL", "Prep TL hitter")
    if not state.reroll_letters:
        state = state.with_note("Rack already balanced — optional reroll", "Fine-tune only")
    return state


@dataclass(frozen=True)
class PassOneOutcome:
    """Result of the balancing pass, reused as the start of pass two."""

    state: RackState
    vowel_min: int

    @property
    def desired_letters(self) -> tuple[str, ...]:
        return self.state.desired[:PASS_ONE_DESIRED_LIMIT]

    def to_advice(self) -> RerollAdvice:
        keep = self.state.keep_letters
        reroll = self.state.reroll_letters
        return RerollAdvice(
            target_word=PASS_ONE_LABEL,
            missing_letters=self.desired_letters,
            reroll_letters=reroll,
            keep_letters=keep,
            phase=PASS_ONE_PHASE,
            success_probability=approximate_draw_probability(keep, reroll, self.desired_letters),
            notes=self.state.notes,
            focus_tags=self.state.focus_tags,
        )


def analyze_pass_one(state: RackState, target_length: int) -> PassOneOutcome:
    vowel_min, vowel_max = desired_vowel_range(len(state.letters), target_length)
    state = trim_duplicates(state)
    state = fix_q_without_u(state)
    state = drop_v_without_core_vowel(state)
    state = trim_excess_vowels(state, vowel_max)
    state = add_vowels(state, vowel_min)
    state = note_keepers(state)
    return PassOneOutcome(state=state, vowel_min=vowel_min)


# ========== Pass two: target the board ==========


def _kept_lengtheners(state: RackState) -> list[str]:
    return [ch for ch in state.keep_letters if is_lengthener(ch)]


def _missing_triad_letters(state: RackState) -> list[list[str]]:
    kept = set(state.keep_letters)
    return [sorted(ch for ch in triad if ch not in kept) for triad in LENGTHENER_TRIADS]


def lengtheners_short(state: RackState, target_length: int) -> bool:
    """True when the kept letters cannot support words of the target length."""
    lengtheners = _kept_lengtheners(state)
    if target_length >= LONG_WORD_LENGTH:
        if len(set(lengtheners)) < 3:
            return True
        return any(_missing_triad_letters(state))
    return len(lengtheners) < 2


def lengthener_needed(state: RackState, target_length: int) -> bool:
    """A kept lengthener must stay: dropping it would weaken the word shape."""
    lengtheners = _kept_lengtheners(state)
    if target_length >= LONG_WORD_LENGTH:
        return len(set(lengtheners)) <= 3 or any(_missing_triad_letters(state))
    return len(lengtheners) <= 2


def request_s(state: RackState) -> RackState:
    if "S" in state.keep_letters:
        return state
    state = state.with_desired("S")
    return state.with_note("Look for an S to extend words", "Find S hook")


def chase_lengtheners(state: RackState, target_length: int) -> RackState:
    if target_length >= LONG_WORD_LENGTH:
        for missing in _missing_triad_letters(state):
            state = state.with_desired(*missing)
    if not lengtheners_short(state, target_length):
        return state
    state = state.with_desired(*LENGTHENER_LETTERS)
    return state.with_note(
        "Chase lengtheners (-ER/-ED/-ING/-LY) to stretch onto DW/TW", "Chase lengtheners"
    )


def find_tl_hitter(state: RackState) -> RackState:
    if any(is_tl_hitter(ch) for ch in state.keep_letters):
        return state
    state = state.with_desired(*TL_HITTERS)
    return state.with_note("Fish for a TL hitter (J/X/Z/K/H/F/W/Y)", "Find TL hitter")


def swap_for_multipliers(state: RackState, target_length: int, vowel_floor: int) -> RackState:
    """Drop up to two more kept letters that block multiplier plays."""
    kept_counts = state.kept_counts
    weighted = []
    for idx in state.kept_positions():
        ch = state.letters[idx]
        base = TARGET_VOWEL_PRIORITY if is_vowel(ch) else consonant_drop_priority(ch)
        duplicates = max(kept_counts[char_index(ch)] - 1, 0) * 10
        weighted.append((base + duplicates, idx))
    weighted.sort(key=lambda item: -item[0])

    swapped: list[str] = []
    for _, idx in weighted:
        if len(swapped) >= MAX_TARGET_SWAPS:
            break
        ch = state.letters[idx]
        if ch == "S" or is_glue_consonant(ch):
            continue
        if would_break_protected_pair(ch, state.kept_counts):
            continue
        if is_lengthener(ch) and lengthener_needed(state, target_length):
            continue
        if is_tl_hitter(ch) and sum(1 for k in state.keep_letters if is_tl_hitter(k)) <= 1:
            continue
        if is_vowel(ch) and state.kept_vowels <= vowel_floor:
            continue
        if state.violates_baseline(ch):
            continue
        state = state.drop(idx)
        swapped.append(ch)

    if swapped:
        state = state.with_note(
            f"Swap {format_letters(swapped)} to upgrade your multiplier letters",
            "Upgrade multipliers",
        )
    return state


def analyze_pass_two(pass_one: PassOneOutcome, target_length: int) -> RerollAdvice | None:
    state = pass_one.state.fresh_pass()
    state = request_s(state)
    state = chase_lengtheners(state, target_length)
    state = find_tl_hitter(state)

    if not state.desired and not pass_one.state.reroll_letters:
        return None

    state = swap_for_multipliers(state, target_length, pass_one.vowel_min)

    keep = state.keep_letters
    reroll = pass_one.state.reroll_letters + state.dropped
    return RerollAdvice(
        target_word=PASS_TWO_LABEL,
        missing_letters=state.desired[:PASS_TWO_DESIRED_LIMIT],
        reroll_letters=reroll,
        keep_letters=keep,
        phase=PASS_TWO_PHASE,
        success_probability=approximate_draw_probability(keep, reroll, state.desired),
        notes=state.notes,
        focus_tags=state.focus_tags,
    )


# ========== Entry point ==========


def suggest_rerolls(
    letters: Sequence[str],
    target_length: int,
    limit: int,
    baseline_word: str | None = None,
) -> list[RerollAdvice]:
    """Build the reroll advice list for a rack, pass one first.

    `target_length` 0 means "as long as the rack". `baseline_word` is the
    best word found by the solver; its letters are never thrown back.
    """
    if not letters:
        return []

    effective_target = target_length or len(letters)
    pass_one = analyze_pass_one(RackState.start(tuple(letters), baseline_word), effective_target)
    advice = [pass_one.to_advice()]

    if len(advice) >= limit:
        return advice[:limit]

    pass_two = analyze_pass_two(pass_one, effective_target)
    if pass_two is not None:
        advice.append(pass_two)

    log.debug(
        "Reroll advice for %s (target=%d, baseline=%s): %d entries",
        "".join(letters),
        effective_target,
        baseline_word,
        len(advice),
    )
    return advice[:limit]
