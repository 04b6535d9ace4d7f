"""Rack solver: which dictionary words can be built from a rack, and for how much.

The solver is a pure function over the dictionary. It never reads board
state; bonuses are given per word position by the caller.
"""
from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

from .dictionary import Dictionary, get_dictionary
from .letters import char_index, is_letter, letter_counts
from .scoring import score_word
from .types import Bonus, LetterCounts, RackCandidate

log = logging.getLogger("rackcoach.solver")


def word_fits(word: str, rack_counts: LetterCounts) -> bool:
    """True when the word needs no letter more often than the rack holds it."""
    need = [0] * 26
    for ch in word:
        if not is_letter(ch):
            return False
        idx = char_index(ch)
        need[idx] += 1
        if need[idx] > rack_counts[idx]:
            return False
    return True


def solve_rack(
    letters: Sequence[str],
    target_length: int | None,
    invalid: Collection[str],
    limit: int,
    bonuses: Sequence[Bonus] = (),
    round_multiplier: int = 1,
    *,
    dictionary: Dictionary | None = None,
) -> list[RackCandidate]:
    """Rank the dictionary words playable from `letters`.

    Args:
        letters: normalized rack (uppercase A–Z).
        target_length: only words of exactly this length, or None for any.
        invalid: uppercase words the player wants excluded.
        limit: maximum number of candidates (at least one is kept).
        bonuses: bonus per word position.
        round_multiplier: 1–5, scales every score.
        dictionary: word tuple to search; defaults to the process dictionary.

    Returns:
        Candidates by descending score, ties in alphabetical order.
    """
    if not letters:
        return []

    words = get_dictionary() if dictionary is None else dictionary
    rack_counts = letter_counts(letters)
    rack_size = len(letters)

    candidates: list[RackCandidate] = []
    for word in words:
        if target_length is not None and len(word) != target_length:
            continue
        if len(word) > rack_size:
            continue
        if word in invalid:
            continue
        if not word_fits(word, rack_counts):
            continue
        score = score_word(word, bonuses, round_multiplier)
        if score is None:
            continue
        candidates.append(RackCandidate(word=word, score=score))

    candidates.sort(key=lambda c: (-c.score, c.word))
    log.debug(
        "Rack %s: %d playable words (target=%s, round=%d)",
        "".join(letters),
        len(candidates),
        target_length,
        round_multiplier,
    )
    return candidates[: max(limit, 1)]
