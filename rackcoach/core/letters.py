"""Letter values and the standard tile bag.

All helpers work on the 26 ASCII letters A–Z. Anything else (digits,
punctuation, accented letters) has no value and is ignored by counting
helpers.
"""
from __future__ import annotations

from collections.abc import Iterable
from string import ascii_uppercase

from .types import LetterCounts

ALPHABET = ascii_uppercase

LETTER_VALUES: dict[str, int] = {
    "R": 1, "A": 1, "E": 1, "I": 1, "S": 1, "T": 1, "O": 1,
    "L": 2, "U": 2, "D": 2, "N": 2,
    "H": 3, "G": 3, "Y": 3,
    "C": 4, "B": 4, "F": 4, "P": 4, "W": 4, "M": 4,
    "K": 5, "V": 5,
    "X": 8,
    "Q": 10, "Z": 10, "J": 10,
}

TILE_DISTRIBUTION: dict[str, int] = {
    "A": 9, "B": 2, "C": 2, "D": 4, "E": 12, "F": 2, "G": 3,
    "H": 2, "I": 9, "J": 1, "K": 1, "L": 4, "M": 2, "N": 6,
    "O": 8, "P": 2, "Q": 1, "R": 6, "S": 4, "T": 6, "U": 4,
    "V": 2, "W": 2, "X": 1, "Y": 2, "Z": 1,
}

LETTER_BAG_COUNTS: LetterCounts = tuple(TILE_DISTRIBUTION[ch] for ch in ALPHABET)


def is_letter(ch: str) -> bool:
    """True for a single ASCII letter (either case)."""
    return len(ch) == 1 and ch.isascii() and ch.isalpha()


def letter_value(ch: str) -> int | None:
    """Point value of a letter, or None for non-letters."""
    return LETTER_VALUES.get(ch.upper()) if is_letter(ch) else None


def char_index(ch: str) -> int:
    return ord(ch.upper()) - ord("A")


def letter_counts(letters: Iterable[str]) -> LetterCounts:
    """Count letters into a 26-slot tuple, ignoring non-letters."""
    counts = [0] * 26
    for ch in letters:
        if is_letter(ch):
            counts[char_index(ch)] += 1
    return tuple(counts)


def remaining_bag(kept: Iterable[str]) -> LetterCounts:
    """Standard bag minus the kept letters, clamped at zero per letter."""
    bag = list(LETTER_BAG_COUNTS)
    for ch in kept:
        if is_letter(ch):
            idx = char_index(ch)
            if bag[idx] > 0:
                bag[idx] -= 1
    return tuple(bag)
