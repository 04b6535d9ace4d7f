"""Lookup tables and the immutable rack snapshot used by the reroll advisor.

Every advisor rule takes a `RackState` and returns a new one; nothing is
mutated in place, so each rule can be exercised on its own in tests.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from .letters import char_index, letter_counts
from .types import LetterCounts, Rack

VOWELS = frozenset("AEIOU")
CORE_VOWELS = frozenset("AEIO")
GLUE_CONSONANTS = ("R", "S", "T", "L", "N", "D", "M", "P", "C", "H")
PREMIUM_HITTERS = frozenset("JXZK")
TL_HITTERS = ("J", "X", "Z", "K", "H", "F", "W", "Y", "V", "M", "P", "C")
LENGTHENER_LETTERS = ("E", "R", "I", "N", "G", "L", "Y", "D", "S")
LENGTHENER_TRIADS = (("I", "N", "G"), ("E", "R", "S"))
LONG_WORD_LENGTH = 7

PROTECTED_PAIRS = (
    ("C", "H"),
    ("S", "H"),
    ("T", "H"),
    ("P", "H"),
    ("S", "T"),
    ("T", "R"),
    ("P", "R"),
    ("C", "R"),
    ("B", "R"),
    ("D", "R"),
    ("C", "L"),
    ("G", "L"),
    ("P", "L"),
    ("F", "R"),
    ("G", "R"),
    ("S", "L"),
    ("S", "N"),
    ("S", "P"),
    ("Q", "U"),
)

VOWEL_TRIM_WEIGHTS = {"U": 70, "O": 55, "A": 45, "I": 35, "E": 25}
DEFAULT_VOWEL_TRIM_WEIGHT = 30

CONSONANT_DROP_PRIORITY = {
    "Q": 110,
    "V": 95,
    "W": 85,
    "Y": 80,
    "F": 70, "H": 70,
    "B": 65, "G": 65,
    "K": 60,
    "J": 55, "X": 55, "Z": 55,
    "P": 50, "C": 50, "M": 50,
    "D": 40,
    "R": 15, "T": 15, "L": 15, "N": 15, "S": 15,
}
DEFAULT_CONSONANT_PRIORITY = 45

# Flat drop weight for vowels in the board-targeting pass
TARGET_VOWEL_PRIORITY = 40


def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def is_glue_consonant(ch: str) -> bool:
    return ch in GLUE_CONSONANTS


def is_lengthener(ch: str) -> bool:
    return ch in LENGTHENER_LETTERS


def is_tl_hitter(ch: str) -> bool:
    return ch in TL_HITTERS


def consonant_drop_priority(ch: str) -> int:
    return CONSONANT_DROP_PRIORITY.get(ch, DEFAULT_CONSONANT_PRIORITY)


def vowel_trim_weight(ch: str) -> int:
    return VOWEL_TRIM_WEIGHTS.get(ch, DEFAULT_VOWEL_TRIM_WEIGHT)


def desired_vowel_range(rack_len: int, target_length: int) -> tuple[int, int]:
    """Minimum and maximum vowels worth keeping for this rack and target."""
    if rack_len == 0:
        return 0, 0
    if rack_len <= 4:
        return min(1, rack_len), min(2, rack_len)
    if rack_len == 5 or target_length <= 5:
        return min(2, rack_len), min(2, rack_len)
    return min(2, rack_len), min(3, rack_len)


def would_break_protected_pair(ch: str, kept_counts: LetterCounts) -> bool:
    """Dropping `ch` would remove the last copy of a blend whose partner stays."""
    for a, b in PROTECTED_PAIRS:
        a_count = kept_counts[char_index(a)]
        b_count = kept_counts[char_index(b)]
        if ch == a:
            if a_count <= 1 and b_count > 0:
                return True
        elif ch == b:
            if b_count <= 1 and a_count > 0:
                return True
    return False


def collect_protected_pairs(kept_counts: LetterCounts) -> list[str]:
    """Blends fully present in the kept letters, in table order."""
    pairs: list[str] = []
    for a, b in PROTECTED_PAIRS:
        if kept_counts[char_index(a)] > 0 and kept_counts[char_index(b)] > 0:
            pair = f"{a}{b}"
            if pair not in pairs:
                pairs.append(pair)
    return pairs


def format_letters(letters: tuple[str, ...] | list[str]) -> str:
    return ", ".join(letters)


@dataclass(frozen=True)
class RackState:
    """Snapshot of keep/drop decisions for one rack.

    - letters: the rack in original order
    - keep_flags: one flag per rack position
    - baseline: letter counts of the baseline word, if any
    - desired: letters the player should fish for (insertion order, unique)
    - notes / focus_tags: advice text accumulated by the rules
    - dropped: letters marked for reroll by this pass, in drop order
    """

    letters: Rack
    keep_flags: tuple[bool, ...]
    baseline: LetterCounts | None = None
    desired: tuple[str, ...] = ()
    notes: tuple[str, ...] = ()
    focus_tags: tuple[str, ...] = ()
    dropped: tuple[str, ...] = ()

    @classmethod
    def start(cls, letters: Rack, baseline_word: str | None = None) -> RackState:
        baseline = letter_counts(baseline_word) if baseline_word else None
        return cls(letters=tuple(letters), keep_flags=(True,) * len(letters), baseline=baseline)

    # --- derived views ---------------------------------------------------

    @property
    def keep_letters(self) -> tuple[str, ...]:
        return tuple(ch for ch, keep in zip(self.letters, self.keep_flags) if keep)

    @property
    def reroll_letters(self) -> tuple[str, ...]:
        return tuple(ch for ch, keep in zip(self.letters, self.keep_flags) if not keep)

    @property
    def kept_counts(self) -> LetterCounts:
        return letter_counts(self.keep_letters)

    @property
    def kept_vowels(self) -> int:
        return sum(1 for ch in self.keep_letters if is_vowel(ch))

    def kept(self, ch: str) -> int:
        return self.kept_counts[char_index(ch)]

    def positions_of(self, ch: str) -> list[int]:
        return [idx for idx, letter in enumerate(self.letters) if letter == ch]

    def kept_positions(self) -> list[int]:
        return [idx for idx, keep in enumerate(self.keep_flags) if keep]

    # --- rules shared by both passes -------------------------------------

    def violates_baseline(self, ch: str) -> bool:
        """Dropping one more `ch` would leave too few for the baseline word."""
        if self.baseline is None:
            return False
        required = self.baseline[char_index(ch)]
        if required == 0:
            return False
        return self.kept(ch) <= required

    # --- transitions -----------------------------------------------------

    def drop(self, idx: int) -> RackState:
        if not self.keep_flags[idx]:
            return self
        flags = list(self.keep_flags)
        flags[idx] = False
        return replace(self, keep_flags=tuple(flags), dropped=self.dropped + (self.letters[idx],))

    def with_desired(self, *letters: str) -> RackState:
        desired = list(self.desired)
        for ch in letters:
            if ch not in desired:
                desired.append(ch)
        return replace(self, desired=tuple(desired))

    def with_note(self, note: str, tag: str | None = None) -> RackState:
        notes = self.notes if note in self.notes else self.notes + (note,)
        tags = self.focus_tags
        if tag is not None and not any(t.lower() == tag.lower() for t in tags):
            tags = tags + (tag,)
        return replace(self, notes=notes, focus_tags=tags)

    def fresh_pass(self) -> RackState:
        """Same keep flags, with empty advice for the next pass."""
        return replace(self, desired=(), notes=(), focus_tags=(), dropped=())
