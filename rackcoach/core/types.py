from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Bonus(Enum):
    """Bonus tile on one word position (not a rack position)."""

    NONE = "NONE"
    DL = "DL"  # Double Letter
    TL = "TL"  # Triple Letter
    DW = "DW"  # Double Word
    TW = "TW"  # Triple Word

    @classmethod
    def from_code(cls, value: str | None) -> Bonus:
        """Parse a bonus code; unknown or empty codes become NONE."""
        code = (value or "").strip().upper()
        try:
            return cls(code)
        except ValueError:
            return cls.NONE

    @property
    def code(self) -> str:
        return self.value

    @property
    def letter_multiplier(self) -> int:
        if self is Bonus.DL:
            return 2
        if self is Bonus.TL:
            return 3
        return 1

    @property
    def word_multiplier(self) -> int:
        if self is Bonus.DW:
            return 2
        if self is Bonus.TW:
            return 3
        return 1


Rack = tuple[str, ...]
LetterCounts = tuple[int, ...]


@dataclass(frozen=True)
class RackCandidate:
    """One playable word for the rack together with its score."""

    word: str
    score: int


@dataclass(frozen=True)
class LetterScore:
    """Points contributed by one letter of a scored word."""

    letter: str
    base: int
    bonus: Bonus
    multiplier: int
    points: int


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-letter breakdown of a word score."""

    word: str
    letters: tuple[LetterScore, ...]
    letter_sum: int
    word_multiplier: int
    round_multiplier: int
    total: int


@dataclass(frozen=True)
class RerollAdvice:
    """Keep/reroll recommendation produced by one advisor pass."""

    target_word: str
    missing_letters: tuple[str, ...]
    reroll_letters: tuple[str, ...]
    keep_letters: tuple[str, ...]
    phase: str
    estimated_score: int | None = None
    success_probability: float | None = None
    notes: tuple[str, ...] = field(default_factory=tuple)
    focus_tags: tuple[str, ...] = field(default_factory=tuple)
