from __future__ import annotations

from collections.abc import Sequence

from .letters import letter_value
from .types import Bonus, LetterScore, ScoreBreakdown

# Scores saturate at the unsigned 32-bit maximum instead of growing unbounded
SCORE_CEILING = 2**32 - 1


def _sat_add(a: int, b: int) -> int:
    return min(a + b, SCORE_CEILING)


def _sat_mul(a: int, b: int) -> int:
    return min(a * b, SCORE_CEILING)


def _bonus_at(bonuses: Sequence[Bonus], idx: int) -> Bonus:
    return bonuses[idx] if idx < len(bonuses) else Bonus.NONE


def score_word(word: str, bonuses: Sequence[Bonus] = (), round_multiplier: int = 1) -> int | None:
    """Score a word with position bonuses and the round multiplier.

    `bonuses[i]` applies to the i-th letter of the word. DL/TL multiply the
    letter, DW/TW multiply the whole word and compound when several are
    present. Returns None when the word contains a letter without a value.
    """
    letter_sum = 0
    word_multiplier = 1
    for idx, ch in enumerate(word):
        base = letter_value(ch)
        if base is None:
            return None
        bonus = _bonus_at(bonuses, idx)
        letter_sum = _sat_add(letter_sum, _sat_mul(base, bonus.letter_multiplier))
        word_multiplier = _sat_mul(word_multiplier, bonus.word_multiplier)
    return _sat_mul(_sat_mul(letter_sum, word_multiplier), round_multiplier)


def score_breakdown(
    word: str,
    bonuses: Sequence[Bonus] = (),
    round_multiplier: int = 1,
) -> ScoreBreakdown | None:
    """Same as `score_word`, but keeps the contribution of every letter."""
    letters: list[LetterScore] = []
    letter_sum = 0
    word_multiplier = 1
    for idx, ch in enumerate(word):
        base = letter_value(ch)
        if base is None:
            return None
        bonus = _bonus_at(bonuses, idx)
        points = _sat_mul(base, bonus.letter_multiplier)
        letters.append(
            LetterScore(
                letter=ch.upper(),
                base=base,
                bonus=bonus,
                multiplier=bonus.letter_multiplier,
                points=points,
            )
        )
        letter_sum = _sat_add(letter_sum, points)
        word_multiplier = _sat_mul(word_multiplier, bonus.word_multiplier)
    total = _sat_mul(_sat_mul(letter_sum, word_multiplier), round_multiplier)
    return ScoreBreakdown(
        word=word.upper(),
        letters=tuple(letters),
        letter_sum=letter_sum,
        word_multiplier=word_multiplier,
        round_multiplier=round_multiplier,
        total=total,
    )
