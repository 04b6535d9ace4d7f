"""Pydantic models for the solve-rack request and response.

The request model only checks types; range checks with user-facing
messages live in `commands.solve_rack_command`.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.types import LetterScore, RackCandidate, RerollAdvice, ScoreBreakdown


class SolveRackRequest(BaseModel):
    """Raw request from a client (CLI, MCP tool, UI)."""

    model_config = ConfigDict(extra="ignore")

    rack_letters: list[str]
    target_word_length: int | None = None
    invalid_words: list[str] = Field(default_factory=list)
    rack_bonuses: list[str] = Field(default_factory=list)
    round: int | None = None

    @field_validator("rack_letters", mode="before")
    @classmethod
    def _split_rack_string(cls, v: object) -> object:
        """Accept "ABC" as shorthand for ["A", "B", "C"]."""
        if isinstance(v, str):
            return list(v)
        return v


class LetterScoreModel(BaseModel):
    letter: str
    base: int
    bonus: str
    multiplier: int = 1
    points: int

    @classmethod
    def from_letter(cls, item: LetterScore) -> LetterScoreModel:
        return cls(
            letter=item.letter,
            base=item.base,
            bonus=item.bonus.code,
            multiplier=item.multiplier,
            points=item.points,
        )


class WordRecommendation(BaseModel):
    word: str
    score: int
    letters_used: list[str] = Field(default_factory=list)
    breakdown: list[LetterScoreModel] = Field(default_factory=list)
    word_multiplier: int = 1

    @classmethod
    def from_candidate(
        cls,
        candidate: RackCandidate,
        breakdown: ScoreBreakdown | None = None,
    ) -> WordRecommendation:
        return cls(
            word=candidate.word,
            score=candidate.score,
            letters_used=list(candidate.word),
            breakdown=[LetterScoreModel.from_letter(x) for x in breakdown.letters] if breakdown else [],
            word_multiplier=breakdown.word_multiplier if breakdown else 1,
        )


class RerollSuggestion(BaseModel):
    target_word: str
    missing_letters: list[str] = Field(default_factory=list)
    reroll_letters: list[str] = Field(default_factory=list)
    keep_letters: list[str] = Field(default_factory=list)
    estimated_score: float | None = None
    success_probability: float | None = None
    phase: str | None = None
    notes: list[str] = Field(default_factory=list)
    focus_tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_advice(cls, advice: RerollAdvice) -> RerollSuggestion:
        return cls(
            target_word=advice.target_word,
            missing_letters=list(advice.missing_letters),
            reroll_letters=list(advice.reroll_letters),
            keep_letters=list(advice.keep_letters),
            estimated_score=(
                float(advice.estimated_score) if advice.estimated_score is not None else None
            ),
            success_probability=advice.success_probability,
            phase=advice.phase,
            notes=list(advice.notes),
            focus_tags=list(advice.focus_tags),
        )


class SolveRackResponse(BaseModel):
    rack_letters: list[str]
    target_word_length: int | None = None
    rack_bonuses: list[str] = Field(default_factory=list)
    round: int | None = None
    recommendations: list[WordRecommendation] = Field(default_factory=list)
    reroll_suggestions: list[RerollSuggestion] = Field(default_factory=list)
