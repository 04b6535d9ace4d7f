"""Tool wrappers for MCP clients.

Each function is a stateless tool. Inputs and outputs are JSON-serializable
dicts; request errors come back as `{"error": ...}` instead of raising.

Tool naming convention: tool_<action>, registered without the prefix.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from pydantic import ValidationError

from ..core.letters import LETTER_VALUES, TILE_DISTRIBUTION
from ..core.probability import approximate_draw_probability
from ..core.rack import normalize_rack, parse_bonuses
from ..core.scoring import score_breakdown
from .commands import MAX_ROUND, MIN_ROUND, RackValidationError, solve_rack_command

log = logging.getLogger("rackcoach.service.tools")


class ToolNotFoundError(KeyError):
    """Raised when a tool name is not registered."""
    pass


def tool_solve_rack(
    rack_letters: list[str] | str,
    target_word_length: int | None = None,
    invalid_words: list[str] | None = None,
    rack_bonuses: list[str] | None = None,
    round: int | None = None,
) -> dict[str, Any]:
    """Recommend words and reroll advice for a rack.

    Returns:
        SolveRackResponse as a dict, or {error: str} for invalid input
    """
    payload = {
        "rack_letters": rack_letters,
        "target_word_length": target_word_length,
        "invalid_words": invalid_words or [],
        "rack_bonuses": rack_bonuses or [],
        "round": round,
    }
    try:
        response = solve_rack_command(payload)
    except (RackValidationError, ValidationError) as e:
        log.info("Rejected solve_rack request: %s", e)
        return {"error": str(e)}
    return response.model_dump()


def tool_score_word(
    word: str,
    rack_bonuses: list[str] | None = None,
    round: int = 1,
) -> dict[str, Any]:
    """Score a single word with position bonuses and round multiplier.

    Returns:
        {word, total, word_multiplier, round_multiplier, letters: [...]}
        or {error: str} for a round outside 1-5 or non-letter characters
    """
    if not (MIN_ROUND <= round <= MAX_ROUND):
        return {"error": "Round must be between 1 and 5."}
    breakdown = score_breakdown(word.strip(), parse_bonuses(rack_bonuses or []), round)
    if breakdown is None:
        return {"error": f"Word contains characters without a value: {word!r}"}
    return {
        "word": breakdown.word,
        "total": breakdown.total,
        "word_multiplier": breakdown.word_multiplier,
        "round_multiplier": breakdown.round_multiplier,
        "letters": [
            {
                "letter": item.letter,
                "base": item.base,
                "bonus": item.bonus.code,
                "multiplier": item.multiplier,
                "points": item.points,
            }
            for item in breakdown.letters
        ],
    }


def tool_reroll_probability(
    keep_letters: list[str],
    reroll_letters: list[str],
    desired_letters: list[str],
) -> dict[str, Any]:
    """Chance of drawing at least one desired letter when rerolling.

    Returns:
        {probability: float | None}
    """
    probability = approximate_draw_probability(
        normalize_rack(keep_letters),
        normalize_rack(reroll_letters),
        normalize_rack(desired_letters),
    )
    return {"probability": probability}


def tool_get_tile_values() -> dict[str, Any]:
    """Letter point values and the standard bag distribution."""
    return {"values": dict(LETTER_VALUES), "distribution": dict(TILE_DISTRIBUTION)}


ALL_TOOLS: dict[str, Callable[..., dict[str, Any]]] = {
    "solve_rack": tool_solve_rack,
    "score_word": tool_score_word,
    "reroll_probability": tool_reroll_probability,
    "get_tile_values": tool_get_tile_values,
}


def get_tool_function(tool_name: str) -> Callable[..., dict[str, Any]]:
    """Get tool function by name.

    Raises:
        ToolNotFoundError: If tool not found
    """
    if tool_name not in ALL_TOOLS:
        raise ToolNotFoundError(f"Tool not found: {tool_name}")
    return ALL_TOOLS[tool_name]


def get_all_tool_names() -> list[str]:
    """Get list of all registered tool names."""
    return list(ALL_TOOLS.keys())
