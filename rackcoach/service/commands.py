"""Command handler: validated request in, recommendations and advice out.

Validation failures raise `RackValidationError` with a message meant for
the player. Everything past validation is a normal outcome, including an
empty recommendation list.
"""
from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from .. import config
from ..core.dictionary import MAX_WORD_LENGTH, MIN_WORD_LENGTH, Dictionary
from ..core.rack import normalize_invalid_words, normalize_rack, parse_bonuses
from ..core.reroll import suggest_rerolls
from ..core.scoring import score_breakdown
from ..core.solver import solve_rack
from ..logging_setup import REQUEST_ID_VAR
from .schema import RerollSuggestion, SolveRackRequest, SolveRackResponse, WordRecommendation

log = logging.getLogger("rackcoach.service")

MIN_ROUND = 1
MAX_ROUND = 5
DEFAULT_ROUND = 1


class RackValidationError(ValueError):
    """Raised when a request cannot be solved as given."""
    pass


def solve_rack_command(
    request: SolveRackRequest | Mapping[str, Any],
    *,
    limit: int | None = None,
    reroll_limit: int | None = None,
    dictionary: Dictionary | None = None,
) -> SolveRackResponse:
    """Validate the request, solve the rack and attach reroll advice.

    The best recommendation (if any) is the baseline word for the advisor,
    so advice never throws back letters that word needs.

    Raises:
        RackValidationError: empty rack, target length or round out of range.
        pydantic.ValidationError: `request` is a mapping of the wrong shape.
    """
    if not isinstance(request, SolveRackRequest):
        request = SolveRackRequest.model_validate(request)

    token = REQUEST_ID_VAR.set(uuid.uuid4().hex[:8])
    try:
        return _solve(
            request,
            limit=limit if limit is not None else config.result_limit(),
            reroll_limit=reroll_limit if reroll_limit is not None else config.reroll_limit(),
            dictionary=dictionary,
        )
    finally:
        REQUEST_ID_VAR.reset(token)


def _solve(
    request: SolveRackRequest,
    *,
    limit: int,
    reroll_limit: int,
    dictionary: Dictionary | None,
) -> SolveRackResponse:
    letters = normalize_rack(request.rack_letters)
    if not letters:
        raise RackValidationError("Add at least one rack letter before solving.")

    target = request.target_word_length
    if target is not None and not (MIN_WORD_LENGTH <= target <= MAX_WORD_LENGTH):
        raise RackValidationError("Target word length must be between 2 and 15.")

    round_value = request.round if request.round is not None else DEFAULT_ROUND
    if not (MIN_ROUND <= round_value <= MAX_ROUND):
        raise RackValidationError("Round must be between 1 and 5.")

    invalid = normalize_invalid_words(request.invalid_words)
    bonuses = parse_bonuses(request.rack_bonuses)

    log.debug(
        "Solving rack %s (target=%s, round=%d, bonuses=%s, excluded=%d)",
        "".join(letters),
        target,
        round_value,
        [b.code for b in bonuses],
        len(invalid),
    )

    candidates = solve_rack(
        letters,
        target,
        invalid,
        limit,
        bonuses,
        round_value,
        dictionary=dictionary,
    )
    recommendations = [
        WordRecommendation.from_candidate(c, score_breakdown(c.word, bonuses, round_value))
        for c in candidates
    ]

    baseline = recommendations[0].word if recommendations else None
    advice = suggest_rerolls(
        letters,
        target if target is not None else len(letters),
        reroll_limit,
        baseline,
    )

    log.info(
        "Rack %s: %d recommendations, %d reroll suggestions (best=%s)",
        "".join(letters),
        len(recommendations),
        len(advice),
        baseline or "-",
    )

    return SolveRackResponse(
        rack_letters=list(letters),
        target_word_length=target,
        rack_bonuses=[b.code for b in bonuses],
        round=round_value,
        recommendations=recommendations,
        reroll_suggestions=[RerollSuggestion.from_advice(a) for a in advice],
    )
