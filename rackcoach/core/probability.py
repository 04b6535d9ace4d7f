"""Chance of drawing at least one wanted letter when rerolling.

Draws are modelled without replacement from the standard bag minus the
letters the player keeps (hypergeometric "at least one hit").
"""
from __future__ import annotations

from collections.abc import Sequence

from .letters import char_index, is_letter, remaining_bag


def binomial(n: int, k: int) -> float:
    """C(n, k) as a float, computed multiplicatively to stay in range."""
    if k > n:
        return 0.0
    if k == 0 or k == n:
        return 1.0
    k = min(k, n - k)
    result = 1.0
    for i in range(1, k + 1):
        result *= n - k + i
        result /= i
    return result


def approximate_draw_probability(
    keep_letters: Sequence[str],
    reroll_letters: Sequence[str],
    desired_letters: Sequence[str],
) -> float | None:
    """Probability that rerolling yields at least one desired letter.

    Returns None when nothing is rerolled, nothing is desired or the bag is
    empty; 0.0 when every desired letter is used up; 1.0 when a miss is
    impossible.
    """
    if not reroll_letters or not desired_letters:
        return None

    bag = remaining_bag(keep_letters)
    draws = len(reroll_letters)

    desired_indices: list[int] = []
    for ch in desired_letters:
        if is_letter(ch):
            idx = char_index(ch)
            if idx not in desired_indices:
                desired_indices.append(idx)
    if not desired_indices:
        return None

    desired_total = sum(bag[idx] for idx in desired_indices)
    if desired_total == 0:
        return 0.0

    total_available = sum(bag)
    if total_available == 0:
        return None
    if draws > total_available:
        return 1.0

    undesired_available = total_available - desired_total
    if undesired_available < draws:
        return 1.0

    total_combos = binomial(total_available, draws)
    if total_combos == 0.0:
        return None
    miss_combos = binomial(undesired_available, draws)
    success = 1.0 - miss_combos / total_combos
    return min(max(success, 0.0), 1.0)
