from __future__ import annotations

import pytest

from rackcoach.core.letters import ALPHABET
from rackcoach.core.probability import approximate_draw_probability, binomial


def test_binomial() -> None:
    assert binomial(5, 2) == 10.0
    assert binomial(4, 0) == 1.0
    assert binomial(4, 4) == 1.0
    assert binomial(3, 5) == 0.0


def test_nothing_to_reroll_or_desire() -> None:
    assert approximate_draw_probability(["A"], [], ["E"]) is None
    assert approximate_draw_probability(["A"], ["B"], []) is None
    assert approximate_draw_probability(["A"], ["B"], ["?"]) is None


def test_desired_letter_used_up() -> None:
    # the only Q is kept
    assert approximate_draw_probability(["Q"], ["A"], ["Q"]) == 0.0
    assert approximate_draw_probability(["Z", "Z"], ["A"], ["Z"]) == 0.0


def test_miss_impossible() -> None:
    desired = [ch for ch in ALPHABET if ch != "Z"]
    # one undesired tile (Z) left, two draws
    assert approximate_draw_probability([], ["A", "B"], desired) == 1.0


def test_single_draw_exact() -> None:
    assert approximate_draw_probability([], ["A"], ["Q"]) == pytest.approx(1 / 98)


def test_two_draws_hypergeometric() -> None:
    # bag without the kept Q: 97 tiles, 4 of them U
    expected = 1 - (93 * 92) / (97 * 96)
    assert approximate_draw_probability(["Q"], ["A", "B"], ["U"]) == pytest.approx(expected)


def test_duplicate_desired_letters_count_once() -> None:
    once = approximate_draw_probability([], ["A"], ["E"])
    assert approximate_draw_probability([], ["A"], ["E", "E", "e"]) == pytest.approx(once)
    assert once == pytest.approx(12 / 98)
