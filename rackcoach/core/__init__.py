"""Recommendation engine: dictionary, solver, probability and reroll heuristics."""
