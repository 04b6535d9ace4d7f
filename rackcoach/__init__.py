"""RackCoach: word recommendations and reroll advice for a letter rack."""

__version__ = "0.1.0"
