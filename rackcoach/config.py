"""Configuration for RackCoach read from the environment (.env supported).

Rules:
- `.env` is loaded early but never overrides variables already set in the OS.
- Unknown or malformed values fall back to the built-in defaults.
"""
from __future__ import annotations

import os
from contextlib import suppress
from pathlib import Path

from dotenv import load_dotenv

# Load .env early, without replacing existing OS variables
if os.getenv("PYTEST_CURRENT_TEST") is None:
    with suppress(OSError):
        load_dotenv(override=False)

DEFAULT_RESULT_LIMIT = 40
DEFAULT_REROLL_LIMIT = 6

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def _parse_bool(val: str | None) -> bool | None:
    """Tolerant boolean parsing; None when the value is not recognised."""
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def _parse_int(val: str | None) -> int | None:
    """Tolerant integer parsing; None for missing or non-numeric values."""
    if val is None:
        return None
    v = val.strip()
    if not v:
        return None
    try:
        return int(v)
    except ValueError:
        return None


def wordlist_dir() -> Path | None:
    """Directory override for the wordlist files (`RACKCOACH_WORDLIST_DIR`)."""
    env = os.getenv("RACKCOACH_WORDLIST_DIR")
    if env and env.strip():
        return Path(env.strip()).expanduser()
    return None


def result_limit() -> int:
    """Maximum number of word recommendations per request."""
    value = _parse_int(os.getenv("RACKCOACH_RESULT_LIMIT"))
    if value is None:
        return DEFAULT_RESULT_LIMIT
    return max(value, 1)


def reroll_limit() -> int:
    """Maximum number of reroll suggestions per request."""
    value = _parse_int(os.getenv("RACKCOACH_REROLL_LIMIT"))
    if value is None:
        return DEFAULT_REROLL_LIMIT
    return max(value, 1)


def preload_dictionary() -> bool:
    """Whether entry points should build the dictionary eagerly."""
    return bool(_parse_bool(os.getenv("RACKCOACH_PRELOAD_DICTIONARY")))
