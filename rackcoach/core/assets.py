"""Helpers for locating bundled assets (wordlists).

Paths are resolved relative to this module so they do not depend on cwd.
"""

from __future__ import annotations

from pathlib import Path

CORE_WORDS_FILE = "core_words.txt"
SPELLING_WORDS_FILE = "spelling_words.txt"
BLOCKLIST_FILE = "blocklist.txt"
CANDIDATES_FILE = "candidates.txt"


def get_assets_path() -> Path:
    """Return the `assets/` directory of the package.

    Located relative to this module (`rackcoach/core/assets.py`).
    """

    return Path(__file__).resolve().parent.parent / "assets"


def get_wordlists_path() -> Path:
    """Directory holding the four bundled wordlist files."""

    return get_assets_path() / "wordlists"
