"""Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides:
- Isolation from RACKCOACH_* variables set in the developer's shell
- Small on-disk wordlists for dictionary tests
- A tiny in-memory dictionary for solver and command tests
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from rackcoach.core.dictionary import WordSources

WordlistWriter = Callable[..., WordSources]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop RACKCOACH_* overrides so every test sees the defaults."""
    for key in list(os.environ):
        if key.startswith("RACKCOACH_"):
            monkeypatch.delenv(key)


@pytest.fixture
def write_wordlists(tmp_path: Path) -> WordlistWriter:
    """Factory writing the four wordlist files into a fresh directory."""

    def _write(
        *,
        core: list[str],
        spelling: list[str],
        blocklist: list[str],
        candidates: list[str],
        name: str = "wordlists",
    ) -> WordSources:
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        sources = WordSources.from_directory(directory)
        sources.core_words.write_text("\n".join(core) + "\n", encoding="utf-8")
        sources.spelling_words.write_text("\n".join(spelling) + "\n", encoding="utf-8")
        sources.blocklist.write_text("\n".join(blocklist) + "\n", encoding="utf-8")
        sources.candidates.write_text("\n".join(candidates) + "\n", encoding="utf-8")
        return sources

    return _write


@pytest.fixture
def small_sources(write_wordlists: WordlistWriter) -> WordSources:
    """Tiny wordlists exercising every filter of the dictionary pipeline."""
    return write_wordlists(
        core=["cat", "act", "at", "tact", "gym", "hmm", "aaa", "colour", "e-mail", "abc", "a",
              "internationalization", "dog"],
        spelling=["CAT", "ACT", "AT", "TACT", "GYM", "HMM", "AAA", "ABC", "A",
                  "INTERNATIONALIZATION", "DOG", "COLOR", "AARDVARK"],
        blocklist=["# never offered", "abc", "#DOG"],
        candidates=["cat", "CAT", "  Act  ", "at", "tact", "gym", "hmm", "aaa", "colour",
                    "e-mail", "abc", "a", "internationalization", "dog", "aardvark", ""],
    )


@pytest.fixture
def tiny_dictionary() -> tuple[str, ...]:
    """Sorted word tuple in the shape `build_dictionary` returns."""
    return ("ACT", "AT", "CAT", "EERIE", "TA", "TACT")
