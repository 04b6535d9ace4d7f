"""Curated word dictionary built from the bundled wordlists.

The dictionary is the intersection of four plain-text sources:

- `core_words.txt`: acceptable roots (lower-cased), defines the vocabulary.
- `spelling_words.txt`: spelling-correct words (a superset of the core list).
- `blocklist.txt`: words never offered; `#` lines are comments.
- `candidates.txt`: the raw word list that is filtered.

A raw word survives when its lower-cased form is a core word, it is 2–15
ASCII letters, it is spelled correctly, it contains a vowel (Y counts),
it is not one repeated character and it is not blocklisted. The result is
sorted, deduplicated and kept for the whole process lifetime.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .. import config
from .assets import (
    BLOCKLIST_FILE,
    CANDIDATES_FILE,
    CORE_WORDS_FILE,
    SPELLING_WORDS_FILE,
    get_wordlists_path,
)

log = logging.getLogger("rackcoach.dictionary")

MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 15
DICTIONARY_VOWELS = frozenset("AEIOUY")

Dictionary = tuple[str, ...]


class DictionaryLoadError(RuntimeError):
    """Raised when a bundled wordlist is missing, unreadable or empty."""
    pass


@dataclass(frozen=True)
class WordSources:
    """Paths of the four wordlist files feeding the dictionary."""

    core_words: Path
    spelling_words: Path
    blocklist: Path
    candidates: Path

    @classmethod
    def from_directory(cls, directory: str | Path) -> WordSources:
        base = Path(directory)
        return cls(
            core_words=base / CORE_WORDS_FILE,
            spelling_words=base / SPELLING_WORDS_FILE,
            blocklist=base / BLOCKLIST_FILE,
            candidates=base / CANDIDATES_FILE,
        )


def default_sources() -> WordSources:
    """Sources from `RACKCOACH_WORDLIST_DIR`, else the bundled wordlists."""
    return WordSources.from_directory(config.wordlist_dir() or get_wordlists_path())


def _read_lines(path: Path, *, comment_prefix: str | None = None) -> Iterator[str]:
    """Yield trimmed, non-empty lines; comment lines are skipped."""
    try:
        with path.open("r", encoding="utf-8", errors="strict") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Cannot read wordlist {path}: {e}") from e

    for line in lines:
        w = line.strip()
        if not w:
            continue
        if comment_prefix and w.startswith(comment_prefix):
            continue
        yield w


def load_core_words(path: Path) -> frozenset[str]:
    return frozenset(w.lower() for w in _read_lines(path))


def load_spelling_words(path: Path) -> frozenset[str]:
    return frozenset(w.upper() for w in _read_lines(path))


def load_blocklist(path: Path) -> frozenset[str]:
    return frozenset(w.upper() for w in _read_lines(path, comment_prefix="#"))


def contains_vowel(word: str) -> bool:
    return any(ch in DICTIONARY_VOWELS for ch in word)


def is_uniform_character(word: str) -> bool:
    """True for non-empty words made of one repeated character ("AAAA")."""
    return bool(word) and word == word[0] * len(word)


def is_well_formed(word: str) -> bool:
    """Length 2–15 and ASCII letters only."""
    return (
        MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH
        and word.isascii()
        and word.isalpha()
    )


def build_dictionary(sources: WordSources) -> Dictionary:
    """Run the filtering pipeline and return the sorted, unique word tuple.

    Raises:
        DictionaryLoadError: a source cannot be read or nothing survives.
    """
    core = load_core_words(sources.core_words)
    spelling = load_spelling_words(sources.spelling_words)
    blocked = load_blocklist(sources.blocklist)

    words: set[str] = set()
    for raw in _read_lines(sources.candidates):
        if raw.lower() not in core:
            continue
        word = raw.upper()
        if not is_well_formed(word):
            continue
        if word not in spelling:
            continue
        if not contains_vowel(word):
            continue
        if is_uniform_character(word):
            continue
        if word in blocked:
            continue
        words.add(word)

    if not words:
        raise DictionaryLoadError(
            f"Wordlists in {sources.candidates.parent} produced an empty dictionary"
        )

    log.info(
        "Dictionary built: %d words (core=%d, spelling=%d, blocked=%d)",
        len(words),
        len(core),
        len(spelling),
        len(blocked),
    )
    return tuple(sorted(words))


_LOCK = threading.Lock()
_DICTIONARY: Dictionary | None = None


def get_dictionary() -> Dictionary:
    """Process-wide dictionary, built once on first use.

    The double-checked lock makes concurrent first calls build it only once;
    afterwards reads need no locking because the tuple is never replaced.
    """
    global _DICTIONARY
    cached = _DICTIONARY
    if cached is not None:
        return cached
    with _LOCK:
        if _DICTIONARY is None:
            _DICTIONARY = build_dictionary(default_sources())
        return _DICTIONARY
