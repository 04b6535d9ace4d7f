"""Pure helpers that turn raw request values into engine inputs.

Nothing here raises; range checks are done by the command layer.
"""
from __future__ import annotations

from collections.abc import Iterable

from .letters import is_letter
from .types import Bonus, Rack


def normalize_rack(entries: Iterable[str]) -> Rack:
    """Take the first character of each entry, keep A–Z only, uppercase.

    Entries like "" or "?" disappear; "ab" contributes just "A".
    """
    letters: list[str] = []
    for entry in entries:
        if not entry:
            continue
        ch = entry[0]
        if is_letter(ch):
            letters.append(ch.upper())
    return tuple(letters)


def normalize_invalid_words(words: Iterable[str]) -> frozenset[str]:
    """Trimmed, uppercased exclusion set without blank entries."""
    return frozenset(w.strip().upper() for w in words if w.strip())


def parse_bonuses(codes: Iterable[str]) -> tuple[Bonus, ...]:
    return tuple(Bonus.from_code(code) for code in codes)
