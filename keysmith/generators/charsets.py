"""
Character Classes
==================

The three fixed, disjoint character classes passwords are drawn from.
"""

from __future__ import annotations

import string

from keysmith.core.models import CharacterClass

LETTERS: tuple[str, ...] = tuple(string.ascii_lowercase + string.ascii_uppercase)
DIGITS: tuple[str, ...] = tuple(string.digits)
SYMBOLS: tuple[str, ...] = tuple("~`!@#$%^&*()-_+={}[]|\\:;\"',<>./?")

CHARSETS: dict[CharacterClass, tuple[str, ...]] = {
    CharacterClass.LETTERS: LETTERS,
    CharacterClass.DIGITS: DIGITS,
    CharacterClass.SYMBOLS: SYMBOLS,
}


def classify(char: str) -> CharacterClass | None:
    """Return the class *char* belongs to, or ``None``."""
    for cls, members in CHARSETS.items():
        if char in members:
            return cls
    return None
