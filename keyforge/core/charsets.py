"""Character classes and pool composition."""

from __future__ import annotations

import enum
import string
from typing import Iterable

SYMBOLS = "!@#$%^&*()_+[]{}<>?,.;:|-="


class CharacterClass(enum.Enum):
    """Selectable character class, in canonical pool order."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "numbers"
    SYMBOL = "symbols"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]


ALPHABETS = {
    CharacterClass.UPPERCASE: string.ascii_uppercase,
    CharacterClass.LOWERCASE: string.ascii_lowercase,
    CharacterClass.DIGIT: string.digits,
    CharacterClass.SYMBOL: SYMBOLS,
}

# Enum definition order is the pool order: Upper, Lower, Digit, Symbol
CANONICAL_ORDER = tuple(CharacterClass)


def build_charset(classes: Iterable[CharacterClass]) -> str:
    """Concatenate the alphabets of *classes* in canonical order.

    An empty selection yields an empty pool. Overlapping alphabets are kept
    as-is.
    """
    selected = set(classes)
    return "".join(cls.alphabet for cls in CANONICAL_ORDER if cls in selected)
