"""Heuristic password strength score (0-100) and its presentation tier.

The score is a structural heuristic, not an entropy measurement::

    length >= 8      + min(40, 2 * length)
    has A-Z          + 15
    has a-z          + 15
    has 0-9          + 15
    has anything else + 15

The class bonuses apply regardless of length, so a one-character password
such as ``"A"`` still scores 15.
"""

from __future__ import annotations

import enum

from keyforge.config import Config

MAX_SCORE = 100
LENGTH_THRESHOLD = 8
LENGTH_CAP = 40
LENGTH_WEIGHT = 2
CLASS_BONUS = 15


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_other(c: str) -> bool:
    return not (_is_upper(c) or _is_lower(c) or _is_digit(c))


_CLASS_CHECKS = (_is_upper, _is_lower, _is_digit, _is_other)


def score(password: str) -> int:
    """Return the strength score of *password* in ``[0, 100]``."""
    if not password:
        return 0

    total = 0
    if len(password) >= LENGTH_THRESHOLD:
        total += min(LENGTH_CAP, len(password) * LENGTH_WEIGHT)

    for check in _CLASS_CHECKS:
        if any(check(c) for c in password):
            total += CLASS_BONUS

    return max(0, min(MAX_SCORE, total))


class StrengthTier(str, enum.Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"

    @property
    def bootstyle(self) -> str:
        return _BOOTSTYLES[self]


# ttkbootstrap colour keywords used by the strength bar
_BOOTSTYLES = {
    StrengthTier.WEAK: "danger",
    StrengthTier.MEDIUM: "warning",
    StrengthTier.STRONG: "success",
}


def tier(value: int) -> StrengthTier:
    """Classify a score: < 40 weak, < 70 medium, otherwise strong."""
    if value < Config.WEAK_BELOW:
        return StrengthTier.WEAK
    if value < Config.STRONG_FROM:
        return StrengthTier.MEDIUM
    return StrengthTier.STRONG
