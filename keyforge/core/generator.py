"""GenerationConfig and PasswordGenerator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from keyforge.config import Config
from keyforge.core.charsets import CharacterClass, build_charset
from keyforge.core.random_source import RandomSource, select_random_source

logger = logging.getLogger("keyforge.core.generator")


@dataclass(frozen=True)
class GenerationConfig:
    """A single generation request: length plus selected classes."""

    length: int
    classes: FrozenSet[CharacterClass] = field(default_factory=frozenset)

    def __post_init__(self):
        # Accept any iterable of classes but store an immutable set
        if not isinstance(self.classes, frozenset):
            object.__setattr__(self, "classes", frozenset(self.classes))

    @classmethod
    def from_flags(
        cls,
        length: int,
        uppercase: bool = False,
        lowercase: bool = False,
        numbers: bool = False,
        symbols: bool = False,
    ) -> GenerationConfig:
        flags = {
            CharacterClass.UPPERCASE: uppercase,
            CharacterClass.LOWERCASE: lowercase,
            CharacterClass.DIGIT: numbers,
            CharacterClass.SYMBOL: symbols,
        }
        return cls(length, frozenset(c for c, on in flags.items() if on))

    @classmethod
    def from_names(cls, length: int, names: Iterable[str]) -> GenerationConfig:
        """Build from class values such as ``"uppercase"`` or ``"numbers"``."""
        return cls(length, frozenset(CharacterClass(n) for n in names))


def validate_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"Length must be an int, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"Length must not be negative, got {length}")
    if length > Config.HARD_MAX_LENGTH:
        raise ValueError(
            f"Length {length} exceeds the maximum of {Config.HARD_MAX_LENGTH}"
        )


class PasswordGenerator:
    """Draws passwords from a character pool using an injected RandomSource."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        self.random_source = random_source or select_random_source()

    @property
    def is_cryptographic(self) -> bool:
        return self.random_source.is_cryptographic

    def generate(self, config: GenerationConfig) -> str:
        validate_length(config.length)

        pool = build_charset(config.classes)
        if not pool or config.length == 0:
            return ""

        # Independent draws with replacement; repeats are expected
        size = len(pool)
        draw = self.random_source.next_bounded_int
        return "".join(pool[draw(size)] for _ in range(config.length))
