"""KeyForge generation-and-scoring core."""

from keyforge.core.charsets import ALPHABETS, CharacterClass, build_charset
from keyforge.core.generator import GenerationConfig, PasswordGenerator
from keyforge.core.history import HistoryBuffer
from keyforge.core.random_source import (
    RandomSource,
    SecureRandomSource,
    WeakRandomSource,
    select_random_source,
)
from keyforge.core.session import GenerationResult, GeneratorSession
from keyforge.core.strength import StrengthTier, score, tier

__all__ = [
    "ALPHABETS",
    "CharacterClass",
    "build_charset",
    "GenerationConfig",
    "PasswordGenerator",
    "HistoryBuffer",
    "RandomSource",
    "SecureRandomSource",
    "WeakRandomSource",
    "select_random_source",
    "GenerationResult",
    "GeneratorSession",
    "StrengthTier",
    "score",
    "tier",
]
