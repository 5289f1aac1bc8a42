"""Random sources: a CSPRNG-backed strong path and a flagged weak fallback."""

from __future__ import annotations

import logging
import random
import secrets
from typing import Optional

logger = logging.getLogger("keyforge.core.random")

_UINT32_BITS = 32


def _check_bound(max_value: int) -> None:
    if isinstance(max_value, bool) or not isinstance(max_value, int):
        raise TypeError(f"Bound must be an int, got {type(max_value).__name__}")
    if max_value <= 0:
        raise ValueError(f"Bound must be positive, got {max_value}")


# ============================================================================
#  Strategies
# ============================================================================
class RandomSource:
    """Base strategy: uniform integers in ``[0, max_value)``."""

    is_cryptographic = False

    def next_bounded_int(self, max_value: int) -> int:
        raise NotImplementedError


class SecureRandomSource(RandomSource):
    """32-bit draws from the OS CSPRNG reduced modulo the bound.

    The modulo reduction is slightly biased whenever ``max_value`` does not
    divide 2**32. For pools under 100 characters the skew is below 1e-7 and
    is accepted in exchange for constant-time draws.
    """

    is_cryptographic = True

    def next_bounded_int(self, max_value: int) -> int:
        _check_bound(max_value)
        return secrets.randbits(_UINT32_BITS) % max_value


class WeakRandomSource(RandomSource):
    """Mersenne Twister fallback. NOT suitable for real credentials."""

    is_cryptographic = False

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_bounded_int(self, max_value: int) -> int:
        _check_bound(max_value)
        # random() < 1.0, so the product never reaches max_value
        return int(self._rng.random() * max_value)


# ============================================================================
#  Selection
# ============================================================================
def select_random_source() -> RandomSource:
    """Return the strong source if the OS CSPRNG works, else the weak one."""
    try:
        secrets.randbits(_UINT32_BITS)
    except (NotImplementedError, OSError) as exc:
        logger.warning(
            "Secure random source unavailable (%s); using non-cryptographic fallback",
            exc,
        )
        return WeakRandomSource()
    return SecureRandomSource()
