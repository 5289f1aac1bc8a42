"""Shared test fixtures."""

from __future__ import annotations

from typing import Iterable, List

import pytest

from keyforge.core.history import HistoryBuffer
from keyforge.core.random_source import RandomSource
from keyforge.core.session import GeneratorSession


class SequenceRandomSource(RandomSource):
    """Deterministic double: replays *values* (mod the bound) in a cycle."""

    def __init__(self, values: Iterable[int] = (0,), cryptographic: bool = True):
        self._values = list(values)
        self._pos = 0
        self.calls: List[int] = []
        self.is_cryptographic = cryptographic

    def next_bounded_int(self, max_value: int) -> int:
        self.calls.append(max_value)
        value = self._values[self._pos % len(self._values)]
        self._pos += 1
        return value % max_value


@pytest.fixture
def fixed_source():
    """Random source that always returns index 0."""
    return SequenceRandomSource([0])


@pytest.fixture
def history():
    return HistoryBuffer()


@pytest.fixture
def session(history):
    """A session over a counting random source (0, 1, 2, ...)."""
    return GeneratorSession(history=history, random_source=SequenceRandomSource(range(1000)))
