"""Tests for RandomSource strategies."""

from __future__ import annotations

import logging
from collections import Counter

import pytest

from keyforge.core import random_source
from keyforge.core.random_source import (
    SecureRandomSource,
    WeakRandomSource,
    select_random_source,
)


class TestSecureRandomSource:
    def test_in_range(self):
        src = SecureRandomSource()
        for bound in (1, 2, 10, 26, 88):
            for _ in range(200):
                assert 0 <= src.next_bounded_int(bound) < bound

    def test_bound_of_one_is_always_zero(self):
        src = SecureRandomSource()
        assert all(src.next_bounded_int(1) == 0 for _ in range(50))

    def test_flagged_cryptographic(self):
        assert SecureRandomSource().is_cryptographic is True

    @pytest.mark.parametrize("bad", [0, -1, -100])
    def test_non_positive_bound_raises(self, bad):
        with pytest.raises(ValueError, match="positive"):
            SecureRandomSource().next_bounded_int(bad)

    def test_non_int_bound_raises(self):
        with pytest.raises(TypeError):
            SecureRandomSource().next_bounded_int(2.5)

    def test_roughly_uniform(self):
        # Modulo reduction is slightly biased; only a loose check is meaningful
        src = SecureRandomSource()
        bound, draws = 10, 20_000
        counts = Counter(src.next_bounded_int(bound) for _ in range(draws))
        expected = draws / bound
        assert set(counts) == set(range(bound))
        for value in range(bound):
            assert abs(counts[value] - expected) < expected * 0.2


class TestWeakRandomSource:
    def test_in_range(self):
        src = WeakRandomSource(seed=42)
        for bound in (1, 7, 88):
            for _ in range(200):
                assert 0 <= src.next_bounded_int(bound) < bound

    def test_flagged_non_cryptographic(self):
        assert WeakRandomSource().is_cryptographic is False

    def test_seed_is_reproducible(self):
        a = WeakRandomSource(seed=7)
        b = WeakRandomSource(seed=7)
        assert [a.next_bounded_int(88) for _ in range(20)] == [
            b.next_bounded_int(88) for _ in range(20)
        ]

    def test_zero_bound_raises(self):
        with pytest.raises(ValueError):
            WeakRandomSource().next_bounded_int(0)


class TestSelection:
    def test_prefers_secure_source(self):
        assert isinstance(select_random_source(), SecureRandomSource)

    def test_falls_back_when_csprng_missing(self, monkeypatch, caplog):
        def _broken(_bits):
            raise NotImplementedError("no os.urandom")

        monkeypatch.setattr(random_source.secrets, "randbits", _broken)
        with caplog.at_level(logging.WARNING, logger="keyforge.core.random"):
            src = select_random_source()
        assert isinstance(src, WeakRandomSource)
        assert src.is_cryptographic is False
        assert "non-cryptographic" in caplog.text
