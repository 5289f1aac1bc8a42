"""Tests for GenerationConfig and PasswordGenerator."""

from __future__ import annotations

import string

import pytest

from keyforge.config import Config
from keyforge.core.charsets import CharacterClass, build_charset
from keyforge.core.generator import GenerationConfig, PasswordGenerator
from keyforge.core.random_source import SecureRandomSource, WeakRandomSource
from tests.conftest import SequenceRandomSource

ALL = frozenset(CharacterClass)


class TestGenerationConfig:
    def test_from_flags(self):
        cfg = GenerationConfig.from_flags(12, lowercase=True, symbols=True)
        assert cfg.classes == {CharacterClass.LOWERCASE, CharacterClass.SYMBOL}

    def test_from_flags_none_selected(self):
        assert GenerationConfig.from_flags(12).classes == frozenset()

    def test_from_names(self):
        cfg = GenerationConfig.from_names(8, ["uppercase", "numbers"])
        assert cfg.classes == {CharacterClass.UPPERCASE, CharacterClass.DIGIT}

    def test_classes_frozen(self):
        cfg = GenerationConfig(4, [CharacterClass.DIGIT])
        assert isinstance(cfg.classes, frozenset)


class TestGenerate:
    @pytest.mark.parametrize("length", [0, 1, 8, 16, 64])
    def test_correct_length(self, length):
        pw = PasswordGenerator(SecureRandomSource()).generate(GenerationConfig(length, ALL))
        assert len(pw) == length

    def test_only_pool_chars(self):
        pool = build_charset(ALL)
        pw = PasswordGenerator().generate(GenerationConfig(200, ALL))
        assert all(c in pool for c in pw)

    def test_lowercase_only(self):
        cfg = GenerationConfig.from_flags(12, lowercase=True)
        pw = PasswordGenerator().generate(cfg)
        assert len(pw) == 12
        assert all(c in string.ascii_lowercase for c in pw)

    def test_indexes_pool_with_drawn_values(self):
        src = SequenceRandomSource([0, 1, 25, 26])
        cfg = GenerationConfig(4, {CharacterClass.UPPERCASE, CharacterClass.LOWERCASE})
        assert PasswordGenerator(src).generate(cfg) == "ABZa"
        assert src.calls == [52, 52, 52, 52]

    def test_repeats_allowed(self, fixed_source):
        cfg = GenerationConfig(5, {CharacterClass.DIGIT})
        assert PasswordGenerator(fixed_source).generate(cfg) == "00000"

    def test_empty_selection_yields_empty_without_draws(self, fixed_source):
        pw = PasswordGenerator(fixed_source).generate(GenerationConfig(16, frozenset()))
        assert pw == ""
        assert fixed_source.calls == []

    def test_zero_length(self, fixed_source):
        cfg = GenerationConfig(0, {CharacterClass.UPPERCASE})
        assert PasswordGenerator(fixed_source).generate(cfg) == ""
        assert fixed_source.calls == []

    def test_negative_length_raises_before_drawing(self, fixed_source):
        with pytest.raises(ValueError, match="negative"):
            PasswordGenerator(fixed_source).generate(GenerationConfig(-1, ALL))
        assert fixed_source.calls == []

    def test_negative_length_raises_even_without_classes(self, fixed_source):
        with pytest.raises(ValueError):
            PasswordGenerator(fixed_source).generate(GenerationConfig(-5, frozenset()))

    def test_over_hard_maximum_raises(self, fixed_source):
        cfg = GenerationConfig(Config.HARD_MAX_LENGTH + 1, ALL)
        with pytest.raises(ValueError, match="exceeds"):
            PasswordGenerator(fixed_source).generate(cfg)

    def test_non_int_length_raises(self, fixed_source):
        with pytest.raises(TypeError):
            PasswordGenerator(fixed_source).generate(GenerationConfig("8", ALL))


class TestRandomnessFlag:
    def test_secure_flag(self):
        assert PasswordGenerator(SecureRandomSource()).is_cryptographic

    def test_weak_flag(self):
        assert not PasswordGenerator(WeakRandomSource()).is_cryptographic

    def test_default_selects_secure(self):
        assert PasswordGenerator().is_cryptographic
