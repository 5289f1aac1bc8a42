"""GeneratorSession: generate -> score -> record pipeline with observers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from keyforge.core import strength
from keyforge.core.generator import GenerationConfig, PasswordGenerator
from keyforge.core.history import HistoryBuffer
from keyforge.core.random_source import RandomSource
from keyforge.core.strength import StrengthTier

logger = logging.getLogger("keyforge.core.session")


@dataclass(frozen=True)
class GenerationResult:
    """Everything a UI collaborator needs after one generation."""

    password: str
    score: int
    tier: StrengthTier
    history: List[str]
    is_cryptographic: bool

    @property
    def is_empty(self) -> bool:
        return not self.password


Observer = Callable[[GenerationResult], None]


class GeneratorSession:
    """One widget instance: owns its history and random source."""

    def __init__(
        self,
        history: Optional[HistoryBuffer] = None,
        random_source: Optional[RandomSource] = None,
    ):
        self.history = history if history is not None else HistoryBuffer()
        self.generator = PasswordGenerator(random_source)
        self._observers: List[Observer] = []

        if not self.generator.is_cryptographic:
            logger.warning("Session running with a non-cryptographic random source")

    @property
    def is_cryptographic(self) -> bool:
        return self.generator.is_cryptographic

    # ------------------------------------------------------------------
    #  Observers
    # ------------------------------------------------------------------
    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register *observer*; returns a callable that unsubscribes it."""
        self._observers.append(observer)

        def _unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def _notify(self, result: GenerationResult) -> None:
        for observer in list(self._observers):
            try:
                observer(result)
            except Exception:
                logger.exception("Observer %r failed", observer)

    # ------------------------------------------------------------------
    #  Pipeline
    # ------------------------------------------------------------------
    def generate(self, config: GenerationConfig) -> GenerationResult:
        # Raises on invalid length before any draw or history change
        password = self.generator.generate(config)
        value = strength.score(password)

        if password:
            self.history.record(password)
            logger.debug(
                "Generated %d chars from %d classes, score %d",
                len(password),
                len(config.classes),
                value,
            )
        else:
            logger.debug("Nothing generated (length=%d)", config.length)

        result = GenerationResult(
            password=password,
            score=value,
            tier=strength.tier(value),
            history=self.history.entries(),
            is_cryptographic=self.is_cryptographic,
        )
        self._notify(result)
        return result

    def close(self) -> None:
        self.history.clear()
        self._observers.clear()
