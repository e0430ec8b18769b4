from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Sequence
from typing import Generic, Protocol, TypeVar

from homehub.config import ScanningConfig
from homehub.models.base import Entity, utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)
T_co = TypeVar("T_co", covariant=True)


class Scanner(Protocol[T_co]):
    """Discovery transport used by a registry.

    Implementations return the candidates found in one pass and raise
    ``ScanError`` (or ``OSError``) when the transport fails.
    """

    async def discover(self) -> Sequence[T_co]: ...


class SimulatedScanner(Generic[T]):
    """Scanner that waits a while and then reports a fixed batch of candidates."""

    def __init__(
        self,
        candidates: Sequence[T],
        delay: float = 3.0,
        jitter: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self._candidates = list(candidates)
        self._delay = delay
        self._jitter = jitter
        self._rng = rng or random.Random()

    @classmethod
    def from_config(
        cls, candidates: Sequence[T], config: ScanningConfig
    ) -> SimulatedScanner[T]:
        return cls(candidates, delay=config.delay, jitter=config.jitter)

    def _pause(self) -> float:
        if self._jitter <= 0:
            return self._delay
        return self._delay + self._rng.uniform(0, self._jitter)

    async def discover(self) -> list[T]:
        pause = self._pause()
        logger.debug("Simulated discovery sleeping %.2fs", pause)
        await asyncio.sleep(pause)

        now = utcnow()
        found = [
            candidate.model_copy(update={"last_seen": now}, deep=True)
            for candidate in self._candidates
        ]
        logger.debug("Simulated discovery produced %d candidates", len(found))
        return found
