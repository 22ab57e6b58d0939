"""Reward placement by rejection sampling over an injected random source."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


class RewardPlacementError(RuntimeError):
    """Raised when the random source returns an index outside its range."""


class RandomSource(Protocol):
    """Capability that draws a uniform integer in ``[0, max_exclusive)``."""

    def draw(self, max_exclusive: int) -> int: ...


class NumpyRandomSource:
    """Seedable :class:`RandomSource` backed by a NumPy ``Generator``."""

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def draw(self, max_exclusive: int) -> int:
        return int(self.rng.integers(max_exclusive))


class RewardSpawner:
    """Places the reward on a free cell of a board with *size* cells.

    Draws are rejected while they land on an occupied cell. After
    *max_attempts* rejected draws the spawner picks directly from the free
    cells, so placement always terminates.
    """

    def __init__(
        self,
        size: int,
        source: RandomSource,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.size = size
        self.source = source
        self.max_attempts = max_attempts

    def spawn(self, occupied: Iterable[int]) -> int | None:
        """Return a free cell index, or ``None`` if the board is full."""
        taken = set(occupied)
        if len(taken) >= self.size:
            logger.debug("Board is full, no reward placed.")
            return None

        for attempt in range(1, self.max_attempts + 1):
            cell = self._draw(self.size)
            if cell not in taken:
                logger.debug("Reward placed at %d after %d draw(s).", cell, attempt)
                return cell

        free = [i for i in range(self.size) if i not in taken]
        cell = free[self._draw(len(free))]
        logger.warning(
            "Reward sampling exhausted %d draws; picked free cell %d directly.",
            self.max_attempts, cell,
        )
        return cell

    def _draw(self, max_exclusive: int) -> int:
        value = self.source.draw(max_exclusive)
        if not 0 <= value < max_exclusive:
            raise RewardPlacementError(
                f"Random source returned {value}, expected [0, {max_exclusive}).",
            )
        return value
