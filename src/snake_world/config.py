"""World configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from snake_world.reward import DEFAULT_MAX_ATTEMPTS, NumpyRandomSource

if TYPE_CHECKING:
    from snake_world.reward import RandomSource
    from snake_world.world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorldConfig:
    """Parameters for building a :class:`~snake_world.world.World`.

    ``spawn_index=None`` picks a random spawn that fits inside one row.
    """

    width: int = 8
    spawn_index: int | None = None
    snake_length: int = 3
    seed: int | None = None
    max_reward_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        from snake_world.world import WorldConfigError

        if self.width < 1:
            raise WorldConfigError("width must be at least 1.")
        if not 1 <= self.snake_length <= self.width:
            raise WorldConfigError(
                "snake_length must be between 1 and width.",
            )
        if self.max_reward_attempts < 1:
            raise WorldConfigError("max_reward_attempts must be at least 1.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> WorldConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)

    def build_world(self, random_source: RandomSource | None = None) -> World:
        """Construct a world, drawing the spawn cell if none is set."""
        from snake_world.world import World

        source = (
            random_source if random_source is not None
            else NumpyRandomSource(self.seed)
        )
        spawn_index = self.spawn_index
        if spawn_index is None:
            row = source.draw(self.width)
            col = source.draw(self.width - self.snake_length + 1)
            spawn_index = row * self.width + col
            logger.debug("Random spawn at cell %d.", spawn_index)

        return World(
            self.width,
            spawn_index,
            random_source=source,
            snake_length=self.snake_length,
            max_reward_attempts=self.max_reward_attempts,
        )
