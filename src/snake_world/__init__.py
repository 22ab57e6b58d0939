"""Snake World — deterministic rules engine for a toroidal snake game."""

from snake_world.config import WorldConfig
from snake_world.grid import CellType, Grid
from snake_world.reward import (
    NumpyRandomSource,
    RandomSource,
    RewardPlacementError,
    RewardSpawner,
)
from snake_world.snake import Direction, Snake
from snake_world.world import GameStatus, World, WorldConfigError

__all__ = [
    "CellType",
    "Direction",
    "GameStatus",
    "Grid",
    "NumpyRandomSource",
    "RandomSource",
    "RewardPlacementError",
    "RewardSpawner",
    "Snake",
    "World",
    "WorldConfig",
    "WorldConfigError",
]
