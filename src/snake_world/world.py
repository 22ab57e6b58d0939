"""Tick-based world state machine for a single snake."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from snake_world.grid import Grid
from snake_world.reward import (
    DEFAULT_MAX_ATTEMPTS,
    NumpyRandomSource,
    RandomSource,
    RewardSpawner,
)
from snake_world.snake import Direction, Snake

if TYPE_CHECKING:
    from snake_world.config import WorldConfig

logger = logging.getLogger(__name__)


class WorldConfigError(ValueError):
    """Raised when a world cannot be built from the given parameters."""


class GameStatus(enum.Enum):
    """Game lifecycle; values are the display strings shown to players."""

    NOT_STARTED = "No status"
    PLAYING = "Playing"
    WON = "Won"
    LOST = "Lost"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.LOST)


class World:
    """Single-snake world on a square toroidal board.

    The world owns the grid geometry, the snake, the reward cell, the
    score and the game status. The host calls :meth:`start_game` once,
    :meth:`change_direction` on input and :meth:`step` once per tick.
    """

    def __init__(
        self,
        width: int,
        spawn_index: int,
        *,
        random_source: RandomSource | None = None,
        seed: int | None = None,
        snake_length: int = 3,
        max_reward_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if width < 1:
            raise WorldConfigError("width must be at least 1.")
        if snake_length < 1:
            raise WorldConfigError("snake_length must be at least 1.")
        if not 0 <= spawn_index < width * width:
            raise WorldConfigError(
                f"spawn_index {spawn_index} is outside the board "
                f"[0, {width * width}).",
            )
        if spawn_index % width + snake_length > width:
            raise WorldConfigError(
                f"A snake of length {snake_length} spawned at {spawn_index} "
                f"does not fit inside its row.",
            )

        self.grid = Grid(width)
        self.snake = Snake(spawn_index, snake_length)
        self.random_source = (
            random_source if random_source is not None
            else NumpyRandomSource(seed)
        )
        self.reward_spawner = RewardSpawner(
            self.grid.size, self.random_source,
            max_attempts=max_reward_attempts,
        )
        self.reward_cell = self.reward_spawner.spawn(self.snake.body)

        self.points = 0
        self.tick = 0
        self.status = GameStatus.NOT_STARTED
        self._next_cell: int | None = None

    @classmethod
    def from_config(
        cls,
        config: WorldConfig,
        random_source: RandomSource | None = None,
    ) -> World:
        """Build a world described by *config*."""
        return config.build_world(random_source)

    # --- queries ---

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def snake_head_index(self) -> int:
        return self.snake.head

    @property
    def snake_length(self) -> int:
        return len(self.snake)

    @property
    def snake_cells(self) -> tuple[int, ...]:
        """Snapshot of the body, head first."""
        return tuple(self.snake.body)

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    @property
    def status_text(self) -> str:
        return self.status.value

    # --- commands ---

    def start_game(self) -> None:
        """Begin play. Has no effect once the game has finished."""
        if self.status is GameStatus.NOT_STARTED:
            self.status = GameStatus.PLAYING
            logger.info("Game started on a %dx%d board.", self.width, self.width)

    def change_direction(self, direction: Direction) -> None:
        """Queue a heading change for the next tick, ignoring reversals."""
        next_cell = self.grid.next_cell(self.snake.head, direction)
        body = self.snake.body
        if len(body) > 1 and body[1] == next_cell:
            logger.debug("Ignored reversal towards %s.", direction.name)
            return
        self._next_cell = next_cell
        self.snake.direction = direction

    def step(self) -> dict:
        """Advance the game by one tick.

        Returns the full game state as a serializable dict.
        """
        if self.status is not GameStatus.PLAYING:
            return self.get_state()

        body = self.snake.body
        # Tail to head so each segment reads its predecessor before it moves.
        for i in range(len(body) - 1, 0, -1):
            body[i] = body[i - 1]

        if self._next_cell is not None:
            body[0] = self._next_cell
            self._next_cell = None
        else:
            body[0] = self.grid.next_cell(body[0], self.snake.direction)
        self.tick += 1

        head = body[0]
        if head in body[1:]:
            self.status = GameStatus.LOST
            logger.info(
                "Snake collided with itself at tick %d with %d points.",
                self.tick, self.points,
            )
            return self.get_state()

        if self.reward_cell == head:
            if len(body) < self.size:
                self.points += 1
                self.reward_cell = self.reward_spawner.spawn(body)
                body.append(head)
            else:
                self.reward_cell = None
                self.status = GameStatus.WON
                logger.info(
                    "Board filled at tick %d with %d points.",
                    self.tick, self.points,
                )

        return self.get_state()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "points": self.points,
            "status": self.status_text,
            "width": self.width,
            "size": self.size,
            "snake": self.snake.to_dict(),
            "reward_cell": self.reward_cell,
            "grid": self.grid.to_dict(self.snake.body, self.reward_cell),
        }
