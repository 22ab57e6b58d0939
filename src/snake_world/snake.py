"""Snake body representation."""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Snake:
    """A snake stored as a list of flattened cell indices.

    The head is ``body[0]``; the tail is ``body[-1]``. The body is laid out
    to the right of the spawn cell and the snake starts heading down.
    """

    def __init__(self, spawn_index: int, length: int = 3) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.body: list[int] = [spawn_index + i for i in range(length)]
        self.direction = Direction.DOWN

    @property
    def head(self) -> int:
        """Return the head cell index."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def occupies(self, index: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return index in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": list(self.body),
            "direction": self.direction.name,
            "length": len(self.body),
        }
