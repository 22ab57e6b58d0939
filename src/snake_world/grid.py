"""Flattened square board geometry."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

from snake_world.snake import Direction


class CellType(enum.IntEnum):
    """Integer codes stored in an occupancy snapshot."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    REWARD = 3


class Grid:
    """Square, toroidal board addressed by row-major cell indices.

    A cell index ``i`` lives at ``row = i // width`` and ``col = i % width``.
    Moving off any edge re-enters on the opposite edge in the same row or
    column.
    """

    def __init__(self, width: int) -> None:
        if width < 1:
            raise ValueError("Grid width must be at least 1.")
        self.width = width
        self.size = width * width

    def contains(self, index: int) -> bool:
        """Check whether a cell index lies on the board."""
        return 0 <= index < self.size

    def to_coords(self, index: int) -> tuple[int, int]:
        """Convert a cell index to ``(row, col)``."""
        return divmod(index, self.width)

    def to_index(self, row: int, col: int) -> int:
        """Convert ``(row, col)`` to a cell index, wrapping both axes."""
        return (row % self.width) * self.width + col % self.width

    def next_cell(self, index: int, direction: Direction) -> int:
        """Return the neighbouring cell of *index* in *direction*."""
        w = self.width
        row = index // w
        if direction is Direction.RIGHT:
            return row * w + (index + 1) % w
        if direction is Direction.LEFT:
            # Python's modulo keeps column 0 wrapping to the last column.
            return row * w + (index - 1) % w
        if direction is Direction.UP:
            return (index - w) % self.size
        return (index + w) % self.size

    def occupancy(
        self,
        snake_cells: Iterable[int],
        reward_cell: int | None = None,
    ) -> np.ndarray:
        """Return a ``(width, width)`` array of :class:`CellType` codes.

        The first entry of *snake_cells* is drawn as the head.
        """
        flat = np.full(self.size, CellType.EMPTY, dtype=np.int8)
        cells = list(snake_cells)
        if cells:
            flat[cells] = CellType.SNAKE
            flat[cells[0]] = CellType.HEAD
        if reward_cell is not None:
            flat[reward_cell] = CellType.REWARD
        return flat.reshape(self.width, self.width)

    def to_dict(
        self,
        snake_cells: Iterable[int] = (),
        reward_cell: int | None = None,
    ) -> dict:
        """Serialize board geometry and an occupancy snapshot."""
        return {
            "width": self.width,
            "size": self.size,
            "cells": self.occupancy(snake_cells, reward_cell).tolist(),
        }
