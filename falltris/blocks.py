"""Tetromino shapes, their rotations and the shuffled bag they are drawn from."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass, field

Cell = tuple[int, int]


@dataclass
class Block:
    """A tetromino: an id (also its colour index) and its rotation states.

    Each rotation is a tuple of (row, column) cells relative to the block's
    offsets.
    """

    id: int
    rotations: tuple[tuple[Cell, ...], ...]
    rotation_state: int = 0
    row_offset: int = 0
    column_offset: int = 0

    def cell_positions(self) -> list[Cell]:
        """Return the grid cells the block covers in its current rotation."""
        return [
            (row + self.row_offset, column + self.column_offset)
            for row, column in self.rotations[self.rotation_state]
        ]

    def move(self, rows: int, columns: int) -> None:
        """Shift the block by the given number of rows and columns."""
        self.row_offset += rows
        self.column_offset += columns

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state + 1) % len(self.rotations)

    def undo_rotation(self) -> None:
        """Go back to the previous rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state - 1) % len(self.rotations)

    def copy(self) -> Block:
        """Return an independent copy of the block."""
        return dataclasses.replace(self)


def _block(block_id: int, rotations, rows: int, columns: int) -> Block:
    return Block(
        id=block_id,
        rotations=tuple(tuple(rotation) for rotation in rotations),
        row_offset=rows,
        column_offset=columns,
    )


def standard_blocks() -> list[Block]:
    """Return the seven tetrominoes, each placed at its spawn position."""
    return [
        _block(1, [
            [(0, 2), (1, 0), (1, 1), (1, 2)],
            [(0, 1), (1, 1), (2, 1), (2, 2)],
            [(1, 0), (1, 1), (1, 2), (2, 0)],
            [(0, 0), (0, 1), (1, 1), (2, 1)],
        ], 0, 3),
        _block(2, [
            [(0, 0), (1, 0), (1, 1), (1, 2)],
            [(0, 1), (0, 2), (1, 1), (2, 1)],
            [(1, 0), (1, 1), (1, 2), (2, 2)],
            [(0, 1), (1, 1), (2, 0), (2, 1)],
        ], 0, 3),
        _block(3, [
            [(1, 0), (1, 1), (1, 2), (1, 3)],
            [(0, 2), (1, 2), (2, 2), (3, 2)],
            [(2, 0), (2, 1), (2, 2), (2, 3)],
            [(0, 1), (1, 1), (2, 1), (3, 1)],
        ], -1, 3),
        _block(4, [
            [(0, 0), (0, 1), (1, 0), (1, 1)],
        ], 0, 4),
        _block(5, [
            [(0, 1), (0, 2), (1, 0), (1, 1)],
            [(0, 1), (1, 1), (1, 2), (2, 2)],
            [(1, 1), (1, 2), (2, 0), (2, 1)],
            [(0, 0), (1, 0), (1, 1), (2, 1)],
        ], 0, 3),
        _block(6, [
            [(0, 1), (1, 0), (1, 1), (1, 2)],
            [(0, 1), (1, 1), (1, 2), (2, 1)],
            [(1, 0), (1, 1), (1, 2), (2, 1)],
            [(0, 1), (1, 0), (1, 1), (2, 1)],
        ], 0, 3),
        _block(7, [
            [(0, 0), (0, 1), (1, 1), (1, 2)],
            [(0, 2), (1, 1), (1, 2), (2, 1)],
            [(1, 0), (1, 1), (2, 1), (2, 2)],
            [(0, 1), (1, 0), (1, 1), (2, 0)],
        ], 0, 3),
    ]


@dataclass
class BlockBag:
    """Hands out every tetromino once, in random order, before refilling."""

    rng: random.Random = field(default_factory=random.Random)
    _remaining: list[Block] = field(default_factory=standard_blocks, init=False, repr=False)

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._remaining = standard_blocks()

    def draw(self) -> Block:
        """Remove a random block from the bag and return a fresh copy of it."""
        if not self._remaining:
            self._remaining = standard_blocks()
        index = self.rng.randrange(len(self._remaining))
        return self._remaining.pop(index).copy()