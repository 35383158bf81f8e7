"""Playfield, scoring and game rules."""

from __future__ import annotations

import random
from collections.abc import Callable

from falltris.blocks import Block, BlockBag

TOTAL_ROWS = 18
TOTAL_COLUMNS = 10
DROP_INTERVAL = 0.5


class Grid:
    """A rows x columns field of cells; 0 is empty, otherwise a block id."""

    def __init__(self, rows: int = TOTAL_ROWS, columns: int = TOTAL_COLUMNS) -> None:
        self.rows = rows
        self.columns = columns
        self.cells: list[list[int]] = []
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self.cells = [[0] * self.columns for _ in range(self.rows)]

    def is_inside(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def is_empty(self, row: int, column: int) -> bool:
        if not self.is_inside(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")
        return self.cells[row][column] == 0

    def is_row_full(self, row: int) -> bool:
        return all(self.cells[row])

    def clear_full_rows(self) -> int:
        """Clear full rows, drop the rows above them, and return how many cleared."""
        completed = 0
        for row in reversed(range(self.rows)):
            if self.is_row_full(row):
                self.cells[row] = [0] * self.columns
                completed += 1
            elif completed:
                self.cells[row + completed] = self.cells[row]
                self.cells[row] = [0] * self.columns
        return completed


class DropTimer:
    """Accumulates elapsed time and fires once per interval."""

    def __init__(self, interval: float = DROP_INTERVAL) -> None:
        self.interval = interval
        self.elapsed = 0.0

    def tick(self, delta_time: float) -> bool:
        self.elapsed += delta_time
        if self.elapsed >= self.interval:
            self.elapsed = 0.0
            return True
        return False


def score_for_rows(count: int) -> int:
    """Points awarded for clearing ``count`` rows at once."""
    if count <= 0:
        return 0
    if count == 1:
        return 100
    if count == 2:
        return 300
    return 500


class Game:
    """The state of one game: grid, falling block, next block and score."""

    def __init__(
        self,
        rng: random.Random | None = None,
        on_clear: Callable[[], None] | None = None,
    ) -> None:
        self.grid = Grid()
        self.bag = BlockBag(rng)
        self.on_clear = on_clear
        self.timer = DropTimer()
        self.score = 0
        self.paused = False
        self.game_over = False
        self.current: Block = self.bag.draw()
        self.next_block: Block = self.bag.draw()

    def restart(self) -> None:
        """Start over with an empty grid and a zero score."""
        self.grid.reset()
        self.game_over = False
        self.score = 0
        self.current = self.bag.draw()
        self.next_block = self.bag.draw()

    def _fits(self, block: Block) -> bool:
        return all(
            self.grid.is_inside(row, column) and self.grid.is_empty(row, column)
            for row, column in block.cell_positions()
        )

    def _shift(self, rows: int, columns: int) -> bool:
        self.current.move(rows, columns)
        if self._fits(self.current):
            return True
        self.current.move(-rows, -columns)
        return False

    def rotate(self) -> bool:
        """Rotate the current block if the new rotation fits."""
        self.current.rotate()
        if self._fits(self.current):
            return True
        self.current.undo_rotation()
        return False

    def move_left(self) -> bool:
        return self._shift(0, -1)

    def move_right(self) -> bool:
        return self._shift(0, 1)

    def step_down(self) -> bool:
        """Move the block down one row; lock it in place if it cannot move."""
        if self._shift(1, 0):
            return True
        self._lock()
        return False

    def soft_drop(self) -> bool:
        """Move down one row, earning a point."""
        self.score += 1
        return self.step_down()

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def _lock(self) -> None:
        for row, column in self.current.cell_positions():
            self.grid.cells[row][column] = self.current.id
        self.current = self.next_block
        if not self._fits(self.current):
            self.game_over = True
        self.next_block = self.bag.draw()
        cleared = self.grid.clear_full_rows()
        if self.on_clear is not None:
            for _ in range(cleared):
                self.on_clear()
        self.score += score_for_rows(cleared)

    def update(self, delta_time: float, down_held: bool = False) -> None:
        """Advance the game by ``delta_time`` seconds."""
        if self.paused:
            return
        if not self.game_over and down_held:
            self.soft_drop()
        if not self.game_over and self.timer.tick(delta_time):
            self.step_down()