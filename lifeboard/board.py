"""Conway's Game of Life on a bounded, double-buffered board."""
import numpy as np
from typing import Tuple

from .patterns import Pattern


class OutOfBounds(ValueError):
    """Raised when a pattern's bounding box does not fit on the board."""

    def __init__(self, pattern: Pattern, row: int, column: int,
                 board_shape: Tuple[int, int]):
        self.pattern = pattern
        self.row = row
        self.column = column
        self.shape = pattern.shape
        self.board_shape = board_shape
        rows, columns = board_shape
        super().__init__(
            f"{pattern!r} does not fit at ({row}, {column}) "
            f"on a {rows} x {columns} board"
        )


def count_neighbors(grid: np.ndarray) -> np.ndarray:
    """Count live Moore neighbors of every cell; cells off the grid are dead."""
    rows, columns = grid.shape
    padded = np.pad(grid.astype(np.uint8), 1, mode='constant')
    neighbors = np.zeros((rows, columns), dtype=int)
    for di in [-1, 0, 1]:
        for dj in [-1, 0, 1]:
            if di == 0 and dj == 0:
                continue
            neighbors += padded[1 + di:1 + di + rows, 1 + dj:1 + dj + columns]
    return neighbors


def render_text(grid: np.ndarray, alive: str = 'x', dead: str = 'o') -> str:
    """Render a grid as text, one line per row."""
    return ''.join(
        ''.join(alive if cell else dead for cell in row) + '\n'
        for row in grid
    )


def next_state(alive: np.ndarray, neighbors: np.ndarray) -> np.ndarray:
    """Apply the survive-on-2-or-3, birth-on-3 rule cell by cell."""
    return (alive & ((neighbors == 2) | (neighbors == 3))) | \
           (~alive & (neighbors == 3))


class Board:
    """
    A fixed-size Game of Life board.

    The board keeps two grids of identical shape. The grid selected by
    ``generation % 2`` holds the current generation; the other one receives
    the next generation on every :meth:`advance` and is never read while it
    is being written.

    Example:
        >>> from lifeboard import GLIDER
        >>> board = Board(10, 9)
        >>> board.place(GLIDER, 0, 1)
        >>> board.place(GLIDER, 5, 3)
        >>> for _ in range(100):
        ...     board.advance()
    """

    def __init__(self, rows: int, columns: int):
        """Create an all-dead board with the given number of rows and columns."""
        if rows <= 0 or columns <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {rows} x {columns}"
            )
        self._rows = rows
        self._columns = columns
        self._grids = (
            np.zeros((rows, columns), dtype=bool),
            np.zeros((rows, columns), dtype=bool),
        )
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of times the board has been advanced."""
        return self._generation

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    def _buffers(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return the (read, write) grids for the current generation."""
        if self.generation % 2 == 0:
            return self._grids[0], self._grids[1]
        return self._grids[1], self._grids[0]

    def fits(self, pattern: Pattern, i: int, j: int) -> bool:
        """Return True if ``pattern`` anchored at ``(i, j)`` lies on the board."""
        height, width = pattern.shape
        end_row = i + height - 1
        end_column = j + width - 1
        return i >= 0 and j >= 0 and end_row < self._rows and end_column < self._columns

    def place(self, pattern: Pattern, i: int, j: int) -> None:
        """
        Stamp ``pattern`` onto the current generation with its top-left corner at (i, j).

        Args:
            pattern: Pattern to place
            i: Row of the top-left corner of the pattern's bounding box
            j: Column of the top-left corner of the pattern's bounding box

        Raises:
            OutOfBounds: If the bounding box would leave the board. Nothing is
                written in that case.
        """
        if not self.fits(pattern, i, j):
            raise OutOfBounds(pattern, i, j, self.shape)

        read, _ = self._buffers()
        height, width = pattern.shape
        # The pattern only ever sees its own bounding box.
        region = read[i:i + height, j:j + width]
        pattern.place(region, 0, 0)

    def advance(self) -> None:
        """Compute the next generation into the write grid and swap roles."""
        read, write = self._buffers()
        neighbors = count_neighbors(read)
        np.copyto(write, next_state(read, neighbors))
        self._generation += 1

    def snapshot(self) -> np.ndarray:
        """Return a read-only copy of the current generation."""
        read, _ = self._buffers()
        view = read.copy()
        view.flags.writeable = False
        return view

    def simulate(self, num_steps: int) -> np.ndarray:
        """Advance ``num_steps`` generations and return every snapshot, current one first."""
        trajectory = np.zeros((num_steps + 1, self._rows, self._columns), dtype=bool)
        trajectory[0] = self.snapshot()
        for t in range(1, num_steps + 1):
            self.advance()
            trajectory[t] = self.snapshot()
        return trajectory

    def __str__(self) -> str:
        read, _ = self._buffers()
        return render_text(read)

    def __repr__(self) -> str:
        return (f"Board(rows={self._rows}, columns={self._columns}, "
                f"generation={self.generation})")
