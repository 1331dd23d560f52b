"""Predefined Game of Life patterns."""
import numpy as np
from typing import Optional, Tuple, Union


class Pattern:
    """
    A stamp that can be written onto a grid.

    Subclasses must only change cells inside the ``shape`` region that starts
    at the anchor passed to :meth:`place`.
    """

    name = 'pattern'

    @property
    def shape(self) -> Tuple[int, int]:
        """Return the (height, width) of the region the pattern writes to."""
        raise NotImplementedError

    def place(self, grid: np.ndarray, i: int, j: int) -> None:
        """Write the pattern onto ``grid`` with its top-left corner at (i, j)."""
        raise NotImplementedError


class StampPattern(Pattern):
    """Fixed pattern described by a boolean mask of the cells it brings to life."""

    def __init__(self, name: str, cells: np.ndarray):
        self.name = name
        self._cells = np.array(cells, dtype=bool)
        self._cells.flags.writeable = False

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        height, width = self._cells.shape
        return height, width

    def place(self, grid: np.ndarray, i: int, j: int) -> None:
        height, width = self.shape
        region = grid[i:i + height, j:j + width]
        # Dead cells of the mask leave whatever is already on the grid.
        region[self._cells] = True

    def __eq__(self, other):
        if not isinstance(other, StampPattern):
            return NotImplemented
        return self.name == other.name and np.array_equal(self._cells, other._cells)

    def __hash__(self):
        return hash((self.name, self._cells.tobytes()))

    def __repr__(self):
        if type(self) is StampPattern:
            return f"StampPattern({self.name!r})"
        return f"{type(self).__name__}()"


class Blinker(StampPattern):
    """Period 2 oscillator, placed in its vertical phase."""

    def __init__(self):
        super().__init__('blinker', [
            [0, 1, 0],
            [0, 1, 0],
            [0, 1, 0]
        ])


class Glider(StampPattern):
    """Period 4 spaceship travelling down and to the right."""

    def __init__(self):
        super().__init__('glider', [
            [0, 1, 0],
            [0, 0, 1],
            [1, 1, 1]
        ])


class RandomField(Pattern):
    """
    Rectangle of independent random cells.

    Every cell of the region is overwritten, alive with probability
    ``density``. With a ``seed`` each placement writes the same field.

    Args:
        height: Number of rows in the region
        width: Number of columns in the region
        density: Probability of a cell being alive
        seed: Seed for ``np.random.default_rng``, an int or a
            ``np.random.SeedSequence``; None draws a fresh field
            on every placement
    """

    name = 'random'

    def __init__(self, height: int, width: int, density: float = 0.5,
                 seed: Optional[Union[int, np.random.SeedSequence]] = None):
        if height <= 0 or width <= 0:
            raise ValueError(f"RandomField size must be positive, got {height} x {width}")
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"density must be within [0, 1], got {density}")
        self._height = height
        self._width = width
        self._density = density
        self._seed = seed

    @property
    def shape(self) -> Tuple[int, int]:
        return self._height, self._width

    @property
    def density(self) -> float:
        return self._density

    @property
    def seed(self):
        return self._seed

    def place(self, grid: np.ndarray, i: int, j: int) -> None:
        rng = np.random.default_rng(self._seed)
        field = rng.random((self._height, self._width)) < self._density
        grid[i:i + self._height, j:j + self._width] = field

    def __repr__(self):
        return (f"RandomField(height={self._height}, width={self._width}, "
                f"density={self._density}, seed={self._seed})")


BLINKER = Blinker()
GLIDER = Glider()


PATTERN_CATEGORIES = {
    'oscillators': {
        'blinker': BLINKER
    },
    'spaceships': {
        'glider': GLIDER
    }
}


def get_pattern(name: str) -> Pattern:
    """Return the catalog pattern with the given name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name]

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat.keys()]
    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available}")


def get_all_patterns():
    """Return all available patterns organized by category."""
    return PATTERN_CATEGORIES
