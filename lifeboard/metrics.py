"""Summary metrics over board snapshots."""
import numpy as np
from typing import Set, Tuple


def _check_shapes(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape != b.shape:
        raise ValueError(f"Grid shapes differ: {a.shape} vs {b.shape}")


def population(grid: np.ndarray) -> int:
    """Return the number of alive cells."""
    return int(np.count_nonzero(grid))


def alive_cells(grid: np.ndarray) -> Set[Tuple[int, int]]:
    """Return the set of (row, column) positions of alive cells."""
    return {(int(i), int(j)) for i, j in np.argwhere(grid)}


def pixel_accuracy(a: np.ndarray, b: np.ndarray) -> float:
    """Return the fraction of cells on which two grids agree."""
    _check_shapes(a, b)
    return float(np.mean(np.asarray(a, dtype=bool) == np.asarray(b, dtype=bool)))


def hamming_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Return normalized Hamming distance (1 - accuracy)."""
    return 1.0 - pixel_accuracy(a, b)
