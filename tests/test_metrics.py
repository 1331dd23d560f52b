import numpy as np
import pytest

from lifeboard import Board, GLIDER, alive_cells, hamming_distance, pixel_accuracy, population


def test_population_and_alive_cells():
    board = Board(5, 5)
    board.place(GLIDER, 0, 0)
    snap = board.snapshot()
    assert population(snap) == 5
    assert alive_cells(snap) == {(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)}
    assert population(Board(3, 3).snapshot()) == 0
    assert alive_cells(Board(3, 3).snapshot()) == set()


def test_pixel_accuracy_and_hamming_distance():
    a = np.zeros((2, 2), dtype=bool)
    b = np.array([[1, 0], [0, 0]], dtype=np.uint8)
    assert pixel_accuracy(a, a) == 1.0
    assert pixel_accuracy(a, b) == pytest.approx(0.75)
    assert hamming_distance(a, b) == pytest.approx(0.25)


def test_shape_mismatch_raises():
    with pytest.raises(ValueError, match="shapes differ"):
        hamming_distance(np.zeros((2, 2)), np.zeros((2, 3)))
