"""Conway's Game of Life on a bounded, double-buffered board"""

from .board import Board, OutOfBounds, count_neighbors, next_state, render_text
from .patterns import (
    Pattern,
    StampPattern,
    Blinker,
    Glider,
    RandomField,
    BLINKER,
    GLIDER,
    PATTERN_CATEGORIES,
    get_pattern,
    get_all_patterns
)
from .metrics import population, alive_cells, pixel_accuracy, hamming_distance
from .visualization import (
    visualize_state,
    visualize_trajectory,
    create_animation
)

__version__ = '0.1.0'

__all__ = [
    'Board',
    'OutOfBounds',
    'count_neighbors',
    'next_state',
    'render_text',
    'Pattern',
    'StampPattern',
    'Blinker',
    'Glider',
    'RandomField',
    'BLINKER',
    'GLIDER',
    'PATTERN_CATEGORIES',
    'get_pattern',
    'get_all_patterns',
    'population',
    'alive_cells',
    'pixel_accuracy',
    'hamming_distance',
    'visualize_state',
    'visualize_trajectory',
    'create_animation',
]
