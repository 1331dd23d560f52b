"""
Build a board, stamp patterns onto it and run it for a number of generations
"""
import sys
import argparse
from pathlib import Path
import numpy as np
from tqdm import tqdm

sys.path.append(str(Path(__file__).parent.parent))

from lifeboard import Board, RandomField, get_pattern, population
from lifeboard.visualization import render_text, create_animation


def parse_placement(value):
    """Parse ``NAME@ROW,COL`` into (name, row, column)."""
    try:
        name, position = value.split('@')
        row, column = (int(x) for x in position.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected NAME@ROW,COL, got '{value}'"
        )
    return name, row, column


def parse_random_region(value):
    """Parse ``ROW,COL,HEIGHT,WIDTH`` into a tuple of four ints."""
    try:
        row, column, height, width = (int(x) for x in value.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected ROW,COL,HEIGHT,WIDTH, got '{value}'"
        )
    return row, column, height, width


def build_parser():
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life on a bounded board")
    parser.add_argument('--rows', type=int, default=9,
                       help='Number of rows')
    parser.add_argument('--columns', type=int, default=9,
                       help='Number of columns')
    parser.add_argument('--generations', type=int, default=5,
                       help='Number of generations to run')
    parser.add_argument('--pattern', type=parse_placement, action='append', default=[],
                       metavar='NAME@ROW,COL',
                       help='Place a catalog pattern (repeatable)')
    parser.add_argument('--random', type=parse_random_region, action='append', default=[],
                       metavar='ROW,COL,HEIGHT,WIDTH',
                       help="Fill a region with random cells (repeatable); write negative "
                            "anchors as --random=-1,0,3,3")
    parser.add_argument('--density', type=float, default=0.3,
                       help='Alive probability for --random regions')
    parser.add_argument('--seed', type=int, default=None,
                       help="Base seed for --random regions; each region gets its own "
                            "child seed")
    parser.add_argument('--gif', type=str, default=None,
                       help='Write an animation to this path instead of printing')
    parser.add_argument('--quiet', action='store_true',
                       help='Only print the final generation')
    return parser


def setup_board(args):
    """Create the board and stamp every requested pattern onto it."""
    board = Board(args.rows, args.columns)

    for name, row, column in args.pattern:
        board.place(get_pattern(name), row, column)

    if args.seed is None:
        seeds = [None] * len(args.random)
    else:
        seeds = np.random.SeedSequence(args.seed).spawn(len(args.random))

    for (row, column, height, width), seed in zip(args.random, seeds):
        field = RandomField(height, width, density=args.density, seed=seed)
        board.place(field, row, column)

    return board


def main(argv=None):
    """Run the simulation and return a process exit status."""
    args = build_parser().parse_args(argv)

    if not args.pattern and not args.random:
        args.pattern = [('glider', 1, 2)]

    try:
        board = setup_board(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.gif:
        print(f"Simulating {args.generations} generations on a {args.rows} x {args.columns} board...")
        frames = [board.snapshot()]
        for _ in tqdm(range(args.generations), desc="Generations"):
            board.advance()
            frames.append(board.snapshot())

        output_path = Path(args.gif)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        create_animation(frames, pattern_name="Board", save_path=output_path)
        print(f"Final population: {population(board.snapshot())}")
        return 0

    if not args.quiet:
        print(render_text(board.snapshot()))
    for _ in range(args.generations):
        board.advance()
        if not args.quiet:
            print(render_text(board.snapshot()))

    if args.quiet:
        print(render_text(board.snapshot()))
        print(f"Generation {board.generation}, population {population(board.snapshot())}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
