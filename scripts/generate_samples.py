"""
Render one sample per catalog pattern for visual review
"""
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from lifeboard import Board, PATTERN_CATEGORIES
from lifeboard.visualization import (
    visualize_state,
    visualize_trajectory,
    create_animation
)


def generate_samples(output_dir, grid_size=(12, 12), num_steps=24):
    """
    Render the initial state, a trajectory strip and a GIF for every pattern.

    Args:
        output_dir: Directory that receives the figures
        grid_size: Board dimensions (rows, columns)
        num_steps: Number of generations to simulate

    Returns:
        List of pattern names that were rendered
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    rendered = []

    for category_name, patterns in PATTERN_CATEGORIES.items():
        print(f"\nCategory: {category_name}")
        print("-" * 60)

        for pattern_name, pattern in patterns.items():
            print(f"  Processing {pattern_name}...")

            rows, columns = grid_size
            board = Board(rows, columns)
            ph, pw = pattern.shape
            # Spaceships start in the corner so they have room to travel.
            if category_name == 'spaceships':
                board.place(pattern, 1, 1)
            else:
                board.place(pattern, (rows - ph) // 2, (columns - pw) // 2)

            trajectory = board.simulate(num_steps)

            visualize_state(
                trajectory[0],
                title=f"{pattern_name.upper()} (t=0)",
                save_path=output_dir / f"{pattern_name}_initial.png"
            )
            visualize_trajectory(
                trajectory,
                pattern_name=pattern_name.upper(),
                save_path=output_dir / f"{pattern_name}_trajectory.png",
                num_frames_to_show=8
            )
            create_animation(
                trajectory,
                pattern_name=pattern_name.upper(),
                save_path=output_dir / f"{pattern_name}_animation.gif",
                fps=5
            )

            print(f"    Generated: initial, trajectory, animation")
            rendered.append(pattern_name)

    return rendered


def main():
    """Generate and visualize one sample per pattern."""

    project_root = Path(__file__).parent.parent
    output_dir = project_root / "figures" / "samples"

    print("Generating samples for each pattern...")
    print("=" * 60)

    generate_samples(output_dir)

    print("\n" + "=" * 60)
    print(f"All samples saved to: {output_dir.absolute()}")
    print("=" * 60)
    print("\nGenerated files:")
    print("  - *_initial.png: Initial state of each pattern")
    print("  - *_trajectory.png: Evolution over 8 frames")
    print("  - *_animation.gif: Animated evolution")


if __name__ == "__main__":
    main()
