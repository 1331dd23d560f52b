"""
Rendering tools for board snapshots
"""
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter
from typing import Optional

from .board import render_text

__all__ = [
    "render_text",
    "visualize_state",
    "visualize_trajectory",
    "create_animation",
]


def _draw_grid_lines(ax, shape) -> None:
    h, w = shape
    ax.set_xticks(np.arange(-0.5, w, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, h, 1), minor=True)
    ax.grid(which='minor', color='gray', linestyle='-', linewidth=0.5, alpha=0.3)
    ax.tick_params(which='minor', length=0)


def visualize_state(state: np.ndarray,
                   title: str = "Game of Life",
                   save_path: Optional[str] = None,
                   figsize: tuple = (8, 8),
                   show_grid: bool = True) -> None:
    """
    Visualize a single board snapshot.

    Args:
        state: Snapshot array (H x W)
        title: Plot title
        save_path: Path to save figure, None for display only
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    state = np.asarray(state, dtype=np.uint8)
    fig, ax = plt.subplots(figsize=figsize)

    ax.imshow(state, cmap='binary', interpolation='nearest', vmin=0, vmax=1)
    ax.set_title(title, fontsize=16, pad=10)

    ax.set_xticks([])
    ax.set_yticks([])
    if show_grid:
        _draw_grid_lines(ax, state.shape)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"Saved to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def visualize_trajectory(trajectory: np.ndarray,
                        pattern_name: str = "Pattern",
                        save_path: Optional[str] = None,
                        figsize: tuple = (16, 4),
                        num_frames_to_show: int = 8,
                        show_grid: bool = True) -> None:
    """
    Visualize evenly spaced frames from a trajectory.

    Args:
        trajectory: Trajectory array (T, H, W), e.g. from ``Board.simulate``
        pattern_name: Pattern name for title
        save_path: Path to save figure
        figsize: Figure size
        num_frames_to_show: Number of frames to display
        show_grid: Whether to show grid lines
    """
    trajectory = np.asarray(trajectory, dtype=np.uint8)
    num_steps = len(trajectory)
    num_frames_to_show = min(num_frames_to_show, num_steps)
    indices = np.linspace(0, num_steps - 1, num_frames_to_show, dtype=int)

    fig, axes = plt.subplots(1, num_frames_to_show, figsize=figsize)
    axes = np.atleast_1d(axes)

    for ax, idx in zip(axes, indices):
        ax.imshow(trajectory[idx], cmap='binary', interpolation='nearest', vmin=0, vmax=1)
        ax.set_title(f"t={idx}", fontsize=12)

        ax.set_xticks([])
        ax.set_yticks([])
        if show_grid:
            _draw_grid_lines(ax, trajectory[idx].shape)

    fig.suptitle(f"{pattern_name} Evolution", fontsize=16)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"Saved trajectory to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def create_animation(trajectory: np.ndarray,
                    pattern_name: str = "Pattern",
                    save_path: Optional[str] = None,
                    fps: int = 10,
                    figsize: tuple = (8, 8),
                    show_grid: bool = True) -> None:
    """
    Create animated GIF from trajectory.

    Args:
        trajectory: Trajectory array (T, H, W)
        pattern_name: Pattern name for title
        save_path: Path to save GIF file
        fps: Frames per second
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    trajectory = np.asarray(trajectory, dtype=np.uint8)
    fig, ax = plt.subplots(figsize=figsize)

    im = ax.imshow(trajectory[0], cmap='binary', interpolation='nearest',
                   vmin=0, vmax=1, animated=True)

    ax.set_xticks([])
    ax.set_yticks([])
    if show_grid:
        _draw_grid_lines(ax, trajectory[0].shape)
    title = ax.set_title(f"{pattern_name} - Step 0", fontsize=16)

    def update(frame):
        im.set_array(trajectory[frame])
        title.set_text(f"{pattern_name} - Step {frame}")
        return [im, title]

    anim = FuncAnimation(fig, update, frames=len(trajectory),
                        interval=1000 // fps, blit=False, repeat=True)

    if save_path:
        writer = PillowWriter(fps=fps)
        anim.save(save_path, writer=writer)
        print(f"Saved animation to {save_path}")
    else:
        plt.show()

    plt.close(fig)
