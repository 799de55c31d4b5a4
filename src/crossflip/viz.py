import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from .board import BoardState
from .rules import flip_mask


def _outline(ax, cells, color, linewidth=2):
    for r, c in cells:
        ax.add_patch(
            Rectangle(
                (c - 0.5, r - 0.5),
                1,
                1,
                edgecolor=color,
                facecolor="none",
                linewidth=linewidth,
            )
        )


def _grid_axes(ax, rows, cols):
    ax.set_xticks(range(cols))
    ax.set_yticks(range(rows))
    ax.set_xlabel("col")
    ax.set_ylabel("row")


def show_board(
    board: BoardState,
    presses=None,
    ax=None,
    pressed_color="red",
    cmap="Greys_r",
    title=None,
):
    """
    Draw the board (on = light) and outline the cells of a press plan.

    Parameters
    ----------
    board : BoardState
    presses : iterable of (row, col), optional
        Activations to outline, e.g. ``solution.activations()``.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(3.5, 3.5))
    ax.imshow(board.state, cmap=cmap, vmin=0, vmax=1)
    for r in range(board.rows):
        for c in range(board.cols):
            ax.text(
                c,
                r,
                str(int(board.state[r, c])),
                ha="center",
                va="center",
                color="black" if board.state[r, c] else "white",
            )
    if presses is not None:
        _outline(ax, presses, pressed_color)
    _grid_axes(ax, board.rows, board.cols)
    ax.set_title(title or f"{board.count_on()}/{board.rows * board.cols} on")
    return ax


def show_activation(rows, cols, r, c, rule=None, ax=None, cmap="viridis"):
    """Heatmap of the cells flipped by pressing (r, c); the pivot is outlined."""
    if ax is None:
        _, ax = plt.subplots(figsize=(3.5, 3.5))
    mask = flip_mask(rows, cols, r, c, rule).astype(float)
    im = ax.imshow(mask, cmap=cmap, vmin=0.0, vmax=1.0)
    _outline(ax, [(r, c)], "red")
    _grid_axes(ax, rows, cols)
    ax.set_title(f"press ({r}, {c})")
    plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label="flip")
    return ax


def show_solution(board: BoardState, solution, figsize=(7.2, 3.5)):
    """Side-by-side: the board with its plan outlined, and the press grid."""
    _, axes = plt.subplots(1, 2, figsize=figsize, constrained_layout=True)
    show_board(board, solution.activations(), ax=axes[0], title="Board")
    grid = np.asarray(solution.grid(), dtype=float)
    axes[1].imshow(grid, cmap="Reds", vmin=0.0, vmax=1.0)
    _grid_axes(axes[1], board.rows, board.cols)
    axes[1].set_title(f"{solution.num_presses} presses")
    return axes
