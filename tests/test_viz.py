import matplotlib.pyplot as plt

from crossflip.board import BoardState
from crossflip.solver import solve
from crossflip.viz import show_activation, show_board, show_solution


def test_show_board_outlines_presses():
    board = BoardState.create(2, 2, 0)
    moves = solve(board).activations()
    ax = show_board(board, moves)
    assert len(ax.patches) == len(moves)
    assert ax.get_title() == "0/4 on"
    plt.close("all")


def test_show_activation():
    ax = show_activation(3, 4, 1, 2)
    assert ax.get_title() == "press (1, 2)"
    assert len(ax.patches) == 1
    plt.close("all")


def test_show_solution(sample_board):
    axes = show_solution(sample_board, solve(sample_board, "cross"))
    assert len(axes) == 2
    plt.close("all")
