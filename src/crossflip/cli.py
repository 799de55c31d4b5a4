from __future__ import annotations

import argparse
import sys

import numpy as np

from .config import GameConfig, load_config
from .errors import InfeasibleError
from .generator import shuffle
from .matrixio import read_board, serialize_board
from .player import apply_solution
from .rules import DEFAULT_RULE, RULES
from .solver import solve


def _read_text(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def cmd_solve(args) -> int:
    board = read_board(_read_text(args.file))
    solution = solve(board, args.rule)
    print(
        f"board {board.rows}x{board.cols}, rule {solution.rule}, "
        f"rank {solution.rank}, free {solution.free_variables}"
    )
    moves = solution.activations()
    print(f"solvable: {len(moves)} presses")
    for r, c in moves:
        print(f"{r} {c}")
    if args.apply:
        apply_solution(board, solution)
        print(f"\nafter {board.moves} moves:")
        print(serialize_board(board))
    return 0


def cmd_shuffle(args) -> int:
    cfg = load_config(args.config) if args.config else GameConfig()
    overrides = {
        k: v
        for k, v in (
            ("rows", args.rows),
            ("cols", args.cols),
            ("rule", args.rule),
            ("shuffle_steps", args.steps),
            ("seed", args.seed),
        )
        if v is not None
    }
    if overrides:
        cfg = GameConfig.from_dict({**cfg.__dict__, **overrides})
    rng = np.random.default_rng(cfg.seed)
    board = shuffle(cfg.rows, cfg.cols, cfg.rule, rng=rng, steps=cfg.shuffle_steps)
    print(serialize_board(board))
    return 0


def cmd_plot(args) -> int:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from .viz import show_board, show_solution

    board = read_board(_read_text(args.file))
    solution = solve(board, args.rule)
    if solution.feasible:
        show_solution(board, solution)
    else:
        show_board(board, title="no solution")
    plt.savefig(args.out, dpi=120)
    plt.close("all")
    print(f"Saved {args.out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="crossflip",
        description="Row/column toggle puzzle: solve, shuffle and plot boards.",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("solve", help="Solve a 0/1 matrix read from FILE or stdin")
    p.add_argument("file", nargs="?", default=None)
    p.add_argument("--rule", choices=RULES, default=DEFAULT_RULE)
    p.add_argument(
        "--apply", action="store_true", help="Replay the moves and print the board"
    )
    p.set_defaults(func=cmd_solve)

    p = sub.add_parser("shuffle", help="Print a randomly scrambled board")
    p.add_argument("--config", default=None, help="YAML config with a `game` key")
    p.add_argument("--rows", type=int, default=None)
    p.add_argument("--cols", type=int, default=None)
    p.add_argument("--rule", choices=RULES, default=None)
    p.add_argument("--steps", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.set_defaults(func=cmd_shuffle)

    p = sub.add_parser("plot", help="Render a board and its solution to PNG")
    p.add_argument("file", nargs="?", default=None)
    p.add_argument("--rule", choices=RULES, default=DEFAULT_RULE)
    p.add_argument("--out", default="board.png")
    p.set_defaults(func=cmd_plot)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (OSError, ValueError, InfeasibleError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
