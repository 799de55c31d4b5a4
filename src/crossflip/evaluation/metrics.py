from __future__ import annotations


def solvable_fraction(row: dict) -> float:
    total = row["feasible"] + row["infeasible"]
    return row["feasible"] / total if total else 0.0


def matches_rank(row: dict) -> int:
    # feasible boards must number exactly 2^rank
    return int(row["feasible"] == 2 ** row["rank"])
