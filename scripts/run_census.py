import argparse
import csv
import multiprocessing as mp
import os
import sys
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path

import yaml

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from crossflip.evaluation.census import census  # noqa: E402
from crossflip.evaluation.metrics import matches_rank, solvable_fraction  # noqa: E402

mp.freeze_support()


def make_jobs(sizes, rules):
    """One job per (board size, rule) pair."""
    for size in sizes:
        rows, cols = (int(size[0]), int(size[1]))
        for rule in rules:
            yield {"rows": rows, "cols": cols, "rule": rule}


def _run_job(job):
    start_time = time.perf_counter()
    row = census(job["rows"], job["cols"], job["rule"])
    row["time_ms"] = (time.perf_counter() - start_time) * 1000
    row["solvable_fraction"] = solvable_fraction(row)
    row["matches_rank"] = matches_rank(row)
    return row


def run_pool(jobs, writer, workers):
    """Run jobs in parallel and write results as they complete."""
    ctx = mp.get_context("spawn")
    total_jobs = len(jobs)
    done = 0
    start_time = time.time()

    with ProcessPoolExecutor(max_workers=workers, mp_context=ctx) as ex:
        futures = [ex.submit(_run_job, j) for j in jobs]
        for fut in as_completed(futures):
            try:
                row = fut.result()
            except Exception:
                import traceback

                print("\n[ERROR] Worker failed:")
                traceback.print_exc()
                raise
            writer.writerow(row)
            done += 1
            elapsed = time.time() - start_time
            print(
                f"\r[progress] {done}/{total_jobs} jobs ({done / total_jobs:>6.1%}) | "
                f"elapsed: {int(elapsed // 60)}m {int(elapsed % 60)}s",
                end="",
                flush=True,
            )
            if done == total_jobs:
                print()


def main():
    n_cpus = os.cpu_count() or 1
    default_workers = max(n_cpus - 1, 1)

    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--config",
        default=str(ROOT / "experiments" / "configs" / "census.yaml"),
    )
    ap.add_argument("--out", default=None, help="Output CSV path")
    ap.add_argument(
        "--workers", type=int, default=default_workers, help="Number of workers"
    )
    args = ap.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)["census"]

    sizes = list(cfg["sizes"])
    rules = list(cfg.get("rules", ["exclude-pivot"]))
    out_dir = Path(cfg.get("output_dir", "results/census"))
    out_dir.mkdir(parents=True, exist_ok=True)
    out_csv = args.out or str(out_dir / "census.csv")

    jobs = list(make_jobs(sizes, rules))
    fieldnames = [
        "rows",
        "cols",
        "rule",
        "rank",
        "feasible",
        "infeasible",
        "solvable_fraction",
        "matches_rank",
        "time_ms",
    ]

    print(f"\nStarting {len(jobs):,} census jobs with {args.workers} workers...\n")

    start_time = time.time()
    with open(out_csv, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        run_pool(jobs, writer, workers=args.workers)

    elapsed = time.time() - start_time
    print(f"\nDone in {int(elapsed/60)}m {int(elapsed%60)}s")
    print(f"Output: {out_csv}\n")


if __name__ == "__main__":
    main()
