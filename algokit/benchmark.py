"""Time sorting functions over growing random arrays and write the timings as CSV."""

from __future__ import annotations

import argparse
import csv
import random
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from algokit.sorting import (
    bubble_sort,
    merge_sort,
    quick_sort,
    quick_sort_iterative,
    selection_sort,
)

SortFunction = Callable[[Sequence[int]], list[int]]

_ALGORITHMS: dict[str, SortFunction] = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "quick-iterative": quick_sort_iterative,
}


def random_values(size: int, rng: random.Random) -> list[int]:
    """Return ``size`` random integers from 1 to 1000 inclusive."""
    if size < 0:
        raise ValueError("size must not be negative")
    return [rng.randint(1, 1000) for _ in range(size)]


def time_sort(sort: SortFunction, size: int, repeats: int, rng: random.Random) -> float:
    """Return the mean time in seconds ``sort`` takes on one random array of ``size``."""
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    data = random_values(size, rng)
    start = time.perf_counter()
    for _ in range(repeats):
        sort(data)
    return (time.perf_counter() - start) / repeats


def run_benchmark(
    sort: SortFunction, sizes: Iterable[int], repeats: int, rng: random.Random
) -> list[tuple[int, float]]:
    """Time ``sort`` for each size and return (size, seconds) pairs in order."""
    return [(size, time_sort(sort, size, repeats, rng)) for size in sizes]


def write_csv(results: Iterable[tuple[int, float]], stream: TextIO) -> None:
    """Write (size, seconds) pairs as CSV with an ``Array Size,Time`` header."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(["Array Size", "Time"])
    for size, seconds in results:
        writer.writerow([size, seconds])


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Time a sorting algorithm on random arrays.")
    parser.add_argument("--algorithm", choices=sorted(_ALGORITHMS), default="merge")
    parser.add_argument("--start", type=int, default=1000, help="smallest array size")
    parser.add_argument("--stop", type=int, default=10000, help="largest array size")
    parser.add_argument("--step", type=int, default=1000, help="size increment")
    parser.add_argument("--repeats", type=int, default=10, help="runs per size")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--output", default="sorting_time.csv", help="CSV file to write")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark from the command line."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.step < 1:
        parser.error("--step must be positive")
    if args.repeats < 1:
        parser.error("--repeats must be positive")
    if args.start < 0 or args.stop < args.start:
        parser.error("sizes must satisfy 0 <= start <= stop")

    rng = random.Random(args.seed)
    sort = _ALGORITHMS[args.algorithm]
    results = []
    for size in range(args.start, args.stop + 1, args.step):
        seconds = time_sort(sort, size, args.repeats, rng)
        print(f"({size},{seconds})")
        results.append((size, seconds))

    with open(args.output, "w", newline="", encoding="utf-8") as stream:
        write_csv(results, stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())