"""Benchmark of dictionary inserts and updates with string and integer keys."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from typing import Sequence

DEFAULT_ELEMENT_ITERATION_COUNTS: tuple[tuple[int, int], ...] = (
    (1000, 100000),
    (10000, 10000),
    (100000, 1000),
    (1000000, 100),
)


@dataclass(frozen=True)
class HashMapTimings:
    """Timings of one benchmark run and the resulting map sizes."""

    element_count: int
    iteration_count: int
    string_insert_us: int
    string_update_ms: int
    int_insert_us: int
    int_update_ms: int
    string_map_size: int
    int_map_size: int


def _random_i64(rng: random.Random) -> int:
    return rng.getrandbits(64) - (1 << 63)


def run_benchmark(
    element_count: int, iteration_count: int, rng: random.Random | None = None
) -> HashMapTimings:
    """Insert random 64-bit values under string and integer keys, then update them repeatedly."""
    if element_count < 0:
        raise ValueError(f"element_count must not be negative: {element_count}.")
    if iteration_count < 0:
        raise ValueError(f"iteration_count must not be negative: {iteration_count}.")
    rng = rng if rng is not None else random.Random()

    values = [_random_i64(rng) for _ in range(element_count)]
    string_keys = [str(value) for value in values]

    string_map: dict[str, int] = {}
    start = time.perf_counter_ns()
    for key, value in zip(string_keys, values):
        string_map[key] = value
    string_insert_us = (time.perf_counter_ns() - start) // 1_000

    start = time.perf_counter_ns()
    for _ in range(iteration_count):
        for key in string_keys:
            string_map[key] += 1
    string_update_ms = (time.perf_counter_ns() - start) // 1_000_000

    int_map: dict[int, int] = {}
    start = time.perf_counter_ns()
    for value in values:
        int_map[value] = value
    int_insert_us = (time.perf_counter_ns() - start) // 1_000

    start = time.perf_counter_ns()
    for _ in range(iteration_count):
        for key in values:
            int_map[key] += 1
    int_update_ms = (time.perf_counter_ns() - start) // 1_000_000

    return HashMapTimings(
        element_count=element_count,
        iteration_count=iteration_count,
        string_insert_us=string_insert_us,
        string_update_ms=string_update_ms,
        int_insert_us=int_insert_us,
        int_update_ms=int_update_ms,
        string_map_size=len(string_map),
        int_map_size=len(int_map),
    )


def _report(timings: HashMapTimings) -> None:
    count = timings.element_count
    iterations = timings.iteration_count
    print(
        f"Took {timings.string_insert_us} microseconds to insert {count} "
        f"elements into string_map."
    )
    print(
        f"Took {timings.string_update_ms} ms to read {count} elements from "
        f"string_map for {iterations} iterations."
    )
    print(
        f"Took {timings.int_insert_us} microseconds to insert {count} "
        f"elements into int_map."
    )
    print(
        f"Took {timings.int_update_ms} ms to read {count} elements from "
        f"int_map for {iterations} iterations."
    )
    print()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark for each (elements, iterations) pair and print the timings."""
    parser = argparse.ArgumentParser(
        description="Time dictionary inserts and updates with string and integer keys."
    )
    parser.add_argument(
        "--pair",
        nargs=2,
        type=int,
        action="append",
        metavar=("ELEMENTS", "ITERATIONS"),
        help="element count and iteration count; may be repeated",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    pairs = [tuple(pair) for pair in args.pair] if args.pair else list(
        DEFAULT_ELEMENT_ITERATION_COUNTS
    )
    rng = random.Random(args.seed)
    for element_count, iteration_count in pairs:
        print(
            f"Commencing test of {element_count} elements for "
            f"{iteration_count} iterations!"
        )
        _report(run_benchmark(element_count, iteration_count, rng))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())