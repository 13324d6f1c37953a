#!/usr/bin/env python
"""I/O-free performance test of dictionary lookups and searches.

$ python -m wordplay.perf --dictionary wordlists/enable.txt 1000
"""

import argparse
import time
from typing import Callable

from tqdm import tqdm

from wordplay.args import add_standard_args, get_dictionary_from_args
from wordplay.dictionary import DictSearch, Dictionary


def find_banana(d: Dictionary):
    return len(d.find("banana") or [])


def count(search: DictSearch) -> Callable[[Dictionary], int]:
    return lambda d: sum(1 for _ in d.iter_search(search))


BENCHMARKS: dict[str, Callable[[Dictionary], int]] = {
    "find banana": find_banana,
    "search bana??": count(DictSearch.from_pattern("bana??")),
    "search ban prefix": count(DictSearch.from_prefix("ban")),
    "search ?an prefix": count(DictSearch.from_prefix("?an")),
    "anagrams of least": count(DictSearch.anagram_of("least")),
}


def make_parser():
    parser = argparse.ArgumentParser(
        prog="Dictionary perf test",
        description="Measure the speed of lookups and searches, free from I/O.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "--only",
        type=str,
        choices=[*BENCHMARKS],
        help="Run only the benchmark with this name.",
    )
    parser.add_argument(
        "num_reps",
        type=int,
        help="Number of times to run each benchmark",
        default=100,
        nargs="?",
    )
    return parser


def main():
    args = make_parser().parse_args()

    d = get_dictionary_from_args(args)
    benchmarks = BENCHMARKS
    if args.only:
        benchmarks = {args.only: BENCHMARKS[args.only]}

    for name, fn in benchmarks.items():
        start_s = time.time()
        n = 0
        for _ in tqdm(range(args.num_reps), desc=name, leave=False):
            n = fn(d)
        end_s = time.time()

        elapsed_s = end_s - start_s
        pace = args.num_reps / elapsed_s
        print(f"{name}: {n=}")
        print(f"  {elapsed_s:.02f}s, {pace:.02f} reps/sec")


if __name__ == "__main__":
    main()
