"""Standard command-line arguments shared across tools."""

import argparse
import sys
import time

from wordplay.dictionary import Dictionary


def add_standard_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/enable.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while loading the dictionary.",
    )


def get_dictionary_from_args(args: argparse.Namespace) -> Dictionary:
    start_s = time.time()
    d = Dictionary.create_from_file(args.dictionary, progress=args.progress)
    elapsed_s = time.time() - start_s
    sys.stderr.write(f"Loaded {d.size()} words in {elapsed_s:.2f}s\n")
    return d
