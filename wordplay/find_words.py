#!/usr/bin/env python
"""Interactive word finder.

Commands, one per line:

  f p ?ana??, sort alph    words matching a pattern (? or . = any letter)
  f a tab                  anagrams of "tab"
  f a- tabs, len 3         three-letter words made from letters of "tabs"
  f a+ tab, sort len-      words containing all the letters of "tab"
  q                        quit

Clauses after "f" are comma-separated; unknown clauses are ignored. Each clause
is split on spaces, so a space cannot stand for a letter in a pattern here.
"""

import argparse
import fileinput
import itertools
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from wordplay.args import add_standard_args, get_dictionary_from_args
from wordplay.dictionary import (
    All,
    AnagramOf,
    DictIterItem,
    DictSearch,
    Dictionary,
    SubanagramOf,
    SuperanagramOf,
    WordPredicate,
    WordQuery,
)
from wordplay.trie import TrieSearch

DEFAULT_LIMIT = 5
MAX_WORD_LENGTH = 64


class SortAspect(Enum):
    LENGTH = "len"
    ALPHABETICAL = "alph"


@dataclass(frozen=True)
class Sort:
    aspect: SortAspect
    descending: bool = False

    @staticmethod
    def parse(s: str) -> "Sort | None":
        descending = s.endswith("-")
        try:
            aspect = SortAspect(s.removesuffix("-"))
        except ValueError:
            return None
        return Sort(aspect, descending)

    def key(self, item: DictIterItem):
        if self.aspect == SortAspect.LENGTH:
            return len(item.normalized)
        return item.normalized

    def apply(self, items: Iterable[DictIterItem]) -> list[DictIterItem]:
        return sorted(items, key=self.key, reverse=self.descending)


@dataclass(frozen=True)
class Find:
    search: DictSearch
    sort: Sort | None = None


@dataclass(frozen=True)
class Quit:
    pass


type Command = Find | Quit

ANAGRAM_CLAUSES = {
    "a": AnagramOf,
    "a+": SuperanagramOf,
    "a-": SubanagramOf,
}


def parse_find(clauses: str) -> Find | None:
    pattern = ""
    length = None
    predicates: list[WordPredicate] = []
    sort = None
    for clause in clauses.split(","):
        match clause.strip().split(" "):
            case ["p", p]:
                pattern = p
            case ["len", n] if n.isdecimal():
                length = int(n)
            case ["len", _]:
                return None
            case [("a" | "a+" | "a-") as op, word]:
                query = WordQuery.from_str(word)
                if not query.word:
                    return None
                predicates.append(ANAGRAM_CLAUSES[op](query))
            case ["sort", s]:
                sort = Sort.parse(s) or sort
            case _:
                pass

    if length is not None:
        if length > MAX_WORD_LENGTH:
            return None
        pattern = pattern.ljust(length, "?")
    try:
        trie_search = TrieSearch.from_prefix(pattern).with_max(length)
    except ValueError:
        return None
    return Find(DictSearch(trie_search, All(tuple(predicates))), sort)


def parse_line(line: str) -> Command | None:
    if line in ("q", "quit"):
        return Quit()
    if line.startswith("f "):
        return parse_find(line[2:])
    return None


def run_find(d: Dictionary, command: Find, limit: int) -> Iterator[DictIterItem]:
    results = d.iter_search(command.search)
    if command.sort:
        results = iter(command.sort.apply(results))
    return itertools.islice(results, limit)


def command_loop(d: Dictionary, lines: Iterable[str], limit=DEFAULT_LIMIT):
    for line in lines:
        command = parse_line(line.strip())
        match command:
            case Quit():
                print("Bye!")
                return
            case Find():
                print("Finding...")
                for item in run_find(d, command, limit):
                    print(item.original)
            case None:
                print("Unrecognised command")


def main():
    parser = argparse.ArgumentParser(description="Find words by pattern and anagram")
    add_standard_args(parser)
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help="Maximum number of results to show for each command.",
    )
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing commands, or stdin"
    )
    args = parser.parse_args()

    d = get_dictionary_from_args(args)
    if sys.stdin.isatty() and not args.files:
        sys.stderr.write("Enter commands (q to quit)\n")
    command_loop(d, fileinput.input(files=args.files), args.limit)


if __name__ == "__main__":
    main()
