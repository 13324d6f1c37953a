#!/usr/bin/env python
"""Print the normalized (A-Z) spelling of each word in a word list."""

import fileinput

from wordplay.normalized_word import NormalizedWord


def normalize_word(line: str) -> str | None:
    word = NormalizedWord.from_str(line.strip())
    if not word:
        return None
    return str(word)


def main():
    for line in fileinput.input():
        word = normalize_word(line)
        if word:
            print(word)


if __name__ == "__main__":
    main()
