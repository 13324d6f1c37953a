"""Anagram numbers: a word's letter multiset encoded as a product of primes.

Two words are anagrams iff their numbers are equal, and one word's letters are
a subset of another's iff its number divides the other's.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Self

from wordplay.char_map import CharMap
from wordplay.normalized_word import Letter

ANAGRAM_BITS = 128
MAX_ANAGRAM_NUMBER = (1 << ANAGRAM_BITS) - 1

# More common letters get smaller primes, which lengthens the longest word that fits.
PRIMES = CharMap(
    slots=[
        5,  # A
        71,  # B
        41,  # C
        29,  # D
        2,  # E
        47,  # F
        61,  # G
        23,  # H
        11,  # I
        97,  # J
        79,  # K
        31,  # L
        43,  # M
        13,  # N
        7,  # O
        67,  # P
        89,  # Q
        19,  # R
        17,  # S
        3,  # T
        37,  # U
        73,  # V
        59,  # W
        83,  # X
        53,  # Y
        101,  # Z
    ]
)


class AnagramNumberOverflow(OverflowError):
    """The word's prime product doesn't fit in ANAGRAM_BITS."""


class AnagramComparison(Enum):
    EXACT = "exact"
    UNRELATED = "unrelated"
    SUBSET = "subset"
    SUPERSET = "superset"


@dataclass(frozen=True, order=True)
class AnagramNumber:
    value: int

    @staticmethod
    def from_word(word: Iterable[Letter]) -> "AnagramNumber":
        x = 1
        for letter in word:
            x *= PRIMES.get(letter)
            if x > MAX_ANAGRAM_NUMBER:
                raise AnagramNumberOverflow(
                    f"anagram number exceeds {ANAGRAM_BITS} bits"
                )
        return AnagramNumber(x)

    @staticmethod
    def try_from_word(word: Iterable[Letter]) -> "AnagramNumber | None":
        try:
            return AnagramNumber.from_word(word)
        except AnagramNumberOverflow:
            return None

    def compare(self, other: Self) -> AnagramComparison:
        """Classify self relative to other (same convention as CharFreq.compare)."""
        a, b = self.value, other.value
        if a == b:
            return AnagramComparison.EXACT
        if a < b and b % a == 0:
            return AnagramComparison.SUBSET
        if a > b and a % b == 0:
            return AnagramComparison.SUPERSET
        return AnagramComparison.UNRELATED
