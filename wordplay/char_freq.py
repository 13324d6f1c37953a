from dataclasses import dataclass
from typing import Iterable, Self

from wordplay.char_map import CharMap
from wordplay.normalized_word import Letter


class CharFreq:
    """Count of each canonical letter in a word."""

    freqs: CharMap[int]

    def __init__(self, freqs: CharMap[int] | None = None):
        self.freqs = freqs if freqs is not None else CharMap(0)

    @staticmethod
    def from_word(word: Iterable[Letter]) -> "CharFreq":
        res = CharFreq()
        for letter in word:
            res.increment(letter)
        return res

    def get(self, letter: Letter) -> int:
        return self.freqs.get(letter)

    def set(self, letter: Letter, count: int):
        assert count >= 0
        self.freqs.set(letter, count)

    def increment(self, letter: Letter):
        self.freqs.update(letter, lambda x: x + 1)

    def total(self):
        return sum(self.freqs.values())

    def compare(self, other: Self) -> "CharFreqComparison":
        """Classify self relative to other: Same, Subset, Superset or Unrelated.

        Bails out with Unrelated as soon as counts move in both directions.
        """
        comp: type[Same | Subset | Superset] = Same
        diff = CharFreq()
        for letter, a in self.freqs.items():
            b = other.get(letter)
            if a == b:
                continue
            if a < b:
                if comp is Superset:
                    return Unrelated()
                comp = Subset
                diff.set(letter, b - a)
            else:
                if comp is Subset:
                    return Unrelated()
                comp = Superset
                diff.set(letter, a - b)

        if comp is Same:
            return Same()
        return comp(diff=diff)

    def __eq__(self, other):
        if not isinstance(other, CharFreq):
            return NotImplemented
        return self.freqs == other.freqs

    # Entries are frozen dataclasses holding a CharFreq; don't mutate one after
    # it has been hashed.
    def __hash__(self):
        return hash(tuple(self.freqs.values()))

    def __repr__(self):
        counts = ", ".join(f"{letter.name}={n}" for letter, n in self.freqs.items() if n)
        return f"CharFreq({counts})"


@dataclass
class Same:
    pass


@dataclass
class Unrelated:
    pass


@dataclass
class Subset:
    diff: CharFreq
    """Letters other has beyond self."""


@dataclass
class Superset:
    diff: CharFreq
    """Letters self has beyond other."""


type CharFreqComparison = Same | Unrelated | Subset | Superset
