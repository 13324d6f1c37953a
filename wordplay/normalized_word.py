from enum import IntEnum
from typing import Iterable, Iterator, Self

ALPHABET_SIZE = 26
LETTER_A = ord("A")


class Letter(IntEnum):
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741
    J = 9
    K = 10
    L = 11
    M = 12
    N = 13
    O = 14  # noqa: E741
    P = 15
    Q = 16
    R = 17
    S = 18
    T = 19
    U = 20
    V = 21
    W = 22
    X = 23
    Y = 24
    Z = 25

    @staticmethod
    def all() -> Iterator["Letter"]:
        return iter(Letter)

    def to_char(self) -> str:
        return chr(LETTER_A + self)


ACCENTED = {
    "áÁâÂäÄàÀãÃåÅ": Letter.A,
    "çÇ": Letter.C,
    "éÉêÊëËèÈ": Letter.E,
    "íÍîÎïÏìÌ": Letter.I,
    "ñÑ": Letter.N,
    "óÓôÔöÖòÒõÕ": Letter.O,
    "úÚûÛüÜùÙ": Letter.U,
    "ýÝ": Letter.Y,
}
ACCENT_MAP = {ch: letter for chars, letter in ACCENTED.items() for ch in chars}


def letter_from_char(ch: str) -> Letter | None:
    """Map a character to its canonical letter, or None if it isn't a letter."""
    if "a" <= ch <= "z" or "A" <= ch <= "Z":
        return Letter(ord(ch.upper()) - LETTER_A)
    return ACCENT_MAP.get(ch)


class NormalizedWord:
    """An immutable sequence of canonical letters."""

    __slots__ = ("_letters",)
    _letters: tuple[Letter, ...]

    def __init__(self, letters: Iterable[Letter] = ()):
        self._letters = tuple(letters)

    @staticmethod
    def from_str(word: str) -> "NormalizedWord":
        letters = (letter_from_char(ch) for ch in word)
        return NormalizedWord(letter for letter in letters if letter is not None)

    def appended(self, letter: Letter) -> Self:
        return type(self)((*self._letters, letter))

    def is_palindrome(self):
        return self._letters == self._letters[::-1]

    def __len__(self):
        return len(self._letters)

    def __iter__(self) -> Iterator[Letter]:
        return iter(self._letters)

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return type(self)(self._letters[idx])
        return self._letters[idx]

    def __eq__(self, other):
        if not isinstance(other, NormalizedWord):
            return NotImplemented
        return self._letters == other._letters

    def __lt__(self, other: Self):
        return self._letters < other._letters

    def __le__(self, other: Self):
        return self._letters <= other._letters

    def __gt__(self, other: Self):
        return self._letters > other._letters

    def __ge__(self, other: Self):
        return self._letters >= other._letters

    def __hash__(self):
        return hash(self._letters)

    def __str__(self):
        return "".join(letter.to_char() for letter in self._letters)

    def __repr__(self):
        return f"NormalizedWord({str(self)!r})"
