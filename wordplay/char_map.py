from typing import Callable, Iterator

from wordplay.normalized_word import ALPHABET_SIZE, Letter


class CharMap[T]:
    """Fixed-size table with one slot per canonical letter."""

    _slots: list[T]

    def __init__(self, default: T | None = None, *, slots: list[T] | None = None):
        if slots is not None:
            assert len(slots) == ALPHABET_SIZE
            self._slots = [*slots]
        else:
            self._slots = [default] * ALPHABET_SIZE

    def get(self, letter: Letter) -> T:
        return self._slots[letter]

    def set(self, letter: Letter, value: T):
        self._slots[letter] = value

    def update(self, letter: Letter, fn: Callable[[T], T]):
        self._slots[letter] = fn(self._slots[letter])

    def items(self) -> Iterator[tuple[Letter, T]]:
        for i, value in enumerate(self._slots):
            yield Letter(i), value

    def values(self) -> Iterator[T]:
        return iter(self._slots)

    def __eq__(self, other):
        if not isinstance(other, CharMap):
            return NotImplemented
        return self._slots == other._slots

    def __repr__(self):
        return f"CharMap({self._slots!r})"
