from collections import deque
from dataclasses import dataclass, field, replace
from typing import Iterable, Self

from wordplay.char_map import CharMap
from wordplay.char_match import ANY, CharMatch, char_match_from_char
from wordplay.normalized_word import NormalizedWord


class Trie[T]:
    """26-ary prefix tree. Each node holds zero or more payloads ("terminals")."""

    _children: CharMap[Self | None]
    _terminals: list[T]

    def __init__(self):
        self._children = CharMap(None)
        self._terminals = []

    def _get_or_create(self, letter) -> Self:
        child = self._children.get(letter)
        if child is None:
            child = type(self)()
            self._children.set(letter, child)
        return child

    def add(self, word: NormalizedWord, value: T):
        node = self
        for letter in word:
            node = node._get_or_create(letter)
        node._terminals.append(value)

    def add_string(self, word: str, value: T):
        self.add(NormalizedWord.from_str(word), value)

    def extend(self, pairs: Iterable[tuple[str | NormalizedWord, T]]):
        for word, value in pairs:
            if isinstance(word, str):
                self.add_string(word, value)
            else:
                self.add(word, value)

    @classmethod
    def create_from_pairs(cls, pairs: Iterable[tuple[str | NormalizedWord, T]]) -> Self:
        trie = cls()
        trie.extend(pairs)
        return trie

    def get(self, word: NormalizedWord) -> list[T] | None:
        """Terminals at exactly this spelling, or None if no node exists there."""
        node = self
        for letter in word:
            node = node._children.get(letter)
            if node is None:
                return None
        return node._terminals

    def size(self):
        return len(self._terminals) + sum(c.size() for c in self._children.values() if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children.values() if c)

    def iter(self) -> "TrieIter[T]":
        return TrieIter(self, TrieSearch())

    def iter_range(self, min_length: int, max_length: int) -> "TrieIter[T]":
        search = TrieSearch(TriePrefix.any_with_length(min_length), max_length)
        return TrieIter(self, search)

    def iter_search(self, search: "TrieSearch") -> "TrieIter[T]":
        return TrieIter(self, search)

    def __iter__(self):
        return self.iter()


@dataclass(frozen=True)
class TriePrefix:
    """Per-position letter constraints. Past the end, any letter matches."""

    chars: tuple[CharMatch, ...] = ()

    @staticmethod
    def any_with_length(length: int) -> "TriePrefix":
        return TriePrefix((ANY,) * length)

    @staticmethod
    def from_pattern(pattern: str) -> "TriePrefix":
        return TriePrefix(tuple(char_match_from_char(ch) for ch in pattern))

    def __len__(self):
        return len(self.chars)

    def get_char_restriction(self, depth: int) -> CharMatch:
        if depth < len(self.chars):
            return self.chars[depth]
        return ANY


@dataclass(frozen=True)
class TrieSearch:
    prefix: TriePrefix = field(default_factory=TriePrefix)
    max_depth: int | None = None
    """Deepest word length to visit (inclusive). None means unbounded."""

    @staticmethod
    def from_prefix(pattern: str) -> "TrieSearch":
        return TrieSearch(TriePrefix.from_pattern(pattern))

    @staticmethod
    def exactly(pattern: str) -> "TrieSearch":
        search = TrieSearch.from_prefix(pattern)
        return search.with_max(len(search.prefix))

    def with_max(self, max_depth: int | None) -> Self:
        return replace(self, max_depth=max_depth)

    def below_max(self, depth: int):
        return self.max_depth is None or depth < self.max_depth

    def get_char_restriction(self, depth: int) -> CharMatch:
        return self.prefix.get_char_restriction(depth)


class TrieIter[T]:
    """Lazy depth-first enumeration of (word, payload) pairs matching a TrieSearch.

    Words come out in ascending letter order; payloads sharing a spelling come
    out in insertion order, before any longer word. Each call to __next__ does
    a bounded amount of work, so stopping early is cheap.
    """

    _search: TrieSearch
    _nodes: list[tuple[NormalizedWord, Trie[T]]]
    _terminals: deque[tuple[NormalizedWord, T]]

    def __init__(self, root: Trie[T], search: TrieSearch):
        self._search = search
        self._nodes = [(NormalizedWord(), root)]
        self._terminals = deque()

    def _visit(self, word: NormalizedWord, node: Trie[T]):
        depth = len(word)

        # Words shorter than the prefix can't match it.
        if len(self._search.prefix) <= depth:
            self._terminals.extend((word, t) for t in node._terminals)

        if self._search.below_max(depth):
            restriction = self._search.get_char_restriction(depth)
            children = [
                (word.appended(letter), child)
                for letter, child in node._children.items()
                if child is not None and restriction.matches(letter)
            ]
            self._nodes.extend(reversed(children))

    def __iter__(self):
        return self

    def __next__(self) -> tuple[NormalizedWord, T]:
        while not self._terminals:
            if not self._nodes:
                raise StopIteration
            self._visit(*self._nodes.pop())
        return self._terminals.popleft()
