"""Word list indexed by a Trie, with anagram-aware searches."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from tqdm import tqdm

from wordplay.anagram_number import AnagramComparison, AnagramNumber
from wordplay.char_freq import CharFreq, Same, Subset, Superset
from wordplay.normalized_word import NormalizedWord
from wordplay.trie import Trie, TriePrefix, TrieSearch


@dataclass(frozen=True)
class DictEntry:
    original: str
    char_freq: CharFreq
    anag_num: AnagramNumber | None
    """None if the word is too long to encode."""


@dataclass(frozen=True)
class DictIterItem:
    normalized: NormalizedWord
    entry: DictEntry

    @property
    def original(self):
        return self.entry.original

    @property
    def char_freq(self):
        return self.entry.char_freq

    @property
    def anag_num(self):
        return self.entry.anag_num


@dataclass(frozen=True)
class WordQuery:
    """A word that search results are compared against."""

    word: NormalizedWord
    char_freq: CharFreq
    anag_num: AnagramNumber | None

    @staticmethod
    def from_str(word: str) -> "WordQuery":
        nw = NormalizedWord.from_str(word)
        return WordQuery(nw, CharFreq.from_word(nw), AnagramNumber.try_from_word(nw))

    def relation_of(self, item: DictIterItem) -> AnagramComparison:
        """How the item's letters relate to this query's letters."""
        if item.anag_num is not None and self.anag_num is not None:
            return item.anag_num.compare(self.anag_num)
        match item.char_freq.compare(self.char_freq):
            case Same():
                return AnagramComparison.EXACT
            case Subset():
                return AnagramComparison.SUBSET
            case Superset():
                return AnagramComparison.SUPERSET
            case _:
                return AnagramComparison.UNRELATED


@dataclass(frozen=True)
class AnagramOf:
    query: WordQuery

    def matches(self, item: DictIterItem):
        return self.query.relation_of(item) == AnagramComparison.EXACT


@dataclass(frozen=True)
class SubanagramOf:
    query: WordQuery

    def matches(self, item: DictIterItem):
        return self.query.relation_of(item) == AnagramComparison.SUBSET


@dataclass(frozen=True)
class SuperanagramOf:
    query: WordQuery

    def matches(self, item: DictIterItem):
        return self.query.relation_of(item) == AnagramComparison.SUPERSET


@dataclass(frozen=True)
class All:
    predicates: tuple["WordPredicate", ...]

    def matches(self, item: DictIterItem):
        return all(p.matches(item) for p in self.predicates)


@dataclass(frozen=True)
class AnyOf:
    predicates: tuple["WordPredicate", ...]

    def matches(self, item: DictIterItem):
        return any(p.matches(item) for p in self.predicates)


@dataclass(frozen=True)
class NoPredicate:
    def matches(self, item: DictIterItem):
        return True


type WordPredicate = (
    AnagramOf | SubanagramOf | SuperanagramOf | All | AnyOf | NoPredicate
)


@dataclass(frozen=True)
class DictSearch:
    trie_search: TrieSearch | None = None
    predicate: WordPredicate = field(default_factory=NoPredicate)

    @staticmethod
    def from_pattern(pattern: str) -> "DictSearch":
        """Words with exactly len(pattern) letters that match it."""
        return DictSearch(TrieSearch.exactly(pattern))

    @staticmethod
    def from_prefix(pattern: str) -> "DictSearch":
        return DictSearch(TrieSearch.from_prefix(pattern))

    @staticmethod
    def anagram_of(word: str) -> "DictSearch":
        query = WordQuery.from_str(word)
        n = len(query.word)
        return DictSearch(TrieSearch(TriePrefix.any_with_length(n), n), AnagramOf(query))

    @staticmethod
    def subanagrams_of(word: str) -> "DictSearch":
        query = WordQuery.from_str(word)
        return DictSearch(TrieSearch(max_depth=len(query.word)), SubanagramOf(query))

    @staticmethod
    def superanagrams_of(word: str) -> "DictSearch":
        query = WordQuery.from_str(word)
        prefix = TriePrefix.any_with_length(len(query.word) + 1)
        return DictSearch(TrieSearch(prefix), SuperanagramOf(query))


class Dictionary:
    _trie: Trie[DictEntry]

    def __init__(self):
        self._trie = Trie()

    def insert(self, original: str):
        normalized = NormalizedWord.from_str(original)
        entry = DictEntry(
            original=original,
            char_freq=CharFreq.from_word(normalized),
            anag_num=AnagramNumber.try_from_word(normalized),
        )
        self._trie.add(normalized, entry)

    def extend(self, words: Iterable[str]):
        for word in words:
            self.insert(word)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "Dictionary":
        d = Dictionary()
        d.extend(words)
        return d

    @staticmethod
    def create_from_file(path: str, progress=False) -> "Dictionary":
        """One word per line. Blank lines are skipped."""
        d = Dictionary()
        with open(path, encoding="utf-8") as f:
            lines = tqdm(f, desc="Loading", unit=" words") if progress else f
            for line in lines:
                word = line.strip()
                if word:
                    d.insert(word)
        return d

    def find(self, word: NormalizedWord | str) -> list[DictEntry] | None:
        if isinstance(word, str):
            word = NormalizedWord.from_str(word)
        return self._trie.get(word)

    def size(self):
        return self._trie.size()

    def iter(self) -> Iterator[DictIterItem]:
        return (DictIterItem(nw, entry) for nw, entry in self._trie.iter())

    def iter_search(self, search: DictSearch) -> Iterator[DictIterItem]:
        trie_search = search.trie_search
        if trie_search is None:
            trie_search = TrieSearch()
        predicate = search.predicate
        items = (
            DictIterItem(nw, entry) for nw, entry in self._trie.iter_search(trie_search)
        )
        return (item for item in items if predicate.matches(item))
