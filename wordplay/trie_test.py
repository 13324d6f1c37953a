import itertools

from inline_snapshot import snapshot

from wordplay.char_match import ANY, Only
from wordplay.normalized_word import Letter, NormalizedWord
from wordplay.trie import Trie, TriePrefix, TrieSearch


def nw(s: str):
    return NormalizedWord.from_str(s)


def words_of(it):
    return [(str(w), v) for w, v in it]


def test_default_is_empty():
    t = Trie[int]()
    assert [*t.iter()] == []
    assert t.size() == 0
    assert t.num_nodes() == 1
    assert t.get(nw("")) == []


def test_add_single():
    t = Trie[int]()
    t.add(nw("ABC"), 1)
    assert t.get(nw("ABC")) == [1]
    assert t.size() == 1
    assert t.num_nodes() == 4


def test_add_multiple():
    t = Trie[int]()
    t.add(nw("ABC"), 1)
    t.add(nw("ABC"), 2)
    assert t.get(nw("ABC")) == [1, 2]


def test_get():
    t = Trie.create_from_pairs([("TEST", 1), ("teapot", 2)])
    assert t.get(nw("test")) == [1]
    assert t.get(nw("TEST")) == [1]
    assert t.get(nw("Test")) == [1]
    # interior node: exists, but no terminals
    assert t.get(nw("tea")) == []
    assert t.get(nw("teas")) is None
    assert t.get(nw("random")) is None


def test_iterate_single():
    t = Trie.create_from_pairs([("A", 1)])
    assert words_of(t.iter()) == [("A", 1)]


def test_iterate_many():
    t = Trie.create_from_pairs([("A", 1), ("AB", 2), ("B", 3), ("CDE", 4), ("CDE", 5)])
    assert words_of(t.iter()) == [
        ("A", 1),
        ("AB", 2),
        ("B", 3),
        ("CDE", 4),
        ("CDE", 5),
    ]
    assert words_of(t) == words_of(t.iter())


def test_iterate_in_lexicographic_order():
    words = ["zoo", "ant", "an", "anteater", "b", "zoom", "antelope", "a"]
    t = Trie.create_from_pairs((w, i) for i, w in enumerate(words))
    assert [w for w, _ in words_of(t.iter())] == snapshot(
        ["A", "AN", "ANT", "ANTEATER", "ANTELOPE", "B", "ZOO", "ZOOM"]
    )


def test_iterate_range():
    t = Trie.create_from_pairs([("A", 1), ("AB", 2), ("ABC", 3)])
    assert words_of(t.iter_range(2, 2)) == [("AB", 2)]
    assert words_of(t.iter_range(0, 1)) == [("A", 1)]
    assert words_of(t.iter_range(2, 3)) == [("AB", 2), ("ABC", 3)]


def test_iterate_prefix_search():
    t = Trie.create_from_pairs([("BAT", 1), ("CAR", 2), ("CAT", 3)])
    search = TrieSearch.from_prefix("CA")
    assert words_of(t.iter_search(search)) == [("CAR", 2), ("CAT", 3)]


def test_iterate_prefix_exclude_shorter():
    t = Trie.create_from_pairs([("C", 1), ("CAR", 2)])
    assert words_of(t.iter_search(TrieSearch.from_prefix("CA"))) == [("CAR", 2)]
    assert words_of(t.iter_search(TrieSearch.exactly("CA"))) == []
    assert words_of(t.iter_search(TrieSearch.from_prefix("CA").with_max(2))) == []


def test_iterate_wildcard_match():
    t = Trie.create_from_pairs([("BAT", 1), ("CAR", 2), ("COT", 3)])
    res = words_of(t.iter_search(TrieSearch.from_prefix("?A")))
    assert [w for w, _ in res] == ["BAT", "CAR"]
    res = words_of(t.iter_search(TrieSearch.from_prefix(".o ")))
    assert [w for w, _ in res] == ["COT"]


def test_exact_pattern():
    t = Trie.create_from_pairs([(w, w) for w in ["banana", "bandana", "bananas", "ban"]])
    res = words_of(t.iter_search(TrieSearch.exactly("bana??")))
    assert res == [("BANANA", "banana")]


def test_max_depth_zero():
    t = Trie.create_from_pairs([("", 0), ("A", 1)])
    assert words_of(t.iter_search(TrieSearch(max_depth=0))) == [("", 0)]

    t = Trie.create_from_pairs([("A", 1)])
    assert words_of(t.iter_search(TrieSearch(max_depth=0))) == []


def test_pattern_longer_than_words():
    t = Trie.create_from_pairs([("CAT", 1), ("CAR", 2)])
    assert words_of(t.iter_search(TrieSearch.from_prefix("????"))) == []


def test_all_any_is_exact_length():
    t = Trie.create_from_pairs([(w, w) for w in ["a", "at", "cat", "bat", "bait"]])
    search = TrieSearch(TriePrefix.any_with_length(3), 3)
    assert [v for _, v in t.iter_search(search)] == ["bat", "cat"]


def test_search_is_repeatable():
    t = Trie.create_from_pairs([(w, i) for i, w in enumerate(["bat", "car", "cot", "ca"])])
    search = TrieSearch.from_prefix("c")
    assert words_of(t.iter_search(search)) == words_of(t.iter_search(search))
    assert search == TrieSearch.from_prefix("C")


def test_stopping_early():
    t = Trie.create_from_pairs((w, w) for w in ["a", "b", "c", "d"])
    it = t.iter()
    assert [v for _, v in itertools.islice(it, 2)] == ["a", "b"]
    # the iterator picks up where it left off, and is exhausted afterwards.
    assert [v for _, v in it] == ["c", "d"]
    assert [*it] == []


def test_iteration_is_lazy():
    t = Trie.create_from_pairs((w, w) for w in ["a", "ab", "b", "ba", "c"])
    it = t.iter()
    assert next(it) == (nw("a"), "a")
    # only the path down to the first word has been expanded.
    assert [str(w) for w, _ in it._nodes] == ["C", "B", "AB"]
    assert len(it._terminals) == 0
    assert [v for _, v in it] == ["ab", "b", "ba", "c"]


def test_prefix():
    prefix = TriePrefix.from_pattern("c?t")
    assert len(prefix) == 3
    assert prefix.chars == (Only(Letter.C), ANY, Only(Letter.T))
    assert prefix.get_char_restriction(0) == Only(Letter.C)
    assert prefix.get_char_restriction(1) == ANY
    assert prefix.get_char_restriction(10) == ANY


def test_search_helpers():
    search = TrieSearch.exactly("ab")
    assert search.max_depth == 2
    assert search.below_max(1)
    assert not search.below_max(2)
    assert TrieSearch().below_max(1000)
    assert search.with_max(None) == TrieSearch.from_prefix("ab")
    assert search.max_depth == 2
