# tests/test_search_index.py
import pytest

from glossary_browser.core.search_index import SearchIndex
from glossary_browser.entry import Entry
from glossary_browser.errors import DuplicateEntryError, IndexAlreadyBuiltError, IndexNotBuiltError


@pytest.fixture
def index(chips):
    idx = SearchIndex()
    idx.build_index(chips)
    return idx


def test_title_match(chips):
    idx = SearchIndex()
    idx.build_index(chips[:2])
    assert idx.search_ids("cpu") == ["cpu"]
    assert idx.search_ids("xpu") == []


def test_synonym_match_ranks_below_title(index):
    assert index.search_scores("cpu") == [("cpu", 10), ("apu", 3)]
    assert [e.id for e in index.search("CPU")] == ["cpu", "apu"]


def test_prefix_match(index):
    assert index.search_ids("c") == ["cpu", "apu"]
    assert index.search_ids("hyb") == ["apu"]


def test_multi_term_is_and(index):
    assert index.search_scores("cpu gpu") == [("apu", 6)]
    assert index.search_scores("gpu, cpu") == index.search_scores("cpu gpu")
    assert index.search_ids("cpu xpu") == []


@pytest.mark.parametrize("text", ["", "   ", "   - ,", "[]"])
def test_punctuation_only_query_is_empty(index, text):
    assert index.search(text) == []


def test_ties_break_by_id():
    idx = SearchIndex()
    idx.build_index([Entry(id="b", title="Widget"), Entry(id="a", title="Widget"), Entry(id="c", title="Widgets")])
    assert idx.search_ids("widget") == ["a", "b", "c"]
    assert idx.search_ids("widget") == idx.search_ids("widget")


def test_tokens_under_one_prefix_sum():
    idx = SearchIndex()
    idx.build_index([Entry(id="x", title="Cache Cached"), Entry(id="y", title="Cache")])
    assert idx.search_scores("cach") == [("x", 20), ("y", 10)]


def test_build_twice_fails(index, chips):
    with pytest.raises(IndexAlreadyBuiltError):
        index.build_index(chips)


def test_search_before_build_fails():
    with pytest.raises(IndexNotBuiltError):
        SearchIndex().search("cpu")


def test_duplicate_ids_rejected():
    idx = SearchIndex()
    with pytest.raises(DuplicateEntryError):
        idx.build_index([Entry(id="a", title="A"), Entry(id="a", title="Again")])
    assert not idx.built


def test_failed_build_leaves_index_empty():
    idx = SearchIndex()
    cpu = Entry(id="cpu", title="CPU")
    with pytest.raises(TypeError):
        idx.build_index([cpu, Entry(id="bad", title="Bad", body=("ok", 5))])
    assert not idx.built
    assert idx.stats()["tokens"] == 0
    # a retry starts from scratch instead of adding to the first attempt
    idx.build_index([cpu])
    assert idx.search_scores("cpu") == [("cpu", 10)]


def test_custom_weights():
    idx = SearchIndex(weights={"synonym": 50})
    idx.build_index([Entry(id="cpu", title="CPU"), Entry(id="apu", title="APU", synonyms=("cpu",))])
    assert idx.search_ids("cpu") == ["apu", "cpu"]


def test_stats(index):
    stats = index.stats()
    assert stats["entries"] == 3
    # cpu, gpu, apu, hybrid
    assert stats["tokens"] == 4
    assert stats["build_ms"] >= 0
