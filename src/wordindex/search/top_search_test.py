import pytest

from wordindex.data_models.keyword_index import KeywordIndex
from wordindex.data_models.occurrence import Occurrence
from wordindex.search.top_search import top_search


def _index(entries: dict[str, list[tuple[str, int]]]) -> KeywordIndex:
    return KeywordIndex(
        entries={
            kw: tuple(Occurrence(doc_id=d, frequency=f) for d, f in occs)
            for kw, occs in entries.items()
        }
    )


def test_tie_goes_to_first_keyword():
    index = _index(
        {
            "deep": [("d1", 5), ("d2", 3)],
            "world": [("d3", 5), ("d4", 1)],
        }
    )
    assert top_search(index, "deep", "world") == ["d1", "d3", "d2", "d4"]
    assert top_search(index, "world", "deep") == ["d3", "d1", "d2", "d4"]


def test_bounded_to_five():
    index = _index(
        {
            "a": [(f"a{i}", 20 - 2 * i) for i in range(10)],
            "b": [(f"b{i}", 19 - 2 * i) for i in range(10)],
        }
    )
    assert top_search(index, "a", "b") == ["a0", "b0", "a1", "b1", "a2"]


def test_shared_document_listed_once_at_higher_rank():
    index = _index(
        {
            "cat": [("d1", 2), ("shared", 1)],
            "dog": [("shared", 6), ("d2", 3)],
        }
    )
    result = top_search(index, "cat", "dog")
    assert result == ["shared", "d2", "d1"]


def test_shared_document_tie_counts_once():
    index = _index(
        {
            "cat": [("d1", 4), ("d2", 1)],
            "dog": [("d1", 4), ("d3", 2)],
        }
    )
    assert top_search(index, "cat", "dog") == ["d1", "d3", "d2"]


def test_absent_keyword_returns_other_list_truncated():
    index = _index({"validword": [(f"d{i}", 10 - i) for i in range(8)]})
    expected = [f"d{i}" for i in range(5)]
    assert top_search(index, "zzz_not_present", "validword") == expected
    assert top_search(index, "validword", "zzz_not_present") == expected


def test_both_absent_is_empty():
    assert top_search(_index({"cat": [("d1", 1)]}), "dog", "emu") == []


def test_same_keyword_twice():
    index = _index({"cat": [("d1", 3), ("d2", 2)]})
    assert top_search(index, "cat", "cat") == ["d1", "d2"]


def test_keywords_normalized_before_lookup():
    index = _index({"cat": [("d1", 3)]})
    assert top_search(index, " Cat ", "DOG") == ["d1"]


def test_custom_limit():
    index = _index({"cat": [("d1", 3), ("d2", 2), ("d3", 1)]})
    assert top_search(index, "cat", "dog", limit=2) == ["d1", "d2"]
    with pytest.raises(ValueError):
        top_search(index, "cat", "dog", limit=0)
