"""Tests for the search service and cross-index behaviour."""

from collections import Counter

import pytest

from meal_scorer.domain.food import Food
from meal_scorer.services.search import (
    SearchComparison,
    SearchMode,
    SearchService,
    build_indexes,
)

QUERIES = [
    "",
    "a",
    "apple",
    "APPLE",
    "apple pie",
    "pine",
    "mac &",
    "mac #",
    "2%",
    "zzz",
    "e",
    "7up",
    "8up",
    "8",
    "a&b",
    "a#b",
    "a#",
]

# Names that differ only in characters sharing the trie's catch-all slot.
SLOT_SHARING_FOODS = [Food("7up"), Food("a&b"), Food("A#B"), Food("a b c")]


@pytest.fixture
def mixed_foods(foods: list[Food]) -> list[Food]:
    return [*foods, *SLOT_SHARING_FOODS]


@pytest.fixture
def mixed_service(mixed_foods: list[Food]) -> SearchService:
    return SearchService.from_records(mixed_foods, bucket_count=101)


def test_build_indexes_populates_both(foods: list[Food]) -> None:
    hash_index, trie_index = build_indexes(foods, bucket_count=97)

    assert len(hash_index) == len(foods)
    assert len(trie_index) == len(foods)
    assert hash_index.bucket_count == 97


def test_build_indexes_accepts_a_generator(foods: list[Food]) -> None:
    hash_index, trie_index = build_indexes(food for food in foods)

    assert len(hash_index) == len(trie_index) == len(foods)


@pytest.mark.parametrize("query", QUERIES)
def test_exact_search_agrees_across_indexes(
    mixed_foods: list[Food], query: str
) -> None:
    hash_index, trie_index = build_indexes(mixed_foods, bucket_count=97)

    assert Counter(hash_index.search_exact(query)) == Counter(
        trie_index.search_exact(query)
    )


def test_slot_sharing_names_do_not_leak_into_results() -> None:
    hash_index, trie_index = build_indexes([Food("7up"), Food("mac & cheese")])

    assert hash_index.search_exact("8up") == trie_index.search_exact("8up") == []
    assert trie_index.search_prefix("mac #") == []
    assert trie_index.search_contains("mac #") == []


@pytest.mark.parametrize("query", QUERIES)
@pytest.mark.parametrize("mode", list(SearchMode))
def test_all_modes_agree_as_multisets(
    mixed_service: SearchService, query: str, mode: SearchMode
) -> None:
    comparison = mixed_service.compare(query, mode)

    assert Counter(comparison.hash_results) == Counter(comparison.trie_results)


@pytest.mark.parametrize("query", QUERIES)
def test_exact_within_prefix_within_contains(
    mixed_service: SearchService, query: str
) -> None:
    for index_name in ("hash", "trie"):
        exact = Counter(mixed_service.search(index_name, query, SearchMode.EXACT))
        prefix = Counter(mixed_service.search(index_name, query, SearchMode.PREFIX))
        contains = Counter(
            mixed_service.search(index_name, query, SearchMode.CONTAINS)
        )
        assert not exact - prefix
        assert not prefix - contains


def test_rebuild_answers_identically(mixed_foods: list[Food]) -> None:
    first = build_indexes(mixed_foods, bucket_count=97)
    second = build_indexes(mixed_foods, bucket_count=97)

    for query in QUERIES:
        for left, right in zip(first, second, strict=True):
            assert left.search_exact(query) == right.search_exact(query)
            assert left.search_prefix(query) == right.search_prefix(query)
            assert left.search_contains(query) == right.search_contains(query)


def test_search_rejects_unknown_index(search_service: SearchService) -> None:
    with pytest.raises(ValueError):
        search_service.search("btree", "apple", SearchMode.EXACT)


def test_compare_reports_timings(search_service: SearchService) -> None:
    comparison = search_service.compare("apple", SearchMode.PREFIX)

    assert comparison.query == "apple"
    assert comparison.mode is SearchMode.PREFIX
    assert comparison.hash_micros >= 0
    assert comparison.trie_micros >= 0
    assert comparison.faster in {"hash", "trie", "tie"}


def test_faster_picks_lower_time() -> None:
    def make(hash_micros: float, trie_micros: float) -> SearchComparison:
        return SearchComparison(
            query="q",
            mode=SearchMode.EXACT,
            hash_results=[],
            trie_results=[],
            hash_micros=hash_micros,
            trie_micros=trie_micros,
        )

    assert make(5, 10).faster == "hash"
    assert make(10, 5).faster == "trie"
    assert make(7, 7).faster == "tie"


def test_stats_combines_both_indexes(
    search_service: SearchService, foods: list[Food]
) -> None:
    stats = search_service.stats()

    assert stats.hash_index.total_items == len(foods)
    assert stats.hash_index.bucket_count == 101
    assert stats.trie_index.total_nodes > len(foods)
    assert stats.timings.hash_ms >= 0
    assert stats.timings.trie_ms >= 0


def test_service_builds_the_same_indexes_as_build_indexes(
    mixed_foods: list[Food], mixed_service: SearchService
) -> None:
    hash_index, trie_index = build_indexes(mixed_foods, bucket_count=101)

    assert mixed_service.stats().hash_index == hash_index.stats()
    assert mixed_service.stats().trie_index == trie_index.stats()
    for query in QUERIES:
        assert mixed_service.search("hash", query, SearchMode.PREFIX) == (
            hash_index.search_prefix(query)
        )
        assert mixed_service.search("trie", query, SearchMode.PREFIX) == (
            trie_index.search_prefix(query)
        )
