"""Search service comparing the hash and trie indexes."""

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum

from meal_scorer.domain.food import Food
from meal_scorer.domain.stats import BuildTimings, IndexStats
from meal_scorer.services.hash_index import DEFAULT_BUCKET_COUNT, HashIndex
from meal_scorer.services.trie_index import TrieIndex

_logger = logging.getLogger(__name__)


class SearchMode(StrEnum):
    """Supported name matching modes."""

    EXACT = "exact"
    PREFIX = "prefix"
    CONTAINS = "contains"


@dataclass(frozen=True)
class SearchComparison:
    """Results and timings of one query run against both indexes."""

    query: str
    mode: SearchMode
    hash_results: list[Food]
    trie_results: list[Food]
    hash_micros: float
    trie_micros: float

    @property
    def faster(self) -> str:
        if self.trie_micros < self.hash_micros:
            return "trie"
        if self.hash_micros < self.trie_micros:
            return "hash"
        return "tie"


def build_indexes(
    records: Iterable[Food], bucket_count: int = DEFAULT_BUCKET_COUNT
) -> tuple[HashIndex, TrieIndex]:
    """Populate a hash index and a trie from the same records."""
    hash_index, trie_index, _ = _build_timed(records, bucket_count)
    return hash_index, trie_index


@dataclass
class SearchService:
    """Runs searches on both indexes and reports how they compare."""

    hash_index: HashIndex
    trie_index: TrieIndex
    timings: BuildTimings
    debug: bool = False

    @classmethod
    def from_records(
        cls,
        records: Iterable[Food],
        bucket_count: int = DEFAULT_BUCKET_COUNT,
        debug: bool = False,
    ) -> "SearchService":
        """Build both indexes from records, timing each build."""
        hash_index, trie_index, timings = _build_timed(records, bucket_count)
        return cls(
            hash_index=hash_index,
            trie_index=trie_index,
            timings=timings,
            debug=debug,
        )

    def search(self, index_name: str, query: str, mode: SearchMode) -> list[Food]:
        """Run a single search against the named index ("hash" or "trie")."""
        if index_name == "hash":
            index: HashIndex | TrieIndex = self.hash_index
        elif index_name == "trie":
            index = self.trie_index
        else:
            raise ValueError(f"Unknown index: {index_name}")
        if mode is SearchMode.EXACT:
            return index.search_exact(query)
        if mode is SearchMode.PREFIX:
            return index.search_prefix(query)
        return index.search_contains(query)

    def compare(self, query: str, mode: SearchMode) -> SearchComparison:
        """Run the same search on both indexes and time each one."""
        start = time.perf_counter()
        hash_results = self.search("hash", query, mode)
        hash_micros = (time.perf_counter() - start) * 1_000_000

        start = time.perf_counter()
        trie_results = self.search("trie", query, mode)
        trie_micros = (time.perf_counter() - start) * 1_000_000

        if self.debug:
            _logger.info(
                "Search %s %r: hash=%s results in %.0fus, trie=%s results in %.0fus",
                mode,
                query,
                len(hash_results),
                hash_micros,
                len(trie_results),
                trie_micros,
            )
        return SearchComparison(
            query=query,
            mode=mode,
            hash_results=hash_results,
            trie_results=trie_results,
            hash_micros=hash_micros,
            trie_micros=trie_micros,
        )

    def stats(self) -> IndexStats:
        """Return statistics for both indexes."""
        return IndexStats(
            hash_index=self.hash_index.stats(),
            trie_index=self.trie_index.stats(),
            timings=self.timings,
        )


def _build_timed(
    records: Iterable[Food], bucket_count: int
) -> tuple[HashIndex, TrieIndex, BuildTimings]:
    foods = list(records)
    hash_index = HashIndex(bucket_count)
    hash_ms = _elapsed_ms(lambda: hash_index.insert_all(foods))
    _logger.info("Hash index built: items=%s time=%.1fms", len(foods), hash_ms)
    trie_index = TrieIndex()
    trie_ms = _elapsed_ms(lambda: trie_index.insert_all(foods))
    _logger.info("Trie index built: items=%s time=%.1fms", len(foods), trie_ms)
    return hash_index, trie_index, BuildTimings(hash_ms=hash_ms, trie_ms=trie_ms)


def _elapsed_ms(func: Callable[[], None]) -> float:
    start = time.perf_counter()
    func()
    return (time.perf_counter() - start) * 1000
