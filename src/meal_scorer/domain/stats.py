"""Domain models for index statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HashIndexStats:
    """Snapshot of hash index bucket usage."""

    bucket_count: int
    total_items: int
    non_empty_buckets: int
    load_factor: float
    max_chain_length: int


@dataclass(frozen=True)
class TrieIndexStats:
    """Snapshot of trie size."""

    total_nodes: int


@dataclass(frozen=True)
class BuildTimings:
    """Index build durations in milliseconds."""

    hash_ms: float
    trie_ms: float


@dataclass(frozen=True)
class IndexStats:
    """Combined statistics for both indexes."""

    hash_index: HashIndexStats
    trie_index: TrieIndexStats
    timings: BuildTimings
