"""Chained hash table index over food names."""

from collections.abc import Iterable, Iterator

from meal_scorer.domain.food import Food, fold_name
from meal_scorer.domain.stats import HashIndexStats

DEFAULT_BUCKET_COUNT = 100_000

_DJB2_SEED = 5381
_HASH_MASK = (1 << 64) - 1


def name_hash(name: str) -> int:
    """Return the case-insensitive djb2 hash of a name."""
    value = _DJB2_SEED
    for char in fold_name(name):
        value = (value * 33 + ord(char)) & _HASH_MASK
    return value


class HashIndex:
    """Fixed-size chained hash table keyed by case-folded food name."""

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be positive")
        self._buckets: list[list[Food]] = [[] for _ in range(bucket_count)]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def bucket_for(self, name: str) -> int:
        """Return the bucket index a name hashes to."""
        return name_hash(name) % len(self._buckets)

    def insert(self, food: Food) -> None:
        """Append a food to its bucket; duplicate names are kept."""
        self._buckets[self.bucket_for(food.name)].append(food)
        self._size += 1

    def insert_all(self, foods: Iterable[Food]) -> None:
        for food in foods:
            self.insert(food)

    def search_exact(self, name: str) -> list[Food]:
        """Return foods whose name equals the query, ignoring case."""
        key = fold_name(name)
        bucket = self._buckets[self.bucket_for(name)]
        return [food for food in bucket if fold_name(food.name) == key]

    def search_prefix(self, prefix: str) -> list[Food]:
        """Return foods whose name starts with the prefix, ignoring case."""
        key = fold_name(prefix)
        return [
            food
            for food in self._iter_foods()
            if fold_name(food.name).startswith(key)
        ]

    def search_contains(self, term: str) -> list[Food]:
        """Return foods whose name contains the term, ignoring case."""
        key = fold_name(term)
        return [food for food in self._iter_foods() if key in fold_name(food.name)]

    def stats(self) -> HashIndexStats:
        """Return bucket usage statistics."""
        non_empty = 0
        max_chain = 0
        total = 0
        for bucket in self._buckets:
            if not bucket:
                continue
            non_empty += 1
            total += len(bucket)
            max_chain = max(max_chain, len(bucket))
        return HashIndexStats(
            bucket_count=len(self._buckets),
            total_items=total,
            non_empty_buckets=non_empty,
            load_factor=total / len(self._buckets),
            max_chain_length=max_chain,
        )

    def _iter_foods(self) -> Iterator[Food]:
        for bucket in self._buckets:
            yield from bucket
