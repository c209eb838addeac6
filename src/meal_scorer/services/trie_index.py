"""Character trie index over food names.

Names are case-folded and walked one character at a time. Letters ``a``-``z``
get their own child slot and every other character shares a final catch-all
slot, so ``"7up"`` and ``"8up"`` end on the same node. Lookups filter that
node's records on the folded name. Traversals use an explicit stack so very
long names cannot exhaust the interpreter's recursion limit.
"""

from collections.abc import Iterable, Iterator

from meal_scorer.domain.food import Food, fold_name
from meal_scorer.domain.stats import TrieIndexStats

ALPHABET_SIZE = 27
OTHER_SLOT = 26


def slot_for(char: str) -> int:
    """Map a case-folded character to its child slot."""
    if "a" <= char <= "z":
        return ord(char) - ord("a")
    return OTHER_SLOT


class TrieNode:
    """A trie node with one child slot per letter plus a catch-all slot."""

    __slots__ = ("children", "foods", "is_end_of_word")

    def __init__(self) -> None:
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.foods: list[Food] = []
        self.is_end_of_word = False


class TrieIndex:
    """Prefix tree keyed by case-folded food name."""

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, food: Food) -> None:
        """Store a food at the node for its name, creating nodes as needed."""
        node = self._root
        for char in fold_name(food.name):
            slot = slot_for(char)
            child = node.children[slot]
            if child is None:
                child = TrieNode()
                node.children[slot] = child
            node = child
        node.is_end_of_word = True
        node.foods.append(food)
        self._size += 1

    def insert_all(self, foods: Iterable[Food]) -> None:
        for food in foods:
            self.insert(food)

    def search_exact(self, name: str) -> list[Food]:
        """Return every food stored under exactly this name.

        Names differing only in non-letters share a node, so the node's
        records are filtered on the full folded name.
        """
        node = self._descend(name)
        if node is None or not node.is_end_of_word:
            return []
        key = fold_name(name)
        return [food for food in node.foods if fold_name(food.name) == key]

    def search_prefix(self, prefix: str) -> list[Food]:
        """Return foods under the prefix node in pre-order."""
        node = self._descend(prefix)
        if node is None:
            return []
        key = fold_name(prefix)
        return [
            food for food in _collect(node) if fold_name(food.name).startswith(key)
        ]

    def search_contains(self, term: str) -> list[Food]:
        """Return foods whose name contains the term.

        The trie cannot narrow a substring search, so this walks the whole tree.
        """
        key = fold_name(term)
        return [food for food in _collect(self._root) if key in fold_name(food.name)]

    def stats(self) -> TrieIndexStats:
        """Return the number of allocated nodes, root included."""
        return TrieIndexStats(total_nodes=sum(1 for _ in _walk(self._root)))

    def _descend(self, text: str) -> TrieNode | None:
        node = self._root
        for char in fold_name(text):
            child = node.children[slot_for(char)]
            if child is None:
                return None
            node = child
        return node


def _walk(start: TrieNode) -> Iterator[TrieNode]:
    """Yield nodes in pre-order, children in slot order."""
    stack = [start]
    while stack:
        node = stack.pop()
        yield node
        # Pushed in reverse so slot 0 is popped first.
        for child in reversed(node.children):
            if child is not None:
                stack.append(child)


def _collect(start: TrieNode) -> Iterator[Food]:
    for node in _walk(start):
        yield from node.foods
