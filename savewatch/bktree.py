"""A Burkhard-Keller tree for nearest-neighbour search under a metric."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

from savewatch.levenshtein import levenshtein_distance

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "children")

    def __init__(self, value: T) -> None:
        self.value = value
        self.children: dict[int, _Node[T]] = {}


class BKTree(Generic[T]):
    """Store values so that those within a distance of a query can be found."""

    def __init__(self, distance: Callable[[T, T], int] = levenshtein_distance) -> None:
        self._distance = distance
        self._root: _Node[T] | None = None
        self._size = 0

    def insert(self, value: T) -> bool:
        """Add ``value``; return False if it is already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return True
        node = self._root
        while True:
            dist = self._distance(value, node.value)
            if dist <= 0:
                return False
            child = node.children.get(dist)
            if child is None:
                node.children[dist] = _Node(value)
                self._size += 1
                return True
            node = child

    def find(self, value: T, limit: int) -> list[tuple[T, int]]:
        """Return ``(stored, distance)`` pairs within ``limit`` of ``value``."""
        if self._root is None:
            return []
        return list(self._search(self._root, value, limit))

    def _search(self, node: _Node[T], value: T, limit: int) -> Iterator[tuple[T, int]]:
        dist = self._distance(value, node.value)
        if dist <= limit:
            yield node.value, dist
        for edge in sorted(node.children):
            if dist - limit <= edge <= dist + limit:
                yield from self._search(node.children[edge], value, limit)

    def __len__(self) -> int:
        return self._size