"""A min-heap of tree nodes ordered by weight."""

from __future__ import annotations

import heapq
import itertools
from typing import Iterable

from .node import Node


class MinHeap:
    """Priority queue that yields the lightest node first; ties go in insertion order."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._counter = itertools.count()
        self._items = [(node.weight, next(self._counter), node) for node in nodes]
        heapq.heapify(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, node: Node) -> None:
        """Add a node to the heap."""
        heapq.heappush(self._items, (node.weight, next(self._counter), node))

    def peek(self) -> Node:
        """Return the lightest node without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0][2]

    def pop(self) -> Node:
        """Remove and return the lightest node."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._items)[2]