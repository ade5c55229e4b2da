"""Binary tree nodes used by the Huffman coder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A Huffman tree node. A non-zero symbol marks a leaf."""

    left: Optional[Node] = None
    right: Optional[Node] = None
    symbol: int = 0
    weight: int = 0

    def copy(self) -> Node:
        """Return a detached copy carrying the same symbol and weight."""
        return Node(symbol=self.symbol, weight=self.weight)

    def is_leaf(self) -> bool:
        """Return True when the node stands for a symbol."""
        return self.symbol != 0