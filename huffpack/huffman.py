"""Huffman tree construction, encoding and decoding."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Mapping, Optional

from .minheap import MinHeap
from .node import Node

SYMBOL_COUNT = 128
MAX_CODE_LEN = 20
END_MARKER = 1


def _is_symbol(value: int) -> bool:
    return 0 < value < SYMBOL_COUNT


def get_freq(data: bytes) -> Counter:
    """Count how often each codable symbol (1..127) occurs in data."""
    return Counter(byte for byte in data if _is_symbol(byte))


def build_tree(freq: Mapping[int, int]) -> Node:
    """Build a Huffman tree from symbol frequencies."""
    leaves = [
        Node(symbol=symbol, weight=count)
        for symbol, count in sorted(freq.items())
        if count > 0
    ]
    if not leaves:
        raise ValueError("cannot build a tree without symbols")
    heap = MinHeap(leaves)
    while len(heap) >= 2:
        left = heap.pop()
        right = heap.pop()
        heap.insert(Node(left, right, 0, left.weight + right.weight))
    return heap.pop()


def get_codes(root: Node) -> Dict[int, str]:
    """Map every leaf symbol to its bit string ('0' goes left, '1' right)."""
    if root.is_leaf():
        return {root.symbol: "0"}
    codes: Dict[int, str] = {}

    def walk(node: Optional[Node], prefix: str) -> None:
        if node is None:
            return
        if node.is_leaf():
            if len(prefix) >= MAX_CODE_LEN:
                raise ValueError(
                    f"code for symbol {node.symbol} exceeds {MAX_CODE_LEN - 1} bits"
                )
            codes[node.symbol] = prefix
            return
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(root, "")
    return codes


def encode(data: bytes, codes: Mapping[int, str]) -> str:
    """Encode data as a string of '0' and '1'; bytes outside 1..127 are skipped."""
    parts = []
    for byte in data:
        if not _is_symbol(byte):
            continue
        try:
            parts.append(codes[byte])
        except KeyError:
            raise ValueError(f"no code for symbol {byte}") from None
    return "".join(parts)


def decode(bits: str, tree: Node) -> bytes:
    """Decode a bit string until the end marker or the bits run out."""
    if tree.is_leaf():
        raise ValueError("tree has no branches to follow")
    out = bytearray()
    pos = 0
    total = len(bits)
    while pos < total:
        node: Optional[Node] = tree
        while not node.is_leaf():
            if pos >= total:
                return bytes(out)
            node = node.left if bits[pos] == "0" else node.right
            pos += 1
            if node is None:
                raise ValueError(f"bit string leaves the tree at position {pos}")
        if node.symbol == END_MARKER:
            break
        out.append(node.symbol)
    return bytes(out)


def _child(node: Node, bit: str) -> Optional[Node]:
    return node.left if bit == "0" else node.right


def _set_child(node: Node, bit: str, child: Node) -> None:
    if bit == "0":
        node.left = child
    else:
        node.right = child


def build_tree_from_code(codes: Mapping[int, str]) -> Node:
    """Rebuild a decoding tree from a symbol-to-code table."""
    root = Node()
    for symbol in sorted(codes):
        code = codes[symbol]
        if not code:
            continue
        if not _is_symbol(symbol):
            raise ValueError(f"symbol {symbol} is outside 1..{SYMBOL_COUNT - 1}")
        if set(code) - {"0", "1"}:
            raise ValueError(f"code {code!r} for symbol {symbol} is not binary")
        node = root
        for bit in code[:-1]:
            child = _child(node, bit)
            if child is None:
                child = Node()
                _set_child(node, bit, child)
            elif child.is_leaf():
                raise ValueError(f"code {code!r} extends the code of another symbol")
            node = child
        _set_child(node, code[-1], Node(symbol=symbol, weight=1))
    return root