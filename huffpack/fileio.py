"""Reading and writing content, packed bits and code tables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Union

from .huffman import END_MARKER, SYMBOL_COUNT

PathLike = Union[str, "os.PathLike[str]"]


def format_binary(value: int) -> str:
    """Render the low eight bits of value, least significant bit first."""
    value &= 0xFF
    return "".join("1" if value >> i & 1 else "0" for i in range(8))


def read_content(path: PathLike) -> bytes:
    """Read a file and append the end-of-content marker."""
    return Path(path).read_bytes() + bytes([END_MARKER])


def code_to_binary(code: str) -> bytes:
    """Pack a bit string into bytes, least significant bit first.

    The result always holds len(code) // 8 + 1 bytes.
    """
    buffer = bytearray(len(code) // 8 + 1)
    for i, bit in enumerate(code):
        if bit != "0":
            buffer[i // 8] |= 1 << (i % 8)
    return bytes(buffer)


def binary_to_code(data: bytes) -> str:
    """Unpack bytes into a bit string, least significant bit first."""
    return "".join(format_binary(byte) for byte in data)


def write_code(path: PathLike, codes: Mapping[int, str]) -> None:
    """Write a code table: a count line, then 'symbol code' lines by symbol."""
    entries = sorted((symbol, code) for symbol, code in codes.items() if code)
    with open(path, "w", encoding="ascii") as fh:
        fh.write(f"{len(entries)}\n")
        for symbol, code in entries:
            fh.write(f"{symbol} {code}\n")


def read_code(path: PathLike) -> Dict[int, str]:
    """Read a code table written by write_code."""
    tokens = Path(path).read_text(encoding="ascii").split()
    if not tokens:
        raise ValueError(f"code table {path} is empty")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ValueError(f"bad entry count {tokens[0]!r}") from None
    pairs = tokens[1 : 1 + 2 * count]
    if count < 0 or len(pairs) < 2 * count:
        raise ValueError(f"code table {path} is truncated")
    codes: Dict[int, str] = {}
    for symbol_token, code in zip(pairs[::2], pairs[1::2]):
        try:
            symbol = int(symbol_token)
        except ValueError:
            raise ValueError(f"bad symbol {symbol_token!r}") from None
        if not 0 <= symbol < SYMBOL_COUNT:
            raise ValueError(f"symbol {symbol} is out of range")
        codes[symbol] = code
    return codes