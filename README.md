# huffpack

Huffman coding for text files. Encoding a file writes two companion files next
to it. One holds a packed bit stream. The other is a plain-text table of the
code given to each character. Decoding reads both files and restores the text.

## Installation

```
pip install .
```

## Command line

Encode a file:

```
huffpack-encode notes.txt
```

This writes two files:

- `notes.txt.enc` holds the Huffman-coded bits, packed eight to a byte. Within
  each byte the least significant bit comes first.
- `notes.txt.code` holds the code table. Its first line gives the number of
  entries. Each line after that holds a character value and its code, for
  example `97 010`. The lines are sorted by character value.

Decode it again:

```
huffpack-decode notes.txt
```

This reads `notes.txt.enc` and `notes.txt.code` and writes the restored text
to `notes.txt.dec`.

Each command takes the file path as its argument. Without it, the command
prints a usage line and exits with a non-zero status. If a file cannot be read
or holds bad data, the command prints `Error: ...` to standard error and exits
with status 1.

## Library use

```python
from huffpack.huffman import get_freq, build_tree, get_codes, encode, decode
from huffpack.huffman import build_tree_from_code
from huffpack.fileio import code_to_binary, binary_to_code

data = b"abracadabra\x01"
tree = build_tree(get_freq(data))
codes = get_codes(tree)                 # {symbol: "0101...", ...}
bits = encode(data, codes)              # a string of '0' and '1'
packed = code_to_binary(bits)           # bytes

restored = decode(binary_to_code(packed), build_tree_from_code(codes))
assert restored == b"abracadabra"
```

A byte of value `1` marks the end of the text. `read_content` adds it when it
reads a file. Decoding stops when it reaches this byte or when the bits run
out, so the padding bits in the last packed byte are ignored.

The modules:

- `huffpack.node`: `Node` is a tree node. A node whose `symbol` is not zero is
  a leaf.
- `huffpack.minheap`: `MinHeap` holds nodes ordered by `weight`. Nodes of equal
  weight come out in the order they went in.
- `huffpack.huffman`: `get_freq`, `build_tree`, `get_codes`, `encode`, `decode`
  and `build_tree_from_code`.
- `huffpack.fileio`: `read_content`, `code_to_binary`, `binary_to_code`,
  `format_binary`, and `write_code` and `read_code`, which save and load code
  tables.
- `huffpack.cli`: `encode_file` and `decode_file` run the whole process from
  Python and return the paths they wrote. `encode_main` and `decode_main` are
  the two commands.

## Limitations

- Only byte values 1 to 127 get codes. Encoding drops NUL bytes and bytes of
  128 or more, so they do not come back on decoding. The package is meant for
  7-bit text.
- A code may be at most 19 bits long. `get_codes` raises `ValueError` for a
  tree that is deeper than that.
- The whole file is held in memory as a string of `'0'` and `'1'` characters.
  The package does not stream large inputs.