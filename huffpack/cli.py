"""Command-line entry points for encoding and decoding files."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .fileio import binary_to_code, code_to_binary, read_code, read_content, write_code
from .huffman import build_tree, build_tree_from_code, decode, encode, get_codes, get_freq

PathLike = Union[str, "os.PathLike[str]"]


def encode_file(path: PathLike) -> Tuple[Path, Path]:
    """Compress path into path.enc with its code table in path.code."""
    base = str(path)
    content = read_content(base)
    codes = get_codes(build_tree(get_freq(content)))
    bits = encode(content, codes)
    enc_path = Path(base + ".enc")
    code_path = Path(base + ".code")
    enc_path.write_bytes(code_to_binary(bits))
    write_code(code_path, codes)
    return enc_path, code_path


def decode_file(path: PathLike) -> Path:
    """Restore path.enc using path.code and write the result to path.dec."""
    base = str(path)
    bits = binary_to_code(Path(base + ".enc").read_bytes())
    tree = build_tree_from_code(read_code(base + ".code"))
    dec_path = Path(base + ".dec")
    dec_path.write_bytes(decode(bits, tree))
    return dec_path


def _args(argv: Optional[Sequence[str]]) -> List[str]:
    return sys.argv[1:] if argv is None else list(argv)


def encode_main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the encoder on the file named by the first argument."""
    args = _args(argv)
    if not args:
        print("encode [FILE_PATH]")
        return -1
    try:
        enc_path, code_path = encode_file(args[0])
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"encWritePath: {enc_path}")
    print(f"codeWritePath: {code_path}")
    return 0


def decode_main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the decoder for the base file path named by the first argument."""
    args = _args(argv)
    if not args:
        print("decode [FILE_PATH]")
        return -1
    try:
        dec_path = decode_file(args[0])
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"writePath: {dec_path}")
    return 0