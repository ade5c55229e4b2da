"""Huffman coding of text files into a packed bit stream and a code table."""

__version__ = "0.1.0"