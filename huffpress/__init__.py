"""Huffman file compression, a bit-text converter and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["huffman", "bits", "cli"]