"""Huffman coding of byte strings and files.

A compressed stream starts with a table of 256 little-endian 32-bit
frequencies, one for each byte value, followed by the code bits packed
most significant bit first and padded with zero bits to a whole byte.
"""

from __future__ import annotations

import struct
from collections import Counter
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

_HEADER = struct.Struct("<256i")
HEADER_SIZE = _HEADER.size

StrPath = Union[str, "PathLike[str]"]


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a byte value."""

    freq: int
    data: int = 0
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class MinHeap:
    """Binary min-heap of Huffman nodes keyed by frequency."""

    def __init__(self) -> None:
        self._nodes: list[HuffmanNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def push(self, node: HuffmanNode) -> None:
        nodes = self._nodes
        i = len(nodes)
        nodes.append(node)
        while i and node.freq < nodes[(i - 1) // 2].freq:
            parent = (i - 1) // 2
            nodes[i] = nodes[parent]
            i = parent
        nodes[i] = node

    def pop(self) -> HuffmanNode:
        """Remove and return the node with the smallest frequency."""
        nodes = self._nodes
        if not nodes:
            raise IndexError("pop from an empty heap")
        smallest_node = nodes[0]
        last = nodes.pop()
        if not nodes:
            return smallest_node
        nodes[0] = last
        size = len(nodes)
        i = 0
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < size and nodes[left].freq < nodes[smallest].freq:
                smallest = left
            if right < size and nodes[right].freq < nodes[smallest].freq:
                smallest = right
            if smallest == i:
                break
            nodes[i], nodes[smallest] = nodes[smallest], nodes[i]
            i = smallest
        return smallest_node


def count_frequencies(data: bytes) -> list[int]:
    """Return the number of occurrences of each of the 256 byte values."""
    counts = Counter(data)
    return [counts.get(value, 0) for value in range(256)]


def build_tree(frequencies: Sequence[int]) -> Optional[HuffmanNode]:
    """Build a Huffman tree from a 256-entry frequency table.

    Returns None when every frequency is zero.
    """
    if len(frequencies) != 256:
        raise ValueError("frequency table must have 256 entries")
    heap = MinHeap()
    for value, freq in enumerate(frequencies):
        if freq < 0:
            raise ValueError(f"negative frequency for byte {value}")
        if freq:
            heap.push(HuffmanNode(freq=freq, data=value))
    if not heap:
        return None
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(HuffmanNode(freq=left.freq + right.freq, left=left, right=right))
    return heap.pop()


def generate_codes(root: Optional[HuffmanNode]) -> dict[int, str]:
    """Map each byte value in the tree to its code as a string of '0' and '1'."""
    codes: dict[int, str] = {}

    def walk(node: Optional[HuffmanNode], prefix: str) -> None:
        if node is None:
            return
        if node.is_leaf:
            codes[node.data] = prefix
            return
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(root, "")
    return codes


def _pack_header(frequencies: Sequence[int]) -> bytes:
    try:
        return _HEADER.pack(*frequencies)
    except struct.error as exc:
        raise ValueError("input too large for a 32-bit frequency table") from exc


def encode(data: bytes) -> bytes:
    """Compress bytes into a frequency table followed by packed code bits."""
    frequencies = count_frequencies(data)
    header = _pack_header(frequencies)
    codes = generate_codes(build_tree(frequencies))
    bits = "".join(codes[value] for value in data)
    if not bits:
        return header
    bits += "0" * (-len(bits) % 8)
    return header + int(bits, 2).to_bytes(len(bits) // 8, "big")


def _iter_bits(payload: bytes):
    for byte in payload:
        for shift in range(7, -1, -1):
            yield (byte >> shift) & 1


def decode(payload: bytes) -> bytes:
    """Decompress bytes produced by encode()."""
    if len(payload) < HEADER_SIZE:
        raise ValueError("compressed data is shorter than its frequency table")
    frequencies = _HEADER.unpack_from(payload)
    root = build_tree(frequencies)
    total = sum(frequencies)
    if root is None:
        return b""
    if root.is_leaf:
        return bytes([root.data]) * total

    out = bytearray()
    current = root
    for bit in _iter_bits(payload[HEADER_SIZE:]):
        current = current.right if bit else current.left
        if current is None:
            raise ValueError("compressed data holds an invalid code")
        if current.is_leaf:
            out.append(current.data)
            current = root
            if len(out) == total:
                return bytes(out)
    raise ValueError("compressed data ends before all symbols were decoded")


def compress_file(source: StrPath, destination: StrPath) -> int:
    """Compress one file into another; return the number of bytes written."""
    encoded = encode(Path(source).read_bytes())
    Path(destination).write_bytes(encoded)
    return len(encoded)


def decompress_file(source: StrPath, destination: StrPath) -> int:
    """Decompress one file into another; return the number of bytes written."""
    decoded = decode(Path(source).read_bytes())
    Path(destination).write_bytes(decoded)
    return len(decoded)