"""Writing bytes out as text of '0' and '1' characters."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

StrPath = Union[str, "PathLike[str]"]


def to_bit_text(data: bytes) -> str:
    """Return the bits of each byte, most significant first, as '0'/'1' text."""
    return "".join(f"{byte:08b}" for byte in data)


def write_to_binary_file(source: StrPath, destination: StrPath) -> tuple[int, int]:
    """Write the bit text of a file to another file.

    Returns the sizes in bytes of the input and the output.
    """
    data = Path(source).read_bytes()
    text = to_bit_text(data).encode("ascii")
    Path(destination).write_bytes(text)
    return len(data), len(text)