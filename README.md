# huffpress

A small Huffman file compressor. It can turn a file into a text of `0` and `1`
characters, compress a file with Huffman coding, and decompress it again.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the command

```
huffpress [filename]
```

If no file name is given, the command asks for one. It checks that the file
exists and is a regular file, then asks you to press Enter and shows a menu.
All output files are written to the current directory:

1. Convert to Binary: writes every byte of the input file as eight `0`/`1`
   characters to `output.bin` and prints the sizes of both files.
2. Compress File: Huffman-compresses `output.bin` into
   `compressed_output.bin`. Run option 1 first so that `output.bin` exists.
3. Decompress File: restores `compressed_output.bin` into
   `decompressed_output.txt`.
4. Exit.

An unknown choice prints a message and shows the menu again. Choosing Exit, or
reaching the end of input, ends the command with status 0. If a file cannot be
read or written, or the compressed data is damaged, the command prints the
error and ends with status 1. A missing input file is reported and gives
status 1 as well.

## Using the library

```python
from huffpress.huffman import encode, decode, compress_file, decompress_file
from huffpress.bits import to_bit_text, write_to_binary_file

payload = encode(b"abracadabra")
assert decode(payload) == b"abracadabra"

compress_file("input.txt", "compressed_output.bin")      # returns bytes written
decompress_file("compressed_output.bin", "decompressed_output.txt")

assert to_bit_text(b"A") == "01000001"
in_size, out_size = write_to_binary_file("input.txt", "output.bin")
```

The compressed format starts with a table of 256 byte counts, each stored as a
4-byte little-endian signed integer, followed by the Huffman-coded bit stream,
most significant bit first, padded with zero bits up to a whole byte. The
decoder rebuilds the tree from that table, so it produces the same codes as the
encoder. `decode` raises `ValueError` when the data is shorter than the table,
holds an invalid code, or ends before every symbol is decoded.

Other names in `huffpress.huffman`: `HuffmanNode`, `MinHeap` (with `push`,
`pop` and `len()`), `count_frequencies`, `build_tree` and `generate_codes`.
`huffpress.cli` provides `MenuChoice`, `validate_input_file`, `run_menu` and
`main`.