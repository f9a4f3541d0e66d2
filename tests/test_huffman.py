import struct

import pytest

from huffpress.huffman import (
    HuffmanNode,
    MinHeap,
    build_tree,
    compress_file,
    count_frequencies,
    decode,
    decompress_file,
    encode,
    generate_codes,
)

SAMPLES = [
    b"hello world",
    b"abracadabra",
    bytes(range(256)) * 3,
    b"\x00\xff" * 50 + b"xyz",
    b"the quick brown fox jumps over the lazy dog" * 10,
]


def test_heap_pops_in_frequency_order():
    heap = MinHeap()
    freqs = [7, 3, 9, 1, 4, 4, 8, 2]
    for index, freq in enumerate(freqs):
        heap.push(HuffmanNode(freq=freq, data=index))
    assert len(heap) == len(freqs)
    popped = [heap.pop().freq for _ in range(len(freqs))]
    assert popped == sorted(freqs)
    assert len(heap) == 0


def test_heap_pop_empty_raises():
    with pytest.raises(IndexError):
        MinHeap().pop()


def test_count_frequencies():
    freqs = count_frequencies(b"aab")
    assert len(freqs) == 256
    assert freqs[ord("a")] == 2
    assert freqs[ord("b")] == 1
    assert sum(freqs) == 3


def test_build_tree_empty_is_none():
    assert build_tree([0] * 256) is None


def test_build_tree_root_frequency_is_total():
    freqs = count_frequencies(b"abracadabra")
    root = build_tree(freqs)
    assert root.freq == sum(freqs)


def test_build_tree_rejects_wrong_length():
    with pytest.raises(ValueError):
        build_tree([1, 2, 3])


def test_codes_are_prefix_free():
    codes = generate_codes(build_tree(count_frequencies(b"abracadabra")))
    assert set(codes) == set(b"abracadabra")
    values = list(codes.values())
    for code in values:
        assert all(other == code or not other.startswith(code) for other in values)


def test_frequent_symbol_gets_shortest_code():
    codes = generate_codes(build_tree(count_frequencies(b"aaaaaaaabc")))
    assert len(codes[ord("a")]) <= len(codes[ord("b")])
    assert len(codes[ord("a")]) <= len(codes[ord("c")])


def test_encode_worked_example():
    encoded = encode(b"aab")
    header = struct.unpack_from("<256i", encoded)
    assert header[ord("a")] == 2
    assert header[ord("b")] == 1
    assert encoded[1024:] == b"\xc0"


def test_encode_empty_is_zero_table():
    encoded = encode(b"")
    assert encoded == bytes(1024)
    assert decode(encoded) == b""


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip(data):
    assert decode(encode(data)) == data


def test_single_symbol_round_trip():
    assert decode(encode(b"aaaa")) == b"aaaa"


def test_compression_shrinks_skewed_payload():
    data = b"a" * 5000 + b"b" * 10
    assert len(encode(data)) - 1024 < len(data)


def test_decode_short_header_raises():
    with pytest.raises(ValueError):
        decode(b"\x00" * 10)


def test_decode_truncated_payload_raises():
    encoded = encode(b"hello world")
    with pytest.raises(ValueError):
        decode(encoded[:1024])


def test_file_round_trip(tmp_path):
    source = tmp_path / "in.bin"
    packed = tmp_path / "packed.bin"
    restored = tmp_path / "out.txt"
    source.write_bytes(b"abracadabra")
    assert compress_file(source, packed) == packed.stat().st_size
    assert decompress_file(packed, restored) == 11
    assert restored.read_bytes() == b"abracadabra"


def test_compress_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        compress_file(tmp_path / "missing.bin", tmp_path / "out.bin")