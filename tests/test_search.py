"""Test exact and nibble wildcard search."""

import pytest

from nibbler.config import WILDCARD_NIBBLE
from nibbler.core.buffer import ByteBuffer
from nibbler.utils.hex_utils import parse_wildcard_pattern, to_nibbles
from nibbler.utils.search import SearchEngine

X = WILDCARD_NIBBLE


def engine_for(data):
    return SearchEngine(ByteBuffer(data))


def test_exact_search_finds_first_match():
    result = engine_for(b"abcabc").find_exact(b"bc")
    assert result.position == 1


def test_exact_search_missing_pattern():
    assert engine_for(b"abcabc").find_exact(b"zz") is None


def test_exact_search_empty_pattern_finds_nothing():
    assert engine_for(b"abc").find_exact(b"") is None


def test_exact_search_binary_bytes():
    result = engine_for(b"\x00\xff\x10\xff").find_exact(b"\xff\x10")
    assert result.position == 1


def test_nibble_search_aligned():
    result = engine_for(b"\x00\x41\x42").find_nibbles((4, 1, 4, 2))
    assert result.position == 1
    assert not result.on_low_nibble


def test_nibble_search_across_byte_boundary():
    """Pattern 2,3 sits on the low nibble of 0x12 and the high nibble of 0x34."""
    result = engine_for(b"\x12\x34").find_nibbles((2, 3))
    assert result.position == 0
    assert result.nibble_position == 1
    assert result.on_low_nibble


def test_nibble_search_with_wildcards():
    result = engine_for(b"\x10\x4f\x41").find_nibbles((4, X, 4))
    # 0x4f 0x41 -> nibbles 4 f 4 1, first match at nibble 2
    assert result.position == 1
    assert result.nibble_position == 2


def test_nibble_search_first_match_wins():
    result = engine_for(b"\xab\xab").find_nibbles((0xa, 0xb))
    assert result.position == 0


def test_nibble_search_not_found():
    assert engine_for(b"\x12\x34").find_nibbles((5,)) is None


def test_nibble_pattern_longer_than_buffer():
    assert engine_for(b"\x12").find_nibbles((1, 2, X)) is None
    assert engine_for(b"").find_nibbles((X,)) is None


def test_empty_nibble_pattern_finds_nothing():
    assert engine_for(b"\x12").find_nibbles(()) is None


@pytest.mark.parametrize("k", [1, 2, 5])
@pytest.mark.parametrize("extra", [0, 1, 7])
def test_all_wildcard_pattern_matches_at_start(k, extra):
    """2k wildcards match at the first byte of any buffer with at least k bytes."""
    data = bytes((i * 37) & 0xff for i in range(k + extra))
    result = engine_for(data).find_nibbles((X,) * (2 * k))
    assert result.position == 0
    assert result.nibble_position == 0


def test_parse_wildcard_pattern():
    assert parse_wildcard_pattern("4xF0X") == (4, X, 15, 0, X)
    assert parse_wildcard_pattern("") == ()
    assert parse_wildcard_pattern("4g") is None


def test_to_nibbles_high_first():
    assert to_nibbles(b"\x12\xab") == [1, 2, 0xa, 0xb]
