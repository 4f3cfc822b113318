"""Tests for byte sequence transcoding."""

from __future__ import annotations

import base64
import random

import pytest

from lb64 import (
    IMAP,
    MIME,
    STANDARD,
    URL_SAFE,
    URL_SAFE_PADDING,
    ByteTranscoder,
    InvalidPaddingError,
    InvalidSymbolError,
    TrailingBitsError,
)

BUILTIN_CONFIGS = [STANDARD, URL_SAFE, URL_SAFE_PADDING, MIME, IMAP]


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", ""),
        (b"H", "SA=="),
        (b"He", "SGU="),
        (b"Hel", "SGVs"),
        (b"Hello!", "SGVsbG8h"),
        (b"\x00", "AA=="),
        (b"\xfb\xff", "+/8="),
    ],
)
def test_encode_standard(data: bytes, expected: str) -> None:
    """Test RFC 4648 vectors under STANDARD."""
    assert ByteTranscoder.encode(data, STANDARD) == expected


def test_encode_variants() -> None:
    """Test the variant symbols and padding for the same input."""
    assert ByteTranscoder.encode(b"\xfb\xff", URL_SAFE) == "-_8"
    assert ByteTranscoder.encode(b"\xfb\xff", URL_SAFE_PADDING) == "-_8="
    assert ByteTranscoder.encode(b"\xfb\xff", IMAP) == "+,8"
    assert ByteTranscoder.encode(b"\xfb\xff", MIME) == "+/8="


def test_encode_accepts_iterables_of_ints() -> None:
    """Test that lists of byte values and bytearrays encode like bytes."""
    assert ByteTranscoder.encode([72, 101, 108], STANDARD) == "SGVs"
    assert ByteTranscoder.encode(bytearray(b"He"), STANDARD) == "SGU="


def test_encode_rejects_out_of_range_values() -> None:
    """Test that integers above 255 are refused."""
    with pytest.raises(ValueError):
        ByteTranscoder.encode([256], STANDARD)


def test_matches_standard_library() -> None:
    """Test agreement with the base64 module on random input."""
    rng = random.Random(1234)
    for length in range(40):
        data = bytes(rng.randrange(256) for _ in range(length))
        expected = base64.b64encode(data).decode("ascii")
        assert ByteTranscoder.encode(data, STANDARD) == expected
        assert ByteTranscoder.decode(expected, STANDARD) == data


@pytest.mark.parametrize("config", BUILTIN_CONFIGS, ids=lambda config: config.name)
def test_round_trip(config) -> None:
    """Test decode(encode(b)) == b for lengths covering every remainder."""
    rng = random.Random(99)
    for length in range(17):
        data = bytes(rng.randrange(256) for _ in range(length))
        assert ByteTranscoder.decode(ByteTranscoder.encode(data, config), config) == data


def test_decode_empty() -> None:
    """Test that empty text decodes to empty bytes."""
    assert ByteTranscoder.decode("", STANDARD) == b""


def test_decode_accepts_missing_padding() -> None:
    """Test that unpadded text is accepted under a padded config."""
    assert ByteTranscoder.decode("SGU", STANDARD) == b"He"


def test_decode_rejects_nonzero_trailing_bits() -> None:
    """Test that corrupted fractional bits are reported."""
    with pytest.raises(TrailingBitsError):
        ByteTranscoder.decode("SB==", STANDARD)
    with pytest.raises(TrailingBitsError):
        ByteTranscoder.decode("B", URL_SAFE)


def test_decode_single_zero_symbol() -> None:
    """Test that six zero bits carry no byte."""
    assert ByteTranscoder.decode("A", URL_SAFE) == b""


def test_decode_rejects_invalid_symbol() -> None:
    """Test that symbols from another variant are rejected."""
    with pytest.raises(InvalidSymbolError):
        ByteTranscoder.decode("-_8=", STANDARD)


def test_decode_rejects_bad_padding() -> None:
    """Test that three padding symbols are rejected."""
    with pytest.raises(InvalidPaddingError):
        ByteTranscoder.decode("S===", STANDARD)
