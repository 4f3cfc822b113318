"""Encoding package.

This package provides the bit-packing codec and the transcoders built on it:
byte sequences, unsigned integers and random text.
"""

from .bytes_transcoder import ByteTranscoder
from .generator import RandomValueGenerator
from .unsigned import MAX_UNSIGNED, UnsignedTranscoder

__all__ = [
    "ByteTranscoder",
    "MAX_UNSIGNED",
    "RandomValueGenerator",
    "UnsignedTranscoder",
]
