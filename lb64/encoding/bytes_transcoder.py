"""Byte sequence transcoding.

This module encodes byte sequences to Base64 text and back.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from lb64.config import AlphabetConfig
from lb64.exceptions import TrailingBitsError

from . import codec

logger = logging.getLogger(__name__)

BYTE_BITS = 8

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class ByteTranscoder:
    """Byte transcoding under any alphabet configuration.

    Bytes are read as one big-endian bit stream, so under STANDARD the output
    matches RFC 4648: ``b"He"`` encodes to ``"SGU="``.
    """

    @staticmethod
    def encode(data: BytesLike, config: AlphabetConfig) -> str:
        """Encode bytes to Base64 text.

        Args:
            data: Bytes, or any iterable of integers in 0..255.
            config: The alphabet configuration.

        Returns:
            The encoded text, padded if the configuration pads.

        Raises:
            ValueError: If an integer is outside 0..255.
        """
        data = bytes(data)
        encoded = codec.encode_bits(int.from_bytes(data, "big"), len(data) * BYTE_BITS, config)
        return codec.pad(encoded, config)

    @staticmethod
    def decode(text: str, config: AlphabetConfig) -> bytes:
        """Decode Base64 text to bytes.

        Bits that do not complete a byte are dropped and must be zero.

        Args:
            text: The Base64 text.
            config: The configuration the text was produced under.

        Returns:
            The decoded bytes; empty text decodes to ``b""``.

        Raises:
            InvalidSymbolError: If a symbol is not in the alphabet.
            InvalidPaddingError: If padding is malformed.
            TrailingBitsError: If the dropped bits are not all zero.
        """
        groups = codec.decode_groups(text, config)
        bit_count = len(groups) * codec.GROUP_BITS
        byte_count, leftover = divmod(bit_count, BYTE_BITS)

        value = codec.join_groups(groups)
        if value & ((1 << leftover) - 1):
            logger.debug("Rejected nonzero trailing bits in %r", text)
            raise TrailingBitsError(f"the last {leftover} bits of {text!r} are not zero")
        return (value >> leftover).to_bytes(byte_count, "big")
