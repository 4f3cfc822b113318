"""Unsigned integer transcoding.

Integers are written as base-64 numerals, most significant digit first, using
as few digits as possible. Under a padded configuration the numeral is
left-filled with the zero symbol to a multiple of four digits, so no trailing
padding is ever needed. This is a positional numeral, not the byte encoding
of the integer: 1 is "AAAB" under STANDARD while the byte 0x01 is "AQ==".
"""

from __future__ import annotations

import logging

from lb64.config import AlphabetConfig
from lb64.exceptions import UnsignedOverflowError

from . import codec

logger = logging.getLogger(__name__)

UNSIGNED_BITS = 128
MAX_UNSIGNED = (1 << UNSIGNED_BITS) - 1

# An accumulator at or above this bound would lose a set bit on the next shift.
_SHIFT_LIMIT = UNSIGNED_BITS - codec.GROUP_BITS


class UnsignedTranscoder:
    """Transcoding of unsigned integers up to 128 bits."""

    @staticmethod
    def encode(value: int, config: AlphabetConfig) -> str:
        """Encode an unsigned integer.

        Args:
            value: An integer in 0..2**128 - 1.
            config: The alphabet configuration.

        Returns:
            The base-64 numeral; zero encodes to a single zero symbol (four
            under a padded configuration).

        Raises:
            TypeError: If ``value`` is not an int.
            ValueError: If ``value`` is negative or wider than 128 bits.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an int, got {type(value).__name__}")
        if not 0 <= value <= MAX_UNSIGNED:
            raise ValueError(f"{value} is outside the unsigned {UNSIGNED_BITS}-bit range")

        digits = max(1, -(-value.bit_length() // codec.GROUP_BITS))
        numeral = codec.encode_bits(value, digits * codec.GROUP_BITS, config)
        return codec.fill_numeral(numeral, config)

    @staticmethod
    def decode(text: str, config: AlphabetConfig) -> int:
        """Decode a base-64 numeral to an unsigned integer.

        Args:
            text: The Base64 text; trailing padding is ignored.
            config: The configuration the text was produced under.

        Returns:
            The integer; empty text decodes to 0.

        Raises:
            InvalidSymbolError: If a symbol is not in the alphabet.
            InvalidPaddingError: If padding is malformed.
            UnsignedOverflowError: If the value needs more than 128 bits.
        """
        value = 0
        for group in codec.decode_groups(text, config):
            if value >> _SHIFT_LIMIT:
                logger.debug("Rejected %r: wider than %d bits", text, UNSIGNED_BITS)
                raise UnsignedOverflowError(
                    f"{text!r} does not fit in {UNSIGNED_BITS} unsigned bits"
                )
            value = (value << codec.GROUP_BITS) | group
        return value
