"""Bit-packing engine shared by the byte and unsigned integer transcoders.

Encoding reads a bit stream most significant bit first, six bits per symbol.
Decoding validates padding, maps symbols back to 6-bit groups and leaves it to
the caller to decide how many of the recovered bits are meaningful.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import List

from lb64.config import AlphabetConfig
from lb64.exceptions import InvalidPaddingError, InvalidSymbolError

logger = logging.getLogger(__name__)

GROUP_BITS = 6
GROUP_MASK = (1 << GROUP_BITS) - 1
QUANTUM_SYMBOLS = 4
MAX_PADDING = 2


def encode_bits(value: int, bit_count: int, config: AlphabetConfig) -> str:
    """Encode the low ``bit_count`` bits of ``value`` as alphabet symbols.

    When ``bit_count`` is not a multiple of six the last group is completed
    with zero bits after the final input bit.

    Args:
        value: The bit stream as a non-negative integer.
        bit_count: Number of meaningful bits in ``value``.
        config: The alphabet to encode with.

    Returns:
        The symbols, without padding.
    """
    remainder = bit_count % GROUP_BITS
    if remainder:
        fill = GROUP_BITS - remainder
        value <<= fill
        bit_count += fill

    return "".join(
        config.symbol_at((value >> shift) & GROUP_MASK)
        for shift in range(bit_count - GROUP_BITS, -1, -GROUP_BITS)
    )


def pad(text: str, config: AlphabetConfig) -> str:
    """Append padding symbols up to a multiple of four if the config pads.

    Empty text is never padded, and neither is text one symbol past a full
    quantum since no valid padding exists for it.
    """
    if not config.padded or not text:
        return text
    missing = -len(text) % QUANTUM_SYMBOLS
    if missing > MAX_PADDING:
        return text
    return text + config.padding_symbol * missing


def fill_numeral(digits: str, config: AlphabetConfig) -> str:
    """Left-fill a base-64 numeral with the zero symbol to a multiple of four.

    Only applies to padded configurations, where a numeral must never need
    trailing padding. Unpadded configurations get the digits back unchanged.
    """
    if not config.padded:
        return digits
    width = len(digits) + -len(digits) % QUANTUM_SYMBOLS
    return digits.rjust(width, config.symbol_at(0))


def strip_padding(text: str, config: AlphabetConfig) -> str:
    """Remove trailing padding, checking its count and position.

    Args:
        text: Base64 text, possibly padded.
        config: The configuration the text was produced under.

    Returns:
        The text without padding.

    Raises:
        InvalidPaddingError: If there are more than two padding symbols, the
            padded text is not a multiple of four long, or a padding symbol
            appears before the end.
    """
    if not config.padded:
        return text

    body = text.rstrip(config.padding_symbol)
    count = len(text) - len(body)
    if count > MAX_PADDING:
        logger.debug("Rejected %d padding symbols in %r", count, text)
        raise InvalidPaddingError(f"expected at most {MAX_PADDING} padding symbols, got {count}")
    if count and len(text) % QUANTUM_SYMBOLS:
        raise InvalidPaddingError(
            f"padded text length {len(text)} is not a multiple of {QUANTUM_SYMBOLS}"
        )
    position = body.find(config.padding_symbol)
    if position != -1:
        logger.debug("Rejected padding at position %d in %r", position, text)
        raise InvalidPaddingError(f"padding symbol at position {position} before end of text")
    return body


def decode_groups(text: str, config: AlphabetConfig) -> List[int]:
    """Map Base64 text back to its 6-bit groups.

    Raises:
        InvalidPaddingError: See strip_padding.
        InvalidSymbolError: If a symbol is not in the alphabet.
    """
    groups = []
    for position, symbol in enumerate(strip_padding(text, config)):
        index = config.index_of(symbol)
        if index is None:
            logger.debug("Rejected symbol %r at position %d", symbol, position)
            raise InvalidSymbolError(symbol, position)
        groups.append(index)
    return groups


def join_groups(groups: List[int]) -> int:
    """Reassemble 6-bit groups, first group most significant."""
    return reduce(lambda value, group: (value << GROUP_BITS) | group, groups, 0)
