"""The Base64Value type.

A Base64Value pairs encoded text with the AlphabetConfig it was produced
under, so that decoding always uses the right alphabet.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from lb64.config import AlphabetConfig
from lb64.encoding import ByteTranscoder, RandomValueGenerator, UnsignedTranscoder
from lb64.encoding import codec
from lb64.encoding.bytes_transcoder import BytesLike
from lb64.interfaces.random import IRandomSource

logger = logging.getLogger(__name__)


class Base64Value:
    """Base64 text bound to its alphabet configuration.

    Values are immutable. Two values are equal when their configurations have
    the same alphabet and padding symbol and their texts are identical; values
    under different configurations are never equal, even with the same text.
    Ordering compares numeric magnitude instead, ignoring padding and leading
    zero digits, so it is meaningful across configurations. Two values of the
    same magnitude under different configurations are neither equal nor less
    than each other, but both <= and >= hold.

    Example:
        >>> from lb64 import STANDARD, Base64Value
        >>> value = Base64Value.new_encode_bytes(b"Hel", STANDARD)
        >>> value.as_str()
        'SGVs'
        >>> value.decode_to_bytes()
        b'Hel'
    """

    __slots__ = ("_text", "_config")

    def __init__(self, encoded_text: str, config: AlphabetConfig) -> None:
        """Bind text to a configuration after checking it.

        Args:
            encoded_text: Alphabet symbols, optionally followed by padding.
            config: The configuration of the text.

        Raises:
            InvalidSymbolError: If a symbol is not in the alphabet.
            InvalidPaddingError: If padding is malformed.
        """
        codec.decode_groups(encoded_text, config)
        self._text = encoded_text
        self._config = config

    @classmethod
    def from_string(cls, encoded_text: str, config: AlphabetConfig) -> Base64Value:
        """Parse existing Base64 text. Same checks as the constructor."""
        return cls(encoded_text, config)

    @classmethod
    def new_encode_bytes(cls, data: BytesLike, config: AlphabetConfig) -> Base64Value:
        """Encode a byte sequence."""
        return cls(ByteTranscoder.encode(data, config), config)

    @classmethod
    def new_encode_unsigned(cls, value: int, config: AlphabetConfig) -> Base64Value:
        """Encode an unsigned integer of at most 128 bits.

        Raises:
            TypeError: If ``value`` is not an int.
            ValueError: If ``value`` is negative or too wide.
        """
        return cls(UnsignedTranscoder.encode(value, config), config)

    @classmethod
    def random(
        cls,
        symbol_length: int,
        config: AlphabetConfig,
        source: Optional[IRandomSource] = None,
    ) -> Base64Value:
        """Generate a value of ``symbol_length`` random alphabet symbols.

        Args:
            symbol_length: Number of symbols; zero yields an empty value.
            config: The configuration to sample.
            source: Optional random source, e.g. a seeded ``random.Random``.

        Returns:
            An unpadded value of exactly ``symbol_length`` symbols.
        """
        return cls(RandomValueGenerator(source).generate(symbol_length, config), config)

    @property
    def encoded_text(self) -> str:
        return self._text

    @property
    def config(self) -> AlphabetConfig:
        return self._config

    def as_str(self) -> str:
        return self._text

    def decode_to_bytes(self) -> bytes:
        """Decode to bytes.

        Raises:
            TrailingBitsError: If the text does not end on a byte boundary
                with zero bits.
        """
        return ByteTranscoder.decode(self._text, self._config)

    def decode_to_unsigned(self) -> int:
        """Decode to an unsigned integer.

        Raises:
            UnsignedOverflowError: If the value needs more than 128 bits.
        """
        return UnsignedTranscoder.decode(self._text, self._config)

    def with_config(self, config: AlphabetConfig) -> Base64Value:
        """Express the same 6-bit groups under another configuration.

        Padding is dropped and recomputed for the target configuration.
        """
        groups = codec.decode_groups(self._text, self._config)
        text = "".join(config.symbol_at(group) for group in groups)
        logger.debug("Converting %r from %s to %s", self._text, self._config.name, config.name)
        return Base64Value(codec.pad(text, config), config)

    def expand_to(self, length: int) -> Base64Value:
        """Prepend zero digits until the numeral has ``length`` digits.

        The numeric value is unchanged. Under a padded configuration the
        result is left-filled further to a multiple of four digits. A value
        already at least ``length`` digits long is returned re-filled but
        otherwise unchanged.
        """
        digits = codec.strip_padding(self._text, self._config)
        digits = digits.rjust(length, self._config.symbol_at(0))
        return Base64Value(codec.fill_numeral(digits, self._config), self._config)

    def truncate_to(self, length: int) -> Base64Value:
        """Keep only the ``length`` least significant digits.

        Under a padded configuration the kept digits are left-filled with zero
        digits to a multiple of four.

        Raises:
            ValueError: If ``length`` is less than 1.
        """
        if length < 1:
            raise ValueError(f"length must be at least 1, got {length}")
        digits = codec.strip_padding(self._text, self._config)[-length:]
        return Base64Value(codec.fill_numeral(digits, self._config), self._config)

    def _magnitude(self) -> Tuple[int, Tuple[int, ...]]:
        groups = codec.decode_groups(self._text, self._config)
        start = 0
        while start < len(groups) and groups[start] == 0:
            start += 1
        significant = tuple(groups[start:])
        return len(significant), significant

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Base64Value):
            return NotImplemented
        return self._config == other._config and self._text == other._text

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Base64Value):
            return NotImplemented
        return self._magnitude() < other._magnitude()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Base64Value):
            return NotImplemented
        return self._magnitude() <= other._magnitude()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Base64Value):
            return NotImplemented
        return self._magnitude() > other._magnitude()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Base64Value):
            return NotImplemented
        return self._magnitude() >= other._magnitude()

    def __hash__(self) -> int:
        return hash((self._text, self._config))

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        label = self._config.name or str(self._config)
        return f"Base64Value({self._text!r}, {label})"
