"""Alphabet configurations for lb64.

An AlphabetConfig describes one Base64 variant: the 64 symbols standing for
the values 0 to 63 and an optional padding symbol. Configurations validate
themselves on construction and are immutable afterwards, so the built-in
constants below can be shared freely.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Union

from lb64.exceptions import (
    DuplicateSymbolError,
    InvalidLengthError,
    PaddingCollisionError,
    UnrepresentableSymbolError,
)

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 64

_ALPHANUMERIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


def _is_representable(symbol: str) -> bool:
    return len(symbol) == 1 and symbol.isprintable() and not symbol.isspace()


@dataclass(frozen=True)
class AlphabetConfig:
    """Configuration of a Base64 variant.

    Two configurations are equal when they have the same alphabet and padding
    symbol; the name is only a label.

    Attributes:
        alphabet: The 64 symbols, index 0 first.
        padding_symbol: Symbol appended to reach a multiple of four, or None.
        name: Optional display label.

    Raises:
        InvalidLengthError: If the alphabet does not have 64 entries.
        PaddingCollisionError: If the padding symbol is in the alphabet.
        UnrepresentableSymbolError: If a symbol is not a single printable,
            non-whitespace character.
        DuplicateSymbolError: If an alphabet symbol is repeated.
    """

    alphabet: str
    padding_symbol: Optional[str] = None
    name: Optional[str] = field(default=None, compare=False)
    _indices: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        symbols = self.alphabet
        if not isinstance(symbols, str):
            symbols = tuple(symbols)

        if len(symbols) != ALPHABET_SIZE:
            logger.debug("Rejected alphabet of length %d", len(symbols))
            raise InvalidLengthError(
                f"alphabet must have {ALPHABET_SIZE} symbols, got {len(symbols)}"
            )
        if not isinstance(symbols, str):
            if not all(isinstance(symbol, str) and len(symbol) == 1 for symbol in symbols):
                raise UnrepresentableSymbolError("alphabet entries must be single characters")
            symbols = "".join(symbols)
            object.__setattr__(self, "alphabet", symbols)

        padding = self.padding_symbol
        if padding is not None and not (isinstance(padding, str) and len(padding) == 1):
            raise UnrepresentableSymbolError(
                f"padding symbol {padding!r} is not a single character"
            )
        if padding is not None and padding in symbols:
            raise PaddingCollisionError(f"padding symbol {padding!r} is already in the alphabet")
        for symbol in symbols:
            if not _is_representable(symbol):
                raise UnrepresentableSymbolError(f"alphabet symbol {symbol!r} is not representable")
        if padding is not None and not _is_representable(padding):
            raise UnrepresentableSymbolError(f"padding symbol {padding!r} is not representable")

        indices = {symbol: index for index, symbol in enumerate(symbols)}
        if len(indices) != ALPHABET_SIZE:
            duplicates = sorted({symbol for symbol in symbols if symbols.count(symbol) > 1})
            logger.debug("Rejected alphabet with duplicates %r", duplicates)
            raise DuplicateSymbolError(f"alphabet repeats {''.join(duplicates)!r}")
        object.__setattr__(self, "_indices", indices)

    @classmethod
    def validate(
        cls,
        alphabet: Union[str, Iterable[str]],
        padding_symbol: Optional[str] = None,
        name: Optional[str] = None,
    ) -> AlphabetConfig:
        """Build a configuration for a custom alphabet.

        Args:
            alphabet: A 64 character string or 64 single-character strings.
            padding_symbol: Optional padding symbol.
            name: Optional display label.

        Returns:
            The validated configuration.

        Raises:
            ConfigError: One of its subclasses, see the class docstring.
        """
        return cls(alphabet=alphabet, padding_symbol=padding_symbol, name=name)

    @property
    def padded(self) -> bool:
        return self.padding_symbol is not None

    def symbol_at(self, value: int) -> str:
        """Return the symbol for a 6-bit value."""
        return self.alphabet[value]

    def index_of(self, symbol: str) -> Optional[int]:
        """Return the 6-bit value of a symbol, or None if it is not in the alphabet."""
        return self._indices.get(symbol)

    def with_padding(self, padding_symbol: Optional[str]) -> AlphabetConfig:
        """Return a validated, unnamed copy using a different padding symbol."""
        return dataclasses.replace(self, padding_symbol=padding_symbol, name=None)

    def __str__(self) -> str:
        return self.alphabet + (self.padding_symbol or "")


STANDARD = AlphabetConfig(_ALPHANUMERIC + "+/", "=", name="STANDARD")
URL_SAFE = AlphabetConfig(_ALPHANUMERIC + "-_", None, name="URL_SAFE")
URL_SAFE_NO_PADDING = URL_SAFE
URL_SAFE_PADDING = AlphabetConfig(_ALPHANUMERIC + "-_", "=", name="URL_SAFE_PADDING")
# Same symbols as STANDARD; line wrapping is not applied.
MIME = AlphabetConfig(_ALPHANUMERIC + "+/", "=", name="MIME")
IMAP = AlphabetConfig(_ALPHANUMERIC + "+,", None, name="IMAP")
