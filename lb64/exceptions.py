"""Exception classes for lb64.

This module defines the exception types raised by alphabet configuration and
by decoding. Encoding never raises these for well-formed input.
"""


class Lb64Error(Exception):
    """Base exception class for all lb64 errors."""

    pass


class ConfigError(Lb64Error):
    """Exception raised when an alphabet configuration is invalid.

    Only raised while a configuration is being constructed.
    """

    pass


class InvalidLengthError(ConfigError):
    """Exception raised when an alphabet does not have exactly 64 symbols."""

    pass


class DuplicateSymbolError(ConfigError):
    """Exception raised when an alphabet repeats a symbol."""

    pass


class PaddingCollisionError(ConfigError):
    """Exception raised when the padding symbol is also an alphabet symbol."""

    pass


class UnrepresentableSymbolError(ConfigError):
    """Exception raised when a symbol is not a single printable character."""

    pass


class DecodeError(Lb64Error):
    """Exception raised when Base64 text cannot be decoded."""

    pass


class InvalidSymbolError(DecodeError):
    """Exception raised when text contains a symbol outside the alphabet.

    Attributes:
        symbol: The offending character.
        position: Its index in the text.
    """

    def __init__(self, symbol: str, position: int) -> None:
        super().__init__(f"invalid symbol {symbol!r} at position {position}")
        self.symbol = symbol
        self.position = position


class InvalidPaddingError(DecodeError):
    """Exception raised for a malformed padding count or misplaced padding."""

    pass


class TrailingBitsError(DecodeError):
    """Exception raised when bits left over after the last byte are not zero."""

    pass


class UnsignedOverflowError(DecodeError):
    """Exception raised when decoded text does not fit in 128 unsigned bits."""

    pass
