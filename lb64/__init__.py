"""lb64 Python implementation.

This package converts byte sequences and unsigned integers to and from Base64
text under well-known or caller-defined alphabets, and wraps the result in a
value type that remembers its alphabet.

Main Components:
    - AlphabetConfig: A validated, immutable Base64 variant
    - Base64Value: Encoded text bound to its configuration
    - ByteTranscoder / UnsignedTranscoder: The underlying transforms
    - RandomValueGenerator: Random text of a given length
    - Exceptions: Configuration and decoding errors

Example:
    >>> from lb64 import Base64Value, STANDARD
    >>> Base64Value.new_encode_bytes(b"Hello!", STANDARD).as_str()
    'SGVsbG8h'
"""

import logging

from lb64.config import (
    IMAP,
    MIME,
    STANDARD,
    URL_SAFE,
    URL_SAFE_NO_PADDING,
    URL_SAFE_PADDING,
    AlphabetConfig,
)
from lb64.encoding import (
    MAX_UNSIGNED,
    ByteTranscoder,
    RandomValueGenerator,
    UnsignedTranscoder,
)
from lb64.exceptions import (
    ConfigError,
    DecodeError,
    DuplicateSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
    InvalidSymbolError,
    Lb64Error,
    PaddingCollisionError,
    TrailingBitsError,
    UnrepresentableSymbolError,
    UnsignedOverflowError,
)
from lb64.value import Base64Value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "AlphabetConfig",
    "STANDARD",
    "URL_SAFE",
    "URL_SAFE_NO_PADDING",
    "URL_SAFE_PADDING",
    "MIME",
    "IMAP",
    # Values and transcoders
    "Base64Value",
    "ByteTranscoder",
    "UnsignedTranscoder",
    "RandomValueGenerator",
    "MAX_UNSIGNED",
    # Exceptions
    "Lb64Error",
    "ConfigError",
    "InvalidLengthError",
    "DuplicateSymbolError",
    "PaddingCollisionError",
    "UnrepresentableSymbolError",
    "DecodeError",
    "InvalidSymbolError",
    "InvalidPaddingError",
    "TrailingBitsError",
    "UnsignedOverflowError",
]
