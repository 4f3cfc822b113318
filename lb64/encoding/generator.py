"""Random Base64 text generation.

This module provides the RandomValueGenerator class for drawing syntactically
valid Base64 text of a given length.
"""

from __future__ import annotations

import secrets
from typing import Optional

from lb64.config import AlphabetConfig
from lb64.interfaces.random import IRandomSource


class RandomValueGenerator:
    """Generator of random Base64 text.

    Symbols are drawn independently and uniformly from the alphabet. The
    result is not the encoding of any particular bytes or integer and carries
    no padding.

    Attributes:
        source: The random source, ``secrets.SystemRandom()`` by default.
    """

    def __init__(self, source: Optional[IRandomSource] = None) -> None:
        self.source = source if source is not None else secrets.SystemRandom()

    def generate(self, symbol_length: int, config: AlphabetConfig) -> str:
        """Generate random Base64 text.

        Args:
            symbol_length: Number of symbols; zero yields empty text.
            config: The configuration whose alphabet is sampled.

        Returns:
            Text of exactly ``symbol_length`` alphabet symbols.

        Raises:
            TypeError: If ``symbol_length`` is not an int.
            ValueError: If ``symbol_length`` is negative.
        """
        if isinstance(symbol_length, bool) or not isinstance(symbol_length, int):
            raise TypeError(f"expected an int, got {type(symbol_length).__name__}")
        if symbol_length < 0:
            raise ValueError(f"symbol length must not be negative, got {symbol_length}")
        return "".join(self.source.choice(config.alphabet) for _ in range(symbol_length))
