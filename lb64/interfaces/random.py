"""Randomness interface for lb64.

This module defines the protocol a random source must satisfy to drive the
random value generator.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class IRandomSource(Protocol):
    """Interface for uniform selection from a sequence.

    ``secrets.SystemRandom`` and a seeded ``random.Random`` both satisfy it.
    """

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element uniformly at random.

        Args:
            seq: A non-empty sequence.

        Returns:
            The chosen element.
        """
        ...
