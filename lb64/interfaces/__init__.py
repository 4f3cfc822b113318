"""lb64 interfaces package.

This package provides protocol definitions for pluggable collaborators.
"""

from .random import IRandomSource

__all__ = [
    "IRandomSource",
]
