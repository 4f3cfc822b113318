"""Usage examples for lb64.

Each module has a ``main`` function and can be run with ``python -m``.
"""
