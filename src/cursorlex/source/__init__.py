"""Backing stores for the lexical primitives.

Exports:
    Source: Protocol every backing store implements
    StrSource: In-memory string source
    TextIOSource: Lazily buffered text stream source
"""

from .base import Source
from .stream import TextIOSource
from .string import StrSource

__all__ = ["Source", "StrSource", "TextIOSource"]
