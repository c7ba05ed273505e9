"""Shared constants for cursorlex.

This module provides centralized configuration constants used across
the source and syntax packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Lexical tables: Brackets, quotes, and special float words
- Input limits: DoS prevention via size constraints
- Buffering: Chunk sizes for stream-backed sources

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Lexical tables
    "BRACKET_PAIRS",
    "QUOTE_CHARS",
    "SPECIAL_FLOAT_WORDS",
    "SPECIAL_FLOAT_STARTS",
    "DECIMAL_SPECIAL_STARTS",
    "ASCII_DIGITS",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Buffering
    "DEFAULT_CHUNK_SIZE",
]

# ============================================================================
# LEXICAL TABLES
# ============================================================================

# Opening bracket -> closing bracket.
# Read-only: shared by every parse_brackets call.
BRACKET_PAIRS = MappingProxyType({"(": ")", "[": "]", "{": "}", "<": ">"})

# Characters that open (and close) a quoted string.
QUOTE_CHARS: tuple[str, ...] = ("'", '"')

# Case-folded words accepted as float literals (+/- inf, nan).
SPECIAL_FLOAT_WORDS: frozenset[str] = frozenset({"INF", "INFINITY", "NAN"})

# First letters that switch parse_num into special-word mode for float kinds.
SPECIAL_FLOAT_STARTS: frozenset[str] = frozenset("iInN")

# Decimal also spells signalling NaN as sNaN.
DECIMAL_SPECIAL_STARTS: frozenset[str] = frozenset("iInNsS")

# ASCII digits only. str.isdigit() accepts Unicode digits like ² which
# int() and float() reject.
ASCII_DIGITS: str = "0123456789"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum in-memory source size in characters (10 M).
# Prevents unbounded memory allocation from accidental huge inputs.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# BUFFERING
# ============================================================================

# Characters requested from a text stream per read() call.
DEFAULT_CHUNK_SIZE: int = 4096
