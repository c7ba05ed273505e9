"""Hypothesis strategies for cursorlex property-based testing.

Usage:
    from tests.strategies import tokens, source_factories
"""

from .lexical import (
    WHITESPACE,
    WORD_CHARS,
    arbitrary_text,
    decimals_any,
    f32_values,
    floats_any,
    source_factories,
    symbols,
    tokens,
    whitespace_runs,
    words,
)

__all__ = [
    "WHITESPACE",
    "WORD_CHARS",
    "arbitrary_text",
    "decimals_any",
    "f32_values",
    "floats_any",
    "source_factories",
    "symbols",
    "tokens",
    "whitespace_runs",
    "words",
]
