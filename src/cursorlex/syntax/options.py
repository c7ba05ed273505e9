"""Configuration for string and bracket primitives.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from cursorlex.constants import QUOTE_CHARS

__all__ = ["DEFAULT_OPTIONS", "BracketNesting", "ParseOptions"]


class BracketNesting(StrEnum):
    """How parse_brackets finds the end of a span.

    DEPTH: Same-kind opening brackets increase the level, so
        ``(a(b)c)`` yields ``a(b)c``.
    FIRST_CLOSE: Only closing brackets are counted, so the first closing
        bracket ends the span and ``(a(b)c)`` yields ``a(b``.
    """

    DEPTH = "depth"
    FIRST_CLOSE = "first_close"


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Immutable options for parse_string and parse_brackets.

    All fields have sensible defaults; ``ParseOptions()`` is what the
    primitives use when no options are passed.

    Attributes:
        bracket_nesting: Span termination rule for parse_brackets
            (default: BracketNesting.DEPTH).
        quote_chars: Characters that open and close a quoted string
            (default: ``'`` and ``"``).

    Example:
        >>> options = ParseOptions(bracket_nesting=BracketNesting.FIRST_CLOSE)
        >>> parse_brackets(StrSource("(a(b)c)"), options)
        'a(b'
    """

    bracket_nesting: BracketNesting = BracketNesting.DEPTH
    quote_chars: tuple[str, ...] = QUOTE_CHARS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If quote_chars is empty or holds anything other
                than single characters.
        """
        if not self.quote_chars:
            msg = "quote_chars must not be empty"
            raise ValueError(msg)
        if any(len(q) != 1 for q in self.quote_chars):
            msg = "quote_chars must contain single characters"
            raise ValueError(msg)


DEFAULT_OPTIONS = ParseOptions()
