"""Whitespace handling for the lexical primitives.

Whitespace is anything ``str.isspace()`` accepts.

skip_whitespace moves lookahead only, so a primitive can fold the skipped
run into its own commit. consume_whitespace commits the run on its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cursorlex.core import atomic, with_context

if TYPE_CHECKING:
    from cursorlex.source import Source

__all__ = ["consume_whitespace", "skip_whitespace"]


@with_context("could not skip whitespace")
def skip_whitespace(source: Source) -> None:
    """Advance lookahead past a maximal whitespace run (uncommitted).

    Example:
        >>> source = StrSource("   x")
        >>> skip_whitespace(source)
        >>> source.get_pointer_loc()
        3
    """
    while (item := source.peek()) is not None and item[1].isspace():
        source.next()


@atomic("could not consume whitespace")
def consume_whitespace(source: Source) -> None:
    """Skip and commit leading whitespace, including up to end of input."""
    skip_whitespace(source)
    source.consume(source.get_pointer_loc())
