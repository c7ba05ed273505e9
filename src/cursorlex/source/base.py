"""Cursor contract every backing store must satisfy.

A Source has two positions:
    - committed: durable, only moved forward by consume()
    - lookahead: offset past committed, moved by next(), discarded by
      reset_pointer_loc()

Positions returned from peek()/next() and accepted by read_substr() are
lookahead offsets, i.e. relative to the committed position.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Protocol

__all__ = ["Source"]


class Source(Protocol):
    """Protocol for positioned, rollback-capable character input.

    Structural typing: any object with these six methods can be handed
    to the primitives.

    Only next() and consume() change observable state. peek() and
    reset_pointer_loc() never move the committed position.

    Example:
        >>> source = StrSource("ab")
        >>> source.next()
        (0, 'a')
        >>> source.peek()
        (1, 'b')
        >>> source.reset_pointer_loc()
        >>> source.next()
        (0, 'a')
        >>> source.consume(1)
        >>> source.peek()
        (0, 'b')
    """

    def peek(self) -> tuple[int, str] | None:
        """Return the next (offset, char) without advancing lookahead.

        Returns:
            None at end of input

        Raises:
            ParseError: If the backing store fails to deliver characters
        """

    def next(self) -> tuple[int, str] | None:
        """Return the next (offset, char) and advance lookahead past it.

        Returns:
            None at end of input (lookahead unchanged)

        Raises:
            ParseError: If the backing store fails to deliver characters
        """

    def read_substr(self, start: int, length: int) -> str:
        """Copy a range already passed over by lookahead.

        Raises:
            ParseError: If the range is negative or extends past lookahead
        """

    def get_pointer_loc(self) -> int:
        """Current lookahead offset relative to the last commit."""

    def consume(self, n: int) -> None:
        """Commit the first n lookahead characters and clear lookahead.

        Raises:
            ParseError: If n is negative or larger than get_pointer_loc()
        """

    def reset_pointer_loc(self) -> None:
        """Discard all uncommitted lookahead."""
