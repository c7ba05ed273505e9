"""In-memory reference Source.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from cursorlex.constants import MAX_SOURCE_SIZE
from cursorlex.diagnostics import ErrorTemplate, ParseError

__all__ = ["StrSource"]


class StrSource:
    """Source backed by a Python string.

    Thread Safety:
        Not thread-safe. One parse in progress per instance.

    Example:
        >>> source = StrSource("hello world")
        >>> parse_word(source)
        'hello'
        >>> source.position
        5
    """

    __slots__ = ("_committed", "_lookahead", "_text")

    def __init__(self, text: str, *, max_size: int = MAX_SOURCE_SIZE) -> None:
        """Create a source over text.

        Raises:
            ValueError: If text is longer than max_size characters
        """
        if len(text) > max_size:
            msg = f"source of {len(text)} characters exceeds max_size {max_size}"
            raise ValueError(msg)
        self._text = text
        self._committed = 0
        self._lookahead = 0

    @property
    def position(self) -> int:
        """Absolute offset of the committed position."""
        return self._committed

    @property
    def remaining(self) -> str:
        """Uncommitted tail of the text."""
        return self._text[self._committed :]

    def peek(self) -> tuple[int, str] | None:
        index = self._committed + self._lookahead
        if index >= len(self._text):
            return None
        return (self._lookahead, self._text[index])

    def next(self) -> tuple[int, str] | None:
        item = self.peek()
        if item is not None:
            self._lookahead += 1
        return item

    def read_substr(self, start: int, length: int) -> str:
        if start < 0 or length < 0 or start + length > self._lookahead:
            raise ParseError(ErrorTemplate.invalid_range(start, length, self._lookahead))
        begin = self._committed + start
        return self._text[begin : begin + length]

    def get_pointer_loc(self) -> int:
        return self._lookahead

    def consume(self, n: int) -> None:
        if n < 0 or n > self._lookahead:
            raise ParseError(ErrorTemplate.invalid_range(0, n, self._lookahead))
        self._committed += n
        self._lookahead = 0

    def reset_pointer_loc(self) -> None:
        self._lookahead = 0

    def __repr__(self) -> str:
        return (
            f"StrSource(position={self._committed}, "
            f"lookahead={self._lookahead}, length={len(self._text)})"
        )
