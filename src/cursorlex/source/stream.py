"""Source over a text stream, read lazily in chunks.

The whole input stays addressable through the lookahead window, but only
uncommitted characters are kept in memory. Committed characters are
dropped from the buffer on consume().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TextIO

from cursorlex.constants import DEFAULT_CHUNK_SIZE
from cursorlex.diagnostics import ErrorTemplate, ParseError

__all__ = ["TextIOSource"]

logger = logging.getLogger(__name__)


class TextIOSource:
    """Source that pulls characters from a TextIO on demand.

    Read failures (OSError, UnicodeDecodeError) are wrapped in a ParseError
    whose cause is the original exception. The stream is not closed by
    the source.

    Example:
        >>> with open("tokens.txt", encoding="utf-8") as f:
        ...     source = TextIOSource(f)
        ...     parse_word(source)
        'first'
    """

    __slots__ = ("_buffer", "_chunk_size", "_committed", "_eof", "_lookahead", "_stream")

    def __init__(self, stream: TextIO, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Wrap stream.

        Raises:
            ValueError: If chunk_size is not positive
        """
        if chunk_size <= 0:
            msg = "chunk_size must be positive"
            raise ValueError(msg)
        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer = ""
        self._eof = False
        self._committed = 0
        self._lookahead = 0

    @property
    def position(self) -> int:
        """Absolute offset of the committed position."""
        return self._committed

    def _fill(self, index: int) -> bool:
        """Read until the buffer holds index, return False at end of input."""
        while index >= len(self._buffer):
            if self._eof:
                return False
            try:
                chunk = self._stream.read(self._chunk_size)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Failed to read from stream at offset %d: %s", self._committed, e)
                raise ParseError(ErrorTemplate.source_read_failed(str(e)), cause=e) from e
            if not chunk:
                self._eof = True
                logger.debug(
                    "Stream exhausted after %d characters", self._committed + len(self._buffer)
                )
                return False
            logger.debug("Read %d characters from stream", len(chunk))
            self._buffer += chunk
        return True

    def peek(self) -> tuple[int, str] | None:
        if not self._fill(self._lookahead):
            return None
        return (self._lookahead, self._buffer[self._lookahead])

    def next(self) -> tuple[int, str] | None:
        item = self.peek()
        if item is not None:
            self._lookahead += 1
        return item

    def read_substr(self, start: int, length: int) -> str:
        if start < 0 or length < 0 or start + length > self._lookahead:
            raise ParseError(ErrorTemplate.invalid_range(start, length, self._lookahead))
        return self._buffer[start : start + length]

    def get_pointer_loc(self) -> int:
        return self._lookahead

    def consume(self, n: int) -> None:
        if n < 0 or n > self._lookahead:
            raise ParseError(ErrorTemplate.invalid_range(0, n, self._lookahead))
        self._buffer = self._buffer[n:]
        self._committed += n
        self._lookahead = 0

    def reset_pointer_loc(self) -> None:
        self._lookahead = 0

    def __repr__(self) -> str:
        return (
            f"TextIOSource(position={self._committed}, "
            f"lookahead={self._lookahead}, buffered={len(self._buffer)})"
        )
