"""Parse exception hierarchy with structured diagnostics.

Every primitive failure is a ParseError. The error keeps its root message,
an optional wrapped cause, and a breadcrumb chain that grows as the error
propagates outward through decorated operations.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import ClassVar, Self

from .codes import Diagnostic, ErrorKind

__all__ = [
    "ParseError",
    "SourceEmptyError",
    "UnexpectedCharError",
]


class ParseError(Exception):
    """Base exception for all lexical parse failures.

    The kind is fixed by the concrete class: ``ParseError`` itself is
    GENERIC, ``SourceEmptyError`` is EMPTY, ``UnexpectedCharError`` is
    UNEXPECTED. Callers branch either on the class or on ``kind``.

    Attributes:
        message: Root message (unchanged by context attachment)
        diagnostic: Structured diagnostic information (optional)
        cause: Lower-level failure wrapped by this error (optional)
        context: Breadcrumb labels, innermost first

    Example:
        >>> err = ParseError("'x' is not a valid number")
        >>> err.add_context("could not parse num").context
        ('could not parse num',)
        >>> err.kind
        <ErrorKind.GENERIC: 'generic'>
    """

    kind: ClassVar[ErrorKind] = ErrorKind.GENERIC

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            cause: Lower-level exception being wrapped (e.g. OSError)
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            self.message = message.message
        else:
            self.diagnostic = None
            self.message = message
        super().__init__(self.message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
        self._context: list[str] = []

    @property
    def context(self) -> tuple[str, ...]:
        """Breadcrumb labels, innermost first."""
        return tuple(self._context)

    def add_context(self, label: str) -> Self:
        """Append an outer breadcrumb and return the same error."""
        self._context.append(label)
        return self

    def __str__(self) -> str:
        """Render message, breadcrumbs and cause in rust style."""
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, context={self.context!r})"


class SourceEmptyError(ParseError):
    """Input was exhausted where more characters were required.

    Raised when a primitive hits end of input before its grammar is
    satisfied, e.g. an unterminated string or an empty source.
    """

    kind = ErrorKind.EMPTY


class UnexpectedCharError(ParseError):
    """A character did not match the expected grammar.

    Example: parse_brackets finding 'x' where an opening bracket belongs.
    """

    kind = ErrorKind.UNEXPECTED
