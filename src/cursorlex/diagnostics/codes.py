"""Diagnostic codes and data structures.

Defines error kinds, error codes, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorKind",
]


class ErrorKind(StrEnum):
    """Coarse error classification used for control flow.

    Inherits from ``StrEnum`` so that ``str(kind)`` and direct string
    comparisons work without accessing ``.value``.

    Kinds:
        EMPTY: Input exhausted where more was required
        UNEXPECTED: A character did not match the expected grammar
        GENERIC: Message-only failure (malformed number, cursor misuse)
    """

    EMPTY = "empty"
    UNEXPECTED = "unexpected"
    GENERIC = "generic"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by kind:
        1000-1999: Input exhausted (ErrorKind.EMPTY)
        2000-2999: Unexpected characters (ErrorKind.UNEXPECTED)
        3000-3999: Generic failures (ErrorKind.GENERIC)
    """

    # Input exhausted (1000-1999)
    SOURCE_EMPTY = 1001
    UNTERMINATED_STRING = 1002
    UNTERMINATED_BRACKETS = 1003
    EMPTY_PATTERN = 1004

    # Unexpected characters (2000-2999)
    NOT_A_BRACKET = 2001

    # Generic failures (3000-3999)
    INVALID_NUMBER = 3001
    INVALID_FLOAT = 3002
    NOT_A_SYMBOL = 3003
    CURSOR_IN_USE = 3004
    INVALID_RANGE = 3005
    SOURCE_READ_FAILED = 3006

    @property
    def kind(self) -> ErrorKind:
        """ErrorKind implied by the code range."""
        if self.value < 2000:
            return ErrorKind.EMPTY
        if self.value < 3000:
            return ErrorKind.UNEXPECTED
        return ErrorKind.GENERIC


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        position: Lookahead offset where the error was detected (if known)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    position: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def kind(self) -> ErrorKind:
        """ErrorKind of the diagnostic code."""
        return self.code.kind
