"""Diagnostic formatting service.

Centralizes error output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import ParseError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render ParseError objects for humans or tools.

    The root message always comes first, followed by the breadcrumb
    chain innermost first, then the wrapped cause and hint.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate messages to max_content_length
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum message length when sanitizing

    Example:
        >>> err = ParseError(ErrorTemplate.invalid_number("1x"))
        >>> err = err.add_context("could not parse num")
        >>> print(DiagnosticFormatter().format(err))
        error[INVALID_NUMBER]: '1x' is not a valid number
          = context: could not parse num

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(err))
        INVALID_NUMBER: '1x' is not a valid number (context: could not parse num)
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, error: ParseError) -> str:
        """Format a single error.

        Args:
            error: ParseError to format

        Returns:
            Formatted error string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(error)
            case OutputFormat.SIMPLE:
                return self._format_simple(error)
            case OutputFormat.JSON:
                return self._format_json(error)

    def format_all(self, errors: Iterable[ParseError]) -> str:
        """Format multiple errors separated by blank lines."""
        return "\n\n".join(self.format(e) for e in errors)

    @staticmethod
    def _code_name(error: ParseError) -> str:
        if error.diagnostic is not None:
            return error.diagnostic.code.name
        return error.kind.name

    def _format_rust(self, error: ParseError) -> str:
        """Format error in Rust compiler style.

        Example output:
            error[UNTERMINATED_STRING]: source ended before the closing " of the string
              --> offset 4
              = context: could not parse string
              = help: Add a closing "
        """
        severity = "error"
        if self.color:
            severity = f"\033[1;31m{severity}\033[0m"  # Bold red

        message = self._maybe_sanitize(error.message)
        parts = [f"{severity}[{self._code_name(error)}]: {message}"]

        diagnostic = error.diagnostic
        if diagnostic is not None and diagnostic.position is not None:
            parts.append(f"  --> offset {diagnostic.position}")

        parts.extend(f"  = context: {label}" for label in error.context)

        if error.cause is not None:
            parts.append(f"  = cause: {type(error.cause).__name__}: {error.cause}")

        if diagnostic is not None and diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, error: ParseError) -> str:
        """Format error in single-line format.

        Example output:
            INVALID_NUMBER: 'x' is not a valid number (context: could not parse num <- outer)
        """
        line = f"{self._code_name(error)}: {self._maybe_sanitize(error.message)}"
        if error.context:
            line += f" (context: {' <- '.join(error.context)})"
        return line

    def _format_json(self, error: ParseError) -> str:
        """Format error as JSON.

        Example output:
            {"code": "INVALID_NUMBER", "kind": "generic", "message": "...", "context": [...]}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | list[str] | None] = {
            "code": self._code_name(error),
            "kind": error.kind.value,
            "message": self._maybe_sanitize(error.message),
            "context": list(error.context),
        }

        diagnostic = error.diagnostic
        if diagnostic is not None:
            data["code_value"] = diagnostic.code.value
            if diagnostic.position is not None:
                data["position"] = diagnostic.position
            if diagnostic.hint:
                data["hint"] = self._maybe_sanitize(diagnostic.hint)

        if error.cause is not None:
            data["cause"] = f"{type(error.cause).__name__}: {error.cause}"

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
