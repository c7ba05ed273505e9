"""Diagnostic system for lexical parse errors.

Provides structured error diagnostics with kinds, codes, hints and
breadcrumb chains. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorKind
from .errors import ParseError, SourceEmptyError, UnexpectedCharError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorKind",
    "ErrorTemplate",
    "OutputFormat",
    "ParseError",
    "SourceEmptyError",
    "UnexpectedCharError",
]
