"""cursorlex - cursor-based lexical parsing primitives.

A Source is a read head over a character sequence with lookahead, commit
and rollback. The primitives on top of it extract words, symbols, quoted
strings, bracketed spans and numeric literals, and match literals. Each
primitive either commits exactly what it consumed or leaves the source
where it was.

Public API:
    StrSource / TextIOSource - Backing stores (Source protocol)
    parse_word, parse_symbol, parse_string, parse_brackets, parse_num
    match_char, match_str, match_num
    consume_whitespace, skip_whitespace, read_word, read_symbol
    NumericKind and the built-in kinds (I8 ... U128, INT, F32, F64, DECIMAL)
    ParseOptions / BracketNesting - String and bracket configuration
    attach_context / with_context - Breadcrumbs for your own parsers

Exceptions:
    ParseError - Base exception (GENERIC kind)
    SourceEmptyError - Input exhausted (EMPTY kind)
    UnexpectedCharError - Wrong character (UNEXPECTED kind)

Submodules:
    cursorlex.source - Source protocol and implementations
    cursorlex.syntax - Primitives, numeric kinds, options
    cursorlex.diagnostics - Error types, codes and formatting
    cursorlex.core - Context attachment and atomic execution
"""

from .core import attach_context, call_with_context, with_context
from .diagnostics import (
    DiagnosticFormatter,
    ErrorKind,
    OutputFormat,
    ParseError,
    SourceEmptyError,
    UnexpectedCharError,
)
from .source import Source, StrSource, TextIOSource
from .syntax import (
    DECIMAL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    INT,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    BracketNesting,
    NumericKind,
    ParseOptions,
    consume_whitespace,
    match_char,
    match_num,
    match_str,
    parse_brackets,
    parse_num,
    parse_string,
    parse_symbol,
    parse_word,
    read_symbol,
    read_word,
    skip_whitespace,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cursorlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DECIMAL",
    "F32",
    "F64",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "INT",
    "ISIZE",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "BracketNesting",
    "DiagnosticFormatter",
    "ErrorKind",
    "NumericKind",
    "OutputFormat",
    "ParseError",
    "ParseOptions",
    "Source",
    "SourceEmptyError",
    "StrSource",
    "TextIOSource",
    "UnexpectedCharError",
    "__version__",
    "attach_context",
    "call_with_context",
    "consume_whitespace",
    "match_char",
    "match_num",
    "match_str",
    "parse_brackets",
    "parse_num",
    "parse_string",
    "parse_symbol",
    "parse_word",
    "read_symbol",
    "read_word",
    "skip_whitespace",
    "with_context",
]
