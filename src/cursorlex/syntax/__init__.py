"""Lexical primitives, numeric kinds and parse options.

Module Organization:
- whitespace.py: skip_whitespace / consume_whitespace
- primitives.py: word, symbol, string, bracket, number and match primitives
- numbers.py: NumericKind descriptors for parse_num
- options.py: ParseOptions and BracketNesting
"""

from .numbers import (
    BUILTIN_KINDS,
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
    NumericKind,
    canonical_text,
    resolve_kind,
)
from .options import DEFAULT_OPTIONS, BracketNesting, ParseOptions
from .primitives import (
    is_symbol_char,
    is_word_char,
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
)
from .whitespace import consume_whitespace, skip_whitespace

__all__ = [
    "BUILTIN_KINDS",
    "DECIMAL",
    "DEFAULT_OPTIONS",
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
    "NumericKind",
    "ParseOptions",
    "canonical_text",
    "consume_whitespace",
    "is_symbol_char",
    "is_word_char",
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
    "resolve_kind",
    "skip_whitespace",
]
