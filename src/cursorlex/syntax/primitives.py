"""Lexical primitives over a Source.

Every primitive here is a small state machine on the cursor:
    - read_* functions only move lookahead; their caller decides whether
      to commit. On failure they discard lookahead.
    - parse_*, match_* and consume_whitespace require a fresh cursor,
      commit exactly what they consumed on success and leave the
      committed position untouched on failure (see core.transaction).

Errors raised here carry a context label per call level, e.g. a failing
parse_num reports ``could not parse num``.

Example:
    >>> source = StrSource('word "quoted text" -2 (a b) !')
    >>> parse_word(source), parse_string(source), parse_num(source, I32)
    ('word', 'quoted text', -2)
    >>> parse_brackets(source), parse_symbol(source)
    ('a b', '!')
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cursorlex.constants import (
    ASCII_DIGITS,
    BRACKET_PAIRS,
)
from cursorlex.core import atomic, call_with_context, with_context
from cursorlex.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    ParseError,
    SourceEmptyError,
    UnexpectedCharError,
)

from .numbers import F64, NumericKind, canonical_text, resolve_kind
from .options import DEFAULT_OPTIONS, BracketNesting, ParseOptions
from .whitespace import skip_whitespace

if TYPE_CHECKING:
    from collections.abc import Callable
    from decimal import Decimal

    from cursorlex.source import Source

__all__ = [
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
]


# ============================================================================
# WORDS AND SYMBOLS
# ============================================================================


def is_word_char(char: str) -> bool:
    """Word characters are alphanumeric in the Unicode sense."""
    return char.isalnum()


def is_symbol_char(char: str) -> bool:
    """Symbols are anything that is neither whitespace nor a word character."""
    return not char.isspace() and not char.isalnum()


@with_context("could not read word")
def read_word(source: Source) -> str:
    """Skip whitespace and scan a maximal alphanumeric run (uncommitted).

    Returns an empty string when the first non-whitespace character is not
    alphanumeric.

    Raises:
        SourceEmptyError: Nothing but whitespace is left
    """
    try:
        skip_whitespace(source)
        start = source.get_pointer_loc()
        while (item := source.peek()) is not None and is_word_char(item[1]):
            source.next()
        end = source.get_pointer_loc()
        if item is None and end == start:
            raise SourceEmptyError(ErrorTemplate.source_empty("word"))
        return source.read_substr(start, end - start)
    except ParseError:
        source.reset_pointer_loc()
        raise


@atomic("could not parse word")
def parse_word(source: Source) -> str:
    """Parse and commit a word (see read_word)."""
    word = read_word(source)
    source.consume(source.get_pointer_loc())
    return word


@with_context("could not read symbol")
def read_symbol(source: Source) -> str:
    """Skip whitespace and take one symbol character (uncommitted).

    Raises:
        SourceEmptyError: Nothing but whitespace is left
        ParseError: NOT_A_SYMBOL if the character is alphanumeric
    """
    try:
        skip_whitespace(source)
        item = source.peek()
        if item is None:
            raise SourceEmptyError(ErrorTemplate.source_empty("symbol"))
        pos, char = item
        if not is_symbol_char(char):
            raise ParseError(ErrorTemplate.not_a_symbol(char, pos))
        source.next()
        return char
    except ParseError:
        source.reset_pointer_loc()
        raise


@atomic("could not parse symbol")
def parse_symbol(source: Source) -> str:
    """Parse and commit one symbol character (see read_symbol)."""
    symbol = read_symbol(source)
    source.consume(source.get_pointer_loc())
    return symbol


# ============================================================================
# DELIMITED SPANS
# ============================================================================


@atomic("could not parse string")
def parse_string(source: Source, options: ParseOptions = DEFAULT_OPTIONS) -> str:
    """Parse a quoted string, or a bare word when no quote opens it.

    No escape processing: the content runs to the next occurrence of the
    opening quote. Both quotes are committed, neither is returned.

    Raises:
        SourceEmptyError: Source is empty, or the closing quote is missing
    """
    skip_whitespace(source)
    start = source.get_pointer_loc()
    item = source.next()
    if item is None:
        raise SourceEmptyError(ErrorTemplate.source_empty("string"))
    delimiter = item[1]
    if delimiter not in options.quote_chars:
        source.reset_pointer_loc()
        return parse_word(source)

    while (item := source.next()) is not None:
        pos, char = item
        if char == delimiter:
            length = pos - start - 1
            content = source.read_substr(start + 1, length) if length else ""
            source.consume(pos + 1)
            return content
    raise SourceEmptyError(ErrorTemplate.unterminated_string(delimiter, start))


@atomic("could not parse brackets")
def parse_brackets(source: Source, options: ParseOptions = DEFAULT_OPTIONS) -> str:
    """Parse a span enclosed in (), [], {} or <> and return its inside.

    Raises:
        UnexpectedCharError: First character is not an opening bracket
        SourceEmptyError: Source is empty, or the span is not closed
    """
    skip_whitespace(source)
    start = source.get_pointer_loc()
    item = source.next()
    if item is None:
        raise SourceEmptyError(ErrorTemplate.source_empty("brackets"))
    opening = item[1]
    closing = BRACKET_PAIRS.get(opening)
    if closing is None:
        raise UnexpectedCharError(ErrorTemplate.not_a_bracket(opening, start))

    track_depth = options.bracket_nesting is BracketNesting.DEPTH
    level = 1
    while (item := source.next()) is not None:
        pos, char = item
        if char == closing:
            level -= 1
            if level == 0:
                content = source.read_substr(start + 1, pos - start - 1)
                source.consume(pos + 1)
                return content
        elif track_depth and char == opening:
            level += 1
    raise SourceEmptyError(ErrorTemplate.unterminated_brackets(opening, closing, start))


# ============================================================================
# NUMBERS
# ============================================================================


def _skip_one_of(source: Source, chars: str) -> bool:
    item = source.peek()
    if item is not None and item[1] in chars:
        source.next()
        return True
    return False


def _skip_digits(source: Source) -> None:
    while _skip_one_of(source, ASCII_DIGITS):
        pass


def _convert_and_commit[N](
    source: Source,
    kind: NumericKind[N],
    text: str,
    template: Callable[[str], Diagnostic],
) -> N:
    try:
        value = kind.convert(text)
    except (ValueError, ArithmeticError) as e:
        raise ParseError(template(text)) from e
    source.consume(source.get_pointer_loc())
    return value


@atomic("could not parse num")
def parse_num[N](
    source: Source, kind: NumericKind[N] | type[N] | str = F64
) -> N:
    """Parse a numeric literal of the given kind.

    Grammar (float-only parts marked *):
        Sign? ( 'inf' | 'infinity' | 'nan' )*      (DECIMAL adds sNaN, NaN123)
        Sign? Digit* ( '.' Digit* )* ( [eE] Sign? Digit* )*

    The scanned span is handed to ``kind.convert``; overflow and rounding
    are the kind's business.

    Args:
        source: Input
        kind: NumericKind, Python type (int, float, Decimal) or kind name

    Raises:
        SourceEmptyError: Nothing but whitespace (and a sign) is left
        ParseError: INVALID_FLOAT or INVALID_NUMBER
        TypeError: Unsupported kind
    """
    numeric = resolve_kind(kind)
    skip_whitespace(source)
    start = source.get_pointer_loc()

    item = source.peek()
    if item is None:
        raise SourceEmptyError(ErrorTemplate.source_empty("num"))
    if item[1] in "+-":
        source.next()
        item = source.peek()
        if item is None:
            raise SourceEmptyError(ErrorTemplate.source_empty("num"))

    if numeric.is_float and item[1] in numeric.special_starts:
        word = read_word(source)
        text = source.read_substr(start, source.get_pointer_loc() - start)
        if not numeric.is_special_word(word):
            raise ParseError(ErrorTemplate.invalid_float(text))
        return _convert_and_commit(source, numeric, text, ErrorTemplate.invalid_float)

    _skip_digits(source)
    if numeric.is_float:
        if _skip_one_of(source, "."):
            _skip_digits(source)
        if _skip_one_of(source, "eE"):
            _skip_one_of(source, "+-")
            _skip_digits(source)

    text = source.read_substr(start, source.get_pointer_loc() - start)
    return _convert_and_commit(source, numeric, text, ErrorTemplate.invalid_number)


# ============================================================================
# LITERAL MATCHING
# ============================================================================


@atomic("could not match char {val}")
def match_char(source: Source, val: str) -> bool:
    """Commit through val if it is the next non-whitespace character.

    A mismatch is not an error: it returns False and leaves the cursor
    as it was.

    Raises:
        ValueError: val is not a single character
        SourceEmptyError: Nothing but whitespace is left
    """
    if len(val) != 1:
        msg = f"match_char expects a single character, got {val!r}"
        raise ValueError(msg)
    skip_whitespace(source)
    item = source.peek()
    if item is None:
        raise SourceEmptyError(ErrorTemplate.match_exhausted(val))
    pos, char = item
    if char != val:
        source.reset_pointer_loc()
        return False
    source.consume(pos + 1)
    return True


@atomic("could not match str {val}")
def match_str(source: Source, val: str) -> bool:
    """Commit through val if the upcoming characters spell it.

    Leading whitespace is skipped. A mismatch returns False and leaves the
    cursor as it was.

    Raises:
        SourceEmptyError: val is empty, or the source ends mid-match
    """
    if not val:
        raise SourceEmptyError(ErrorTemplate.empty_pattern())
    skip_whitespace(source)
    for expected in val:
        item = source.next()
        if item is None:
            raise SourceEmptyError(ErrorTemplate.match_exhausted(val))
        if item[1] != expected:
            source.reset_pointer_loc()
            return False
    source.consume(source.get_pointer_loc())
    return True


def match_num(source: Source, val: int | float | Decimal) -> bool:
    """match_str against the canonical text of val (see canonical_text).

    Example:
        >>> match_num(StrSource("1e+16"), 1e16)
        True
    """
    text = canonical_text(val)
    return call_with_context(f"could not match num {text}", match_str, source, text)
