"""Quickstart example for cursorlex.

This example demonstrates the lexical primitives, numeric kinds, error
breadcrumbs and building a small parser on top of them.

Note: Each primitive either commits what it consumed or leaves the source
where it was, so a failed attempt can be followed by a different one.
"""

import tempfile
from decimal import Decimal
from pathlib import Path

from cursorlex import (
    DECIMAL,
    F32,
    I32,
    U8,
    BracketNesting,
    DiagnosticFormatter,
    OutputFormat,
    ParseError,
    ParseOptions,
    Source,
    StrSource,
    TextIOSource,
    consume_whitespace,
    match_char,
    parse_brackets,
    parse_num,
    parse_string,
    parse_symbol,
    parse_word,
    with_context,
)

# Example 1: Words, symbols, strings and brackets
print("=" * 50)
print("Example 1: Mixed Tokens")
print("=" * 50)

source = StrSource('Hello, "quoted world" (a (nested) span) !')
print(parse_word(source))
# Output: Hello
print(parse_symbol(source))
# Output: ,
print(parse_string(source))
# Output: quoted world
print(parse_brackets(source))
# Output: a (nested) span
print(parse_symbol(source))
# Output: !

first_close = ParseOptions(bracket_nesting=BracketNesting.FIRST_CLOSE)
print(parse_brackets(StrSource("(a (nested) span)"), first_close))
# Output: a (nested

# Example 2: Numeric kinds
print("\n" + "=" * 50)
print("Example 2: Numbers")
print("=" * 50)

source = StrSource("-2 12.3 0.1 -infinity nan 255")
print(parse_num(source, I32))
# Output: -2
print(parse_num(source, DECIMAL) == Decimal("12.3"))
# Output: True
print(parse_num(source, F32))
# Output: 0.10000000149011612
print(parse_num(source, float))
# Output: -inf
print(parse_num(source, "f64"))
# Output: nan
print(parse_num(source, U8))
# Output: 255

# Example 3: Failures roll back
print("\n" + "=" * 50)
print("Example 3: Rollback and Diagnostics")
print("=" * 50)

source = StrSource('  256 "unterminated')
try:
    parse_num(source, U8)
except ParseError as e:
    print(e)
    # Output:
    # error[INVALID_NUMBER]: '256' is not a valid number
    #   = context: could not parse num
print(source.position)
# Output: 0

print(parse_num(source, I32))
# Output: 256

try:
    parse_string(source)
except ParseError as e:
    print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(e))
    # Output: UNTERMINATED_STRING: source ended before the closing " of the string
    #         (context: could not parse string)

# Example 4: Building your own parser
print("\n" + "=" * 50)
print("Example 4: A key = value parser")
print("=" * 50)


@with_context("could not parse setting")
def parse_setting(source: Source) -> tuple[str, str]:
    key = parse_word(source)
    if not match_char(source, "="):
        raise ParseError(f"expected '=' after {key}")
    return key, parse_string(source)


settings_source = StrSource("name = \"cursor lex\"\nlevel = debug\nbroken value")
while True:
    consume_whitespace(settings_source)
    if settings_source.peek() is None:
        break
    try:
        print(parse_setting(settings_source))
    except ParseError as e:
        print(f"{e.message} (context: {', '.join(e.context)})")
        break
# Output:
# ('name', 'cursor lex')
# ('level', 'debug')
# expected '=' after broken (context: could not parse setting)

# Example 5: Reading from a file
print("\n" + "=" * 50)
print("Example 5: Stream Source")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    path = Path(tmpdir) / "numbers.txt"
    path.write_text("1 2 3 4 5\n", encoding="utf-8")
    with path.open(encoding="utf-8") as f:
        stream_source = TextIOSource(f, chunk_size=4)
        total = 0
        for _ in range(5):
            total += parse_num(stream_source, I32)
        print(total)
        # Output: 15

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
