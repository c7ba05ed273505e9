"""Numeric kind descriptors for parse_num.

A NumericKind says two things about a target type: whether the float
grammar applies (fraction, exponent, inf/nan words) and how a scanned
span becomes a value. Range checks and rounding live entirely in the
conversion function; parse_num never inspects the value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from types import MappingProxyType

from cursorlex.constants import (
    ASCII_DIGITS,
    DECIMAL_SPECIAL_STARTS,
    SPECIAL_FLOAT_STARTS,
    SPECIAL_FLOAT_WORDS,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "NumericKind",
    "resolve_kind",
    "canonical_text",
    "BUILTIN_KINDS",
    # Fixed-width integers
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    # Unbounded / floating
    "INT",
    "F32",
    "F64",
    "DECIMAL",
]


def _is_float_word(word: str) -> bool:
    return word.upper() in SPECIAL_FLOAT_WORDS


@dataclass(frozen=True, slots=True)
class NumericKind[N]:
    """Descriptor of a numeric target type.

    Attributes:
        name: Short identifier used in diagnostics (e.g. "i32", "f64")
        is_float: Enable fraction, exponent and inf/nan grammar
        convert: Span -> value; raises ValueError or ArithmeticError on
            rejection
        special_starts: First characters that switch a float kind into
            word mode (inf, nan and friends)
        is_special_word: Accepts or rejects the word read in that mode

    Example:
        >>> I8.convert("127")
        127
        >>> I8.convert("128")
        Traceback (most recent call last):
        ...
        ValueError: '128' is out of range for i8
    """

    name: str
    is_float: bool
    convert: Callable[[str], N]
    special_starts: frozenset[str] = SPECIAL_FLOAT_STARTS
    is_special_word: Callable[[str], bool] = _is_float_word

    def __repr__(self) -> str:
        return f"NumericKind({self.name!r})"


def _check_integer_text(text: str, name: str, *, signed: bool) -> None:
    # int() also accepts whitespace and underscores; the grammar does not.
    sign = text[:1]
    if sign == "-" and not signed:
        msg = f"{text!r} has a sign that {name} cannot hold"
        raise ValueError(msg)
    body = text[1:] if sign in ("+", "-") else text
    if not body or any(c not in ASCII_DIGITS for c in body):
        msg = f"invalid digit found in {text!r}"
        raise ValueError(msg)


def _bounded_integer(name: str, bits: int, *, signed: bool) -> NumericKind[int]:
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1

    def convert(text: str) -> int:
        _check_integer_text(text, name, signed=signed)
        value = int(text)
        if not low <= value <= high:
            msg = f"{text!r} is out of range for {name}"
            raise ValueError(msg)
        return value

    return NumericKind(name, False, convert)


def _unbounded_integer(text: str) -> int:
    _check_integer_text(text, "int", signed=True)
    try:
        return int(text)
    except ValueError:
        # Past sys.get_int_max_str_digits(); the text is already known valid.
        return int(Decimal(text))


def _single_precision(text: str) -> float:
    value = float(text)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        # Out of f32 range rounds to infinity, like any IEEE conversion.
        return math.copysign(math.inf, value)


def _decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation as e:
        msg = f"{text!r} is not a decimal"
        raise ValueError(msg) from e


# Decimal spells NaN with an optional s prefix and digit payload: sNaN, NaN12.
_DECIMAL_WORD: re.Pattern[str] = re.compile(r"inf(?:inity)?|s?nan[0-9]*", re.IGNORECASE)


I8 = _bounded_integer("i8", 8, signed=True)
I16 = _bounded_integer("i16", 16, signed=True)
I32 = _bounded_integer("i32", 32, signed=True)
I64 = _bounded_integer("i64", 64, signed=True)
I128 = _bounded_integer("i128", 128, signed=True)
ISIZE = _bounded_integer("isize", 64, signed=True)
U8 = _bounded_integer("u8", 8, signed=False)
U16 = _bounded_integer("u16", 16, signed=False)
U32 = _bounded_integer("u32", 32, signed=False)
U64 = _bounded_integer("u64", 64, signed=False)
U128 = _bounded_integer("u128", 128, signed=False)
USIZE = _bounded_integer("usize", 64, signed=False)

INT: NumericKind[int] = NumericKind("int", False, _unbounded_integer)
F32: NumericKind[float] = NumericKind("f32", True, _single_precision)
F64: NumericKind[float] = NumericKind("f64", True, float)
DECIMAL: NumericKind[Decimal] = NumericKind(
    "decimal",
    True,
    _decimal,
    special_starts=DECIMAL_SPECIAL_STARTS,
    is_special_word=lambda word: _DECIMAL_WORD.fullmatch(word) is not None,
)

BUILTIN_KINDS = MappingProxyType(
    {
        kind.name: kind
        for kind in (
            I8, I16, I32, I64, I128, ISIZE,
            U8, U16, U32, U64, U128, USIZE,
            INT, F32, F64, DECIMAL,
        )
    }
)

_PYTHON_TYPES: dict[type, NumericKind[object]] = {int: INT, float: F64, Decimal: DECIMAL}


def resolve_kind[N](kind: NumericKind[N] | type[N] | str) -> NumericKind[N]:
    """Normalize a kind argument.

    Accepts a NumericKind, one of the Python types int, float or Decimal,
    or a built-in kind name such as "u16".

    Raises:
        TypeError: If kind names no supported numeric type
    """
    if isinstance(kind, NumericKind):
        return kind
    if isinstance(kind, str):
        found = BUILTIN_KINDS.get(kind)
    else:
        found = _PYTHON_TYPES.get(kind)
    if found is None:
        msg = f"unsupported numeric kind: {kind!r}"
        raise TypeError(msg)
    return found  # type: ignore[return-value]


def canonical_text(val: int | float | Decimal) -> str:
    """Canonical literal text of val, the form parse_num reads back.

    Integers beyond sys.get_int_max_str_digits() still format, through
    Decimal.

    Example:
        >>> canonical_text(1e16)
        '1e+16'
        >>> len(canonical_text(10**5000))
        5001
    """
    if isinstance(val, int) and not isinstance(val, bool):
        return str(Decimal(val))
    return str(val)
