"""Tests for parse_num and the numeric kind descriptors."""

from __future__ import annotations

import math
from decimal import Decimal

import pytest

from cursorlex import (
    DECIMAL,
    F32,
    F64,
    I8,
    I32,
    I128,
    INT,
    U8,
    U16,
    U64,
    NumericKind,
    ParseError,
    SourceEmptyError,
    StrSource,
    parse_num,
)
from cursorlex.diagnostics import DiagnosticCode, ErrorKind
from cursorlex.syntax import BUILTIN_KINDS, canonical_text, resolve_kind


def _code(error: ParseError) -> DiagnosticCode:
    assert error.diagnostic is not None
    return error.diagnostic.code


class TestIntegers:
    """Integer kinds: digits only, range checked."""

    @pytest.mark.parametrize(
        ("text", "kind", "expected", "remaining"),
        [
            ("42", I32, 42, ""),
            ("  -2 x", I32, -2, " x"),
            ("+7", I32, 7, ""),
            ("127", I8, 127, ""),
            ("-128", I8, -128, ""),
            ("255", U8, 255, ""),
            ("1.5", I32, 1, ".5"),
            ("0x10", I32, 0, "x10"),
            ("12abc", U16, 12, "abc"),
            ("-0", INT, 0, ""),
            (str(2**127 - 1), I128, 2**127 - 1, ""),
            ("1" + "0" * 40, INT, 10**40, ""),
        ],
    )
    def test_valid(self, text: str, kind: NumericKind[int], expected: int, remaining: str) -> None:
        source = StrSource(text)
        assert parse_num(source, kind) == expected
        assert source.remaining == remaining

    @pytest.mark.parametrize(
        ("text", "kind"),
        [("128", I8), ("-129", I8), ("256", U8), ("-1", U8), ("-0", U64), (str(2**127), I128)],
    )
    def test_out_of_range_or_sign(self, text: str, kind: NumericKind[int]) -> None:
        source = StrSource(text)
        with pytest.raises(ParseError) as exc_info:
            parse_num(source, kind)
        err = exc_info.value
        assert err.kind is ErrorKind.GENERIC
        assert _code(err) is DiagnosticCode.INVALID_NUMBER
        assert err.message == f"'{text}' is not a valid number"
        assert isinstance(err.__cause__, ValueError)
        assert err.context == ("could not parse num",)
        assert source.position == 0
        assert source.get_pointer_loc() == 0

    @pytest.mark.parametrize("text", ["abc", "+x", "- 1", "nan"])
    def test_no_digits(self, text: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_num(StrSource(text), I32)
        assert _code(exc_info.value) is DiagnosticCode.INVALID_NUMBER

    @pytest.mark.parametrize("text", ["", "   ", "+", " -"])
    def test_source_empty(self, text: str) -> None:
        with pytest.raises(SourceEmptyError) as exc_info:
            parse_num(StrSource(text), I32)
        assert exc_info.value.kind is ErrorKind.EMPTY


# 5000 ones: past the 4300-digit default of sys.get_int_max_str_digits().
_LONG_TEXT = "1" * 5000
_LONG_VALUE = (10**5000 - 1) // 9


class TestLongIntegers:
    """INT holds literals longer than int() will convert from text."""

    def test_int_parses_past_digit_limit(self) -> None:
        source = StrSource(_LONG_TEXT + " rest")
        assert parse_num(source, INT) == _LONG_VALUE
        assert source.remaining == " rest"

    def test_negative(self) -> None:
        assert parse_num(StrSource("-" + _LONG_TEXT), INT) == -_LONG_VALUE

    def test_bounded_kind_rejects(self) -> None:
        source = StrSource(_LONG_TEXT)
        with pytest.raises(ParseError) as exc_info:
            parse_num(source, I128)
        assert _code(exc_info.value) is DiagnosticCode.INVALID_NUMBER
        assert source.position == 0

    def test_canonical_text(self) -> None:
        assert canonical_text(_LONG_VALUE) == _LONG_TEXT
        assert canonical_text(-_LONG_VALUE) == "-" + _LONG_TEXT
        assert canonical_text(1e16) == "1e+16"
        assert canonical_text(Decimal("-sNaN")) == "-sNaN"


class TestFloats:
    """Float kinds: fraction, exponent and special words."""

    @pytest.mark.parametrize(
        ("text", "expected", "remaining"),
        [
            ("12.3", 12.3, ""),
            ("-0.5e3 x", -500.0, " x"),
            ("1E+2", 100.0, ""),
            (".5", 0.5, ""),
            ("5.", 5.0, ""),
            ("1.2.3", 1.2, ".3"),
            ("1e400", math.inf, ""),
            ("+inf", math.inf, ""),
            ("-Infinity,", -math.inf, ","),
            ("INF", math.inf, ""),
        ],
    )
    def test_valid(self, text: str, expected: float, remaining: str) -> None:
        source = StrSource(text)
        assert parse_num(source, F64) == expected
        assert source.remaining == remaining

    @pytest.mark.parametrize("text", ["nan", "-nan", "NaN"])
    def test_nan(self, text: str) -> None:
        assert math.isnan(parse_num(StrSource(text), F64))

    @pytest.mark.parametrize("text", ["infx", "i", "-nope", "Nano"])
    def test_invalid_special_word(self, text: str) -> None:
        source = StrSource(text)
        with pytest.raises(ParseError) as exc_info:
            parse_num(source, F64)
        err = exc_info.value
        assert _code(err) is DiagnosticCode.INVALID_FLOAT
        assert err.message == f"'{text}' is not a valid float"
        assert err.diagnostic is not None
        assert err.diagnostic.hint is not None
        assert source.position == 0

    @pytest.mark.parametrize("text", ["1e", "-", "1e+", "-.", "."])
    def test_incomplete(self, text: str) -> None:
        source = StrSource(text)
        with pytest.raises(ParseError):
            parse_num(source, F64)
        assert source.position == 0

    def test_f32_rounds_to_single_precision(self) -> None:
        value = parse_num(StrSource("0.1"), F32)
        assert value != 0.1
        assert value == pytest.approx(0.1, rel=1e-7)

    @pytest.mark.parametrize(("text", "expected"), [("1e39", math.inf), ("-1e39", -math.inf)])
    def test_f32_overflow_is_infinite(self, text: str, expected: float) -> None:
        assert parse_num(StrSource(text), F32) == expected

    def test_decimal_is_exact(self) -> None:
        assert parse_num(StrSource("12.30"), DECIMAL) == Decimal("12.30")
        assert str(parse_num(StrSource("12.30"), DECIMAL)) == "12.30"

    def test_decimal_special_words(self) -> None:
        assert parse_num(StrSource("-inf"), DECIMAL) == Decimal("-Infinity")
        assert parse_num(StrSource("nan"), DECIMAL).is_nan()

    @pytest.mark.parametrize("text", ["sNaN", "-sNaN", "NaN12", "-nan7", "SNAN3", "Infinity"])
    def test_decimal_nan_forms(self, text: str) -> None:
        source = StrSource(text + " x")
        value = parse_num(source, DECIMAL)
        assert str(value) == str(Decimal(text))
        assert source.remaining == " x"

    @pytest.mark.parametrize("text", ["snack", "-s", "NaNx", "nan1a"])
    def test_decimal_invalid_word(self, text: str) -> None:
        source = StrSource(text)
        with pytest.raises(ParseError) as exc_info:
            parse_num(source, DECIMAL)
        assert _code(exc_info.value) is DiagnosticCode.INVALID_FLOAT
        assert source.position == 0

    @pytest.mark.parametrize("text", ["sNaN", "NaN12"])
    def test_f64_keeps_plain_words(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_num(StrSource(text), F64)


class TestKindResolution:
    """resolve_kind and the kind argument of parse_num."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [(int, INT), (float, F64), (Decimal, DECIMAL), ("u16", U16), ("f32", F32), (I8, I8)],
    )
    def test_resolves(self, kind: object, expected: NumericKind[object]) -> None:
        assert resolve_kind(kind) is expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("kind", ["i7", complex, bool, None])
    def test_unsupported(self, kind: object) -> None:
        with pytest.raises(TypeError, match="unsupported numeric kind"):
            resolve_kind(kind)  # type: ignore[arg-type]

    def test_parse_num_accepts_type_and_name(self) -> None:
        assert parse_num(StrSource("3"), int) == 3
        assert parse_num(StrSource("3.5"), float) == 3.5
        assert parse_num(StrSource("300"), "u16") == 300

    def test_default_kind_is_f64(self) -> None:
        assert parse_num(StrSource("2.5")) == 2.5

    def test_builtin_kind_names(self) -> None:
        assert set(BUILTIN_KINDS) == {
            "i8", "i16", "i32", "i64", "i128", "isize",
            "u8", "u16", "u32", "u64", "u128", "usize",
            "int", "f32", "f64", "decimal",
        }
        assert all(kind.name == name for name, kind in BUILTIN_KINDS.items())

    def test_custom_kind(self) -> None:
        def percent(text: str) -> float:
            return float(text) / 100

        kind = NumericKind("percent", True, percent)
        assert parse_num(StrSource("50"), kind) == 0.5
        assert repr(kind) == "NumericKind('percent')"

    def test_kind_conversion_error_message(self) -> None:
        with pytest.raises(ValueError, match="out of range for i8"):
            I8.convert("128")
