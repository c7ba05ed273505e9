"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def source_empty(what: str = "input") -> Diagnostic:
        """Source ran out of characters.

        Args:
            what: What the caller was trying to read

        Returns:
            Diagnostic for SOURCE_EMPTY
        """
        msg = f"could not parse {what} as there are none left in the source"
        return Diagnostic(code=DiagnosticCode.SOURCE_EMPTY, message=msg)

    @staticmethod
    def unterminated_string(delimiter: str, position: int) -> Diagnostic:
        """Quoted string has no closing delimiter.

        Args:
            delimiter: Opening (and expected closing) quote character
            position: Lookahead offset of the opening quote

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        msg = f"source ended before the closing {delimiter} of the string"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message=msg,
            hint=f"Add a closing {delimiter}",
            position=position,
        )

    @staticmethod
    def unterminated_brackets(opening: str, closing: str, position: int) -> Diagnostic:
        """Bracketed span has no matching closing bracket.

        Args:
            opening: Opening bracket character
            closing: Expected closing bracket character
            position: Lookahead offset of the opening bracket

        Returns:
            Diagnostic for UNTERMINATED_BRACKETS
        """
        msg = f"source ended before the {closing} matching {opening}"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_BRACKETS,
            message=msg,
            hint=f"Add a closing {closing}",
            position=position,
        )

    @staticmethod
    def match_exhausted(expected: str) -> Diagnostic:
        """Source ended before a literal could be compared.

        Args:
            expected: Literal being matched

        Returns:
            Diagnostic for SOURCE_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_EMPTY,
            message=f"source ended while matching '{expected}'",
        )

    @staticmethod
    def empty_pattern() -> Diagnostic:
        """match_str was asked to match nothing."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PATTERN,
            message="cannot match an empty string",
        )

    @staticmethod
    def not_a_bracket(found: str, position: int) -> Diagnostic:
        """parse_brackets did not start on an opening bracket.

        Args:
            found: Character that was read
            position: Lookahead offset of the character

        Returns:
            Diagnostic for NOT_A_BRACKET
        """
        msg = f"'{found}' was found instead of a bracket (either (, [, < or {{)"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_BRACKET, message=msg, position=position
        )

    @staticmethod
    def invalid_number(text: str) -> Diagnostic:
        """Scanned span was rejected by the numeric conversion.

        Args:
            text: The scanned span

        Returns:
            Diagnostic for INVALID_NUMBER
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=f"'{text}' is not a valid number",
        )

    @staticmethod
    def invalid_float(text: str) -> Diagnostic:
        """Word starting with i/n is not inf, infinity or nan.

        Args:
            text: The scanned span

        Returns:
            Diagnostic for INVALID_FLOAT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_FLOAT,
            message=f"'{text}' is not a valid float",
            hint="Only inf, infinity and nan (any case) may start with a letter",
        )

    @staticmethod
    def not_a_symbol(found: str, position: int) -> Diagnostic:
        """Character is whitespace or alphanumeric.

        Args:
            found: Character that was read
            position: Lookahead offset of the character

        Returns:
            Diagnostic for NOT_A_SYMBOL
        """
        return Diagnostic(
            code=DiagnosticCode.NOT_A_SYMBOL,
            message=f"'{found}' is not classified as a symbol",
            position=position,
        )

    @staticmethod
    def cursor_in_use(pointer_loc: int) -> Diagnostic:
        """Primitive requiring fresh state found pending lookahead.

        Args:
            pointer_loc: Current lookahead offset

        Returns:
            Diagnostic for CURSOR_IN_USE
        """
        msg = (
            "Parser has already been used, and has left a pointer at "
            f"position {pointer_loc} (which should be 0)."
        )
        return Diagnostic(
            code=DiagnosticCode.CURSOR_IN_USE,
            message=msg,
            hint="Call consume() or reset_pointer_loc() before the next operation",
            position=pointer_loc,
        )

    @staticmethod
    def invalid_range(start: int, length: int, available: int) -> Diagnostic:
        """Requested range lies outside the scanned lookahead.

        Args:
            start: Requested start offset
            length: Requested length
            available: Number of characters passed over by lookahead

        Returns:
            Diagnostic for INVALID_RANGE
        """
        msg = (
            f"range starting at {start} with length {length} is outside "
            f"the {available} character(s) of lookahead"
        )
        return Diagnostic(code=DiagnosticCode.INVALID_RANGE, message=msg)

    @staticmethod
    def source_read_failed(reason: str) -> Diagnostic:
        """Backing store failed to deliver characters.

        Args:
            reason: Description of the underlying failure

        Returns:
            Diagnostic for SOURCE_READ_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_READ_FAILED,
            message=f"failed to read from source: {reason}",
        )
