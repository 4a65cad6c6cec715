"""Custom exceptions for the measurement expression engine."""

from src.exceptions import MeasureCalculatorError


class EngineError(MeasureCalculatorError):
    """Base exception for expression engine errors."""
    pass


class TokenizeError(EngineError):
    """Raised when the expression contains an unrecognized character or a malformed fraction.

    Attributes:
        position: Character offset where scanning failed.
    """

    def __init__(self, message: str, position: int):
        super().__init__(
            message=f"{message} at position {position}",
            code="TOKENIZE_ERROR"
        )
        self.position = position


class ParseError(EngineError):
    """Raised when the token sequence is not a valid operand/operator sequence.

    Attributes:
        position: Character offset of the offending token (-1 for end of input).
    """

    def __init__(self, message: str, position: int = -1):
        super().__init__(message=message, code="PARSE_ERROR")
        self.position = position


class DivisionByZeroError(EngineError):
    """Raised when a quantity is divided by an exactly-zero quantity."""

    def __init__(self):
        super().__init__(message="Division by zero", code="DIVISION_BY_ZERO")
