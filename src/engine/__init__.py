"""Measurement expression engine - exact feet/inch/fraction arithmetic."""

from .exceptions import EngineError, TokenizeError, ParseError, DivisionByZeroError
from .tokens import (
    Token,
    NumberToken,
    FractionToken,
    FeetMarkToken,
    InchMarkToken,
    OperatorToken,
    PercentToken,
    tokenize,
)
from .parser import ParsedOperand, Expression, parse
from .quantity import Quantity
from .evaluator import evaluate, fold
from .formatter import FormattedQuantity, format_quantity, format_feet_inches
from .schemas import CalculationResult
from .calculator import calculate, is_measurement
from .keypad import KeypadSession


__all__ = [
    # Exceptions
    "EngineError",
    "TokenizeError",
    "ParseError",
    "DivisionByZeroError",
    # Tokens
    "Token",
    "NumberToken",
    "FractionToken",
    "FeetMarkToken",
    "InchMarkToken",
    "OperatorToken",
    "PercentToken",
    "tokenize",
    # Parsing
    "ParsedOperand",
    "Expression",
    "parse",
    # Arithmetic
    "Quantity",
    "evaluate",
    "fold",
    # Formatting
    "FormattedQuantity",
    "format_quantity",
    "format_feet_inches",
    # Facade
    "CalculationResult",
    "calculate",
    "is_measurement",
    "KeypadSession",
]
