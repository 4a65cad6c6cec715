"""Tokenizer for canonical measurement expressions."""

from __future__ import annotations

import string
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, Union

from .exceptions import TokenizeError

OperatorSymbol = Literal["+", "-", "*", "/"]

OPERATOR_SYMBOLS = frozenset("+-*/")

# Longer literals are rejected before any int or Decimal conversion
MAX_LITERAL_DIGITS = 64

# Typographic marks produced by speech pipelines and word processors
_FEET_MARKS = ("’", "‘", "′", "ʼ", "`")
_INCH_MARKS = ("“", "”", "″", "''")


@dataclass(frozen=True)
class NumberToken:
    """Integer or decimal literal. ``text`` keeps the digits as written."""

    text: str
    position: int
    negative: bool = False

    @property
    def value(self) -> Decimal:
        return Decimal(self.text)

    @property
    def is_integer(self) -> bool:
        return "." not in self.text


@dataclass(frozen=True)
class FractionToken:
    """Fraction written without spaces, e.g. ``3/8``."""

    numerator: int
    denominator: int
    position: int
    negative: bool = False


@dataclass(frozen=True)
class FeetMarkToken:
    position: int


@dataclass(frozen=True)
class InchMarkToken:
    position: int


@dataclass(frozen=True)
class OperatorToken:
    symbol: OperatorSymbol
    position: int


@dataclass(frozen=True)
class PercentToken:
    position: int


Token = Union[
    NumberToken,
    FractionToken,
    FeetMarkToken,
    InchMarkToken,
    OperatorToken,
    PercentToken,
]


def normalize_marks(text: str) -> str:
    """Replace typographic feet/inch marks with ASCII ``'`` and ``"``."""
    for char in _INCH_MARKS:
        text = text.replace(char, '"')
    for char in _FEET_MARKS:
        text = text.replace(char, "'")
    return text


def _scan_digits(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] in string.digits:
        end += 1
    return end


def _scan_number(text: str, start: int) -> int:
    """Return the end offset of an integer or decimal literal starting at ``start``."""
    end = _scan_digits(text, start)
    if end < len(text) and text[end] == ".":
        end = _scan_digits(text, end + 1)
    return end


def _operand_precedes(tokens: list[Token]) -> bool:
    if not tokens:
        return False
    return not isinstance(tokens[-1], OperatorToken)


def _starts_number(text: str, index: int) -> bool:
    if index >= len(text):
        return False
    char = text[index]
    if char in string.digits:
        return True
    return char == "." and index + 1 < len(text) and text[index + 1] in string.digits


def tokenize(expression: str) -> list[Token]:
    """Scan a canonical expression into a flat token list.

    Args:
        expression: Canonical expression, e.g. ``"3' 2 1/2 + 5"``.

    Returns:
        Ordered tokens. An empty or all-whitespace input yields an empty list.

    Raises:
        TokenizeError: On unrecognized characters or malformed fractions.
    """
    text = normalize_marks(expression.strip())
    tokens: list[Token] = []
    index = 0
    negative = False

    while index < len(text):
        char = text[index]

        if char.isspace():
            index += 1
            continue

        if _starts_number(text, index):
            start = index - 1 if negative else index
            end = _scan_number(text, index)
            literal = text[index:end]
            if len(literal.replace(".", "")) > MAX_LITERAL_DIGITS:
                raise TokenizeError(f"Number exceeds {MAX_LITERAL_DIGITS} digits", index)

            if end < len(text) and text[end] == "/":
                if "." in literal:
                    raise TokenizeError("Fraction numerator must be an integer", index)
                denominator_end = _scan_digits(text, end + 1)
                if denominator_end == end + 1:
                    raise TokenizeError("Fraction is missing its denominator", end)
                if denominator_end - end - 1 > MAX_LITERAL_DIGITS:
                    raise TokenizeError(f"Number exceeds {MAX_LITERAL_DIGITS} digits", end + 1)
                denominator = int(text[end + 1:denominator_end])
                if denominator == 0:
                    raise TokenizeError("Fraction denominator cannot be zero", end + 1)
                tokens.append(FractionToken(int(literal), denominator, start, negative))
                end = denominator_end
                if end < len(text) and text[end] == "'":
                    raise TokenizeError("Feet mark cannot follow a fraction", end)
            else:
                tokens.append(NumberToken(literal, start, negative))
                if end < len(text) and text[end] == "'":
                    tokens.append(FeetMarkToken(end))
                    end += 1

            negative = False
            index = end
            continue

        if char == "-" and not _operand_precedes(tokens) and _starts_number(text, index + 1):
            negative = True
            index += 1
            continue

        if char in OPERATOR_SYMBOLS:
            tokens.append(OperatorToken(char, index))
        elif char == "%":
            tokens.append(PercentToken(index))
        elif char == '"':
            tokens.append(InchMarkToken(index))
        elif char == "'":
            raise TokenizeError("Feet mark must directly follow a number", index)
        else:
            raise TokenizeError(f"Unrecognized character {char!r}", index)
        index += 1

    return tokens
