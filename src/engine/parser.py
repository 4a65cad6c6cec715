"""Parser grouping tokens into measurement operands joined by operators.

Operators are NOT ranked: ``5 + 3 * 2`` means ``(5 + 3) * 2``. The expression
is a running total folded strictly left to right, the way a non-scientific
keypad accumulates, and expressions produced by the voice pipeline assume it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from .exceptions import ParseError
from .tokens import (
    FeetMarkToken,
    FractionToken,
    InchMarkToken,
    NumberToken,
    OperatorSymbol,
    OperatorToken,
    PercentToken,
    Token,
)


@dataclass(frozen=True)
class ParsedOperand:
    """One measurement, e.g. ``3' 2 1/2``.

    Attributes:
        negative: Sign applied to the whole operand.
        feet: Feet component, if written with a feet mark.
        inches: Whole-inch (or plain number) component.
        fraction: Fractional inch component.
        percent: Operand was followed by ``%``.
    """

    negative: bool = False
    feet: Decimal | None = None
    inches: Decimal | None = None
    fraction: Fraction | None = None
    percent: bool = False

    def total_inches(self) -> Fraction:
        """Exact signed value of the operand in inches (before percent)."""
        total = Fraction(0)
        if self.feet is not None:
            total += Fraction(self.feet) * 12
        if self.inches is not None:
            total += Fraction(self.inches)
        if self.fraction is not None:
            total += self.fraction
        return -total if self.negative else total


@dataclass(frozen=True)
class Expression:
    """Leading operand followed by (operator, operand) pairs."""

    first: ParsedOperand
    rest: tuple[tuple[OperatorSymbol, ParsedOperand], ...] = ()


class _TokenStream:
    def __init__(self, tokens: list[Token]):
        self._tokens = tokens
        self._index = 0

    def peek(self) -> Token | None:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def next(self) -> Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def at_end(self) -> bool:
        return self._index >= len(self._tokens)


def _parse_operand(stream: _TokenStream) -> ParsedOperand:
    token = stream.peek()
    if token is None:
        raise ParseError("Expression ends with an operator")
    if isinstance(token, OperatorToken):
        raise ParseError(f"Unexpected operator {token.symbol!r}", token.position)
    if not isinstance(token, (NumberToken, FractionToken)):
        raise ParseError("Expected a number", token.position)

    negative = token.negative
    feet: Decimal | None = None
    inches: Decimal | None = None
    fraction: Fraction | None = None

    if isinstance(token, NumberToken):
        stream.next()
        if isinstance(stream.peek(), FeetMarkToken):
            stream.next()
            feet = token.value
        else:
            inches = token.value

        if feet is not None and isinstance(stream.peek(), NumberToken):
            continuation = stream.next()
            if isinstance(stream.peek(), FeetMarkToken):
                raise ParseError("Feet given twice in one measurement", continuation.position)
            inches = continuation.value

    following = stream.peek()
    if isinstance(following, FractionToken):
        if inches is not None and "." in str(inches):
            raise ParseError("Mixed number needs a whole-number part", following.position)
        stream.next()
        fraction = Fraction(following.numerator, following.denominator)

    if isinstance(stream.peek(), InchMarkToken):
        mark = stream.next()
        if inches is None and fraction is None:
            raise ParseError("Inch mark must follow an inch value", mark.position)

    percent = False
    if isinstance(stream.peek(), PercentToken):
        stream.next()
        percent = True

    return ParsedOperand(
        negative=negative,
        feet=feet,
        inches=inches,
        fraction=fraction,
        percent=percent,
    )


def parse(tokens: list[Token]) -> Expression:
    """Build an expression from a token list.

    Args:
        tokens: Output of ``tokenize``.

    Returns:
        Expression evaluated left to right.

    Raises:
        ParseError: On empty input, dangling or doubled operators, stray marks,
            or two operands without an operator between them.
    """
    if not tokens:
        raise ParseError("Empty expression")

    stream = _TokenStream(tokens)
    first = _parse_operand(stream)
    rest: list[tuple[OperatorSymbol, ParsedOperand]] = []

    while not stream.at_end():
        token = stream.next()
        if not isinstance(token, OperatorToken):
            raise ParseError("Missing operator between measurements", token.position)
        rest.append((token.symbol, _parse_operand(stream)))

    return Expression(first=first, rest=tuple(rest))
