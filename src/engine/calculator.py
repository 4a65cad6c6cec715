"""Entry point chaining tokenizer, parser, evaluator and formatter."""

from decimal import InvalidOperation

import structlog

from .evaluator import evaluate
from .exceptions import ParseError, TokenizeError
from .formatter import format_quantity
from .parser import parse
from .schemas import CalculationResult
from .tokens import (
    FeetMarkToken,
    FractionToken,
    InchMarkToken,
    NumberToken,
    PercentToken,
    Token,
    tokenize,
)

logger = structlog.get_logger("engine")


def is_measurement(tokens: list[Token]) -> bool:
    """Decide whether results are shown as feet-inches-fractions.

    Any feet mark, inch mark or fraction selects measurement mode. Without
    them, bare integers are implicit inches; a decimal literal or a percent
    selects plain-decimal mode.
    """
    if any(isinstance(token, (FeetMarkToken, InchMarkToken, FractionToken)) for token in tokens):
        return True
    if any(isinstance(token, PercentToken) for token in tokens):
        return False
    return all(token.is_integer for token in tokens if isinstance(token, NumberToken))


def calculate(expression: str) -> CalculationResult | None:
    """Evaluate a canonical expression.

    Every operand and result lives on the sixteenth-of-an-inch lattice, plain
    decimal input included, so ``0.1 + 0.2`` reports ``0.3125`` (``1/8 + 3/16``).
    That is the resolution of a tape measure, not a rounding bug.

    Args:
        expression: Canonical expression, e.g. ``"5 1/2 + 3 1/4"``.

    Returns:
        CalculationResult, or None when the input failed to tokenize or parse,
        a division by zero occurred, or the result is too large to render.
        Failure details are logged only.
    """
    try:
        tokens = tokenize(expression)
        parsed = parse(tokens)
    except (TokenizeError, ParseError) as exc:
        logger.info(
            "calculation_failed",
            expression=expression,
            error_code=exc.code,
            position=exc.position,
            message=exc.message,
        )
        return None

    quantity = evaluate(parsed)
    if quantity is None:
        return None

    measurement_mode = is_measurement(tokens)
    try:
        formatted = format_quantity(quantity, measurement_mode)
    except (InvalidOperation, OverflowError, ValueError) as exc:
        # float() overflow past 1e308, int-to-str limit on huge feet values
        logger.info(
            "calculation_failed",
            expression=expression,
            error_code="RESULT_OUT_OF_RANGE",
            message=str(exc),
        )
        return None
    return CalculationResult(
        expression=expression,
        result_decimal=formatted.decimal,
        result_feet_inches=formatted.feet_inches,
        result_total_inches=formatted.total_inches,
        is_inch_mode=measurement_mode,
    )
