"""Left-to-right evaluator for parsed measurement expressions.

WARNING: there is no operator precedence. ``5 + 3 * 2`` is ``16``, not ``11``.
Each operator is applied to the running total as soon as its right operand
is known. Do not "fix" this by ranking ``*``/``/`` above ``+``/``-``.
"""

from typing import Callable

import structlog

from .exceptions import DivisionByZeroError
from .parser import Expression, ParsedOperand
from .quantity import Quantity
from .tokens import OperatorSymbol

logger = structlog.get_logger("engine.evaluator")

OPERATIONS: dict[OperatorSymbol, Callable[[Quantity, Quantity], Quantity]] = {
    "+": Quantity.add,
    "-": Quantity.subtract,
    "*": Quantity.multiply,
    "/": Quantity.divide,
}


def operand_to_quantity(operand: ParsedOperand) -> Quantity:
    """Convert one operand (feet * 12 + inches + fraction) into a quantity.

    Percent operands are divided by 100 after snapping to the lattice.
    """
    quantity = Quantity.from_fraction(operand.total_inches())
    if operand.percent:
        quantity = quantity.percent()
    return quantity


def fold(expression: Expression) -> Quantity:
    """Apply every operator to the running total in written order.

    Args:
        expression: Parsed expression.

    Returns:
        Final quantity.

    Raises:
        DivisionByZeroError: If any divisor evaluates to zero.
    """
    total = operand_to_quantity(expression.first)
    for symbol, operand in expression.rest:
        total = OPERATIONS[symbol](total, operand_to_quantity(operand))
    return total


def evaluate(expression: Expression) -> Quantity | None:
    """Evaluate an expression, returning None instead of raising on division by zero.

    Args:
        expression: Parsed expression.

    Returns:
        Final quantity, or None if the arithmetic failed.
    """
    try:
        return fold(expression)
    except DivisionByZeroError as exc:
        logger.info("evaluation_failed", error_code=exc.code, message=exc.message)
        return None
