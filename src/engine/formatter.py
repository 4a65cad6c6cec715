"""Formatting of quantities as feet-inches-fraction and decimal strings."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext

from .quantity import INCHES_PER_FOOT, Quantity, decimal_context

MAX_DECIMAL_PLACES = 4
_DECIMAL_STEP = Decimal(1).scaleb(-MAX_DECIMAL_PLACES)


@dataclass(frozen=True)
class FormattedQuantity:
    """Display forms of a single quantity."""

    feet_inches: str
    total_inches: str
    decimal: float


def format_decimal(value: Decimal) -> str:
    """Format a Decimal with at most 4 places, no trailing zeros, no exponent.

    Args:
        value: The Decimal value to format.

    Returns:
        A normalized string representation.
    """
    precision = max(value.adjusted(), 0) + MAX_DECIMAL_PLACES + 2
    with localcontext(decimal_context(precision)):
        rounded = value.quantize(_DECIMAL_STEP, rounding=ROUND_HALF_UP)
        normalized = rounded.normalize()
    if normalized.is_zero():
        return "0"
    return format(normalized, "f")


def format_feet_inches(quantity: Quantity) -> str:
    """Render a quantity as ``F' W N/D"``.

    Feet are dropped when zero and the fraction when its numerator is zero.
    Whole inches are dropped only between feet and a fraction (``3' 1/2"``),
    so a lone feet value still reads ``3' 0"``.
    """
    if quantity.is_zero:
        return "0"

    feet, inches = divmod(quantity.whole, INCHES_PER_FOOT)
    parts: list[str] = []
    if feet:
        parts.append(f"{feet}'")

    if quantity.numerator:
        fraction = f"{quantity.numerator}/{quantity.denominator}"
        parts.append(f"{inches} {fraction}\"" if inches else f"{fraction}\"")
    else:
        parts.append(f"{inches}\"")

    text = " ".join(parts)
    return f"-{text}" if quantity.negative else text


def format_quantity(quantity: Quantity, measurement_mode: bool) -> FormattedQuantity:
    """Produce every display form of a final quantity.

    Args:
        quantity: Final evaluated quantity.
        measurement_mode: Whether the input mentioned feet, inches or fractions.

    Returns:
        FormattedQuantity with feet-inches, total-inches and float values.
    """
    total_inches = format_decimal(quantity.to_decimal())
    if measurement_mode:
        feet_inches = format_feet_inches(quantity)
    else:
        feet_inches = total_inches
    return FormattedQuantity(
        feet_inches=feet_inches,
        total_inches=total_inches,
        decimal=float(quantity),
    )
