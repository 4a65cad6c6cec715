"""Exact inch quantities on a sixteenth-of-an-inch lattice."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Context, Decimal, DivisionByZero, InvalidOperation, Overflow, ROUND_HALF_EVEN, localcontext
from fractions import Fraction

from .exceptions import DivisionByZeroError

# Finest resolution the grammar supports. Widening precision means widening this set.
ALLOWED_DENOMINATORS = (1, 2, 4, 8, 16)
RESOLUTION = ALLOWED_DENOMINATORS[-1]
INCHES_PER_FOOT = 12
# Sixteenths terminate within four decimal places
FRACTION_PLACES = 4


def decimal_context(precision: int) -> Context:
    """Build a deterministic Decimal context that traps invalid operations.

    Args:
        precision: Significant digits to retain in arithmetic.

    Returns:
        A configured Decimal context.
    """
    context = Context(prec=precision, rounding=ROUND_HALF_EVEN)
    context.traps[DivisionByZero] = True
    context.traps[InvalidOperation] = True
    context.traps[Overflow] = True
    return context


def integer_digits(value: int) -> int:
    """Upper bound on the decimal digits of ``abs(value)``, without ``str()``."""
    return abs(value).bit_length() // 3 + 1


def round_half_away_from_zero(value: Fraction) -> int:
    """Round an exact rational to the nearest integer, ties away from zero.

    Args:
        value: Exact rational value.

    Returns:
        The rounded integer.
    """
    magnitude = math.floor(abs(value) + Fraction(1, 2))
    return -magnitude if value < 0 else magnitude


@dataclass(frozen=True)
class Quantity:
    """Signed number of inches: ``whole + numerator/denominator``.

    The sign applies to the whole value, so ``-3 1/2`` is negative three and a
    half. The constructor enforces the normalized form: the fraction is proper
    and reduced, the denominator is a power of two no larger than 16, whole
    numbers carry ``0/1`` and zero is never negative.
    """

    negative: bool = False
    whole: int = 0
    numerator: int = 0
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.denominator not in ALLOWED_DENOMINATORS:
            raise ValueError(f"denominator must be one of {ALLOWED_DENOMINATORS}")
        if self.whole < 0:
            raise ValueError("whole inches must be non-negative")
        if not 0 <= self.numerator < self.denominator:
            raise ValueError("numerator must satisfy 0 <= numerator < denominator")
        if self.numerator == 0 and self.denominator != 1:
            raise ValueError("whole quantities must use denominator 1")
        if math.gcd(self.numerator, self.denominator) != 1 and self.numerator != 0:
            raise ValueError("fraction must be reduced")
        if self.negative and self.whole == 0 and self.numerator == 0:
            raise ValueError("zero cannot be negative")

    @classmethod
    def zero(cls) -> Quantity:
        return cls()

    @classmethod
    def from_sixteenths(cls, sixteenths: int) -> Quantity:
        """Build a normalized quantity from a signed count of sixteenths."""
        negative = sixteenths < 0
        whole, remainder = divmod(abs(sixteenths), RESOLUTION)
        if remainder == 0:
            return cls(negative=negative and whole > 0, whole=whole)
        divisor = math.gcd(remainder, RESOLUTION)
        return cls(
            negative=negative,
            whole=whole,
            numerator=remainder // divisor,
            denominator=RESOLUTION // divisor,
        )

    @classmethod
    def from_fraction(cls, value: Fraction) -> Quantity:
        """Snap an exact rational onto the lattice, rounding half away from zero."""
        return cls.from_sixteenths(round_half_away_from_zero(value * RESOLUTION))

    @classmethod
    def from_decimal(cls, value: Decimal | int | str) -> Quantity:
        return cls.from_fraction(Fraction(Decimal(value)))

    @classmethod
    def from_parts(
        cls,
        whole: int = 0,
        numerator: int = 0,
        denominator: int = 1,
        negative: bool = False,
    ) -> Quantity:
        """Build a quantity from possibly unreduced or improper parts."""
        if denominator <= 0:
            raise ValueError("denominator must be positive")
        value = whole + Fraction(numerator, denominator)
        return cls.from_fraction(-value if negative else value)

    @property
    def is_zero(self) -> bool:
        return self.whole == 0 and self.numerator == 0

    def as_fraction(self) -> Fraction:
        """Exact rational value in inches."""
        magnitude = self.whole + Fraction(self.numerator, self.denominator)
        return -magnitude if self.negative else magnitude

    def to_decimal(self) -> Decimal:
        """Exact decimal value in inches (sixteenths always terminate)."""
        precision = integer_digits(self.whole) + FRACTION_PLACES + 1
        with localcontext(decimal_context(precision)):
            value = Decimal(self.whole) + Decimal(self.numerator) / Decimal(self.denominator)
        return value.copy_negate() if self.negative else value

    def __float__(self) -> float:
        return float(self.as_fraction())

    def __neg__(self) -> Quantity:
        if self.is_zero:
            return self
        return Quantity(
            negative=not self.negative,
            whole=self.whole,
            numerator=self.numerator,
            denominator=self.denominator,
        )

    def _common_numerators(self, other: Quantity) -> tuple[int, int, int]:
        denominator = min(math.lcm(self.denominator, other.denominator), RESOLUTION)
        left = self.as_fraction() * denominator
        right = other.as_fraction() * denominator
        # Power-of-two denominators always divide the capped LCM, so these are exact.
        return round_half_away_from_zero(left), round_half_away_from_zero(right), denominator

    def add(self, other: Quantity) -> Quantity:
        left, right, denominator = self._common_numerators(other)
        return Quantity.from_fraction(Fraction(left + right, denominator))

    def subtract(self, other: Quantity) -> Quantity:
        left, right, denominator = self._common_numerators(other)
        return Quantity.from_fraction(Fraction(left - right, denominator))

    def multiply(self, other: Quantity) -> Quantity:
        return Quantity.from_fraction(self.as_fraction() * other.as_fraction())

    def divide(self, other: Quantity) -> Quantity:
        """Divide exactly, then round to the nearest sixteenth.

        Raises:
            DivisionByZeroError: If ``other`` is exactly zero.
        """
        if other.is_zero:
            raise DivisionByZeroError()
        return Quantity.from_fraction(self.as_fraction() / other.as_fraction())

    def percent(self) -> Quantity:
        """This quantity divided by 100, rounded to the nearest sixteenth."""
        return Quantity.from_fraction(self.as_fraction() / 100)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def __str__(self) -> str:
        text = str(self.whole)
        if self.numerator:
            text = f"{text} {self.numerator}/{self.denominator}"
        return f"-{text}" if self.negative else text
