"""Keypad entry state for building expressions key by key."""

import re

from .calculator import calculate
from .schemas import CalculationResult

_ENDS_WITH_DIGIT = re.compile(r"\d$")


class KeypadSession:
    """Expression being typed on a keypad, with result memory.

    Pressing an operator right after a result continues from that result, so
    ``5 + 5 =`` followed by ``* 2`` computes ``10 * 2``.

    Attributes:
        expression: Expression typed so far.
        display_value: What the display shows ("0" when cleared).
        last_result: Most recent successful result.
        just_calculated: Whether the last action produced a result.
    """

    def __init__(self) -> None:
        self.expression = ""
        self.display_value = "0"
        self.last_result: CalculationResult | None = None
        self.just_calculated = False

    def _accept(self, result: CalculationResult | None) -> CalculationResult | None:
        if result is not None:
            self.display_value = result.result_feet_inches
            self.last_result = result
            self.just_calculated = True
        return result

    def compute(self) -> CalculationResult | None:
        """Evaluate the current expression; state is untouched on failure."""
        return self._accept(calculate(self.expression))

    def set_expression(self, value: str) -> None:
        self.expression = value
        self.just_calculated = False

    def set_expression_and_compute(self, value: str) -> CalculationResult | None:
        """Replace the expression (e.g. from voice input) and evaluate it."""
        self.expression = value
        return self._accept(calculate(value))

    def clear(self) -> None:
        self.expression = ""
        self.display_value = "0"
        self.last_result = None
        self.just_calculated = False

    def backspace(self) -> None:
        self.expression = self.expression[:-1]
        self.just_calculated = False

    def append_key(self, key: str) -> None:
        """Append a digit or decimal point, starting fresh after a result."""
        if self.just_calculated:
            self.expression = key
            self.just_calculated = False
        else:
            self.expression += key

    def append_fraction(self, fraction: str) -> None:
        """Append a fraction key such as ``3/8"``.

        After a digit a space is inserted so ``5`` then ``1/2`` reads ``5 1/2``.
        """
        value = fraction.replace('"', "")
        if self.just_calculated and self.last_result is not None:
            self.expression = value
            self.just_calculated = False
        elif self.expression and _ENDS_WITH_DIGIT.search(self.expression):
            self.expression += " " + value
        else:
            self.expression += value

    def append_operator(self, operator: str) -> None:
        """Append `` op ``, continuing from the last result if one was just shown."""
        op = f" {operator} "
        if self.just_calculated and self.last_result is not None:
            previous = self.last_result.result_feet_inches
            if self.last_result.is_inch_mode:
                previous = previous.replace('"', "")
            self.expression = previous + op
            self.just_calculated = False
        else:
            self.expression += op
