"""Unit tests for result formatting."""

from decimal import Decimal

import pytest

from src.engine.formatter import format_decimal, format_feet_inches, format_quantity
from src.engine.quantity import Quantity


class TestFeetInches:
    """Tests for format_feet_inches()."""
    
    @pytest.mark.parametrize(
        "quantity,expected",
        [
            (Quantity(numerator=1, denominator=2), '1/2"'),
            (Quantity(whole=5), '5"'),
            (Quantity(whole=8, numerator=3, denominator=4), '8 3/4"'),
            (Quantity(whole=37), "3' 1\""),
            (Quantity(whole=38, numerator=1, denominator=4), "3' 2 1/4\""),
            (Quantity(whole=36, numerator=1, denominator=2), "3' 1/2\""),
            (Quantity(whole=36), "3' 0\""),
            (Quantity(negative=True, whole=3), '-3"'),
            (Quantity(negative=True, whole=16), "-1' 4\""),
            (Quantity(negative=True, numerator=3, denominator=8), '-3/8"'),
        ],
    )
    def test_layout(self, quantity, expected):
        """Test zero components are omitted without dropping the last term."""
        assert format_feet_inches(quantity) == expected
    
    def test_zero(self):
        """Test zero renders as a bare 0."""
        assert format_feet_inches(Quantity.zero()) == "0"


class TestDecimal:
    """Tests for format_decimal()."""
    
    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("8.7500"), "8.75"),
            (Decimal("0.0625"), "0.0625"),
            (Decimal("16"), "16"),
            (Decimal("100"), "100"),
            (Decimal("-3"), "-3"),
            (Decimal("1.23456"), "1.2346"),
            (Decimal("0"), "0"),
            (Decimal("9" * 40 + ".12345"), "9" * 40 + ".1235"),
            (Decimal("-1E+30"), "-1" + "0" * 30),
        ],
    )
    def test_trimmed(self, value, expected):
        """Test at most 4 places, no trailing zeros, no exponent."""
        assert format_decimal(value) == expected


class TestFormatQuantity:
    """Tests for format_quantity()."""
    
    def test_measurement_mode(self):
        """Test feet-inches display with decimal total inches."""
        formatted = format_quantity(Quantity(whole=37, numerator=1, denominator=2), measurement_mode=True)
        
        assert formatted.feet_inches == "3' 1 1/2\""
        assert formatted.total_inches == "37.5"
        assert formatted.decimal == 37.5
    
    def test_plain_mode(self):
        """Test plain mode shows the decimal number without units."""
        formatted = format_quantity(Quantity(whole=5, numerator=1, denominator=2), measurement_mode=False)
        
        assert formatted.feet_inches == "5.5"
        assert formatted.total_inches == "5.5"
    
    @pytest.mark.parametrize("measurement_mode", [True, False])
    def test_zero_in_every_mode(self, measurement_mode):
        """Test zero yields "0" regardless of mode."""
        formatted = format_quantity(Quantity.zero(), measurement_mode)
        
        assert formatted.feet_inches == "0"
        assert formatted.total_inches == "0"
        assert formatted.decimal == 0
