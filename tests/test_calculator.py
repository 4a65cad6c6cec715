"""End-to-end tests for calculate()."""

import pytest

from src.engine import calculate, is_measurement, tokenize


class TestCalculate:
    """Tests for the calculate() facade."""
    
    def test_fraction_reduced(self):
        """Test 2/4 displays as 1/2."""
        result = calculate("2/4")
        
        assert result.result_feet_inches == '1/2"'
        assert result.result_decimal == 0.5
    
    def test_left_to_right(self):
        """Test 5 + 3 * 2 is 16."""
        result = calculate("5 + 3 * 2")
        
        assert result.result_decimal == 16
        assert result.result_total_inches == "16"
    
    def test_feet_adjacency(self):
        """Test 3' 2 - 1 is 3 feet 1 inch."""
        assert calculate("3' 2 - 1").result_feet_inches == "3' 1\""
    
    def test_fraction_arithmetic(self):
        """Test 5 1/2 + 3 1/4 = 8 3/4."""
        result = calculate("5 1/2 + 3 1/4")
        
        assert result.result_feet_inches == '8 3/4"'
        assert result.result_decimal == 8.75
        assert result.result_total_inches == "8.75"
        assert result.is_inch_mode
    
    def test_division(self):
        """Test 10 1/2 / 2 = 5 1/4."""
        assert calculate("10 1/2 / 2").result_feet_inches == '5 1/4"'
    
    def test_division_by_zero(self):
        """Test 5 / 0 gives no result rather than infinity or a crash."""
        assert calculate("5 / 0") is None
    
    def test_negative_result(self):
        """Test 2 - 5 = -3 inches."""
        assert calculate("2 - 5").result_feet_inches == '-3"'
    
    def test_feet_result(self):
        """Test totals of 12 inches or more split into feet."""
        result = calculate("20' 3 3/8 - 4' 11 7/8")
        
        assert result.result_feet_inches == "15' 3 1/2\""
        assert result.result_total_inches == "183.5"
    
    def test_plain_decimal_mode(self):
        """Test decimal input without units shows a plain number."""
        result = calculate("2.5 * 2")
        
        assert not result.is_inch_mode
        assert result.result_feet_inches == "5"
        assert result.result_decimal == 5
    
    def test_percent(self):
        """Test percent entry is plain-decimal."""
        result = calculate("200 * 50 %")
        
        assert not result.is_inch_mode
        assert result.result_feet_inches == "100"
    
    def test_typographic_marks(self):
        """Test curly quotes behave like ASCII marks."""
        assert calculate("3’ 2” + 1").result_feet_inches == "3' 3\""
    
    @pytest.mark.parametrize("expression", ["5 - 5", "2.5 - 2.5", "0", "3' - 36"])
    def test_zero_in_every_mode(self, expression):
        """Test a zero result is "0" whatever the mode."""
        result = calculate(expression)
        
        assert result.result_feet_inches == "0"
        assert result.result_total_inches == "0"
        assert result.result_decimal == 0
    
    @pytest.mark.parametrize("expression", ["", "   ", "abc", "5 +", "5 3", "* 2", "1/0"])
    def test_invalid_input_returns_none(self, expression):
        """Test tokenize and parse failures surface as None."""
        assert calculate(expression) is None
    
    def test_serialized_field_names(self):
        """Test the result serializes with the public camelCase contract."""
        data = calculate("5 1/2").model_dump(by_alias=True)
        
        assert data == {
            "expression": "5 1/2",
            "resultDecimal": 5.5,
            "resultFeetInches": '5 1/2"',
            "resultTotalInches": "5.5",
            "isInchMode": True,
        }


class TestRoundTrip:
    """Formatting a result and evaluating it again keeps the value."""
    
    @pytest.mark.parametrize(
        "expression",
        [
            "10 1/2 / 2",
            "3' 2 - 1",
            "2 - 5",
            "5 1/2 + 3 1/4",
            "1' 4 * 3",
            "7/16 + 1/16",
            "20' 3 3/8 - 4' 11 7/8",
            "0 - 1' 4 1/2",
            "3' 1/2",
            "10 / 3",
        ],
    )
    def test_round_trip(self, expression):
        """Test re-evaluating the feet-inches output gives the same decimal."""
        first = calculate(expression)
        second = calculate(first.result_feet_inches.replace('"', ""))
        
        assert second is not None
        assert second.result_decimal == first.result_decimal


class TestMeasurementMode:
    """Tests for is_measurement()."""
    
    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("3' 2", True),
            ('5"', True),
            ("1/2", True),
            ("5 + 3", True),
            ('2.5 + 1"', True),
            ("2.5 + 1", False),
            ("50 %", False),
        ],
    )
    def test_mode(self, expression, expected):
        """Test unit glyphs, fractions and bare integers select measurement mode."""
        assert is_measurement(tokenize(expression)) is expected


class TestLargeOperands:
    """Very long numbers either evaluate exactly or yield None."""
    
    def test_thirty_digit_integer(self):
        """Test a whole value past the default Decimal precision stays exact."""
        result = calculate("9" * 30 + " + 1")
        
        assert result.result_total_inches == "1" + "0" * 30
        assert result.result_feet_inches == f"{10**30 // 12}' 4\""
        assert result.result_decimal == 1e30
    
    def test_large_plain_decimal_keeps_fraction(self):
        """Test the half inch survives next to a thirty-digit whole part."""
        result = calculate("0.5 + " + "9" * 30)
        
        assert result.result_total_inches == "9" * 30 + ".5"
    
    def test_large_negative_value(self):
        """Test negation does not round a long value."""
        result = calculate("-" + "9" * 30)
        
        assert result.result_total_inches == "-" + "9" * 30
    
    def test_longest_literal_accepted(self):
        """Test a 64-digit literal is still a valid operand."""
        assert calculate("9" * 64) is not None
    
    @pytest.mark.parametrize(
        "expression",
        [
            "9" * 65,
            "9" * 400,
            "9" * 5000 + "/2",
            "1/" + "9" * 5000,
            " * ".join(["9" * 64] * 5),
            " * ".join(["9" * 64] * 70),
        ],
    )
    def test_out_of_range_returns_none(self, expression):
        """Test oversized literals and results surface as None, never raise."""
        assert calculate(expression) is None
    
    def test_plain_decimals_snap_to_sixteenths(self):
        """Test 0.1 + 0.2 is 1/8 + 3/16."""
        assert calculate("0.1 + 0.2").result_total_inches == "0.3125"
