"""Unit tests for keypad entry sessions."""

from src.engine.keypad import KeypadSession


class TestEntry:
    """Tests for building expressions key by key."""
    
    def test_mixed_number_gets_space(self):
        """Test a fraction after a digit forms a mixed number."""
        session = KeypadSession()
        session.append_key("5")
        session.append_fraction('1/2"')
        
        assert session.expression == "5 1/2"
    
    def test_fraction_after_operator(self):
        """Test a fraction after an operator is appended as-is."""
        session = KeypadSession()
        session.append_key("5")
        session.append_operator("+")
        session.append_fraction("3/8")
        
        assert session.expression == "5 + 3/8"
    
    def test_backspace(self):
        """Test backspace removes the last character."""
        session = KeypadSession()
        session.append_key("1")
        session.append_key("2")
        session.backspace()
        
        assert session.expression == "1"
    
    def test_clear(self):
        """Test clear resets everything."""
        session = KeypadSession()
        session.set_expression_and_compute("5 + 5")
        session.clear()
        
        assert session.expression == ""
        assert session.display_value == "0"
        assert session.last_result is None
        assert not session.just_calculated


class TestCompute:
    """Tests for computing and result memory."""
    
    def test_compute_updates_display(self):
        """Test a successful compute shows the feet-inches result."""
        session = KeypadSession()
        session.append_key("5")
        session.append_fraction("1/2")
        session.append_operator("+")
        session.append_key("3")
        
        result = session.compute()
        
        assert result.result_feet_inches == '8 1/2"'
        assert session.display_value == '8 1/2"'
        assert session.just_calculated
    
    def test_operator_continues_from_result(self):
        """Test an operator right after a result reuses it without the inch mark."""
        session = KeypadSession()
        session.set_expression_and_compute("5 1/2 + 3")
        session.append_operator("*")
        
        assert session.expression == "8 1/2 * "
        
        session.append_key("2")
        assert session.compute().result_feet_inches == "1' 5\""
    
    def test_plain_result_memory(self):
        """Test plain-decimal results are reused verbatim."""
        session = KeypadSession()
        session.set_expression_and_compute("2.5 * 2")
        session.append_operator("+")
        
        assert session.expression == "5 + "
    
    def test_key_after_result_starts_over(self):
        """Test a digit after a result starts a new expression."""
        session = KeypadSession()
        session.set_expression_and_compute("5 + 5")
        session.append_key("7")
        
        assert session.expression == "7"
        assert not session.just_calculated
    
    def test_fraction_after_result_starts_over(self):
        """Test a fraction after a result starts a new expression."""
        session = KeypadSession()
        session.set_expression_and_compute("5 + 5")
        session.append_fraction("1/4")
        
        assert session.expression == "1/4"
    
    def test_failed_compute_keeps_state(self):
        """Test a failed compute leaves display and memory untouched."""
        session = KeypadSession()
        session.set_expression("5 / 0")
        
        assert session.compute() is None
        assert session.display_value == "0"
        assert session.last_result is None
        assert not session.just_calculated
