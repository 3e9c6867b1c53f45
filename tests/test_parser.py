"""Tests for JSON parser and input validation."""

import pytest
from pygron.parser import JSONParser
from pygron.utils.validation import ValidationUtils
from pygron.value_model import JSONNumber


class TestJSONParser:
    """Tests for JSONParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = JSONParser()

    def test_parse_mapping(self):
        """Test parsing a JSON object."""
        assert self.parser.parse('{"a": [1, 2.5, "x"]}') == {"a": [1, 2.5, "x"]}

    def test_parse_scalar_root(self):
        """Test scalar roots are accepted."""
        assert self.parser.parse("42") == 42
        assert self.parser.parse("null") is None

    def test_parse_invalid_json_syntax(self):
        """Test parsing invalid JSON syntax."""
        with pytest.raises(ValueError, match="Invalid JSON input"):
            self.parser.parse('{"a": ')

    def test_parse_empty_json(self):
        """Test parsing empty JSON string."""
        with pytest.raises(ValueError, match="JSON input is empty"):
            self.parser.parse("")

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", "-Infinity"])
    def test_non_finite_constants_rejected(self, text):
        """Test values a conforming decoder does not produce are rejected."""
        with pytest.raises(ValueError, match="Invalid JSON"):
            self.parser.parse(text)

    def test_number_text_preserved(self):
        """Test non-integer numbers keep their source literal."""
        data = self.parser.parse('{"a": 1E5, "b": 1e999, "c": 2.50}')

        assert isinstance(data["a"], JSONNumber)
        assert data["a"] == 100000.0
        assert data["a"].text == "1E5"
        assert data["b"].text == "1e999"
        assert data["c"].text == "2.50"


class TestValidationUtils:
    """Tests for ValidationUtils."""

    def test_validate_json_string_valid(self):
        """Test a valid document."""
        result = ValidationUtils.validate_json_string("[1, 2]")

        assert result.is_valid
        assert result.warnings == []

    def test_deep_nesting_warns(self):
        """Test deeply nested documents produce a warning."""
        text = "[" * 150 + "]" * 150

        result = ValidationUtils.validate_json_string(text)

        assert result.is_valid
        assert "Deep nesting" in result.warnings[0]

    def test_calculate_max_depth(self):
        """Test nesting depth calculation."""
        assert ValidationUtils.calculate_max_depth(1) == 0
        assert ValidationUtils.calculate_max_depth([]) == 0
        assert ValidationUtils.calculate_max_depth({"a": [[]]}) == 2
        assert ValidationUtils.calculate_max_depth({"a": [1]}) == 2

    def test_validate_statements_text(self):
        """Test empty statement input only warns."""
        empty = ValidationUtils.validate_statements_text("\n\n")
        filled = ValidationUtils.validate_statements_text("json = 1;")

        assert empty.is_valid
        assert empty.warnings
        assert filled.warnings == []
