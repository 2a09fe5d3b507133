"""
Tests for printf-style template formatting.
"""

import pytest

from exprctx import format_template, FormatError, TypeError as ArgumentTypeError


class TestFormatTemplate:
    """Test placeholder substitution."""

    def test_plain_substitution(self):
        """Test %s placeholders are filled in order."""
        result = format_template("This is a %s message with %s words: <%s>",
                                 ["prerecorded", 3, "Oh Hello World"])
        assert result == "This is a prerecorded message with 3 words: <Oh Hello World>"

    def test_no_placeholders(self):
        """Test a template without placeholders is returned unchanged."""
        assert format_template("hello", []) == "hello"

    def test_extra_arguments_ignored(self):
        """Test unused trailing arguments are ignored."""
        assert format_template("%s-%s", ["a", "b", "ignored"]) == "a-b"

    def test_missing_argument(self):
        """Test more placeholders than arguments raises FormatError."""
        with pytest.raises(FormatError, match="needs argument 3, but only 2 supplied"):
            format_template("%s %s %s", ["a", "b"])

    def test_format_error_is_value_error(self):
        """Test FormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            format_template("%s", [])

    def test_explicit_index(self):
        """Test %n$ selects an argument without moving the ordinary index."""
        assert format_template("%2$s %1$s %s", ["a", "b"]) == "b a a"

    def test_explicit_index_out_of_range(self):
        """Test an explicit index past the arguments raises FormatError."""
        with pytest.raises(FormatError):
            format_template("%3$s", ["a"])

    def test_previous_argument_flag(self):
        """Test %< reuses the previous argument."""
        assert format_template("%s %<S", ["ab"]) == "ab AB"

    def test_numeric_conversions(self):
        """Test integer and float conversions."""
        assert format_template("%d|%05d|%x|%X|%o", [7, 42, 255, 255, 8]) == "7|00042|ff|FF|10"
        assert format_template("%.2f", [3.14159]) == "3.14"
        assert format_template("%.1f", [2]) == "2.0"

    def test_width_and_precision_on_text(self):
        """Test text padding and truncation."""
        assert format_template("[%5s]", ["ab"]) == "[   ab]"
        assert format_template("[%-5s]", ["ab"]) == "[ab   ]"
        assert format_template("[%.2s]", ["abcdef"]) == "[ab]"

    def test_literal_percent_and_newline(self):
        """Test %% and %n consume no arguments."""
        assert format_template("100%%%n%s", ["x"]) == "100%\nx"

    def test_boolean_and_char_conversions(self):
        """Test %b and %c."""
        assert format_template("%b %b %B", [None, "x", False]) == "false true FALSE"
        assert format_template("%c%c", [65, "b"]) == "Ab"

    def test_hash_conversion_is_stable(self):
        """Test %h gives fixed values rather than the seeded builtin hash."""
        assert format_template("%h", ["Tesla"]) == "4cf5cf7"
        assert format_template("%H", ["Tesla"]) == "4CF5CF7"
        assert format_template("%h|%h|%h", [255, -1, True]) == "ff|ffffffff|4cf"
        assert format_template("%h|%h", [[1, 2], 1.0]) == "3e2|3ff00000"
        with pytest.raises(ArgumentTypeError, match="cannot render"):
            format_template("%h", [{"a": 1}])

    def test_null_and_boolean_rendering(self):
        """Test %s renders None and booleans the same way %b and %h do."""
        assert format_template("%s|%b|%h|%s", [None, False, None, True]) == "null|false|null|true"
        assert format_template("%s", [[None, False, "a"]]) == "[null, false, a]"

    def test_negative_hex_and_octal(self):
        """Test negative values print as their two's complement bit pattern."""
        assert format_template("%x", [-1]) == "ffffffff"
        assert format_template("%o", [-8]) == "37777777770"
        assert format_template("%X", [-2**40]) == "FFFFFF0000000000"
        assert format_template("%d", [-1]) == "-1"

    def test_numeric_conversion_type_mismatch(self):
        """Test %d on a string raises TypeError."""
        with pytest.raises(ArgumentTypeError, match="cannot render a 'string'"):
            format_template("%d", ["three"])

    def test_unknown_conversion(self):
        """Test an unknown conversion raises FormatError."""
        with pytest.raises(FormatError, match="unknown format conversion"):
            format_template("%q", ["x"])

    def test_dangling_percent(self):
        """Test a trailing lone % raises FormatError."""
        with pytest.raises(FormatError):
            format_template("50%", [])
