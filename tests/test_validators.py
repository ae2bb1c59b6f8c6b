"""
Tests for Code 128 input validation and mode token parsing.
"""

import pytest

from code128_encoder import (
    CodeSet,
    InvalidModeError,
    check_input,
    parse_code_set,
    validate_input,
)
from code128_encoder.validators import first_error


PRINTABLE_ASCII = "".join(chr(code) for code in range(32, 127))


class TestModeTokens:
    """Tests for mode token resolution."""

    @pytest.mark.parametrize("token, expected", [
        ("a", CodeSet.A),
        ("B", CodeSet.B),
        (" c ", CodeSet.C),
        ("AUTO", CodeSet.AUTO),
        (CodeSet.B, CodeSet.B),
    ])
    def test_valid_tokens(self, token, expected):
        assert parse_code_set(token) is expected

    @pytest.mark.parametrize("token", ["", "   ", None, "d", "ab", 1])
    def test_invalid_tokens(self, token):
        with pytest.raises(InvalidModeError):
            parse_code_set(token)


class TestSetA:
    """Tests for set A validation."""

    def test_uppercase_and_digits(self):
        assert validate_input("ABC123", "a")

    def test_control_codes(self):
        assert validate_input("\x00\x1f_", "a")

    def test_lowercase(self):
        """Lower case is outside set A."""
        assert not validate_input("abc", "a")

    def test_error_names_alphabet(self):
        result = check_input("ABc", "a")

        assert not result.valid
        assert "set A" in result.errors[0]
        assert "'c' at 2" in result.errors[0]
        assert result.meta['invalid_positions'] == [2]


class TestSetB:
    """Tests for set B validation."""

    def test_printable_ascii(self):
        """Every non-empty printable ASCII string is valid in set B."""
        assert validate_input(PRINTABLE_ASCII, "b")
        for char in PRINTABLE_ASCII:
            assert validate_input(char, "b")

    def test_del(self):
        assert validate_input("\x7f", "b")

    def test_control_code(self):
        result = check_input("AB\tC", "b")
        assert not result.valid
        assert "0x09 at 2" in first_error(result)

    def test_latin1_rejected(self):
        """Extended characters are an encoder feature, not part of the alphabet."""
        assert not validate_input("é", "b")

    def test_many_errors_truncated(self):
        result = check_input("\x01" * 8, "b")
        assert "(+3 more)" in result.errors[0]


class TestSetC:
    """Tests for set C validation."""

    def test_digit_pairs(self):
        assert validate_input("1234", "c")
        assert validate_input("00", "c")

    def test_odd_length(self):
        assert not validate_input("123", "c")
        assert not validate_input("1", "c")

    def test_non_digit(self):
        assert not validate_input("12a4", "c")
        assert not validate_input("１２", "c")

    def test_even_digit_strings(self):
        for length in range(2, 22, 2):
            assert validate_input("7" * length, "c")
            assert not validate_input("7" * (length + 1), "c")

    def test_gs1_segments(self):
        assert validate_input("12\x1d34", "c", gs1_128=True)
        assert not validate_input("12\x1d34", "c")
        assert not validate_input("123\x1d4", "c", gs1_128=True)

    def test_trailing_newline(self):
        """A trailing newline is neither a digit nor half of a pair."""
        assert validate_input("12\n", "c") is False
        assert validate_input("1234\n", "c") is False
        assert validate_input("12\n\x1d34", "c", gs1_128=True) is False

        result = check_input("12\n", "c")
        assert "only digits" in first_error(result)


class TestAuto:
    """Tests for AUTO validation."""

    def test_full_ascii(self):
        assert validate_input("".join(chr(code) for code in range(128)), "auto")

    def test_latin1(self):
        result = check_input("Café", "auto")
        assert not result.valid
        assert result.meta['code_set'] == "AUTO"


class TestCommon:
    """Behaviour shared by every mode."""

    @pytest.mark.parametrize("mode", ["a", "b", "c", "auto"])
    def test_empty_input(self, mode):
        assert not validate_input("", mode)
        assert check_input("", mode).errors == ["Input is empty"]

    def test_empty_mode_is_not_a_validation_failure(self):
        with pytest.raises(InvalidModeError):
            validate_input("abc", "")

    def test_gs_allowed_in_b_for_gs1(self):
        assert not validate_input("AB\x1dCD", "b")
        assert validate_input("AB\x1dCD", "b", gs1_128=True)
