"""
Tests for the Number Formatting module

Checks:
1. format_number canonical output
2. scan_number token boundaries, whitespace and sign handling
3. parse_number: trailing content, parse errors, overflow policies
4. Round trip format -> parse
"""

import logging

import pytest

from src.core.domain import IntegerSettings, OverflowPolicy
from src.core.errors import IntegerOverflowError, NumberParseError
from src.core.formatting import NumberToken, format_number, parse_number, scan_number
from src.core.math import INT32_MAX, INT32_MIN, wrap_to_range

HUGE_DIGITS = "9" * 5000  # more digits than int(str) converts by default

# =============================================================================
# FORMAT
# =============================================================================


class TestFormatNumber:
    """Tests for format_number"""

    def test_known_values(self) -> None:
        assert format_number(42) == "42"
        assert format_number(0) == "0"
        assert format_number(-7) == "-7"

    def test_range_edges(self) -> None:
        assert format_number(INT32_MAX) == "2147483647"
        assert format_number(INT32_MIN) == "-2147483648"

    def test_rejects_out_of_range(self) -> None:
        with pytest.raises(IntegerOverflowError):
            format_number(INT32_MAX + 1)

    def test_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            format_number(4.2)  # type: ignore[arg-type]


# =============================================================================
# SCAN
# =============================================================================


class TestScanNumber:
    """Tests for scan_number"""

    def test_token_boundaries(self) -> None:
        token = scan_number("  -12abc")
        assert token == NumberToken(value=-12, start=2, end=5, text="-12", remainder="abc")

    def test_plus_sign(self) -> None:
        assert scan_number("+8").value == 8

    def test_leading_zeros(self) -> None:
        assert scan_number("007").value == 7
        assert scan_number("-0").value == 0

    def test_all_c_whitespace_skipped(self) -> None:
        assert scan_number(" \t\n\v\f\r5").value == 5

    def test_value_not_range_checked(self) -> None:
        assert scan_number("99999999999").value == 99999999999

    @pytest.mark.parametrize(
        "text,position",
        [("", 0), ("abc", 0), ("   ", 3), ("-", 1), ("+ 5", 1), ("  -x", 3), ("--5", 1)],
    )
    def test_no_token(self, text: str, position: int) -> None:
        with pytest.raises(NumberParseError) as exc_info:
            scan_number(text)
        assert exc_info.value.text == text
        assert exc_info.value.position == position

    def test_padded_token_is_exact(self) -> None:
        """Leading zeros do not count towards the exact-conversion limit"""
        token = scan_number("0" * 5000 + "7")
        assert token.value == 7
        assert not token.capped

    def test_huge_token_is_capped(self) -> None:
        token = scan_number(HUGE_DIGITS + "x")
        assert token.capped
        assert token.value > 2**64
        assert token.remainder == "x"
        assert token.end == 5000

    def test_huge_negative_token_keeps_sign(self) -> None:
        assert scan_number("-" + HUGE_DIGITS).value < -(2**64)

    def test_non_ascii_digits_rejected(self) -> None:
        """Only ASCII 0-9 count as digits"""
        with pytest.raises(NumberParseError):
            scan_number("٣")  # ARABIC-INDIC DIGIT THREE

    def test_rejects_non_str(self) -> None:
        with pytest.raises(TypeError):
            scan_number(42)  # type: ignore[arg-type]


# =============================================================================
# PARSE
# =============================================================================


class TestParseNumber:
    """Tests for parse_number"""

    def test_known_values(self) -> None:
        assert parse_number("42") == 42
        assert parse_number("-42") == -42
        assert parse_number("  +3") == 3

    def test_trailing_content_ignored(self) -> None:
        assert parse_number("17 apples") == 17
        assert parse_number("12.75") == 12
        assert parse_number("5-3") == 5

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="no integer found"):
            parse_number("abc")

    def test_parse_error_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="gangaji"):
            with pytest.raises(NumberParseError):
                parse_number("abc")
        assert any("no integer token" in r.getMessage() for r in caplog.records)

    def test_range_edges(self) -> None:
        assert parse_number("2147483647") == INT32_MAX
        assert parse_number("-2147483648") == INT32_MIN

    def test_overflow_checked_by_default(self) -> None:
        with pytest.raises(IntegerOverflowError) as exc_info:
            parse_number("2147483648")
        assert exc_info.value.operation == "parse_number"

    def test_overflow_saturates(self) -> None:
        settings = IntegerSettings(overflow_policy=OverflowPolicy.SATURATE)
        assert parse_number("99999999999", settings=settings) == INT32_MAX
        assert parse_number("-99999999999", settings=settings) == INT32_MIN

    def test_overflow_wraps(self) -> None:
        settings = IntegerSettings(overflow_policy=OverflowPolicy.WRAP)
        assert parse_number("2147483648", settings=settings) == INT32_MIN


class TestParseHugeNumbers:
    """Tokens longer than the int <-> str digit limit"""

    def test_leading_zeros(self) -> None:
        assert parse_number("0" * 5000 + "7") == 7
        assert parse_number("-" + "0" * 5000 + "7") == -7

    def test_checked_raises_overflow(self) -> None:
        with pytest.raises(IntegerOverflowError):
            parse_number(HUGE_DIGITS)

    def test_saturate_clamps(self) -> None:
        settings = IntegerSettings(overflow_policy=OverflowPolicy.SATURATE)
        assert parse_number(HUGE_DIGITS, settings=settings) == INT32_MAX
        assert parse_number("-" + HUGE_DIGITS, settings=settings) == INT32_MIN

    @pytest.mark.parametrize("bits", [8, 32, 64])
    def test_wrap_keeps_low_bits(self, bits: int) -> None:
        """10**5000 - 1 reduced modulo 2**bits, computed without str conversion"""
        settings = IntegerSettings(bits=bits, overflow_policy=OverflowPolicy.WRAP)
        expected = wrap_to_range(pow(10, 5000, 1 << bits) - 1, bits)

        assert parse_number(HUGE_DIGITS, settings=settings) == expected
        assert parse_number("-" + HUGE_DIGITS, settings=settings) == wrap_to_range(
            -expected, bits
        )


# =============================================================================
# ROUND TRIP
# =============================================================================


@pytest.mark.parametrize("n", [0, 1, -1, 42, -99, 1000000, INT32_MAX, INT32_MIN])
def test_format_parse_round_trip(n: int) -> None:
    assert parse_number(format_number(n)) == n


def test_sample_scenario() -> None:
    assert format_number(42) == "42"
