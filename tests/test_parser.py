#
# BigNotation - Parser Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bignotation.formatters import to_pretty_scientific
from bignotation.magnitude import Magnitude
from bignotation.parser import HINT, ParseFailure, parse_magnitude


# Tests ----------------------------------------------------------------------------------------------------------------

class TestParseScientific:

    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("1e45", Magnitude(1, "1", 45), id="plain"),
            pytest.param("-12.34e56", Magnitude(-1, "1234", 57), id="signed-decimal"),
            pytest.param("2.5E45", Magnitude(1, "25", 45), id="upper-e"),
            pytest.param("+3e-5", Magnitude(1, "3", -5), id="negative-exponent"),
            pytest.param(".5e3", Magnitude(1, "5", 2), id="leading-point"),
            pytest.param("0.05e10", Magnitude(1, "5", 8), id="leading-zeros"),
            pytest.param(" 2 . 5 e 4 5 ", Magnitude(1, "25", 45), id="whitespace"),
        ],
    )
    def test_scientific(self, table, text, expected):
        assert parse_magnitude(text, table) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("e123", Magnitude(1, "1", 123), id="bare"),
            pytest.param("E123", Magnitude(1, "1", 123), id="bare-upper"),
            pytest.param("-e7", Magnitude(-1, "1", 7), id="bare-negative"),
            pytest.param("e-3", Magnitude(1, "1", -3), id="bare-negative-exponent"),
        ],
    )
    def test_bare_power(self, table, text, expected):
        assert parse_magnitude(text, table) == expected

    def test_exponent_beyond_float_range(self, table):
        mag = parse_magnitude("7e12345", table)
        assert mag == Magnitude(1, "7", 12345)

    def test_round_trip(self, table):
        assert to_pretty_scientific(parse_magnitude("1e45", table), 1) == "1e45"


class TestParseAbbreviation:

    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("Qa", Magnitude(1, "1", 45), id="bare-suffix"),
            pytest.param("1Qa", Magnitude(1, "1", 45), id="canonical"),
            pytest.param("2.5Qa", Magnitude(1, "25", 45), id="decimal-coefficient"),
            pytest.param("250Qa", Magnitude(1, "25", 47), id="integer-coefficient"),
            pytest.param("0.5QiD", Magnitude(1, "5", 47), id="fraction-coefficient"),
            pytest.param("-3k", Magnitude(-1, "3", 3), id="negative"),
            pytest.param("2.5 qa", Magnitude(1, "25", 45), id="lowercase-spaced"),
            pytest.param("1QID", Magnitude(1, "1", 48), id="uppercase"),
        ],
    )
    def test_abbreviation(self, table, text, expected):
        assert parse_magnitude(text, table) == expected

    def test_coefficient_folded_into_digits(self, table):
        mag = parse_magnitude("2.5Qa", table)
        assert mag.sign == 1
        assert mag.digits.startswith("25")
        assert mag.exponent == 45

    def test_leading_one_retry(self, dict_lookup):
        # The lookup only knows "1qa", the parser retries with the "1" prefix
        assert parse_magnitude("Qa", dict_lookup) == Magnitude(1, "1", 45)

    def test_unknown_abbreviation(self, table):
        result = parse_magnitude("5Zz", table)
        assert isinstance(result, ParseFailure)
        assert result.reason == "Unknown abbreviation: Zz"


class TestParsePlain:

    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("0", Magnitude.zero(), id="zero"),
            pytest.param("-0", Magnitude.zero(), id="negative-zero"),
            pytest.param("1500", Magnitude(1, "15", 3), id="integer"),
            pytest.param("-2.5", Magnitude(-1, "25", 0), id="decimal"),
            pytest.param("0.001", Magnitude(1, "1", -3), id="small"),
        ],
    )
    def test_plain(self, table, text, expected):
        assert parse_magnitude(text, table) == expected


class TestParseFailures:

    @pytest.mark.parametrize(
        "text, reason",
        [
            pytest.param("", "Empty value.", id="empty"),
            pytest.param("   \t", "Empty value.", id="whitespace-only"),
            pytest.param(None, "Empty value.", id="none"),
            pytest.param("1.2.3e4", "Invalid coefficient: '1.2.3'", id="bad-scientific-coefficient"),
            pytest.param("1..5Qa", "Invalid coefficient: '1..5'", id="bad-abbreviation-coefficient"),
            pytest.param("notanumber", "Unknown abbreviation: notanumber", id="unknown-word"),
            pytest.param("1e", "Unknown abbreviation: e", id="dangling-e"),
            pytest.param("1.", HINT, id="dangling-point"),
            pytest.param("--5", HINT, id="double-sign"),
            pytest.param("@#!", HINT, id="symbols"),
            pytest.param("٣e5", HINT, id="non-ascii-digit"),
        ],
    )
    def test_failure_reason(self, table, text, reason):
        result = parse_magnitude(text, table)
        assert isinstance(result, ParseFailure)
        assert result.reason == reason
        assert not result

    def test_exponent_too_long(self, table):
        result = parse_magnitude("1e" + "9" * 5000, table)
        assert isinstance(result, ParseFailure)
        assert result.reason.startswith("Exponent out of range")

    def test_failure_str(self):
        assert str(ParseFailure("Empty value.")) == "Empty value."
