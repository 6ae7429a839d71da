from datetime import datetime
from decimal import Decimal

import pytest

from coindl.config import NEGATIVE_MARKER, POSITIVE_MARKER
from coindl.errors import FormatError
from coindl.formatters.value_formatter import format_value, trend_indicator, format_timestamp
from coindl.models import Direction, TrendValue


def test_format_value_adds_separators_and_two_decimals():
    assert format_value(1234.5) == "1,234.50"
    assert format_value(Decimal("1000000")) == "1,000,000.00"
    assert format_value(7) == "7.00"


def test_format_value_negative():
    assert format_value(-5) == "-5.00"
    assert format_value(-1234567.891) == "-1,234,567.89"


def test_format_value_rounds_half_up():
    """Values are rounded from their printed digits, not the binary float"""
    assert format_value(45000.125) == "45,000.13"
    assert format_value(2.675) == "2.68"
    assert format_value("12.345") == "12.35"
    assert format_value(-0.125) == "-0.13"


def test_format_value_large_values():
    assert format_value(Decimal("1e27")) == "1,000,000,000,000,000,000,000,000,000.00"
    assert format_value(2e26) == "200,000,000,000,000,000,000,000,000.00"
    assert format_value(Decimal("-12345678901234567890123456789.005")) == \
        "-12,345,678,901,234,567,890,123,456,789.01"


def test_format_value_never_prints_negative_zero():
    assert format_value(-0.004) == "0.00"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), Decimal("NaN")])
def test_format_value_rejects_non_finite(value):
    with pytest.raises(FormatError):
        format_value(value)


@pytest.mark.parametrize("value", [None, "abc", True, [1]])
def test_format_value_rejects_non_numeric(value):
    with pytest.raises(FormatError):
        format_value(value)


def test_trend_indicator_negative():
    assert trend_indicator(-3.2) == (NEGATIVE_MARKER, "-3.20")


def test_trend_indicator_zero_counts_as_positive():
    assert trend_indicator(0) == (POSITIVE_MARKER, "0.00")
    assert trend_indicator(12.5) == (POSITIVE_MARKER, "12.50")


def test_trend_indicator_rejects_nan():
    with pytest.raises(FormatError):
        trend_indicator(float("nan"))


def test_trend_value_direction_is_sign_only():
    assert TrendValue.from_percent(-0.01).direction == Direction.DOWN
    assert TrendValue.from_percent(0).direction == Direction.UP
    assert TrendValue.from_percent(4).direction == Direction.UP


def test_format_timestamp_matches_asctime_layout():
    assert format_timestamp(datetime(2024, 3, 5, 9, 7, 3)) == "Tue Mar  5 09:07:03 2024"
    assert format_timestamp(datetime(2024, 3, 15, 21, 0, 0)) == "Fri Mar 15 21:00:00 2024"
