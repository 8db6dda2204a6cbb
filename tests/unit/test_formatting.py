"""Tests for presentation formatting."""

from datetime import date

import pytest

from orgledger.utils.formatting import format_amount, format_date


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "$0.00"),
        (5, "$5.00"),
        (1234.5, "$1,234.50"),
        (49000, "$49,000.00"),
        (0.005, "$0.01"),
        (1_000_000.126, "$1,000,000.13"),
        (-5, "-$5.00"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_format_amount_custom_symbol():
    assert format_amount(9800, currency_symbol="€") == "€9,800.00"


def test_format_date_default():
    assert format_date(date(2025, 3, 10)) == "2025-03-10"


def test_format_date_custom():
    assert format_date(date(2025, 3, 10), "%b %d, %Y") == "Mar 10, 2025"
