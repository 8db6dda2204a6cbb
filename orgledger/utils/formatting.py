"""Presentation helpers: the only place amounts are rounded.

>>> format_amount(15000)
'$15,000.00'
>>> format_amount(1234.5, currency_symbol="€")
'€1,234.50'
"""

from datetime import date


def format_amount(value: float, currency_symbol: str = "$") -> str:
    """Format a monetary value with thousands separators and two decimals.

    Negative values keep the sign in front of the symbol: ``-$5.00``.
    """
    sign = "-" if value < 0 else ""
    return f"{sign}{currency_symbol}{abs(value):,.2f}"


def format_date(value: date, date_format: str = "%Y-%m-%d") -> str:
    """Format a calendar date for display.

    >>> format_date(date(2025, 2, 1))
    '2025-02-01'
    """
    return value.strftime(date_format)
