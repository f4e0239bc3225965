"""Rounding and display helpers for currency, percentages and tax years."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import NamedTuple

_CURRENCY_STRIP = str.maketrans("", "", "$, \t\n")


def _to_decimal(value: Decimal | int | float) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_to_decimals(value: Decimal | int | float, decimals: int = 2) -> Decimal:
    """Round half-up to ``decimals`` places (2.345 -> 2.35)."""
    quantum = Decimal(1).scaleb(-decimals)
    return _to_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal | int | float, decimals: int = 2) -> str:
    """Format as AUD, e.g. ``$1,234.56`` or ``-$20.00``."""
    amount = round_to_decimals(value, decimals)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.{decimals}f}"


def format_percentage(value: Decimal | int | float, decimals: int = 2) -> str:
    """Format a fraction as a percentage (0.1 -> ``10.00%``)."""
    return f"{round_to_decimals(_to_decimal(value) * 100, decimals):.{decimals}f}%"


def format_number(value: Decimal | int | float) -> str:
    """Thousand-separated number, e.g. ``45,001``."""
    return f"{_to_decimal(value):,}"


def parse_currency(value: str) -> Decimal:
    """Parse ``$1,234.56``, ``1,234.56`` or ``1234.56``; unparseable input is 0."""
    cleaned = value.translate(_CURRENCY_STRIP)
    try:
        parsed = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    return parsed if parsed.is_finite() else Decimal("0")


def calculate_percentage(value: Decimal | int | float, percentage: Decimal | int | float) -> Decimal:
    """Return ``value * percentage`` rounded to cents."""
    return round_to_decimals(_to_decimal(value) * _to_decimal(percentage))


def clamp(value: Decimal, minimum: Decimal, maximum: Decimal) -> Decimal:
    return min(max(value, minimum), maximum)


def format_tax_year(tax_year: str) -> str:
    """Typeset a tax year with an en dash (2024-25 -> 2024–25)."""
    return tax_year.replace("-", "–", 1)


class TaxYearDates(NamedTuple):
    start: date
    end: date


def get_tax_year_dates(tax_year: str) -> TaxYearDates:
    """Australian financial years run 1 July to 30 June."""
    start_year = int(tax_year.split("-")[0])
    return TaxYearDates(date(start_year, 7, 1), date(start_year + 1, 6, 30))


def is_future_tax_year(tax_year: str, today: date | None = None) -> bool:
    """True while the financial year has not yet ended."""
    today = today or date.today()
    return get_tax_year_dates(tax_year).end > today


def get_current_tax_year(today: date | None = None) -> str:
    """Return the financial year containing ``today``, e.g. ``"2025-26"``."""
    today = today or date.today()
    start_year = today.year if today.month >= 7 else today.year - 1
    return f"{start_year}-{str(start_year + 1)[-2:]}"
