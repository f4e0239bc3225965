"""Shared test fixtures."""

from collections.abc import Callable
from decimal import Decimal

import pytest

from au_tax.models import TaxCalculationInput


def _make_input(
    income: str | int = "50000",
    tax_year: str = "2024-25",
    residency_status: str = "resident",
    includes_medicare_levy: bool | None = None,
    resident_months: int | None = None,
) -> TaxCalculationInput:
    return TaxCalculationInput(
        income=Decimal(str(income)),
        tax_year=tax_year,
        residency_status=residency_status,
        includes_medicare_levy=includes_medicare_levy,
        resident_months=resident_months,
    )


@pytest.fixture
def make_input() -> Callable[..., TaxCalculationInput]:
    """Factory for calculator inputs with 2024-25 resident defaults."""
    return _make_input
