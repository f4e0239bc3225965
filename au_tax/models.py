"""Pydantic models for calculator inputs and results."""

from decimal import Decimal

from pydantic import BaseModel, Field

from au_tax.calculators.tax_data import ResidencyStatus

# --- Input ---


class TaxCalculationInput(BaseModel):
    """Parameters for a single tax calculation.

    Assumed sanitized (see ``au_tax.validation``). ``tax_year`` is left as a
    plain string so that an unknown year reaches the calculator and surfaces
    as a configuration error.
    """

    income: Decimal
    tax_year: str
    residency_status: ResidencyStatus
    includes_medicare_levy: bool | None = None  # None = include
    resident_months: int | None = None  # part-year only, 1-11

    model_config = {"frozen": True}


# --- Results ---


class TaxBreakdownItem(BaseModel):
    """A display line explaining part of the total."""

    description: str
    amount: Decimal
    rate: Decimal | None = None
    bracket_range: str | None = None

    model_config = {"frozen": True}


class TaxCalculationResult(BaseModel):
    """Outcome of a tax calculation. Amounts in AUD, rates as fractions."""

    income: Decimal
    taxable_income: Decimal
    base_tax: Decimal
    medicare_levy: Decimal
    total_tax: Decimal
    net_income: Decimal
    effective_rate: Decimal
    marginal_rate: Decimal
    breakdown: list[TaxBreakdownItem] = Field(default_factory=list)

    model_config = {"frozen": True}
