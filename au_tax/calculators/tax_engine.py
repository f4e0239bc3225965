"""Tax engine: composites base tax and Medicare Levy, with part-year apportionment."""

import logging
from decimal import ROUND_HALF_UP, Decimal

from au_tax.calculators.errors import TaxYearNotFoundError
from au_tax.calculators.income_tax import calculate_base_tax
from au_tax.calculators.medicare_levy import calculate_medicare_levy
from au_tax.calculators.tax_data import (
    DAYS_IN_YEAR,
    DEFAULT_RESIDENT_MONTHS,
    NUMBER_OF_MONTHS,
    TAX_YEARS,
    TaxYearData,
)
from au_tax.formatting import format_number, round_to_decimals
from au_tax.models import TaxBreakdownItem, TaxCalculationInput, TaxCalculationResult

logger = logging.getLogger(__name__)


def get_tax_year_data(tax_year: str) -> TaxYearData:
    """Look up the tables for ``tax_year`` or raise TaxYearNotFoundError."""
    data = TAX_YEARS.get(tax_year)
    if data is None:
        logger.warning("No tax configuration for year %s", tax_year)
        raise TaxYearNotFoundError(tax_year)
    return data


def calculate_tax(tax_input: TaxCalculationInput) -> TaxCalculationResult:
    """Calculate full-year income tax and Medicare Levy.

    Non-residents use the non-resident brackets and never pay the levy.
    Residents (and part-year inputs passed here directly) use the resident
    brackets; the levy applies to residents unless explicitly disabled.

    Raises:
        TaxYearNotFoundError: No tables for ``tax_input.tax_year``.
    """
    data = get_tax_year_data(tax_input.tax_year)
    income = tax_input.income
    is_resident = tax_input.residency_status == "resident"

    logger.debug(
        "Calculating %s tax for %s on income %s",
        tax_input.residency_status, tax_input.tax_year, income,
    )

    brackets = (
        data.brackets.non_resident
        if tax_input.residency_status == "non-resident"
        else data.brackets.resident
    )
    base = calculate_base_tax(income, brackets)

    medicare_levy = Decimal("0")
    levy_breakdown: list[TaxBreakdownItem] = []
    if is_resident and tax_input.includes_medicare_levy is not False:
        medicare_levy = calculate_medicare_levy(income, data.medicare_levy)
        if medicare_levy > 0:
            levy_breakdown.append(TaxBreakdownItem(
                description="Medicare Levy",
                amount=medicare_levy,
                rate=data.medicare_levy.rate,
            ))

    total_tax = round_to_decimals(base.tax + medicare_levy)
    net_income = round_to_decimals(income - total_tax)
    effective_rate = total_tax / income if income > 0 else Decimal("0")

    breakdown = [*base.breakdown, *levy_breakdown]
    if is_resident and income <= data.tax_free_threshold:
        breakdown.insert(0, TaxBreakdownItem(
            description=f"Tax-free threshold (first ${format_number(data.tax_free_threshold)})",
            amount=Decimal("0"),
            rate=Decimal("0"),
        ))

    return TaxCalculationResult(
        income=income,
        taxable_income=income,
        base_tax=base.tax,
        medicare_levy=medicare_levy,
        total_tax=total_tax,
        net_income=net_income,
        effective_rate=round_to_decimals(effective_rate, 4),
        marginal_rate=round_to_decimals(base.marginal_rate, 4),
        breakdown=breakdown,
    )


def _months(count: int) -> str:
    return f"{count} month{'' if count == 1 else 's'}"


def calculate_part_year_tax(tax_input: TaxCalculationInput, resident_days: int) -> TaxCalculationResult:
    """Approximate tax for someone resident for only part of the year.

    Income is split pro rata by days. Each share is taxed as a full year at
    resident and non-resident rates respectively and the results summed.
    The Medicare Levy comes from the resident share only and the marginal
    rate is the higher of the two. This is a simplification; the ATO's
    part-year rules prorate the tax-free threshold instead.

    Args:
        tax_input: Calculation parameters (income is the whole-year amount).
        resident_days: Days resident during the year, 0-365.

    Raises:
        TaxYearNotFoundError: No tables for ``tax_input.tax_year``.
    """
    resident_portion = Decimal(resident_days) / DAYS_IN_YEAR
    non_resident_portion = 1 - resident_portion

    resident_calc = calculate_tax(tax_input.model_copy(update={
        "residency_status": "resident",
        "income": tax_input.income * resident_portion,
    }))
    non_resident_calc = calculate_tax(tax_input.model_copy(update={
        "residency_status": "non-resident",
        "income": tax_input.income * non_resident_portion,
    }))

    total_tax = resident_calc.total_tax + non_resident_calc.total_tax
    net_income = tax_input.income - total_tax
    effective_rate = total_tax / tax_input.income if tax_input.income > 0 else Decimal("0")

    resident_months = int(
        (resident_portion * NUMBER_OF_MONTHS).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    )
    non_resident_months = NUMBER_OF_MONTHS - resident_months

    logger.debug(
        "Part-year split for %s: %d resident days, tax %s + %s",
        tax_input.tax_year, resident_days, resident_calc.total_tax, non_resident_calc.total_tax,
    )

    return TaxCalculationResult(
        income=tax_input.income,
        taxable_income=tax_input.income,
        base_tax=round_to_decimals(resident_calc.base_tax + non_resident_calc.base_tax),
        medicare_levy=resident_calc.medicare_levy,
        total_tax=round_to_decimals(total_tax),
        net_income=round_to_decimals(net_income),
        effective_rate=round_to_decimals(effective_rate, 4),
        marginal_rate=max(resident_calc.marginal_rate, non_resident_calc.marginal_rate),
        breakdown=[
            TaxBreakdownItem(
                description=f"Resident period ({_months(resident_months)})",
                amount=resident_calc.total_tax,
            ),
            TaxBreakdownItem(
                description=f"Non-resident period ({_months(non_resident_months)})",
                amount=non_resident_calc.total_tax,
            ),
        ],
    )


def resident_months_to_days(resident_months: int) -> int:
    """Convert whole months of residency to days, rounding half up (6 -> 183)."""
    days = Decimal(resident_months) / NUMBER_OF_MONTHS * DAYS_IN_YEAR
    return int(days.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate(tax_input: TaxCalculationInput) -> TaxCalculationResult:
    """Route a validated input to the full-year or part-year calculation."""
    if tax_input.residency_status == "part-year":
        months = tax_input.resident_months or DEFAULT_RESIDENT_MONTHS
        return calculate_part_year_tax(tax_input, resident_months_to_days(months))
    return calculate_tax(tax_input)
