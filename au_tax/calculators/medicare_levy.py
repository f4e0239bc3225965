"""Medicare Levy calculator (single thresholds)."""

from decimal import Decimal

from au_tax.calculators.tax_data import LEVY_REDUCTION_RATE, MedicareLevyConfig
from au_tax.formatting import round_to_decimals


def calculate_medicare_levy(income: Decimal, config: MedicareLevyConfig) -> Decimal:
    """Calculate the Medicare Levy for a resident.

    No levy at or below the lower threshold. In the reduction zone the levy
    shades in at 10 cents per dollar over the threshold, capped at the full
    rate. Above the zone the full rate applies to all income.

    Args:
        income: Taxable income (must be >= 0).
        config: Medicare Levy parameters for the tax year.

    Returns:
        Levy rounded to cents.
    """
    if income <= config.threshold.single:
        return Decimal("0")

    if income <= config.reduction.single.upper:
        shaded = (income - config.threshold.single) * LEVY_REDUCTION_RATE
        return round_to_decimals(min(shaded, income * config.rate))

    return round_to_decimals(income * config.rate)
