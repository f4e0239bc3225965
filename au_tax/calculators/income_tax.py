"""Income tax calculator: progressive brackets with cumulative base amounts."""

from collections.abc import Sequence
from decimal import Decimal
from typing import NamedTuple

from au_tax.calculators.tax_data import TaxBracket
from au_tax.formatting import format_number, round_to_decimals
from au_tax.models import TaxBreakdownItem


class BaseTaxResult(NamedTuple):
    """Tax on income before levies."""

    tax: Decimal
    marginal_rate: Decimal
    breakdown: list[TaxBreakdownItem]


def describe_bracket(bracket: TaxBracket) -> str:
    """Human-readable range, e.g. ``$45,001 - $135,000`` or ``Over $190,001``."""
    if bracket.upper is None:
        return f"Over ${format_number(bracket.lower)}"
    return f"${format_number(bracket.lower)} - ${format_number(bracket.upper)}"


def calculate_base_tax(income: Decimal, brackets: Sequence[TaxBracket]) -> BaseTaxResult:
    """Calculate tax on ``income`` using one residency class's brackets.

    Brackets are scanned in ascending order until the one containing the
    income is found. Tax is that bracket's ``base`` plus the rate applied to
    ``income - lower + 1``; bracket ends are inclusive, so the ``+ 1`` counts
    the lower boundary dollar ($18,201 owes one dollar at 16%). These amounts
    match the ATO's published bracket bases and must not be "corrected".
    Cents strictly between two brackets (e.g. $45,000.50) belong to neither
    and are taxed at the lower bracket's full amount.

    Args:
        income: Taxable income (must be >= 0).
        brackets: Contiguous, ascending brackets.

    Returns:
        BaseTaxResult with tax rounded to cents, the marginal rate, and one
        breakdown line for the containing bracket (none if its rate is 0).
    """
    tax = Decimal("0")
    marginal_rate = Decimal("0")
    breakdown: list[TaxBreakdownItem] = []

    if income <= 0:
        return BaseTaxResult(tax, marginal_rate, breakdown)

    for bracket in brackets:
        if income < bracket.lower:
            continue

        if bracket.rate > 0:
            if bracket.upper is not None and income > bracket.upper:
                # Whole bracket consumed
                tax = bracket.base + (bracket.upper - bracket.lower + 1) * bracket.rate
            else:
                tax = bracket.base + (income - bracket.lower + 1) * bracket.rate

        if bracket.upper is None or income <= bracket.upper:
            marginal_rate = bracket.rate
            if bracket.rate > 0:
                bracket_range = describe_bracket(bracket)
                breakdown.append(TaxBreakdownItem(
                    description=f"Tax on income {bracket_range}",
                    amount=round_to_decimals(tax - bracket.base),
                    rate=bracket.rate,
                    bracket_range=bracket_range,
                ))
            break

    return BaseTaxResult(round_to_decimals(tax), marginal_rate, breakdown)


def get_current_bracket(income: Decimal, brackets: Sequence[TaxBracket]) -> TaxBracket | None:
    """Return the bracket whose inclusive range holds ``income``, if any."""
    for bracket in brackets:
        if income >= bracket.lower and (bracket.upper is None or income <= bracket.upper):
            return bracket
    return None
