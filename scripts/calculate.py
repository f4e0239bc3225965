"""CLI script for estimating Australian income tax.

Usage:
    # Resident, current default year, Medicare Levy included
    python scripts/calculate.py 95000

    # Non-resident for 2023-24
    python scripts/calculate.py 95000 --year 2023-24 --residency non-resident

    # Part-year resident (4 months resident), JSON output
    python scripts/calculate.py 95000 --residency part-year --resident-months 4 --json

    # Exclude the Medicare Levy, verbose logging
    python scripts/calculate.py 95000 --no-medicare-levy -v
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from au_tax.calculators.errors import TaxConfigurationError
from au_tax.calculators.tax_data import RESIDENCY_OPTIONS, TAX_YEARS
from au_tax.calculators.tax_engine import calculate
from au_tax.formatting import format_currency, format_percentage, format_tax_year
from au_tax.models import TaxCalculationResult
from au_tax.validation import validate_tax_input
from config.settings import settings

logger = logging.getLogger(__name__)


def _income(value: str) -> Decimal:
    try:
        return Decimal(value.replace(",", "").replace("$", "").strip())
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Estimate Australian personal income tax")
    parser.add_argument("income", type=_income, help="Taxable income in AUD, e.g. 95000 or $95,000")
    parser.add_argument(
        "--year",
        default=settings.default_tax_year,
        help=f"Financial year, one of {', '.join(TAX_YEARS)} (default: {settings.default_tax_year})",
    )
    parser.add_argument(
        "--residency",
        default="resident",
        choices=[option.value for option in RESIDENCY_OPTIONS],
        help="Residency status for tax purposes (default: resident)",
    )
    parser.add_argument(
        "--no-medicare-levy",
        dest="medicare_levy",
        action="store_false",
        help="Exclude the Medicare Levy",
    )
    parser.add_argument(
        "--resident-months",
        type=int,
        help="Months resident, 1-11 (part-year only, default: 6)",
    )
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def render_summary(result: TaxCalculationResult, tax_year: str) -> str:
    """Plain-text summary of a result."""
    lines = [
        f"Tax estimate for {format_tax_year(tax_year)}",
        f"  Taxable income:  {format_currency(result.taxable_income)}",
        f"  Income tax:      {format_currency(result.base_tax)}",
        f"  Medicare Levy:   {format_currency(result.medicare_levy)}",
        f"  Total tax:       {format_currency(result.total_tax)}",
        f"  Net income:      {format_currency(result.net_income)}",
        f"  Effective rate:  {format_percentage(result.effective_rate)}",
        f"  Marginal rate:   {format_percentage(result.marginal_rate)}",
    ]
    if result.breakdown:
        lines.append("Breakdown:")
        lines.extend(
            f"  {item.description}: {format_currency(item.amount)}" for item in result.breakdown
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else settings.log_level
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    outcome = validate_tax_input({
        "income": args.income,
        "tax_year": args.year,
        "residency_status": args.residency,
        "includes_medicare_levy": args.medicare_levy,
        "resident_months": args.resident_months,
    })
    if not outcome.success or outcome.data is None:
        for error in outcome.errors:
            print(f"error: {error.field}: {error.message}", file=sys.stderr)
        return 2

    try:
        result = calculate(outcome.data)
    except TaxConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(render_summary(result, args.year))
    return 0


if __name__ == "__main__":
    sys.exit(main())
