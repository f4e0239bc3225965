"""Australian tax constants: resident/non-resident brackets, Medicare Levy thresholds.

Hardcoded Python constants (not DB-driven). Brackets only change with a
federal budget (last change: Stage 3, July 2024). Trivially testable, no
external dependencies. The table is exposed as a read-only mapping.
"""

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Literal, NamedTuple

TaxYear = Literal["2022-23", "2023-24", "2024-25", "2025-26"]
ResidencyStatus = Literal["resident", "non-resident", "part-year"]


class TaxBracket(NamedTuple):
    """A single income tax bracket.

    Both ends are inclusive whole dollars; adjacent brackets meet at
    consecutive integers (e.g. 45000 / 45001). ``base`` is the tax payable on
    all lower brackets.
    """

    lower: Decimal
    upper: Decimal | None  # None = no cap
    rate: Decimal
    base: Decimal


class ResidencyBrackets(NamedTuple):
    """Bracket tables for each residency class."""

    resident: tuple[TaxBracket, ...]
    non_resident: tuple[TaxBracket, ...]


class LevyThreshold(NamedTuple):
    single: Decimal
    family: Decimal


class ReductionZone(NamedTuple):
    lower: Decimal
    upper: Decimal


class LevyReduction(NamedTuple):
    single: ReductionZone
    family: ReductionZone


class MedicareLevyConfig(NamedTuple):
    """Medicare Levy parameters for a tax year.

    Family thresholds are recorded for completeness; the calculators only
    use the single thresholds.
    """

    rate: Decimal
    threshold: LevyThreshold
    reduction: LevyReduction


class TaxYearData(NamedTuple):
    """All tax parameters for a single Australian financial year."""

    year: str
    tax_free_threshold: Decimal
    brackets: ResidencyBrackets
    medicare_levy: MedicareLevyConfig


def _bracket(lower: str, upper: str | None, rate: str, base: str) -> TaxBracket:
    return TaxBracket(
        Decimal(lower),
        Decimal(upper) if upper is not None else None,
        Decimal(rate),
        Decimal(base),
    )


def _medicare_levy(
    single: str, family: str, single_upper: str, family_upper: str
) -> MedicareLevyConfig:
    return MedicareLevyConfig(
        rate=Decimal("0.02"),
        threshold=LevyThreshold(Decimal(single), Decimal(family)),
        reduction=LevyReduction(
            single=ReductionZone(Decimal(single), Decimal(single_upper)),
            family=ReductionZone(Decimal(family), Decimal(family_upper)),
        ),
    )


# Pre-Stage 3 brackets (2022-23 and 2023-24)
_PRE_2024 = ResidencyBrackets(
    resident=(
        _bracket("0", "18200", "0", "0"),
        _bracket("18201", "45000", "0.19", "0"),
        _bracket("45001", "120000", "0.325", "5092"),
        _bracket("120001", "180000", "0.37", "29467"),
        _bracket("180001", None, "0.45", "51667"),
    ),
    non_resident=(
        _bracket("0", "120000", "0.325", "0"),
        _bracket("120001", "180000", "0.37", "39000"),
        _bracket("180001", None, "0.45", "61200"),
    ),
)

# Stage 3 brackets (2024-25 onwards)
_STAGE_3 = ResidencyBrackets(
    resident=(
        _bracket("0", "18200", "0", "0"),
        _bracket("18201", "45000", "0.16", "0"),
        _bracket("45001", "135000", "0.30", "4288"),
        _bracket("135001", "190000", "0.37", "31288"),
        _bracket("190001", None, "0.45", "51638"),
    ),
    non_resident=(
        _bracket("0", "135000", "0.30", "0"),
        _bracket("135001", "190000", "0.37", "40500"),
        _bracket("190001", None, "0.45", "60850"),
    ),
)

_TAX_FREE_THRESHOLD = Decimal("18200")

# Source: ATO individual income tax rates and Medicare levy reduction pages
TAX_YEARS: Mapping[str, TaxYearData] = MappingProxyType({
    "2022-23": TaxYearData(
        year="2022-23",
        tax_free_threshold=_TAX_FREE_THRESHOLD,
        brackets=_PRE_2024,
        medicare_levy=_medicare_levy("23365", "39402", "29207", "49252"),
    ),
    "2023-24": TaxYearData(
        year="2023-24",
        tax_free_threshold=_TAX_FREE_THRESHOLD,
        brackets=_PRE_2024,
        medicare_levy=_medicare_levy("24276", "40939", "30345", "51174"),
    ),
    "2024-25": TaxYearData(
        year="2024-25",
        tax_free_threshold=_TAX_FREE_THRESHOLD,
        brackets=_STAGE_3,
        medicare_levy=_medicare_levy("26000", "43846", "32500", "54807"),
    ),
    "2025-26": TaxYearData(
        year="2025-26",
        tax_free_threshold=_TAX_FREE_THRESHOLD,
        brackets=_STAGE_3,
        medicare_levy=_medicare_levy("26000", "43846", "32500", "54807"),
    ),
})

DEFAULT_TAX_YEAR = "2024-25"

DAYS_IN_YEAR = 365
NUMBER_OF_MONTHS = 12

# Medicare Levy shade-in: 10 cents per dollar over the lower threshold
LEVY_REDUCTION_RATE = Decimal("0.10")

MIN_INCOME = Decimal("0")
MAX_INCOME = Decimal("9999999999")
DECIMAL_PLACES = 2

DEFAULT_RESIDENT_MONTHS = 6


class ResidencyOption(NamedTuple):
    value: str
    label: str
    description: str


RESIDENCY_OPTIONS: tuple[ResidencyOption, ...] = (
    ResidencyOption(
        "resident",
        "Resident for full year",
        "Australian resident for tax purposes for the entire financial year",
    ),
    ResidencyOption(
        "non-resident",
        "Non-resident for full year",
        "Foreign resident for tax purposes for the entire financial year",
    ),
    ResidencyOption(
        "part-year",
        "Part-year resident",
        "Changed residency status during the financial year",
    ),
)

DEFAULT_VALUES: Mapping[str, object] = MappingProxyType({
    "income": 0,
    "tax_year": DEFAULT_TAX_YEAR,
    "residency_status": "resident",
    "includes_medicare_levy": True,
    "resident_months": DEFAULT_RESIDENT_MONTHS,
})
