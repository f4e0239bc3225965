"""Input validation for tax calculation requests.

Runs before the calculators: the engine itself assumes clean input and
only checks that the tax year has tables.
"""

import logging
from decimal import Decimal
from typing import Any, NamedTuple

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from au_tax.calculators.tax_data import (
    DECIMAL_PLACES,
    DEFAULT_VALUES,
    MAX_INCOME,
    MIN_INCOME,
    RESIDENCY_OPTIONS,
    TAX_YEARS,
)
from au_tax.formatting import format_number
from au_tax.models import TaxCalculationInput

logger = logging.getLogger(__name__)

_RESIDENCY_VALUES = frozenset(option.value for option in RESIDENCY_OPTIONS)


def _has_valid_places(value: Decimal) -> bool:
    exponent = value.normalize().as_tuple().exponent
    return isinstance(exponent, int) and exponent >= -DECIMAL_PLACES


class TaxCalculatorForm(BaseModel):
    """Schema for raw calculator input (form fields, CLI args, JSON)."""

    income: Decimal
    tax_year: str
    residency_status: str
    includes_medicare_levy: bool = True
    resident_months: int | None = None

    @field_validator("income", mode="before")
    @classmethod
    def check_income(cls, value: Any) -> Decimal:
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise PydanticCustomError("income_type", "Income must be a valid number")
        income = value if isinstance(value, Decimal) else Decimal(str(value))
        if not income.is_finite():
            raise PydanticCustomError("income_type", "Income must be a valid number")
        if income < MIN_INCOME:
            raise PydanticCustomError("income_min", "Income cannot be negative")
        if income > MAX_INCOME:
            raise PydanticCustomError(
                "income_max", f"Income cannot exceed ${format_number(MAX_INCOME)}"
            )
        if not _has_valid_places(income):
            raise PydanticCustomError(
                "income_places", f"Income can have at most {DECIMAL_PLACES} decimal places"
            )
        return income

    @field_validator("tax_year", mode="before")
    @classmethod
    def check_tax_year(cls, value: Any) -> str:
        if not isinstance(value, str) or value not in TAX_YEARS:
            raise PydanticCustomError("tax_year", "Please select a valid tax year")
        return value

    @field_validator("residency_status", mode="before")
    @classmethod
    def check_residency_status(cls, value: Any) -> str:
        if not isinstance(value, str) or value not in _RESIDENCY_VALUES:
            raise PydanticCustomError("residency_status", "Please select a valid residency status")
        return value

    @field_validator("resident_months")
    @classmethod
    def check_resident_months(cls, value: int | None) -> int | None:
        if value is None:
            return value
        if value < 1:
            raise PydanticCustomError("resident_months_min", "Minimum 1 month required")
        if value > 11:
            raise PydanticCustomError("resident_months_max", "Maximum 11 months allowed")
        return value

    def to_input(self) -> TaxCalculationInput:
        return TaxCalculationInput(**self.model_dump())


class FieldError(NamedTuple):
    field: str
    message: str


class ValidationOutcome(NamedTuple):
    """Result of validating a whole request. ``data`` is None on failure."""

    success: bool
    data: TaxCalculationInput | None
    errors: list[FieldError]


class FieldValidation(NamedTuple):
    valid: bool
    error: str | None


def _field_errors(exc: ValidationError) -> list[FieldError]:
    return [
        FieldError(".".join(str(part) for part in err["loc"]), err["msg"])
        for err in exc.errors()
    ]


def validate_tax_input(data: dict[str, Any]) -> ValidationOutcome:
    """Validate raw input, collecting every field error instead of raising."""
    try:
        form = TaxCalculatorForm.model_validate(data)
    except ValidationError as exc:
        errors = _field_errors(exc)
        logger.info("Rejected tax input: %d field error(s)", len(errors))
        return ValidationOutcome(False, None, errors)
    return ValidationOutcome(True, form.to_input(), [])


def validate_field(field: str, value: Any) -> FieldValidation:
    """Validate one field in isolation against otherwise-default values.

    Raises:
        KeyError: ``field`` is not a calculator field.
    """
    if field not in TaxCalculatorForm.model_fields:
        raise KeyError(field)

    candidate = {**DEFAULT_VALUES, field: value}
    try:
        TaxCalculatorForm.model_validate(candidate)
    except ValidationError as exc:
        for error in _field_errors(exc):
            if error.field == field:
                return FieldValidation(False, error.message)
    return FieldValidation(True, None)


def is_valid_income(income: Decimal | int | float) -> bool:
    """Whether ``income`` would pass the income field checks."""
    return validate_field("income", income).valid
