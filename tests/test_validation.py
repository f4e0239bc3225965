"""Tests for calculator input validation."""

from decimal import Decimal
from typing import Any

import pytest

from au_tax.calculators.tax_engine import calculate
from au_tax.validation import FieldError, is_valid_income, validate_field, validate_tax_input


def _request(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "income": 85000,
        "tax_year": "2024-25",
        "residency_status": "resident",
    }
    data.update(overrides)
    return data


class TestValidateTaxInput:
    def test_valid_request(self) -> None:
        outcome = validate_tax_input(_request())
        assert outcome.success
        assert outcome.errors == []
        assert outcome.data is not None
        assert outcome.data.income == Decimal("85000")
        assert outcome.data.includes_medicare_levy is True
        assert outcome.data.resident_months is None

    def test_validated_data_feeds_calculator(self) -> None:
        outcome = validate_tax_input(_request(income=50000, includes_medicare_levy=False))
        assert outcome.data is not None
        assert calculate(outcome.data).base_tax == Decimal("5788")

    def test_float_income_with_cents(self) -> None:
        outcome = validate_tax_input(_request(income=1234.5))
        assert outcome.success
        assert outcome.data is not None
        assert outcome.data.income == Decimal("1234.5")

    @pytest.mark.parametrize(
        ("income", "message"),
        [
            (-1, "Income cannot be negative"),
            (Decimal("-0.01"), "Income cannot be negative"),
            (10_000_000_000, "Income cannot exceed $9,999,999,999"),
            (100.123, "Income can have at most 2 decimal places"),
            (0.1 + 0.2, "Income can have at most 2 decimal places"),
            ("85000", "Income must be a valid number"),
            (True, "Income must be a valid number"),
            (float("nan"), "Income must be a valid number"),
            (float("inf"), "Income must be a valid number"),
            (None, "Income must be a valid number"),
        ],
    )
    def test_invalid_income(self, income: Any, message: str) -> None:
        outcome = validate_tax_input(_request(income=income))
        assert not outcome.success
        assert outcome.data is None
        assert outcome.errors == [FieldError("income", message)]

    def test_unknown_tax_year(self) -> None:
        outcome = validate_tax_input(_request(tax_year="2020-21"))
        assert outcome.errors == [FieldError("tax_year", "Please select a valid tax year")]

    def test_unknown_residency_status(self) -> None:
        outcome = validate_tax_input(_request(residency_status="citizen"))
        assert outcome.errors == [
            FieldError("residency_status", "Please select a valid residency status")
        ]

    @pytest.mark.parametrize(
        ("months", "message"),
        [(0, "Minimum 1 month required"), (12, "Maximum 11 months allowed")],
    )
    def test_resident_months_range(self, months: int, message: str) -> None:
        outcome = validate_tax_input(_request(residency_status="part-year", resident_months=months))
        assert outcome.errors == [FieldError("resident_months", message)]

    def test_collects_every_error(self) -> None:
        outcome = validate_tax_input(_request(income=-5, tax_year="1999-00"))
        assert {error.field for error in outcome.errors} == {"income", "tax_year"}

    def test_missing_fields(self) -> None:
        outcome = validate_tax_input({})
        assert not outcome.success
        assert {error.field for error in outcome.errors} == {
            "income", "tax_year", "residency_status",
        }


class TestValidateField:
    def test_invalid_field(self) -> None:
        result = validate_field("income", -5)
        assert not result.valid
        assert result.error == "Income cannot be negative"

    def test_valid_field(self) -> None:
        assert validate_field("tax_year", "2025-26") == (True, None)

    def test_other_fields_do_not_leak_errors(self) -> None:
        """Defaults fill the rest, so only the named field is judged."""
        assert validate_field("resident_months", 3).valid

    def test_unknown_field(self) -> None:
        with pytest.raises(KeyError):
            validate_field("postcode", "2000")


class TestIsValidIncome:
    @pytest.mark.parametrize("income", [0, Decimal("0.01"), 85000, Decimal("9999999999")])
    def test_valid(self, income: Any) -> None:
        assert is_valid_income(income)

    @pytest.mark.parametrize("income", [-1, Decimal("10000000000"), float("inf")])
    def test_invalid(self, income: Any) -> None:
        assert not is_valid_income(income)
