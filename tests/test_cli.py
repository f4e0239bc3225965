"""Tests for the calculate CLI script and settings."""

import json
from decimal import Decimal

import pytest

from config.settings import Settings
from scripts.calculate import main


class TestCalculateCli:
    def test_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["95000", "--year", "2024-25"]) == 0
        out = capsys.readouterr().out
        assert "Tax estimate for 2024–25" in out
        # $4,288 + $50,000 * 30% plus 2% levy
        assert "Income tax:      $19,288.00" in out
        assert "Medicare Levy:   $1,900.00" in out
        assert "Total tax:       $21,188.00" in out
        assert "Marginal rate:   30.00%" in out

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["$95,000", "--year", "2024-25", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["total_tax"]) == Decimal("21188")
        assert Decimal(data["medicare_levy"]) == Decimal("1900")
        assert [item["description"] for item in data["breakdown"]] == [
            "Tax on income $45,001 - $135,000",
            "Medicare Levy",
        ]

    def test_no_medicare_levy(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["95000", "--year", "2024-25", "--no-medicare-levy", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["medicare_levy"]) == 0

    def test_part_year(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([
            "100000", "--year", "2024-25", "--residency", "part-year", "--resident-months", "6",
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "Resident period (6 months)" in out
        assert "Non-resident period (6 months)" in out

    def test_unknown_year(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["95000", "--year", "2020-21"]) == 2
        assert "tax_year: Please select a valid tax year" in capsys.readouterr().err

    def test_resident_months_out_of_range(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["95000", "--residency", "part-year", "--resident-months", "12"])
        assert code == 2
        assert "Maximum 11 months allowed" in capsys.readouterr().err

    def test_unparseable_income(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["lots"])
        assert exc_info.value.code == 2


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.default_tax_year == "2024-25"
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AU_TAX_DEFAULT_TAX_YEAR", "2023-24")
        assert Settings(_env_file=None).default_tax_year == "2023-24"
