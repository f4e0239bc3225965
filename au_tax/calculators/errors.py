"""Calculator error types."""


class TaxConfigurationError(Exception):
    """Tax tables cannot satisfy the request."""


class TaxYearNotFoundError(TaxConfigurationError):
    """No tax tables exist for the requested year."""

    def __init__(self, tax_year: str) -> None:
        self.tax_year = tax_year
        super().__init__(f"Tax configuration not found for year {tax_year}")
