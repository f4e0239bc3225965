"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings

from au_tax.calculators.tax_data import DEFAULT_TAX_YEAR


class Settings(BaseSettings):
    """Application configuration from environment variables (``AU_TAX_*``)."""

    default_tax_year: str = DEFAULT_TAX_YEAR
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "AU_TAX_", "extra": "ignore"}


settings = Settings()
