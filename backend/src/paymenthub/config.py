"""
Library configuration loaded from environment variables.

Settings only affect the layers around the value objects (serialization
and logging); Money, NationalTaxId and CardNumber never read them.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from paymenthub.domain.currency import Currency
from paymenthub.domain.errors import UnsupportedCurrencyError


class Settings(BaseSettings):
    """
    PaymentHub settings with validation.

    Each setting is read from PAYMENTHUB_<NAME>. Use a .env file for
    local development.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAYMENTHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_currency: str = Field(
        default="BRL",
        description="Currency code used when a caller does not provide one",
    )

    tax_id_serialization: Literal["masked", "raw"] = Field(
        default="masked",
        description=(
            "How CPF/CNPJ values are serialized by the schemas. 'raw' restores "
            "the legacy unmasked output for consumers that still depend on it"
        ),
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Level for the paymenthub loggers",
    )

    debug: bool = Field(
        default=False,
        description="Include error context in serialized error responses",
    )

    @field_validator("default_currency")
    @classmethod
    def _known_currency(cls, value: str) -> str:
        try:
            return Currency.from_code(value).value
        except UnsupportedCurrencyError as e:
            raise ValueError(e.message) from e

    @property
    def reveal_tax_ids(self) -> bool:
        return self.tax_id_serialization == "raw"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings.

    Loaded once and reused; call get_settings.cache_clear() after
    changing the environment in tests.
    """
    return Settings()
