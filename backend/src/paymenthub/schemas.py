"""
Pydantic schemas for serializing value objects.

These schemas define the wire shape that gateway adapters and API layers
emit for PaymentHub values. Monetary amounts are Decimal so they never
pass through float.

Serialization contract:
- Money -> {amount, cents, currency, formatted}
- NationalTaxId -> masked by default, raw digits only when asked for
- CardNumber -> masked only, the full PAN has no field here
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from paymenthub.config import get_settings
from paymenthub.domain.card import CardBrand, CardNumber
from paymenthub.domain.currency import Currency
from paymenthub.domain.email import Email
from paymenthub.domain.errors import PaymentHubError
from paymenthub.domain.money import Money
from paymenthub.domain.tax_id import NationalTaxId, TaxIdKind
from paymenthub.domain.validation import FieldCheck, InputValidationResult


# =============================================================================
# Request Schemas
# =============================================================================

class MoneyInput(BaseModel):
    """Amount as submitted by a caller, in major units."""
    amount: Decimal = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Amount in major units, e.g. 100.50",
    )
    currency: str = Field(
        default_factory=lambda: get_settings().default_currency,
        description="ISO 4217 code, case-insensitive",
    )

    @field_validator("currency")
    @classmethod
    def _known_currency(cls, value: str) -> str:
        try:
            return Currency.from_code(value).value
        except PaymentHubError as e:
            raise ValueError(e.message) from e

    def to_domain(self) -> Money:
        return Money.from_amount(self.amount, self.currency)


# =============================================================================
# Response Schemas
# =============================================================================

class MoneySchema(BaseModel):
    """Serialized Money."""
    model_config = ConfigDict(frozen=True)

    amount: Decimal
    cents: int
    currency: str
    formatted: str

    @classmethod
    def from_domain(cls, money: Money) -> "MoneySchema":
        return cls(**money.to_dict())


class TaxIdSchema(BaseModel):
    """
    Serialized CPF/CNPJ.

    `digits` is only filled when the caller explicitly reveals it, or when
    PAYMENTHUB_TAX_ID_SERIALIZATION=raw keeps the legacy behaviour.
    """
    model_config = ConfigDict(frozen=True)

    kind: TaxIdKind
    masked: str
    digits: str | None = None

    @classmethod
    def from_domain(cls, tax_id: NationalTaxId, reveal: bool | None = None) -> "TaxIdSchema":
        if reveal is None:
            reveal = get_settings().reveal_tax_ids
        return cls(
            kind=tax_id.kind,
            masked=tax_id.masked(),
            digits=tax_id.raw_digits() if reveal else None,
        )


class CardNumberSchema(BaseModel):
    """Serialized card number. Never carries the full PAN."""
    model_config = ConfigDict(frozen=True)

    masked: str
    brand: CardBrand
    last_four: str

    @classmethod
    def from_domain(cls, card: CardNumber) -> "CardNumberSchema":
        return cls(masked=card.masked(), brand=card.brand, last_four=card.last_four)


class EmailSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    masked: str

    @classmethod
    def from_domain(cls, email: Email) -> "EmailSchema":
        return cls(value=email.value, masked=email.masked())


class FieldCheckResponse(BaseModel):
    """Single field check result."""
    field_name: str
    passed: bool
    message: str
    error_code: str | None = None
    details: dict[str, Any] = {}

    @classmethod
    def from_domain(cls, check: FieldCheck) -> "FieldCheckResponse":
        return cls(
            field_name=check.field_name,
            passed=check.passed,
            message=check.message,
            error_code=check.error_code,
            details=check.details,
        )


class ValidationResponse(BaseModel):
    """All field checks for one payer input."""
    valid: bool
    checks: list[FieldCheckResponse]
    errors: dict[str, str] = {}

    @classmethod
    def from_domain(cls, result: InputValidationResult) -> "ValidationResponse":
        return cls(
            valid=result.all_passed,
            checks=[FieldCheckResponse.from_domain(c) for c in result.checks],
            errors=result.errors_by_field(),
        )


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: str | None = None
    code: str | None = None
    context: dict[str, Any] | None = None

    @classmethod
    def from_error(cls, exc: PaymentHubError) -> "ErrorResponse":
        """
        Build a response from a value-object error.

        Context is only included in debug mode.
        """
        return cls(
            error=type(exc).__name__,
            detail=exc.message,
            code=exc.code.value,
            context=exc.context if get_settings().debug else None,
        )
