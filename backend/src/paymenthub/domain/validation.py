"""
Field checks for raw payer input.

Request builders receive untrusted strings and numbers from callers and
need to report every bad field at once rather than stop at the first
exception. The functions here run the value-object factories and turn
each outcome into a FieldCheck with pass/fail and details.

Design Decisions:
- Pure functions, one per field type, composable into a single result
- The factories still raise; only this layer converts errors to data
- Details and log lines carry masked values or lengths, never raw
  card numbers or tax-id digits
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .card import CardNumber
from .currency import Currency
from .email import Email
from .errors import PaymentHubError
from .money import Money, Numeric
from .tax_id import NationalTaxId

logger = logging.getLogger(__name__)


@dataclass
class FieldCheck:
    """Result of validating one input field, with masked details for display."""
    field_name: str
    passed: bool
    message: str
    error_code: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class InputValidationResult:
    """All field checks for one set of payer input."""
    checks: list[FieldCheck] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failed_fields(self) -> list[str]:
        return [check.field_name for check in self.checks if not check.passed]

    def errors_by_field(self) -> dict[str, str]:
        """Map of field name to failure message, for form rendering."""
        return {check.field_name: check.message for check in self.checks if not check.passed}


T = TypeVar("T")


def _run_check(
    field_name: str,
    build: Callable[[], T],
    describe: Callable[[T], tuple[str, dict[str, Any]]],
) -> FieldCheck:
    try:
        value = build()
    except PaymentHubError as e:
        logger.debug(f"Field '{field_name}' rejected: {e}")
        return FieldCheck(
            field_name=field_name,
            passed=False,
            message=e.message,
            error_code=e.code.value,
            details=dict(e.context),
        )

    message, details = describe(value)
    logger.debug(f"Field '{field_name}' accepted: {message}")
    return FieldCheck(field_name=field_name, passed=True, message=message, details=details)


def check_amount(
    amount: Numeric,
    currency: Currency | str = Currency.BRL,
    field_name: str = "amount",
) -> FieldCheck:
    """
    Validate a major-unit amount and its currency.

    Passes when Money.from_amount accepts both; details include the
    resulting cents and display string.
    """
    def describe(money: Money) -> tuple[str, dict[str, Any]]:
        return f"Amount {money.formatted()}", money.to_dict() | {"amount": str(money.amount)}

    return _run_check(field_name, lambda: Money.from_amount(amount, currency), describe)


def check_tax_id(raw: str, field_name: str = "document") -> FieldCheck:
    """Validate a CPF or CNPJ; details carry the kind and masked form only."""
    def describe(tax_id: NationalTaxId) -> tuple[str, dict[str, Any]]:
        return (
            f"Valid {tax_id.kind.label}",
            {"kind": tax_id.kind.value, "masked": tax_id.masked()},
        )

    return _run_check(field_name, lambda: NationalTaxId.parse(raw), describe)


def check_card_number(raw: str, field_name: str = "card_number") -> FieldCheck:
    """Validate a card number; details carry brand and masked number only."""
    def describe(card: CardNumber) -> tuple[str, dict[str, Any]]:
        return (
            f"Valid {card.brand.label} card ending in {card.last_four}",
            {"brand": card.brand.value, "masked": card.masked(), "last_four": card.last_four},
        )

    return _run_check(field_name, lambda: CardNumber.parse(raw), describe)


def check_email(raw: str, field_name: str = "email") -> FieldCheck:
    def describe(email: Email) -> tuple[str, dict[str, Any]]:
        return "Valid email", {"masked": email.masked(), "disposable": email.is_disposable()}

    return _run_check(field_name, lambda: Email.parse(raw), describe)


def validate_payer_input(
    amount: Numeric | None = None,
    currency: Currency | str = Currency.BRL,
    document: str | None = None,
    card_number: str | None = None,
    email: str | None = None,
) -> InputValidationResult:
    """
    Check every provided payer field and collect the results.

    Fields left as None are skipped, so the same entry point serves
    card, PIX and boleto requests that need different subsets.

    Returns:
        InputValidationResult with one FieldCheck per provided field
    """
    checks: list[FieldCheck] = []

    if amount is not None:
        checks.append(check_amount(amount, currency))
    if document is not None:
        checks.append(check_tax_id(document))
    if card_number is not None:
        checks.append(check_card_number(card_number))
    if email is not None:
        checks.append(check_email(email))

    result = InputValidationResult(checks=checks)

    if result.all_passed:
        logger.info(f"Payer input valid: {len(checks)} field(s) checked")
    else:
        logger.info(f"Payer input rejected: failed fields {result.failed_fields}")

    return result
