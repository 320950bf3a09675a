"""
Typed rejection errors raised by the value-object factories.

Every factory in the domain package either returns a fully valid object
or raises one of these errors. Nothing is retried or downgraded here;
request builders translate them into user-facing validation messages.

Design Decisions:
- Single base class so callers can catch the whole family at a boundary
- Each error also inherits the closest builtin (ValueError, ZeroDivisionError)
  so generic handlers keep working
- Messages and context never carry raw card numbers or tax-id digits
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable identifiers for programmatic error handling."""
    INVALID_AMOUNT = "INVALID_AMOUNT"
    CURRENCY_MISMATCH = "CURRENCY_MISMATCH"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_DOCUMENT = "INVALID_DOCUMENT"
    INVALID_CARD_NUMBER = "INVALID_CARD_NUMBER"
    INVALID_EMAIL = "INVALID_EMAIL"
    UNSUPPORTED_CURRENCY = "UNSUPPORTED_CURRENCY"


class PaymentHubError(Exception):
    """
    Base class for all value-object validation errors.

    Args:
        message: Human-readable description of the rejection
        context: Extra structured data (never sensitive raw input)
    """

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT
    default_message = "Invalid argument"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        context_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}(message={self.message!r}{context_str})"


class InvalidAmountError(PaymentHubError, ValueError):
    """Negative, non-finite or otherwise out-of-domain monetary amount."""
    code = ErrorCode.INVALID_AMOUNT
    default_message = "Invalid amount"


class CurrencyMismatchError(PaymentHubError, ValueError):
    """Arithmetic or ordering attempted across different currencies."""
    code = ErrorCode.CURRENCY_MISMATCH
    default_message = "Cannot operate on different currencies"


class DivisionByZeroError(PaymentHubError, ZeroDivisionError):
    """Division of a monetary amount by zero."""
    code = ErrorCode.DIVISION_BY_ZERO
    default_message = "Cannot divide by zero"


class InvalidArgumentError(PaymentHubError, ValueError):
    """Argument outside the accepted domain, e.g. split(0)."""
    code = ErrorCode.INVALID_ARGUMENT


class InvalidDocumentError(PaymentHubError, ValueError):
    """Tax id with the wrong length, repeated digits or bad check digits."""
    code = ErrorCode.INVALID_DOCUMENT
    default_message = "Invalid document number"


class InvalidCardNumberError(PaymentHubError, ValueError):
    """Card number with the wrong length, non-digits or a failed Luhn check."""
    code = ErrorCode.INVALID_CARD_NUMBER
    default_message = "Invalid card number"


class InvalidEmailError(PaymentHubError, ValueError):
    """Email address that fails the syntactic check."""
    code = ErrorCode.INVALID_EMAIL
    default_message = "Invalid email address"


class UnsupportedCurrencyError(PaymentHubError, ValueError):
    """Currency code missing from the catalog."""
    code = ErrorCode.UNSUPPORTED_CURRENCY
    default_message = "Unsupported currency"
