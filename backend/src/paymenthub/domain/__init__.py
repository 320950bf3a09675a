"""
Domain package - immutable financial value objects with no I/O.

Money, NationalTaxId, CardNumber and Email validate themselves on
construction and raise a typed PaymentHubError instead of ever existing
in an invalid state.
"""

from .card import CardBrand, CardNumber
from .currency import Currency, CurrencyFormat
from .email import Email
from .errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    ErrorCode,
    InvalidAmountError,
    InvalidArgumentError,
    InvalidCardNumberError,
    InvalidDocumentError,
    InvalidEmailError,
    PaymentHubError,
    UnsupportedCurrencyError,
)
from .money import Money
from .status import PaymentStatus
from .tax_id import NationalTaxId, TaxIdKind

__all__ = [
    "CardBrand",
    "CardNumber",
    "Currency",
    "CurrencyFormat",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "Email",
    "ErrorCode",
    "InvalidAmountError",
    "InvalidArgumentError",
    "InvalidCardNumberError",
    "InvalidDocumentError",
    "InvalidEmailError",
    "Money",
    "NationalTaxId",
    "PaymentHubError",
    "PaymentStatus",
    "TaxIdKind",
    "UnsupportedCurrencyError",
]
