"""
Payment card number (PAN).

A CardNumber is a 13-19 digit, Luhn-valid string. It exposes the facets
that are safe to show (masked form, last four, BIN, brand) as plain
attributes, while the full number needs an explicit raw_digits() call.

Design Decisions:
- str, repr and to_json all render the masked number
- Brand detection is a static prefix table checked in order: Visa,
  Mastercard and Amex first, then Elo, Hipercard, Discover and Diners
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from .checksums import is_luhn_valid
from .errors import InvalidCardNumberError

MIN_LENGTH = 13
MAX_LENGTH = 19
VISIBLE_DIGITS = 4

_SEPARATORS = re.compile(r"[\s-]")


class CardBrand(str, Enum):
    """Card networks recognized from the leading digits."""
    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    ELO = "elo"
    HIPERCARD = "hipercard"
    DISCOVER = "discover"
    DINERS = "diners"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return _BRAND_LABELS[self]

    @classmethod
    def classify(cls, digits: str) -> "CardBrand":
        """Match the leading digits against BRAND_RULES, first hit wins."""
        for brand, prefixes in BRAND_RULES:
            if digits.startswith(prefixes):
                return brand
        return cls.UNKNOWN


_BRAND_LABELS = {
    CardBrand.VISA: "Visa",
    CardBrand.MASTERCARD: "Mastercard",
    CardBrand.AMEX: "American Express",
    CardBrand.ELO: "Elo",
    CardBrand.HIPERCARD: "Hipercard",
    CardBrand.DISCOVER: "Discover",
    CardBrand.DINERS: "Diners Club",
    CardBrand.UNKNOWN: "Unknown",
}


def _range(start: int, end: int) -> tuple[str, ...]:
    return tuple(str(n) for n in range(start, end + 1))


# First hit wins: a leading 4 is always Visa, so 4xxx Elo bins report as Visa
BRAND_RULES: list[tuple[CardBrand, tuple[str, ...]]] = [
    (CardBrand.VISA, ("4",)),
    (CardBrand.MASTERCARD, _range(51, 55) + _range(2221, 2720)),
    (CardBrand.AMEX, ("34", "37")),
    (CardBrand.ELO, (
        "4011", "4312", "4389", "4514", "4576",
        "5041", "5066", "5090", "6277", "6362", "6363",
    )),
    (CardBrand.HIPERCARD, ("3841", "6062")),
    (CardBrand.DISCOVER, ("6011", "64", "65")),
    (CardBrand.DINERS, _range(30, 36) + ("38",)),
]


@dataclass(frozen=True)
class CardNumber:
    """
    A validated payment card number.

    Build with CardNumber.parse; the constructor expects bare digits and
    re-runs the length and Luhn checks.
    """
    digits: str = field(repr=False)

    def __post_init__(self) -> None:
        _validate(self.digits)

    @classmethod
    def parse(cls, raw: str) -> "CardNumber":
        """
        Parse a card number, ignoring spaces and dashes.

        Raises:
            InvalidCardNumberError: Empty, non-digit, wrong length or
                failed Luhn checksum
        """
        if not isinstance(raw, str):
            raise InvalidCardNumberError(
                f"Card number must be a string, got {type(raw).__name__}"
            )
        return cls(_SEPARATORS.sub("", raw))

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        try:
            cls.parse(raw)
        except InvalidCardNumberError:
            return False
        return True

    def raw_digits(self) -> str:
        """Full card number. Never log or persist the result."""
        return self.digits

    @property
    def last_four(self) -> str:
        return self.digits[-VISIBLE_DIGITS:]

    @property
    def bin(self) -> str:
        """Bank Identification Number: the first six digits."""
        return self.digits[:6]

    @property
    def brand(self) -> CardBrand:
        return CardBrand.classify(self.digits)

    def masked(self) -> str:
        """All but the last four digits replaced: ************1111."""
        return "*" * (len(self.digits) - VISIBLE_DIGITS) + self.last_four

    def formatted_masked(self) -> str:
        """Masked number in groups of four: **** **** **** 1111."""
        masked = self.masked()
        return " ".join(masked[i:i + 4] for i in range(0, len(masked), 4))

    def to_json(self) -> str:
        return self.masked()

    def __str__(self) -> str:
        return self.masked()

    def __repr__(self) -> str:
        return f"CardNumber({self.masked()!r})"


def _validate(digits: str) -> None:
    if not isinstance(digits, str) or not digits:
        raise InvalidCardNumberError("Card number cannot be empty")
    if not digits.isascii() or not digits.isdigit():
        raise InvalidCardNumberError("Card number must contain only digits")
    if not MIN_LENGTH <= len(digits) <= MAX_LENGTH:
        raise InvalidCardNumberError(
            f"Card number must have {MIN_LENGTH}-{MAX_LENGTH} digits, got {len(digits)}",
            context={"length": len(digits)},
        )
    if not is_luhn_valid(digits):
        raise InvalidCardNumberError("Card number failed the Luhn checksum")
