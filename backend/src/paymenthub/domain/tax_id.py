"""
Brazilian national tax identifier (CPF / CNPJ).

NationalTaxId is a tagged union: one frozen dataclass whose `kind`
discriminator is a TaxIdKind and whose payload is the bare digit string.
Everything that differs between the variants (length, check-digit
weights, display pattern, mask) hangs off TaxIdKind, so code that needs
to branch can `match tax_id.kind` exhaustively.

Parsing rules:
1. Strip every non-digit character
2. 11 digits -> INDIVIDUAL (CPF), 14 digits -> ORGANIZATION (CNPJ)
3. Reject all-identical digits (000.000.000-00 passes the formula)
4. Verify the first, then the second modulo-11 check digit

Design Decisions:
- Implicit renderings (str, repr, to_json) are masked; the raw digits
  are only available through raw_digits()
- Equality is structural over (kind, digits), so a CPF never equals a CNPJ
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from .checksums import cnpj_weights, cpf_weights, mod11_check_digit
from .errors import InvalidDocumentError

_NON_DIGITS = re.compile(r"\D")


class TaxIdKind(str, Enum):
    """Variant tag for NationalTaxId."""
    INDIVIDUAL = "cpf"
    ORGANIZATION = "cnpj"

    @property
    def length(self) -> int:
        match self:
            case TaxIdKind.INDIVIDUAL:
                return 11
            case TaxIdKind.ORGANIZATION:
                return 14

    @property
    def label(self) -> str:
        return self.value.upper()

    def weights(self, window: int) -> list[int]:
        """Check-digit weights for a window of the leading digits."""
        match self:
            case TaxIdKind.INDIVIDUAL:
                return cpf_weights(window)
            case TaxIdKind.ORGANIZATION:
                return cnpj_weights(window)

    @classmethod
    def for_length(cls, length: int) -> "TaxIdKind | None":
        for kind in cls:
            if kind.length == length:
                return kind
        return None


@dataclass(frozen=True)
class NationalTaxId:
    """
    A validated CPF or CNPJ.

    Use NationalTaxId.parse (or parse_cpf / parse_cnpj) to build one; the
    constructor re-validates so an invalid instance can never exist.
    """
    kind: TaxIdKind
    digits: str = field(repr=False)

    def __post_init__(self) -> None:
        _validate(self.kind, self.digits)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, raw: str) -> "NationalTaxId":
        """
        Parse a CPF or CNPJ in any punctuation.

        Args:
            raw: e.g. "123.456.789-09" or "11.222.333/0001-81"

        Raises:
            InvalidDocumentError: Wrong length, repeated digits or
                failed check digits
        """
        if not isinstance(raw, str):
            raise InvalidDocumentError(
                f"Document must be a string, got {type(raw).__name__}"
            )
        digits = _NON_DIGITS.sub("", raw)
        if not digits:
            raise InvalidDocumentError("Document cannot be empty")

        kind = TaxIdKind.for_length(len(digits))
        if kind is None:
            raise InvalidDocumentError(
                f"Document must have 11 (CPF) or 14 (CNPJ) digits, got {len(digits)}",
                context={"length": len(digits)},
            )
        return cls(kind, digits)

    @classmethod
    def parse_cpf(cls, raw: str) -> "NationalTaxId":
        return cls._parse_as(raw, TaxIdKind.INDIVIDUAL)

    @classmethod
    def parse_cnpj(cls, raw: str) -> "NationalTaxId":
        return cls._parse_as(raw, TaxIdKind.ORGANIZATION)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        try:
            cls.parse(raw)
        except InvalidDocumentError:
            return False
        return True

    @classmethod
    def _parse_as(cls, raw: str, kind: TaxIdKind) -> "NationalTaxId":
        tax_id = cls.parse(raw)
        if tax_id.kind is not kind:
            raise InvalidDocumentError(
                f"Expected a {kind.label}, got a {tax_id.kind.label}",
                context={"expected": kind.value, "actual": tax_id.kind.value},
            )
        return tax_id

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def is_individual(self) -> bool:
        return self.kind is TaxIdKind.INDIVIDUAL

    @property
    def is_organization(self) -> bool:
        return self.kind is TaxIdKind.ORGANIZATION

    def raw_digits(self) -> str:
        """Unmasked digits. Do not log or persist the result."""
        return self.digits

    def formatted(self) -> str:
        """000.000.000-00 for CPF, 00.000.000/0000-00 for CNPJ."""
        d = self.digits
        match self.kind:
            case TaxIdKind.INDIVIDUAL:
                return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"
            case TaxIdKind.ORGANIZATION:
                return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"

    def masked(self) -> str:
        """***.456.789-09 for CPF, **.***.**3/0001-81 for CNPJ."""
        d = self.digits
        match self.kind:
            case TaxIdKind.INDIVIDUAL:
                return f"***.{d[3:6]}.{d[6:9]}-{d[9:]}"
            case TaxIdKind.ORGANIZATION:
                return f"**.***.**{d[7]}/{d[8:12]}-{d[12:]}"

    def partial_masked(self) -> str:
        """***.***.*89-09 for CPF, **.***.**3/**01-81 for CNPJ."""
        d = self.digits
        match self.kind:
            case TaxIdKind.INDIVIDUAL:
                return f"***.***.*{d[7:9]}-{d[9:]}"
            case TaxIdKind.ORGANIZATION:
                return f"**.***.**{d[7]}/**{d[10:12]}-{d[12:]}"

    def to_json(self) -> str:
        return self.masked()

    def __str__(self) -> str:
        return self.masked()

    def __repr__(self) -> str:
        return f"NationalTaxId({self.kind.label}, {self.masked()!r})"


def _validate(kind: TaxIdKind, digits: str) -> None:
    if not isinstance(kind, TaxIdKind):
        raise InvalidDocumentError(f"Unknown document kind: {kind!r}")
    if not isinstance(digits, str) or not digits.isascii() or not digits.isdigit():
        raise InvalidDocumentError(f"{kind.label} must contain only digits")
    if len(digits) != kind.length:
        raise InvalidDocumentError(
            f"{kind.label} must have {kind.length} digits, got {len(digits)}",
            context={"length": len(digits)},
        )
    if len(set(digits)) == 1:
        raise InvalidDocumentError(f"Invalid {kind.label}: all digits are identical")

    # Check digits sit at the last two positions; each window covers everything before it
    for position in (kind.length - 2, kind.length - 1):
        expected = mod11_check_digit(digits[:position], kind.weights(position))
        if int(digits[position]) != expected:
            raise InvalidDocumentError(
                f"Invalid {kind.label}: check digit mismatch",
                context={"check_digit_position": position},
            )
