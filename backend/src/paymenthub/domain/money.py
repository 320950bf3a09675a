"""
Currency-aware monetary amount.

Money stores an integer count of minor units (cents) plus a Currency.
All arithmetic stays in integers or Decimal; floats are accepted at the
boundary and converted through their shortest repr so 100.50 means
exactly 10050 cents.

Design Decisions:
- Frozen dataclass, every operation returns a new instance
- Never negative: refunds and debits are signed by the caller, not here
- Rounding is half away from zero (Decimal ROUND_HALF_UP) at the minor unit
- split/allocate hand out remainder cents one by one from the first part,
  so the parts always sum to the original
- Equality is structural and total, ordering only exists within a currency
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from .currency import Currency
from .errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    InvalidArgumentError,
)

Numeric = Decimal | int | float | str

# Headroom so cents * factor never rounds before the final quantize
_ARITHMETIC_PRECISION = 60


def _to_decimal(value: Numeric, what: str) -> Decimal:
    """Convert caller input to a finite Decimal or raise InvalidAmountError."""
    if isinstance(value, bool) or not isinstance(value, Decimal | int | float | str):
        raise InvalidAmountError(
            f"{what} must be a number, got {type(value).__name__}"
        )
    try:
        # str() of a float is its shortest repr: 100.5, not 100.4999...
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidAmountError(f"{what} is not a number: {value!r}") from None
    if not result.is_finite():
        raise InvalidAmountError(f"{what} must be finite, got {value!r}")
    return result


def _round_units(value: Decimal) -> int:
    try:
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # More minor-unit digits than the arithmetic precision holds
        raise InvalidAmountError(
            "Amount too large", context={"digits": value.adjusted() + 1}
        ) from None


def _resolve_currency(currency: Currency | str) -> Currency:
    return Currency.from_code(currency)


@dataclass(frozen=True)
class Money:
    """
    Non-negative amount of a single currency, held in minor units.

    Build instances through from_amount, from_cents or zero rather than
    the constructor; the constructor still validates its arguments.
    """
    cents: int
    currency: Currency = Currency.BRL

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise InvalidAmountError(
                f"Minor units must be an integer, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise InvalidAmountError(
                "Amount cannot be negative", context={"cents": self.cents}
            )
        if not isinstance(self.currency, Currency):
            object.__setattr__(self, "currency", _resolve_currency(self.currency))

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_amount(cls, amount: Numeric, currency: Currency | str = Currency.BRL) -> "Money":
        """
        Create from a major-unit amount (e.g. 100.50 reais).

        Args:
            amount: Decimal, int, float or numeric string, must be >= 0
            currency: Currency or its code

        Raises:
            InvalidAmountError: Negative, non-finite or unparsable amount
            UnsupportedCurrencyError: Unknown currency code
        """
        currency = _resolve_currency(currency)
        value = _to_decimal(amount, "Amount")
        if value < 0:
            raise InvalidAmountError(
                "Amount cannot be negative", context={"amount": str(value)}
            )
        with localcontext() as ctx:
            ctx.prec = _ARITHMETIC_PRECISION
            cents = _round_units(value.scaleb(currency.exponent))
        return cls(cents, currency)

    @classmethod
    def from_cents(cls, cents: int, currency: Currency | str = Currency.BRL) -> "Money":
        """Create from an integer count of minor units."""
        return cls(cents, _resolve_currency(currency))

    @classmethod
    def zero(cls, currency: Currency | str = Currency.BRL) -> "Money":
        return cls(0, _resolve_currency(currency))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        """Major-unit amount, exact (Decimal('100.50') for 10050 cents)."""
        return Decimal(f"{self.cents}E-{self.currency.exponent}")

    def is_zero(self) -> bool:
        return self.cents == 0

    def is_positive(self) -> bool:
        return self.cents > 0

    def formatted(self) -> str:
        return self.currency.format(self.amount)

    def to_dict(self) -> dict[str, Any]:
        """Serialization form: amount, cents, currency code and display string."""
        return {
            "amount": self.amount,
            "cents": self.cents,
            "currency": self.currency.value,
            "formatted": self.formatted(),
        }

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "Money") -> "Money":
        self._assert_same_currency(other)
        return Money(self.cents + other.cents, self.currency)

    def subtract(self, other: "Money") -> "Money":
        self._assert_same_currency(other)
        result = self.cents - other.cents
        if result < 0:
            raise InvalidAmountError(
                "Cannot subtract: result would be negative",
                context={"minuend": self.cents, "subtrahend": other.cents},
            )
        return Money(result, self.currency)

    def multiply(self, factor: Numeric) -> "Money":
        """Scale by a non-negative factor, rounding half away from zero."""
        value = _to_decimal(factor, "Multiplier")
        if value < 0:
            raise InvalidAmountError("Multiplier cannot be negative")
        with localcontext() as ctx:
            ctx.prec = _ARITHMETIC_PRECISION
            return Money(_round_units(self.cents * value), self.currency)

    def divide(self, divisor: Numeric) -> "Money":
        """Divide by a positive divisor, rounding half away from zero."""
        value = _to_decimal(divisor, "Divisor")
        if value == 0:
            raise DivisionByZeroError()
        if value < 0:
            raise InvalidAmountError("Divisor cannot be negative")
        with localcontext() as ctx:
            ctx.prec = _ARITHMETIC_PRECISION
            return Money(_round_units(self.cents / value), self.currency)

    def percentage(self, percent: Numeric) -> "Money":
        """percent% of this amount, e.g. percentage(10) of R$ 100,00 is R$ 10,00."""
        value = _to_decimal(percent, "Percentage")
        if value < 0:
            raise InvalidAmountError("Percentage cannot be negative")
        return self.multiply(value / 100)

    def split(self, parts: int) -> list["Money"]:
        """
        Split into `parts` amounts that sum exactly to this one.

        The first `cents % parts` entries get one extra cent:
        R$ 100,00 split 3 ways is [33,34, 33,33, 33,33].

        Raises:
            InvalidArgumentError: If parts is not a positive integer
        """
        if isinstance(parts, bool) or not isinstance(parts, int) or parts <= 0:
            raise InvalidArgumentError(
                "Parts must be greater than zero", context={"parts": parts}
            )
        base, remainder = divmod(self.cents, parts)
        return [
            Money(base + (1 if i < remainder else 0), self.currency)
            for i in range(parts)
        ]

    def allocate(self, ratios: Sequence[int]) -> list["Money"]:
        """
        Split proportionally to integer ratios without losing a cent.

        Each part gets floor(cents * ratio / total); leftover cents go one
        at a time to the parts in order.

        Example:
            R$ 0,05 allocated [3, 7] -> [R$ 0,02, R$ 0,03]
        """
        if not ratios:
            raise InvalidArgumentError("Ratios cannot be empty")
        if any(isinstance(r, bool) or not isinstance(r, int) or r < 0 for r in ratios):
            raise InvalidArgumentError("Ratios must be non-negative integers")
        total = sum(ratios)
        if total <= 0:
            raise InvalidArgumentError("Total ratio must be greater than zero")

        shares = [self.cents * ratio // total for ratio in ratios]
        remainder = self.cents - sum(shares)
        for i in range(remainder):
            shares[i % len(shares)] += 1
        return [Money(share, self.currency) for share in shares]

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equals(self, other: "Money") -> bool:
        """Structural equality; different currencies are simply unequal."""
        return self == other

    def greater_than(self, other: "Money") -> bool:
        self._assert_same_currency(other)
        return self.cents > other.cents

    def greater_than_or_equal(self, other: "Money") -> bool:
        self._assert_same_currency(other)
        return self.cents >= other.cents

    def less_than(self, other: "Money") -> bool:
        self._assert_same_currency(other)
        return self.cents < other.cents

    def less_than_or_equal(self, other: "Money") -> bool:
        self._assert_same_currency(other)
        return self.cents <= other.cents

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __str__(self) -> str:
        return self.formatted()

    def _assert_same_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise InvalidArgumentError(
                f"Expected Money, got {type(other).__name__}"
            )
        if self.currency is not other.currency:
            raise CurrencyMismatchError(
                "Cannot operate on different currencies: "
                f"{self.currency.value} and {other.currency.value}",
                context={"left": self.currency.value, "right": other.currency.value},
            )
