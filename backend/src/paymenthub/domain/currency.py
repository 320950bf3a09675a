"""
Currency catalog.

A closed, table-driven registry: each supported code maps to a
CurrencyFormat holding the minor-unit exponent and the display rule.
Money and the schemas only ever read from this table, so adding a
currency means adding one row to CURRENCY_FORMATS.

Design Decisions:
- Enum keeps unknown codes unrepresentable
- Exponent is 2 for every supported currency
- Formatting is a fixed template per code, no locale negotiation
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum

from .errors import UnsupportedCurrencyError


@dataclass(frozen=True)
class CurrencyFormat:
    """
    Static display and precision rule for one currency.

    The template receives the grouped amount as {amount} and the symbol
    as {symbol}.
    """
    symbol: str
    display_name: str
    template: str
    exponent: int = 2
    decimal_separator: str = ","
    group_separator: str = "."
    latin_american: bool = False


class Currency(str, Enum):
    """Supported ISO 4217 currency codes."""
    BRL = "BRL"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    ARS = "ARS"
    CLP = "CLP"
    COP = "COP"
    MXN = "MXN"
    PEN = "PEN"
    UYU = "UYU"

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        """
        Look up a currency by code, ignoring case and surrounding spaces.

        Raises:
            UnsupportedCurrencyError: If the code is not in the catalog
        """
        if isinstance(code, Currency):
            return code
        if not isinstance(code, str):
            raise UnsupportedCurrencyError(
                f"Currency code must be a string, got {type(code).__name__}"
            )
        normalized = code.strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedCurrencyError(
                f"Unsupported currency: {code!r}",
                context={"code": code},
            ) from None

    @property
    def rules(self) -> CurrencyFormat:
        return CURRENCY_FORMATS[self]

    @property
    def symbol(self) -> str:
        return self.rules.symbol

    @property
    def display_name(self) -> str:
        return self.rules.display_name

    @property
    def exponent(self) -> int:
        return self.rules.exponent

    @property
    def is_latin_american(self) -> bool:
        return self.rules.latin_american

    def format(self, amount: Decimal) -> str:
        """
        Render a major-unit amount with this currency's template.

        The amount is rounded half away from zero to the exponent, the
        integer part grouped in threes.

        Example:
            >>> Currency.BRL.format(Decimal("1234.56"))
            'R$ 1.234,56'
        """
        rules = self.rules
        amount = Decimal(amount)
        quantum = Decimal(1).scaleb(-rules.exponent)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, amount.adjusted() + rules.exponent + 2)
            rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)

        sign = "-" if rounded < 0 else ""
        integer_part, _, fraction = f"{rounded.copy_abs():f}".partition(".")

        groups: list[str] = []
        while len(integer_part) > 3:
            groups.insert(0, integer_part[-3:])
            integer_part = integer_part[:-3]
        groups.insert(0, integer_part)
        body = rules.group_separator.join(groups)
        if rules.exponent:
            body = f"{body}{rules.decimal_separator}{fraction}"

        return sign + rules.template.format(symbol=rules.symbol, amount=body)

    def __str__(self) -> str:
        return self.value


CURRENCY_FORMATS: dict[Currency, CurrencyFormat] = {
    Currency.BRL: CurrencyFormat("R$", "Real Brasileiro", "{symbol} {amount}", latin_american=True),
    Currency.USD: CurrencyFormat("$", "Dólar Americano", "{symbol}{amount}"),
    Currency.EUR: CurrencyFormat("€", "Euro", "{amount} {symbol}"),
    Currency.GBP: CurrencyFormat("£", "Libra Esterlina", "{symbol}{amount}"),
    Currency.ARS: CurrencyFormat("$", "Peso Argentino", "{symbol}{amount}", latin_american=True),
    Currency.CLP: CurrencyFormat("$", "Peso Chileno", "{symbol}{amount}", latin_american=True),
    Currency.COP: CurrencyFormat("$", "Peso Colombiano", "{symbol}{amount}", latin_american=True),
    Currency.MXN: CurrencyFormat("$", "Peso Mexicano", "{symbol}{amount}", latin_american=True),
    Currency.PEN: CurrencyFormat("S/", "Sol Peruano", "{symbol} {amount}", latin_american=True),
    Currency.UYU: CurrencyFormat("$U", "Peso Uruguaio", "{symbol} {amount}", latin_american=True),
}
