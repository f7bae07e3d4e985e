"""Money value type with currency-checked arithmetic."""

from dataclasses import dataclass
from decimal import Decimal

from ..currency import Currency
from ..errors import CurrencyMismatchError

Scalar = Decimal | int


@dataclass(frozen=True)
class Money:
    """Decimal amount tagged with its currency.

    Arithmetic between two Money values is only defined for a single
    currency. A zero amount is treated as currency-neutral, so the zero of
    any currency is an additive identity. Any other mismatch raises
    CurrencyMismatchError.

    Attributes:
        value: Amount as an arbitrary-precision decimal.
        currency: ISO-4217 currency of the amount.
    """

    value: Decimal
    currency: Currency

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        """Return the additive identity for a currency."""
        return cls(Decimal("0"), currency)

    @classmethod
    def from_code(cls, value: Decimal, code: str | None) -> "Money | None":
        """Build Money from a raw currency code.

        Args:
            value: Amount.
            code: ISO-4217 code in any case.

        Returns:
            Money | None: Money instance, or None when the code is unknown.
        """
        currency = Currency.from_code(code)
        if currency is None:
            return None
        return cls(value, currency)

    def is_zero(self) -> bool:
        return self.value.is_zero()

    def is_negative(self) -> bool:
        return self.value < 0

    def _common_currency(self, other: "Money") -> Currency:
        if self.currency == other.currency:
            return self.currency
        if self.is_zero():
            return other.currency
        if other.is_zero():
            return self.currency
        raise CurrencyMismatchError(self.currency, other.currency)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        currency = self._common_currency(other)
        return Money(self.value + other.value, currency)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        currency = self._common_currency(other)
        return Money(self.value - other.value, currency)

    def __mul__(self, other: "Money | Scalar") -> "Money":
        if isinstance(other, Money):
            currency = self._common_currency(other)
            return Money(self.value * other.value, currency)
        if isinstance(other, (Decimal, int)):
            return Money(self.value * other, self.currency)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> "Money":
        if isinstance(other, (Decimal, int)):
            return Money(other * self.value, self.currency)
        return NotImplemented

    def __truediv__(self, other: "Money | Scalar") -> "Money":
        if isinstance(other, Money):
            currency = self._common_currency(other)
            return Money(self.value / other.value, currency)
        if isinstance(other, (Decimal, int)):
            return Money(self.value / other, self.currency)
        return NotImplemented

    def __neg__(self) -> "Money":
        return Money(-self.value, self.currency)

    def __str__(self) -> str:
        return f"{self.value} {self.currency.code}"


__all__ = ["Money"]
