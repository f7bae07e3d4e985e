"""Income (return) of a holding relative to its cost basis."""

from dataclasses import dataclass
from decimal import Decimal

from ..constants import HUNDRED
from ..currency import Currency
from ..errors import CurrencyMismatchError
from .money import Money


@dataclass(frozen=True)
class Income:
    """Current value against balance value in one currency.

    Attributes:
        currency: Currency of both components.
        current: Mark-to-market value.
        balance: Cost basis.
    """

    currency: Currency
    current: Decimal
    balance: Decimal

    @classmethod
    def of(cls, current: Money, balance: Money) -> "Income":
        """Build an income from current and balance amounts.

        Args:
            current: Mark-to-market value.
            balance: Cost basis.

        Returns:
            Income: Income in the common currency of both amounts.

        Raises:
            CurrencyMismatchError: If the amounts carry different
                currencies and neither is zero.
        """
        currency = (current + balance).currency
        return cls(currency, current.value, balance.value)

    @classmethod
    def zero(cls, currency: Currency) -> "Income":
        return cls(currency, Decimal("0"), Decimal("0"))

    @property
    def delta(self) -> Decimal:
        """Return current minus balance."""
        return self.current - self.balance

    @property
    def percent(self) -> Decimal:
        """Return delta as a percentage of balance, 0 for a zero balance."""
        if self.balance.is_zero():
            return Decimal("0")
        return self.delta / self.balance * HUNDRED

    def is_zero(self) -> bool:
        return self.delta.is_zero()

    def is_negative(self) -> bool:
        return self.delta < 0

    def _is_empty(self) -> bool:
        return self.current.is_zero() and self.balance.is_zero()

    def __add__(self, other: "Income") -> "Income":
        if not isinstance(other, Income):
            return NotImplemented
        if self.currency == other.currency or other._is_empty():
            currency = self.currency
        elif self._is_empty():
            currency = other.currency
        else:
            raise CurrencyMismatchError(self.currency, other.currency)
        return Income(
            currency,
            self.current + other.current,
            self.balance + other.balance,
        )


__all__ = ["Income"]
