"""Held position snapshot and per-instrument operation totals."""

from dataclasses import dataclass, field
from decimal import Decimal

from ..currency import Currency
from .money import Money


@dataclass(frozen=True)
class Position:
    """Snapshot of one held instrument.

    Attributes:
        currency: Currency the instrument is priced in.
        average_buy_price: Average price paid per unit.
        current_instrument_price: Last known price per unit.
        quantity: Number of units held.
    """

    currency: Currency
    average_buy_price: Money
    current_instrument_price: Money
    quantity: Decimal

    @property
    def balance(self) -> Money:
        """Cost basis: average buy price multiplied by quantity."""
        return self.average_buy_price * self.quantity

    @property
    def current(self) -> Money:
        """Market value: current price multiplied by quantity."""
        return self.current_instrument_price * self.quantity


@dataclass(frozen=True)
class Totals:
    """Reduction of an instrument's operation history.

    Attributes:
        additional_profit: Net dividends or coupons after their taxes.
        fees: Commissions and service charges.
        skipped_operations: Operations ignored while reducing.
    """

    additional_profit: Money
    fees: Money
    skipped_operations: int = field(default=0, compare=False)

    @classmethod
    def zero(cls, currency: Currency) -> "Totals":
        return cls(Money.zero(currency), Money.zero(currency))


__all__ = ["Position", "Totals"]
