"""Chronological operation ledger of one instrument."""

from dataclasses import dataclass, field
from datetime import datetime

from ..currency import Currency
from .money import Money


@dataclass(frozen=True)
class HistoryItem:
    """One operation in an instrument ledger."""

    datetime: datetime
    quantity: int
    quantity_rest: int
    price: Money
    payment: Money
    description: str
    state: str


@dataclass(frozen=True)
class History:
    """Deduplicated, time-ordered operations of an instrument.

    Attributes:
        name: Instrument display name.
        ticker: Exchange ticker.
        figi: Financial Instrument Global Identifier.
        currency: Currency of the first payment in the ledger.
        items: Ledger entries in ascending datetime order.
    """

    name: str
    ticker: str
    figi: str
    currency: Currency
    items: tuple[HistoryItem, ...] = field(default_factory=tuple)

    def expenses(self) -> Money:
        """Sum of negative payments."""
        total = Money.zero(self.currency)
        for item in self.items:
            if item.payment.is_negative():
                total = total + item.payment
        return total

    def profit(self) -> Money:
        """Sum of non-negative payments."""
        total = Money.zero(self.currency)
        for item in self.items:
            if not item.payment.is_negative():
                total = total + item.payment
        return total

    def balance(self) -> Money:
        return self.expenses() + self.profit()


__all__ = ["HistoryItem", "History"]
