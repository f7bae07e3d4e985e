"""Reportable instrument line items."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ..currency import Currency
from .income import Income
from .money import Money
from .position import Position, Totals


class ProfitKind(Enum):
    """Extra income category an instrument can produce."""

    DIVIDEND = "dividend"
    COUPON = "coupon"
    NONE = "none"

    @property
    def label(self) -> str | None:
        """Display label of the additional profit line, if any."""
        if self is ProfitKind.DIVIDEND:
            return "Dividends"
        if self is ProfitKind.COUPON:
            return "Coupons"
        return None

    @property
    def has_additional_profit(self) -> bool:
        return self is not ProfitKind.NONE


@dataclass(frozen=True)
class Paper:
    """One held instrument with its position and operation totals.

    Attributes:
        name: Instrument display name.
        ticker: Exchange ticker.
        figi: Financial Instrument Global Identifier.
        position: Price and quantity snapshot.
        totals: Additional profit and fees from the operation history.
        profit_kind: Whether additional profit is dividends, coupons or none.
    """

    name: str
    ticker: str
    figi: str
    position: Position
    totals: Totals
    profit_kind: ProfitKind = ProfitKind.NONE

    @property
    def currency(self) -> Currency:
        return self.position.currency

    @property
    def average_buy_price(self) -> Money:
        return self.position.average_buy_price

    @property
    def current_instrument_price(self) -> Money:
        return self.position.current_instrument_price

    @property
    def quantity(self) -> Decimal:
        return self.position.quantity

    @property
    def balance(self) -> Money:
        return self.position.balance

    @property
    def current(self) -> Money:
        return self.position.current

    @property
    def fees(self) -> Money:
        return self.totals.fees

    @property
    def dividends(self) -> Money:
        """Additional profit, always zero for instruments without one."""
        if not self.profit_kind.has_additional_profit:
            return Money.zero(self.currency)
        return self.totals.additional_profit

    @property
    def income(self) -> Income:
        return Income.of(self.current, self.balance)

    @property
    def total_income(self) -> Income:
        """Income including dividends or coupons received."""
        dividends = self.dividends
        return self.income + Income.of(
            dividends,
            Money.zero(dividends.currency),
        )


__all__ = ["ProfitKind", "Paper"]
