"""Portfolio made of the fixed asset class groups."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from ..constants import (
    BONDS_ASSET_NAME,
    CURRENCIES_ASSET_NAME,
    DEFAULT_CURRENCY,
    ETFS_ASSET_NAME,
    FUTURES_ASSET_NAME,
    SHARES_ASSET_NAME,
)
from ..currency import Currency
from .asset import Asset
from .broker_rows import InstrumentClass
from .income import Income
from .money import Money
from .paper import ProfitKind

T = TypeVar("T")


@dataclass
class Portfolio:
    """Bonds, shares, ETFs, currencies and futures of one account."""

    bonds: Asset = field(
        default_factory=lambda: Asset(BONDS_ASSET_NAME, ProfitKind.COUPON)
    )
    shares: Asset = field(
        default_factory=lambda: Asset(SHARES_ASSET_NAME, ProfitKind.DIVIDEND)
    )
    etfs: Asset = field(default_factory=lambda: Asset(ETFS_ASSET_NAME))
    currencies: Asset = field(
        default_factory=lambda: Asset(CURRENCIES_ASSET_NAME)
    )
    futures: Asset = field(default_factory=lambda: Asset(FUTURES_ASSET_NAME))

    def asset_for(self, instrument_class: InstrumentClass) -> Asset:
        """Return the asset group holding papers of an instrument class."""
        return {
            InstrumentClass.BOND: self.bonds,
            InstrumentClass.SHARE: self.shares,
            InstrumentClass.ETF: self.etfs,
            InstrumentClass.CURRENCY: self.currencies,
            InstrumentClass.FUTURES: self.futures,
        }[instrument_class]

    def assets(self) -> tuple[Asset, ...]:
        """Return the asset groups in display order."""
        return (
            self.etfs,
            self.bonds,
            self.shares,
            self.currencies,
            self.futures,
        )

    @property
    def currency(self) -> Currency:
        for asset in self.assets():
            if not asset.is_empty():
                return asset.currency
        return DEFAULT_CURRENCY

    @property
    def instruments_count(self) -> int:
        return sum(asset.instruments_count for asset in self.assets())

    def balance(self) -> Money:
        return self._sum(Money.zero, Asset.balance)

    def current(self) -> Money:
        return self._sum(Money.zero, Asset.current)

    def dividends(self) -> Money:
        return self._sum(Money.zero, Asset.dividends)

    def fees(self) -> Money:
        return self._sum(Money.zero, Asset.fees)

    def income(self) -> Income:
        return self._sum(Income.zero, Asset.income)

    def total_income(self) -> Income:
        return self._sum(Income.zero, Asset.total_income)

    def _sum(
        self,
        seed: Callable[[Currency], T],
        total: Callable[[Asset], T],
    ) -> T:
        acc = seed(self.currency)
        for asset in self.assets():
            acc = acc + total(asset)
        return acc


__all__ = ["Portfolio"]
