"""Asset class groups of papers and their totals."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from ..constants import DEFAULT_CURRENCY
from ..currency import Currency
from .income import Income
from .money import Money
from .paper import Paper, ProfitKind

T = TypeVar("T")


@dataclass
class Asset:
    """Ordered collection of papers sharing one asset class.

    All papers are expected to share the currency of the first one. Totals
    are folds over the current paper list seeded with the zero of that
    currency; combining papers in another currency raises
    CurrencyMismatchError.

    Attributes:
        name: Display name of the asset class.
        profit_kind: Extra income category of the papers.
        papers: Papers in insertion order.
    """

    name: str
    profit_kind: ProfitKind = ProfitKind.NONE
    papers: list[Paper] = field(default_factory=list)

    def add_paper(self, paper: Paper) -> None:
        self.papers.append(paper)

    @property
    def currency(self) -> Currency:
        if self.papers:
            return self.papers[0].currency
        return DEFAULT_CURRENCY

    @property
    def instruments_count(self) -> int:
        return len(self.papers)

    def is_empty(self) -> bool:
        return not self.papers

    def balance(self) -> Money:
        return self._fold(Money.zero, lambda acc, p: acc + p.balance)

    def current(self) -> Money:
        return self._fold(Money.zero, lambda acc, p: acc + p.current)

    def dividends(self) -> Money:
        return self._fold(Money.zero, lambda acc, p: acc + p.dividends)

    def fees(self) -> Money:
        return self._fold(Money.zero, lambda acc, p: acc + p.fees)

    def income(self) -> Income:
        return self._fold(Income.zero, lambda acc, p: acc + p.income)

    def total_income(self) -> Income:
        return self._fold(Income.zero, lambda acc, p: acc + p.total_income)

    def _fold(
        self,
        seed: Callable[[Currency], T],
        step: Callable[[T, Paper], T],
    ) -> T:
        acc = seed(self.currency)
        for paper in self.papers:
            acc = step(acc, paper)
        return acc


__all__ = ["Asset"]
