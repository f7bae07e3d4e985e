"""Domain models package."""

from .asset import Asset
from .broker_rows import (
    AccountType,
    BrokerAccount,
    InstrumentClass,
    InstrumentInfo,
    MoneyValue,
    Quotation,
    RawOperation,
    RawPosition,
)
from .history import History, HistoryItem
from .income import Income
from .money import Money
from .operations import OperationInfluence, OperationState, OperationType
from .paper import Paper, ProfitKind
from .portfolio import Portfolio
from .position import Position, Totals

__all__ = [
    "AccountType",
    "Asset",
    "BrokerAccount",
    "History",
    "HistoryItem",
    "Income",
    "InstrumentClass",
    "InstrumentInfo",
    "Money",
    "MoneyValue",
    "OperationInfluence",
    "OperationState",
    "OperationType",
    "Paper",
    "Portfolio",
    "Position",
    "ProfitKind",
    "Quotation",
    "RawOperation",
    "RawPosition",
    "Totals",
]
