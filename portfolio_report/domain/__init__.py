"""Domain package for the financial aggregation model."""

from .currency import Currency
from .errors import (
    AccountNotFoundError,
    CurrencyMismatchError,
    PositionDataError,
    ReportError,
)
from .models import (
    Asset,
    History,
    HistoryItem,
    Income,
    Money,
    Paper,
    Portfolio,
    Position,
    ProfitKind,
    Totals,
)
from .services import (
    build_history,
    build_paper,
    build_position,
    classify_operation,
    reduce_operations,
)

__all__ = [
    "AccountNotFoundError",
    "Asset",
    "Currency",
    "CurrencyMismatchError",
    "History",
    "HistoryItem",
    "Income",
    "Money",
    "Paper",
    "Portfolio",
    "Position",
    "PositionDataError",
    "ProfitKind",
    "ReportError",
    "Totals",
    "build_history",
    "build_paper",
    "build_position",
    "classify_operation",
    "reduce_operations",
]
