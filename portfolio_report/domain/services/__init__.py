"""Domain services package."""

from .conversion import to_currency, to_datetime_utc, to_decimal, to_money
from .history import build_history, build_history_item
from .operations import classify_operation, reduce_operations
from .papers import build_paper, profit_kind_for
from .positions import build_position

__all__ = [
    "build_history",
    "build_history_item",
    "build_paper",
    "build_position",
    "classify_operation",
    "profit_kind_for",
    "reduce_operations",
    "to_currency",
    "to_datetime_utc",
    "to_decimal",
    "to_money",
]
