"""Application use cases package."""

from .build_portfolio_report import (
    BuildPortfolioReportUseCase,
    PortfolioReport,
    ReportStats,
)
from .get_instrument_history import GetInstrumentHistoryUseCase
from .retry import RetryExhaustedError, RetryPolicy, call_with_retry

__all__ = [
    "BuildPortfolioReportUseCase",
    "PortfolioReport",
    "ReportStats",
    "GetInstrumentHistoryUseCase",
    "RetryExhaustedError",
    "RetryPolicy",
    "call_with_retry",
]
