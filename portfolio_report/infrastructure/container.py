"""Composition root for wiring infrastructure adapters."""

from portfolio_report.application.ports.broker import BrokerPort
from portfolio_report.application.use_cases.build_portfolio_report import (
    BuildPortfolioReportUseCase,
)
from portfolio_report.application.use_cases.get_instrument_history import (
    GetInstrumentHistoryUseCase,
)
from portfolio_report.application.use_cases.retry import RetryPolicy
from portfolio_report.infrastructure.logging.logger import get_app_logger
from portfolio_report.infrastructure.settings import ReportSettings
from portfolio_report.infrastructure.snapshot_broker import (
    SnapshotBrokerAdapter,
)


def build_broker(settings: ReportSettings | None = None) -> BrokerPort:
    """Return the configured broker adapter."""
    resolved = settings or ReportSettings.from_env()
    if resolved.snapshot_file is None:
        raise RuntimeError(
            "Broker snapshot required. Set BROKER_SNAPSHOT_FILE."
        )
    return SnapshotBrokerAdapter(
        resolved.snapshot_file,
        logger=get_app_logger(),
    )


def build_retry_policy(settings: ReportSettings | None = None) -> RetryPolicy:
    """Return the retry policy for broker calls."""
    resolved = settings or ReportSettings.from_env()
    return RetryPolicy(
        max_attempts=resolved.retry_max_attempts,
        backoff_base=resolved.retry_backoff_base,
        max_delay=resolved.retry_max_delay,
    )


def build_report_use_case(
    broker: BrokerPort | None = None,
    settings: ReportSettings | None = None,
) -> BuildPortfolioReportUseCase:
    """Return the portfolio report use case."""
    resolved = settings or ReportSettings.from_env()
    return BuildPortfolioReportUseCase(
        broker or build_broker(resolved),
        logger=get_app_logger(),
        retry_policy=build_retry_policy(resolved),
        max_workers=resolved.max_workers,
    )


def build_history_use_case(
    broker: BrokerPort | None = None,
    settings: ReportSettings | None = None,
) -> GetInstrumentHistoryUseCase:
    """Return the instrument history use case."""
    resolved = settings or ReportSettings.from_env()
    return GetInstrumentHistoryUseCase(
        broker or build_broker(resolved),
        logger=get_app_logger(),
        retry_policy=build_retry_policy(resolved),
    )


__all__ = [
    "build_broker",
    "build_retry_policy",
    "build_report_use_case",
    "build_history_use_case",
]
