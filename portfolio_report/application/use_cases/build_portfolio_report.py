"""Use case to build the portfolio report of a brokerage account."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial

from portfolio_report.application.ports.broker import BrokerPort
from portfolio_report.application.use_cases.retry import (
    RetryExhaustedError,
    RetryPolicy,
    call_with_retry,
)
from portfolio_report.domain.errors import PositionDataError
from portfolio_report.domain.models import (
    AccountType,
    BrokerAccount,
    InstrumentClass,
    InstrumentInfo,
    Portfolio,
    Position,
    RawOperation,
)
from portfolio_report.domain.services import (
    build_paper,
    build_position,
    profit_kind_for,
)
from portfolio_report.infrastructure.logging.logger import get_app_logger

DEFAULT_MAX_WORKERS = 8


@dataclass
class ReportStats:
    """Counters for every record the report had to leave out.

    Attributes:
        positions: Positions returned by the broker.
        papers: Papers added to the portfolio.
        skipped_unknown_class: Positions with an unknown instrument type.
        skipped_missing_instrument: Positions absent from the catalogs.
        skipped_invalid_position: Positions lacking currency or prices.
        skipped_unavailable_operations: Positions whose operations could
            not be fetched.
        skipped_operations: Operations ignored by the reducer.
    """

    positions: int = 0
    papers: int = 0
    skipped_unknown_class: int = 0
    skipped_missing_instrument: int = 0
    skipped_invalid_position: int = 0
    skipped_unavailable_operations: int = 0
    skipped_operations: int = 0

    @property
    def skipped_positions(self) -> int:
        return (
            self.skipped_unknown_class
            + self.skipped_missing_instrument
            + self.skipped_invalid_position
            + self.skipped_unavailable_operations
        )


@dataclass(frozen=True)
class PortfolioReport:
    """Populated report tree and the statistics of its assembly."""

    account_id: str | None
    portfolio: Portfolio
    stats: ReportStats = field(default_factory=ReportStats)


@dataclass(frozen=True)
class _Candidate:
    instrument_class: InstrumentClass
    instrument: InstrumentInfo
    position: Position


class BuildPortfolioReportUseCase:
    """Assemble a Portfolio from broker positions and operations."""

    def __init__(
        self,
        broker: BrokerPort,
        logger=None,
        retry_policy: RetryPolicy | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Initialize the use case.

        Args:
            broker: Port providing accounts, catalogs and operations.
            logger: Optional logger compatible with logging.Logger-like API.
            retry_policy: Limits for retrying failed broker calls.
            max_workers: Maximum concurrent operation fetches.
        """
        self._broker = broker
        self._logger = logger or get_app_logger()
        self._retry_policy = retry_policy or RetryPolicy()
        self._max_workers = max(1, max_workers)

    def execute(
        self,
        account_type: AccountType = AccountType.TINKOFF,
    ) -> PortfolioReport:
        """Return the portfolio report of the account of a given type.

        Args:
            account_type: Kind of account to report on.

        Returns:
            PortfolioReport: Portfolio tree with skip statistics. The
            portfolio is empty when no account of that type exists.

        Raises:
            RetryExhaustedError: If accounts, catalogs or positions cannot
                be fetched.
        """
        stats = ReportStats()
        account = self._find_account(account_type)
        if account is None:
            self._logger.warning(
                f"No {account_type.value} account found; report is empty"
            )
            return PortfolioReport(None, Portfolio(), stats)

        catalogs = self._fetch_catalogs()
        positions = self._call(
            partial(self._broker.fetch_positions, account.id),
            f"fetch positions of {account.id}",
        )
        stats.positions = len(positions)

        candidates: list[_Candidate] = []
        for raw in positions:
            instrument_class = InstrumentClass.parse(raw.instrument_type)
            if instrument_class is None:
                self._logger.warning(
                    f"Skipping {raw.figi}: unknown instrument type "
                    f"'{raw.instrument_type}'"
                )
                stats.skipped_unknown_class += 1
                continue
            try:
                position = build_position(raw)
            except PositionDataError as exc:
                self._logger.warning(f"Skipping {raw.figi}: {exc}")
                stats.skipped_invalid_position += 1
                continue
            instrument = catalogs[instrument_class].get(raw.figi)
            if instrument is None:
                self._logger.warning(
                    f"Skipping {raw.figi}: not found in "
                    f"{instrument_class.value} catalog"
                )
                stats.skipped_missing_instrument += 1
                continue
            candidates.append(
                _Candidate(instrument_class, instrument, position)
            )

        operations = self._fetch_all_operations(
            account.id,
            [candidate.instrument.figi for candidate in candidates],
        )

        portfolio = Portfolio()
        for candidate, instrument_operations in zip(candidates, operations):
            if instrument_operations is None:
                stats.skipped_unavailable_operations += 1
                continue
            paper = build_paper(
                candidate.instrument,
                candidate.position,
                instrument_operations,
                profit_kind_for(candidate.instrument_class),
                logger=self._logger,
            )
            stats.skipped_operations += paper.totals.skipped_operations
            portfolio.asset_for(candidate.instrument_class).add_paper(paper)
            stats.papers += 1

        self._logger.info(
            f"Portfolio report built for {account.id}: "
            f"papers={stats.papers}, "
            f"skipped_positions={stats.skipped_positions}, "
            f"skipped_operations={stats.skipped_operations}"
        )
        return PortfolioReport(account.id, portfolio, stats)

    def _find_account(
        self,
        account_type: AccountType,
    ) -> BrokerAccount | None:
        accounts = self._call(self._broker.fetch_accounts, "fetch accounts")
        for account in accounts:
            if account.account_type == account_type:
                return account
        return None

    def _fetch_catalogs(
        self,
    ) -> dict[InstrumentClass, dict[str, InstrumentInfo]]:
        catalogs: dict[InstrumentClass, dict[str, InstrumentInfo]] = {}
        for instrument_class in InstrumentClass:
            instruments = self._call(
                partial(self._broker.fetch_instruments, instrument_class),
                f"fetch {instrument_class.value} catalog",
            )
            catalogs[instrument_class] = {
                instrument.figi: instrument for instrument in instruments
            }
        return catalogs

    def _fetch_all_operations(
        self,
        account_id: str,
        figis: list[str],
    ) -> list[list[RawOperation] | None]:
        if not figis:
            return []
        workers = min(self._max_workers, len(figis))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self._fetch_operations, account_id, figi)
                for figi in figis
            ]
            return [future.result() for future in futures]

    def _fetch_operations(
        self,
        account_id: str,
        figi: str,
    ) -> list[RawOperation] | None:
        try:
            return self._call(
                partial(self._broker.fetch_operations, account_id, figi),
                f"fetch operations of {figi}",
            )
        except RetryExhaustedError:
            self._logger.warning(f"Skipping {figi}: operations unavailable")
            return None

    def _call(self, func, description: str):
        return call_with_retry(
            func,
            self._retry_policy,
            self._logger,
            description=description,
        )


__all__ = [
    "BuildPortfolioReportUseCase",
    "PortfolioReport",
    "ReportStats",
]
