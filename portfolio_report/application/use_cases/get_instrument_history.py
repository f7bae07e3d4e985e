"""Use case to read the operation ledgers of instruments by ticker."""

from functools import partial

from portfolio_report.application.ports.broker import BrokerPort
from portfolio_report.application.use_cases.retry import (
    RetryExhaustedError,
    RetryPolicy,
    call_with_retry,
)
from portfolio_report.domain.errors import AccountNotFoundError
from portfolio_report.domain.models import AccountType, BrokerAccount, History
from portfolio_report.domain.services import build_history
from portfolio_report.infrastructure.logging.logger import get_app_logger


class GetInstrumentHistoryUseCase:
    """Fetch and assemble the ledgers of instruments matching a ticker."""

    def __init__(
        self,
        broker: BrokerPort,
        logger=None,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self._broker = broker
        self._logger = logger or get_app_logger()
        self._retry_policy = retry_policy or RetryPolicy()

    def execute(
        self,
        ticker: str,
        account_type: AccountType = AccountType.TINKOFF,
    ) -> list[History]:
        """Return the ledger of every instrument matching a ticker.

        The account of the requested type is used when it exists, otherwise
        the first account the broker returns.

        Args:
            ticker: Exchange ticker to look up.
            account_type: Preferred kind of account.

        Returns:
            list[History]: One ledger per matching instrument with at least
            one operation, in catalog order.

        Raises:
            AccountNotFoundError: If the broker returns no accounts.
            RetryExhaustedError: If accounts or instruments cannot be fetched.
        """
        cleaned = ticker.strip()
        if not cleaned:
            return []
        account = self._resolve_account(account_type)
        instruments = self._call(
            partial(self._broker.find_instruments, cleaned),
            f"find instruments '{cleaned}'",
        )
        histories: list[History] = []
        for instrument in instruments:
            try:
                operations = self._call(
                    partial(
                        self._broker.fetch_operations,
                        account.id,
                        instrument.figi,
                    ),
                    f"fetch operations of {instrument.figi}",
                )
            except RetryExhaustedError:
                self._logger.warning(
                    f"Skipping {instrument.figi}: operations unavailable"
                )
                continue
            history = build_history(operations, instrument)
            if history is None:
                self._logger.info(f"No operations for {instrument.figi}")
                continue
            histories.append(history)
        return histories

    def _resolve_account(self, account_type: AccountType) -> BrokerAccount:
        accounts = self._call(self._broker.fetch_accounts, "fetch accounts")
        if not accounts:
            raise AccountNotFoundError("Broker returned no accounts")
        for account in accounts:
            if account.account_type == account_type:
                return account
        fallback = accounts[0]
        self._logger.warning(
            f"No {account_type.value} account found; "
            f"using {fallback.id} instead"
        )
        return fallback

    def _call(self, func, description: str):
        return call_with_retry(
            func,
            self._retry_policy,
            self._logger,
            description=description,
        )


__all__ = ["GetInstrumentHistoryUseCase"]
