"""Application port for brokerage data access."""

from typing import Protocol

from portfolio_report.domain.models.broker_rows import (
    BrokerAccount,
    InstrumentClass,
    InstrumentInfo,
    RawOperation,
    RawPosition,
)


class BrokerError(Exception):
    """Raised by broker adapters when data cannot be fetched."""


class BrokerPort(Protocol):
    """Port exposing read access to a brokerage account."""

    def fetch_accounts(self) -> list[BrokerAccount]:
        """Return the accounts available to the current user."""

    def fetch_instruments(
        self,
        instrument_class: InstrumentClass,
    ) -> list[InstrumentInfo]:
        """Return the instrument catalog of one instrument class."""

    def fetch_positions(self, account_id: str) -> list[RawPosition]:
        """Return the positions currently held on an account."""

    def fetch_operations(
        self,
        account_id: str,
        figi: str,
    ) -> list[RawOperation]:
        """Return executed operations of one instrument on an account."""

    def find_instruments(self, query: str) -> list[InstrumentInfo]:
        """Return instruments whose ticker matches the query."""


__all__ = ["BrokerError", "BrokerPort"]
