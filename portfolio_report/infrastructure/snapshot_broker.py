"""Broker adapter reading accounts, positions and operations from JSON."""

from datetime import datetime
import json
from pathlib import Path
from typing import Any

from portfolio_report.application.ports.broker import BrokerError
from portfolio_report.domain.models import (
    AccountType,
    BrokerAccount,
    InstrumentClass,
    InstrumentInfo,
    MoneyValue,
    OperationState,
    OperationType,
    Quotation,
    RawOperation,
    RawPosition,
)
from portfolio_report.infrastructure.logging.logger import get_app_logger


class SnapshotBrokerAdapter:
    """BrokerPort implementation backed by a JSON snapshot file.

    The document holds four top-level keys::

        {
          "accounts": [{"id": "...", "type": "tinkoff", "name": "..."}],
          "instruments": {"bond": [{"figi": "...", "ticker": "...",
                                    "name": "..."}], ...},
          "positions": {"<account id>": [{...}]},
          "operations": {"<account id>": [{...}]}
        }

    Quantities and prices are ``{"units": int, "nano": int}`` objects; money
    values add a ``"currency"`` code.

    Malformed position or operation rows are logged and skipped; a document
    of the wrong shape raises BrokerError.
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        """Load the snapshot.

        Args:
            path: Location of the JSON snapshot.
            logger: Optional logger compatible with logging.Logger-like API.

        Raises:
            BrokerError: If the file is missing or is not a JSON object.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._document = self._load(self._path)

    def fetch_accounts(self) -> list[BrokerAccount]:
        accounts: list[BrokerAccount] = []
        for row in self._section("accounts", []):
            account_type = AccountType.parse(row.get("type"))
            if account_type is None:
                self._logger.debug(
                    f"Ignoring account {row.get('id')} with type "
                    f"'{row.get('type')}'"
                )
                continue
            accounts.append(
                BrokerAccount(
                    id=str(row["id"]),
                    account_type=account_type,
                    name=row.get("name", ""),
                )
            )
        return accounts

    def fetch_instruments(
        self,
        instrument_class: InstrumentClass,
    ) -> list[InstrumentInfo]:
        catalogs = self._section("instruments", {})
        return [
            self._parse_instrument(row, instrument_class)
            for row in catalogs.get(instrument_class.value, [])
        ]

    def fetch_positions(self, account_id: str) -> list[RawPosition]:
        rows = self._account_rows("positions", account_id)
        return self._parse_rows(rows, self._parse_position, "position")

    def fetch_operations(
        self,
        account_id: str,
        figi: str,
    ) -> list[RawOperation]:
        rows = [
            row
            for row in self._account_rows("operations", account_id)
            if isinstance(row, dict) and row.get("figi") == figi
        ]
        return self._parse_rows(rows, self._parse_operation, "operation")

    def find_instruments(self, query: str) -> list[InstrumentInfo]:
        """Return instruments of every class whose ticker equals the query.

        The comparison ignores case.
        """
        wanted = query.strip().upper()
        return [
            instrument
            for instrument_class in InstrumentClass
            for instrument in self.fetch_instruments(instrument_class)
            if instrument.ticker.upper() == wanted
        ]

    @staticmethod
    def _load(path: Path) -> dict[str, Any]:
        try:
            with path.open(encoding="utf-8") as handle:
                document = json.load(handle)
        except OSError as exc:
            raise BrokerError(f"Cannot read snapshot {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise BrokerError(f"Invalid snapshot {path}: {exc}") from exc
        if not isinstance(document, dict):
            raise BrokerError(f"Invalid snapshot {path}: expected an object")
        return document

    def _section(self, key: str, default):
        value = self._document.get(key, default)
        if not isinstance(value, type(default)):
            raise BrokerError(
                f"Invalid snapshot {self._path}: '{key}' has wrong shape"
            )
        return value

    def _account_rows(self, key: str, account_id: str) -> list:
        rows = self._section(key, {}).get(account_id, [])
        if not isinstance(rows, list):
            raise BrokerError(
                f"Invalid snapshot {self._path}: '{key}' of {account_id} "
                "is not a list"
            )
        return rows

    def _parse_rows(self, rows: list, parse, kind: str) -> list:
        """Parse rows one by one, skipping those that are malformed."""
        parsed = []
        for row in rows:
            try:
                parsed.append(parse(row))
            except BrokerError as exc:
                self._logger.warning(f"Skipping {kind} row: {exc}")
        return parsed

    def _parse_instrument(
        self,
        row: dict[str, Any],
        instrument_class: InstrumentClass,
    ) -> InstrumentInfo:
        try:
            return InstrumentInfo(
                figi=row["figi"],
                ticker=row.get("ticker", ""),
                name=row.get("name", ""),
                instrument_class=instrument_class,
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise BrokerError(f"Invalid instrument row {row!r}") from exc

    def _parse_position(self, row: dict[str, Any]) -> RawPosition:
        try:
            return RawPosition(
                figi=row["figi"],
                instrument_type=row.get("instrument_type", ""),
                quantity=_quotation(row.get("quantity")),
                average_position_price=_money_value(
                    row.get("average_position_price")
                ),
                current_price=_money_value(row.get("current_price")),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise BrokerError(f"Invalid position row {row!r}") from exc

    def _parse_operation(self, row: dict[str, Any]) -> RawOperation:
        try:
            return RawOperation(
                id=str(row["id"]),
                figi=row["figi"],
                operation_type=OperationType.parse(row.get("operation_type")),
                payment=_money_value(row.get("payment")),
                price=_money_value(row.get("price")),
                currency=row.get("currency", ""),
                date=_datetime(row.get("date")),
                quantity=int(row.get("quantity", 0)),
                quantity_rest=int(row.get("quantity_rest", 0)),
                type=row.get("type", ""),
                state=OperationState.parse(
                    row.get("state", OperationState.EXECUTED.name)
                ),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise BrokerError(f"Invalid operation row {row!r}") from exc


def _quotation(raw: dict[str, Any] | None) -> Quotation | None:
    if raw is None:
        return None
    return Quotation(
        units=int(raw.get("units", 0)),
        nano=int(raw.get("nano", 0)),
    )


def _money_value(raw: dict[str, Any] | None) -> MoneyValue | None:
    if raw is None:
        return None
    return MoneyValue(
        units=int(raw.get("units", 0)),
        nano=int(raw.get("nano", 0)),
        currency=str(raw.get("currency", "")),
    )


def _datetime(raw: str | None) -> datetime | None:
    if not raw:
        return None
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    return datetime.fromisoformat(raw)


__all__ = ["SnapshotBrokerAdapter"]
