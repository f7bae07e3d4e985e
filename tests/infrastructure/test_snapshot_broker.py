"""Tests for the JSON snapshot broker adapter."""

import json
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from portfolio_report.application.ports.broker import BrokerError
from portfolio_report.domain.models import (
    AccountType,
    InstrumentClass,
    MoneyValue,
    OperationState,
    OperationType,
    Quotation,
)
from portfolio_report.infrastructure.snapshot_broker import (
    SnapshotBrokerAdapter,
)

SNAPSHOT = {
    "accounts": [
        {"id": "acc-1", "type": "ACCOUNT_TYPE_TINKOFF", "name": "Broker"},
        {"id": "acc-2", "type": "iis", "name": "IIS"},
        {"id": "acc-3", "type": "unknown"},
    ],
    "instruments": {
        "bond": [{"figi": "BOND1", "ticker": "SU26238", "name": "OFZ"}],
        "share": [{"figi": "SHARE1", "ticker": "SBER", "name": "Sber"}],
    },
    "positions": {
        "acc-1": [
            {
                "figi": "BOND1",
                "instrument_type": "bond",
                "quantity": {"units": 100, "nano": 0},
                "average_position_price": {
                    "units": 10,
                    "nano": 500000000,
                    "currency": "rub",
                },
                "current_price": {"units": 11, "nano": 0, "currency": "rub"},
            }
        ]
    },
    "operations": {
        "acc-1": [
            {
                "id": "op-1",
                "figi": "BOND1",
                "operation_type": "OPERATION_TYPE_COUPON",
                "payment": {"units": 120, "nano": 0, "currency": "rub"},
                "currency": "rub",
                "date": "2023-03-01T10:00:00Z",
                "type": "Coupon",
                "state": "OPERATION_STATE_EXECUTED",
            },
            {
                "id": "op-2",
                "figi": "SHARE1",
                "operation_type": 21,
                "payment": {"units": 5, "nano": 0, "currency": "rub"},
            },
        ]
    },
}


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def adapter(tmp_path: Path) -> SnapshotBrokerAdapter:
    path = _write(tmp_path, SNAPSHOT)
    return SnapshotBrokerAdapter(path, logger=MagicMock())


def test_fetch_accounts_parses_known_types(adapter) -> None:
    accounts = adapter.fetch_accounts()

    assert [(a.id, a.account_type) for a in accounts] == [
        ("acc-1", AccountType.TINKOFF),
        ("acc-2", AccountType.IIS),
    ]


def test_fetch_instruments_by_class(adapter) -> None:
    bonds = adapter.fetch_instruments(InstrumentClass.BOND)

    assert [b.ticker for b in bonds] == ["SU26238"]
    assert bonds[0].instrument_class is InstrumentClass.BOND
    assert adapter.fetch_instruments(InstrumentClass.FUTURES) == []


def test_fetch_positions(adapter) -> None:
    positions = adapter.fetch_positions("acc-1")

    assert len(positions) == 1
    assert positions[0].quantity == Quotation(100, 0)
    assert positions[0].average_position_price == MoneyValue(
        10, 500000000, "rub"
    )
    assert adapter.fetch_positions("acc-unknown") == []


def test_fetch_operations_filters_by_figi(adapter) -> None:
    operations = adapter.fetch_operations("acc-1", "BOND1")

    assert len(operations) == 1
    operation = operations[0]
    assert operation.operation_type is OperationType.COUPON
    assert operation.state is OperationState.EXECUTED
    assert operation.date == datetime(2023, 3, 1, 10, tzinfo=timezone.utc)
    assert operation.type == "Coupon"


def test_operation_defaults(adapter) -> None:
    operation = adapter.fetch_operations("acc-1", "SHARE1")[0]

    assert operation.operation_type is OperationType.DIVIDEND
    assert operation.state is OperationState.EXECUTED
    assert operation.date is None
    assert operation.price is None


def test_find_instruments_ignores_case(adapter) -> None:
    found = adapter.find_instruments("sber")

    assert [i.figi for i in found] == ["SHARE1"]
    assert found[0].instrument_class is InstrumentClass.SHARE


def test_missing_file_raises_broker_error(tmp_path: Path) -> None:
    with pytest.raises(BrokerError):
        SnapshotBrokerAdapter(tmp_path / "missing.json", logger=MagicMock())


def test_invalid_json_raises_broker_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(BrokerError):
        SnapshotBrokerAdapter(path, logger=MagicMock())


def test_non_object_document_raises_broker_error(tmp_path: Path) -> None:
    with pytest.raises(BrokerError):
        SnapshotBrokerAdapter(_write(tmp_path, []), logger=MagicMock())


def test_malformed_position_rows_are_skipped(tmp_path: Path) -> None:
    logger = MagicMock()
    good = SNAPSHOT["positions"]["acc-1"][0]
    payload = {
        "positions": {"acc-1": [{"instrument_type": "bond"}, good, "junk"]},
    }
    adapter = SnapshotBrokerAdapter(_write(tmp_path, payload), logger)

    positions = adapter.fetch_positions("acc-1")

    assert [p.figi for p in positions] == ["BOND1"]
    assert logger.warning.call_count == 2


def test_malformed_operation_row_keeps_the_valid_ones(tmp_path: Path) -> None:
    logger = MagicMock()
    dividend = {
        "id": "op-1",
        "figi": "SHARE1",
        "operation_type": "OPERATION_TYPE_DIVIDEND",
        "payment": {"units": 57, "nano": 0, "currency": "rub"},
        "date": "2023-07-20T07:00:00Z",
    }
    broken = dict(dividend, id="op-2", date="not-a-date")
    payload = {"operations": {"acc-1": [dividend, broken]}}
    adapter = SnapshotBrokerAdapter(_write(tmp_path, payload), logger)

    operations = adapter.fetch_operations("acc-1", "SHARE1")

    assert [op.id for op in operations] == ["op-1"]
    assert operations[0].payment == MoneyValue(57, 0, "rub")
    logger.warning.assert_called_once()
    assert "op-2" in logger.warning.call_args.args[0]


def test_account_rows_of_wrong_shape_raise_broker_error(
    tmp_path: Path,
) -> None:
    payload = {"operations": {"acc-1": {"figi": "SHARE1"}}}
    adapter = SnapshotBrokerAdapter(_write(tmp_path, payload), MagicMock())

    with pytest.raises(BrokerError):
        adapter.fetch_operations("acc-1", "SHARE1")
