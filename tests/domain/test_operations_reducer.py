"""Tests for operation classification and reduction."""

import random
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from portfolio_report.domain.currency import Currency
from portfolio_report.domain.models import (
    MoneyValue,
    OperationInfluence,
    OperationState,
    OperationType,
    RawOperation,
    Totals,
)
from portfolio_report.domain.models.money import Money
from portfolio_report.domain.services.operations import (
    classify_operation,
    reduce_operations,
)


def _operation(
    op_id: str,
    operation_type: OperationType,
    units: int | None,
    nano: int = 0,
    currency: str = "rub",
) -> RawOperation:
    payment = (
        None
        if units is None
        else MoneyValue(units=units, nano=nano, currency=currency)
    )
    return RawOperation(
        id=op_id,
        figi="BBG000000001",
        operation_type=operation_type,
        payment=payment,
    )


def _rub(value: str) -> Money:
    return Money(Decimal(value), Currency.RUB)


@pytest.mark.parametrize(
    "operation_type",
    [
        OperationType.DIVIDEND,
        OperationType.DIVIDEND_TAX,
        OperationType.COUPON,
        OperationType.BOND_TAX,
        OperationType.OVERNIGHT,
        OperationType.TAX,
        OperationType.BENEFIT_TAX_PROGRESSIVE,
    ],
)
def test_classify_pure_income(operation_type) -> None:
    assert classify_operation(operation_type) is OperationInfluence.PURE_INCOME


@pytest.mark.parametrize(
    "operation_type",
    [
        OperationType.BROKER_FEE,
        OperationType.SERVICE_FEE,
        OperationType.MARGIN_FEE,
        OperationType.OUT_STAMP_DUTY,
        OperationType.OUTPUT_PENALTY,
    ],
)
def test_classify_fees(operation_type) -> None:
    assert classify_operation(operation_type) is OperationInfluence.FEES


@pytest.mark.parametrize(
    "operation_type",
    [
        OperationType.BUY,
        OperationType.SELL,
        OperationType.INPUT,
        OperationType.TAX_PROGRESSIVE,
        OperationType.DIV_EXT,
        OperationType.UNSPECIFIED,
    ],
)
def test_classify_unspecified(operation_type) -> None:
    assert classify_operation(operation_type) is OperationInfluence.UNSPECIFIED


def test_reduce_sums_each_bucket() -> None:
    """Coupons net of tax go to profit, commissions go to fees."""
    operations = [
        _operation("1", OperationType.COUPON, 120),
        _operation("2", OperationType.BOND_TAX, -20),
        _operation("3", OperationType.BROKER_FEE, -7, -500000000),
        _operation("4", OperationType.SERVICE_FEE, -2, -500000000),
        _operation("5", OperationType.BUY, -1000),
    ]

    totals = reduce_operations(operations, Currency.RUB)

    assert totals == Totals(additional_profit=_rub("100"), fees=_rub("-10"))
    assert totals.skipped_operations == 0


def test_reduce_is_order_independent() -> None:
    operations = [
        _operation(str(index), operation_type, units)
        for index, (operation_type, units) in enumerate(
            [
                (OperationType.DIVIDEND, 50),
                (OperationType.DIVIDEND_TAX, -7),
                (OperationType.BROKER_FEE, -3),
                (OperationType.SELL, 500),
                (OperationType.DIVIDEND, 25),
            ]
        )
    ]
    expected = reduce_operations(operations, Currency.RUB)

    shuffled = operations[:]
    random.Random(7).shuffle(shuffled)

    assert reduce_operations(shuffled, Currency.RUB) == expected
    assert expected.additional_profit == _rub("68")
    assert expected.fees == _rub("-3")


def test_reduce_skips_and_counts_unusable_payments() -> None:
    logger = MagicMock()
    operations = [
        _operation("1", OperationType.DIVIDEND, None),
        _operation("2", OperationType.DIVIDEND, 10, currency="xxx"),
        _operation("3", OperationType.DIVIDEND, 10, currency="usd"),
        _operation("4", OperationType.DIVIDEND, 0, currency="usd"),
        _operation("5", OperationType.DIVIDEND, 30),
    ]

    totals = reduce_operations(operations, Currency.RUB, logger=logger)

    assert totals.additional_profit == _rub("30")
    assert totals.fees == _rub("0")
    assert totals.skipped_operations == 3
    logger.warning.assert_called_once()


def test_reduce_of_no_operations_is_zero() -> None:
    totals = reduce_operations([], Currency.USD)

    assert totals == Totals.zero(Currency.USD)
    assert totals.additional_profit.currency is Currency.USD


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (23, OperationType.COUPON),
        ("23", OperationType.COUPON),
        ("OPERATION_TYPE_COUPON", OperationType.COUPON),
        ("broker_fee", OperationType.BROKER_FEE),
        ("unknown", OperationType.UNSPECIFIED),
        (999, OperationType.UNSPECIFIED),
        (None, OperationType.UNSPECIFIED),
    ],
)
def test_operation_type_parse(raw, expected) -> None:
    assert OperationType.parse(raw) is expected


def test_operation_state_parse_and_label() -> None:
    state = OperationState.parse("OPERATION_STATE_CANCELED")

    assert state is OperationState.CANCELED
    assert state.label == "Canceled"
    assert OperationState.parse(None).label == "Not specified"
