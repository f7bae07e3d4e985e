"""Classification and reduction of an instrument's operations."""

import logging
from collections.abc import Iterable
from logging import Logger

from ..currency import Currency
from ..models.broker_rows import RawOperation
from ..models.money import Money
from ..models.operations import OperationInfluence, OperationType
from ..models.position import Totals
from .conversion import to_money

PURE_INCOME_OPERATIONS = frozenset(
    {
        OperationType.DIVIDEND_TAX,
        OperationType.DIVIDEND_TAX_PROGRESSIVE,
        OperationType.BOND_TAX,
        OperationType.BOND_TAX_PROGRESSIVE,
        OperationType.COUPON,
        OperationType.BENEFIT_TAX,
        OperationType.BENEFIT_TAX_PROGRESSIVE,
        OperationType.OVERNIGHT,
        OperationType.TAX,
        OperationType.DIVIDEND,
    }
)

FEE_OPERATIONS = frozenset(
    {
        OperationType.SERVICE_FEE,
        OperationType.MARGIN_FEE,
        OperationType.BROKER_FEE,
        OperationType.SUCCESS_FEE,
        OperationType.TRACK_MFEE,
        OperationType.TRACK_PFEE,
        OperationType.CASH_FEE,
        OperationType.OUT_FEE,
        OperationType.OUT_STAMP_DUTY,
        OperationType.ADVICE_FEE,
        OperationType.OUTPUT_PENALTY,
    }
)


def classify_operation(operation_type: OperationType) -> OperationInfluence:
    """Map an operation type to the totals bucket it feeds.

    Taxes withheld on dividends and coupons are pure income too, so the
    additional profit line is net of them.

    Args:
        operation_type: Broker operation type code.

    Returns:
        OperationInfluence: PURE_INCOME, FEES or UNSPECIFIED.
    """
    if operation_type in PURE_INCOME_OPERATIONS:
        return OperationInfluence.PURE_INCOME
    if operation_type in FEE_OPERATIONS:
        return OperationInfluence.FEES
    return OperationInfluence.UNSPECIFIED


def reduce_operations(
    operations: Iterable[RawOperation],
    currency: Currency,
    logger: Logger | None = None,
) -> Totals:
    """Fold operations into additional profit and fee totals.

    Operations without a usable payment, or paid in a currency other than
    the target one, are skipped and counted.

    Args:
        operations: All operations of one instrument, in any order.
        currency: Currency of the resulting totals.
        logger: Logger used for skip diagnostics.

    Returns:
        Totals: Additional profit, fees and the number of skipped
        operations.
    """
    log = logger or logging.getLogger(__name__)
    additional_profit = Money.zero(currency)
    fees = Money.zero(currency)
    skipped = 0
    for operation in operations:
        payment = to_money(operation.payment)
        if payment is None:
            log.debug(f"Skipping operation {operation.id} without payment")
            skipped += 1
            continue
        influence = classify_operation(operation.operation_type)
        if influence is OperationInfluence.UNSPECIFIED:
            continue
        if payment.currency != currency:
            if payment.is_zero():
                continue
            log.warning(
                f"Skipping operation {operation.id}: payment in "
                f"{payment.currency} does not match {currency}"
            )
            skipped += 1
            continue
        if influence is OperationInfluence.PURE_INCOME:
            additional_profit = additional_profit + payment
        else:
            fees = fees + payment
    return Totals(
        additional_profit=additional_profit,
        fees=fees,
        skipped_operations=skipped,
    )


__all__ = [
    "PURE_INCOME_OPERATIONS",
    "FEE_OPERATIONS",
    "classify_operation",
    "reduce_operations",
]
