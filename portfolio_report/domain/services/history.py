"""Construction of instrument operation ledgers."""

from collections.abc import Iterable

from ..constants import DEFAULT_CURRENCY
from ..currency import Currency
from ..models.broker_rows import InstrumentInfo, RawOperation
from ..models.history import History, HistoryItem
from ..models.money import Money
from .conversion import to_datetime_utc, to_money


def build_history_item(operation: RawOperation) -> HistoryItem:
    """Convert one raw operation into a ledger entry.

    Missing payment or price read as zero in the operation currency, which
    itself falls back to the default currency when unknown.
    """
    currency = Currency.from_code(operation.currency) or DEFAULT_CURRENCY
    payment = to_money(operation.payment) or Money.zero(currency)
    price = to_money(operation.price) or Money.zero(currency)
    return HistoryItem(
        datetime=to_datetime_utc(operation.date),
        quantity=operation.quantity,
        quantity_rest=operation.quantity_rest,
        price=price,
        payment=payment,
        description=operation.type,
        state=operation.state.label,
    )


def build_history(
    operations: Iterable[RawOperation],
    instrument: InstrumentInfo,
) -> History | None:
    """Build the ledger of an instrument.

    Operations are deduplicated by id (first occurrence wins) and sorted by
    datetime.

    Args:
        operations: Raw operations, possibly with duplicates.
        instrument: Instrument the operations belong to.

    Returns:
        History | None: Ledger, or None when there are no operations.
    """
    seen: set[str] = set()
    items: list[HistoryItem] = []
    for operation in operations:
        if operation.id in seen:
            continue
        seen.add(operation.id)
        items.append(build_history_item(operation))
    if not items:
        return None
    items.sort(key=lambda item: item.datetime)
    return History(
        name=instrument.name,
        ticker=instrument.ticker,
        figi=instrument.figi,
        currency=items[0].payment.currency,
        items=tuple(items),
    )


__all__ = ["build_history_item", "build_history"]
