"""Assembly of papers from positions and operation histories."""

from collections.abc import Iterable
from logging import Logger

from ..models.broker_rows import InstrumentClass, InstrumentInfo, RawOperation
from ..models.paper import Paper, ProfitKind
from ..models.position import Position
from .operations import reduce_operations

PROFIT_KINDS = {
    InstrumentClass.BOND: ProfitKind.COUPON,
    InstrumentClass.SHARE: ProfitKind.DIVIDEND,
    InstrumentClass.ETF: ProfitKind.NONE,
    InstrumentClass.CURRENCY: ProfitKind.NONE,
    InstrumentClass.FUTURES: ProfitKind.NONE,
}


def profit_kind_for(instrument_class: InstrumentClass) -> ProfitKind:
    """Return the additional profit category of an instrument class."""
    return PROFIT_KINDS[instrument_class]


def build_paper(
    instrument: InstrumentInfo,
    position: Position,
    operations: Iterable[RawOperation],
    profit_kind: ProfitKind,
    logger: Logger | None = None,
) -> Paper:
    """Combine a position and its reduced operations into a Paper.

    Args:
        instrument: Catalog entry identifying the instrument.
        position: Position snapshot of the instrument.
        operations: Every operation of the instrument.
        profit_kind: Additional profit category of the instrument.
        logger: Logger passed to the operation reducer.

    Returns:
        Paper: Reportable line item with totals in the position currency.
    """
    totals = reduce_operations(operations, position.currency, logger=logger)
    return Paper(
        name=instrument.name,
        ticker=instrument.ticker,
        figi=instrument.figi,
        position=position,
        totals=totals,
        profit_kind=profit_kind,
    )


__all__ = ["PROFIT_KINDS", "profit_kind_for", "build_paper"]
