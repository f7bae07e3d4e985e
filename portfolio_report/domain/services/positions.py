"""Construction of positions from raw broker rows."""

from ..errors import PositionDataError
from ..models.broker_rows import RawPosition
from ..models.position import Position
from .conversion import to_currency, to_decimal, to_money


def build_position(raw: RawPosition) -> Position:
    """Build a Position from a raw portfolio row.

    The position currency is the currency of its current price.

    Args:
        raw: Position row from the broker.

    Returns:
        Position: Immutable position snapshot.

    Raises:
        PositionDataError: If the currency code is unknown, a price is
            missing or the two prices are in different currencies.
    """
    currency = to_currency(raw.current_price)
    if currency is None:
        raise PositionDataError("Failed to get currency", raw.figi)

    average_buy_price = to_money(raw.average_position_price)
    if average_buy_price is None:
        raise PositionDataError(
            "Failed to get average position price",
            raw.figi,
        )

    current_instrument_price = to_money(raw.current_price)
    if current_instrument_price is None:
        raise PositionDataError("Failed to get current price", raw.figi)
    if average_buy_price.currency is not currency:
        raise PositionDataError(
            f"Average price in {average_buy_price.currency.code} does not "
            f"match current price in {currency.code}",
            raw.figi,
        )

    return Position(
        currency=currency,
        average_buy_price=average_buy_price,
        current_instrument_price=current_instrument_price,
        quantity=to_decimal(raw.quantity),
    )


__all__ = ["build_position"]
