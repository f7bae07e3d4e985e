"""Conversion of raw broker values into domain types."""

from datetime import datetime, timezone
from decimal import Decimal

from ..constants import NANO_EXPONENT
from ..currency import Currency
from ..models.broker_rows import MoneyValue, Quotation
from ..models.money import Money

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_decimal(value: Quotation | MoneyValue | None) -> Decimal:
    """Convert a units/nano pair into a Decimal.

    Units and nano carry the same sign, so ``units=0, nano=-100000000``
    reads as ``-0.1``.

    Args:
        value: Quotation or MoneyValue, possibly missing.

    Returns:
        Decimal: Exact decimal value, zero when the value is missing.
    """
    if value is None:
        return Decimal("0")
    return Decimal(value.units) + Decimal(value.nano).scaleb(NANO_EXPONENT)


def to_currency(value: MoneyValue | None) -> Currency | None:
    """Resolve the currency of a raw money value."""
    if value is None:
        return None
    return Currency.from_code(value.currency)


def to_money(value: MoneyValue | None) -> Money | None:
    """Convert a raw money value into Money.

    Returns:
        Money | None: None when the value is missing or its currency code
        is not a known ISO-4217 code.
    """
    currency = to_currency(value)
    if currency is None:
        return None
    return Money(to_decimal(value), currency)


def to_datetime_utc(value: datetime | None) -> datetime:
    """Normalize a broker timestamp to an aware UTC datetime.

    Missing timestamps read as the Unix epoch; naive values are assumed to
    be UTC already.
    """
    if value is None:
        return EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


__all__ = ["EPOCH", "to_decimal", "to_currency", "to_money", "to_datetime_utc"]
