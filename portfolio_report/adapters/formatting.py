"""Text formatting of report amounts for presentation adapters."""

from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import TypeVar

from portfolio_report.domain.errors import CurrencyMismatchError
from portfolio_report.domain.models import Income, Money

T = TypeVar("T")

MIXED_CURRENCIES = "n/a (mixed currencies)"


def format_amount(value: Decimal) -> str:
    """Format a decimal with thousands separators and two decimals."""
    return f"{value:,.2f}"


def format_money(money: Money) -> str:
    """Format money as ``1,234.50 ₽``."""
    return f"{format_amount(money.value)} {money.currency.symbol}"


def format_income(income: Income) -> str:
    """Format an income as delta and percent, e.g. ``100.00 ₽ (10.00%)``."""
    return (
        f"{format_amount(income.delta)} {income.currency.symbol} "
        f"({income.percent:.2f}%)"
    )


def tone(value: Money | Income | Decimal) -> str:
    """Return ``negative``, ``zero`` or ``positive`` for colouring."""
    if isinstance(value, Decimal):
        if value < 0:
            return "negative"
        return "zero" if value.is_zero() else "positive"
    if value.is_negative():
        return "negative"
    if value.is_zero():
        return "zero"
    return "positive"


def safe_format(
    compute: Callable[[], T],
    formatter: Callable[[T], str],
) -> str:
    """Format a computed total, or the mixed-currency placeholder.

    Args:
        compute: Zero-argument callable producing the total.
        formatter: Function rendering the total.

    Returns:
        str: Rendered total, or MIXED_CURRENCIES when the total combines
        several currencies.
    """
    try:
        return formatter(compute())
    except CurrencyMismatchError:
        return MIXED_CURRENCIES


def render_rows(rows: Sequence[tuple[str, str]], indent: int = 2) -> list[str]:
    """Align label/value pairs into text lines."""
    if not rows:
        return []
    width = max(len(label) for label, _ in rows)
    pad = " " * indent
    return [f"{pad}{label.ljust(width)}  {value}" for label, value in rows]


__all__ = [
    "MIXED_CURRENCIES",
    "format_amount",
    "format_money",
    "format_income",
    "tone",
    "safe_format",
    "render_rows",
]
