"""CLI adapter printing the operation ledger of instruments by ticker."""

from collections.abc import Sequence
import os
import sys

from portfolio_report.adapters.formatting import (
    format_money,
    render_rows,
    safe_format,
)
from portfolio_report.application.ports.broker import BrokerError
from portfolio_report.domain.errors import AccountNotFoundError
from portfolio_report.domain.models import History
from portfolio_report.infrastructure.container import build_history_use_case
from portfolio_report.infrastructure.logging.logger import get_app_logger
from portfolio_report.infrastructure.settings import ReportSettings

DATETIME_FORMAT = "%Y-%m-%d %H:%M"


def render_history(history: History) -> str:
    """Render one instrument ledger as plain text."""
    lines = [f"{history.name} ({history.ticker}, {history.figi})"]
    for item in history.items:
        lines.append(
            f"  {item.datetime.strftime(DATETIME_FORMAT)}  "
            f"{item.description:<24} {item.state:<13} "
            f"qty={item.quantity:<6} rest={item.quantity_rest:<6} "
            f"price={format_money(item.price):>14}  "
            f"payment={format_money(item.payment):>14}"
        )
    rows = [
        ("Expenses", safe_format(history.expenses, format_money)),
        ("Profit", safe_format(history.profit, format_money)),
        ("Balance", safe_format(history.balance, format_money)),
    ]
    lines.extend(render_rows(rows))
    return "\n".join(lines)


def _resolve_ticker(argv: Sequence[str]) -> str | None:
    if argv:
        return argv[0]
    return os.getenv("HISTORY_TICKER")


def main(argv: Sequence[str] | None = None) -> None:
    """Print the ledger of every instrument matching a ticker.

    Args:
        argv: Command-line arguments; the first one is the ticker. Falls
            back to HISTORY_TICKER when empty.
    """
    logger = get_app_logger()
    args = list(sys.argv[1:] if argv is None else argv)
    ticker = _resolve_ticker(args)
    if not ticker or not ticker.strip():
        logger.warning("A ticker is required (argument or HISTORY_TICKER).")
        return

    settings = ReportSettings.from_env()
    try:
        use_case = build_history_use_case(settings=settings)
        histories = use_case.execute(ticker, settings.account_type)
    except (AccountNotFoundError, BrokerError, RuntimeError) as exc:
        logger.error(f"Failed to load history for {ticker}: {exc}")
        return

    if not histories:
        print(f"No operations found for {ticker}.")
        return
    print("\n\n".join(render_history(history) for history in histories))


if __name__ == "__main__":  # pragma: no cover
    main()
