"""CLI adapter printing the portfolio report of a brokerage account.

The broker snapshot, account type and verbosity come from the environment
(see ReportSettings); REPORT_ASSET_CLASS narrows the output to one asset
class such as ``bond`` or ``share``.
"""

import os

from portfolio_report.adapters.formatting import (
    format_amount,
    format_income,
    format_money,
    render_rows,
    safe_format,
)
from portfolio_report.application.ports.broker import BrokerError
from portfolio_report.application.use_cases.build_portfolio_report import (
    PortfolioReport,
)
from portfolio_report.domain.models import (
    Asset,
    InstrumentClass,
    Paper,
    Portfolio,
)
from portfolio_report.infrastructure.container import build_report_use_case
from portfolio_report.infrastructure.logging.logger import get_app_logger
from portfolio_report.infrastructure.settings import ReportSettings


def _paper_lines(paper: Paper) -> list[str]:
    rows = [
        ("Average buy price", format_money(paper.average_buy_price)),
        (
            "Last instrument price",
            format_money(paper.current_instrument_price),
        ),
        ("Current items count", format_amount(paper.quantity)),
        ("Balance value", format_money(paper.balance)),
        ("Current value", format_money(paper.current)),
        ("Income", safe_format(lambda: paper.income, format_income)),
    ]
    if paper.profit_kind.label:
        rows.append((paper.profit_kind.label, format_money(paper.dividends)))
    total_income = safe_format(lambda: paper.total_income, format_income)
    rows.append(("Total income", total_income))
    rows.append(("Taxes and fees", format_money(paper.fees)))
    return [f"  {paper.name} ({paper.ticker})", *render_rows(rows, indent=4)]


def _asset_lines(asset: Asset, verbose: bool) -> list[str]:
    lines = [f"{asset.name}:"]
    if verbose:
        for paper in asset.papers:
            lines.extend(_paper_lines(paper))
            lines.append("")
    rows = [
        ("Balance value", safe_format(asset.balance, format_money)),
        ("Current value", safe_format(asset.current, format_money)),
        ("Balance income", safe_format(asset.income, format_income)),
        ("Total income", safe_format(asset.total_income, format_income)),
    ]
    if asset.profit_kind.label:
        dividends = safe_format(asset.dividends, format_money)
        rows.append((asset.profit_kind.label, dividends))
    rows.append(("Taxes and fees", safe_format(asset.fees, format_money)))
    rows.append(("Instruments count", str(asset.instruments_count)))
    lines.append(f"  {asset.name} totals:")
    lines.extend(render_rows(rows, indent=4))
    return lines


def _portfolio_lines(portfolio: Portfolio) -> list[str]:
    rows = [
        ("Balance value", safe_format(portfolio.balance, format_money)),
        ("Current value", safe_format(portfolio.current, format_money)),
        ("Balance income", safe_format(portfolio.income, format_income)),
        ("Total income", safe_format(portfolio.total_income, format_income)),
        (
            "Dividends and coupons",
            safe_format(portfolio.dividends, format_money),
        ),
        ("Taxes and fees", safe_format(portfolio.fees, format_money)),
        ("Instruments count", str(portfolio.instruments_count)),
    ]
    return ["Portfolio totals:", *render_rows(rows)]


def render_report(
    report: PortfolioReport,
    verbose: bool = True,
    asset_class: InstrumentClass | None = None,
) -> str:
    """Render a portfolio report as plain text.

    Args:
        report: Report returned by the use case.
        verbose: Whether to list individual papers.
        asset_class: Optional class limiting the output to one asset.

    Returns:
        str: Multi-line report.
    """
    portfolio = report.portfolio
    if asset_class is not None:
        assets = [portfolio.asset_for(asset_class)]
    else:
        assets = [a for a in portfolio.assets() if not a.is_empty()]

    lines: list[str] = []
    for asset in assets:
        lines.extend(_asset_lines(asset, verbose))
        lines.append("")
    if asset_class is None:
        lines.extend(_portfolio_lines(portfolio))
    stats = report.stats
    if stats.skipped_positions or stats.skipped_operations:
        lines.append("")
        lines.append(
            f"Skipped positions: {stats.skipped_positions}, "
            f"skipped operations: {stats.skipped_operations}"
        )
    return "\n".join(lines)


def _parse_asset_class(value: str | None, logger) -> InstrumentClass | None:
    """Parse the asset class filter, ignoring unknown values."""
    if not value:
        return None
    parsed = InstrumentClass.parse(value)
    if parsed is None:
        logger.warning(
            f"Unknown REPORT_ASSET_CLASS '{value}'. Expected one of: "
            + ", ".join(item.value for item in InstrumentClass)
        )
    return parsed


def main() -> None:
    """Build and print the portfolio report."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    asset_class = _parse_asset_class(os.getenv("REPORT_ASSET_CLASS"), logger)
    try:
        use_case = build_report_use_case(settings=settings)
        report = use_case.execute(settings.account_type)
    except (BrokerError, RuntimeError) as exc:
        logger.error(f"Failed to build portfolio report: {exc}")
        return

    if report.account_id is None:
        print(f"No {settings.account_type.value} account found.")
        return
    print(render_report(report, settings.verbose, asset_class))


if __name__ == "__main__":  # pragma: no cover
    main()
