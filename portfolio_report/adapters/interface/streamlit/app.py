"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal
from importlib import import_module

import streamlit as st
import altair as alt

from portfolio_report.adapters.formatting import (
    MIXED_CURRENCIES,
    format_amount,
    format_income,
    format_money,
    safe_format,
)
from portfolio_report.application.ports.broker import BrokerError
from portfolio_report.application.use_cases.build_portfolio_report import (
    PortfolioReport,
)
from portfolio_report.domain.constants import HUNDRED
from portfolio_report.domain.errors import (
    AccountNotFoundError,
    CurrencyMismatchError,
)
from portfolio_report.domain.models import (
    AccountType,
    Asset,
    History,
    Portfolio,
)
from portfolio_report.infrastructure.container import (
    build_history_use_case,
    build_report_use_case,
)
from portfolio_report.infrastructure.logging.logger import get_usage_logger
from portfolio_report.infrastructure.settings import ReportSettings


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas expose what Altair charts need.

    Returns:
        Tuple of a readiness flag and an error message when not ready.
    """
    numpy = import_module("numpy")
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed incorrectly (missing ndarray)."
    pandas = import_module("pandas")
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed incorrectly (missing Timestamp)."
    return True, None


def _fetch_report(account_type: str) -> PortfolioReport:
    """Build the portfolio report through the configured broker."""
    settings = ReportSettings.from_env()
    use_case = build_report_use_case(settings=settings)
    return use_case.execute(AccountType(account_type))


@st.cache_data(show_spinner=False)
def _load_report(
    account_type: str,
    schema_version: int = 1,
) -> PortfolioReport:
    """Cached wrapper around _fetch_report."""
    _ = schema_version
    return _fetch_report(account_type)


def _fetch_history(ticker: str, account_type: str) -> list[History]:
    """Load the ledgers of instruments matching a ticker."""
    settings = ReportSettings.from_env()
    use_case = build_history_use_case(settings=settings)
    return use_case.execute(ticker, AccountType(account_type))


@st.cache_data(show_spinner=False)
def _load_history(ticker: str, account_type: str) -> list[History]:
    """Cached wrapper around _fetch_history."""
    return _fetch_history(ticker, account_type)


def _asset_rows(asset: Asset) -> list[dict[str, str]]:
    """Return one table row per paper of an asset."""
    rows = []
    for paper in asset.papers:
        row = {
            "Name": paper.name,
            "Ticker": paper.ticker,
            "Quantity": format_amount(paper.quantity),
            "Average price": format_money(paper.average_buy_price),
            "Last price": format_money(paper.current_instrument_price),
            "Balance value": format_money(paper.balance),
            "Current value": format_money(paper.current),
            "Income": safe_format(lambda: paper.income, format_income),
        }
        if asset.profit_kind.label:
            row[asset.profit_kind.label] = format_money(paper.dividends)
        row["Total income"] = safe_format(
            lambda: paper.total_income,
            format_income,
        )
        row["Taxes and fees"] = format_money(paper.fees)
        rows.append(row)
    return rows


def _history_rows(history: History) -> list[dict[str, str]]:
    """Return one table row per ledger entry."""
    return [
        {
            "Date": item.datetime.strftime("%Y-%m-%d %H:%M"),
            "Operation": item.description,
            "State": item.state,
            "Quantity": str(item.quantity),
            "Rest": str(item.quantity_rest),
            "Price": format_money(item.price),
            "Payment": format_money(item.payment),
        }
        for item in history.items
    ]


def _prepare_allocation_chart_data(
    portfolio: Portfolio,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data of current value by asset class.

    Assets whose papers mix currencies are left out of the chart.

    Args:
        portfolio: Populated portfolio.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    amounts = []
    for asset in portfolio.assets():
        if asset.is_empty():
            continue
        try:
            amounts.append((asset.name, asset.current()))
        except CurrencyMismatchError:
            continue
    total_amount = sum(
        (money.value for _, money in amounts),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for name, money in sorted(amounts, key=lambda item: -item[1].value):
        share = (money.value / total_amount) * HUNDRED if total_amount else 0
        data.append(
            {
                "category": name,
                "amount": float(money.value),
                "amount_label": format_money(money),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_allocation_chart(
    portfolio: Portfolio,
    title: str,
    chart_size: int = 360,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of current value by asset class."""
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data, _ = _prepare_allocation_chart_data(portfolio)
    if not data:
        st.info("No asset values available for the chart.")
        return
    palette_scale = list(
        palette
        or ["#1b9aaa", "#2e7d32", "#f4a261", "#e76f51", "#457b9d"]
    )
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=palette_scale),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.25)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(
        stroke=None
    )
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _render_metrics(portfolio: Portfolio) -> None:
    """Render the portfolio totals as metrics."""
    balance_col, current_col, dividends_col, fees_col = st.columns(4)
    balance_col.metric(
        "Balance value",
        safe_format(portfolio.balance, format_money),
    )
    income = safe_format(portfolio.income, format_income)
    current_col.metric(
        "Current value",
        safe_format(portfolio.current, format_money),
        None if income == MIXED_CURRENCIES else income,
    )
    total_income = safe_format(portfolio.total_income, format_income)
    dividends_col.metric(
        "Dividends and coupons",
        safe_format(portfolio.dividends, format_money),
        None if total_income == MIXED_CURRENCIES else total_income,
    )
    fees_col.metric(
        "Taxes and fees",
        safe_format(portfolio.fees, format_money),
    )


def _render_portfolio(account_type: str) -> None:
    try:
        report = _load_report(account_type, schema_version=1)
    except (BrokerError, RuntimeError) as exc:
        st.error(f"Failed to build portfolio report: {exc}")
        return
    if report.account_id is None:
        st.warning(f"No {account_type} account found.")
        return
    portfolio = report.portfolio
    st.caption(
        f"Account {report.account_id}: "
        f"{portfolio.instruments_count} instruments"
    )
    _render_metrics(portfolio)
    _render_allocation_chart(portfolio, "Current value by asset class")
    for asset in portfolio.assets():
        if asset.is_empty():
            continue
        st.subheader(asset.name)
        st.dataframe(_asset_rows(asset), width="stretch", hide_index=True)
    if report.stats.skipped_positions:
        st.caption(
            f"{report.stats.skipped_positions} positions skipped; "
            "see the application log for details."
        )


def _render_history(account_type: str) -> None:
    ticker = st.sidebar.text_input("Ticker", placeholder="e.g. SBER")
    if not ticker.strip():
        st.info("Enter a ticker to show its operations.")
        return
    try:
        histories = _load_history(ticker.strip(), account_type)
    except (AccountNotFoundError, BrokerError, RuntimeError) as exc:
        st.error(f"Failed to load history: {exc}")
        return
    if not histories:
        st.warning(f"No operations found for {ticker}.")
        return
    for history in histories:
        st.subheader(f"{history.name} ({history.ticker})")
        expenses_col, profit_col, balance_col = st.columns(3)
        expenses_col.metric(
            "Expenses",
            safe_format(history.expenses, format_money),
        )
        profit_col.metric("Profit", safe_format(history.profit, format_money))
        balance_col.metric(
            "Balance",
            safe_format(history.balance, format_money),
        )
        st.dataframe(_history_rows(history), width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Portfolio Report", layout="wide")
    st.title("Portfolio Report")

    page = st.sidebar.selectbox("Page", ["Portfolio", "History"])
    account_type = st.sidebar.selectbox(
        "Account type",
        [item.value for item in AccountType],
    )
    get_usage_logger().info(f"page={page} account_type={account_type}")

    if page == "Portfolio":
        _render_portfolio(account_type)
    else:
        _render_history(account_type)


if __name__ == "__main__":  # pragma: no cover
    main()
