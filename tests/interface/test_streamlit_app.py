"""Tests for the Streamlit app module."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from portfolio_report.adapters.interface.streamlit import app
from portfolio_report.application.ports.broker import BrokerError
from portfolio_report.application.use_cases.build_portfolio_report import (
    PortfolioReport,
    ReportStats,
)
from portfolio_report.domain.constants import HUNDRED
from portfolio_report.domain.currency import Currency
from portfolio_report.domain.models import (
    AccountType,
    History,
    HistoryItem,
    InstrumentClass,
    Money,
    Paper,
    Portfolio,
    Position,
    ProfitKind,
    Totals,
)
from portfolio_report.infrastructure.settings import ReportSettings


def _money(value: str, currency: Currency = Currency.RUB) -> Money:
    return Money(Decimal(value), currency)


def _paper(
    ticker: str,
    profit_kind: ProfitKind,
    current: str = "11",
    currency: Currency = Currency.RUB,
) -> Paper:
    return Paper(
        name=f"{ticker} name",
        ticker=ticker,
        figi=f"FIGI-{ticker}",
        position=Position(
            currency=currency,
            average_buy_price=_money("10", currency),
            current_instrument_price=_money(current, currency),
            quantity=Decimal("100"),
        ),
        totals=Totals(
            additional_profit=_money("100", currency),
            fees=_money("-10", currency),
        ),
        profit_kind=profit_kind,
    )


def _portfolio() -> Portfolio:
    portfolio = Portfolio()
    portfolio.asset_for(InstrumentClass.BOND).add_paper(
        _paper("SU26238", ProfitKind.COUPON)
    )
    portfolio.asset_for(InstrumentClass.ETF).add_paper(
        _paper("FXUS", ProfitKind.NONE, current="33")
    )
    return portfolio


class _FakeColumn:
    def __init__(self) -> None:
        self.metrics: list[tuple] = []

    def metric(self, label, value, delta=None, **_kwargs):
        self.metrics.append((label, value, delta))


class _FakeSidebar:
    def __init__(self, page: str, ticker: str = "") -> None:
        self._page = page
        self._ticker = ticker

    def selectbox(self, label, options, **_kwargs):
        if label == "Page":
            return self._page
        return options[0]

    def text_input(self, label, **_kwargs):
        return self._ticker


class _FakeStreamlit:
    def __init__(self, page: str = "Portfolio", ticker: str = "") -> None:
        self.sidebar = _FakeSidebar(page, ticker)
        self.config_kwargs = None
        self.title_text = None
        self.captions: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.infos: list[str] = []
        self.subheaders: list[str] = []
        self.dataframes: list[tuple] = []
        self.columns_created: list[_FakeColumn] = []

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def caption(self, text: str):
        self.captions.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def error(self, text: str):
        self.errors.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def subheader(self, text: str):
        self.subheaders.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))

    def columns(self, count: int):
        created = [_FakeColumn() for _ in range(count)]
        self.columns_created.extend(created)
        return created


def _patch_app(monkeypatch, fake_st: _FakeStreamlit) -> list[str]:
    charts: list[str] = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())
    monkeypatch.setattr(
        app,
        "_render_allocation_chart",
        lambda portfolio, title, **_kwargs: charts.append(title),
    )
    return charts


def test_fetch_report_invokes_use_case(monkeypatch) -> None:
    """_fetch_report should build the use case from settings."""
    report = PortfolioReport("acc-1", Portfolio())
    captured = {}

    class _FakeUseCase:
        def execute(self, account_type):
            captured["account_type"] = account_type
            return report

    monkeypatch.setattr(
        app.ReportSettings,
        "from_env",
        classmethod(lambda cls: ReportSettings()),
    )
    monkeypatch.setattr(
        app,
        "build_report_use_case",
        lambda settings=None: _FakeUseCase(),
    )

    assert app._fetch_report("iis") is report
    assert captured["account_type"] is AccountType.IIS


def test_load_report_uses_fetch(monkeypatch) -> None:
    report = PortfolioReport("cached", Portfolio())
    monkeypatch.setattr(app, "_fetch_report", lambda account_type: report)

    result = app._load_report("tinkoff", schema_version=101)

    assert result.account_id == "cached"


def test_asset_rows_include_profit_column_for_bonds() -> None:
    portfolio = _portfolio()

    bond_rows = app._asset_rows(portfolio.bonds)
    etf_rows = app._asset_rows(portfolio.etfs)

    assert bond_rows[0]["Ticker"] == "SU26238"
    assert bond_rows[0]["Coupons"] == "100.00 ₽"
    assert bond_rows[0]["Income"] == "100.00 ₽ (10.00%)"
    assert "Coupons" not in etf_rows[0]


def test_asset_rows_mark_income_across_currencies() -> None:
    paper = Paper(
        name="Odd name",
        ticker="ODD",
        figi="FIGI-ODD",
        position=Position(
            currency=Currency.RUB,
            average_buy_price=_money("50", Currency.USD),
            current_instrument_price=_money("60"),
            quantity=Decimal("10"),
        ),
        totals=Totals(additional_profit=_money("0"), fees=_money("0")),
        profit_kind=ProfitKind.DIVIDEND,
    )
    portfolio = Portfolio()
    portfolio.shares.add_paper(paper)

    rows = app._asset_rows(portfolio.shares)

    assert rows[0]["Income"] == "n/a (mixed currencies)"
    assert rows[0]["Total income"] == "n/a (mixed currencies)"
    assert rows[0]["Current value"] == "600.00 ₽"


def test_prepare_allocation_chart_data_shares() -> None:
    data, total = app._prepare_allocation_chart_data(_portfolio())

    assert total == Decimal("4400")
    assert [row["category"] for row in data] == ["Etfs", "Bonds"]
    assert data[0]["share_label"] == "75.0%"
    assert data[1]["amount_label"] == "1,100.00 ₽"
    assert app.HUNDRED is HUNDRED


def test_prepare_allocation_chart_data_skips_mixed_assets() -> None:
    portfolio = _portfolio()
    portfolio.etfs.add_paper(
        _paper("VOO", ProfitKind.NONE, currency=Currency.USD)
    )

    data, total = app._prepare_allocation_chart_data(portfolio)

    assert [row["category"] for row in data] == ["Bonds"]
    assert total == Decimal("1100")


def test_main_renders_portfolio(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    charts = _patch_app(monkeypatch, fake_st)
    report = PortfolioReport(
        "acc-1",
        _portfolio(),
        ReportStats(papers=2, skipped_unknown_class=1),
    )
    monkeypatch.setattr(app, "_load_report", lambda *args, **kw: report)

    app.main()

    assert fake_st.config_kwargs["page_title"] == "Portfolio Report"
    assert fake_st.title_text == "Portfolio Report"
    assert charts == ["Current value by asset class"]
    assert fake_st.subheaders == ["Etfs", "Bonds"]
    assert len(fake_st.dataframes) == 2
    _, kwargs = fake_st.dataframes[0]
    assert kwargs["hide_index"] is True
    labels = [
        metric[0]
        for column in fake_st.columns_created
        for metric in column.metrics
    ]
    assert labels == [
        "Balance value",
        "Current value",
        "Dividends and coupons",
        "Taxes and fees",
    ]
    assert any("1 positions skipped" in text for text in fake_st.captions)


def test_main_warns_when_account_is_missing(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    charts = _patch_app(monkeypatch, fake_st)
    monkeypatch.setattr(
        app,
        "_load_report",
        lambda *args, **kw: PortfolioReport(None, Portfolio()),
    )

    app.main()

    assert fake_st.warnings == ["No tinkoff account found."]
    assert charts == []


def test_main_shows_broker_errors(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    _patch_app(monkeypatch, fake_st)

    def _fail(*args, **kwargs):
        raise BrokerError("offline")

    monkeypatch.setattr(app, "_load_report", _fail)

    app.main()

    assert fake_st.errors == ["Failed to build portfolio report: offline"]


def test_history_page_requires_ticker(monkeypatch) -> None:
    fake_st = _FakeStreamlit(page="History")
    _patch_app(monkeypatch, fake_st)

    app.main()

    assert fake_st.infos == ["Enter a ticker to show its operations."]


def test_history_page_renders_ledger(monkeypatch) -> None:
    fake_st = _FakeStreamlit(page="History", ticker="SBER")
    _patch_app(monkeypatch, fake_st)
    history = History(
        name="Sber",
        ticker="SBER",
        figi="SHARE1",
        currency=Currency.RUB,
        items=(
            HistoryItem(
                datetime=datetime(2023, 1, 10, tzinfo=timezone.utc),
                quantity=10,
                quantity_rest=0,
                price=_money("250"),
                payment=_money("-2500"),
                description="Buy",
                state="Executed",
            ),
        ),
    )
    monkeypatch.setattr(
        app,
        "_load_history",
        lambda ticker, account_type: [history],
    )

    app.main()

    assert fake_st.subheaders == ["Sber (SBER)"]
    rows, _ = fake_st.dataframes[0]
    assert rows[0]["Payment"] == "-2,500.00 ₽"
    assert rows[0]["Date"] == "2023-01-10 00:00"
