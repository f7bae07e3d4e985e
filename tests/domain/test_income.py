"""Tests for the Income value type."""

from decimal import Decimal

import pytest

from portfolio_report.domain.currency import Currency
from portfolio_report.domain.errors import CurrencyMismatchError
from portfolio_report.domain.models.income import Income
from portfolio_report.domain.models.money import Money


def _rub(value: str) -> Money:
    return Money(Decimal(value), Currency.RUB)


def test_of_computes_delta_and_percent() -> None:
    income = Income.of(_rub("1100"), _rub("1000"))

    assert income.currency is Currency.RUB
    assert income.delta == Decimal("100")
    assert income.percent == Decimal("10")
    assert not income.is_negative()


def test_percent_is_zero_for_zero_balance() -> None:
    income = Income.of(_rub("50"), _rub("0"))

    assert income.percent == Decimal("0")
    assert income.delta == Decimal("50")


def test_negative_income() -> None:
    income = Income.of(_rub("900"), _rub("1000"))

    assert income.is_negative()
    assert income.percent == Decimal("-10")


def test_of_rejects_mismatched_currencies() -> None:
    with pytest.raises(CurrencyMismatchError):
        Income.of(_rub("1"), Money(Decimal("1"), Currency.USD))


def test_addition_sums_components() -> None:
    total = Income.of(_rub("1100"), _rub("1000")) + Income.of(
        _rub("600"),
        _rub("500"),
    )

    assert total.current == Decimal("1700")
    assert total.balance == Decimal("1500")
    assert total.delta == Decimal("200")


def test_zero_income_is_identity_across_currencies() -> None:
    usd = Income.of(
        Money(Decimal("11"), Currency.USD),
        Money(Decimal("10"), Currency.USD),
    )

    total = Income.zero(Currency.RUB) + usd

    assert total == usd
    assert usd + Income.zero(Currency.RUB) == usd
    assert Income.zero(Currency.RUB).is_zero()


def test_addition_rejects_mismatched_currencies() -> None:
    usd = Income.of(
        Money(Decimal("11"), Currency.USD),
        Money(Decimal("10"), Currency.USD),
    )
    with pytest.raises(CurrencyMismatchError):
        Income.of(_rub("1"), _rub("1")) + usd
