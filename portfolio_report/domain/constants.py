"""Domain constants for portfolio aggregation."""

from decimal import Decimal

from .currency import Currency

HUNDRED = Decimal("100")
NANO_EXPONENT = -9

DEFAULT_CURRENCY = Currency.RUB

BONDS_ASSET_NAME = "Bonds"
SHARES_ASSET_NAME = "Shares"
ETFS_ASSET_NAME = "Etfs"
CURRENCIES_ASSET_NAME = "Currencies"
FUTURES_ASSET_NAME = "Futures"


__all__ = [
    "HUNDRED",
    "NANO_EXPONENT",
    "DEFAULT_CURRENCY",
    "BONDS_ASSET_NAME",
    "SHARES_ASSET_NAME",
    "ETFS_ASSET_NAME",
    "CURRENCIES_ASSET_NAME",
    "FUTURES_ASSET_NAME",
]
