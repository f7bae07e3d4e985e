"""Raw records consumed from the broker."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .operations import OperationState, OperationType


class InstrumentClass(str, Enum):
    """Instrument class tag attached to a held position."""

    BOND = "bond"
    SHARE = "share"
    ETF = "etf"
    CURRENCY = "currency"
    FUTURES = "futures"

    @classmethod
    def parse(cls, raw: str | None) -> "InstrumentClass | None":
        """Parse an instrument type tag; unknown tags return None."""
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class AccountType(str, Enum):
    """Kinds of brokerage accounts."""

    TINKOFF = "tinkoff"
    IIS = "iis"
    INVEST_BOX = "invest_box"

    @classmethod
    def parse(cls, raw: str | None) -> "AccountType | None":
        if not raw:
            return None
        cleaned = raw.strip().lower()
        if cleaned.startswith("account_type_"):
            cleaned = cleaned[len("account_type_"):]
        try:
            return cls(cleaned)
        except ValueError:
            return None


@dataclass(frozen=True)
class Quotation:
    """Decimal number split into integer units and billionths."""

    units: int
    nano: int


@dataclass(frozen=True)
class MoneyValue:
    """Quotation tagged with a raw currency code."""

    units: int
    nano: int
    currency: str


@dataclass(frozen=True)
class RawPosition:
    """Position row as reported by the broker portfolio endpoint."""

    figi: str
    instrument_type: str
    quantity: Quotation | None
    average_position_price: MoneyValue | None
    current_price: MoneyValue | None


@dataclass(frozen=True)
class RawOperation:
    """Executed operation row as reported by the broker."""

    id: str
    figi: str
    operation_type: OperationType
    payment: MoneyValue | None
    price: MoneyValue | None = None
    currency: str = ""
    date: datetime | None = None
    quantity: int = 0
    quantity_rest: int = 0
    type: str = ""
    state: OperationState = OperationState.EXECUTED


@dataclass(frozen=True)
class InstrumentInfo:
    """Instrument catalog entry."""

    figi: str
    ticker: str
    name: str
    instrument_class: InstrumentClass | None = None


@dataclass(frozen=True)
class BrokerAccount:
    """Brokerage account descriptor."""

    id: str
    account_type: AccountType
    name: str = ""


__all__ = [
    "InstrumentClass",
    "AccountType",
    "Quotation",
    "MoneyValue",
    "RawPosition",
    "RawOperation",
    "InstrumentInfo",
    "BrokerAccount",
]
