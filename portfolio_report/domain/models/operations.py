"""Broker operation enumerations."""

from enum import Enum, IntEnum

OPERATION_TYPE_PREFIX = "OPERATION_TYPE_"
OPERATION_STATE_PREFIX = "OPERATION_STATE_"


class OperationType(IntEnum):
    """Operation type codes as reported by the broker."""

    UNSPECIFIED = 0
    INPUT = 1
    BOND_TAX = 2
    OUTPUT_SECURITIES = 3
    OVERNIGHT = 4
    TAX = 5
    BOND_REPAYMENT_FULL = 6
    SELL_CARD = 7
    DIVIDEND_TAX = 8
    OUTPUT = 9
    BOND_REPAYMENT = 10
    TAX_CORRECTION = 11
    SERVICE_FEE = 12
    BENEFIT_TAX = 13
    MARGIN_FEE = 14
    BUY = 15
    BUY_CARD = 16
    INPUT_SECURITIES = 17
    SELL_MARGIN = 18
    BROKER_FEE = 19
    BUY_MARGIN = 20
    DIVIDEND = 21
    SELL = 22
    COUPON = 23
    SUCCESS_FEE = 24
    DIVIDEND_TRANSFER = 25
    ACCRUING_VARMARGIN = 26
    WRITING_OFF_VARMARGIN = 27
    DELIVERY_BUY = 28
    DELIVERY_SELL = 29
    TRACK_MFEE = 30
    TRACK_PFEE = 31
    TAX_PROGRESSIVE = 32
    BOND_TAX_PROGRESSIVE = 33
    DIVIDEND_TAX_PROGRESSIVE = 34
    BENEFIT_TAX_PROGRESSIVE = 35
    TAX_CORRECTION_PROGRESSIVE = 36
    TAX_REPO_PROGRESSIVE = 37
    TAX_REPO = 38
    TAX_REPO_HOLD = 39
    TAX_REPO_REFUND = 40
    TAX_REPO_HOLD_PROGRESSIVE = 41
    TAX_REPO_REFUND_PROGRESSIVE = 42
    DIV_EXT = 43
    TAX_CORRECTION_COUPON = 44
    CASH_FEE = 45
    OUT_FEE = 46
    OUT_STAMP_DUTY = 47
    OUTPUT_SWIFT = 50
    INPUT_SWIFT = 51
    OUTPUT_ACQUIRING = 53
    INPUT_ACQUIRING = 54
    OUTPUT_PENALTY = 55
    ADVICE_FEE = 56
    TRANS_IIS_BS = 57
    TRANS_BS_BS = 58
    OUT_MULTI = 59
    INP_MULTI = 60
    OVER_PLACEMENT = 61
    OVER_COM = 62
    OVER_INCOME = 63
    OPTION_EXPIRATION = 64
    FUTURE_EXPIRATION = 65

    @classmethod
    def parse(cls, raw: "int | str | None") -> "OperationType":
        """Parse a code, a full ``OPERATION_TYPE_*`` name or a short name.

        Unknown values map to UNSPECIFIED.
        """
        return _parse_enum(cls, raw, OPERATION_TYPE_PREFIX, cls.UNSPECIFIED)


class OperationState(IntEnum):
    """Execution state of an operation."""

    UNSPECIFIED = 0
    EXECUTED = 1
    CANCELED = 2
    PROGRESS = 3

    @property
    def label(self) -> str:
        return _STATE_LABELS[self]

    @classmethod
    def parse(cls, raw: "int | str | None") -> "OperationState":
        return _parse_enum(cls, raw, OPERATION_STATE_PREFIX, cls.UNSPECIFIED)


_STATE_LABELS = {
    OperationState.UNSPECIFIED: "Not specified",
    OperationState.EXECUTED: "Executed",
    OperationState.CANCELED: "Canceled",
    OperationState.PROGRESS: "In progress",
}


class OperationInfluence(Enum):
    """How an operation affects per-instrument totals."""

    PURE_INCOME = "pure_income"
    FEES = "fees"
    UNSPECIFIED = "unspecified"


def _parse_enum(enum_cls, raw, prefix: str, default):
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        try:
            return enum_cls(raw)
        except ValueError:
            return default
    cleaned = str(raw).strip().upper()
    if cleaned.lstrip("-").isdigit():
        return _parse_enum(enum_cls, int(cleaned), prefix, default)
    if cleaned.startswith(prefix):
        cleaned = cleaned[len(prefix):]
    return enum_cls.__members__.get(cleaned, default)


__all__ = [
    "OperationType",
    "OperationState",
    "OperationInfluence",
]
