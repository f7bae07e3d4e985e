"""Domain exceptions for the portfolio report."""

from typing import Any


class ReportError(Exception):
    """Base class for report domain errors.

    Attributes:
        details: Structured context about the failure.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}


class CurrencyMismatchError(ReportError):
    """Raised when arithmetic combines two different currencies."""

    def __init__(self, left, right) -> None:
        super().__init__(
            f"Cannot combine amounts in {left} and {right}",
            {"left": str(left), "right": str(right)},
        )
        self.left = left
        self.right = right


class PositionDataError(ReportError):
    """Raised when a raw position lacks currency or price data."""

    def __init__(self, message: str, figi: str | None = None) -> None:
        super().__init__(message, {"figi": figi})
        self.figi = figi


class AccountNotFoundError(ReportError):
    """Raised when the broker exposes no usable account."""


__all__ = [
    "ReportError",
    "CurrencyMismatchError",
    "PositionDataError",
    "AccountNotFoundError",
]
