"""Application ports package."""

from .broker import BrokerError, BrokerPort

__all__ = ["BrokerError", "BrokerPort"]
