"""Bounded exponential backoff for broker calls."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from portfolio_report.application.ports.broker import BrokerError

T = TypeVar("T")


class RetryExhaustedError(BrokerError):
    """Raised when a broker call keeps failing after every attempt."""

    def __init__(self, description: str, attempts: int) -> None:
        super().__init__(f"{description} failed after {attempts} attempts")
        self.description = description
        self.attempts = attempts


@dataclass(frozen=True)
class RetryPolicy:
    """Retry limits for broker calls.

    Attributes:
        max_attempts: Total number of attempts, including the first one.
        backoff_base: Delay before the first retry, in seconds.
        max_delay: Upper bound for a single delay, in seconds.
    """

    max_attempts: int = 5
    backoff_base: float = 0.5
    max_delay: float = 8.0

    def delay_for(self, attempt: int) -> float:
        """Return the delay after a failed attempt (1-based)."""
        return min(self.backoff_base * (2 ** (attempt - 1)), self.max_delay)


def call_with_retry(
    func: Callable[[], T],
    policy: RetryPolicy,
    logger,
    description: str = "broker call",
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call a broker function, retrying transient failures.

    Retry strategy:
    - exponential backoff: base, 2*base, 4*base... capped at max_delay
    - retries on BrokerError only, other exceptions propagate at once

    Args:
        func: Zero-argument callable performing the broker request.
        policy: Retry limits.
        logger: Logger used for retry warnings.
        description: Label of the call used in log messages.
        sleep: Sleep function, injectable for tests.

    Returns:
        The value returned by ``func``.

    Raises:
        RetryExhaustedError: If every attempt failed.
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            return func()
        except BrokerError as exc:
            if attempt >= policy.max_attempts:
                logger.error(
                    f"{description} failed after {attempt} attempts: {exc}"
                )
                raise RetryExhaustedError(description, attempt) from exc
            delay = policy.delay_for(attempt)
            logger.warning(
                f"{description} failed (attempt {attempt}/"
                f"{policy.max_attempts}): {exc}; retrying in {delay:.2f}s"
            )
            sleep(delay)


__all__ = ["RetryExhaustedError", "RetryPolicy", "call_with_retry"]
