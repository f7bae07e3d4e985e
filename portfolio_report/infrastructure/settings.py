"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from portfolio_report.domain.models import AccountType
from portfolio_report.infrastructure.logging.logger import get_app_logger
from portfolio_report.utils.utils import get_project_root

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ReportSettings:
    """Settings for the broker adapter and report building.

    Attributes:
        snapshot_file: Path to the JSON broker snapshot, if any.
        account_type: Kind of account to report on.
        retry_max_attempts: Attempts per broker call before giving up.
        retry_backoff_base: Delay before the first retry, in seconds.
        retry_max_delay: Upper bound for one retry delay, in seconds.
        max_workers: Concurrent operation fetches.
        verbose: Whether reports list individual papers.
    """

    snapshot_file: Optional[Path] = None
    account_type: AccountType = AccountType.TINKOFF
    retry_max_attempts: int = 5
    retry_backoff_base: float = 0.5
    retry_max_delay: float = 8.0
    max_workers: int = 8
    verbose: bool = True

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        defaults = cls()

        raw_snapshot = os.getenv("BROKER_SNAPSHOT_FILE")
        if raw_snapshot:
            snapshot_file = cls._normalize_path(raw_snapshot, logger=logger)
        else:
            snapshot_file = cls._default_snapshot_file(logger=logger)

        raw_account_type = os.getenv("BROKER_ACCOUNT_TYPE")
        account_type = defaults.account_type
        if raw_account_type:
            parsed = AccountType.parse(raw_account_type)
            if parsed is None:
                logger.warning(
                    f"Unknown BROKER_ACCOUNT_TYPE '{raw_account_type}'; "
                    f"using {defaults.account_type.value}"
                )
            else:
                account_type = parsed

        return cls(
            snapshot_file=snapshot_file,
            account_type=account_type,
            retry_max_attempts=cls._read_int(
                "BROKER_RETRY_MAX_ATTEMPTS",
                defaults.retry_max_attempts,
                logger,
            ),
            retry_backoff_base=cls._read_float(
                "BROKER_RETRY_BACKOFF_BASE",
                defaults.retry_backoff_base,
                logger,
            ),
            retry_max_delay=cls._read_float(
                "BROKER_RETRY_MAX_DELAY",
                defaults.retry_max_delay,
                logger,
            ),
            max_workers=cls._read_int(
                "BROKER_MAX_WORKERS",
                defaults.max_workers,
                logger,
            ),
            verbose=cls._read_bool("REPORT_VERBOSE", defaults.verbose, logger),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Resolve the snapshot path, warning when it does not exist."""
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Broker snapshot does not exist at {path}")
        return path

    @staticmethod
    def _default_snapshot_file(logger) -> Path | None:
        """Return a default snapshot path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single snapshot is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set BROKER_SNAPSHOT_FILE to choose one."
            )
        return None

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name} '{raw}'; using {default}")
            return default
        if value < 1:
            logger.warning(f"{name} must be positive; using {default}")
            return default
        return value

    @staticmethod
    def _read_float(name: str, default: float, logger) -> float:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name} '{raw}'; using {default}")
            return default
        if value < 0:
            logger.warning(f"{name} must not be negative; using {default}")
            return default
        return value

    @staticmethod
    def _read_bool(name: str, default: bool, logger) -> bool:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        cleaned = raw.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
        logger.warning(f"Invalid {name} '{raw}'; using {default}")
        return default


__all__ = ["ReportSettings"]
