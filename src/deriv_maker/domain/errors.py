"""Exception hierarchy for quoting errors.

All errors inherit from TradingError, allowing the caller to catch
broad categories of errors. Each error type includes relevant context for
debugging and logging.

Error categories:
- ConfigurationError: Invalid or unreadable risk parameters
- StaleDataError: Market data older than the configured delay
- PricingError: Arithmetic fault inside the pricing pipeline
"""

from __future__ import annotations

from typing import Any


class TradingError(Exception):
    """Base exception for all trading-related errors.

    All errors in the quoting core inherit from this class, allowing
    code to catch broad categories of errors when needed.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize with message and optional context.

        Args:
            message: Human-readable error description
            context: Additional structured data for logging/debugging
        """
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(TradingError):
    """Invalid configuration.

    Raised when:
    - Configuration file is missing or malformed
    - Required configuration values are missing
    - Configuration values fail validation (fractions outside [0, 1],
      non-positive leverage, order density below one)
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with field information.

        Args:
            message: Human-readable error description
            field: Name of the configuration field with the issue
            context: Additional structured data
        """
        super().__init__(message, context)
        self.field = field


class StaleDataError(TradingError):
    """Market data is stale.

    Describes a snapshot that is older than the configured
    max_market_data_delay. Quoting off stale data is never done.
    """

    def __init__(
        self,
        message: str,
        age_seconds: float | None = None,
        max_age_seconds: float | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with data age information.

        Args:
            message: Human-readable error description
            age_seconds: How old the data actually is
            max_age_seconds: Maximum acceptable age
            context: Additional structured data
        """
        super().__init__(message, context)
        self.age_seconds = age_seconds
        self.max_age_seconds = max_age_seconds


class PricingError(TradingError):
    """Arithmetic fault while computing a quote plan.

    Raised when decimal arithmetic overflows or produces an invalid
    result. This points at a configuration or upstream data bug and is
    fatal for the invocation: no plan is returned.
    """

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the pipeline stage that faulted.

        Args:
            message: Human-readable error description
            stage: Name of the pipeline stage (e.g. "reservation_price")
            context: Additional structured data
        """
        super().__init__(message, context)
        self.stage = stage
