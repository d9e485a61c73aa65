"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
import os

import dotenv

from src.domain.constants import BASE_CURRENCY
from src.infrastructure.logging.logger import get_app_logger


DEFAULT_RATES_API_URL = "https://api.frankfurter.app/latest"
DEFAULT_RATES_TIMEOUT_SECONDS = 10.0
DEFAULT_RATES_SYMBOLS = ("USD", "EUR")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger adapters.

    Attributes:
        display_currency: Currency selected for display and entry.
        rates_api_url: Endpoint of the exchange rate provider.
        rates_timeout_seconds: HTTP timeout for rate refreshes.
        rates_symbols: Currencies requested from the rate provider.
    """

    display_currency: str = BASE_CURRENCY
    rates_api_url: str = DEFAULT_RATES_API_URL
    rates_timeout_seconds: float = DEFAULT_RATES_TIMEOUT_SECONDS
    rates_symbols: tuple[str, ...] = field(default=DEFAULT_RATES_SYMBOLS)

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        display_currency = (
            os.getenv("DISPLAY_CURRENCY", BASE_CURRENCY).strip().upper()
            or BASE_CURRENCY
        )
        rates_api_url = (
            os.getenv("RATES_API_URL", DEFAULT_RATES_API_URL).strip()
            or DEFAULT_RATES_API_URL
        )
        return cls(
            display_currency=display_currency,
            rates_api_url=rates_api_url,
            rates_timeout_seconds=cls._parse_timeout(
                os.getenv("RATES_TIMEOUT_SECONDS"),
                logger=logger,
            ),
            rates_symbols=cls._parse_symbols(os.getenv("RATES_SYMBOLS")),
        )

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        """Parse the rate refresh timeout.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if not raw_value:
            return DEFAULT_RATES_TIMEOUT_SECONDS
        try:
            timeout = float(raw_value)
        except ValueError:
            timeout = 0.0
        if timeout <= 0:
            logger.warning(
                f"Invalid RATES_TIMEOUT_SECONDS '{raw_value}', "
                f"using {DEFAULT_RATES_TIMEOUT_SECONDS}"
            )
            return DEFAULT_RATES_TIMEOUT_SECONDS
        return timeout

    @staticmethod
    def _parse_symbols(raw_value: str | None) -> tuple[str, ...]:
        if not raw_value:
            return DEFAULT_RATES_SYMBOLS
        symbols = tuple(
            symbol.strip().upper()
            for symbol in raw_value.split(",")
            if symbol.strip()
        )
        return symbols or DEFAULT_RATES_SYMBOLS


__all__ = ["LedgerSettings"]
