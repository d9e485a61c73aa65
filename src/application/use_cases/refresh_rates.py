"""Use case refreshing cached exchange rates."""

from datetime import datetime

from src.application.ports.rates import RatesSourcePort, RatesStorePort
from src.domain.constants import BASE_CURRENCY
from src.domain.errors import RatesUnavailableError
from src.domain.models import RateTable
from src.infrastructure.logging.logger import get_app_logger


class RefreshRatesUseCase:
    """Fetch rates from the provider and store them with a timestamp."""

    def __init__(
        self,
        source: RatesSourcePort,
        store: RatesStorePort,
        symbols: tuple[str, ...] = ("USD", "EUR"),
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            source: Port providing fresh rates.
            store: Port caching the rate table.
            symbols: Currency codes to refresh.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._source = source
        self._store = store
        self._symbols = symbols
        self._logger = logger or get_app_logger()

    def execute(self, now: datetime) -> bool:
        """Refresh rates.

        Args:
            now: Timestamp recorded as the update time.

        Returns:
            bool: True when new rates were stored, False otherwise.
        """
        try:
            rates = self._source.fetch_rates(BASE_CURRENCY, list(self._symbols))
        except RatesUnavailableError as exc:
            self._logger.error(f"Error updating rates: {exc}")
            return False

        self._store.save_rate_table(RateTable(rates=rates, last_updated=now))
        self._logger.info(
            f"Updated {len(rates)} rates relative to {BASE_CURRENCY}"
        )
        return True


__all__ = ["RefreshRatesUseCase"]
