"""HTTP client for the Frankfurter exchange rate API."""

import requests

from src.application.ports.rates import RatesSourcePort
from src.domain.errors import RatesUnavailableError
from src.infrastructure.settings import (
    DEFAULT_RATES_API_URL,
    DEFAULT_RATES_TIMEOUT_SECONDS,
)


class FrankfurterRatesClient(RatesSourcePort):
    """Fetch latest rates from a Frankfurter-compatible endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_RATES_API_URL,
        timeout: float = DEFAULT_RATES_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Endpoint returning the latest rates.
            timeout: Request timeout in seconds.
            session: Optional requests session to reuse connections.
        """
        self._base_url = base_url
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_rates(self, base: str, symbols: list[str]) -> dict[str, float]:
        """Return rates for ``symbols`` relative to ``base``.

        Args:
            base: Base currency code.
            symbols: Currency codes to request.

        Returns:
            dict[str, float]: Positive rate per requested code.

        Raises:
            RatesUnavailableError: On network, HTTP, or payload errors.
        """
        try:
            response = self._session.get(
                self._base_url,
                params={"from": base, "to": ",".join(symbols)},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise RatesUnavailableError(
                f"Rate request to {self._base_url} failed: {exc}"
            ) from exc

        raw_rates = payload.get("rates") if isinstance(payload, dict) else None
        if not isinstance(raw_rates, dict):
            raise RatesUnavailableError("Rate response has no 'rates' object")

        rates: dict[str, float] = {}
        for code in symbols:
            value = raw_rates.get(code)
            if isinstance(value, (int, float)) and value > 0:
                rates[code] = float(value)
        if not rates:
            raise RatesUnavailableError(
                f"Rate response has no usable rates for {', '.join(symbols)}"
            )
        return rates


__all__ = ["FrankfurterRatesClient"]
