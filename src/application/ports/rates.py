"""Ports for refreshing and persisting currency rates."""

from typing import Protocol

from src.domain.models import RateTable


class RatesSourcePort(Protocol):
    """Port exposing an external exchange rate provider."""

    def fetch_rates(self, base: str, symbols: list[str]) -> dict[str, float]:
        """Return rates for ``symbols`` relative to ``base``.

        Raises:
            RatesUnavailableError: When the provider cannot answer.
        """


class RatesStorePort(Protocol):
    """Port exposing the locally cached rate table."""

    def load_rate_table(self) -> RateTable:
        """Return the cached rate table, empty when nothing is stored."""

    def save_rate_table(self, rate_table: RateTable) -> None:
        """Persist the rate table."""


__all__ = ["RatesSourcePort", "RatesStorePort"]
