"""Composition root for wiring infrastructure adapters."""

from src.application.ports.codec import FieldCodecPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.rates import RatesSourcePort, RatesStorePort
from src.domain.services.fx import CurrencyConverter
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.rates_client import FrankfurterRatesClient
from src.infrastructure.rates_store import SqlAlchemyRatesStore
from src.infrastructure.serialization import LedgerSerializer
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    codec: FieldCodecPort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository with its schema in place."""
    resolved_db = db_port or build_database_adapter()
    repository = SqlAlchemyLedgerRepository(
        resolved_db,
        serializer=LedgerSerializer(codec),
    )
    repository.ensure_schema()
    return repository


def build_rates_store(
    db_port: DatabaseEnginePort | None = None,
) -> RatesStorePort:
    """Return the rate cache with its schema in place."""
    resolved_db = db_port or build_database_adapter()
    store = SqlAlchemyRatesStore(resolved_db)
    store.ensure_schema()
    return store


def build_rates_source(
    settings: LedgerSettings | None = None,
) -> RatesSourcePort:
    """Return the configured HTTP rate source."""
    resolved_settings = settings or LedgerSettings.from_env()
    return FrankfurterRatesClient(
        base_url=resolved_settings.rates_api_url,
        timeout=resolved_settings.rates_timeout_seconds,
    )


def build_currency_converter(
    rates_store: RatesStorePort | None = None,
    settings: LedgerSettings | None = None,
) -> CurrencyConverter:
    """Return a converter for the configured display currency."""
    resolved_settings = settings or LedgerSettings.from_env()
    resolved_store = rates_store or build_rates_store()
    return CurrencyConverter(
        resolved_store.load_rate_table(),
        resolved_settings.display_currency,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_rates_store",
    "build_rates_source",
    "build_currency_converter",
]
