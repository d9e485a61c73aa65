"""Tests for the SQLAlchemy rate cache against SQLite."""

from datetime import datetime

from sqlalchemy import create_engine

from src.domain.models import RateTable
from src.infrastructure.rates_store import SqlAlchemyRatesStore


class _SqliteDbPort:
    def __init__(self, path) -> None:
        self._engine = create_engine(f"sqlite:///{path}", future=True)

    def get_ledger_engine(self):
        return self._engine


def _store(tmp_path) -> SqlAlchemyRatesStore:
    store = SqlAlchemyRatesStore(_SqliteDbPort(tmp_path / "rates.db"))
    store.ensure_schema()
    return store


def test_empty_store_returns_empty_table(tmp_path) -> None:
    """A fresh cache has no rates and no update time."""
    assert _store(tmp_path).load_rate_table() == RateTable()


def test_saved_rates_are_loaded_with_update_time(tmp_path) -> None:
    """Saving twice keeps the latest values per currency."""
    store = _store(tmp_path)
    store.save_rate_table(
        RateTable({"USD": 0.012, "EUR": 0.011}, datetime(2024, 1, 1, 10, 0))
    )
    store.save_rate_table(RateTable({"USD": 0.013}, datetime(2024, 1, 2, 10, 0)))

    table = store.load_rate_table()

    assert table.rates == {"EUR": 0.011, "USD": 0.013}
    assert table.last_updated == datetime(2024, 1, 2, 10, 0)


def test_empty_table_is_not_saved(tmp_path) -> None:
    """Saving nothing leaves the cache untouched."""
    store = _store(tmp_path)

    store.save_rate_table(RateTable({}, datetime(2024, 1, 1)))

    assert store.load_rate_table().last_updated is None
