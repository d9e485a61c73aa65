"""SQLAlchemy-backed cache of exchange rates."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.rates import RatesStorePort
from src.domain.models import RateTable
from src.infrastructure.serialization import from_epoch_millis, to_epoch_millis


CREATE_RATES_SQL = """
CREATE TABLE IF NOT EXISTS currency_rates (
    code TEXT PRIMARY KEY,
    rate DOUBLE PRECISION NOT NULL,
    updated_at BIGINT NOT NULL
)
"""

SELECT_RATES_SQL = text(
    """
    SELECT code, rate, updated_at
    FROM currency_rates
    ORDER BY code
    """
)

UPSERT_RATE_SQL = text(
    """
    INSERT INTO currency_rates (code, rate, updated_at)
    VALUES (:code, :rate, :updated_at)
    ON CONFLICT (code) DO UPDATE SET
        rate = excluded.rate,
        updated_at = excluded.updated_at
    """
)


class SqlAlchemyRatesStore(RatesStorePort):
    """Rate table cache stored next to the ledger."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def ensure_schema(self) -> None:
        """Create the rates table if it does not exist."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_RATES_SQL)

    def load_rate_table(self) -> RateTable:
        """Return cached rates and the most recent update time."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_RATES_SQL).all()
        if not rows:
            return RateTable()
        return RateTable(
            rates={row.code: float(row.rate) for row in rows},
            last_updated=from_epoch_millis(max(row.updated_at for row in rows)),
        )

    def save_rate_table(self, rate_table: RateTable) -> None:
        """Persist every rate with the table's update time."""
        if not rate_table.rates or rate_table.last_updated is None:
            return
        updated_at = to_epoch_millis(rate_table.last_updated)
        payload = [
            {"code": code, "rate": float(rate), "updated_at": updated_at}
            for code, rate in sorted(rate_table.rates.items())
        ]
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(UPSERT_RATE_SQL, payload)


__all__ = ["SqlAlchemyRatesStore"]
