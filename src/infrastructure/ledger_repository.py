"""SQLAlchemy-backed repository for ledger accounts and transactions."""

from collections.abc import Iterable

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Account, Transaction, TransactionSplit
from src.infrastructure.serialization import LedgerSerializer


CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    balance TEXT NOT NULL,
    type INTEGER NOT NULL,
    created_date BIGINT NOT NULL
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    amount TEXT NOT NULL,
    fee TEXT NOT NULL,
    type INTEGER NOT NULL,
    source_account_id INTEGER NOT NULL,
    target_account_id INTEGER,
    category TEXT NOT NULL,
    sub_category TEXT,
    date BIGINT NOT NULL,
    note TEXT,
    recurrence INTEGER NOT NULL DEFAULT 0
)
"""

CREATE_SPLITS_SQL = """
CREATE TABLE IF NOT EXISTS transaction_splits (
    transaction_id TEXT NOT NULL,
    position INTEGER NOT NULL,
    amount TEXT NOT NULL,
    category TEXT NOT NULL,
    sub_category TEXT,
    PRIMARY KEY (transaction_id, position)
)
"""

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, name, balance, type, created_date
    FROM accounts
    ORDER BY id
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, amount, fee, type, source_account_id, target_account_id,
           category, sub_category, date, note, recurrence
    FROM transactions
    ORDER BY date DESC, id
    """
)

SELECT_SPLITS_SQL = text(
    """
    SELECT transaction_id, position, amount, category, sub_category
    FROM transaction_splits
    ORDER BY transaction_id, position
    """
)

UPSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (id, name, balance, type, created_date)
    VALUES (:id, :name, :balance, :type, :created_date)
    ON CONFLICT (id) DO UPDATE SET
        name = excluded.name,
        balance = excluded.balance,
        type = excluded.type,
        created_date = excluded.created_date
    """
)

UPSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        id, amount, fee, type, source_account_id, target_account_id,
        category, sub_category, date, note, recurrence
    )
    VALUES (
        :id, :amount, :fee, :type, :source_account_id, :target_account_id,
        :category, :sub_category, :date, :note, :recurrence
    )
    ON CONFLICT (id) DO UPDATE SET
        amount = excluded.amount,
        fee = excluded.fee,
        type = excluded.type,
        source_account_id = excluded.source_account_id,
        target_account_id = excluded.target_account_id,
        category = excluded.category,
        sub_category = excluded.sub_category,
        date = excluded.date,
        note = excluded.note,
        recurrence = excluded.recurrence
    """
)

DELETE_TRANSACTION_SQL = text("DELETE FROM transactions WHERE id = :id")

DELETE_SPLITS_SQL = text(
    "DELETE FROM transaction_splits WHERE transaction_id = :id"
)

INSERT_SPLIT_SQL = text(
    """
    INSERT INTO transaction_splits (
        transaction_id, position, amount, category, sub_category
    )
    VALUES (:transaction_id, :position, :amount, :category, :sub_category)
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Ledger repository backed by SQLAlchemy."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        serializer: LedgerSerializer | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            serializer: Record serializer; plaintext fields when omitted.
        """
        self._db_port = db_port
        self._serializer = serializer or LedgerSerializer()

    def ensure_schema(self) -> None:
        """Create the ledger tables if they do not exist."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ACCOUNTS_SQL)
            conn.exec_driver_sql(CREATE_TRANSACTIONS_SQL)
            conn.exec_driver_sql(CREATE_SPLITS_SQL)

    def fetch_accounts(self) -> dict[int, Account]:
        """Return all accounts keyed by id."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
        accounts = [
            self._serializer.record_to_account(row._mapping) for row in rows
        ]
        return {account.id: account for account in accounts}

    def fetch_transactions(self) -> list[Transaction]:
        """Return all transactions, newest first, with their splits."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_TRANSACTIONS_SQL).all()
            split_rows = conn.execute(SELECT_SPLITS_SQL).all()

        splits: dict[str, list[TransactionSplit]] = {}
        for row in split_rows:
            splits.setdefault(row.transaction_id, []).append(
                self._serializer.record_to_split(row._mapping)
            )
        return [
            self._serializer.record_to_transaction(
                row._mapping,
                splits.get(row.id),
            )
            for row in rows
        ]

    def save_batch(
        self,
        transactions: Iterable[Transaction],
        accounts: Iterable[Account],
        deleted_transaction_ids: Iterable[str] = (),
    ) -> None:
        """Upsert transactions and accounts and delete ids in one commit.

        Args:
            transactions: Transactions to insert or replace.
            accounts: Accounts to insert or replace.
            deleted_transaction_ids: Ids of transactions to remove.
        """
        transactions = list(transactions)
        account_payload = [
            self._serializer.account_to_record(account) for account in accounts
        ]
        transaction_payload = [
            self._serializer.transaction_to_record(txn) for txn in transactions
        ]
        split_payload = [
            record
            for txn in transactions
            for record in self._serializer.split_to_records(txn)
        ]
        touched_ids = [{"id": txn.id} for txn in transactions]
        deleted_ids = [{"id": txn_id} for txn_id in deleted_transaction_ids]

        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            if deleted_ids:
                conn.execute(DELETE_SPLITS_SQL, deleted_ids)
                conn.execute(DELETE_TRANSACTION_SQL, deleted_ids)
            if touched_ids:
                conn.execute(DELETE_SPLITS_SQL, touched_ids)
            if transaction_payload:
                conn.execute(UPSERT_TRANSACTION_SQL, transaction_payload)
            if split_payload:
                conn.execute(INSERT_SPLIT_SQL, split_payload)
            if account_payload:
                conn.execute(UPSERT_ACCOUNT_SQL, account_payload)


__all__ = ["SqlAlchemyLedgerRepository"]
