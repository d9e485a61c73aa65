"""Port for reading and committing ledger accounts and transactions."""

from collections.abc import Iterable
from typing import Protocol

from src.domain.models import Account, Transaction


class LedgerRepositoryPort(Protocol):
    """Port exposing durable storage for accounts and transactions.

    Implementations upsert by id and must commit each batch atomically:
    either every write of a ``save_batch`` call is visible afterwards or
    none is.
    """

    def fetch_accounts(self) -> dict[int, Account]:
        """Return all accounts keyed by id."""

    def fetch_transactions(self) -> list[Transaction]:
        """Return all transactions, newest first."""

    def save_batch(
        self,
        transactions: Iterable[Transaction],
        accounts: Iterable[Account],
        deleted_transaction_ids: Iterable[str] = (),
    ) -> None:
        """Upsert transactions and accounts and delete ids in one commit."""


__all__ = ["LedgerRepositoryPort"]
