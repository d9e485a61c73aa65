"""Use case adding, editing and deleting transactions with balance effects."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import InvalidTransactionError
from src.domain.models import Transaction
from src.domain.services.balances import (
    apply_transaction,
    changed_accounts,
    replace_transaction,
    revert_transaction,
)
from src.domain.services.validation import validate_transaction
from src.infrastructure.logging.logger import get_app_logger


class RecordTransactionUseCase:
    """Record ledger changes and keep account balances consistent.

    Every operation reads the latest accounts from the repository,
    computes the new balances, and commits the transaction change and
    the balances in one batch.
    """

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger reads and batch commits.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def add(self, transaction: Transaction) -> Transaction:
        """Record a new transaction and apply its balance effect.

        Raises:
            InvalidTransactionError: On structural violations or when the
                id is already recorded.
            SplitMismatchError: When splits do not add up.
        """
        self._ensure_id_available(transaction.id)
        accounts = self._repository.fetch_accounts()
        validate_transaction(transaction, accounts)
        updated = apply_transaction(accounts, transaction, logger=self._logger)
        self._repository.save_batch(
            [transaction],
            changed_accounts(accounts, updated),
        )
        self._logger.info(f"Recorded transaction {transaction.id}")
        return transaction

    def edit(self, transaction_id: str, transaction: Transaction) -> Transaction:
        """Replace a transaction, reverting the old effect first.

        Args:
            transaction_id: Id of the transaction being edited.
            transaction: New values; the old record is removed when its
                id differs from ``transaction_id``.

        Raises:
            InvalidTransactionError: When the id is unknown, the new id
                belongs to another transaction, or values are invalid.
            SplitMismatchError: When splits do not add up.
        """
        old = self._find(transaction_id)
        if transaction.id != transaction_id:
            self._ensure_id_available(transaction.id)
        accounts = self._repository.fetch_accounts()
        validate_transaction(transaction, accounts)
        deleted = [transaction_id] if transaction.id != transaction_id else []
        updated = replace_transaction(
            accounts,
            old,
            transaction,
            logger=self._logger,
        )
        self._repository.save_batch(
            [transaction],
            changed_accounts(accounts, updated),
            deleted,
        )
        self._logger.info(f"Edited transaction {transaction_id}")
        return transaction

    def delete(self, transaction_id: str) -> Transaction:
        """Remove a transaction and revert its balance effect.

        Raises:
            InvalidTransactionError: When the id is unknown.
        """
        old = self._find(transaction_id)
        accounts = self._repository.fetch_accounts()
        updated = revert_transaction(accounts, old, logger=self._logger)
        self._repository.save_batch(
            [],
            changed_accounts(accounts, updated),
            [transaction_id],
        )
        self._logger.info(f"Deleted transaction {transaction_id}")
        return old

    def _ensure_id_available(self, transaction_id: str) -> None:
        for txn in self._repository.fetch_transactions():
            if txn.id == transaction_id:
                raise InvalidTransactionError(
                    f"Transaction id={transaction_id} already exists"
                )

    def _find(self, transaction_id: str) -> Transaction:
        for txn in self._repository.fetch_transactions():
            if txn.id == transaction_id:
                return txn
        raise InvalidTransactionError(f"Unknown transaction id={transaction_id}")


__all__ = ["RecordTransactionUseCase"]
