"""Use case generating missing occurrences of recurring transactions.

A pass loads the latest ledger state, plans every missing occurrence
due on or before "today" with the pure reconciler, and commits the
occurrences together with the affected account balances in a single
batch so a failed write leaves nothing behind.
"""

from collections.abc import Callable
from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import ReconciliationResult
from src.domain.services.reconciliation import (
    new_transaction_id,
    plan_recurring_occurrences,
)
from src.infrastructure.logging.logger import get_app_logger


class ReconcileRecurringUseCase:
    """Generate and commit due occurrences of recurring templates."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] = new_transaction_id,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger reads and batch commits.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Callable producing unique transaction ids.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory

    def execute(self, today: date) -> ReconciliationResult:
        """Run one reconciliation pass.

        Args:
            today: Inclusive cutoff for due dates.

        Returns:
            ReconciliationResult: Committed occurrences and accounts.
        """
        transactions = self._repository.fetch_transactions()
        accounts = self._repository.fetch_accounts()
        result = plan_recurring_occurrences(
            transactions,
            accounts,
            today,
            logger=self._logger,
            id_factory=self._id_factory,
        )
        if not result.generated:
            return result

        self._repository.save_batch(result.generated, result.accounts)
        self._logger.info(
            f"Committed {result.generated_count} recurring occurrences "
            f"and {len(result.accounts)} account balances"
        )
        return result


class RecurringCheckSession:
    """Session-scoped gate running reconciliation at most once.

    The gate moves from not-yet-checked to checked after the first
    successful pass and never resets; re-observing the ledger afterwards
    does not trigger another scan. A failed pass leaves the gate open so
    the next data load can retry.
    """

    def __init__(self, use_case: ReconcileRecurringUseCase, logger=None) -> None:
        self._use_case = use_case
        self._logger = logger or get_app_logger()
        self._checked = False

    @property
    def checked(self) -> bool:
        return self._checked

    def run(self, today: date) -> ReconciliationResult:
        """Reconcile once per session.

        Args:
            today: Inclusive cutoff for due dates.

        Returns:
            ReconciliationResult: The pass result, or an empty result when
            the session has already been checked.
        """
        if self._checked:
            self._logger.debug("Recurring transactions already checked")
            return ReconciliationResult()
        result = self._use_case.execute(today)
        self._checked = True
        return result


__all__ = ["ReconcileRecurringUseCase", "RecurringCheckSession"]
