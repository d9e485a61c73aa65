"""CLI adapter to generate due occurrences of recurring transactions.

This module wires the ReconcileRecurringUseCase to the concrete ledger
repository and provides a simple command-line entry point for running one
reconciliation pass against today's date.
"""

from datetime import date

from src.application.use_cases.reconcile_recurring import (
    ReconcileRecurringUseCase,
    RecurringCheckSession,
)
from src.infrastructure.container import build_ledger_repository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run one recurring reconciliation pass."""
    logger = get_app_logger()
    repository = build_ledger_repository()
    use_case = ReconcileRecurringUseCase(repository=repository, logger=logger)
    session = RecurringCheckSession(use_case, logger=logger)

    result = session.run(date.today())

    print(
        f"Generated {result.generated_count} recurring transactions "
        f"and updated {len(result.accounts)} accounts."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
