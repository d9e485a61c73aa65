"""Tests for the ReconcileRecurringUseCase and its session gate."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.reconcile_recurring import (
    ReconcileRecurringUseCase,
    RecurringCheckSession,
)
from src.domain.models import (
    Account,
    AccountType,
    Frequency,
    Transaction,
    TransactionType,
)


class InMemoryLedger:
    """Ledger repository keeping committed state in memory."""

    def __init__(self, transactions, accounts) -> None:
        self.transactions = {txn.id: txn for txn in transactions}
        self.accounts = dict(accounts)
        self.batches = []
        self.fail_next_save = False

    def fetch_accounts(self):
        return dict(self.accounts)

    def fetch_transactions(self):
        return sorted(
            self.transactions.values(),
            key=lambda txn: txn.date,
            reverse=True,
        )

    def save_batch(self, transactions, accounts, deleted_transaction_ids=()):
        if self.fail_next_save:
            self.fail_next_save = False
            raise RuntimeError("store unreachable")
        transactions = list(transactions)
        accounts = list(accounts)
        self.batches.append((transactions, accounts))
        for txn_id in deleted_transaction_ids:
            self.transactions.pop(txn_id, None)
        for txn in transactions:
            self.transactions[txn.id] = txn
        for account in accounts:
            self.accounts[account.id] = account


def _ledger() -> InMemoryLedger:
    template = Transaction(
        id="orig_1",
        amount=Decimal("500"),
        type=TransactionType.EXPENSE,
        source_account_id=1,
        category="Rent",
        date=datetime(2023, 1, 15),
        recurrence=Frequency.MONTHLY,
    )
    account = Account(
        1,
        "Bank",
        Decimal("2000"),
        AccountType.BANK,
        datetime(2022, 1, 1),
    )
    return InMemoryLedger([template], {1: account})


def test_execute_commits_occurrences_and_balances_in_one_batch() -> None:
    """Generated occurrences and balances are saved together."""
    ledger = _ledger()
    use_case = ReconcileRecurringUseCase(repository=ledger, logger=MagicMock())

    result = use_case.execute(date(2023, 3, 20))

    assert result.generated_count == 2
    assert len(ledger.batches) == 1
    saved_transactions, saved_accounts = ledger.batches[0]
    assert [txn.date for txn in saved_transactions] == [
        datetime(2023, 2, 15),
        datetime(2023, 3, 15),
    ]
    assert [(a.id, a.balance) for a in saved_accounts] == [(1, Decimal("1000"))]
    assert ledger.accounts[1].balance == Decimal("1000")


def test_execute_twice_is_idempotent() -> None:
    """A second pass against the same day generates nothing."""
    ledger = _ledger()
    use_case = ReconcileRecurringUseCase(repository=ledger, logger=MagicMock())

    use_case.execute(date(2023, 3, 20))
    second = use_case.execute(date(2023, 3, 20))

    assert second.generated == []
    assert len(ledger.batches) == 1
    assert len(ledger.transactions) == 3
    assert ledger.accounts[1].balance == Decimal("1000")


def test_failed_commit_leaves_ledger_untouched() -> None:
    """A failed batch write applies neither occurrences nor balances."""
    ledger = _ledger()
    ledger.fail_next_save = True
    use_case = ReconcileRecurringUseCase(repository=ledger, logger=MagicMock())

    with pytest.raises(RuntimeError):
        use_case.execute(date(2023, 3, 20))

    assert len(ledger.transactions) == 1
    assert ledger.accounts[1].balance == Decimal("2000")


def test_execute_skips_commit_when_nothing_is_due() -> None:
    """No batch is written when no occurrence is missing."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = []
    repository.fetch_accounts.return_value = {}
    use_case = ReconcileRecurringUseCase(repository=repository, logger=MagicMock())

    result = use_case.execute(date(2024, 1, 1))

    assert result.generated == []
    repository.save_batch.assert_not_called()


def test_session_runs_reconciliation_only_once() -> None:
    """Re-observing the ledger after the first pass does not rescan."""
    use_case = MagicMock()
    use_case.execute.return_value = MagicMock(generated=["x"])
    session = RecurringCheckSession(use_case, logger=MagicMock())

    assert session.checked is False
    session.run(date(2024, 1, 1))
    second = session.run(date(2024, 1, 1))

    assert session.checked is True
    use_case.execute.assert_called_once_with(date(2024, 1, 1))
    assert second.generated == []


def test_session_stays_open_after_failure() -> None:
    """A failed pass can be retried on the next data load."""
    ledger = _ledger()
    ledger.fail_next_save = True
    use_case = ReconcileRecurringUseCase(repository=ledger, logger=MagicMock())
    session = RecurringCheckSession(use_case, logger=MagicMock())

    with pytest.raises(RuntimeError):
        session.run(date(2023, 3, 20))
    assert session.checked is False

    result = session.run(date(2023, 3, 20))

    assert result.generated_count == 2
    assert session.checked is True
