"""Tests for transaction entry validation."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.errors import InvalidTransactionError, SplitMismatchError
from src.domain.models import (
    Account,
    AccountType,
    Transaction,
    TransactionSplit,
    TransactionType,
)
from src.domain.services.validation import validate_splits, validate_transaction


CREATED = datetime(2024, 1, 1)
ACCOUNTS = {
    1: Account(1, "Bank", Decimal("0"), AccountType.BANK, CREATED),
    2: Account(2, "Cash", Decimal("0"), AccountType.CASH, CREATED),
}


def _txn(**overrides) -> Transaction:
    values = {
        "id": "t1",
        "amount": Decimal("100"),
        "type": TransactionType.EXPENSE,
        "source_account_id": 1,
        "category": "Food",
        "date": CREATED,
    }
    values.update(overrides)
    return Transaction(**values)


def test_splits_within_tolerance_are_accepted() -> None:
    """Rounding differences up to one cent pass."""
    txn = _txn(
        splits=(
            TransactionSplit(Decimal("33.33"), "Food"),
            TransactionSplit(Decimal("33.33"), "Food", "Snacks"),
            TransactionSplit(Decimal("33.33"), "Other"),
        ),
    )

    validate_splits(txn)


def test_split_mismatch_is_rejected_with_message() -> None:
    """Split totals off by more than the tolerance raise."""
    txn = _txn(
        splits=(
            TransactionSplit(Decimal("60"), "Food"),
            TransactionSplit(Decimal("30"), "Other"),
        ),
    )

    with pytest.raises(SplitMismatchError, match="Split total must match Amount") as exc:
        validate_splits(txn)

    assert exc.value.expected == Decimal("100")
    assert exc.value.actual == Decimal("90")


def test_valid_transfer_passes() -> None:
    """A transfer between two known accounts is valid."""
    validate_transaction(
        _txn(
            type=TransactionType.TRANSFER,
            target_account_id=2,
            fee=Decimal("1"),
            category="Transfer",
        ),
        ACCOUNTS,
    )


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": Decimal("-1")},
        {"fee": Decimal("-0.5")},
        {"source_account_id": 9},
        {"target_account_id": 2},
        {"type": TransactionType.TRANSFER},
        {"type": TransactionType.TRANSFER, "target_account_id": 9},
        {"type": TransactionType.TRANSFER, "target_account_id": 1},
    ],
)
def test_structural_violations_are_rejected(overrides) -> None:
    """Entry rules on amounts and account references are enforced."""
    with pytest.raises(InvalidTransactionError):
        validate_transaction(_txn(**overrides), ACCOUNTS)
