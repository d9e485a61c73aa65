"""Domain validation helpers for transaction entry."""

from decimal import Decimal

from src.domain.constants import SPLIT_TOLERANCE
from src.domain.errors import InvalidTransactionError, SplitMismatchError
from src.domain.models.accounts import Account
from src.domain.models.transactions import Transaction, TransactionType
from src.utils.decimal_utils import coerce_decimal


def validate_splits(transaction: Transaction) -> None:
    """Reject splits whose total differs from the transaction amount.

    Args:
        transaction: Transaction carrying optional splits.

    Raises:
        SplitMismatchError: When the difference exceeds the tolerance.
    """
    if not transaction.splits:
        return
    split_total = sum(
        (coerce_decimal(split.amount) for split in transaction.splits),
        Decimal("0"),
    )
    amount = coerce_decimal(transaction.amount)
    if abs(split_total - amount) > SPLIT_TOLERANCE:
        raise SplitMismatchError(expected=amount, actual=split_total)


def validate_transaction(
    transaction: Transaction,
    accounts: dict[int, Account],
) -> None:
    """Validate a transaction before it enters the ledger.

    Args:
        transaction: Transaction submitted by an entry form.
        accounts: Known accounts keyed by id.

    Raises:
        InvalidTransactionError: On structural violations.
        SplitMismatchError: When splits do not add up.
    """
    if coerce_decimal(transaction.amount) < 0:
        raise InvalidTransactionError("Amount must not be negative")
    if coerce_decimal(transaction.fee) < 0:
        raise InvalidTransactionError("Fee must not be negative")
    if transaction.source_account_id not in accounts:
        raise InvalidTransactionError(
            f"Unknown source account id={transaction.source_account_id}"
        )
    if transaction.type == TransactionType.TRANSFER:
        target = transaction.target_account_id
        if target is None:
            raise InvalidTransactionError("Transfers require a target account")
        if target not in accounts:
            raise InvalidTransactionError(
                f"Unknown target account id={target}"
            )
        if target == transaction.source_account_id:
            raise InvalidTransactionError(
                "Transfer source and target must differ"
            )
    elif transaction.target_account_id is not None:
        raise InvalidTransactionError(
            "Only transfers may reference a target account"
        )
    validate_splits(transaction)


__all__ = ["validate_splits", "validate_transaction"]
