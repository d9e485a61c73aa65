"""Balance effects of applying and reverting transactions."""

from dataclasses import replace
from decimal import Decimal
from logging import Logger

from src.domain.models.accounts import Account
from src.domain.models.transactions import Transaction, TransactionType
from src.utils.decimal_utils import coerce_decimal


def balance_deltas(transaction: Transaction) -> dict[int, Decimal]:
    """Return the forward balance change per account id.

    Args:
        transaction: Transaction whose effect is computed.

    Returns:
        dict[int, Decimal]: Signed delta keyed by account id.
    """
    amount = coerce_decimal(transaction.amount)
    deltas: dict[int, Decimal] = {}
    if transaction.type == TransactionType.EXPENSE:
        deltas[transaction.source_account_id] = -amount
    elif transaction.type == TransactionType.INCOME:
        deltas[transaction.source_account_id] = amount
    elif transaction.type == TransactionType.TRANSFER:
        fee = coerce_decimal(transaction.fee)
        deltas[transaction.source_account_id] = -(amount + fee)
        if transaction.target_account_id is not None:
            target = transaction.target_account_id
            deltas[target] = deltas.get(target, Decimal("0")) + amount
    return deltas


def _apply_deltas(
    accounts: dict[int, Account],
    deltas: dict[int, Decimal],
    sign: int,
    logger: Logger,
) -> dict[int, Account]:
    updated = dict(accounts)
    for account_id, delta in deltas.items():
        account = updated.get(account_id)
        if account is None:
            logger.warning(
                f"Skipping balance effect for unknown account id={account_id}"
            )
            continue
        updated[account_id] = replace(
            account,
            balance=coerce_decimal(account.balance) + sign * delta,
        )
    return updated


def apply_transaction(
    accounts: dict[int, Account],
    transaction: Transaction,
    *,
    logger: Logger,
) -> dict[int, Account]:
    """Return accounts with the transaction's forward effect applied.

    Args:
        accounts: Latest known accounts keyed by id; not mutated.
        transaction: Transaction to apply.
        logger: Logger used for warnings.

    Returns:
        dict[int, Account]: Updated copy of the accounts mapping.
    """
    return _apply_deltas(accounts, balance_deltas(transaction), 1, logger)


def revert_transaction(
    accounts: dict[int, Account],
    transaction: Transaction,
    *,
    logger: Logger,
) -> dict[int, Account]:
    """Return accounts with the transaction's effect negated.

    Args:
        accounts: Latest known accounts keyed by id; not mutated.
        transaction: Transaction being removed.
        logger: Logger used for warnings.

    Returns:
        dict[int, Account]: Updated copy of the accounts mapping.
    """
    return _apply_deltas(accounts, balance_deltas(transaction), -1, logger)


def replace_transaction(
    accounts: dict[int, Account],
    old: Transaction,
    new: Transaction,
    *,
    logger: Logger,
) -> dict[int, Account]:
    """Revert ``old`` then apply ``new`` against the latest balances."""
    reverted = revert_transaction(accounts, old, logger=logger)
    return apply_transaction(reverted, new, logger=logger)


def changed_accounts(
    before: dict[int, Account],
    after: dict[int, Account],
) -> list[Account]:
    """Return accounts from ``after`` whose balance differs from ``before``."""
    return [
        account
        for account_id, account in sorted(after.items())
        if before.get(account_id) is None
        or before[account_id].balance != account.balance
    ]


__all__ = [
    "balance_deltas",
    "apply_transaction",
    "revert_transaction",
    "replace_transaction",
    "changed_accounts",
]
