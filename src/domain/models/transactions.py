"""Domain models for ledger transactions."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a transaction."""

    EXPENSE = "expense"
    TRANSFER = "transfer"
    INCOME = "income"


class Frequency(str, Enum):
    """Recurrence frequency of a transaction template."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class TransactionSplit:
    """Sub-allocation of a transaction amount to a category."""

    amount: Decimal
    category: str
    sub_category: str | None = None


@dataclass(frozen=True)
class Transaction:
    """A ledger transaction in the base currency.

    Attributes:
        id: Unique identifier.
        amount: Non-negative amount.
        type: Expense, transfer, or income.
        source_account_id: Account the money leaves (or enters, for income).
        category: Category label.
        date: Timestamp of the transaction.
        fee: Transfer fee charged to the source account.
        target_account_id: Receiving account, set only for transfers.
        sub_category: Optional sub-category label.
        splits: Optional category allocations summing to amount.
        note: Optional free text.
        recurrence: Frequency; anything but NONE marks a template.
    """

    id: str
    amount: Decimal
    type: TransactionType
    source_account_id: int
    category: str
    date: datetime
    fee: Decimal = Decimal("0")
    target_account_id: int | None = None
    sub_category: str | None = None
    splits: tuple[TransactionSplit, ...] = ()
    note: str | None = None
    recurrence: Frequency = Frequency.NONE

    @property
    def is_template(self) -> bool:
        """Return True when the transaction seeds recurring occurrences."""
        return self.recurrence != Frequency.NONE


__all__ = ["TransactionType", "Frequency", "TransactionSplit", "Transaction"]
