"""Domain models package."""

from .accounts import Account, AccountType, resolve_account, unknown_account
from .finance import MonthlyData, MonthlyReport, RateTable, ReconciliationResult
from .transactions import Frequency, Transaction, TransactionSplit, TransactionType

__all__ = [
    "Account",
    "AccountType",
    "resolve_account",
    "unknown_account",
    "MonthlyData",
    "MonthlyReport",
    "RateTable",
    "ReconciliationResult",
    "Frequency",
    "Transaction",
    "TransactionSplit",
    "TransactionType",
]
