"""Domain package for business rules and core models."""

from .constants import BASE_CURRENCY, DEFAULT_RATES
from .errors import (
    InvalidTransactionError,
    LedgerError,
    RatesUnavailableError,
    SplitMismatchError,
    UnsupportedCurrencyError,
)
from .models import (
    Account,
    AccountType,
    Frequency,
    MonthlyData,
    MonthlyReport,
    RateTable,
    ReconciliationResult,
    Transaction,
    TransactionSplit,
    TransactionType,
)
from .services import (
    CurrencyConverter,
    compute_breakdown,
    compute_monthly_comparison,
    next_due_date,
    plan_recurring_occurrences,
    total_expense,
    total_income,
)

__all__ = [
    "BASE_CURRENCY",
    "DEFAULT_RATES",
    "InvalidTransactionError",
    "LedgerError",
    "RatesUnavailableError",
    "SplitMismatchError",
    "UnsupportedCurrencyError",
    "Account",
    "AccountType",
    "Frequency",
    "MonthlyData",
    "MonthlyReport",
    "RateTable",
    "ReconciliationResult",
    "Transaction",
    "TransactionSplit",
    "TransactionType",
    "CurrencyConverter",
    "compute_breakdown",
    "compute_monthly_comparison",
    "next_due_date",
    "plan_recurring_occurrences",
    "total_expense",
    "total_income",
]
