"""Domain services package."""

from .aggregation import (
    category_key,
    compute_breakdown,
    compute_monthly_comparison,
    expense_contribution,
    filter_by_month,
    sort_breakdown,
    total_expense,
    total_income,
)
from .balances import (
    apply_transaction,
    balance_deltas,
    changed_accounts,
    replace_transaction,
    revert_transaction,
)
from .categories import (
    category_choices,
    default_categories,
    is_default_category,
)
from .fx import CurrencyConverter, format_last_updated, resolve_rate
from .reconciliation import (
    build_occurrence,
    new_transaction_id,
    occurrence_exists,
    plan_recurring_occurrences,
)
from .recurrence import clamp_day_to_month, iter_due_dates, next_due_date
from .validation import validate_splits, validate_transaction

__all__ = [
    "category_key",
    "compute_breakdown",
    "compute_monthly_comparison",
    "expense_contribution",
    "filter_by_month",
    "sort_breakdown",
    "total_expense",
    "total_income",
    "category_choices",
    "default_categories",
    "is_default_category",
    "apply_transaction",
    "balance_deltas",
    "changed_accounts",
    "replace_transaction",
    "revert_transaction",
    "CurrencyConverter",
    "format_last_updated",
    "resolve_rate",
    "build_occurrence",
    "new_transaction_id",
    "occurrence_exists",
    "plan_recurring_occurrences",
    "clamp_day_to_month",
    "iter_due_dates",
    "next_due_date",
    "validate_splits",
    "validate_transaction",
]
