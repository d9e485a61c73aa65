"""Domain services for income, expense and breakdown aggregates."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import MONTHLY_COMPARISON_MONTHS, TRANSFER_FEES_KEY
from src.domain.models.accounts import Account, resolve_account
from src.domain.models.finance import MonthlyData
from src.domain.models.transactions import Transaction, TransactionType
from src.utils.decimal_utils import coerce_decimal


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    """Return the sum of income amounts."""
    total = Decimal("0")
    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            total += coerce_decimal(txn.amount)
    return total


def total_expense(transactions: Iterable[Transaction]) -> Decimal:
    """Return expense amounts plus transfer fees."""
    total = Decimal("0")
    for txn in transactions:
        total += expense_contribution(txn)
    return total


def expense_contribution(transaction: Transaction) -> Decimal:
    """Return the expense-equivalent cost of a single transaction.

    Expenses count their amount, transfers count their fee, income
    counts nothing.
    """
    if transaction.type == TransactionType.EXPENSE:
        return coerce_decimal(transaction.amount)
    if transaction.type == TransactionType.TRANSFER:
        return coerce_decimal(transaction.fee)
    return Decimal("0")


def category_key(category: str, sub_category: str | None) -> str:
    """Return the breakdown key for a category and optional sub-category."""
    if sub_category:
        return f"{category} - {sub_category}"
    return category


def compute_breakdown(
    transactions: Iterable[Transaction],
    accounts: dict[int, Account] | None = None,
    *,
    by_category: bool = True,
) -> dict[str, Decimal]:
    """Compute expense totals keyed by category or account type.

    By category, split expenses contribute each split under its own key
    and transfer fees accumulate under "Transfer Fees". By account type,
    each expense amount or transfer fee goes under the capitalized type of
    its source account; unknown accounts resolve to the cash placeholder.

    Args:
        transactions: Transactions to aggregate; not mutated.
        accounts: Accounts keyed by id, used for account type grouping.
        by_category: Group by category when True, else by account type.

    Returns:
        dict[str, Decimal]: Cumulative amount per key, unordered.
    """
    resolved_accounts = accounts or {}
    totals: dict[str, Decimal] = {}

    def _add(key: str, amount: Decimal) -> None:
        totals[key] = totals.get(key, Decimal("0")) + amount

    for txn in transactions:
        if txn.type == TransactionType.EXPENSE:
            if not by_category:
                account = resolve_account(
                    resolved_accounts,
                    txn.source_account_id,
                )
                _add(account.type.label, coerce_decimal(txn.amount))
            elif txn.splits:
                for split in txn.splits:
                    _add(
                        category_key(split.category, split.sub_category),
                        coerce_decimal(split.amount),
                    )
            else:
                _add(
                    category_key(txn.category, txn.sub_category),
                    coerce_decimal(txn.amount),
                )
        elif txn.type == TransactionType.TRANSFER:
            fee = coerce_decimal(txn.fee)
            if fee <= 0:
                continue
            if by_category:
                _add(TRANSFER_FEES_KEY, fee)
            else:
                account = resolve_account(
                    resolved_accounts,
                    txn.source_account_id,
                )
                _add(account.type.label, fee)
    return totals


def sort_breakdown(breakdown: dict[str, Decimal]) -> dict[str, Decimal]:
    """Return the breakdown ordered by amount descending, then key."""
    return dict(
        sorted(breakdown.items(), key=lambda item: (-item[1], item[0]))
    )


def filter_by_month(
    transactions: Iterable[Transaction],
    year: int,
    month: int,
) -> list[Transaction]:
    """Return transactions dated within the given calendar month."""
    return [
        txn
        for txn in transactions
        if txn.date.year == year and txn.date.month == month
    ]


def compute_monthly_comparison(
    transactions: Iterable[Transaction],
    today: date,
    months: int = MONTHLY_COMPARISON_MONTHS,
) -> list[MonthlyData]:
    """Accumulate income and expense for the months ending at ``today``.

    Args:
        transactions: Transactions to aggregate; not mutated.
        today: Any date inside the most recent month.
        months: Number of buckets, oldest first.

    Returns:
        list[MonthlyData]: One bucket per month in chronological order.
    """
    buckets: list[MonthlyData] = []
    index: dict[tuple[int, int], MonthlyData] = {}
    for offset in range(months - 1, -1, -1):
        year, month = _shift_month(today.year, today.month, -offset)
        bucket = MonthlyData(
            month=datetime(year, month, 1).strftime("%b"),
            year=year,
            month_number=month,
        )
        buckets.append(bucket)
        index[(year, month)] = bucket

    for txn in transactions:
        bucket = index.get((txn.date.year, txn.date.month))
        if bucket is None:
            continue
        if txn.type == TransactionType.INCOME:
            bucket.income += coerce_decimal(txn.amount)
        else:
            bucket.expense += expense_contribution(txn)
    return buckets


def _shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    total = year * 12 + (month - 1) + offset
    return total // 12, total % 12 + 1


__all__ = [
    "total_income",
    "total_expense",
    "expense_contribution",
    "category_key",
    "compute_breakdown",
    "sort_breakdown",
    "filter_by_month",
    "compute_monthly_comparison",
]
