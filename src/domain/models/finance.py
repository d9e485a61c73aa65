"""Domain models for financial aggregates and rates."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from src.domain.models.accounts import Account
from src.domain.models.transactions import Transaction


@dataclass
class MonthlyData:
    """Income and expense running totals for one calendar month.

    Attributes:
        month: Short month label (e.g. "Mar").
        year: Calendar year of the bucket.
        month_number: Calendar month of the bucket (1-12).
        income: Accumulated income.
        expense: Accumulated expense, transfer fees included.
    """

    month: str
    year: int
    month_number: int
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")


@dataclass(frozen=True)
class RateTable:
    """Exchange rates relative to the base currency."""

    rates: dict[str, float] = field(default_factory=dict)
    last_updated: datetime | None = None


@dataclass(frozen=True)
class ReconciliationResult:
    """Outcome of a recurring reconciliation pass."""

    generated: list[Transaction] = field(default_factory=list)
    accounts: list[Account] = field(default_factory=list)

    @property
    def generated_count(self) -> int:
        """Return the number of generated occurrences."""
        return len(self.generated)


@dataclass(frozen=True)
class MonthlyReport:
    """Totals and breakdowns for a month, in the display currency."""

    year: int
    month: int
    currency_code: str
    income: Decimal
    expense: Decimal
    category_breakdown: dict[str, Decimal]
    account_type_breakdown: dict[str, Decimal]
    comparison: list[MonthlyData]

    @property
    def net(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


__all__ = [
    "MonthlyData",
    "RateTable",
    "ReconciliationResult",
    "MonthlyReport",
]
