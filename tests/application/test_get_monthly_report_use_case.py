"""Tests for the GetMonthlyReportUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_monthly_report import GetMonthlyReportUseCase
from src.domain.models import (
    Account,
    AccountType,
    RateTable,
    Transaction,
    TransactionSplit,
    TransactionType,
)
from src.domain.services.fx import CurrencyConverter


CREATED = datetime(2024, 1, 1)


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_accounts.return_value = {
        1: Account(1, "Bank", Decimal("0"), AccountType.BANK, CREATED),
        2: Account(2, "Card", Decimal("0"), AccountType.CREDIT, CREATED),
    }
    repository.fetch_transactions.return_value = [
        Transaction(
            id="i1",
            amount=Decimal("5000"),
            type=TransactionType.INCOME,
            source_account_id=1,
            category="Salary",
            date=datetime(2024, 3, 1),
        ),
        Transaction(
            id="e1",
            amount=Decimal("300"),
            type=TransactionType.EXPENSE,
            source_account_id=2,
            category="Food",
            date=datetime(2024, 3, 5),
            splits=(
                TransactionSplit(Decimal("200"), "Food", "Groceries"),
                TransactionSplit(Decimal("100"), "Shopping"),
            ),
        ),
        Transaction(
            id="t1",
            amount=Decimal("1000"),
            fee=Decimal("20"),
            type=TransactionType.TRANSFER,
            source_account_id=1,
            target_account_id=2,
            category="Transfer",
            date=datetime(2024, 3, 9),
        ),
        Transaction(
            id="e2",
            amount=Decimal("80"),
            type=TransactionType.EXPENSE,
            source_account_id=1,
            category="Food",
            date=datetime(2024, 2, 20),
        ),
    ]
    return repository


def test_execute_builds_month_totals_and_breakdowns() -> None:
    """Only the selected month feeds totals and breakdowns."""
    use_case = GetMonthlyReportUseCase(_repository(), logger=MagicMock())

    report = use_case.execute(2024, 3, date(2024, 3, 31))

    assert report.currency_code == "INR"
    assert report.income == Decimal("5000")
    assert report.expense == Decimal("320")
    assert report.net == Decimal("4680")
    assert list(report.category_breakdown.items()) == [
        ("Food - Groceries", Decimal("200")),
        ("Shopping", Decimal("100")),
        ("Transfer Fees", Decimal("20")),
    ]
    assert report.account_type_breakdown == {
        "Credit": Decimal("300"),
        "Bank": Decimal("20"),
    }


def test_execute_includes_six_month_comparison() -> None:
    """Comparison buckets end at the reference month."""
    use_case = GetMonthlyReportUseCase(_repository(), logger=MagicMock())

    report = use_case.execute(2024, 3, date(2024, 3, 31))

    assert [bucket.month for bucket in report.comparison] == [
        "Oct",
        "Nov",
        "Dec",
        "Jan",
        "Feb",
        "Mar",
    ]
    assert report.comparison[-2].expense == Decimal("80")
    assert report.comparison[-1].income == Decimal("5000")


def test_execute_converts_to_display_currency() -> None:
    """Amounts are converted with the supplied converter."""
    converter = CurrencyConverter(RateTable(rates={"USD": 0.01}), "USD")
    use_case = GetMonthlyReportUseCase(_repository(), logger=MagicMock())

    report = use_case.execute(2024, 3, date(2024, 3, 31), converter=converter)

    assert report.currency_code == "USD"
    assert report.income == Decimal("50")
    assert report.category_breakdown["Transfer Fees"] == Decimal("0.2")
