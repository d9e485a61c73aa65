"""CLI adapter printing the current month's totals and breakdown."""

from datetime import date

from src.application.use_cases.get_monthly_report import GetMonthlyReportUseCase
from src.infrastructure.container import (
    build_currency_converter,
    build_ledger_repository,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print the monthly report in the display currency."""
    logger = get_app_logger()
    today = date.today()
    converter = build_currency_converter()
    use_case = GetMonthlyReportUseCase(
        repository=build_ledger_repository(),
        logger=logger,
    )

    report = use_case.execute(
        today.year,
        today.month,
        today,
        converter=converter,
    )

    print(f"Report {report.year}-{report.month:02d} ({report.currency_code})")
    print(f"Income:  {converter.format_display(report.income)}")
    print(f"Expense: {converter.format_display(report.expense)}")
    if not report.category_breakdown:
        print("No expenses this month.")
        return
    print("Category breakdown:")
    for key, amount in report.category_breakdown.items():
        print(f"  {key}: {converter.format_display(amount)}")


if __name__ == "__main__":  # pragma: no cover
    main()
