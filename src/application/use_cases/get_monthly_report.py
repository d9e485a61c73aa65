"""Use case computing a month's totals and breakdowns for display."""

from datetime import date
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import MonthlyData, MonthlyReport
from src.domain.services.aggregation import (
    compute_breakdown,
    compute_monthly_comparison,
    filter_by_month,
    sort_breakdown,
    total_expense,
    total_income,
)
from src.domain.services.fx import CurrencyConverter
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyReportUseCase:
    """Aggregate a month of transactions in the display currency."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing ledger reads.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        year: int,
        month: int,
        today: date,
        converter: CurrencyConverter | None = None,
    ) -> MonthlyReport:
        """Return totals, sorted breakdowns and the six-month comparison.

        Args:
            year: Calendar year of the report.
            month: Calendar month of the report.
            today: Reference date for the comparison window.
            converter: Display converter; base currency when omitted.

        Returns:
            MonthlyReport: Report with amounts in the display currency.
        """
        converter = converter or CurrencyConverter()
        transactions = self._repository.fetch_transactions()
        accounts = self._repository.fetch_accounts()
        monthly = filter_by_month(transactions, year, month)
        self._logger.info(
            f"Building report for {year}-{month:02d} "
            f"from {len(monthly)} transactions"
        )

        def _convert(breakdown: dict[str, Decimal]) -> dict[str, Decimal]:
            return {
                key: converter.to_display(value)
                for key, value in sort_breakdown(breakdown).items()
            }

        comparison = [
            MonthlyData(
                month=bucket.month,
                year=bucket.year,
                month_number=bucket.month_number,
                income=converter.to_display(bucket.income),
                expense=converter.to_display(bucket.expense),
            )
            for bucket in compute_monthly_comparison(transactions, today)
        ]
        return MonthlyReport(
            year=year,
            month=month,
            currency_code=converter.currency,
            income=converter.to_display(total_income(monthly)),
            expense=converter.to_display(total_expense(monthly)),
            category_breakdown=_convert(
                compute_breakdown(monthly, accounts, by_category=True)
            ),
            account_type_breakdown=_convert(
                compute_breakdown(monthly, accounts, by_category=False)
            ),
            comparison=comparison,
        )


__all__ = ["GetMonthlyReportUseCase"]
