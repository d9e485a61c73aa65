"""Application use cases package."""

from .get_monthly_report import GetMonthlyReportUseCase
from .reconcile_recurring import ReconcileRecurringUseCase, RecurringCheckSession
from .record_transaction import RecordTransactionUseCase
from .refresh_rates import RefreshRatesUseCase

__all__ = [
    "GetMonthlyReportUseCase",
    "ReconcileRecurringUseCase",
    "RecurringCheckSession",
    "RecordTransactionUseCase",
    "RefreshRatesUseCase",
]
