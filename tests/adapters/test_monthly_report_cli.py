"""Tests for the monthly_report_cli adapter."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import monthly_report_cli
from src.domain.models import RateTable
from src.domain.services.fx import CurrencyConverter


def _patch(monkeypatch, report, converter) -> MagicMock:
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = report
    monkeypatch.setattr(monthly_report_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        monthly_report_cli,
        "build_currency_converter",
        lambda: converter,
    )
    monkeypatch.setattr(
        monthly_report_cli,
        "build_ledger_repository",
        lambda: object(),
    )
    monkeypatch.setattr(
        monthly_report_cli,
        "GetMonthlyReportUseCase",
        lambda repository, logger: fake_use_case,
    )
    return fake_use_case


def test_main_prints_converted_totals_and_breakdown(monkeypatch, capsys):
    """The report is built in the display currency and printed as is."""
    converter = CurrencyConverter(RateTable(rates={"USD": 0.5}), "USD")
    report = SimpleNamespace(
        year=2024,
        month=3,
        currency_code="USD",
        income=Decimal("25000"),
        expense=Decimal("625.3"),
        category_breakdown={"Food": Decimal("500"), "Transfer Fees": Decimal("125.3")},
    )
    fake_use_case = _patch(monkeypatch, report, converter)

    monthly_report_cli.main()

    today = date.today()
    fake_use_case.execute.assert_called_once_with(
        today.year,
        today.month,
        today,
        converter=converter,
    )
    out = capsys.readouterr().out
    assert "Report 2024-03 (USD)" in out
    assert "Income:  $25,000" in out
    assert "Expense: $625" in out
    assert "  Food: $500" in out
    assert "  Transfer Fees: $125" in out


def test_main_prints_empty_state(monkeypatch, capsys):
    """Months without expenses show a friendly message."""
    report = SimpleNamespace(
        year=2024,
        month=4,
        currency_code="INR",
        income=Decimal("0"),
        expense=Decimal("0"),
        category_breakdown={},
    )
    _patch(monkeypatch, report, CurrencyConverter())

    monthly_report_cli.main()

    out = capsys.readouterr().out
    assert "Income:  ₹0" in out
    assert "No expenses this month." in out
