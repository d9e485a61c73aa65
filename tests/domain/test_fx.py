"""Tests for the currency converter."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from src.domain.errors import UnsupportedCurrencyError
from src.domain.models import RateTable
from src.domain.services.fx import (
    CurrencyConverter,
    format_last_updated,
    resolve_rate,
)


def test_base_currency_rate_is_one() -> None:
    """The base currency never converts."""
    converter = CurrencyConverter(RateTable(rates={"INR": 3.0}), "INR")

    assert converter.rate() == Decimal("1")
    assert converter.to_display(Decimal("250")) == Decimal("250")


def test_refreshed_rate_wins_over_default() -> None:
    """Externally updated rates are preferred."""
    table = RateTable(rates={"USD": 0.0125})

    assert resolve_rate(table, "usd") == Decimal("0.0125")


def test_missing_rate_falls_back_to_default() -> None:
    """Without refreshed data the static default applies."""
    assert resolve_rate(RateTable(), "EUR") == Decimal("0.011")
    assert resolve_rate(RateTable(rates={"EUR": 0.0}), "EUR") == Decimal("0.011")


def test_unknown_currency_is_rejected() -> None:
    """Currencies without any rate cannot be selected."""
    with pytest.raises(UnsupportedCurrencyError):
        CurrencyConverter(RateTable(), "JPY")


def test_to_display_and_to_base() -> None:
    """Display multiplies by the rate and base divides by it."""
    converter = CurrencyConverter(RateTable(rates={"USD": 0.012}), "USD")

    assert converter.to_display(Decimal("1000")) == Decimal("12.000")
    assert converter.to_base(Decimal("12")) == Decimal("1000")


@pytest.mark.parametrize("amount", ["0", "1", "1234.56", "99999.99"])
def test_round_trip_returns_original_amount(amount: str) -> None:
    """Converting to display and back recovers the base amount."""
    converter = CurrencyConverter(RateTable(rates={"EUR": 0.0109}), "EUR")

    value = Decimal(amount)
    round_trip = converter.to_base(converter.to_display(value))

    assert abs(round_trip - value) < Decimal("1e-9")


def test_format_amount_uses_symbol_and_grouping() -> None:
    """Amounts render rounded with the currency symbol."""
    inr = CurrencyConverter(currency="INR")
    usd = CurrencyConverter(RateTable(rates={"USD": 0.5}), "USD")

    assert inr.format_amount(Decimal("1234567.4")) == "₹1,234,567"
    assert usd.format_amount(Decimal("-3001")) == "-$1,501"


def test_format_last_updated_buckets() -> None:
    """Ages are described in the coarsest sensible unit."""
    now = datetime(2024, 6, 10, 12, 0)

    assert format_last_updated(None, now) == "Never updated"
    assert format_last_updated(now - timedelta(seconds=30), now) == "Just now"
    assert format_last_updated(now - timedelta(minutes=5), now) == "5m ago"
    assert format_last_updated(now - timedelta(hours=3), now) == "3h ago"
    assert format_last_updated(now - timedelta(days=2, hours=1), now) == "2d ago"


def test_format_display_does_not_convert_again() -> None:
    """Display amounts are only rounded and decorated."""
    eur = CurrencyConverter(RateTable(rates={"EUR": 0.011}), "EUR")

    assert eur.format_display(Decimal("1234.5")) == "€1,235"
    assert eur.format_amount(Decimal("100000")) == "€1,100"
