"""Currency conversion between the base currency and a display currency."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import BASE_CURRENCY, CURRENCY_SYMBOLS, DEFAULT_RATES
from src.domain.errors import UnsupportedCurrencyError
from src.domain.models.finance import RateTable
from src.utils.decimal_utils import coerce_decimal


def resolve_rate(rate_table: RateTable, currency: str) -> Decimal:
    """Return the rate for a currency relative to the base currency.

    Refreshed rates win over the static defaults; the base currency is
    always 1.

    Args:
        rate_table: Externally refreshed rates.
        currency: Currency code (e.g., USD).

    Returns:
        Decimal: Units of ``currency`` per base unit.

    Raises:
        UnsupportedCurrencyError: When no usable rate is known.
    """
    code = currency.strip().upper()
    if code == BASE_CURRENCY:
        return Decimal("1")
    rate = rate_table.rates.get(code)
    if rate is None or rate <= 0:
        rate = DEFAULT_RATES.get(code)
    if rate is None or rate <= 0:
        raise UnsupportedCurrencyError(f"No exchange rate for {code}")
    return coerce_decimal(rate)


class CurrencyConverter:
    """Convert amounts at the entry and display boundaries.

    Values inside the ledger are always in the base currency; the
    converter is built with the selected currency and a rate table
    rather than reading them from global settings.
    """

    def __init__(
        self,
        rate_table: RateTable | None = None,
        currency: str = BASE_CURRENCY,
    ) -> None:
        """Initialize the converter.

        Args:
            rate_table: Refreshed rates; defaults to an empty table.
            currency: Selected display currency code.

        Raises:
            UnsupportedCurrencyError: When the currency has no rate.
        """
        self._rate_table = rate_table or RateTable()
        self._currency = currency.strip().upper()
        self._rate = resolve_rate(self._rate_table, self._currency)

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def symbol(self) -> str:
        return CURRENCY_SYMBOLS.get(self._currency, self._currency)

    def rate(self) -> Decimal:
        """Return the display currency rate."""
        return self._rate

    def to_display(self, amount_in_base) -> Decimal:
        """Convert a base currency amount into the display currency."""
        return coerce_decimal(amount_in_base) * self._rate

    def to_base(self, amount_in_display) -> Decimal:
        """Convert a display currency amount back into the base currency."""
        return coerce_decimal(amount_in_display) / self._rate

    def format_amount(self, amount_in_base) -> str:
        """Render a base amount in the display currency, without decimals."""
        return self.format_display(self.to_display(amount_in_base))

    def format_display(self, amount_in_display) -> str:
        """Render an amount already in the display currency."""
        value = coerce_decimal(amount_in_display).quantize(
            Decimal("1"),
            rounding=ROUND_HALF_UP,
        )
        sign = "-" if value < 0 else ""
        return f"{sign}{self.symbol}{abs(value):,}"


def format_last_updated(
    last_updated: datetime | None,
    now: datetime,
) -> str:
    """Describe how long ago rates were refreshed.

    Args:
        last_updated: Timestamp of the last refresh, or None.
        now: Reference time.

    Returns:
        str: Human readable age such as "5m ago".
    """
    if last_updated is None:
        return "Never updated"
    elapsed = now - last_updated
    minutes = int(elapsed.total_seconds() // 60)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{elapsed.days}d ago"


__all__ = [
    "resolve_rate",
    "CurrencyConverter",
    "format_last_updated",
]
