"""Domain errors raised at entry and configuration boundaries."""


class LedgerError(Exception):
    """Base class for expense tracker domain errors."""


class SplitMismatchError(LedgerError, ValueError):
    """Raised when split amounts do not add up to the transaction amount."""

    def __init__(self, expected, actual) -> None:
        super().__init__("Split total must match Amount")
        self.expected = expected
        self.actual = actual


class InvalidTransactionError(LedgerError, ValueError):
    """Raised when a transaction violates structural entry rules."""


class UnsupportedCurrencyError(LedgerError, ValueError):
    """Raised when no rate exists for the selected display currency."""


class RatesUnavailableError(LedgerError):
    """Raised when a rate source cannot produce a usable rate table."""


__all__ = [
    "LedgerError",
    "SplitMismatchError",
    "InvalidTransactionError",
    "UnsupportedCurrencyError",
    "RatesUnavailableError",
]
