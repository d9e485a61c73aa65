"""Domain constants for the expense tracker."""

from decimal import Decimal

BASE_CURRENCY = "INR"

DEFAULT_RATES = {
    "INR": 1.0,
    "USD": 0.012,
    "EUR": 0.011,
}

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
}

SPLIT_TOLERANCE = Decimal("0.01")

RECURRING_NOTE_SUFFIX = " (Recurring)"

TRANSFER_FEES_KEY = "Transfer Fees"

UNKNOWN_ACCOUNT_ID = -1

UNKNOWN_ACCOUNT_NAME = "Unknown"

MONTHLY_COMPARISON_MONTHS = 6

DEFAULT_EXPENSE_CATEGORIES = {
    "Food": ("Groceries", "Restaurants", "Snacks"),
    "Transport": ("Fuel", "Public Transport", "Taxi"),
    "Shopping": ("Clothes", "Electronics", "Household"),
    "Bills": ("Electricity", "Internet", "Phone", "Rent"),
    "Entertainment": ("Movie", "Games", "Subscriptions"),
    "Health": ("Medicine", "Doctor", "Fitness"),
    "Other": (),
}

DEFAULT_INCOME_CATEGORIES = (
    "Salary",
    "Freelance",
    "Investment",
    "Gift",
    "Other",
)


__all__ = [
    "BASE_CURRENCY",
    "DEFAULT_RATES",
    "CURRENCY_SYMBOLS",
    "SPLIT_TOLERANCE",
    "RECURRING_NOTE_SUFFIX",
    "TRANSFER_FEES_KEY",
    "UNKNOWN_ACCOUNT_ID",
    "UNKNOWN_ACCOUNT_NAME",
    "MONTHLY_COMPARISON_MONTHS",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_INCOME_CATEGORIES",
]
