"""Default category catalog offered at transaction entry."""

from src.domain.constants import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
)
from src.domain.models.transactions import TransactionType
from src.domain.services.aggregation import category_key


def default_categories(
    transaction_type: TransactionType,
) -> dict[str, tuple[str, ...]]:
    """Return the seeded categories and sub-categories for a type.

    Args:
        transaction_type: Type of the transaction being entered.

    Returns:
        dict[str, tuple[str, ...]]: Sub-categories keyed by category.
        Transfers carry no categories.
    """
    if transaction_type == TransactionType.EXPENSE:
        return {
            category: tuple(subs)
            for category, subs in DEFAULT_EXPENSE_CATEGORIES.items()
        }
    if transaction_type == TransactionType.INCOME:
        return {category: () for category in DEFAULT_INCOME_CATEGORIES}
    return {}


def category_choices(transaction_type: TransactionType) -> list[str]:
    """Return selectable labels, each category followed by its subs.

    Labels use the same "Category - Sub" form as the breakdowns.
    """
    choices: list[str] = []
    for category, subs in default_categories(transaction_type).items():
        choices.append(category)
        choices.extend(category_key(category, sub) for sub in subs)
    return choices


def is_default_category(
    transaction_type: TransactionType,
    category: str,
    sub_category: str | None = None,
) -> bool:
    """Return True when the pair belongs to the seeded catalog."""
    catalog = default_categories(transaction_type)
    if category not in catalog:
        return False
    return not sub_category or sub_category in catalog[category]


__all__ = ["default_categories", "category_choices", "is_default_category"]
