"""CLI adapter listing the default categories offered at entry."""

from src.domain.models import TransactionType
from src.domain.services.categories import category_choices
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print the expense and income category choices."""
    logger = get_app_logger()
    for transaction_type in (TransactionType.EXPENSE, TransactionType.INCOME):
        choices = category_choices(transaction_type)
        logger.debug(f"Listing {len(choices)} {transaction_type.value} choices")
        print(f"{transaction_type.name.capitalize()} categories:")
        for choice in choices:
            print(f"  {choice}")


if __name__ == "__main__":  # pragma: no cover
    main()
