"""Domain models for ledger accounts."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from src.domain.constants import UNKNOWN_ACCOUNT_ID, UNKNOWN_ACCOUNT_NAME


class AccountType(str, Enum):
    """Kinds of accounts money can be held in."""

    BANK = "bank"
    WALLET = "wallet"
    CREDIT = "credit"
    CASH = "cash"

    @property
    def label(self) -> str:
        """Return the capitalized name used in breakdown keys."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Account:
    """An account whose balance is denominated in the base currency.

    Attributes:
        id: Stable integer identifier.
        name: Display name.
        balance: Current balance in the base currency.
        type: Account kind.
        created_date: Creation timestamp.
    """

    id: int
    name: str
    balance: Decimal
    type: AccountType
    created_date: datetime


def unknown_account(created_date: datetime | None = None) -> Account:
    """Return the placeholder used for stale account references."""
    return Account(
        id=UNKNOWN_ACCOUNT_ID,
        name=UNKNOWN_ACCOUNT_NAME,
        balance=Decimal("0"),
        type=AccountType.CASH,
        created_date=created_date or datetime(1970, 1, 1),
    )


def resolve_account(accounts: dict[int, Account], account_id) -> Account:
    """Look up an account, falling back to the unknown placeholder.

    Args:
        accounts: Mapping of account id to account.
        account_id: Identifier to resolve; may be None or stale.

    Returns:
        Account: The matching account or the placeholder.
    """
    account = accounts.get(account_id) if account_id is not None else None
    return account if account is not None else unknown_account()


__all__ = ["AccountType", "Account", "unknown_account", "resolve_account"]
