"""Record serialization for ledger storage.

Enums are stored through explicit code tables so stored values do not
depend on declaration order. Sensitive fields go through an injected
field codec; stored values the codec rejects are read as plaintext.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from src.application.ports.codec import FieldCodecPort
from src.domain.models import (
    Account,
    AccountType,
    Frequency,
    Transaction,
    TransactionSplit,
    TransactionType,
)
from src.utils.decimal_utils import coerce_decimal


ACCOUNT_TYPE_CODES = {
    AccountType.BANK: 0,
    AccountType.WALLET: 1,
    AccountType.CREDIT: 2,
    AccountType.CASH: 3,
}

TRANSACTION_TYPE_CODES = {
    TransactionType.EXPENSE: 0,
    TransactionType.TRANSFER: 1,
    TransactionType.INCOME: 2,
}

FREQUENCY_CODES = {
    Frequency.NONE: 0,
    Frequency.DAILY: 1,
    Frequency.WEEKLY: 2,
    Frequency.MONTHLY: 3,
    Frequency.YEARLY: 4,
}


def _decode_enum(codes: dict, code: int):
    for member, member_code in codes.items():
        if member_code == code:
            return member
    raise ValueError(f"Unknown enum code: {code}")


def to_epoch_millis(value: datetime) -> int:
    """Return a timestamp as epoch milliseconds."""
    return int(round(value.timestamp() * 1000))


def from_epoch_millis(value: int) -> datetime:
    """Return a naive local datetime for epoch milliseconds."""
    return datetime.fromtimestamp(int(value) / 1000)


class PlaintextFieldCodec(FieldCodecPort):
    """Codec storing fields unchanged."""

    def encode(self, value: str) -> str:
        return value

    def decode(self, value: str) -> str:
        return value


class LedgerSerializer:
    """Convert domain models to storage records and back."""

    def __init__(self, codec: FieldCodecPort | None = None) -> None:
        """Initialize the serializer.

        Args:
            codec: Codec for sensitive fields; plaintext when omitted.
        """
        self._codec = codec or PlaintextFieldCodec()

    def _encode(self, value) -> str | None:
        if value is None:
            return None
        return self._codec.encode(str(value))

    def _decode(self, value) -> str | None:
        if value is None:
            return None
        try:
            return self._codec.decode(value)
        except ValueError:
            return value

    def _decode_decimal(self, value) -> Decimal:
        return coerce_decimal(self._decode(value))

    def account_to_record(self, account: Account) -> dict[str, Any]:
        """Return the storage record for an account."""
        return {
            "id": account.id,
            "name": self._encode(account.name),
            "balance": self._encode(account.balance),
            "type": ACCOUNT_TYPE_CODES[account.type],
            "created_date": to_epoch_millis(account.created_date),
        }

    def record_to_account(self, record) -> Account:
        """Return the account stored in a record or row mapping."""
        return Account(
            id=int(record["id"]),
            name=self._decode(record["name"]) or "",
            balance=self._decode_decimal(record["balance"]),
            type=_decode_enum(ACCOUNT_TYPE_CODES, int(record["type"])),
            created_date=from_epoch_millis(record["created_date"]),
        )

    def transaction_to_record(self, transaction: Transaction) -> dict[str, Any]:
        """Return the storage record for a transaction, splits excluded."""
        return {
            "id": transaction.id,
            "amount": self._encode(transaction.amount),
            "fee": self._encode(transaction.fee),
            "type": TRANSACTION_TYPE_CODES[transaction.type],
            "source_account_id": transaction.source_account_id,
            "target_account_id": transaction.target_account_id,
            "category": transaction.category,
            "sub_category": transaction.sub_category,
            "date": to_epoch_millis(transaction.date),
            "note": self._encode(transaction.note),
            "recurrence": FREQUENCY_CODES[transaction.recurrence],
        }

    def split_to_records(self, transaction: Transaction) -> list[dict[str, Any]]:
        """Return ordered split records for a transaction."""
        return [
            {
                "transaction_id": transaction.id,
                "position": position,
                "amount": self._encode(split.amount),
                "category": split.category,
                "sub_category": split.sub_category,
            }
            for position, split in enumerate(transaction.splits)
        ]

    def record_to_split(self, record) -> TransactionSplit:
        """Return the split stored in a record or row mapping."""
        return TransactionSplit(
            amount=self._decode_decimal(record["amount"]),
            category=record["category"],
            sub_category=record["sub_category"],
        )

    def record_to_transaction(
        self,
        record,
        splits: list[TransactionSplit] | None = None,
    ) -> Transaction:
        """Return the transaction stored in a record or row mapping."""
        target = record["target_account_id"]
        return Transaction(
            id=record["id"],
            amount=self._decode_decimal(record["amount"]),
            fee=self._decode_decimal(record["fee"]),
            type=_decode_enum(TRANSACTION_TYPE_CODES, int(record["type"])),
            source_account_id=int(record["source_account_id"]),
            target_account_id=int(target) if target is not None else None,
            category=record["category"],
            sub_category=record["sub_category"],
            date=from_epoch_millis(record["date"]),
            splits=tuple(splits or ()),
            note=self._decode(record["note"]),
            recurrence=_decode_enum(FREQUENCY_CODES, int(record["recurrence"])),
        )


__all__ = [
    "ACCOUNT_TYPE_CODES",
    "TRANSACTION_TYPE_CODES",
    "FREQUENCY_CODES",
    "to_epoch_millis",
    "from_epoch_millis",
    "PlaintextFieldCodec",
    "LedgerSerializer",
]
