"""Generation of missing recurring transaction occurrences."""

from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import date, datetime
from logging import Logger
import uuid

from src.domain.constants import RECURRING_NOTE_SUFFIX
from src.domain.models.accounts import Account
from src.domain.models.finance import ReconciliationResult
from src.domain.models.transactions import Frequency, Transaction
from src.domain.services.balances import apply_transaction, changed_accounts
from src.domain.services.recurrence import iter_due_dates


def new_transaction_id() -> str:
    """Return a fresh unique transaction id."""
    return uuid.uuid4().hex


def occurrence_exists(
    transactions: Iterable[Transaction],
    template: Transaction,
    due: date,
) -> bool:
    """Return True when a matching transaction already sits on ``due``.

    A match has the template's amount, category and type and the same
    calendar day; time of day is ignored.
    """
    for txn in transactions:
        if (
            txn.amount == template.amount
            and txn.category == template.category
            and txn.type == template.type
            and _calendar_day(txn.date) == due
        ):
            return True
    return False


def build_occurrence(
    template: Transaction,
    due: date,
    transaction_id: str,
) -> Transaction:
    """Return a non-recurring copy of ``template`` dated on ``due``."""
    when = template.date
    if isinstance(when, datetime):
        occurrence_date = datetime.combine(due, when.time(), tzinfo=when.tzinfo)
    else:
        occurrence_date = datetime.combine(due, datetime.min.time())
    return replace(
        template,
        id=transaction_id,
        date=occurrence_date,
        recurrence=Frequency.NONE,
        note=(template.note or "") + RECURRING_NOTE_SUFFIX,
    )


def plan_recurring_occurrences(
    transactions: list[Transaction],
    accounts: dict[int, Account],
    today: date,
    *,
    logger: Logger,
    id_factory: Callable[[], str] = new_transaction_id,
) -> ReconciliationResult:
    """Compute every missing occurrence due on or before ``today``.

    Nothing is mutated; the caller commits the returned occurrences and
    accounts together.

    Args:
        transactions: Full current transaction list.
        accounts: Latest known accounts keyed by id.
        today: Inclusive cutoff for due dates.
        logger: Logger used for progress and warnings.
        id_factory: Callable producing unique transaction ids.

    Returns:
        ReconciliationResult: Generated occurrences in template order then
        date order, and the accounts whose balance changed.
    """
    cutoff = _calendar_day(today)
    templates = [txn for txn in transactions if txn.is_template]
    known = list(transactions)
    generated: list[Transaction] = []
    balances = dict(accounts)

    for template in templates:
        start = _calendar_day(template.date)
        for due in iter_due_dates(start, template.recurrence, cutoff):
            if occurrence_exists(known, template, due):
                logger.debug(
                    f"Occurrence of {template.id} on {due} already exists"
                )
                continue
            occurrence = build_occurrence(template, due, id_factory())
            known.append(occurrence)
            generated.append(occurrence)
            balances = apply_transaction(balances, occurrence, logger=logger)

    logger.info(
        f"Scanned {len(templates)} recurring templates, "
        f"generated {len(generated)} occurrences up to {cutoff}"
    )
    return ReconciliationResult(
        generated=generated,
        accounts=changed_accounts(accounts, balances),
    )


def _calendar_day(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


__all__ = [
    "new_transaction_id",
    "occurrence_exists",
    "build_occurrence",
    "plan_recurring_occurrences",
]
