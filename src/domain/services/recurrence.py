"""Recurrence date arithmetic."""

import calendar
from collections.abc import Iterator
from datetime import date, timedelta

from src.domain.models.transactions import Frequency


def clamp_day_to_month(year: int, month: int, day: int) -> int:
    """Clamp a day-of-month to the length of the given month."""
    return min(day, calendar.monthrange(year, month)[1])


def next_due_date(
    current: date,
    frequency: Frequency,
    anchor_day: int | None = None,
) -> date:
    """Return the occurrence following ``current`` for a frequency.

    Monthly and yearly steps clamp to the last day of the target month,
    attempting ``anchor_day`` (the template's original day) every time so
    a short month does not shorten later occurrences.

    Args:
        current: Previous occurrence date.
        frequency: Recurrence frequency. NONE returns ``current`` unchanged.
        anchor_day: Day-of-month to re-attempt; defaults to ``current.day``.

    Returns:
        date: Next occurrence date.
    """
    day = anchor_day or current.day
    if frequency == Frequency.DAILY:
        return current + timedelta(days=1)
    if frequency == Frequency.WEEKLY:
        return current + timedelta(days=7)
    if frequency == Frequency.MONTHLY:
        year, month = current.year, current.month + 1
        if month > 12:
            year, month = year + 1, 1
        return current.replace(
            year=year,
            month=month,
            day=clamp_day_to_month(year, month, day),
        )
    if frequency == Frequency.YEARLY:
        year = current.year + 1
        return current.replace(
            year=year,
            day=clamp_day_to_month(year, current.month, day),
        )
    return current


def iter_due_dates(
    start: date,
    frequency: Frequency,
    until: date,
) -> Iterator[date]:
    """Yield every occurrence after ``start`` that falls on or before ``until``.

    Args:
        start: Template date; not yielded itself.
        frequency: Recurrence frequency.
        until: Inclusive upper bound.

    Yields:
        date: Due dates in chronological order.
    """
    if frequency == Frequency.NONE:
        return
    current = start
    while True:
        current = next_due_date(current, frequency, anchor_day=start.day)
        if current > until:
            return
        yield current


__all__ = ["clamp_day_to_month", "next_due_date", "iter_due_dates"]
