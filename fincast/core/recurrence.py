"""Calendar stepping for recurring schedules.

Every call recomputes the sequence from the schedule's start date; nothing is
remembered between calls. Month and year steps go through
``dateutil.relativedelta``, which clamps to the last valid day of the target
month: Jan 31 + 1 month is Feb 29 (or 28), Feb 29 + 1 year is Feb 28. Steps
chain from the previous occurrence, so a schedule that starts on the 31st
stays on the clamped day afterwards. A step past ``date.max`` ends the
sequence instead of raising.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta

from fincast.models import DueOccurrences, Frequency, RecurrenceInput

_STEPS: Dict[Frequency, relativedelta] = {
    Frequency.DAILY: relativedelta(days=1),
    Frequency.WEEKLY: relativedelta(weeks=1),
    Frequency.MONTHLY: relativedelta(months=1),
    Frequency.YEARLY: relativedelta(years=1),
}


def add_frequency(day: date, frequency: Frequency) -> date:
    return day + _STEPS[Frequency(frequency)]


def _advance(day: date, frequency: Frequency) -> Optional[date]:
    """Next step, or None when it would land past date.max."""
    step = _STEPS[Frequency(frequency)]
    try:
        return day + step
    except (OverflowError, ValueError):
        return None


def get_next_occurrence_date(
    start_date: date,
    frequency: Frequency,
    recurrence_end: Optional[date] = None,
    after: Optional[date] = None,
) -> Optional[date]:
    """
    First occurrence strictly after ``after`` (today when omitted), or None
    once that occurrence would fall past ``recurrence_end``.

    A start date still in the future is itself the next occurrence.
    """
    if after is None:
        after = date.today()

    candidate: Optional[date] = start_date
    while candidate is not None and candidate <= after:
        candidate = _advance(candidate, frequency)

    if candidate is None:
        return None
    if recurrence_end is not None and candidate > recurrence_end:
        return None
    return candidate


def get_occurrences_in_range(
    start_date: date,
    frequency: Frequency,
    recurrence_end: Optional[date],
    from_date: date,
    to_date: date,
) -> List[date]:
    """All occurrences d with from_date <= d <= to_date and d <= recurrence_end, ascending."""
    dates: List[date] = []
    if from_date > to_date:
        return dates

    current: Optional[date] = start_date
    while current is not None and current <= to_date:
        if recurrence_end is not None and current > recurrence_end:
            break
        if current >= from_date:
            dates.append(current)
        current = _advance(current, frequency)

    return dates


def get_due_occurrences(
    start_date: date,
    frequency: Frequency,
    recurrence_end: Optional[date],
    last_generated: Optional[date],
    today: date,
) -> DueOccurrences:
    """
    Occurrences that are due on or before ``today`` and were not generated yet.

    Picks up right after ``last_generated`` (or at ``start_date`` for a fresh
    schedule), so feeding the last returned date back in never yields it twice.
    """
    pending: Optional[date] = _advance(last_generated, frequency) if last_generated else start_date

    dates: List[date] = []
    while pending is not None and pending <= today:
        if recurrence_end is not None and pending > recurrence_end:
            break
        dates.append(pending)
        pending = _advance(pending, frequency)

    # a schedule that runs off the calendar has nothing left to generate
    ended = pending is None or (recurrence_end is not None and pending > recurrence_end)
    return DueOccurrences(dates=dates, ended=ended)


def next_occurrence(schedule: RecurrenceInput, after: Optional[date] = None) -> Optional[date]:
    return get_next_occurrence_date(
        schedule.startDate, schedule.frequency, schedule.recurrenceEnd, after
    )


def occurrences_in_range(schedule: RecurrenceInput, from_date: date, to_date: date) -> List[date]:
    return get_occurrences_in_range(
        schedule.startDate, schedule.frequency, schedule.recurrenceEnd, from_date, to_date
    )


__all__ = [
    "add_frequency",
    "get_next_occurrence_date",
    "get_occurrences_in_range",
    "get_due_occurrences",
    "next_occurrence",
    "occurrences_in_range",
]
