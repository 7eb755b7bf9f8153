from __future__ import annotations

from datetime import date
from typing import Dict, Iterable

import structlog

from fincast.core.recurrence import get_due_occurrences
from fincast.models import DueOccurrences, RecurringRule

logger = structlog.get_logger(__name__)


def collect_due_occurrences(rules: Iterable[RecurringRule], today: date) -> Dict[str, DueOccurrences]:
    """Due dates per rule id, for the caller to materialize as transactions."""
    due: Dict[str, DueOccurrences] = {}
    for rule in rules:
        result = get_due_occurrences(
            rule.startDate,
            rule.frequency,
            rule.endDate,
            rule.lastGeneratedDate,
            today,
        )
        if result.ended:
            logger.debug("rule_ended", rule_id=rule.id, end_date=str(rule.endDate))
        due[rule.id] = result
    return due
