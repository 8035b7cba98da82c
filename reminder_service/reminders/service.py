"""
Date-range query over stored reminders
"""
import logging
from typing import List

from .date_range import DateRange, InstantInput
from .exceptions import ReminderEngineError
from .metrics import invalid_range_queries_total, range_matches_total, range_queries_total
from .models import Reminder
from .recurrence import occurs_in_range
from .repository import ReminderStore

logger = logging.getLogger(__name__)


class ReminderService:
    """Answers "which reminders occur between start and end" against a store"""

    def __init__(self, store: ReminderStore):
        self.store = store

    def find_occurring_in_range(self, start: InstantInput, end: InstantInput) -> List[Reminder]:
        """Reminders with at least one occurrence in [start, end], in store order.

        Raises InvalidInstantError for unparseable bounds and
        InvalidDateRangeError when start is after end.
        """
        try:
            window = DateRange.parse(start, end)
        except ReminderEngineError:
            invalid_range_queries_total.inc()
            raise

        candidates = self.store.reminders_with_anchor_at_or_before(window.hi)
        results = [r for r in candidates if occurs_in_range(r, window.lo, window.hi)]

        range_queries_total.inc()
        range_matches_total.inc(len(results))
        logger.debug(
            "Range %s..%s: %d of %d candidate reminders occur",
            window.lo.isoformat(), window.hi.isoformat(), len(results), len(candidates),
        )
        return results
