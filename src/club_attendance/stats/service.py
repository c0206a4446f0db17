from __future__ import annotations

from typing import Any

from ..common.datetime_utils import coerce_date, today_local
from .model import AttendanceStats
from .repository import StatsRepository


class StatsService:
    """Read-side aggregation; recomputed on every call so it always matches the ledger."""

    def __init__(self, stats: StatsRepository):
        self._stats = stats

    def compute_stats(self, as_of: Any = None) -> AttendanceStats:
        day = coerce_date(as_of, "date") if as_of else today_local()
        present, absent = self._stats.count_marks_on(day)
        return AttendanceStats(
            as_of=day,
            total_students=self._stats.count_active_students(),
            present_today=present,
            absent_today=absent,
            total_sections=self._stats.count_active_sections(),
        )
