from __future__ import annotations

import logging
from typing import Any, Optional

from ..attendance.repository import AttendanceRepository
from ..attendance.service import validate_range
from ..common.datetime_utils import coerce_date, today_local
from .model import ReportMatrix, ReportSummary
from .pivot import pivot_attendance, summarize

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def _resolve_range(self, start: Any, end: Any):
        # Without both bounds the report covers today only.
        if not start or not end:
            today = today_local()
            return today, today
        start_d = coerce_date(start, "startDate")
        end_d = coerce_date(end, "endDate")
        validate_range(start_d, end_d)
        return start_d, end_d

    def build_report(self, start: Any = None, end: Any = None, section: Optional[str] = None) -> ReportMatrix:
        start_d, end_d = self._resolve_range(start, end)
        rows = self._attendance.list_by_range(start=start_d, end=end_d, section=section or None)
        matrix = pivot_attendance(rows)
        logger.info(
            "Built attendance report %s..%s section=%s: %d students",
            start_d,
            end_d,
            section or "all",
            len(matrix.rows),
        )
        return matrix

    def build_summary(self, start: Any = None, end: Any = None, section: Optional[str] = None) -> ReportSummary:
        start_d, end_d = self._resolve_range(start, end)
        rows = self._attendance.list_by_range(start=start_d, end=end_d, section=section or None)
        daily, sections = summarize(rows)
        return ReportSummary(start=start_d, end=end_d, daily=daily, sections=sections)
