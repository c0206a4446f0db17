"""Reshape joined attendance rows into a student-by-date matrix."""

from __future__ import annotations

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..attendance.model import AttendanceRow
from ..core.constants import REPORT_FIXED_COLUMNS, REPORT_TOTAL_COLUMNS
from ..core.enums import AttendanceMark
from .model import ReportMatrix, SummaryBucket


def format_percentage(present: int, days: int) -> str:
    if days == 0:
        return "0%"
    # Exact ties round up: 1/16 is "6.3%".
    rate = (Decimal(present) * 100 / Decimal(days)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rate}%"


def pivot_attendance(rows: Iterable[AttendanceRow]) -> ReportMatrix:
    """Build the report matrix.

    Date columns are the distinct dates found in `rows`, ascending, shared by
    every student. A student with no record on one of those dates gets
    "Not Marked", which counts toward neither total. Students without any
    row are absent from the output.
    """

    students = {}
    marks: dict[str, dict] = {}
    dates = set()
    for row in rows:
        sid = row.student.id
        students[sid] = row.student
        marks.setdefault(sid, {})[row.date] = row.is_present
        dates.add(row.date)

    columns = sorted(dates)
    header = [*REPORT_FIXED_COLUMNS, *(d.isoformat() for d in columns), *REPORT_TOTAL_COLUMNS]

    out = []
    for student in sorted(students.values(), key=lambda s: (s.name, s.student_id)):
        by_date = marks[student.id]
        cells = [AttendanceMark.from_flag(by_date.get(d)).value for d in columns]
        present = cells.count(AttendanceMark.PRESENT.value)
        days = len(cells) - cells.count(AttendanceMark.NOT_MARKED.value)
        out.append(
            [
                student.name,
                student.student_id,
                student.shift,
                student.section,
                student.email or "",
                *cells,
                present,
                days,
                format_percentage(present, days),
            ]
        )

    return ReportMatrix(header=header, rows=out)


def summarize(rows: Iterable[AttendanceRow]) -> tuple[list[SummaryBucket], list[SummaryBucket]]:
    """Present/absent counts per date and per section, each sorted by key."""

    daily: Counter = Counter()
    sections: Counter = Counter()
    for row in rows:
        daily[(row.date.isoformat(), row.is_present)] += 1
        sections[(row.student.section, row.is_present)] += 1

    def buckets(counter: Counter) -> list[SummaryBucket]:
        keys = sorted({k for k, _ in counter})
        return [SummaryBucket(key=k, present=counter[(k, True)], absent=counter[(k, False)]) for k in keys]

    return buckets(daily), buckets(sections)
