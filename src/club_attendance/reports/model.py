from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass(frozen=True)
class ReportMatrix:
    """Per-student rows; every row has one value per header column, in header order."""

    header: list[str]
    rows: list[list[Any]] = field(default_factory=list)

    def to_records(self) -> list[dict[str, Any]]:
        return [dict(zip(self.header, row)) for row in self.rows]

    def to_dict(self) -> dict:
        return {"header": list(self.header), "rows": self.to_records()}


@dataclass(frozen=True)
class SummaryBucket:
    key: str
    present: int = 0
    absent: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent

    @property
    def attendance_rate(self) -> float:
        if not self.total:
            return 0
        return round(self.present / self.total * 100, 1)


@dataclass(frozen=True)
class ReportSummary:
    start: date
    end: date
    daily: list[SummaryBucket]
    sections: list[SummaryBucket]

    def to_dict(self) -> dict:
        def bucket(b: SummaryBucket, key_name: str) -> dict:
            return {
                key_name: b.key,
                "present": b.present,
                "absent": b.absent,
                "total": b.total,
                "attendanceRate": b.attendance_rate,
            }

        return {
            "startDate": self.start.isoformat(),
            "endDate": self.end.isoformat(),
            "daily": [bucket(b, "date") for b in self.daily],
            "sections": [bucket(b, "section") for b in self.sections],
        }
