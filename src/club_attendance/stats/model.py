from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AttendanceStats:
    """Dashboard counters for one day.

    Students with no record for `as_of` are in neither present nor absent.
    """

    as_of: date
    total_students: int
    present_today: int
    absent_today: int
    total_sections: int

    def to_dict(self) -> dict:
        return {
            "date": self.as_of.isoformat(),
            "totalStudents": self.total_students,
            "presentToday": self.present_today,
            "absentToday": self.absent_today,
            "totalSections": self.total_sections,
        }
