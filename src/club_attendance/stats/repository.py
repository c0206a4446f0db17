from __future__ import annotations

from datetime import date
from typing import Protocol


class StatsRepository(Protocol):
    def count_active_students(self) -> int:
        raise NotImplementedError

    def count_marks_on(self, day: date) -> tuple[int, int]:
        """Return (present, absent) record counts for the given date."""

        raise NotImplementedError

    def count_active_sections(self) -> int:
        raise NotImplementedError
