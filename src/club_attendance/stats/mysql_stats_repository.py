from __future__ import annotations

from datetime import date

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import StatsRepository


class MySQLStatsRepository(StatsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_active_students(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM students WHERE is_active=1")
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def count_marks_on(self, day: date) -> tuple[int, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT is_present, COUNT(*) AS total
                FROM attendance
                WHERE attendance_date=%s
                GROUP BY is_present
                """,
                (day,),
            )
            counts = {bool(r["is_present"]): int(r["total"]) for r in fetchall(cur)}
            return counts.get(True, 0), counts.get(False, 0)

    def count_active_sections(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(DISTINCT section) AS total FROM students WHERE is_active=1")
            r = fetchone(cur)
            return int(r["total"]) if r else 0
