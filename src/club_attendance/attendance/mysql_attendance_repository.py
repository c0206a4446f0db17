from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..students.mysql_student_repository import row_to_student
from .model import AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository

JOINED_SELECT = """
    SELECT
        a.id, a.student_id, a.attendance_date, a.is_present, a.created_at,
        s.id AS s_id, s.name AS s_name, s.student_id AS s_student_id, s.email AS s_email,
        s.section AS s_section, s.shift AS s_shift, s.is_active AS s_is_active, s.created_at AS s_created_at
    FROM attendance a
    JOIN students s ON s.id = a.student_id
"""


def row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=str(r["id"]),
        student_id=str(r["student_id"]),
        date=r["attendance_date"],
        is_present=bool(r["is_present"]),
        created_at=r.get("created_at"),
    )


def row_to_joined(r: dict) -> AttendanceRow:
    return AttendanceRow(record=row_to_record(r), student=row_to_student(r, prefix="s_"))


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, student_id: str, date: date, is_present: bool) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            # uq_attendance_student_date turns a concurrent second insert into an update.
            cur.execute(
                """
                INSERT INTO attendance(id, student_id, attendance_date, is_present)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE is_present=VALUES(is_present)
                """,
                (str(uuid.uuid4()), student_id, date, int(bool(is_present))),
            )
            cur.execute(
                """
                SELECT id, student_id, attendance_date, is_present, created_at
                FROM attendance
                WHERE student_id=%s AND attendance_date=%s
                """,
                (student_id, date),
            )
            return row_to_record(fetchone(cur))

    def _list_joined(self, clauses: list[str], params: list[object], order_by: str) -> Sequence[AttendanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{JOINED_SELECT} WHERE {' AND '.join(clauses)} ORDER BY {order_by}",
                tuple(params),
            )
            return [row_to_joined(r) for r in fetchall(cur)]

    def list_by_date(self, *, date: date, section: Optional[str] = None) -> Sequence[AttendanceRow]:
        clauses = ["a.attendance_date=%s"]
        params: list[object] = [date]
        if section:
            clauses.append("s.section=%s")
            params.append(section)
        return self._list_joined(clauses, params, "s.name ASC")

    def list_by_range(self, *, start: date, end: date, section: Optional[str] = None) -> Sequence[AttendanceRow]:
        clauses = ["a.attendance_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if section:
            clauses.append("s.section=%s")
            params.append(section)
        return self._list_joined(clauses, params, "a.attendance_date DESC, s.name ASC")

    def list_for_student(self, *, student_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, student_id, attendance_date, is_present, created_at
                FROM attendance
                WHERE student_id=%s AND attendance_date BETWEEN %s AND %s
                ORDER BY attendance_date DESC
                """,
                (student_id, start, end),
            )
            return [row_to_record(r) for r in fetchall(cur)]
