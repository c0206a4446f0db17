from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Student
from .repository import StudentRepository

STUDENT_COLUMNS = "id, name, student_id, email, section, shift, is_active, created_at"

# Domain field -> column; only these can be written by a partial update.
UPDATABLE_COLUMNS = {
    "name": "name",
    "student_id": "student_id",
    "email": "email",
    "section": "section",
    "shift": "shift",
    "is_active": "is_active",
}


def row_to_student(r: dict, prefix: str = "") -> Student:
    return Student(
        id=str(r[f"{prefix}id"]),
        name=r[f"{prefix}name"],
        student_id=r[f"{prefix}student_id"],
        email=r.get(f"{prefix}email"),
        section=r[f"{prefix}section"],
        shift=r[f"{prefix}shift"],
        is_active=bool(r.get(f"{prefix}is_active", True)),
        created_at=r.get(f"{prefix}created_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select_one(self, cur, where: str, value) -> Optional[Student]:
        cur.execute(f"SELECT {STUDENT_COLUMNS} FROM students WHERE {where}=%s", (value,))
        row = fetchone(cur)
        return row_to_student(row) if row else None

    def get_by_id(self, id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select_one(cur, "id", id)

    def get_by_external_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select_one(cur, "student_id", student_id)

    def create(
        self,
        *,
        name: str,
        student_id: str,
        email: Optional[str],
        section: str,
        shift: str,
        is_active: bool = True,
    ) -> Student:
        new_id = str(uuid.uuid4())
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO students(id, name, student_id, email, section, shift, is_active)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (new_id, name, student_id, email, section, shift, int(bool(is_active))),
                )
                return self._select_one(cur, "id", new_id)
        except Exception as e:
            if is_duplicate_key(e):
                raise ConflictError(f"Student ID {student_id} already exists") from e
            raise

    def update(self, id: str, fields: dict) -> Optional[Student]:
        assignments = []
        params: list[object] = []
        for key, value in fields.items():
            column = UPDATABLE_COLUMNS.get(key)
            if column is None:
                continue
            assignments.append(f"{column}=%s")
            params.append(int(bool(value)) if key == "is_active" else value)

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                # MySQL reports rowcount=0 for no-op updates, so check existence explicitly.
                if not self._select_one(cur, "id", id):
                    return None
                if assignments:
                    cur.execute(
                        f"UPDATE students SET {', '.join(assignments)} WHERE id=%s",
                        (*params, id),
                    )
                return self._select_one(cur, "id", id)
        except Exception as e:
            if is_duplicate_key(e):
                raise ConflictError(f"Student ID {fields.get('student_id')} already exists") from e
            raise

    def delete_by_id(self, id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE student_id=%s", (id,))
            cur.execute("DELETE FROM students WHERE id=%s", (id,))
            return cur.rowcount > 0

    def list_active(self, section: Optional[str] = None) -> Sequence[Student]:
        clauses = ["is_active=1"]
        params: list[object] = []
        if section:
            clauses.append("section=%s")
            params.append(section)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {STUDENT_COLUMNS}
                FROM students
                WHERE {' AND '.join(clauses)}
                ORDER BY name ASC
                """,
                tuple(params),
            )
            return [row_to_student(r) for r in fetchall(cur)]
