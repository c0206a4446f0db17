from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_SHEET_FETCH_TIMEOUT, SECTIONS, STUDENT_ID_PATTERN
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .stats.mysql_stats_repository import MySQLStatsRepository
from .stats.repository import StatsRepository
from .stats.service import StatsService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .students.sheet_import import SheetImporter


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    stats_repo: StatsRepository

    student_service: StudentService
    attendance_service: AttendanceService
    stats_service: StatsService
    report_service: ReportService


def wire_container(
    *,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    stats_repo: StatsRepository,
    sections=SECTIONS,
    student_id_pattern: Optional[str] = STUDENT_ID_PATTERN,
    importer: Optional[SheetImporter] = None,
) -> Container:
    """Build services on top of the given repositories (MySQL or in-memory)."""

    return Container(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        stats_repo=stats_repo,
        student_service=StudentService(
            students_repo,
            sections=sections,
            student_id_pattern=student_id_pattern,
            importer=importer or SheetImporter(),
        ),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        stats_service=StatsService(stats_repo),
        report_service=ReportService(attendance_repo),
    )


def build_container(*, db_config: dict, settings: Optional[ModuleType] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        stats_repo=MySQLStatsRepository(conn),
        sections=getattr(settings, "SECTIONS", SECTIONS),
        student_id_pattern=getattr(settings, "STUDENT_ID_PATTERN", STUDENT_ID_PATTERN),
        importer=SheetImporter(timeout=int(getattr(settings, "SHEET_FETCH_TIMEOUT", DEFAULT_SHEET_FETCH_TIMEOUT))),
    )
