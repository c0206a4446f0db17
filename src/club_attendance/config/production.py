import os

from ..core.constants import DEFAULT_SHEET_FETCH_TIMEOUT, SECTIONS as DEFAULT_SECTIONS, STUDENT_ID_PATTERN as DEFAULT_ID_PATTERN
from . import env_list

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "club_attendance"),
}

SECTIONS = env_list("SECTIONS", DEFAULT_SECTIONS)
STUDENT_ID_PATTERN = os.getenv("STUDENT_ID_PATTERN", DEFAULT_ID_PATTERN) or None
SHEET_FETCH_TIMEOUT = int(os.getenv("SHEET_FETCH_TIMEOUT", str(DEFAULT_SHEET_FETCH_TIMEOUT)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "logs/club_attendance.log")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
