import os

from ..core.constants import SECTIONS as DEFAULT_SECTIONS, STUDENT_ID_PATTERN as DEFAULT_ID_PATTERN

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "club_attendance_test"),
}

SECTIONS = DEFAULT_SECTIONS
STUDENT_ID_PATTERN = DEFAULT_ID_PATTERN
SHEET_FETCH_TIMEOUT = 5

LOG_LEVEL = "WARNING"
LOG_FILE = None

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
