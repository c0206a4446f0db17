"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

# Observed club configuration: "24SJCCC" + 1-3 digits.
STUDENT_ID_PATTERN = r"^24SJCCC\d{1,3}$"

SECTIONS = (
    "BBA A",
    "BBA B",
    "BBA C",
    "BBA D",
    "B.COM A",
    "B.COM B",
    "B.COM C",
    "B.COM D",
    "B.COM E",
    "B.COM F",
    "B.COM G",
    "B.COM I",
    "BA English",
    "BSc Eco",
)

SHIFTS = ("Shift 1", "Shift 2")
DEFAULT_SHIFT = "Shift 1"

REPORT_SHEET_NAME = "Attendance Report"
REPORT_FIXED_COLUMNS = ("Name", "Student ID", "Shift", "Section", "Email")
REPORT_TOTAL_COLUMNS = ("Total Present", "Total Days", "Attendance %")

DEFAULT_SHEET_FETCH_TIMEOUT = 15
DEFAULT_HISTORY_DAYS = 30
