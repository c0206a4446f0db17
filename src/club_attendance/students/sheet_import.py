"""Import students from a publicly shared Google Sheet.

The sheet is downloaded as CSV and its headers are matched loosely against
the student fields, so sheets with "Full Name" or "Student ID" columns work
without reformatting.
"""
from __future__ import annotations

import csv
import io
import logging
import re
from typing import Optional

import requests

from ..core.constants import DEFAULT_SHEET_FETCH_TIMEOUT, DEFAULT_SHIFT
from ..core.exceptions import UpstreamError, ValidationError

logger = logging.getLogger(__name__)

SHEET_ID_RE = re.compile(r"/spreadsheets/d/([a-zA-Z0-9-_]+)")
CSV_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv"

# Student field -> accepted header spellings (lower-cased, trimmed), first match wins.
HEADER_ALIASES = {
    "name": ("name", "fullname", "full name", "student name"),
    "studentId": ("studentid", "student id", "id"),
    "email": ("email", "email address"),
    "section": ("section",),
    "shift": ("shift",),
}


def extract_sheet_id(url: str) -> str:
    match = SHEET_ID_RE.search(url or "")
    if not match:
        raise ValidationError("Invalid Google Sheets URL")
    return match.group(1)


def _pick(row: dict, aliases: tuple[str, ...]) -> str:
    for alias in aliases:
        value = row.get(alias)
        if value:
            return value
    return ""


def map_sheet_rows(csv_text: str) -> tuple[list[dict], int]:
    """Map CSV text to student payloads.

    Returns (payloads, skipped) where skipped counts data rows lacking a
    name, student ID or section.
    """

    reader = csv.reader(io.StringIO(csv_text))
    lines = [row for row in reader if any(cell.strip() for cell in row)]
    if len(lines) < 2:
        raise ValidationError("Sheet must contain at least a header row and one data row")

    headers = [h.lstrip("\ufeff").strip().lower() for h in lines[0]]
    payloads: list[dict] = []
    skipped = 0

    for values in lines[1:]:
        row = {header: (values[i].strip() if i < len(values) else "") for i, header in enumerate(headers)}
        student = {field: _pick(row, aliases) for field, aliases in HEADER_ALIASES.items()}

        if not student["name"] or not student["studentId"] or not student["section"]:
            skipped += 1
            continue

        student["shift"] = student["shift"] or DEFAULT_SHIFT
        student["email"] = student["email"] or None
        student["isActive"] = True
        payloads.append(student)

    return payloads, skipped


class SheetImporter:
    def __init__(self, *, session: Optional[requests.Session] = None, timeout: int = DEFAULT_SHEET_FETCH_TIMEOUT):
        self._session = session or requests.Session()
        self._timeout = timeout

    def fetch_csv(self, url: str) -> str:
        sheet_id = extract_sheet_id(url)
        csv_url = CSV_EXPORT_URL.format(sheet_id=sheet_id)
        try:
            response = self._session.get(csv_url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Sheet download failed for %s: %s", sheet_id, e)
            raise UpstreamError("Unable to access the Google Sheet. Please ensure it's publicly viewable.") from e

        # Sheets exports are UTF-8 but often arrive without a charset.
        return response.content.decode("utf-8-sig")

    def load_students(self, url: str) -> tuple[list[dict], int]:
        payloads, skipped = map_sheet_rows(self.fetch_csv(url))
        logger.info("Sheet import parsed %d rows (%d skipped)", len(payloads), skipped)
        return payloads, skipped
