from __future__ import annotations

import csv
import io

import pandas as pd

from ..core.constants import REPORT_SHEET_NAME
from .model import ReportMatrix

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def to_dataframe(matrix: ReportMatrix) -> pd.DataFrame:
    return pd.DataFrame(matrix.rows, columns=matrix.header)


def write_excel(matrix: ReportMatrix) -> io.BytesIO:
    """Serialize the matrix into an in-memory .xlsx workbook with one sheet."""

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        to_dataframe(matrix).to_excel(writer, index=False, sheet_name=REPORT_SHEET_NAME)
    output.seek(0)
    return output


def write_csv(matrix: ReportMatrix) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=matrix.header)
    writer.writeheader()
    for record in matrix.to_records():
        writer.writerow(record)
    # BOM so spreadsheet apps detect UTF-8.
    return out.getvalue().encode("utf-8-sig")
