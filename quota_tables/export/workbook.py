from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..transform.normalize import normalize

__all__ = [
    "export_filename",
    "render_workbook",
    "write_workbook",
]

HEADER_FILL = PatternFill(start_color="D3D3D3", end_color="D3D3D3", fill_type="solid")
HEADER_FONT = Font(bold=True)
CENTER = Alignment(horizontal="center", vertical="center")
_thin = Side(style="thin", color="000000")
CELL_BORDER = Border(left=_thin, right=_thin, top=_thin, bottom=_thin)

MAX_COLUMN_WIDTH = 60
WIDTH_SAMPLE_ROWS = 200

_WHITESPACE = re.compile(r"\s+")
_INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")
_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/:*?\"<>|]")
_LEADING_DOTS = re.compile(r"^\.+")


def _sheet_title(name: str) -> str:
    title = _INVALID_SHEET_CHARS.sub(" ", name).strip()
    return (title or "Sheet")[:31]


def _filename_part(part: str) -> str:
    # category names come from upstream and may contain path separators
    cleaned = _WHITESPACE.sub("_", part.strip())
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", cleaned)
    return _LEADING_DOTS.sub("_", cleaned)


def export_filename(*parts: str, locale: str) -> str:
    """Build ``{Part_1}_{Part_2}_{locale}.xlsx``.

    Whitespace collapses to ``_``; path separators, characters Windows
    refuses in file names and leading dots become ``_`` as well, so the
    result always names a file directly inside the output directory.

    >>> export_filename("Quota Increase", "Quota_Data", locale="en-US")
    'Quota_Increase_Quota_Data_en-US.xlsx'
    >>> export_filename("Spot / Low Priority", "Quota_Data", locale="en-US")
    'Spot___Low_Priority_Quota_Data_en-US.xlsx'
    """
    cleaned = [_filename_part(p) for p in parts if p and p.strip()]
    return "_".join([*cleaned, locale]) + ".xlsx"


def render_workbook(
    headers: Sequence[str],
    rows: Iterable[Mapping[str, Any]],
    sheet_name: str = "Sheet",
) -> Workbook:
    """Render a display table into a single-sheet workbook.

    Cells hold the normalized display strings, so the workbook matches the
    clipboard payloads cell for cell.
    """
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = _sheet_title(sheet_name)

    worksheet.append(list(headers))
    for col_idx in range(1, len(headers) + 1):
        cell = worksheet.cell(row=1, column=col_idx)
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT
        cell.alignment = CENTER
        cell.border = CELL_BORDER

    for row_number, data_row in enumerate(rows, start=2):
        worksheet.append([normalize(data_row.get(h)) for h in headers])
        for col_idx in range(1, len(headers) + 1):
            cell = worksheet.cell(row=row_number, column=col_idx)
            cell.alignment = CENTER
            cell.border = CELL_BORDER

    worksheet.freeze_panes = "A2"
    if not headers:
        return workbook
    worksheet.auto_filter.ref = worksheet.dimensions

    max_row_for_width = min(worksheet.max_row, WIDTH_SAMPLE_ROWS)
    for idx, column_cells in enumerate(
        worksheet.iter_cols(1, len(headers), 1, max_row_for_width), start=1
    ):
        max_length = max((len(str(c.value)) for c in column_cells if c.value is not None), default=0)
        worksheet.column_dimensions[get_column_letter(idx)].width = min(max_length + 2, MAX_COLUMN_WIDTH)

    return workbook


def write_workbook(
    path: Path,
    headers: Sequence[str],
    rows: Iterable[Mapping[str, Any]],
    sheet_name: str = "Sheet",
) -> Path:
    """Render and save a workbook; OSError propagates to the caller."""
    workbook = render_workbook(headers, rows, sheet_name=sheet_name)
    workbook.save(path)
    return path
