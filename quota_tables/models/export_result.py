from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Result models for one export run (counters for the SUMMARY line)."""


@dataclass(frozen=True)
class FileStat:
    """Per-workbook outcome."""
    file_name: str
    status: str  # success/failed
    rows: int
    error: str | None = None


@dataclass(frozen=True)
class ExportResult:
    """Aggregated results of an export run.

    ``columns`` counts the visible header columns of the unified table, the
    same number shown next to the row and category counters.
    """
    total_rows: int
    valid_rows: int
    rejected_rows: int
    categories: int
    columns: int
    written_files: int
    failed_files: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None
