from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.reject_record import RejectRecord

"""Rejected-row log buffer.

Rows dropped by the validity filter are buffered during a run and flushed as
JSON Lines to ``logs/rejected-YYYYMMDD-HHMMSS.log`` (UTC). The file is only
created when there is something to write.
"""

__all__ = [
    "RejectRecord",
    "RejectLogBuffer",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class RejectLogBuffer:
    """In-memory buffer of RejectRecords. Serial use only."""

    def __init__(self, logs_dir: Path = LOGS_DIR) -> None:
        self._records: list[RejectRecord] = []
        self._logs_dir = logs_dir
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"rejected-{stamp}.log"
        return self._file_path

    def append(self, record: RejectRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the log file; None when nothing was buffered."""
        if not self._records:
            return None
        fp = self.file_path
        fp.parent.mkdir(parents=True, exist_ok=True)
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
