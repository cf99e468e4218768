from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ..export.workbook import write_workbook
from ..logging.reject_log import RejectLogBuffer
from ..models.config_models import VIEW_CATEGORIZED, VIEW_UNIFIED, VIEW_UNIFIED_BY_ID, ExportConfig
from ..models.export_result import ExportResult, FileStat
from ..models.reject_record import RejectRecord
from ..models.table import DisplayTable
from ..transform.validity import rejection_reason
from .progress import ProgressTracker
from .views import TablePipeline

"""Export orchestration.

Runs one export for a config: records rejected rows, builds the configured
views, writes one workbook per table and aggregates the counters for the
SUMMARY line. A workbook that fails to save is counted and logged; the run
carries on with the remaining tables.
"""

__all__ = [
    "ExportError",
    "build_tables",
    "prepare_output_directory",
    "record_rejects",
    "run_export",
]

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


class ExportError(Exception):
    """Fatal export error (output directory unusable)."""


def prepare_output_directory(path: Path) -> Path:
    """Create *path* if needed.

    Raises:
        ExportError: path exists and is not a directory, or cannot be created
    """
    if path.exists() and not path.is_dir():
        raise ExportError(f"output path is not a directory: {path}")
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"cannot create output directory {path}: {e}") from e
    return path


def record_rejects(rows: Sequence[Row], buffer: RejectLogBuffer | None) -> int:
    """Count rows excluded by the validity filter, buffering one record each."""
    rejected = 0
    for row in rows:
        reason = rejection_reason(row)
        if reason is None:
            continue
        rejected += 1
        if buffer is not None:
            buffer.append(RejectRecord.create(row, reason))
    return rejected


def build_tables(
    config: ExportConfig,
    pipeline: TablePipeline,
    rows: Sequence[Row],
    category_map: Mapping[str, Sequence[Row]],
) -> list[DisplayTable]:
    """Build the tables of every configured view, in export order.

    The unified-by-id view carries its own category sections (``RDQuota``
    first) ahead of the unified-by-id table.
    """
    tables: list[DisplayTable] = []
    if VIEW_CATEGORIZED in config.views:
        sections = pipeline.category_tables(category_map)
        logger.info(f"{pipeline.section_title()}: {len(sections)} table(s)")
        tables.extend(sections)
    if VIEW_UNIFIED in config.views:
        tables.append(pipeline.unified_table(rows))
    if VIEW_UNIFIED_BY_ID in config.views:
        sections = pipeline.category_tables(category_map, with_identifier=True)
        logger.info(f"{pipeline.section_title(with_identifier=True)}: {len(sections)} table(s)")
        tables.extend(sections)
        tables.append(pipeline.unified_by_id_table(rows))
    return tables


def run_export(
    config: ExportConfig,
    pipeline: TablePipeline,
    rows: Sequence[Row],
    category_map: Mapping[str, Sequence[Row]],
    *,
    reject_log: RejectLogBuffer | None = None,
) -> ExportResult:
    """Build every configured table and write it as a workbook.

    Args:
        config: Export configuration (views, output directory)
        pipeline: Table builder for the active translation state
        rows: Upstream rows (unified views)
        category_map: Upstream category map (categorized view)
        reject_log: Optional buffer receiving one record per rejected row

    Returns:
        ExportResult with counters and per-file stats

    Raises:
        ExportError: output directory cannot be used
    """
    start_time = datetime.now(UTC)
    out_dir = prepare_output_directory(Path(config.output_directory))

    rejected = record_rejects(rows, reject_log)
    if rejected:
        logger.info(f"rejected {rejected} row(s) failing the validity filter")

    view_summary = pipeline.summary(rows, category_map)
    logger.info(pipeline.counters_text(view_summary))

    tables = build_tables(config, pipeline, rows, category_map)
    logger.debug(f"built {len(tables)} table(s) locale={pipeline.locale}")

    file_stats: list[FileStat] = []
    with ProgressTracker(len(tables)) as progress:
        for table in tables:
            progress.start_file(table.filename)
            try:
                write_workbook(out_dir / table.filename, table.headers, table.rows, sheet_name=table.title)
            except OSError as e:
                logger.error(f"failed to write {table.filename}: {e}")
                file_stats.append(FileStat(table.filename, "failed", len(table), error=str(e)))
                progress.finish_file(success=False)
                continue
            logger.debug(f"wrote {table.filename} rows={len(table)}")
            file_stats.append(FileStat(table.filename, "success", len(table)))
            progress.finish_file(success=True)

    end_time = datetime.now(UTC)
    return ExportResult(
        total_rows=len(rows),
        valid_rows=len(rows) - rejected,
        rejected_rows=rejected,
        categories=view_summary.categories,
        columns=view_summary.columns,
        written_files=sum(1 for s in file_stats if s.status == "success"),
        failed_files=sum(1 for s in file_stats if s.status == "failed"),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
    )
