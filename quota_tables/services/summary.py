from __future__ import annotations

from ..models.export_result import ExportResult

"""SUMMARY line rendering for the export CLI."""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation for very small values
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: ExportResult) -> str:
    """Render the SUMMARY line for an export run.

    Format:
        SUMMARY rows={total} valid={valid} rejected={rejected} categories={n}
        columns={n} files={written}/{attempted} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = ExportResult(
        ...     total_rows=10, valid_rows=8, rejected_rows=2, categories=3, columns=7,
        ...     written_files=5, failed_files=0, start_time=t, end_time=t, elapsed_seconds=1.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY rows=10 valid=8 rejected=2 categories=3 columns=7 files=5/5 elapsed_sec=1'
    """
    attempted = result.written_files + result.failed_files
    return (
        f"SUMMARY rows={result.total_rows} "
        f"valid={result.valid_rows} "
        f"rejected={result.rejected_rows} "
        f"categories={result.categories} "
        f"columns={result.columns} "
        f"files={result.written_files}/{attempted} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
