from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from ..clipboard.backends import TkClipboard, UnavailableClipboard
from ..clipboard.writer import ClipboardWriter
from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..logging.init import log_summary, setup_logging
from ..logging.reject_log import RejectLogBuffer
from ..services.orchestrator import ExportError, run_export
from ..services.summary import render_summary_line
from ..services.views import TablePipeline
from ..source.reader import SourceError, load_categories, load_rows
from ..transform.categories import display_categories, group_by_request_type
from ..transform.dictionary import DictionaryError, load_dictionary

"""CLI entrypoint.

Flow:
- Load config (YAML, schema-validated)
- Load pre-parsed rows and the category map (grouped from rows when absent)
- Build the configured views and write one workbook per table
- Optionally copy a unified table to the clipboard
- Print the SUMMARY line and exit with the contract code
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

COPY_TARGETS = ("unified", "unified_by_id")

Row = Mapping[str, Any]


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="quota-tables", description="Quota request table exporter")
    p.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to the export config YAML")
    p.add_argument(
        "--translate",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Export pt-BR tables (overrides the config's translate flag)",
    )
    p.add_argument("--copy", choices=COPY_TARGETS, help="Copy a unified table to the clipboard")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print source headers & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(rows: Sequence[Row], category_map: Mapping[str, Sequence[Row]]) -> int:
    columns: list[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    print(f"ROWS: {len(rows)} cols={columns}")
    print("  sample_rows=", [dict(r) for r in rows[:3]])
    for name, bucket in display_categories(category_map):
        print(f"  CATEGORY: {name} rows={len(bucket)}")
    return EXIT_SUCCESS_ALL


def _flush_reject_log(reject_log: RejectLogBuffer, logger: logging.Logger) -> None:
    try:
        log_path = reject_log.flush()
    except OSError as e:
        logger.error(f"could not write rejected-row log: {e}")
        return
    if log_path is not None:
        logger.info(f"rejected rows logged to {log_path}")


async def _copy_table(pipeline: TablePipeline, rows: Sequence[Row], target: str, copied_seconds: float) -> bool:
    table = pipeline.unified_by_id_table(rows) if target == "unified_by_id" else pipeline.unified_table(rows)
    # terminals have no multi-MIME clipboard; the tkinter fallback carries the TSV payload
    writer = ClipboardWriter(UnavailableClipboard(), TkClipboard(), copied_seconds=copied_seconds)
    return await writer.copy_table(table.headers, table.rows, title=table.title)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # only read sys.argv when no list was given (cli_main([]) in tests must not see pytest args)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        setup_logging(debug=True)
        logger.debug("debug mode enabled")

    try:
        cfg = load_config(Path(args.config))
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    translate = cfg.translate if args.translate is None else args.translate

    try:
        rows = load_rows(Path(cfg.source))
        if cfg.categories:
            category_map = load_categories(Path(cfg.categories))
        else:
            category_map = group_by_request_type(rows)
    except SourceError as e:
        logger.error(f"source: {e}")
        return EXIT_FATAL

    logger.info(f"Loaded {len(rows)} rows from: {cfg.source}")

    if args.inspect_data:
        return _inspect_data(rows, category_map)

    try:
        pipeline = TablePipeline(load_dictionary(), cfg.headers, translate=translate)
    except DictionaryError as e:
        logger.error(f"dictionary: {e}")
        return EXIT_FATAL

    reject_log = RejectLogBuffer()
    try:
        result = run_export(cfg, pipeline, rows, category_map, reject_log=reject_log)
    except ExportError as e:
        logger.error(f"export: {e}")
        return EXIT_FATAL
    finally:
        _flush_reject_log(reject_log, logger)

    if args.copy:
        copied = asyncio.run(_copy_table(pipeline, rows, args.copy, cfg.copied_display_seconds))
        if copied:
            logger.info(f"copied {args.copy} table to clipboard")
        else:
            logger.warning(f"could not copy {args.copy} table to clipboard")

    # log_summary adds the "SUMMARY " label itself
    log_summary(render_summary_line(result)[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
