from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import pandas as pd

from ..transform.constants import IDENTIFIER_COLUMN

"""Loader for pre-parsed request rows.

The upstream parser hands over rows either as JSON (a list of objects) or as a
flat table (``.xlsx`` / ``.csv``) whose first row holds the column names. No
cleanup happens here beyond turning missing cells into None; rows come back as
read-only mappings.

"N/A" is a real value in these tables (the not-applicable sentinel), so it is
excluded from pandas' default NaN strings when reading spreadsheets.
"""

__all__ = [
    "SourceError",
    "KEEP_NA_STRINGS",
    "load_rows",
    "load_categories",
    "rows_from_frame",
]

Row = Mapping[str, Any]

KEEP_NA_STRINGS = ("N/A", "NA", "n/a")


class SourceError(Exception):
    """Raised when the input file cannot be turned into rows."""


def _freeze(raw: Mapping[str, Any], where: str) -> Row:
    if not isinstance(raw, Mapping):
        raise SourceError(f"{where}: expected an object, got {type(raw).__name__}")
    if IDENTIFIER_COLUMN not in raw:
        raise SourceError(f"{where}: missing '{IDENTIFIER_COLUMN}'")
    return MappingProxyType({str(k).strip(): v for k, v in raw.items()})


def _na_values() -> list[str]:
    import pandas._libs.parsers as parsers

    return sorted(parsers.STR_NA_VALUES - set(KEEP_NA_STRINGS))


def rows_from_frame(df: pd.DataFrame, source_name: str = "frame") -> list[Row]:
    """Convert a DataFrame (header already applied) into read-only rows.

    Entirely empty rows are skipped; missing cells become None.
    """
    columns = [str(c).strip() for c in df.columns]
    if IDENTIFIER_COLUMN not in columns:
        raise SourceError(f"{source_name}: missing column '{IDENTIFIER_COLUMN}' (columns={columns})")
    rows: list[Row] = []
    for position, (_, raw) in enumerate(df.iterrows(), start=2):
        if raw.isna().all():
            continue
        values = {
            col: (None if pd.isna(val) else val)
            for col, val in zip(columns, raw.tolist(), strict=False)
        }
        rows.append(_freeze(values, f"{source_name} row {position}"))
    return rows


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SourceError(f"invalid json in {path.name}: {e}") from e


def load_rows(path: Path, sheet_name: str | int = 0) -> list[Row]:
    """Load rows from ``.json``, ``.xlsx`` or ``.csv``.

    Args:
        path: Input file produced by the upstream parser
        sheet_name: Sheet to read for ``.xlsx`` input (default: first sheet)

    Raises:
        SourceError: missing file, unsupported suffix, malformed content, or
            a row without ``Original ID``
    """
    if not path.exists():
        raise SourceError(f"source not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".json":
        data = _load_json(path)
        if not isinstance(data, list):
            raise SourceError(f"{path.name}: expected a list of rows, got {type(data).__name__}")
        return [_freeze(raw, f"{path.name} row {i}") for i, raw in enumerate(data, start=1)]
    if suffix == ".xlsx":
        df = pd.read_excel(
            path, sheet_name=sheet_name, dtype=object, keep_default_na=False, na_values=_na_values()
        )
        return rows_from_frame(df, path.name)
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=_na_values())
        return rows_from_frame(df, path.name)
    raise SourceError(f"unsupported source format: {path.suffix or '(none)'}")


def load_categories(path: Path) -> dict[str, list[Row]]:
    """Load a pre-built category map (JSON object: name -> list of rows)."""
    if not path.exists():
        raise SourceError(f"categories not found: {path}")
    data = _load_json(path)
    if not isinstance(data, dict):
        raise SourceError(f"{path.name}: expected an object of categories, got {type(data).__name__}")
    categories: dict[str, list[Row]] = {}
    for name, rows in data.items():
        if not isinstance(rows, list):
            raise SourceError(f"{path.name}: category '{name}' must be a list of rows")
        categories[str(name)] = [_freeze(raw, f"{path.name} {name} row {i}") for i, raw in enumerate(rows, start=1)]
    return categories
