from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .constants import IDENTIFIER_COLUMN, RDQUOTA_COLUMN, UNKNOWN_REQUEST_TYPES
from .dictionary import Translator
from .masking import mask
from .normalize import normalize

"""Row projection: raw request row -> display row.

For every visible header the raw value is masked, normalized and, when the
translator is enabled, translated once. The output key is the (possibly
translated) header. ``Original ID`` is always the first key and is copied
through untouched.
"""

__all__ = [
    "DisplayRow",
    "project",
    "project_rows",
    "display_headers",
    "with_identifier_column",
]

Row = Mapping[str, Any]
DisplayRow = dict[str, str]


def project(
    row: Row,
    visible_headers: Sequence[str],
    translator: Translator,
    *,
    blank_unknown: bool = False,
) -> DisplayRow:
    """Project one row onto *visible_headers*.

    Args:
        row: Upstream request row (never modified)
        visible_headers: Headers to emit, in order
        translator: Translation toggle and dictionary
        blank_unknown: Clear cells whose final value is the Unknown sentinel
            (unified tables hide leftover "Unknown" values)

    Returns:
        Ordered mapping ``{'Original ID': ..., <header>: <value>, ...}``
    """
    projected: DisplayRow = {IDENTIFIER_COLUMN: normalize(row.get(IDENTIFIER_COLUMN))}
    for header in visible_headers:
        value = normalize(mask(row, header, row.get(header)))
        value = translator.value(value)
        if blank_unknown and value in UNKNOWN_REQUEST_TYPES:
            value = ""
        projected[translator.header(header)] = value
    return projected


def project_rows(
    rows: Iterable[Row],
    visible_headers: Sequence[str],
    translator: Translator,
    *,
    blank_unknown: bool = False,
) -> list[DisplayRow]:
    return [project(row, visible_headers, translator, blank_unknown=blank_unknown) for row in rows]


def display_headers(visible_headers: Sequence[str], translator: Translator) -> list[str]:
    return [translator.header(h) for h in visible_headers]


def with_identifier_column(row: Row) -> dict[str, Any]:
    """Copy of *row* with ``RDQuota`` set to its identifier.

    Lets one request be traced across categorized and unified tables.
    """
    return {**row, RDQUOTA_COLUMN: row.get(IDENTIFIER_COLUMN)}
