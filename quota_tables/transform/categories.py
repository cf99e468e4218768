from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .constants import UNKNOWN_REQUEST_TYPES
from .validity import request_type_of

"""Category map helpers.

The category map normally arrives pre-built from the upstream parser; this
module only decides which buckets are shown and in what order. When no map is
supplied, ``group_by_request_type`` builds one from the rows themselves.
"""

__all__ = [
    "UNKNOWN_CATEGORY",
    "display_categories",
    "group_by_request_type",
]

UNKNOWN_CATEGORY = "Unknown"

Row = Mapping[str, Any]


def display_categories(category_map: Mapping[str, Sequence[Row]]) -> list[tuple[str, list[Row]]]:
    """Visible categories sorted by name, Unknown buckets removed."""
    return [
        (name, list(category_map[name]))
        for name in sorted(category_map)
        if name not in UNKNOWN_REQUEST_TYPES
    ]


def group_by_request_type(rows: Iterable[Row]) -> dict[str, list[Row]]:
    grouped: dict[str, list[Row]] = {}
    for row in rows:
        name = request_type_of(row) or UNKNOWN_CATEGORY
        grouped.setdefault(name, []).append(row)
    return grouped
