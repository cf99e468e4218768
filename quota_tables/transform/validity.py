from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .constants import (
    NOT_APPLICABLE,
    REGION,
    REQUEST_TYPE,
    SUBSCRIPTION_ID,
    UNKNOWN_REQUEST_TYPES,
    VM_TYPE,
)
from .normalize import normalize

"""Row validity filter.

A request row is exported only when it is not an "Unknown" request and it can
be located: either by subscription, or by a VM type + region pair. The two
shapes correspond to subscription-scoped and region/VM-scoped requests.
"""

__all__ = [
    "REJECT_UNKNOWN_REQUEST_TYPE",
    "REJECT_MISSING_LOCATOR",
    "request_type_of",
    "rejection_reason",
    "is_valid",
    "filter_valid",
]

REJECT_UNKNOWN_REQUEST_TYPE = "UNKNOWN_REQUEST_TYPE"
REJECT_MISSING_LOCATOR = "MISSING_LOCATOR"


def request_type_of(row: Mapping[str, Any]) -> str:
    """Trimmed request type; absent or empty values read as ``""``."""
    return normalize(row.get(REQUEST_TYPE))


def _present(row: Mapping[str, Any], column: str) -> bool:
    value = normalize(row.get(column))
    return value != "" and value != NOT_APPLICABLE


def rejection_reason(row: Mapping[str, Any]) -> str | None:
    """Return why *row* is excluded from every view, or None when it is valid.

    Rules (in order):
        1. request type is the Unknown sentinel (either language) -> reject
        2. non-empty Subscription ID -> accept
        3. VM Type and Region both present and not N/A -> accept
        4. otherwise -> reject
    """
    if request_type_of(row) in UNKNOWN_REQUEST_TYPES:
        return REJECT_UNKNOWN_REQUEST_TYPE
    if normalize(row.get(SUBSCRIPTION_ID)) != "":
        return None
    if _present(row, VM_TYPE) and _present(row, REGION):
        return None
    return REJECT_MISSING_LOCATOR


def is_valid(row: Mapping[str, Any]) -> bool:
    return rejection_reason(row) is None


def filter_valid(rows: Iterable[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    return [row for row in rows if is_valid(row)]
