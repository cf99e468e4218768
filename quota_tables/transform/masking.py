from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .constants import CORES, NOT_APPLICABLE, ZONAL_REQUEST_TYPES, ZONE
from .validity import request_type_of

"""Per-cell masking rule.

Core counts mean nothing for a zonal enablement and a zone means nothing for
any other request type. The column stays in the table either way; only the
cell is replaced with the N/A sentinel so every row keeps the same shape.
"""

__all__ = [
    "is_zonal",
    "mask",
]


def is_zonal(row: Mapping[str, Any]) -> bool:
    return request_type_of(row) in ZONAL_REQUEST_TYPES


def mask(row: Mapping[str, Any], header: str, value: Any) -> Any:
    """Return *value*, or the N/A sentinel when *header* does not apply to *row*."""
    if header == CORES and is_zonal(row):
        return NOT_APPLICABLE
    if header == ZONE and not is_zonal(row):
        return NOT_APPLICABLE
    return value
