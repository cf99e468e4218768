from __future__ import annotations

import math
from typing import Any

import pandas as pd

"""Single conversion point from raw cell values to display strings.

Upstream rows may carry ``None``, pandas missing markers (``NaN`` / ``NaT`` /
``pd.NA``) when they come from a spreadsheet reader, numbers, or strings with
stray whitespace. Every exported or displayed cell goes through ``normalize``
so the literal words ``None`` / ``nan`` never reach a table.
"""

__all__ = [
    "normalize",
    "is_blank",
]


def is_blank(value: Any) -> bool:
    """Return True when *value* would render as an empty cell."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    # list-likes are never blank cells (pd.isna would return an array)
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def normalize(value: Any) -> str:
    """Normalize a single cell value for display.

    Args:
        value: Raw cell value (any type, including None)

    Returns:
        ``""`` for absent/empty values, the trimmed string for strings,
        ``"8"`` for integral floats such as ``8.0``, ``str(value)`` otherwise.
    """
    if is_blank(value):
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)
