from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

"""Column visibility seam.

Columns used to be hidden when every row of a table left them empty. That
policy was retired in favour of per-cell masking (see masking.py) so that every
category renders the same grid. The resolver is still passed around as a
callable so a different policy can be plugged in without touching callers.
"""

__all__ = [
    "VisibilityPolicy",
    "resolve_visible",
]

VisibilityPolicy = Callable[[Sequence[str], Sequence[Mapping[str, Any]]], list[str]]


def resolve_visible(headers: Sequence[str], rows: Sequence[Mapping[str, Any]]) -> list[str]:
    """Return the headers to display for *rows* (currently all of them)."""
    return list(headers)
