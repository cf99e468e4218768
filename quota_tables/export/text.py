from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..transform.normalize import normalize

"""Plain-text (TSV) clipboard payload. Spreadsheets split it back into cells."""

__all__ = [
    "render_clipboard_text",
]

_CELL_BREAKS = re.compile(r"[\t\r\n]+")


def _cell(value: Any) -> str:
    # tabs / newlines inside a cell would shift the grid when pasted
    return _CELL_BREAKS.sub(" ", normalize(value))


def render_clipboard_text(headers: Sequence[str], rows: Iterable[Mapping[str, Any]]) -> str:
    lines = ["\t".join(_cell(h) for h in headers)]
    for row in rows:
        lines.append("\t".join(_cell(row.get(h)) for h in headers))
    return "\n".join(lines)
