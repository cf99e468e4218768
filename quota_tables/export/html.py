from __future__ import annotations

import html
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..transform.normalize import normalize

"""Clipboard HTML fragment for pasting tables into Word / Outlook.

Word keeps inline ``<style>`` rules and the StartFragment/EndFragment markers
when the payload is pasted, so the styling is fixed here rather than left to
the consumer. All header and cell text is entity-escaped before it is
interpolated.
"""

__all__ = [
    "TABLE_STYLE",
    "escape_html",
    "render_clipboard_html",
]

TABLE_STYLE = (
    "table { border-collapse: collapse; width: auto; table-layout: auto; "
    "border: 1px solid #000000; font-family: Calibri, Arial, sans-serif; background-color: #ffffff; }\n"
    "th { background-color: #D3D3D3; color: #000000; font-weight: bold; border: 1px solid #000000; "
    "padding: 6px 10px; text-transform: uppercase; font-size: 10pt; text-align: center; }\n"
    "td { border: 1px solid #000000; padding: 6px 10px; color: #000000; font-size: 10pt; text-align: center; }\n"
    "h2 { font-family: Calibri, Arial, sans-serif; font-size: 14pt; color: #000000; margin-bottom: 10px; }"
)


def escape_html(text: str) -> str:
    # decimal apostrophe entity instead of html.escape's &#x27;
    return html.escape(text, quote=True).replace("&#x27;", "&#039;")


def render_clipboard_html(
    headers: Sequence[str],
    rows: Iterable[Mapping[str, Any]],
    title: str | None = None,
) -> str:
    """Render ``(headers, rows)`` as a self-contained HTML document.

    Args:
        headers: Column order; each row is read by these keys
        rows: Display rows (missing keys render as empty cells)
        title: Optional heading placed above the table

    Returns:
        HTML string with the table wrapped in StartFragment/EndFragment markers
    """
    head_cells = "".join(f'<th scope="col">{escape_html(h)}</th>' for h in headers)
    body_rows = "\n".join(
        "<tr>" + "".join(f"<td>{escape_html(normalize(row.get(h)))}</td>" for h in headers) + "</tr>"
        for row in rows
    )
    heading = f"<h2>{escape_html(title)}</h2>\n" if title else ""
    return (
        "<html>\n"
        "<head>\n"
        '<meta http-equiv="content-type" content="text/html; charset=utf-8">\n'
        f"<style>\n{TABLE_STYLE}\n</style>\n"
        "</head>\n"
        "<body>\n"
        "<!--StartFragment-->\n"
        f"{heading}"
        "<table>\n"
        f"<thead>\n<tr>{head_cells}</tr>\n</thead>\n"
        f"<tbody>\n{body_rows}\n</tbody>\n"
        "</table>\n"
        "<!--EndFragment-->\n"
        "</body>\n"
        "</html>\n"
    )
