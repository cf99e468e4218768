"""Table serializers: clipboard HTML, clipboard plain text, xlsx workbooks."""

from .html import escape_html, render_clipboard_html
from .text import render_clipboard_text
from .workbook import export_filename, render_workbook, write_workbook

__all__ = [
    "escape_html",
    "export_filename",
    "render_clipboard_html",
    "render_clipboard_text",
    "render_workbook",
    "write_workbook",
]
