"""Clipboard export with structured write and copy-event fallback."""

from .backends import (
    ClipboardUnavailable,
    CopyEvent,
    MemoryClipboard,
    TkClipboard,
    UnavailableClipboard,
)
from .writer import ClipboardState, ClipboardWriter

__all__ = [
    "ClipboardState",
    "ClipboardUnavailable",
    "ClipboardWriter",
    "CopyEvent",
    "MemoryClipboard",
    "TkClipboard",
    "UnavailableClipboard",
]
