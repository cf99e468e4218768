from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Protocol

"""Clipboard capability interfaces and concrete backends.

Two write paths exist:

- structured: one call accepting several MIME payloads at once
- legacy: a synchronous "copy" action whose payload is injected by listeners
  hooked on the copy event (the browser ``execCommand('copy')`` pattern)

Platform quirks stay in this module; the writer only sees the protocols.
"""

__all__ = [
    "MIME_HTML",
    "MIME_TEXT",
    "ClipboardUnavailable",
    "StructuredClipboard",
    "LegacyClipboard",
    "CopyEvent",
    "CopyListener",
    "CopyEventDispatcher",
    "MemoryClipboard",
    "TkClipboard",
    "UnavailableClipboard",
]

logger = logging.getLogger(__name__)

MIME_HTML = "text/html"
MIME_TEXT = "text/plain"


class ClipboardUnavailable(Exception):
    """Raised by a structured backend that cannot write on this platform."""


class StructuredClipboard(Protocol):
    async def write(self, payloads: Mapping[str, str]) -> None: ...


class CopyEvent:
    """Payload carrier handed to copy listeners."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.default_prevented = False

    def set_data(self, mime: str, data: str) -> None:
        self.data[mime] = data

    def prevent_default(self) -> None:
        self.default_prevented = True


CopyListener = Callable[[CopyEvent], None]


class LegacyClipboard(Protocol):
    def add_copy_listener(self, listener: CopyListener) -> None: ...

    def remove_copy_listener(self, listener: CopyListener) -> None: ...

    def exec_copy(self) -> bool: ...


class CopyEventDispatcher:
    """Listener registry + copy trigger shared by the legacy backends.

    ``exec_copy`` fires a CopyEvent through the registered listeners and
    commits whatever they injected. Nothing is committed unless a listener
    called ``prevent_default`` and supplied data.
    """

    def __init__(self) -> None:
        self._listeners: list[CopyListener] = []

    def add_copy_listener(self, listener: CopyListener) -> None:
        self._listeners.append(listener)

    def remove_copy_listener(self, listener: CopyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def exec_copy(self) -> bool:
        event = CopyEvent()
        for listener in list(self._listeners):
            listener(event)
        if not event.default_prevented or not event.data:
            return False
        return self._commit(event.data)

    def _commit(self, data: Mapping[str, str]) -> bool:  # pragma: no cover - overridden
        raise NotImplementedError


class MemoryClipboard(CopyEventDispatcher):
    """In-process clipboard implementing both paths (headless runs, tests)."""

    def __init__(self, *, structured_available: bool = True) -> None:
        super().__init__()
        self.structured_available = structured_available
        self.contents: dict[str, str] = {}

    async def write(self, payloads: Mapping[str, str]) -> None:
        if not self.structured_available:
            raise ClipboardUnavailable("structured clipboard disabled")
        self.contents = dict(payloads)

    def _commit(self, data: Mapping[str, str]) -> bool:
        self.contents = dict(data)
        return True


class UnavailableClipboard:
    """Structured path for platforms without a multi-MIME clipboard API."""

    async def write(self, payloads: Mapping[str, str]) -> None:
        raise ClipboardUnavailable("structured clipboard write not available")


class TkClipboard(CopyEventDispatcher):
    """Legacy path through tkinter's clipboard (plain-text payload only).

    Tk has no HTML flavour, so the TSV payload is what reaches the system
    clipboard; spreadsheets still split it into cells on paste.
    """

    def _commit(self, data: Mapping[str, str]) -> bool:
        text = data.get(MIME_TEXT)
        if text is None:
            return False
        try:
            import tkinter as tk
        except ImportError as e:
            logger.debug(f"tkinter not available: {e}")
            return False
        try:
            root = tk.Tk()
        except tk.TclError as e:  # no display
            logger.debug(f"tkinter clipboard unavailable: {e}")
            return False
        try:
            root.withdraw()
            root.clipboard_clear()
            root.clipboard_append(text)
            root.update()
        except tk.TclError as e:
            logger.debug(f"tkinter clipboard write failed: {e}")
            return False
        finally:
            root.destroy()
        return True
