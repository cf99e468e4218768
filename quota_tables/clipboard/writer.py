from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

from .backends import (
    MIME_HTML,
    MIME_TEXT,
    ClipboardUnavailable,
    CopyEvent,
    LegacyClipboard,
    StructuredClipboard,
)
from ..export.html import render_clipboard_html
from ..export.text import render_clipboard_text

"""Two-tier clipboard writer.

State transitions: IDLE -> WRITING -> (SUCCESS | FALLBACK) -> IDLE

- WRITING: structured write of the HTML + plain-text payloads
- SUCCESS: ``copied`` is True for ``copied_seconds`` then the writer returns
  to IDLE on its own
- FALLBACK: one-shot copy-event listener injects the same payloads and the
  legacy copy action is triggered; if that fails too the writer logs and
  goes back to IDLE

``copy`` never raises for clipboard failures.
"""

__all__ = [
    "ClipboardState",
    "ClipboardWriter",
    "COPIED_DISPLAY_SECONDS",
]

logger = logging.getLogger(__name__)

COPIED_DISPLAY_SECONDS = 2.0


class ClipboardState(Enum):
    IDLE = "idle"
    WRITING = "writing"
    SUCCESS = "success"
    FALLBACK = "fallback"


class ClipboardWriter:
    def __init__(
        self,
        structured: StructuredClipboard | None,
        legacy: LegacyClipboard | None,
        *,
        copied_seconds: float = COPIED_DISPLAY_SECONDS,
    ) -> None:
        self._structured = structured
        self._legacy = legacy
        self.copied_seconds = copied_seconds
        self._state = ClipboardState.IDLE
        self._reset_handle: asyncio.TimerHandle | None = None

    @property
    def state(self) -> ClipboardState:
        return self._state

    @property
    def copied(self) -> bool:
        """Transient "copied" indicator."""
        return self._state is ClipboardState.SUCCESS

    async def copy(self, html: str, text: str) -> bool:
        """Copy both payloads; returns True when either path succeeded."""
        self._cancel_reset()
        self._state = ClipboardState.WRITING
        payloads = {MIME_HTML: html, MIME_TEXT: text}
        try:
            if self._structured is None:
                raise ClipboardUnavailable("no structured clipboard configured")
            await self._structured.write(payloads)
        except Exception as e:
            logger.warning(f"structured clipboard write failed, trying fallback: {e}")
            self._state = ClipboardState.FALLBACK
            if self._copy_via_event(payloads):
                self._mark_copied()
                return True
            logger.error("all copy methods failed")
            self._state = ClipboardState.IDLE
            return False
        self._mark_copied()
        return True

    async def copy_table(
        self,
        headers: Sequence[str],
        rows: Iterable[Mapping[str, Any]],
        title: str | None = None,
    ) -> bool:
        """Copy a table as HTML + TSV; *rows* may be a one-shot iterator."""
        rows = list(rows)
        html = render_clipboard_html(headers, rows, title=title)
        text = render_clipboard_text(headers, rows)
        return await self.copy(html, text)

    def _copy_via_event(self, payloads: dict[str, str]) -> bool:
        if self._legacy is None:
            return False

        def inject(event: CopyEvent) -> None:
            event.prevent_default()
            for mime, data in payloads.items():
                event.set_data(mime, data)

        self._legacy.add_copy_listener(inject)
        try:
            return bool(self._legacy.exec_copy())
        except Exception as e:
            logger.error(f"legacy copy failed: {e}")
            return False
        finally:
            self._legacy.remove_copy_listener(inject)

    def _mark_copied(self) -> None:
        self._state = ClipboardState.SUCCESS
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self.copied_seconds, self._reset)

    def _reset(self) -> None:
        self._reset_handle = None
        self._state = ClipboardState.IDLE

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None
