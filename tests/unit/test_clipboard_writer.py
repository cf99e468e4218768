from __future__ import annotations

import asyncio
from unittest.mock import patch

import quota_tables.clipboard.writer as writer_module
from quota_tables.clipboard.backends import (
    MIME_HTML,
    MIME_TEXT,
    CopyEventDispatcher,
    MemoryClipboard,
    UnavailableClipboard,
)
from quota_tables.clipboard.writer import ClipboardState, ClipboardWriter


class SlowClipboard:
    """Structured backend that records the writer state mid-write."""

    def __init__(self, writer_ref: list) -> None:
        self.writer_ref = writer_ref
        self.seen_state = None

    async def write(self, payloads):
        self.seen_state = self.writer_ref[0].state
        await asyncio.sleep(0)


class BrokenLegacy(CopyEventDispatcher):
    def exec_copy(self) -> bool:
        raise RuntimeError("copy command rejected")


def test_structured_write_succeeds_and_resets():
    async def scenario():
        board = MemoryClipboard()
        writer = ClipboardWriter(board, None, copied_seconds=0.01)
        assert await writer.copy("<b>x</b>", "x") is True
        assert board.contents == {MIME_HTML: "<b>x</b>", MIME_TEXT: "x"}
        assert writer.copied
        assert writer.state is ClipboardState.SUCCESS
        await asyncio.sleep(0.05)
        return writer

    writer = asyncio.run(scenario())
    assert writer.state is ClipboardState.IDLE
    assert not writer.copied


def test_state_is_writing_during_structured_write():
    async def scenario():
        ref: list = []
        backend = SlowClipboard(ref)
        writer = ClipboardWriter(backend, None, copied_seconds=0.01)
        ref.append(writer)
        await writer.copy("h", "t")
        return backend

    assert asyncio.run(scenario()).seen_state is ClipboardState.WRITING


def test_fallback_injects_both_payloads():
    async def scenario():
        legacy = MemoryClipboard()
        writer = ClipboardWriter(UnavailableClipboard(), legacy, copied_seconds=0.01)
        with patch.object(writer_module.logger, "warning") as warning:
            ok = await writer.copy("<table/>", "a\tb")
        return ok, writer, legacy, warning

    ok, writer, legacy, warning = asyncio.run(scenario())
    assert ok is True
    assert legacy.contents == {MIME_HTML: "<table/>", MIME_TEXT: "a\tb"}
    assert legacy._listeners == []
    assert "trying fallback" in warning.call_args.args[0]


def test_fallback_failure_returns_false_and_goes_idle():
    async def scenario():
        # no listener commits when exec_copy raises
        writer = ClipboardWriter(UnavailableClipboard(), BrokenLegacy(), copied_seconds=0.01)
        with patch.object(writer_module.logger, "error") as error:
            ok = await writer.copy("h", "t")
        return ok, writer, error

    ok, writer, error = asyncio.run(scenario())
    assert ok is False
    assert writer.state is ClipboardState.IDLE
    assert not writer.copied
    messages = [c.args[0] for c in error.call_args_list]
    assert "all copy methods failed" in messages
    assert writer._legacy._listeners == []


def test_no_backends_never_raises():
    async def scenario():
        writer = ClipboardWriter(None, None)
        with patch.object(writer_module.logger, "error"):
            return await writer.copy("h", "t"), writer

    ok, writer = asyncio.run(scenario())
    assert ok is False
    assert writer.state is ClipboardState.IDLE


def test_second_copy_restarts_the_indicator():
    async def scenario():
        writer = ClipboardWriter(MemoryClipboard(), None, copied_seconds=0.05)
        await writer.copy("a", "a")
        await asyncio.sleep(0.03)
        await writer.copy("b", "b")
        await asyncio.sleep(0.03)
        # first timer was cancelled
        return writer.copied

    assert asyncio.run(scenario()) is True


def test_copy_table_renders_both_formats():
    async def scenario():
        board = MemoryClipboard()
        writer = ClipboardWriter(board, None, copied_seconds=0.01)
        ok = await writer.copy_table(["Region"], [{"Region": "east & west"}], title="Unified Table")
        return ok, board

    ok, board = asyncio.run(scenario())
    assert ok
    assert "east &amp; west" in board.contents[MIME_HTML]
    assert "<h2>Unified Table</h2>" in board.contents[MIME_HTML]
    assert board.contents[MIME_TEXT] == "Region\neast & west"


def test_dispatcher_commits_nothing_without_prevent_default():
    board = MemoryClipboard()
    board.add_copy_listener(lambda event: event.set_data(MIME_TEXT, "x"))
    assert board.exec_copy() is False
    assert board.contents == {}


def test_copy_table_accepts_a_generator():
    async def scenario():
        board = MemoryClipboard()
        writer = ClipboardWriter(board, None, copied_seconds=0.01)
        rows = ({"Region": region} for region in ("eastus", "westus"))
        await writer.copy_table(["Region"], rows)
        return board

    board = asyncio.run(scenario())
    assert board.contents[MIME_TEXT] == "Region\neastus\nwestus"
    assert "<td>westus</td>" in board.contents[MIME_HTML]
