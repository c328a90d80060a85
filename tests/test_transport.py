"""Tests for the line-framed stdio transport."""

import asyncio
import io
import json

import pytest

from wpmcp.server.protocol import ProtocolError, PARSE_ERROR, INVALID_REQUEST
from wpmcp.server.transport import StdioTransport


async def _transport(data: bytes, limit: int = 2**16):
    reader = asyncio.StreamReader(limit=limit)
    reader.feed_data(data)
    reader.feed_eof()
    out = io.BytesIO()
    transport = StdioTransport(reader=reader, writer=out)
    await transport.start()
    return transport, out


class TestRead:
    @pytest.mark.asyncio
    async def test_reads_one_message_per_line(self):
        transport, _ = await _transport(b'{"a": 1}\n{"b": 2}\n')
        assert (await transport.read_message())[1] == {"a": 1}
        assert (await transport.read_message())[1] == {"b": 2}
        assert await transport.read_message() is None

    @pytest.mark.asyncio
    async def test_returns_raw_bytes(self):
        transport, _ = await _transport(b'{"a": 1}\n')
        raw, _ = await transport.read_message()
        assert raw == b'{"a": 1}\n'

    @pytest.mark.asyncio
    async def test_skips_blank_lines(self):
        transport, _ = await _transport(b'\n  \n{"a": 1}\n\n')
        assert (await transport.read_message())[1] == {"a": 1}
        assert await transport.read_message() is None

    @pytest.mark.asyncio
    async def test_last_line_without_newline(self):
        transport, _ = await _transport(b'{"a": 1}')
        assert (await transport.read_message())[1] == {"a": 1}

    @pytest.mark.asyncio
    async def test_parse_error_then_continue(self):
        transport, _ = await _transport(b'{broken\n{"ok": true}\n')
        with pytest.raises(ProtocolError) as exc_info:
            await transport.read_message()
        assert exc_info.value.code == PARSE_ERROR
        assert (await transport.read_message())[1] == {"ok": True}

    @pytest.mark.asyncio
    async def test_invalid_utf8(self):
        transport, _ = await _transport(b'"\xff\xfe"\n')
        with pytest.raises(ProtocolError) as exc_info:
            await transport.read_message()
        assert exc_info.value.code == PARSE_ERROR

    @pytest.mark.asyncio
    async def test_oversized_line_is_dropped(self):
        transport, _ = await _transport(b'"' + b"x" * 64 + b'"\n{"a": 1}\n', limit=32)
        with pytest.raises(ProtocolError) as exc_info:
            await transport.read_message()
        assert exc_info.value.code == INVALID_REQUEST
        assert (await transport.read_message())[1] == {"a": 1}

    @pytest.mark.asyncio
    async def test_not_started(self):
        with pytest.raises(RuntimeError):
            await StdioTransport().read_message()


class TestWrite:
    @pytest.mark.asyncio
    async def test_compact_line(self):
        transport, out = await _transport(b"")
        await transport.write_message({"jsonrpc": "2.0", "id": 1, "result": {"text": "café"}})
        raw = out.getvalue()
        assert raw.endswith(b"\n")
        assert raw.count(b"\n") == 1
        assert raw == '{"jsonrpc":"2.0","id":1,"result":{"text":"café"}}\n'.encode("utf-8")

    @pytest.mark.asyncio
    async def test_embedded_newlines_are_escaped(self):
        transport, out = await _transport(b"")
        await transport.write_message({"text": "a\nb"})
        assert out.getvalue().count(b"\n") == 1
        assert json.loads(out.getvalue()) == {"text": "a\nb"}

    @pytest.mark.asyncio
    async def test_close(self):
        transport, _ = await _transport(b"")
        assert transport.running
        await transport.close()
        assert not transport.running


class TestOversizedSplitLine:
    @pytest.mark.asyncio
    async def test_one_error_for_line_arriving_in_pieces(self):
        reader = asyncio.StreamReader(limit=64)
        transport = StdioTransport(reader=reader, writer=io.BytesIO())
        await transport.start()

        reader.feed_data(b'"' + b"x" * 160)
        pending = asyncio.create_task(transport.read_message())
        for _ in range(5):
            await asyncio.sleep(0)
        assert not pending.done()

        reader.feed_data(b"x" * 40 + b'"\n{"jsonrpc": "2.0", "id": 2, "method": "ping"}\n')
        reader.feed_eof()

        with pytest.raises(ProtocolError) as exc_info:
            await pending
        assert exc_info.value.code == INVALID_REQUEST
        assert (await transport.read_message())[1]["id"] == 2
        assert await transport.read_message() is None

    @pytest.mark.asyncio
    async def test_oversized_line_at_eof(self):
        transport, _ = await _transport(b"x" * 100, limit=32)
        with pytest.raises(ProtocolError):
            await transport.read_message()
        assert await transport.read_message() is None
