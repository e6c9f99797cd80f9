"""Tests for the MCP server wiring."""

import asyncio
import threading

import mcp.types as types
import pytest

import writing_tools.server as server_module
from writing_tools.config import Settings
from writing_tools.server import create_server
from writing_tools.tools import call_tool


@pytest.fixture
def server():
    return create_server(Settings(tool_prefix="wt_", server_name="writing-tools-test"))


def _call(server, name: str, arguments: dict) -> types.CallToolResult:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(handler(request)).root


class TestServer:
    """Test tool listing and calls through the MCP request handlers."""

    def test_name(self, server):
        assert server.name == "writing-tools-test"

    def test_list_tools(self, server):
        handler = server.request_handlers[types.ListToolsRequest]
        result = asyncio.run(handler(types.ListToolsRequest(method="tools/list"))).root
        names = [tool.name for tool in result.tools]
        assert names == [
            "wt_timestamp",
            "wt_count_chars",
            "wt_count_chars_range",
            "wt_dialogue_ratio",
            "wt_dialogue_ratio_range",
        ]
        assert all(tool.inputSchema["type"] == "object" for tool in result.tools)

    def test_call_returns_text_and_structured_content(self, server, tmp_path):
        path = tmp_path / "scene.txt"
        path.write_text("「こんにちは」と彼は言った。\n", encoding="utf-8")

        result = _call(server, "wt_dialogue_ratio", {"path": str(path)})

        assert not result.isError
        assert result.content[0].text.startswith(f"{path} dialogue=5 narration=7")
        assert result.structuredContent["dialogue_chars"] == 5
        assert result.structuredContent["narration_chars"] == 7

    def test_invalid_arguments_reported_as_error(self, server, tmp_path):
        result = _call(
            server,
            "wt_count_chars_range",
            {"path": str(tmp_path / "a.txt"), "start_line": 4, "end_line": 2},
        )
        assert result.isError
        assert "start_line must be <= end_line" in result.content[0].text

    def test_unreadable_file_reported_as_error(self, server, tmp_path):
        result = _call(server, "wt_count_chars", {"path": str(tmp_path / "missing.txt")})
        assert result.isError
        assert "file not found" in result.content[0].text

    def test_tool_runs_off_the_event_loop_thread(self, server, tmp_path, monkeypatch):
        path = tmp_path / "scene.txt"
        path.write_text("地の文\n", encoding="utf-8")
        threads = []

        def recording_call_tool(*args, **kwargs):
            threads.append(threading.get_ident())
            return call_tool(*args, **kwargs)

        monkeypatch.setattr(server_module, "call_tool", recording_call_tool)
        result = _call(server, "wt_count_chars", {"path": str(path)})

        assert not result.isError
        assert result.structuredContent["character_count"] == 3
        assert threads and threads[0] != threading.get_ident()
