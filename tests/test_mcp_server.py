"""Tests for the MCP server wrapper.

These tests verify that:
1. The server instance and tool schemas are defined
2. Every schema routes to a registered tool
3. Tool calls return JSON text content, errors included
"""

from __future__ import annotations

import asyncio
import json

from rackcoach.service import mcp_server, tools


def test_server_instance_created() -> None:
    assert mcp_server.server is not None
    assert mcp_server.server.name == "rackcoach"


def test_tool_schemas_defined() -> None:
    assert len(mcp_server.TOOL_SCHEMAS) > 0
    for tool_name, schema in mcp_server.TOOL_SCHEMAS.items():
        assert schema["name"] == tool_name
        assert schema["description"]
        assert schema["inputSchema"]["type"] == "object"


def test_all_schemas_have_tool_functions() -> None:
    tool_names = tools.get_all_tool_names()
    for schema_name in mcp_server.TOOL_SCHEMAS:
        assert schema_name in tool_names, f"Schema {schema_name} has no tool function"


def test_list_tools() -> None:
    listed = asyncio.run(mcp_server.list_tools())
    assert {tool.name for tool in listed} == set(mcp_server.TOOL_SCHEMAS)


def test_call_tool_returns_json() -> None:
    content = asyncio.run(mcp_server.call_tool("score_word", {"word": "CAT"}))
    assert len(content) == 1
    assert content[0].type == "text"
    assert json.loads(content[0].text)["total"] == 6


def test_call_tool_without_arguments() -> None:
    content = asyncio.run(mcp_server.call_tool("get_tile_values", {}))
    assert json.loads(content[0].text)["values"]["Z"] == 10


def test_call_unknown_tool() -> None:
    content = asyncio.run(mcp_server.call_tool("nonexistent", {}))
    assert json.loads(content[0].text) == {"error": "Tool not found: nonexistent"}


def test_call_tool_with_bad_arguments() -> None:
    content = asyncio.run(mcp_server.call_tool("score_word", {"nope": 1}))
    payload = json.loads(content[0].text)
    assert payload["type"] == "TypeError"
    assert "score_word" in payload["error"]


def test_call_tool_reports_unexpected_errors() -> None:
    content = asyncio.run(mcp_server.call_tool("score_word", {"word": 5}))
    payload = json.loads(content[0].text)
    assert payload["type"] == "AttributeError"
    assert payload["error"].startswith("Error calling tool score_word")
