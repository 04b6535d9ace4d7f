"""MCP server exposing the RackCoach tools.

Wraps the functions from `tools.py` so MCP clients (agents, editors) can
ask for word recommendations and reroll advice over stdio.

Usage:
    python -m rackcoach mcp
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .. import __version__, config
from ..core.dictionary import get_dictionary
from . import tools

log = logging.getLogger("rackcoach.mcp")

server = Server(
    name="rackcoach",
    version=__version__,
    instructions=(
        "RackCoach MCP Server - recommends the best words for a letter rack "
        "with bonus-aware scoring and suggests which letters to reroll."
    ),
)

_LETTER_LIST = {
    "type": "array",
    "items": {"type": "string", "minLength": 1, "maxLength": 1},
}

TOOL_SCHEMAS: dict[str, dict[str, Any]] = {
    "solve_rack": {
        "name": "solve_rack",
        "description": "Rank playable words for a rack and suggest rerolls",
        "inputSchema": {
            "type": "object",
            "properties": {
                "rack_letters": {**_LETTER_LIST, "description": "Rack letters in order"},
                "target_word_length": {"type": "integer", "minimum": 2, "maximum": 15},
                "invalid_words": {"type": "array", "items": {"type": "string"}},
                "rack_bonuses": {
                    "type": "array",
                    "items": {"type": "string", "enum": ["NONE", "DL", "TL", "DW", "TW"]},
                    "description": "Bonus per word position",
                },
                "round": {"type": "integer", "minimum": 1, "maximum": 5},
            },
            "required": ["rack_letters"],
        },
    },
    "score_word": {
        "name": "score_word",
        "description": "Score one word with position bonuses and round multiplier",
        "inputSchema": {
            "type": "object",
            "properties": {
                "word": {"type": "string"},
                "rack_bonuses": {"type": "array", "items": {"type": "string"}},
                "round": {"type": "integer", "minimum": 1, "maximum": 5},
            },
            "required": ["word"],
        },
    },
    "reroll_probability": {
        "name": "reroll_probability",
        "description": "Chance of drawing at least one desired letter on reroll",
        "inputSchema": {
            "type": "object",
            "properties": {
                "keep_letters": _LETTER_LIST,
                "reroll_letters": _LETTER_LIST,
                "desired_letters": _LETTER_LIST,
            },
            "required": ["keep_letters", "reroll_letters", "desired_letters"],
        },
    },
    "get_tile_values": {
        "name": "get_tile_values",
        "description": "Letter point values and tile distribution",
        "inputSchema": {"type": "object", "properties": {}},
    },
}


# ========== MCP Server Handlers ==========


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available RackCoach tools."""
    tool_list = [
        Tool(
            name=schema["name"],
            description=schema["description"],
            inputSchema=schema["inputSchema"],
        )
        for schema in TOOL_SCHEMAS.values()
    ]
    log.debug("Listed %d tools", len(tool_list))
    return tool_list


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls from MCP clients."""
    log.info("Tool called: %s", name)

    try:
        tool_func = tools.get_tool_function(name)
        result = tool_func(**(arguments or {}))
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except tools.ToolNotFoundError:
        error_msg = f"Tool not found: {name}"
        log.error(error_msg)
        return [TextContent(type="text", text=json.dumps({"error": error_msg}))]

    except TypeError as e:
        error_msg = f"Bad arguments for tool {name}: {e}"
        log.warning(error_msg)
        return [
            TextContent(
                type="text",
                text=json.dumps({"error": error_msg, "type": type(e).__name__}),
            )
        ]

    except Exception as e:
        error_msg = f"Error calling tool {name}: {e}"
        log.exception(error_msg)
        return [
            TextContent(
                type="text",
                text=json.dumps({"error": error_msg, "type": type(e).__name__}),
            )
        ]


# ========== Server Entry Point ==========


async def main() -> None:
    """Run the MCP server with stdio transport."""
    log.info("Starting RackCoach MCP Server...")
    if config.preload_dictionary():
        get_dictionary()

    async with stdio_server() as (read_stream, write_stream):
        log.info("Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run_server() -> None:
    """Synchronous entry point for running the server."""
    asyncio.run(main())
