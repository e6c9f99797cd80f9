"""MCP (Model Context Protocol) server exposing the writing tools over stdio."""

import asyncio
import logging
from typing import Any, Optional

import anyio.to_thread
import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import Server

from writing_tools import __version__
from writing_tools.config import Settings, get_settings
from writing_tools.errors import WritingToolsError
from writing_tools.tools import call_tool, list_tools

logger = logging.getLogger(__name__)


def create_server(settings: Optional[Settings] = None) -> Server:
    """Build a server with every tool registered under the configured prefix."""
    settings = settings or get_settings()
    server: Server = Server(settings.server_name, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=name,
                description=tool.description,
                inputSchema=tool.input_schema(),
            )
            for name, tool in list_tools(settings.tool_prefix)
        ]

    # Arguments are validated by the tool's own model, which also accepts
    # numeric strings for line numbers.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[dict[str, Any]]):
        logger.info("Tool call: %s %s", name, arguments)
        try:
            # Scans are blocking file reads; run them off the session loop
            response = await anyio.to_thread.run_sync(call_tool, name, arguments, settings.tool_prefix)
        except WritingToolsError as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            raise

        return [types.TextContent(type="text", text=response.text)], response.data

    return server


async def serve(settings: Optional[Settings] = None) -> None:
    """Run the server on stdin/stdout until the client disconnects."""
    server = create_server(settings)
    logger.info("Starting %s %s on stdio", server.name, __version__)

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run(settings: Optional[Settings] = None) -> None:
    asyncio.run(serve(settings))
