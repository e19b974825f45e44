"""MCP server exposing the ``generate_image`` tool over stdio."""

from __future__ import annotations

import asyncio
import sys

import mcp.server.stdio
import mcp.types as types
from loguru import logger
from mcp.server import Server

from image_generator import __version__
from image_generator.dispatcher import ImageToolDispatcher, to_tool_content
from image_generator.file_saver import FileSaver
from image_generator.generator import ImageGenerator
from image_generator.logging import setup_logger
from image_generator.settings import Settings, get_settings

SERVER_NAME = "image-generator"


def create_dispatcher(settings: Settings) -> ImageToolDispatcher:
    """Build the dispatcher with collaborators configured from *settings*."""
    saver = FileSaver.create_desktop_file_saver(settings.OUTPUT_DIR_NAME, base_dir=settings.OUTPUT_BASE_DIR)
    return ImageToolDispatcher(ImageGenerator.from_settings(settings), saver)


def create_mcp_server(dispatcher: ImageToolDispatcher) -> Server:
    """Create the MCP server and register the list-tools and call-tool handlers.

    The call-tool handler is installed directly in ``request_handlers`` rather
    than through ``@server.call_tool()``: that decorator turns every exception
    into an ``isError`` text result, while :class:`McpError` raised here must
    reach the session as a JSON-RPC error carrying its code.
    """

    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available tools."""
        return dispatcher.list_tools()

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        """Handle tool calls."""
        result = await dispatcher.call_tool(req.params.name, req.params.arguments)
        content, structured = to_tool_content(result)
        return types.ServerResult(
            types.CallToolResult(content=content, structuredContent=structured, isError=False)
        )

    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


async def run_server(settings: Settings | None = None) -> None:
    """Connect the server to stdin/stdout and serve until the stream closes."""
    settings = settings or get_settings()
    server = create_mcp_server(create_dispatcher(settings))

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        # stdout carries the protocol, so this goes to stderr via loguru
        logger.info("🚀 [MCP SERVER] {} {} running on stdio", SERVER_NAME, __version__)
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> int:
    """Console entry point. Returns the process exit status."""
    try:
        settings = get_settings()
    except ValueError as exc:
        setup_logger()
        logger.error("Invalid configuration: {}", exc)
        return 1

    setup_logger(settings.LOG_LEVEL, settings.LOG_DIR)  # type: ignore[arg-type]
    try:
        asyncio.run(run_server(settings))
    except KeyboardInterrupt:
        logger.info("🛑 [MCP SERVER] Interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
