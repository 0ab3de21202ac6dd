#!/usr/bin/env python3
"""
Trello MCP Server
A Model Context Protocol server exposing Trello boards, organizations and cards as tools.
"""

import asyncio
import logging
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

import tools
from config import ConfigError, Settings, load_settings

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

STARTUP_MESSAGE = "MCP server is listening..."


def create_server(settings: Settings) -> Server:
    """Create the MCP server with every Trello tool registered."""
    app = Server("trello", version=__version__)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """List available Trello tools."""
        return tools.TOOLS

    @app.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """Handle tool calls."""
        return await tools.call_tool(name, arguments, settings)

    return app


def configure_logging(level: str) -> None:
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def announce_ready() -> None:
    """Print the startup line to stderr regardless of LOG_LEVEL (stdout carries the protocol)."""
    print(STARTUP_MESSAGE, file=sys.stderr, flush=True)


async def main(settings: Settings) -> None:
    """Run the MCP server."""
    app = create_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        announce_ready()
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def run() -> None:
    """Console script entry point."""
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging("ERROR")
        logger.error(str(e))
        sys.exit(1)

    configure_logging(settings.log_level)
    asyncio.run(main(settings))


if __name__ == "__main__":
    run()
