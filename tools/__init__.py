"""
Trello MCP Tools - Tool definitions and dispatcher.
"""

from mcp.types import Tool, TextContent

from config import Settings
from tools import trello


# Collect all tools
TOOLS: list[Tool] = [
    *trello.TOOLS,
]

# Map tool names to handlers
_HANDLERS = {
    **trello.HANDLERS,
}


async def call_tool(name: str, arguments: dict | None, settings: Settings) -> list[TextContent]:
    """Dispatch a tool call to the appropriate handler."""
    handler = _HANDLERS.get(name)
    if handler is None:
        raise ValueError(f"Unknown tool: {name}")
    return await handler(arguments or {}, settings)
