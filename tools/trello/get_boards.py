"""
Trello boards — list the open boards of the authenticated member.
"""

from mcp.types import Tool, TextContent, ToolAnnotations

from config import Settings
from tools.trello.client import trello_request, text_result, BOARD_FIELDS

TOOL = Tool(
    name="get-boards",
    title="Get Boards",
    description="Retrieves all open Trello boards for the authenticated user.",
    inputSchema={
        "type": "object",
        "properties": {}
    },
    annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=True),
)


async def handle(arguments: dict, settings: Settings) -> list[TextContent]:
    """Handle get-boards tool call."""
    boards = await trello_request(
        "members/me/boards", settings.credentials,
        query_params={"filter": "open", "fields": BOARD_FIELDS},
        timeout=settings.timeout,
    )
    return text_result(boards)
