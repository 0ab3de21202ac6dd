"""
Trello board cards — every open card on one board.
"""

from mcp.types import Tool, TextContent, ToolAnnotations

from config import Settings
from tools.trello.client import trello_request, text_result, CARD_FIELDS

TOOL = Tool(
    name="get-board-cards",
    title="Get Board Cards",
    description="Get all of the open cards on a board.",
    inputSchema={
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "minLength": 1,
                "description": "The ID of the board"
            }
        },
        "required": ["id"],
        "additionalProperties": False
    },
    annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=True),
)


async def handle(arguments: dict, settings: Settings) -> list[TextContent]:
    """Handle get-board-cards tool call."""
    cards = await trello_request(
        f"boards/{arguments['id']}/cards", settings.credentials,
        query_params={"fields": CARD_FIELDS},
        timeout=settings.timeout,
    )
    return text_result(cards)
