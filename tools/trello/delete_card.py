"""
Trello card delete — permanently remove a card.
"""

from mcp.types import Tool, TextContent, ToolAnnotations

from config import Settings
from tools.trello.client import trello_request, text_result

TOOL = Tool(
    name="delete-card",
    title="Delete Card",
    description="Delete a card.",
    inputSchema={
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "minLength": 1,
                "description": "The ID of the card to delete"
            }
        },
        "required": ["id"],
        "additionalProperties": False
    },
    annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True, openWorldHint=True),
)


async def handle(arguments: dict, settings: Settings) -> list[TextContent]:
    """Handle delete-card tool call."""
    result = await trello_request(
        f"cards/{arguments['id']}", settings.credentials,
        method="DELETE",
        timeout=settings.timeout,
    )
    return text_result(result)
