"""
Trello card update — rename, describe, move, archive, assign or reposition a card.

Every supplied field other than the card ID is sent as a query parameter on
PUT /cards/{id}.
"""

from mcp.types import Tool, TextContent, ToolAnnotations

from config import Settings
from tools.trello.client import trello_request, text_result

TOOL = Tool(
    name="update-card",
    title="Update Card",
    description="Updates a Trello card with new values.",
    inputSchema={
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "minLength": 1,
                "description": "The ID of the card to update"
            },
            "name": {
                "type": "string",
                "description": "New name for the card"
            },
            "desc": {
                "type": "string",
                "description": "New description for the card"
            },
            "due": {
                "type": "string",
                "description": "Due date (ISO 8601 format) or null to remove"
            },
            "dueComplete": {
                "type": "boolean",
                "description": "Whether the due date is marked complete"
            },
            "idList": {
                "type": "string",
                "description": "ID of the list to move the card to"
            },
            "idBoard": {
                "type": "string",
                "description": "ID of the board to move the card to"
            },
            "closed": {
                "type": "boolean",
                "description": "Whether the card is archived"
            },
            "idMembers": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of member IDs to assign to the card"
            },
            "idLabels": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of label IDs to assign to the card"
            },
            "pos": {
                "anyOf": [
                    {"type": "number"},
                    {"type": "string", "enum": ["top", "bottom"]}
                ],
                "description": "Position of the card"
            }
        },
        "required": ["id"],
        "additionalProperties": False
    },
    annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=True),
)


async def handle(arguments: dict, settings: Settings) -> list[TextContent]:
    """Handle update-card tool call."""
    updates = dict(arguments)
    card_id = updates.pop("id")

    updated_card = await trello_request(
        f"cards/{card_id}", settings.credentials,
        method="PUT",
        query_params=updates,
        timeout=settings.timeout,
    )
    return text_result(updated_card)
