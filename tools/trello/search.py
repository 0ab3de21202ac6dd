"""
Trello search — find cards with Trello's search operators.
"""

from mcp.types import Tool, TextContent, ToolAnnotations

from config import Settings
from tools.trello.client import trello_request, text_result, CARD_FIELDS

QUERY_DESCRIPTION = """Search query with optional operators:
@name or member:name - Cards assigned to a member. @me for your cards.
#label or label:name - Cards with a specific label.
board:id or board:keyword - Cards from a specific board or boards matching keyword.
list:name - Cards within a specific list.
has:attachments - Cards with attachments. Also: has:description, has:cover, has:members, has:stickers.
due:day - Cards due in 24 hours. Also: due:week, due:month, due:overdue, or due:14 for next 14 days.
edited:day - Cards edited in last 24 hours. Also: edited:week, edited:month, or edited:21 for last 21 days.
description:text, checklist:text, comment:text, name:text - Match text in card fields.
is:open, is:complete, is:incomplete, is:starred - Filter by card status.
sort:created, sort:edited, sort:due - Sort results."""

TOOL = Tool(
    name="search",
    title="Search",
    description="Search for Trello cards using various search operators.",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": QUERY_DESCRIPTION
            }
        },
        "required": ["query"],
        "additionalProperties": False
    },
    annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=True),
)


async def handle(arguments: dict, settings: Settings) -> list[TextContent]:
    """Handle search tool call."""
    # Operators are passed through untouched; Trello parses them
    result = await trello_request(
        "search", settings.credentials,
        query_params={
            "query": arguments["query"],
            "modelTypes": "cards",
            "card_fields": CARD_FIELDS,
        },
        timeout=settings.timeout,
    )
    return text_result(result)
