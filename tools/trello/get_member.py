"""
Trello member — profile of a member, or of the token owner with id "me".
"""

from mcp.types import Tool, TextContent, ToolAnnotations

from config import Settings
from tools.trello.client import trello_request, text_result, MEMBER_FIELDS

TOOL = Tool(
    name="get-member",
    title="Get Member",
    description=(
        "Retrieves a Trello member by their ID. "
        'Use "me" as the ID to fetch the currently authenticated member.'
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "minLength": 1,
                "description": 'The ID or username of the member to retrieve, or "me"'
            }
        },
        "required": ["id"],
        "additionalProperties": False
    },
    annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=True),
)


async def handle(arguments: dict, settings: Settings) -> list[TextContent]:
    """Handle get-member tool call."""
    member = await trello_request(
        f"members/{arguments['id']}", settings.credentials,
        query_params={"fields": MEMBER_FIELDS},
        timeout=settings.timeout,
    )
    return text_result(member)
