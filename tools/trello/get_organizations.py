"""
Trello organizations — list the workspaces of the authenticated member.
"""

from mcp.types import Tool, TextContent, ToolAnnotations

from config import Settings
from tools.trello.client import trello_request, text_result, ORGANIZATION_FIELDS

TOOL = Tool(
    name="get-organizations",
    title="Get Organizations",
    description="Retrieves all workspaces (organizations) for the authenticated user.",
    inputSchema={
        "type": "object",
        "properties": {}
    },
    annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=True),
)


async def handle(arguments: dict, settings: Settings) -> list[TextContent]:
    """Handle get-organizations tool call."""
    organizations = await trello_request(
        "members/me/organizations", settings.credentials,
        query_params={"fields": ORGANIZATION_FIELDS},
        timeout=settings.timeout,
    )
    return text_result(organizations)
