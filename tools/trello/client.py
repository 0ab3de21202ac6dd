"""
Trello API client — async httpx wrapper with OAuth header auth and error normalization.

Shared by all Trello tool modules. Every tool call issues exactly one request.
"""

import json
import logging
from urllib.parse import urlencode

import httpx
from mcp.types import TextContent

from config import DEFAULT_TIMEOUT, Credentials

logger = logging.getLogger(__name__)

# Trello API base URL
API_BASE = "https://api.trello.com/1"

# Field lists requested from Trello (keeps payloads small)
BOARD_FIELDS = "id,name,url,dateLastActivity,desc,closed"
ORGANIZATION_FIELDS = "id,name,displayName,url,idBoards,dateLastActivity"
CARD_FIELDS = "id,name,url,dateLastActivity,desc,closed,due,idBoard,idList,labels"
MEMBER_FIELDS = (
    "id,fullName,username,initials,avatarUrl,bio,url,memberType,"
    "confirmed,status,email,idBoards,idOrganizations"
)


class TrelloApiError(Exception):
    """Trello answered with a non-2xx status. The message is the best error text available."""


def create_oauth_header(app_key: str, token: str) -> str:
    """Build the Trello OAuth authorization header. Values are not escaped."""
    return f'OAuth oauth_consumer_key="{app_key}", oauth_token="{token}"'


def stringify_query_value(value) -> str:
    """Convert a query value to the string Trello expects. None becomes ""."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_query_value(item) for item in value)
    return str(value)


def build_query_string(query_params: dict) -> str:
    """Percent-encode query params. Keys with a None value are kept with an empty value."""
    return urlencode({key: stringify_query_value(value) for key, value in query_params.items()})


def build_url(path: str, query_params: dict | None = None) -> str:
    """Build the full API URL for a path like "members/me/boards"."""
    url = f"{API_BASE}/{path}"
    if query_params is None:
        return url
    return f"{url}?{build_query_string(query_params)}"


def build_headers(credentials: Credentials) -> dict:
    """Headers sent with every request."""
    return {
        "accept": "application/json",
        "content-type": "application/json",
        "authorization": create_oauth_header(credentials.app_key, credentials.token),
    }


async def _read_text_error(response: httpx.Response) -> str | None:
    try:
        await response.aread()
        return response.text
    except Exception:
        return None


async def _read_json_error(response: httpx.Response) -> str | None:
    try:
        await response.aread()
        payload = json.loads(response.content)
    except Exception:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, str) and error:
        return error
    return None


async def get_error_message(response: httpx.Response) -> str:
    """
    Extract a human-readable message from a failed Trello response.

    Trello answers with either plain text or {"error": "..."} depending on the
    endpoint, so each shape is tried in turn:
        1. the body as text (returned as-is when non-empty)
        2. the "error" field of a JSON body
        3. the HTTP reason phrase (e.g. "Not Found")

    The body is buffered before each attempt so a failed attempt never
    exhausts it for the next one. Never raises.
    """
    text_error = await _read_text_error(response)
    if text_error:
        return text_error

    json_error = await _read_json_error(response)
    if json_error:
        return json_error

    return response.reason_phrase


async def trello_request(
    path: str,
    credentials: Credentials,
    method: str | None = None,
    body: dict | None = None,
    query_params: dict | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
):
    """
    Make an authenticated Trello API request.

    Args:
        path: API path without leading slash (e.g. "boards/{id}/cards")
        credentials: App key and token used for the OAuth header
        method: HTTP method; GET when omitted
        body: JSON body, serialized and sent only when given
        query_params: Query parameters, coerced to strings
        timeout: Request timeout in seconds
        transport: Optional httpx transport (used by tests)

    Returns:
        Parsed JSON response, unmodified.

    Raises:
        TrelloApiError: On a non-2xx response, with the extracted error message.
        httpx.RequestError: On connection errors (not rewrapped).
    """
    url = build_url(path, query_params)
    method = method or "GET"
    content = json.dumps(body) if body is not None else None

    logger.debug("Trello request: %s %s", method, path)

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        resp = await client.request(method, url, headers=build_headers(credentials), content=content)
        if not resp.is_success:
            logger.debug("Trello request failed: %s %s -> %s", method, path, resp.status_code)
            raise TrelloApiError(await get_error_message(resp))
        if resp.status_code == 204 or not resp.content:
            return {}
        return resp.json()


def text_result(payload) -> list[TextContent]:
    """Wrap a Trello payload as a single JSON text content item."""
    return [TextContent(type="text", text=json.dumps(payload))]
