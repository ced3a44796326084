"""MCP resources: read-only card searches.

Each resource URI is ``anki://search/<filter>``; reading it runs the
percent-decoded filter and returns the matching cards as JSON.
"""

from urllib.parse import unquote, urlsplit

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_REQUEST, ErrorData, Resource

from .formatting import to_json
from .query import CardQuery

JSON_MIME_TYPE = "application/json"

RESOURCES: tuple[Resource, ...] = (
    Resource(
        uri="anki://search/deck:current",
        mimeType=JSON_MIME_TYPE,
        name="Current Deck",
        description="Current Anki deck",
    ),
    Resource(
        uri="anki://search/is:due",
        mimeType=JSON_MIME_TYPE,
        name="Due cards",
        description="Cards in review and learning waiting to be studied",
    ),
    Resource(
        uri="anki://search/is:new",
        mimeType=JSON_MIME_TYPE,
        name="New cards",
        description="All unseen cards",
    ),
)


def list_resources() -> list[Resource]:
    """Return the fixed search resources."""
    return list(RESOURCES)


def filter_from_uri(uri: str) -> str:
    """Extract the search filter from a resource URI.

    Args:
        uri: Resource URI, e.g. ``anki://search/deck%3A%22Spanish%22``

    Returns:
        Percent-decoded last path segment, e.g. ``deck:"Spanish"``

    Raises:
        McpError: The URI has no final path segment
    """
    query = urlsplit(uri).path.split("/")[-1]
    if not query:
        raise McpError(ErrorData(code=INVALID_REQUEST, message="Invalid resource URI"))
    return unquote(query)


async def read_resource(query_engine: CardQuery, uri: str) -> list[ReadResourceContents]:
    """Run the search named by ``uri`` and return the cards as JSON."""
    cards = await query_engine.find_cards_and_order(filter_from_uri(uri))
    return [ReadResourceContents(content=to_json(cards), mime_type=JSON_MIME_TYPE)]
