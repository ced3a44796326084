"""MCP server instance and main entry point."""

import asyncio

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from . import __version__
from .client import AnkiClient, get_anki_client
from .config import settings
from .logging import configure_logging, get_logger
from .query import CardQuery
from .resources import list_resources, read_resource
from .tools import create_dispatcher

logger = get_logger(component="server")


def create_server(client: AnkiClient) -> Server:
    """Create the MCP server with resource and tool handlers bound to ``client``.

    Args:
        client: AnkiConnect client used for the lifetime of the server

    Returns:
        Configured low-level MCP server
    """
    query = CardQuery(client)
    dispatcher = create_dispatcher(client, query)
    app: Server = Server("anki-review-mcp", version=__version__)

    @app.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        return list_resources()

    @app.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        return await read_resource(query, str(uri))

    @app.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.invoke(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    # Registered directly: the call_tool() decorator replaces missing arguments with {}.
    app.request_handlers[types.CallToolRequest] = handle_call_tool

    return app


async def serve(client: AnkiClient | None = None) -> None:
    """Run the server over stdio until the client disconnects."""
    app = create_server(client or get_anki_client())
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


def main() -> None:
    """Main entry point for the MCP server."""
    configure_logging(debug=settings.debug)
    logger.info(
        "server_starting",
        anki_connect_url=settings.anki_connect_url,
        default_deck=settings.default_deck,
    )
    asyncio.run(serve())


if __name__ == "__main__":
    main()
