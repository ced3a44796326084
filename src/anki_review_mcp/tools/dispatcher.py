"""Routes ``tools/call`` requests to tool handlers.

Every failure of a known or unknown tool, whether bad arguments, an
AnkiConnect error or a partially failed batch, comes back to the client the
same way: an error result reading ``Error in tool <name>: <message>``.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_REQUEST, CallToolResult, ErrorData, TextContent, Tool
from pydantic import ValidationError

from ..client import AnkiClient
from ..logging import get_logger
from ..query import CardQuery
from .base import ToolError, ToolHandler

logger = get_logger(component="dispatcher")


def format_validation_error(error: ValidationError) -> str:
    """Render pydantic errors as ``field: message`` pairs.

    Example:
        ``answers.0.cardId: Field required; answers.1.ease: Input should be a valid integer``
    """
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"])
        message = err["msg"]
        if err["type"] == "value_error":
            message = str(err["ctx"]["error"])
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


class ToolDispatcher:
    """Tool catalog and ``tools/call`` entry point."""

    def __init__(self, client: AnkiClient, query: CardQuery, handlers: Iterable[ToolHandler]):
        self.client = client
        self.query = query
        self._handlers: dict[str, ToolHandler] = {}
        for handler in handlers:
            if handler.name in self._handlers:
                raise ValueError(f"Duplicate tool name: {handler.name}")
            self._handlers[handler.name] = handler

    def list_tools(self) -> list[Tool]:
        """Catalog entries, in registration order."""
        return [handler.tool() for handler in self._handlers.values()]

    async def invoke(self, name: str, arguments: Mapping[str, Any] | None) -> CallToolResult:
        """Validate arguments, run the named tool and wrap the outcome.

        Args:
            name: Tool name
            arguments: Raw arguments from the request; ``None`` if none were sent

        Returns:
            Result with a single text block, ``isError`` set on failure

        Raises:
            McpError: The request carried no arguments at all
        """
        if arguments is None:
            raise McpError(
                ErrorData(code=INVALID_REQUEST, message=f"No arguments provided for tool: {name}")
            )

        logger.info("tool_call", tool=name)
        try:
            text = await self._run(name, arguments)
        except Exception as e:
            logger.warning("tool_failed", tool=name, error=str(e), error_type=type(e).__name__)
            return CallToolResult(
                isError=True,
                content=[TextContent(type="text", text=f"Error in tool {name}: {e}")],
            )

        return CallToolResult(content=[TextContent(type="text", text=text)])

    async def _run(self, name: str, arguments: Mapping[str, Any]) -> str:
        handler = self._handlers.get(name)
        if handler is None:
            raise ToolError(f"Unknown tool: {name}")

        try:
            args = handler.parse(dict(arguments))
        except ValidationError as e:
            raise ToolError(format_validation_error(e)) from e

        return await handler.run(self.client, self.query, args)
