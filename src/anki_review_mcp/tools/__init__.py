"""MCP tools for Anki review and collection management."""

from ..client import AnkiClient
from ..query import CardQuery
from .base import ToolError, ToolHandler
from .cards import (
    CheckDueStatusTool,
    CheckSuspendedStatusTool,
    ForgetCardsTool,
    GetCardsInfoTool,
    GetEaseFactorsTool,
    SetEaseFactorsTool,
    SuspendCardsTool,
    UnsuspendCardsTool,
)
from .decks import (
    CreateDeckTool,
    DeleteDecksTool,
    GetDeckStatsTool,
    ListDecksTool,
    ListDecksWithIdsTool,
    MoveCardsToDeckTool,
)
from .dispatcher import ToolDispatcher, format_validation_error
from .review import (
    AddCardTool,
    GetAllCardsInDeckTool,
    GetDueCardsTool,
    GetNewCardsTool,
    UpdateCardsTool,
)

# Catalog order as shown by tools/list
TOOL_HANDLERS: tuple[type[ToolHandler], ...] = (
    UpdateCardsTool,
    AddCardTool,
    GetDueCardsTool,
    GetNewCardsTool,
    ListDecksTool,
    ListDecksWithIdsTool,
    CreateDeckTool,
    DeleteDecksTool,
    GetDeckStatsTool,
    MoveCardsToDeckTool,
    GetCardsInfoTool,
    SuspendCardsTool,
    UnsuspendCardsTool,
    CheckSuspendedStatusTool,
    CheckDueStatusTool,
    ForgetCardsTool,
    GetEaseFactorsTool,
    SetEaseFactorsTool,
    GetAllCardsInDeckTool,
)


def create_dispatcher(client: AnkiClient, query: CardQuery | None = None) -> ToolDispatcher:
    """Build a dispatcher with every tool registered.

    Args:
        client: AnkiConnect client shared by all tools
        query: Card search; defaults to one over ``client``
    """
    return ToolDispatcher(
        client,
        query or CardQuery(client),
        [handler_cls() for handler_cls in TOOL_HANDLERS],
    )


__all__ = [
    "TOOL_HANDLERS",
    "ToolDispatcher",
    "ToolError",
    "ToolHandler",
    "create_dispatcher",
    "format_validation_error",
]
