"""MCP tools for inspecting and changing the state of existing cards."""

from ..client import AnkiClient
from ..formatting import to_json
from ..models import CardIdsArguments, SetEaseFactorsArguments
from ..query import CardQuery
from .base import ToolHandler, card_ids_schema, number_array, object_schema


def _ids(card_ids: list[int]) -> str:
    return ", ".join(map(str, card_ids))


class GetCardsInfoTool(ToolHandler):
    """Raw ``cardsInfo`` records, unlike the cleaned cards the searches return."""

    name = "get_cards_info"
    description = (
        "Retrieves detailed information about specific cards including question, answer, "
        "due date, and more."
    )
    input_schema = card_ids_schema("Array of card IDs to get information for")
    arguments_model = CardIdsArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: CardIdsArguments) -> str:
        return to_json(await client.cards_info(args.cards), indent=2)


class SuspendCardsTool(ToolHandler):
    name = "suspend_cards"
    description = "Suspends cards to prevent them from appearing in reviews."
    input_schema = card_ids_schema("Array of card IDs to suspend")
    arguments_model = CardIdsArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: CardIdsArguments) -> str:
        await client.suspend(args.cards)
        return f"Suspended {len(args.cards)} cards: {_ids(args.cards)}"


class UnsuspendCardsTool(ToolHandler):
    name = "unsuspend_cards"
    description = "Unsuspends cards to allow them to appear in reviews again."
    input_schema = card_ids_schema("Array of card IDs to unsuspend")
    arguments_model = CardIdsArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: CardIdsArguments) -> str:
        await client.unsuspend(args.cards)
        return f"Unsuspended {len(args.cards)} cards: {_ids(args.cards)}"


class CheckSuspendedStatusTool(ToolHandler):
    name = "check_suspended_status"
    description = "Checks if specified cards are currently suspended."
    input_schema = card_ids_schema("Array of card IDs to check suspension status for")
    arguments_model = CardIdsArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: CardIdsArguments) -> str:
        return to_json(await client.are_suspended(args.cards))


class CheckDueStatusTool(ToolHandler):
    name = "check_due_status"
    description = "Checks if specified cards are currently due for review."
    input_schema = card_ids_schema("Array of card IDs to check due status for")
    arguments_model = CardIdsArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: CardIdsArguments) -> str:
        return to_json(await client.are_due(args.cards))


class ForgetCardsTool(ToolHandler):
    name = "forget_cards"
    description = "Resets cards to 'new' status, removing their review history."
    input_schema = card_ids_schema("Array of card IDs to reset to new status")
    arguments_model = CardIdsArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: CardIdsArguments) -> str:
        await client.forget_cards(args.cards)
        return f"Reset {len(args.cards)} cards to new status: {_ids(args.cards)}"


class GetEaseFactorsTool(ToolHandler):
    name = "get_ease_factors"
    description = "Retrieves ease factors for specified cards."
    input_schema = card_ids_schema("Array of card IDs to get ease factors for")
    arguments_model = CardIdsArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: CardIdsArguments) -> str:
        return to_json(await client.get_ease_factors(args.cards))


class SetEaseFactorsTool(ToolHandler):
    """Set one ease factor per card; mismatched lengths are rejected during parsing."""

    name = "set_ease_factors"
    description = "Sets ease factors for specified cards."
    input_schema = object_schema(
        {
            "cards": number_array("Array of card IDs to set ease factors for"),
            "easeFactors": number_array(
                "Array of ease factor values (must match cards array length)"
            ),
        },
        required=["cards", "easeFactors"],
    )
    arguments_model = SetEaseFactorsArguments

    async def run(
        self, client: AnkiClient, query: CardQuery, args: SetEaseFactorsArguments
    ) -> str:
        await client.set_ease_factors(args.cards, args.ease_factors)
        return f"Set ease factors for {len(args.cards)} cards"
