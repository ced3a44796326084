"""MCP tools for managing Anki decks."""

from ..client import AnkiClient
from ..formatting import to_json
from ..models import DeckArguments, DecksArguments, MoveCardsArguments, NoArguments
from ..query import CardQuery
from .base import ToolHandler, number_array, object_schema, string_array


class ListDecksTool(ToolHandler):
    name = "list_decks"
    description = "Returns a list of all deck names in Anki."
    input_schema = object_schema({})
    arguments_model = NoArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: NoArguments) -> str:
        return to_json(await client.deck_names())


class ListDecksWithIdsTool(ToolHandler):
    name = "list_decks_with_ids"
    description = "Returns a dictionary of deck names and their corresponding IDs."
    input_schema = object_schema({})
    arguments_model = NoArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: NoArguments) -> str:
        return to_json(await client.deck_names_and_ids())


class CreateDeckTool(ToolHandler):
    name = "create_deck"
    description = "Creates a new empty deck in Anki."
    input_schema = object_schema(
        {"deck": {"type": "string", "description": "Name of the new deck to create"}},
        required=["deck"],
    )
    arguments_model = DeckArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: DeckArguments) -> str:
        deck_id = await client.create_deck(args.deck)
        return f'Created deck "{args.deck}" with ID: {deck_id}'


class DeleteDecksTool(ToolHandler):
    """Delete decks together with their cards. Not undoable."""

    name = "delete_decks"
    description = "Deletes specified decks and all their cards. This action cannot be undone."
    input_schema = object_schema(
        {"decks": string_array("Array of deck names to delete")}, required=["decks"]
    )
    arguments_model = DecksArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: DecksArguments) -> str:
        await client.delete_decks(args.decks, cards_too=True)
        return f"Deleted decks: {', '.join(args.decks)}"


class GetDeckStatsTool(ToolHandler):
    name = "get_deck_stats"
    description = (
        "Gets statistics for specified decks including card counts and review information."
    )
    input_schema = object_schema(
        {"decks": string_array("Array of deck names to get stats for")}, required=["decks"]
    )
    arguments_model = DecksArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: DecksArguments) -> str:
        return to_json(await client.get_deck_stats(args.decks), indent=2)


class MoveCardsToDeckTool(ToolHandler):
    name = "move_cards_to_deck"
    description = "Moves specified cards to a different deck."
    input_schema = object_schema(
        {
            "cards": number_array("Array of card IDs to move"),
            "deck": {"type": "string", "description": "Name of the destination deck"},
        },
        required=["cards", "deck"],
    )
    arguments_model = MoveCardsArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: MoveCardsArguments) -> str:
        await client.change_deck(args.cards, args.deck)
        return f'Moved {len(args.cards)} cards to deck "{args.deck}"'
