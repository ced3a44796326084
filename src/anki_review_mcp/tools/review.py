"""MCP tools for studying: fetching cards to quiz on, answering and adding them."""

from typing import ClassVar

from ..client import AnkiClient
from ..config import settings
from ..formatting import to_json
from ..models import (
    AddCardArguments,
    CountArguments,
    DeckArguments,
    UpdateCardsArguments,
)
from ..query import CardQuery
from .base import ToolError, ToolHandler, object_schema

ADD_CARD_DESCRIPTION = (
    "Create a new flashcard in Anki for the user. Must use HTML formatting only. "
    "IMPORTANT FORMATTING RULES:\n"
    "1. Must use HTML tags for ALL formatting - NO markdown\n"
    "2. Use <br> for ALL line breaks\n"
    "3. For code blocks, use <pre> with inline CSS styling\n"
    "4. Example formatting:\n"
    "   - Line breaks: <br>\n"
    '   - Code: <pre style="background-color: transparent; padding: 10px; border-radius: 5px;">\n'
    "   - Lists: <ol> and <li> tags\n"
    "   - Bold: <strong>\n"
    "   - Italic: <em>"
)


class UpdateCardsTool(ToolHandler):
    """Submit review answers.

    AnkiConnect applies each answer independently and reports one boolean per
    answer. The call succeeds only if every answer was applied; otherwise it
    fails naming the cards that weren't, even though the others were answered.
    """

    name = "update_cards"
    description = (
        "After the user answers cards you've quizzed them on, "
        "use this tool to mark them answered and update their ease"
    )
    input_schema = object_schema(
        {
            "answers": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "cardId": {"type": "number", "description": "Id of the card to answer"},
                        "ease": {
                            "type": "number",
                            "description": "Ease of the card between 1 (Again) and 4 (Easy)",
                        },
                    },
                },
            }
        }
    )
    arguments_model = UpdateCardsArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: UpdateCardsArguments) -> str:
        answers = [{"cardId": a.card_id, "ease": a.ease} for a in args.answers]
        results = await client.answer_cards(answers)

        answered = [a.card_id for a, ok in zip(args.answers, results) if ok]
        failed = [a.card_id for a, ok in zip(args.answers, results) if not ok]
        # Missing results count as failures.
        failed.extend(a.card_id for a in args.answers[len(results) :])

        if failed:
            raise ToolError(f"Failed to update cards with IDs: {', '.join(map(str, failed))}")

        return f"Updated cards {', '.join(map(str, answered))}"


class AddCardTool(ToolHandler):
    name = "add_card"
    description = ADD_CARD_DESCRIPTION
    input_schema = object_schema(
        {
            "front": {
                "type": "string",
                "description": "The front of the card. Must use HTML formatting only.",
            },
            "back": {
                "type": "string",
                "description": "The back of the card. Must use HTML formatting only.",
            },
        },
        required=["front", "back"],
    )
    arguments_model = AddCardArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: AddCardArguments) -> str:
        note = {
            "deckName": settings.default_deck,
            "modelName": settings.default_model,
            "fields": {"Front": args.front, "Back": args.back},
        }
        note_id = await client.add_note(note)

        card_ids = await client.find_cards(f"nid:{note_id}")
        if not card_ids:
            raise ToolError(f"Note {note_id} was created but has no cards")

        return f"Created card with id {card_ids[0]}"


class _FixedQueryTool(ToolHandler):
    """Return the first ``num`` cards of a fixed search, soonest due first."""

    search: ClassVar[str]
    arguments_model = CountArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: CountArguments) -> str:
        cards = await query.find_cards_and_order(self.search)
        return to_json(cards[: args.num])


class GetDueCardsTool(_FixedQueryTool):
    name = "get_due_cards"
    description = "Returns a given number (num) of cards due for review."
    input_schema = object_schema(
        {"num": {"type": "number", "description": "Number of due cards to get"}},
        required=["num"],
    )
    search = "is:due"


class GetNewCardsTool(_FixedQueryTool):
    name = "get_new_cards"
    description = "Returns a given number (num) of new and unseen cards."
    input_schema = object_schema(
        {"num": {"type": "number", "description": "Number of new cards to get"}},
        required=["num"],
    )
    search = "is:new"


class GetAllCardsInDeckTool(ToolHandler):
    name = "get_all_cards_in_deck"
    description = (
        "Returns all cards in a specified deck regardless of their review status "
        "(new, due, suspended, etc.)."
    )
    input_schema = object_schema(
        {"deck": {"type": "string", "description": "Name of the deck to get all cards from"}},
        required=["deck"],
    )
    arguments_model = DeckArguments

    async def run(self, client: AnkiClient, query: CardQuery, args: DeckArguments) -> str:
        cards = await query.find_cards_and_order(f'deck:"{args.deck}"')
        return to_json(cards)
