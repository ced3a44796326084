"""Card search: filter expression in, ordered plain-text cards out."""

from .client import AnkiClient
from .formatting import clean_card_html
from .logging import get_logger
from .models import Card

logger = get_logger(component="query")


class CardQuery:
    """Runs Anki searches and shapes the matching cards for clients."""

    def __init__(self, client: AnkiClient):
        self.client = client

    async def find_cards_and_order(self, query: str) -> list[Card]:
        """Return the cards matching ``query``, soonest due first.

        The query is passed to Anki verbatim. Cards with equal ``due`` keep the
        order Anki returned them in. Backend errors propagate unchanged.

        Args:
            query: Anki search expression (e.g. ``is:due``, ``deck:"Spanish"``)

        Returns:
            Cards sorted by due position, empty if nothing matches
        """
        card_ids = await self.client.find_cards(query)

        if not card_ids:
            logger.debug("card_query", query=query, count=0)
            return []

        cards_info = await self.client.cards_info(card_ids)
        cards = sorted(
            (
                Card(
                    card_id=info["cardId"],
                    question=clean_card_html(info["question"]),
                    answer=clean_card_html(info["answer"]),
                    due=info["due"],
                )
                for info in cards_info
            ),
            key=lambda card: card.due,
        )

        logger.debug("card_query", query=query, count=len(cards))
        return cards
