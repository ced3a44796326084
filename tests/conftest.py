"""Pytest configuration and fixtures."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from anki_review_mcp.client import AnkiClient
from anki_review_mcp.query import CardQuery
from anki_review_mcp.tools import ToolDispatcher, create_dispatcher


def _card_info(card_id: int, due: int, question: str = "Q", answer: str = "A") -> dict[str, Any]:
    """A ``cardsInfo`` record with the fields the server reads plus some it ignores."""
    return {
        "cardId": card_id,
        "question": question,
        "answer": answer,
        "due": due,
        "deckName": "Default",
        "modelName": "Basic",
        "note": card_id + 1000,
        "interval": 0,
    }


@pytest.fixture
def card_info():
    """Factory for ``cardsInfo`` records."""
    return _card_info


@pytest.fixture
def anki_client() -> AsyncMock:
    """AnkiClient stand-in; every action is an AsyncMock."""
    client = AsyncMock(spec=AnkiClient)
    client.find_cards.return_value = []
    client.cards_info.return_value = []
    return client


@pytest.fixture
def card_query(anki_client: AsyncMock) -> CardQuery:
    return CardQuery(anki_client)


@pytest.fixture
def dispatcher(anki_client: AsyncMock, card_query: CardQuery) -> ToolDispatcher:
    return create_dispatcher(anki_client, card_query)
