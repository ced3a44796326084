"""AnkiConnect HTTP client with singleton pattern."""

from typing import Any

import httpx

from ..config import settings


class AnkiConnectionError(Exception):
    """Raised when unable to connect to AnkiConnect."""


class AnkiAPIError(Exception):
    """Raised when AnkiConnect API returns an error."""


class AnkiClient:
    """Async HTTP client for AnkiConnect API."""

    def __init__(
        self,
        url: str | None = None,
        version: int | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize AnkiConnect client.

        Args:
            url: AnkiConnect API endpoint
            version: AnkiConnect API version
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
        """
        self.url = url or settings.anki_connect_url
        self.version = version or settings.anki_connect_version
        self.timeout = timeout or settings.anki_connect_timeout
        self._transport = transport

    async def invoke(self, action: str, params: dict[str, Any] | None = None) -> Any:
        """Call AnkiConnect API action.

        Args:
            action: API action name
            params: Action parameters

        Returns:
            API response result

        Raises:
            AnkiConnectionError: Failed to connect to Anki
            AnkiAPIError: API returned an error
        """
        payload = {"action": action, "version": self.version, "params": params or {}}

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.post(self.url, json=payload, timeout=self.timeout)
                response.raise_for_status()
                result = response.json()
            except httpx.HTTPError as e:
                raise AnkiConnectionError(
                    f"Failed to connect to AnkiConnect at {self.url}. "
                    f"Is Anki running with AnkiConnect installed? Error: {e}"
                ) from e

        if result.get("error"):
            raise AnkiAPIError(result["error"])

        return result.get("result")

    # Note operations
    async def add_note(self, note: dict) -> int:
        """Add a single note.

        Args:
            note: Note object with deckName, modelName, fields, tags

        Returns:
            Note ID

        Raises:
            AnkiConnectionError: Connection failed
            AnkiAPIError: Note creation failed
        """
        return await self.invoke("addNote", {"note": note})

    # Deck operations
    async def deck_names(self) -> list[str]:
        """Get all deck names."""
        return await self.invoke("deckNames")

    async def deck_names_and_ids(self) -> dict[str, int]:
        """Get deck names mapped to IDs."""
        return await self.invoke("deckNamesAndIds")

    async def create_deck(self, name: str) -> int:
        """Create a new deck.

        Args:
            name: Deck name (supports hierarchy with ::)

        Returns:
            Deck ID
        """
        return await self.invoke("createDeck", {"deck": name})

    async def delete_decks(self, deck_names: list[str], cards_too: bool = False) -> None:
        """Delete decks.

        Args:
            deck_names: List of deck names to delete
            cards_too: Whether to delete cards as well
        """
        await self.invoke("deleteDecks", {"decks": deck_names, "cardsToo": cards_too})

    async def get_deck_stats(self, deck_names: list[str]) -> dict:
        """Get statistics for decks.

        Args:
            deck_names: Deck names

        Returns:
            Dictionary keyed by deck ID with new, learning and review counts
        """
        return await self.invoke("getDeckStats", {"decks": deck_names})

    async def change_deck(self, card_ids: list[int], deck_name: str) -> None:
        """Move cards to another deck, creating it if needed."""
        await self.invoke("changeDeck", {"cards": card_ids, "deck": deck_name})

    # Card operations
    async def find_cards(self, query: str) -> list[int]:
        """Find card IDs matching query.

        Args:
            query: Anki search query

        Returns:
            List of card IDs

        Raises:
            AnkiConnectionError: Connection failed
        """
        return await self.invoke("findCards", {"query": query})

    async def cards_info(self, card_ids: list[int]) -> list[dict]:
        """Get information about cards.

        Args:
            card_ids: List of card IDs

        Returns:
            List of card info dictionaries, in the order of ``card_ids``

        Raises:
            AnkiConnectionError: Connection failed
        """
        return await self.invoke("cardsInfo", {"cards": card_ids})

    async def answer_cards(self, answers: list[dict]) -> list[bool]:
        """Answer cards as if reviewed in Anki.

        Args:
            answers: List of ``{"cardId": int, "ease": int}`` objects

        Returns:
            One boolean per answer, ``False`` where the card could not be answered
        """
        return await self.invoke("answerCards", {"answers": answers})

    async def suspend(self, card_ids: list[int]) -> bool:
        """Suspend cards."""
        return await self.invoke("suspend", {"cards": card_ids})

    async def unsuspend(self, card_ids: list[int]) -> bool:
        """Unsuspend cards."""
        return await self.invoke("unsuspend", {"cards": card_ids})

    async def are_suspended(self, card_ids: list[int]) -> list[bool | None]:
        """Check suspension status; ``None`` for cards that do not exist."""
        return await self.invoke("areSuspended", {"cards": card_ids})

    async def are_due(self, card_ids: list[int]) -> list[bool]:
        """Check whether cards are due."""
        return await self.invoke("areDue", {"cards": card_ids})

    async def forget_cards(self, card_ids: list[int]) -> None:
        """Reset cards to new, dropping their scheduling."""
        await self.invoke("forgetCards", {"cards": card_ids})

    async def get_ease_factors(self, card_ids: list[int]) -> list[int]:
        """Get ease factors (e.g. 2500 for 250%)."""
        return await self.invoke("getEaseFactors", {"cards": card_ids})

    async def set_ease_factors(self, card_ids: list[int], ease_factors: list[int]) -> list[bool]:
        """Set ease factors, one per card."""
        return await self.invoke("setEaseFactors", {"cards": card_ids, "easeFactors": ease_factors})


# Singleton instance
_client: AnkiClient | None = None


def get_anki_client() -> AnkiClient:
    """Get or create the singleton AnkiConnect client.

    Returns:
        Singleton AnkiClient instance
    """
    global _client
    if _client is None:
        _client = AnkiClient(
            settings.anki_connect_url,
            settings.anki_connect_version,
            settings.anki_connect_timeout,
        )
    return _client
