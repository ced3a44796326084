"""AnkiConnect client module."""

from .anki_client import AnkiAPIError, AnkiClient, AnkiConnectionError, get_anki_client

__all__ = ["AnkiAPIError", "AnkiClient", "AnkiConnectionError", "get_anki_client"]
