"""MCP server exposing Anki review and deck management through AnkiConnect."""

__version__ = "1.0.0"
