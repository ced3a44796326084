"""Tests for the tool dispatch contract."""

from unittest.mock import AsyncMock

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_REQUEST, CallToolResult
from pydantic import ValidationError

from anki_review_mcp.client import AnkiAPIError, AnkiConnectionError
from anki_review_mcp.models import SetEaseFactorsArguments
from anki_review_mcp.tools import TOOL_HANDLERS, ToolDispatcher, format_validation_error
from anki_review_mcp.tools.decks import ListDecksTool


def result_text(result: CallToolResult) -> str:
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


def assert_no_backend_calls(client: AsyncMock) -> None:
    assert client.method_calls == []


class TestCatalog:
    """Tests for ToolDispatcher.list_tools."""

    def test_every_tool_listed_once(self, dispatcher: ToolDispatcher) -> None:
        names = [tool.name for tool in dispatcher.list_tools()]

        assert len(names) == len(TOOL_HANDLERS) == 19
        assert len(set(names)) == len(names)

    def test_catalog_order(self, dispatcher: ToolDispatcher) -> None:
        names = [tool.name for tool in dispatcher.list_tools()]

        assert names[:4] == ["update_cards", "add_card", "get_due_cards", "get_new_cards"]
        assert names[-2:] == ["set_ease_factors", "get_all_cards_in_deck"]

    def test_schemas_are_objects(self, dispatcher: ToolDispatcher) -> None:
        for tool in dispatcher.list_tools():
            assert tool.inputSchema["type"] == "object"
            assert tool.description

    def test_required_fields_match_argument_models(self) -> None:
        """Fields a schema marks required are required by the validating model too."""
        for handler_cls in TOOL_HANDLERS:
            required = set(handler_cls.input_schema.get("required", []))
            model_required = {
                field.alias or name
                for name, field in handler_cls.arguments_model.model_fields.items()
                if field.is_required()
            }
            assert required <= model_required, handler_cls.name

    def test_set_ease_factors_schema(self, dispatcher: ToolDispatcher) -> None:
        tool = next(t for t in dispatcher.list_tools() if t.name == "set_ease_factors")

        assert tool.inputSchema["required"] == ["cards", "easeFactors"]
        assert tool.inputSchema["properties"]["easeFactors"]["items"] == {"type": "number"}

    def test_duplicate_names_rejected(self, anki_client: AsyncMock, card_query) -> None:
        with pytest.raises(ValueError, match="Duplicate tool name: list_decks"):
            ToolDispatcher(anki_client, card_query, [ListDecksTool(), ListDecksTool()])


class TestInvoke:
    """Tests for ToolDispatcher.invoke."""

    async def test_missing_arguments(
        self, dispatcher: ToolDispatcher, anki_client: AsyncMock
    ) -> None:
        with pytest.raises(McpError) as exc_info:
            await dispatcher.invoke("list_decks", None)

        assert exc_info.value.error.code == INVALID_REQUEST
        assert "No arguments provided for tool: list_decks" in exc_info.value.error.message
        assert_no_backend_calls(anki_client)

    async def test_missing_arguments_checked_before_name(
        self, dispatcher: ToolDispatcher, anki_client: AsyncMock
    ) -> None:
        """An unknown name without arguments is still a missing-arguments error."""
        with pytest.raises(McpError):
            await dispatcher.invoke("no_such_tool", None)

        assert_no_backend_calls(anki_client)

    async def test_unknown_tool(self, dispatcher: ToolDispatcher, anki_client: AsyncMock) -> None:
        result = await dispatcher.invoke("no_such_tool", {})

        assert result.isError is True
        assert result_text(result) == "Error in tool no_such_tool: Unknown tool: no_such_tool"
        assert_no_backend_calls(anki_client)

    async def test_success(self, dispatcher: ToolDispatcher, anki_client: AsyncMock) -> None:
        anki_client.deck_names.return_value = ["Default"]

        result = await dispatcher.invoke("list_decks", {})

        assert not result.isError
        assert result_text(result) == '["Default"]'

    async def test_extra_arguments_ignored(
        self, dispatcher: ToolDispatcher, anki_client: AsyncMock
    ) -> None:
        anki_client.deck_names.return_value = []

        result = await dispatcher.invoke("list_decks", {"unexpected": True})

        assert not result.isError

    async def test_connection_error_wrapped(
        self, dispatcher: ToolDispatcher, anki_client: AsyncMock
    ) -> None:
        anki_client.deck_names.side_effect = AnkiConnectionError("Failed to connect")

        result = await dispatcher.invoke("list_decks", {})

        assert result.isError is True
        assert result_text(result) == "Error in tool list_decks: Failed to connect"

    async def test_api_error_wrapped(
        self, dispatcher: ToolDispatcher, anki_client: AsyncMock
    ) -> None:
        anki_client.create_deck.side_effect = AnkiAPIError("collection is not available")

        result = await dispatcher.invoke("create_deck", {"deck": "Spanish"})

        assert result.isError is True
        assert result_text(result) == "Error in tool create_deck: collection is not available"

    async def test_validation_error_wrapped(
        self, dispatcher: ToolDispatcher, anki_client: AsyncMock
    ) -> None:
        result = await dispatcher.invoke("suspend_cards", {"cards": ["abc"]})

        assert result.isError is True
        assert result_text(result).startswith("Error in tool suspend_cards: cards.0: ")
        assert_no_backend_calls(anki_client)

    async def test_required_field_missing(
        self, dispatcher: ToolDispatcher, anki_client: AsyncMock
    ) -> None:
        result = await dispatcher.invoke("create_deck", {})

        assert result.isError is True
        assert result_text(result) == "Error in tool create_deck: deck: Field required"
        assert_no_backend_calls(anki_client)

    async def test_non_mapping_arguments(
        self, dispatcher: ToolDispatcher, anki_client: AsyncMock
    ) -> None:
        result = await dispatcher.invoke("create_deck", ["Spanish"])  # type: ignore[arg-type]

        assert result.isError is True
        assert result_text(result).startswith("Error in tool create_deck: ")
        assert_no_backend_calls(anki_client)

    async def test_ready_after_failure(
        self, dispatcher: ToolDispatcher, anki_client: AsyncMock
    ) -> None:
        anki_client.deck_names.side_effect = [AnkiConnectionError("down"), ["Default"]]

        first = await dispatcher.invoke("list_decks", {})
        second = await dispatcher.invoke("list_decks", {})

        assert first.isError is True
        assert not second.isError


class TestFormatValidationError:
    """Tests for format_validation_error."""

    def test_value_error_message_unprefixed(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SetEaseFactorsArguments.model_validate({"cards": [1, 2], "easeFactors": [2500]})

        assert format_validation_error(exc_info.value) == (
            "Cards and easeFactors arrays must have the same length"
        )

    def test_field_locations(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SetEaseFactorsArguments.model_validate({"cards": [1]})

        assert format_validation_error(exc_info.value) == "easeFactors: Field required"
