"""Tool handler contract shared by every MCP tool."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from mcp.types import Tool

from ..client import AnkiClient
from ..models import ToolArguments
from ..query import CardQuery


class ToolError(Exception):
    """Raised when a tool call fails outside of AnkiConnect."""


class ToolHandler(ABC):
    """One MCP tool: its catalog entry plus validate-then-execute logic.

    Subclasses declare the advisory JSON schema shown to clients and the
    pydantic record that actually validates incoming arguments. The two must
    describe the same fields.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    input_schema: ClassVar[dict[str, Any]]
    arguments_model: ClassVar[type[ToolArguments]]

    def tool(self) -> Tool:
        """Catalog entry for ``tools/list``."""
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)

    def parse(self, arguments: dict[str, Any]) -> ToolArguments:
        """Validate and coerce raw arguments.

        Raises:
            pydantic.ValidationError: Arguments don't fit ``arguments_model``
        """
        return self.arguments_model.model_validate(arguments)

    @abstractmethod
    async def run(self, client: AnkiClient, query: CardQuery, args: Any) -> str:
        """Execute the tool.

        Args:
            client: AnkiConnect client
            query: Card search over the same client
            args: Validated arguments

        Returns:
            Text for the single content block of the result
        """


def object_schema(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    """Build a JSON object schema."""
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def number_array(description: str) -> dict[str, Any]:
    """Schema for a list of numbers, e.g. card IDs."""
    return {"type": "array", "items": {"type": "number"}, "description": description}


def string_array(description: str) -> dict[str, Any]:
    """Schema for a list of strings, e.g. deck names."""
    return {"type": "array", "items": {"type": "string"}, "description": description}


def card_ids_schema(description: str) -> dict[str, Any]:
    """Schema for tools whose only input is ``cards``."""
    return object_schema({"cards": number_array(description)}, required=["cards"])
