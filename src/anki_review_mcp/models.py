"""Pydantic models for cards and tool arguments."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Card(BaseModel):
    """Card as returned to clients: plain-text sides plus its due position."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    card_id: int = Field(alias="cardId", description="Anki card ID")
    question: str = Field(description="Front side, markup stripped")
    answer: str = Field(description="Back side, markup stripped")
    due: int = Field(description="Due position; only used for ordering")


# Tool argument records
#
# Clients send loosely typed JSON. String fields accept numbers and integer
# fields accept numeric strings, so ``{"deck": 2024}`` and ``{"num": "5"}`` work.


class ToolArguments(BaseModel):
    """Base for tool argument records."""

    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True, extra="ignore")


class NoArguments(ToolArguments):
    """Tools that take no input."""


class CardAnswer(ToolArguments):
    """One review answer."""

    card_id: int = Field(alias="cardId", description="Id of the card to answer")
    ease: int = Field(description="Ease of the card between 1 (Again) and 4 (Easy)")


class UpdateCardsArguments(ToolArguments):
    answers: list[CardAnswer]


class AddCardArguments(ToolArguments):
    front: str
    back: str


class CountArguments(ToolArguments):
    num: int = Field(description="Number of cards to return")


class DeckArguments(ToolArguments):
    deck: str


class DecksArguments(ToolArguments):
    decks: list[str]


class CardIdsArguments(ToolArguments):
    cards: list[int]


class MoveCardsArguments(ToolArguments):
    cards: list[int]
    deck: str


class SetEaseFactorsArguments(ToolArguments):
    cards: list[int]
    ease_factors: list[int] = Field(alias="easeFactors")

    @model_validator(mode="after")
    def check_lengths(self) -> "SetEaseFactorsArguments":
        """Require one ease factor per card."""
        if len(self.cards) != len(self.ease_factors):
            raise ValueError("Cards and easeFactors arrays must have the same length")
        return self
