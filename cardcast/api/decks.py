"""
Deck API endpoints.

Parses pasted deck list text for the overlay's deck list widget.
"""

from typing import Literal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from cardcast.config import settings
from cardcast.parsers import classify_game, parse_deck_list

router = APIRouter(prefix="/decks", tags=["decks"])

GameChoice = Literal["auto", "magic", "pokemon"]

# Starlette renamed the 413 constant; the code itself is stable
_PAYLOAD_TOO_LARGE = 413


class CardEntryResponse(BaseModel):
    """One parsed card line, in the overlay's camelCase wire format."""

    model_config = ConfigDict(populate_by_name=True)

    quantity: int
    name: str
    set_code: str = Field(default="", alias="setCode")
    set_name: str = Field(default="", alias="setName")
    number: str = ""
    full_name: str = Field(default="", alias="fullName")


class ParseDeckRequest(BaseModel):
    """Request model for parsing a deck list."""

    text: str = Field(
        ...,
        description="Raw deck list text (PTCGL, Limitless, Arena, Moxfield, TCGPlayer)",
        examples=["Deck\n4 Lightning Bolt (JMP) 342\n\nSideboard\n2 Rest in Peace (ONS) 15"],
    )
    game: GameChoice = Field(
        default="auto",
        description="Grammar to parse with, or auto to detect from the text",
    )


class ParseDeckResponse(BaseModel):
    """Response model for a parsed deck list."""

    game: Literal["magic", "pokemon"]
    sections: dict[str, list[CardEntryResponse]] = Field(default_factory=dict)
    counts: dict[str, int] = Field(default_factory=dict)
    total_cards: int = 0


class DetectGameRequest(BaseModel):
    """Request model for game detection."""

    text: str


class DetectGameResponse(BaseModel):
    """Response model for game detection."""

    game: Literal["magic", "pokemon"]


def _check_length(text: str) -> None:
    if len(text) > settings.max_deck_text_length:
        raise HTTPException(
            status_code=_PAYLOAD_TOO_LARGE,
            detail=f"Deck text exceeds {settings.max_deck_text_length} characters",
        )


@router.post("/parse", response_model=ParseDeckResponse)
async def parse_deck(request: ParseDeckRequest) -> ParseDeckResponse:
    """
    Parse a deck list into game-specific sections.

    Unrecognized lines are left out rather than reported as errors.
    """
    _check_length(request.text)

    deck = parse_deck_list(request.text, game=request.game)

    return ParseDeckResponse(
        game=deck.family.value,
        sections={
            name: [CardEntryResponse.model_validate(entry.to_dict()) for entry in entries]
            for name, entries in deck.sections().items()
        },
        counts=deck.section_counts(),
        total_cards=deck.total_cards(),
    )


@router.post("/detect", response_model=DetectGameResponse)
async def detect_game(request: DetectGameRequest) -> DetectGameResponse:
    """Report which game a deck list looks like, without parsing it."""
    _check_length(request.text)
    return DetectGameResponse(game=classify_game(request.text).value)
