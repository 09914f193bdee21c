"""
Game-type detection for raw deck list text.

Checks run from the narrowest, highest-confidence signal to the broadest.
Every input resolves to a family; text with no signal at all falls back
to Pokémon, matching what earlier versions of the overlay did.
"""

import re

from cardcast.models.deck import GameFamily

# "Pokémon: 12", "Trainer: 36", "Energy:" on a line of their own
POKEMON_HEADER_PATTERN = re.compile(
    r"^\s*(?:Pok[eé]mon|Trainer|Energy):\s*\d*\s*$", re.IGNORECASE | re.MULTILINE
)

# "(JMP) 342" - bracketed set code followed by a collector number
MAGIC_SET_TOKEN_PATTERN = re.compile(r"\([A-Z0-9]{3,5}\)\s+\d+")

# "4 Charizard ex SV03 125" - set code with digits, then collector number
POKEMON_SET_LINE_PATTERN = re.compile(r"\d+\s+.+?\s+[A-Z]{2,4}[0-9]+\s+\d+")


def _has_arena_deck_header(lines: list[str]) -> bool:
    return any(line.strip() == "Deck" for line in lines)


def _has_sideboard_header(lines: list[str]) -> bool:
    return any(line.strip().lower() == "sideboard" for line in lines)


def classify_game(text: str) -> GameFamily:
    """
    Decide which deck grammar governs the given text.

    Order (first match wins):
        1. Pokémon section header line ("Pokemon: 12")
        2. Magic set token "(ABC) 123"
        3. Arena "Deck" header line (case-sensitive)
        4. "Sideboard" header line
        5. Pokémon set/number line ("4 Name SV03 125")
        6. Pokémon

    Args:
        text: Raw deck list text

    Returns:
        The detected GameFamily. Never fails.
    """
    if POKEMON_HEADER_PATTERN.search(text):
        return GameFamily.POKEMON

    if MAGIC_SET_TOKEN_PATTERN.search(text):
        return GameFamily.MAGIC

    lines = text.split("\n")

    if _has_arena_deck_header(lines):
        return GameFamily.MAGIC

    if _has_sideboard_header(lines):
        return GameFamily.MAGIC

    if any(POKEMON_SET_LINE_PATTERN.search(line) for line in lines):
        return GameFamily.POKEMON

    # No positive signal: keep the legacy Pokémon default
    return GameFamily.POKEMON
