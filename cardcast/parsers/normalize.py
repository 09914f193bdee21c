"""
Card-entry helpers shared by the Magic and Pokémon parsers.

Full names are built once here, at parse time, so every parser formats
them the same way and downstream display never re-derives them.
"""

import re
from collections.abc import Callable

from cardcast.models.card import CardEntry

# A matcher either parses a whole (already stripped) line or returns None
LineMatcher = Callable[[str], CardEntry | None]

# Pattern: "4 Professor's Research" or "4x Lightning Bolt"
# Groups: (quantity, card_name)
QUANTITY_NAME_PATTERN = re.compile(r"^(\d+)x?\s+(.+)$")

# PTCGL energy type letters as printed in "Basic {D} Energy"
ENERGY_TYPES: dict[str, str] = {
    "P": "Psychic",
    "D": "Darkness",
    "F": "Fighting",
    "R": "Fire",
    "W": "Water",
    "L": "Lightning",
    "G": "Grass",
    "M": "Metal",
    "C": "Colorless",
    "N": "Dragon",
    "Y": "Fairy",
}

_TYPE_TOKEN = re.compile(r"\{.\}")
_BASIC_ENERGY = re.compile(r"Basic\s+Energy")


def parse_quantity(raw: str) -> int | None:
    """Convert a captured quantity, rejecting zero copies."""
    quantity = int(raw)
    return quantity if quantity >= 1 else None


def paren_full_name(name: str, set_code: str, number: str) -> str:
    """Arena style: "Lightning Bolt (JMP) 342"."""
    return f"{name} ({set_code}) {number}"


def bracket_full_name(name: str, set_name: str) -> str:
    """TCGPlayer style: "Sol Ring [Commander Legends]"."""
    return f"{name} [{set_name}]"


def set_number_full_name(name: str, set_code: str, number: str) -> str:
    """PTCGL style: "Hoothoot SCR 114"."""
    return f"{name} {set_code} {number}"


def energy_type_name(letter: str) -> str:
    """Expand a PTCGL type letter; unknown letters pass through unchanged."""
    return ENERGY_TYPES.get(letter, letter)


def clean_pokemon_name(name: str) -> str:
    """Strip "{X}" type tokens and collapse "Basic Energy" to "Energy"."""
    name = _TYPE_TOKEN.sub("", name)
    name = _BASIC_ENERGY.sub("Energy", name)
    return name.strip()


def match_quantity_name(line: str) -> CardEntry | None:
    """
    Catch-all matcher: a leading quantity and the rest of the line as name.

    Leaves set code, set name and number empty.
    """
    match = QUANTITY_NAME_PATTERN.match(line)
    if not match:
        return None

    quantity = parse_quantity(match.group(1))
    name = match.group(2).strip()
    if quantity is None or not name:
        return None

    return CardEntry(quantity=quantity, name=name, full_name=name)


def first_match(
    line: str, matchers: tuple[LineMatcher, ...]
) -> tuple[LineMatcher, CardEntry] | tuple[None, None]:
    """
    Try matchers in order and stop at the first success.

    Returns:
        (the matcher that succeeded, its entry), or (None, None)
    """
    for matcher in matchers:
        entry = matcher(line)
        if entry is not None:
            return matcher, entry
    return None, None
