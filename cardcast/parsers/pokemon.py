"""
Parser for Pokémon TCG deck exports (PTCGL, Limitless).

PTCGL export format:
    Pokémon: 12
    4 Hoothoot SCR 114
    Trainer: 36
    4 Professor's Research SVI 189
    Energy: 12
    3 Basic {D} Energy SVE 15

Lists without headers are sorted by guessing the section from the first
card line that gives a hint.
"""

import logging
import re
from collections.abc import Iterable
from enum import Enum

from cardcast.models.card import CardEntry
from cardcast.models.deck import PokemonDeck
from cardcast.parsers.normalize import (
    LineMatcher,
    clean_pokemon_name,
    energy_type_name,
    first_match,
    match_quantity_name,
    parse_quantity,
    set_number_full_name,
)

logger = logging.getLogger(__name__)


class PokemonSection(str, Enum):
    POKEMON = "pokemon"
    TRAINERS = "trainers"
    ENERGY = "energy"


SECTION_HEADER_PATTERNS: tuple[tuple[re.Pattern[str], PokemonSection], ...] = (
    (re.compile(r"^Pok[eé]mon:\s*\d*$", re.IGNORECASE), PokemonSection.POKEMON),
    (re.compile(r"^Trainer:\s*\d*$", re.IGNORECASE), PokemonSection.TRAINERS),
    (re.compile(r"^Energy:\s*\d*$", re.IGNORECASE), PokemonSection.ENERGY),
)

# Pattern: "3 Basic {D} Energy SVE 15"
# Groups: (quantity, type_letter, set_code, collector_number)
BASIC_ENERGY_PATTERN = re.compile(r"^(\d+)\s+Basic\s+\{([A-Z])\}\s+Energy\s+([A-Z]{2,4})\s+(\d+)$")

# Pattern: "4 Hoothoot SCR 114"
# Groups: (quantity, card_name, set_code, collector_number)
SET_NUMBER_PATTERN = re.compile(r"^(\d+)\s+(.+?)\s+([A-Z]{2,}[A-Z0-9]*)\s+(\d+)$")

# Shape of a Pokémon card line, used only to guess the section
POKEMON_LINE_HINT = re.compile(r"\d+\s+.+\s+[A-Z]{2,4}\s+\d+")

TRAINER_KEYWORDS: tuple[str, ...] = (
    "Professor",
    "Boss",
    "Iono",
    "Arven",
    "Nest Ball",
    "Ultra Ball",
    "Rare Candy",
    "Switch",
    "Town Store",
    "Technical Machine",
    "Pokégear",
    "Poké Ball",
    "Super Rod",
    "Counter Catcher",
)


def is_trainer_line(line: str) -> bool:
    """True if the line names a well-known Trainer card."""
    line_lower = line.lower()
    return any(keyword.lower() in line_lower for keyword in TRAINER_KEYWORDS)


def match_section_header(line: str) -> PokemonSection | None:
    for pattern, section in SECTION_HEADER_PATTERNS:
        if pattern.match(line):
            return section
    return None


def infer_section(line: str) -> PokemonSection | None:
    """
    Guess the section of a card line when no header has been seen.

    Energy wins over trainer keywords, which win over the generic
    set/number shape. Returns None if nothing can be inferred.
    """
    if "energy" in line.lower():
        return PokemonSection.ENERGY
    if is_trainer_line(line):
        return PokemonSection.TRAINERS
    if POKEMON_LINE_HINT.search(line):
        return PokemonSection.POKEMON
    return None


def match_basic_energy(line: str) -> CardEntry | None:
    """Match PTCGL basic energy: "3 Basic {D} Energy SVE 15"."""
    if "{" not in line or "Energy" not in line:
        return None

    match = BASIC_ENERGY_PATTERN.match(line)
    if not match:
        return None

    raw_quantity, letter, set_code, number = match.groups()
    quantity = parse_quantity(raw_quantity)
    if quantity is None:
        return None

    name = f"{energy_type_name(letter)} Energy"
    return CardEntry(
        quantity=quantity,
        name=name,
        set_code=set_code,
        number=number,
        full_name=set_number_full_name(name, set_code, number),
    )


def match_set_number(line: str) -> CardEntry | None:
    """Match "4 Hoothoot SCR 114"."""
    match = SET_NUMBER_PATTERN.match(line)
    if not match:
        return None

    raw_quantity, raw_name, set_code, number = match.groups()
    quantity = parse_quantity(raw_quantity)
    name = clean_pokemon_name(raw_name)
    if quantity is None or not name:
        return None

    return CardEntry(
        quantity=quantity,
        name=name,
        set_code=set_code,
        number=number,
        full_name=set_number_full_name(name, set_code, number),
    )


POKEMON_MATCHERS: tuple[LineMatcher, ...] = (
    match_basic_energy,
    match_set_number,
    match_quantity_name,
)

# Matchers whose success moves the line into a fixed section
# (PTCGL sometimes lists basic energy under the wrong header)
FORCED_SECTIONS: dict[LineMatcher, PokemonSection] = {
    match_basic_energy: PokemonSection.ENERGY,
}


def parse_pokemon(lines: Iterable[str]) -> PokemonDeck:
    """
    Parse Pokémon deck list lines into a PokemonDeck.

    Args:
        lines: Raw lines of the export (unstripped)

    Returns:
        PokemonDeck with pokemon, trainers and energy in source order.
        Lines that match no format, or arrive before any section can be
        determined, are dropped.
    """
    sections: dict[PokemonSection, list[CardEntry]] = {section: [] for section in PokemonSection}
    current: PokemonSection | None = None
    dropped = 0

    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue

        header = match_section_header(stripped)
        if header is not None:
            current = header
            continue

        if current is None:
            current = infer_section(stripped)
            if current is None:
                dropped += 1
                continue

        matcher, entry = first_match(stripped, POKEMON_MATCHERS)
        if entry is None:
            dropped += 1
            continue

        current = FORCED_SECTIONS.get(matcher, current)
        sections[current].append(entry)

    deck = PokemonDeck(
        pokemon=tuple(sections[PokemonSection.POKEMON]),
        trainers=tuple(sections[PokemonSection.TRAINERS]),
        energy=tuple(sections[PokemonSection.ENERGY]),
    )
    logger.debug(
        "Parsed Pokemon deck: %d pokemon, %d trainers, %d energy entries (%d lines dropped)",
        len(deck.pokemon),
        len(deck.trainers),
        len(deck.energy),
        dropped,
    )
    return deck
