"""
Parser for Magic: The Gathering deck exports.

Handles Arena, Moxfield, Archidekt and TCGPlayer text:
    Deck
    4 Lightning Bolt (JMP) 342
    3 Quantum Riddler (PEOE) 72p
    1 Sol Ring [Commander Legends]
    4x Counterspell

    Sideboard
    2 Rest in Peace (ONS) 15

Cards go to the mainboard until a sideboard header appears.
"""

import logging
import re
from collections.abc import Iterable
from enum import Enum

from cardcast.models.card import CardEntry
from cardcast.models.deck import MagicDeck
from cardcast.parsers.normalize import (
    LineMatcher,
    bracket_full_name,
    first_match,
    match_quantity_name,
    paren_full_name,
    parse_quantity,
)

logger = logging.getLogger(__name__)

# Pattern: "4 Lightning Bolt (JMP) 342" or "3 Quantum Riddler (PEOE) 72p"
# Groups: (quantity, card_name, set_code, collector_number)
ARENA_SET_PATTERN = re.compile(r"^(\d+)\s+(.+?)\s+\(([A-Z0-9]+)\)\s+(\d+[a-z]?)$")

# Pattern: "1 Sol Ring [Commander Legends]" or "1x Sol Ring [Commander Legends]"
# Groups: (quantity, card_name, set_name)
TCGPLAYER_BRACKET_PATTERN = re.compile(r"^(\d+)x?\s+(.+?)\s+\[([^\]]+)\]$")

MAINBOARD_HEADERS = frozenset({"deck", "mainboard", "main deck"})
SIDEBOARD_HEADERS = frozenset({"sideboard", "side board"})

# Export-tool metadata and declarations that are never card lines
_COMMENT_PREFIXES = ("//", "#")
_SKIPPED_PREFIXES = ("about", "name ", "commander:", "companion:")


class MagicSection(str, Enum):
    MAINBOARD = "mainboard"
    SIDEBOARD = "sideboard"


def match_arena_set(line: str) -> CardEntry | None:
    """Match "4 Lightning Bolt (JMP) 342"."""
    match = ARENA_SET_PATTERN.match(line)
    if not match:
        return None

    raw_quantity, raw_name, set_code, number = match.groups()
    quantity = parse_quantity(raw_quantity)
    if quantity is None:
        return None

    name = raw_name.strip()
    return CardEntry(
        quantity=quantity,
        name=name,
        set_code=set_code,
        number=number,
        full_name=paren_full_name(name, set_code, number),
    )


def match_tcgplayer_bracket(line: str) -> CardEntry | None:
    """Match "1 Sol Ring [Commander Legends]"."""
    match = TCGPLAYER_BRACKET_PATTERN.match(line)
    if not match:
        return None

    raw_quantity, raw_name, raw_set_name = match.groups()
    quantity = parse_quantity(raw_quantity)
    set_name = raw_set_name.strip()
    if quantity is None or not set_name:
        return None

    name = raw_name.strip()
    return CardEntry(
        quantity=quantity,
        name=name,
        set_name=set_name,
        full_name=bracket_full_name(name, set_name),
    )


# Specific before general: the quantity+name catch-all would swallow
# bracketed set names, so it must stay last.
MAGIC_MATCHERS: tuple[LineMatcher, ...] = (
    match_arena_set,
    match_tcgplayer_bracket,
    match_quantity_name,
)


def _is_skipped(line: str, line_lower: str) -> bool:
    return line.startswith(_COMMENT_PREFIXES) or line_lower.startswith(_SKIPPED_PREFIXES)


def parse_magic(lines: Iterable[str]) -> MagicDeck:
    """
    Parse Magic deck list lines into a MagicDeck.

    Args:
        lines: Raw lines of the export (unstripped)

    Returns:
        MagicDeck with mainboard and sideboard in source order.
        Lines that match no format are dropped.
    """
    sections: dict[MagicSection, list[CardEntry]] = {
        MagicSection.MAINBOARD: [],
        MagicSection.SIDEBOARD: [],
    }
    current = MagicSection.MAINBOARD
    dropped = 0

    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue

        stripped_lower = stripped.lower()
        if _is_skipped(stripped, stripped_lower):
            continue

        if stripped_lower in MAINBOARD_HEADERS:
            current = MagicSection.MAINBOARD
            continue

        if stripped_lower in SIDEBOARD_HEADERS:
            current = MagicSection.SIDEBOARD
            continue

        _, entry = first_match(stripped, MAGIC_MATCHERS)
        if entry is None:
            dropped += 1
            continue

        sections[current].append(entry)

    deck = MagicDeck(
        mainboard=tuple(sections[MagicSection.MAINBOARD]),
        sideboard=tuple(sections[MagicSection.SIDEBOARD]),
    )
    logger.debug(
        "Parsed Magic deck: %d mainboard, %d sideboard entries (%d lines dropped)",
        len(deck.mainboard),
        len(deck.sideboard),
        dropped,
    )
    return deck
