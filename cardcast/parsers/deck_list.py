"""
Deck list entry point: detect the game, then parse with its grammar.
"""

import logging

from cardcast.models.deck import Deck, GameFamily
from cardcast.parsers.classifier import classify_game
from cardcast.parsers.magic import parse_magic
from cardcast.parsers.pokemon import parse_pokemon

logger = logging.getLogger(__name__)


def resolve_game(game: GameFamily | str | None, text: str) -> GameFamily:
    """
    Turn an explicit game choice into a GameFamily, detecting it when absent.

    "auto" and None both mean detect from the text.

    Raises:
        ValueError: If game is a string naming no known family
    """
    if game is None:
        return classify_game(text)
    if isinstance(game, GameFamily):
        return game

    value = game.strip().lower()
    if value == "auto":
        return classify_game(text)
    return GameFamily(value)


def parse_deck_list(text: str, game: GameFamily | str | None = None) -> Deck:
    """
    Parse raw deck list text into a structured deck.

    Args:
        text: Raw text pasted from a deck builder export
        game: Force a grammar ("magic", "pokemon"), or None/"auto" to detect

    Returns:
        MagicDeck or PokemonDeck. Always returned, possibly empty;
        unrecognized lines are left out.

    Raises:
        ValueError: If game names no known family
    """
    family = resolve_game(game, text)
    logger.debug("Parsing deck list as %s", family.value)

    lines = text.split("\n")
    if family is GameFamily.MAGIC:
        return parse_magic(lines)
    return parse_pokemon(lines)
