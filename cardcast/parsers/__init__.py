from cardcast.parsers.classifier import classify_game
from cardcast.parsers.deck_list import parse_deck_list, resolve_game
from cardcast.parsers.magic import MAGIC_MATCHERS, parse_magic
from cardcast.parsers.pokemon import POKEMON_MATCHERS, parse_pokemon

__all__ = [
    "MAGIC_MATCHERS",
    "POKEMON_MATCHERS",
    "classify_game",
    "parse_deck_list",
    "parse_magic",
    "parse_pokemon",
    "resolve_game",
]
