from cardcast.models.card import CardEntry
from cardcast.models.deck import Deck, GameFamily, MagicDeck, PokemonDeck

__all__ = [
    "CardEntry",
    "Deck",
    "GameFamily",
    "MagicDeck",
    "PokemonDeck",
]
