"""
Parsed deck structures.

A deck is a tagged variant: MagicDeck or PokemonDeck. Each variant carries
its own category lists, so consumers branch on ``family`` instead of
probing for fields.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from cardcast.models.card import CardEntry


class GameFamily(str, Enum):
    """Card-game grammar that governs how deck text is parsed."""

    MAGIC = "magic"
    POKEMON = "pokemon"


@dataclass(frozen=True)
class MagicDeck:
    """
    Magic: The Gathering deck list.

    Attributes:
        mainboard: Cards in the main deck, in source order
        sideboard: Sideboard cards, in source order
    """

    family: ClassVar[GameFamily] = GameFamily.MAGIC

    mainboard: tuple[CardEntry, ...] = field(default_factory=tuple)
    sideboard: tuple[CardEntry, ...] = field(default_factory=tuple)

    def sections(self) -> dict[str, tuple[CardEntry, ...]]:
        """Category lists keyed by name, in display order."""
        return {"mainboard": self.mainboard, "sideboard": self.sideboard}

    def section_counts(self) -> dict[str, int]:
        """Total copies per category."""
        return _count(self.sections())

    def total_cards(self) -> int:
        """Total copies across all categories."""
        return sum(self.section_counts().values())

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self.family, self.sections())


@dataclass(frozen=True)
class PokemonDeck:
    """
    Pokémon TCG deck list.

    Attributes:
        pokemon: Pokémon cards
        trainers: Trainer cards (items, supporters, stadiums, tools)
        energy: Basic and special energy
    """

    family: ClassVar[GameFamily] = GameFamily.POKEMON

    pokemon: tuple[CardEntry, ...] = field(default_factory=tuple)
    trainers: tuple[CardEntry, ...] = field(default_factory=tuple)
    energy: tuple[CardEntry, ...] = field(default_factory=tuple)

    def sections(self) -> dict[str, tuple[CardEntry, ...]]:
        """Category lists keyed by name, in display order."""
        return {"pokemon": self.pokemon, "trainers": self.trainers, "energy": self.energy}

    def section_counts(self) -> dict[str, int]:
        """Total copies per category."""
        return _count(self.sections())

    def total_cards(self) -> int:
        """Total copies across all categories."""
        return sum(self.section_counts().values())

    def to_dict(self) -> dict[str, Any]:
        return _serialize(self.family, self.sections())


Deck = MagicDeck | PokemonDeck


def _count(sections: dict[str, tuple[CardEntry, ...]]) -> dict[str, int]:
    return {name: sum(entry.quantity for entry in entries) for name, entries in sections.items()}


def _serialize(family: GameFamily, sections: dict[str, tuple[CardEntry, ...]]) -> dict[str, Any]:
    result: dict[str, Any] = {"game": family.value}
    for name, entries in sections.items():
        result[name] = [entry.to_dict() for entry in entries]
    return result
