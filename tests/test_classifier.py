"""Tests for deck list game detection."""

import pytest

from cardcast.models.deck import GameFamily
from cardcast.parsers.classifier import classify_game


class TestPokemonHeaders:
    @pytest.mark.parametrize(
        "text",
        [
            "Pokemon: 12\n4 Hoothoot SCR 114",
            "Pokémon: 12\n4 Hoothoot SCR 114",
            "Trainer: 36\n4 Iono PAL 185",
            "Energy: 12\n8 Basic {W} Energy SVE 3",
            "POKEMON: 4",
        ],
    )
    def test_header_lines_detect_pokemon(self, text: str) -> None:
        assert classify_game(text) == GameFamily.POKEMON

    def test_header_without_count(self) -> None:
        """The count after the colon is optional."""
        assert classify_game("Energy:\n4 Lightning Bolt (JMP) 342") == GameFamily.POKEMON

    def test_header_beats_magic_set_token(self) -> None:
        """Explicit Pokémon headers win over a Magic "(ABC) 123" token."""
        text = "Pokemon: 12\n4 Lightning Bolt (ABC) 123"
        assert classify_game(text) == GameFamily.POKEMON


class TestMagicSignals:
    def test_set_code_token(self) -> None:
        assert classify_game("4 Lightning Bolt (JMP) 342") == GameFamily.MAGIC

    def test_set_code_token_with_digits(self) -> None:
        assert classify_game("1 Sheoldred, the Apocalypse (DMU) 107") == GameFamily.MAGIC

    def test_lowercase_set_code_is_not_a_signal(self) -> None:
        assert classify_game("4 Lightning Bolt (jmp) 342") == GameFamily.POKEMON

    def test_arena_deck_header(self) -> None:
        assert classify_game("Deck\n4 Lightning Bolt") == GameFamily.MAGIC

    def test_arena_deck_header_with_whitespace(self) -> None:
        assert classify_game("  Deck  \r\n4 Lightning Bolt") == GameFamily.MAGIC

    def test_deck_header_is_case_sensitive(self) -> None:
        """Only "Deck" exactly counts; "deck" has no signal and falls back."""
        assert classify_game("deck\n4 Lightning Bolt") == GameFamily.POKEMON

    def test_deck_inside_a_line_is_not_a_header(self) -> None:
        assert classify_game("My Deck\n4 Lightning Bolt") == GameFamily.POKEMON

    def test_sideboard_header_any_case(self) -> None:
        assert classify_game("4 Lightning Bolt\nSIDEBOARD\n2 Duress") == GameFamily.MAGIC
        assert classify_game("4 Lightning Bolt\nsideboard\n2 Duress") == GameFamily.MAGIC


class TestPokemonFallbacks:
    def test_set_code_with_digits_detects_pokemon(self) -> None:
        assert classify_game("4 Charizard ex SV03 125") == GameFamily.POKEMON

    def test_magic_header_beats_pokemon_set_line(self) -> None:
        assert classify_game("Deck\n4 Charizard ex SV03 125") == GameFamily.MAGIC

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "4 Lightning Bolt", "Total Cards: 60", "hello world"],
    )
    def test_no_signal_defaults_to_pokemon(self, text: str) -> None:
        assert classify_game(text) == GameFamily.POKEMON


class TestDeterminism:
    def test_repeated_calls_agree(
        self, sample_arena_export: str, sample_ptcgl_export: str
    ) -> None:
        for text in (sample_arena_export, sample_ptcgl_export, "", "4 Lightning Bolt"):
            results = {classify_game(text) for _ in range(5)}
            assert len(results) == 1

    def test_sample_exports(self, sample_arena_export: str, sample_ptcgl_export: str) -> None:
        assert classify_game(sample_arena_export) == GameFamily.MAGIC
        assert classify_game(sample_ptcgl_export) == GameFamily.POKEMON
