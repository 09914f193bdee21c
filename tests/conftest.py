import pytest


@pytest.fixture
def sample_arena_export() -> str:
    """Sample Arena deck export for testing."""
    return """Deck
4 Lightning Bolt (LEB) 163
4 Monastery Swiftspear (BRO) 144
20 Mountain (NEO) 290

Sideboard
2 Abrade (VOW) 139"""


@pytest.fixture
def sample_ptcgl_export() -> str:
    """Sample Pokémon TCG Live export for testing."""
    return """Pokémon: 12
4 Hoothoot SCR 114
3 Noctowl SCR 115
2 Fan Rotom SCR 118
3 Terapagos ex SCR 128

Trainer: 16
4 Professor's Research SVI 189
4 Iono PAL 185
4 Nest Ball SVI 181
4 Ultra Ball SVI 196

Energy: 12
8 Basic {W} Energy SVE 3
4 Jet Energy PAL 190

Total Cards: 40"""


@pytest.fixture
def sample_tcgplayer_export() -> str:
    """Sample TCGPlayer commander export for testing."""
    return """1 Sol Ring [Commander Legends]
1x Arcane Signet [Commander Legends]
1 Command Tower [Commander Legends]"""
