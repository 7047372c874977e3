"""Core game logic for Ayoayo."""

from .state import (
    Cup,
    CupPosition,
    GameError,
    GameState,
    MustFeedError,
    NoSeedsToSow,
    NoSuchCup,
    Outcome,
    Player,
    RelayLoopError,
)
from .board import Board, SowFilter, seed_glyph
from .rules import (
    BOARD_SIZE,
    CUPS_PER_PLAYER,
    STARTING_SEEDS,
    AyoayoConfig,
    AyoayoGame,
    enumerate_legal_moves,
    initialize_game,
    simulate_move,
    skip_start_cup,
    sow_from,
)

__all__ = [
    "Player",
    "Outcome",
    "CupPosition",
    "Cup",
    "GameState",
    "GameError",
    "NoSuchCup",
    "NoSeedsToSow",
    "MustFeedError",
    "RelayLoopError",
    "Board",
    "SowFilter",
    "seed_glyph",
    "BOARD_SIZE",
    "CUPS_PER_PLAYER",
    "STARTING_SEEDS",
    "AyoayoConfig",
    "AyoayoGame",
    "enumerate_legal_moves",
    "initialize_game",
    "simulate_move",
    "skip_start_cup",
    "sow_from",
]
