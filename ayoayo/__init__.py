"""Ayoayo rule engine."""

from . import core, env, features
from .core import (
    AyoayoConfig,
    AyoayoGame,
    Board,
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
    initialize_game,
)
from .env import AyoayoEnv
from .features import build_aux_vector, build_board_array, game_to_numpy, legal_action_mask

__all__ = [
    "core",
    "env",
    "features",
    "AyoayoConfig",
    "AyoayoGame",
    "AyoayoEnv",
    "Board",
    "Cup",
    "CupPosition",
    "GameError",
    "GameState",
    "MustFeedError",
    "NoSeedsToSow",
    "NoSuchCup",
    "Outcome",
    "Player",
    "RelayLoopError",
    "initialize_game",
    "build_aux_vector",
    "build_board_array",
    "game_to_numpy",
    "legal_action_mask",
]
