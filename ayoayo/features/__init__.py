"""Feature extraction helpers for Ayoayo."""

from .observation import (
    AUX_VECTOR_SIZE,
    build_aux_vector,
    build_board_array,
    game_to_numpy,
    legal_action_mask,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "build_aux_vector",
    "build_board_array",
    "game_to_numpy",
    "legal_action_mask",
]
