from __future__ import annotations

from typing import Tuple

import numpy as np

from ayoayo.core import AyoayoGame

AUX_VECTOR_SIZE = 4  # banks (2) + player-to-move one-hot (2)


def build_board_array(game: AyoayoGame) -> np.ndarray:
    """Return seed counts with shape (2, cups_per_player), row 0 is Player A."""
    return game.board.seeds.reshape(2, game.cups_per_player).astype(np.int64)


def build_aux_vector(game: AyoayoGame) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[:2] = game.board.banks.astype(np.float32)
    player = game.current_player
    if player is not None:
        aux[2 + int(player)] = 1.0
    return aux


def game_to_numpy(game: AyoayoGame) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_array(game), build_aux_vector(game)


def legal_action_mask(game: AyoayoGame) -> np.ndarray:
    mask = np.zeros(game.cups_per_player, dtype=np.int8)
    for index in game.legal_moves():
        mask[index] = 1
    return mask

