from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from ayoayo.core import AyoayoConfig, AyoayoGame, GameState, Outcome, Player, initialize_game
from ayoayo.features import AUX_VECTOR_SIZE, build_aux_vector, build_board_array, legal_action_mask


class AyoayoEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        config: Optional[AyoayoConfig] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or AyoayoConfig()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        cups = self.config.cups_per_player
        total = 2 * cups * self.config.starting_seeds
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=total, shape=(2, cups), dtype=np.int64),
                "aux": spaces.Box(low=0.0, high=float(total), shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(cups)

        self._game = initialize_game(self.config)

    @property
    def game(self) -> AyoayoGame:
        return self._game

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._game = initialize_game(self.config)
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        if self._enforce_legal and not self.legal_action_mask()[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        self._game.play(int(action_index))

        observation = self._build_observation()
        info = self._build_info()
        reward = self._compute_reward(self._game.state)
        terminated = self._game.is_terminal
        truncated = False
        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        return legal_action_mask(self._game)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._game.render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {"board": build_board_array(self._game), "aux": build_aux_vector(self._game)}

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask()}

    def _compute_reward(self, state: GameState) -> float:
        if state.outcome != Outcome.WON:
            return 0.0
        return 1.0 if state.player == Player.A else -1.0
