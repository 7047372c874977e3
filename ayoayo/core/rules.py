from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional

from .board import Board
from .state import (
    CupPosition,
    GameError,
    GameState,
    MustFeedError,
    NoSeedsToSow,
    NoSuchCup,
    Player,
    RelayLoopError,
)

logger = logging.getLogger(__name__)

BOARD_SIZE = 12
CUPS_PER_PLAYER = BOARD_SIZE // 2
STARTING_SEEDS = 4


@dataclass
class AyoayoConfig:
    cups_per_player: int = CUPS_PER_PLAYER
    starting_seeds: int = STARTING_SEEDS

    def __post_init__(self) -> None:
        if self.cups_per_player < 1:
            raise ValueError("cups_per_player must be positive.")
        if self.starting_seeds < 1:
            raise ValueError("starting_seeds must be positive.")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AyoayoConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


def skip_start_cup(candidate: CupPosition, owner: Player, start_index: int) -> bool:
    return not (candidate.owner == owner and candidate.index == start_index)


def sow_from(board: Board, player: Player, cup_index: int) -> None:
    """Play ``player``'s cup at ``cup_index`` on ``board`` in place.

    Seeds are sown from the chosen cup. While the last cup seeded ends up
    holding more than one seed its contents are lifted and sown onward. When
    the final resting cup is the mover's own, the mirror cup is captured into
    the mover's bank.
    """
    start = CupPosition(player, cup_index)
    board.pickup(start, player)
    last = board.sow(player, start, skip_start_cup)

    seen = set()
    while last.seeds > 1:
        key = (board.seeds.tobytes(), board.offset(last.position))
        if key in seen:
            raise RelayLoopError(f"Relay sowing from {start} never comes to rest.")
        seen.add(key)
        board.pickup(last.position, player)
        last = board.sow(player, last.position, skip_start_cup)

    if last.owner == player:
        mirror = last.position.mirror()
        captured = int(board.seeds[board.offset(mirror)])
        board.pickup(mirror, player)
        board.bank(player)
        if captured:
            logger.debug("%s captures %d seeds from %s", player.label, captured, mirror)


def simulate_move(board: Board, player: Player, cup_index: int) -> Board:
    trial = board.copy()
    sow_from(trial, player, cup_index)
    return trial


def _leaves_starving(board: Board, player: Player, cup_index: int) -> bool:
    try:
        trial = simulate_move(board, player, cup_index)
    except GameError:
        return True
    return trial.starving(player.other())


class AyoayoGame:
    """One game of Ayoayo: the committed board and whose turn it is."""

    def __init__(
        self,
        board: Optional[Board] = None,
        state: Optional[GameState] = None,
        *,
        config: Optional[AyoayoConfig] = None,
    ) -> None:
        self.config = config or AyoayoConfig()
        if board is None:
            board = Board.filled(self.config.cups_per_player, self.config.starting_seeds)
        self.board = board
        self.state = state or GameState.in_progress(Player.A)

    @property
    def cups_per_player(self) -> int:
        return self.board.cups_per_player

    @property
    def current_player(self) -> Optional[Player]:
        if self.state.is_terminal:
            return None
        return self.state.player

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal

    def copy(self) -> "AyoayoGame":
        return AyoayoGame(self.board.copy(), self.state, config=self.config)

    def play(self, cup_index: int) -> None:
        if self.state.is_terminal:
            return
        player = self.state.player
        opponent = player.other()

        if not 0 <= cup_index < self.cups_per_player:
            raise NoSuchCup()
        cup = self.board.get_cup(CupPosition(player, cup_index))
        if cup is None:
            raise NoSuchCup()
        if cup.seeds == 0:
            raise NoSeedsToSow()

        must_feed = self.board.starving(opponent)
        trial = simulate_move(self.board, player, cup_index)

        if must_feed and trial.starving(opponent):
            alternatives = (i for i in range(self.cups_per_player) if i != cup_index)
            if any(not _leaves_starving(self.board, player, i) for i in alternatives):
                logger.debug("%s cup %d rejected: opponent must be fed", player.label, cup_index)
                raise MustFeedError()

        self.board = trial
        logger.debug("%s played cup %d\n%s", player.label, cup_index, self.board)

        if self.board.starving(opponent):
            self._finish()
        else:
            self.state = GameState.in_progress(opponent)

    def _finish(self) -> None:
        for cup in self.board.cups():
            self.board.pickup(cup.position, cup.owner)
            self.board.bank(cup.owner)

        bank_a = int(self.board.banks[Player.A])
        bank_b = int(self.board.banks[Player.B])
        if bank_a > bank_b:
            self.state = GameState.won(Player.A)
        elif bank_b > bank_a:
            self.state = GameState.won(Player.B)
        else:
            self.state = GameState.draw()
        logger.info("Game over (%d - %d): %s", bank_a, bank_b, self.state)

    def legal_moves(self) -> List[int]:
        if self.state.is_terminal:
            return []
        player = self.state.player
        outcomes = {}
        for i, seeds in enumerate(self.board.side(player)):
            if seeds == 0:
                continue
            try:
                outcomes[i] = simulate_move(self.board, player, i)
            except RelayLoopError:
                logger.debug("%s cup %d never comes to rest; skipping", player.label, i)
        moves = list(outcomes)
        if not self.board.starving(player.other()):
            return moves
        feeding = [i for i in moves if not outcomes[i].starving(player.other())]
        return feeding or moves

    def render(self) -> str:
        return self.board.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"AyoayoGame(state={self.state})\n{self.board}"


def initialize_game(config: Optional[AyoayoConfig] = None) -> AyoayoGame:
    return AyoayoGame(config=config)


def enumerate_legal_moves(game: AyoayoGame) -> List[int]:
    return game.legal_moves()
