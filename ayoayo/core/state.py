from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class Player(IntEnum):
    A = 0
    B = 1

    def other(self) -> "Player":
        return Player.B if self is Player.A else Player.A

    @property
    def label(self) -> str:
        return f"Player {self.name}"


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class CupPosition:
    owner: Player
    index: int

    def mirror(self) -> "CupPosition":
        return CupPosition(self.owner.other(), self.index)


@dataclass(frozen=True)
class Cup:
    owner: Player
    index: int
    seeds: int

    @property
    def position(self) -> CupPosition:
        return CupPosition(self.owner, self.index)


@dataclass(frozen=True)
class GameState:
    """Whose turn it is, or how the game ended.

    ``player`` is the player to move while in progress, the winner once won,
    and ``None`` for a draw.
    """

    outcome: Outcome
    player: Optional[Player] = None

    @classmethod
    def in_progress(cls, player: Player) -> "GameState":
        return cls(Outcome.IN_PROGRESS, player)

    @classmethod
    def won(cls, player: Player) -> "GameState":
        return cls(Outcome.WON, player)

    @classmethod
    def draw(cls) -> "GameState":
        return cls(Outcome.DRAW, None)

    @property
    def is_terminal(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    def __str__(self) -> str:
        if self.outcome == Outcome.IN_PROGRESS:
            return f"{self.player.label} to move"
        if self.outcome == Outcome.WON:
            return f"{self.player.label} won"
        return "draw"


class GameError(ValueError):
    default_message = "Move rejected."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class NoSuchCup(GameError):
    default_message = "The cup you chose doesn't exist."


class NoSeedsToSow(GameError):
    default_message = "The cup you chose has no seeds."


class MustFeedError(GameError):
    default_message = "You must feed your opponent seeds."


class RelayLoopError(GameError):
    """A relay sow returned to a board it had already produced."""

    default_message = "The seeds from that cup would never come to rest."
