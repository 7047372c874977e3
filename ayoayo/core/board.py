from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from .state import Cup, CupPosition, NoSeedsToSow, NoSuchCup, Player

SeedArray = NDArray[np.int64]

# (candidate, start cup owner, start cup index) -> may the candidate receive a seed
SowFilter = Callable[[CupPosition, Player, int], bool]


def seed_glyph(count: int) -> str:
    """Circled numeral for a seed count, plain digits past fifty."""
    if count == 0:
        return "⓪"
    if 1 <= count <= 20:
        return chr(0x2460 + count - 1)
    if 21 <= count <= 35:
        return chr(0x3251 + count - 21)
    if 36 <= count <= 50:
        return chr(0x32B1 + count - 36)
    return str(count)


@dataclass
class Board:
    cups_per_player: int
    seeds: SeedArray  # shape (2 * cups_per_player,), Player A's cups first
    banks: SeedArray  # shape (2,), indexed by Player
    in_hand: SeedArray  # shape (2,), indexed by Player

    @classmethod
    def from_cups(
        cls,
        cups: Sequence[Cup],
        players: Iterable[Player] = (Player.A, Player.B),
    ) -> "Board":
        if set(players) != set(Player):
            raise ValueError("A board needs exactly Player A and Player B.")
        if len(cups) % 2 != 0 or not cups:
            raise ValueError("Both players need the same, non-zero number of cups.")

        cups_per_player = len(cups) // 2
        seeds = np.zeros(len(cups), dtype=np.int64)
        seen = set()
        for cup in cups:
            if not 0 <= cup.index < cups_per_player:
                raise ValueError(f"Cup index {cup.index} out of range.")
            if cup.seeds < 0:
                raise ValueError("Seed counts cannot be negative.")
            if cup.position in seen:
                raise ValueError(f"Duplicate cup {cup.position}.")
            seen.add(cup.position)
            seeds[int(cup.owner) * cups_per_player + cup.index] = cup.seeds

        return cls(
            cups_per_player=cups_per_player,
            seeds=seeds,
            banks=np.zeros(2, dtype=np.int64),
            in_hand=np.zeros(2, dtype=np.int64),
        )

    @classmethod
    def filled(cls, cups_per_player: int, seeds_per_cup: int) -> "Board":
        cups = [
            Cup(owner=player, index=i, seeds=seeds_per_cup)
            for player in Player
            for i in range(cups_per_player)
        ]
        return cls.from_cups(cups)

    def copy(self) -> "Board":
        return Board(
            cups_per_player=self.cups_per_player,
            seeds=self.seeds.copy(),
            banks=self.banks.copy(),
            in_hand=self.in_hand.copy(),
        )

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------
    def has_position(self, position: CupPosition) -> bool:
        return 0 <= position.index < self.cups_per_player

    def offset(self, position: CupPosition) -> int:
        return int(position.owner) * self.cups_per_player + position.index

    def position_at(self, offset: int) -> CupPosition:
        owner, index = divmod(offset, self.cups_per_player)
        return CupPosition(Player(owner), index)

    def _cup_at(self, offset: int) -> Cup:
        position = self.position_at(offset)
        return Cup(owner=position.owner, index=position.index, seeds=int(self.seeds[offset]))

    def cups(self, player: Optional[Player] = None) -> List[Cup]:
        cups = [self._cup_at(offset) for offset in range(self.seeds.size)]
        if player is None:
            return cups
        return [cup for cup in cups if cup.owner == player]

    def get_cup(self, position: CupPosition) -> Optional[Cup]:
        if not self.has_position(position):
            return None
        return self._cup_at(self.offset(position))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def side(self, player: Player) -> SeedArray:
        start = int(player) * self.cups_per_player
        return self.seeds[start : start + self.cups_per_player]

    def starving(self, player: Player) -> bool:
        return not self.side(player).any()

    def seeds_on_board(self) -> int:
        return int(self.seeds.sum())

    def total_seeds(self) -> int:
        return self.seeds_on_board() + int(self.banks.sum()) + int(self.in_hand.sum())

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------
    def pickup(self, position: CupPosition, player: Player) -> None:
        if not self.has_position(position):
            raise NoSuchCup()
        offset = self.offset(position)
        self.in_hand[player] = self.seeds[offset]
        self.seeds[offset] = 0

    def sow(self, player: Player, start: CupPosition, sow_filter: SowFilter) -> Cup:
        """Drop the player's in-hand seeds one per cup, walking on from ``start``.

        Cups rejected by ``sow_filter`` are passed over without a seed. Returns
        the last cup seeded.
        """
        if not self.has_position(start):
            raise NoSuchCup()
        remaining = int(self.in_hand[player])
        if remaining == 0:
            raise NoSeedsToSow()

        size = self.seeds.size
        cursor = self.offset(start)
        passed_over = 0
        while remaining > 0:
            cursor = (cursor + 1) % size
            if not sow_filter(self.position_at(cursor), start.owner, start.index):
                passed_over += 1
                if passed_over >= size:
                    raise ValueError("Sow filter rejects every cup on the board.")
                continue
            passed_over = 0
            self.seeds[cursor] += 1
            remaining -= 1

        self.in_hand[player] = 0
        return self._cup_at(cursor)

    def bank(self, player: Player) -> None:
        self.banks[player] += self.in_hand[player]
        self.in_hand[player] = 0

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> str:
        top = "|".join(seed_glyph(int(n)) for n in self.side(Player.A))
        bottom = "|".join(seed_glyph(int(n)) for n in self.side(Player.B))
        return f"{int(self.banks[Player.A])} - {top}\n{bottom} - {int(self.banks[Player.B])}"

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.cups_per_player == other.cups_per_player
            and np.array_equal(self.seeds, other.seeds)
            and np.array_equal(self.banks, other.banks)
            and np.array_equal(self.in_hand, other.in_hand)
        )
