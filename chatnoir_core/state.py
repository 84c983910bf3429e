from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from .board import Coord, HexBoard

CAT = "cat"
OWNER = "owner"


@dataclass(frozen=True)
class GameState:
    """Represents the dynamic state of the game: cat position, blockers and whose turn it is."""
    board: HexBoard
    cat: Coord
    blocked: FrozenSet[Coord]  # only ever grows
    cats_turn: bool

    def __post_init__(self) -> None:
        if not self.board.contains(self.cat):
            raise ValueError(f"Cat position {self.cat} is not on the board")
        if self.cat in self.blocked:
            raise ValueError(f"Cat position {self.cat} is blocked")
        for coord in self.blocked:
            if not self.board.contains(coord):
                raise ValueError(f"Blocked cell {coord} is not on the board")

    def is_blocked(self, coord: Coord) -> bool:
        return coord in self.blocked

    def to_move(self) -> str:
        return CAT if self.cats_turn else OWNER

    def with_turn(self, cats_turn: bool) -> 'GameState':
        return GameState(self.board, self.cat, self.blocked, cats_turn)
