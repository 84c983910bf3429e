from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Union

from .board import Coord


@dataclass(frozen=True)
class CatPlaced:
    """The cat was put on its starting cell."""
    at: Coord
    kind: str = field(default="cat", init=False)


@dataclass(frozen=True)
class BlockerPlaced:
    at: Coord
    kind: str = field(default="blocked", init=False)


@dataclass(frozen=True)
class CatMoved:
    """The cat stepped from origin to dest; facing is 'left' or 'right'."""
    origin: Coord
    dest: Coord
    facing: str
    kind: str = field(default="cat_moved", init=False)


@dataclass(frozen=True)
class GameReset:
    kind: str = field(default="reset", init=False)


@dataclass(frozen=True)
class StatusChanged:
    """Whose-turn / game-over display should be refreshed."""
    kind: str = field(default="status", init=False)


Event = Union[CatPlaced, BlockerPlaced, CatMoved, GameReset, StatusChanged]


def event_to_json(event: Event) -> Dict[str, Any]:
    out: Dict[str, Any] = {"kind": event.kind}
    if isinstance(event, (CatPlaced, BlockerPlaced)):
        out["at"] = [int(event.at[0]), int(event.at[1])]
    elif isinstance(event, CatMoved):
        out["from"] = [int(event.origin[0]), int(event.origin[1])]
        out["to"] = [int(event.dest[0]), int(event.dest[1])]
        out["facing"] = event.facing
    return out
