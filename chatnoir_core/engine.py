from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .board import Coord, HexBoard, build_board
from .deal import STARTING_BLOCKERS, deal_start
from .events import BlockerPlaced, CatMoved, CatPlaced, Event, GameReset, StatusChanged
from .moves import (
    FAILURE_MESSAGES,
    GAME_OVER,
    apply_cat_move,
    apply_placement,
    cat_facing,
    check_cat_move,
    check_placement,
    is_terminal,
    legal_targets,
    winner,
)
from .state import CAT, GameState

logger = logging.getLogger(__name__)

TITLE = "Chat Noir"

Listener = Callable[[Event], None]


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a submitted action. On failure `failure` holds the kind and no events were produced."""
    ok: bool
    failure: Optional[str] = None
    message: Optional[str] = None
    events: Tuple[Event, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Outcome:
    terminal: bool
    winner: Optional[str]  # 'cat' / 'owner' once terminal
    to_move: Optional[str]  # 'cat' / 'owner' while playing
    text: str


class ChatNoirGame:
    """
    Stateful game engine driven by a single caller. Every operation runs to
    completion, then the events it produced are handed to subscribers in order.
    """

    def __init__(self, seed: Optional[int] = None, blockers: int = STARTING_BLOCKERS) -> None:
        self._rng = random.Random(seed)
        self._blockers = blockers
        self._state: Optional[GameState] = None
        self._listeners: List[Listener] = []

    # ---------- observers ----------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _publish(self, events: List[Event]) -> None:
        for event in events:
            for listener in list(self._listeners):
                listener(event)

    # ---------- lifecycle ----------

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("Game not initialized; call initialize() first")
        return self._state

    @property
    def board(self) -> HexBoard:
        return self.state.board

    def initialize(self) -> List[Event]:
        """Builds a fresh board and a random solvable starting position."""
        events = self._deal()
        self._publish(events)
        return events

    def reset(self) -> List[Event]:
        events: List[Event] = [GameReset()]
        events.extend(self._deal())
        self._publish(events)
        return events

    def _deal(self) -> List[Event]:
        board = build_board()
        state, placed = deal_start(board, rng=self._rng, blockers=self._blockers)
        self._state = state
        logger.info("New game: cat at %s, %d blockers", state.cat, len(placed))
        events: List[Event] = [CatPlaced(state.cat)]
        events.extend(BlockerPlaced(coord) for coord in placed)
        events.append(StatusChanged())
        return events

    def load(self, state: GameState) -> None:
        """Adopts an existing position instead of dealing a random one."""
        self._state = state

    # ---------- actions ----------

    def submit_move(self, row: int, col: int) -> MoveResult:
        """Cat move or blocker placement at (row, col), depending on whose turn it is."""
        state = self.state
        dest: Coord = (row, col)
        if is_terminal(state):
            return self._reject(GAME_OVER, dest)

        if state.cats_turn:
            failure = check_cat_move(state, dest)
            if failure is not None:
                return self._reject(failure, dest)
            origin = state.cat
            self._state = apply_cat_move(state, dest)
            events: List[Event] = [CatMoved(origin, dest, cat_facing(origin, dest, state.board.middle_row))]
        else:
            failure = check_placement(state, dest)
            if failure is not None:
                return self._reject(failure, dest)
            self._state = apply_placement(state, dest)
            events = [BlockerPlaced(dest)]
        events.append(StatusChanged())

        if is_terminal(self._state):
            logger.info("Game over: %s wins", winner(self._state))
        self._publish(events)
        return MoveResult(ok=True, events=tuple(events))

    def _reject(self, failure: str, dest: Coord) -> MoveResult:
        logger.debug("Rejected %s action at %s: %s", self.state.to_move(), dest, failure)
        return MoveResult(ok=False, failure=failure, message=FAILURE_MESSAGES[failure])

    # ---------- queries ----------

    def is_terminal(self) -> bool:
        return is_terminal(self.state)

    def winner(self) -> Optional[str]:
        return winner(self.state)

    def whose_turn(self) -> str:
        return self.state.to_move()

    @property
    def cat_position(self) -> Coord:
        return self.state.cat

    @property
    def cats_turn(self) -> bool:
        return self.state.cats_turn

    def legal_targets(self) -> List[Coord]:
        return legal_targets(self.state)

    def query_outcome(self) -> Outcome:
        w = self.winner()
        if w is None:
            return Outcome(terminal=False, winner=None, to_move=self.whose_turn(), text=self.status_text())
        return Outcome(terminal=True, winner=w, to_move=None, text=self.status_text())

    def status_text(self) -> str:
        w = self.winner()
        if w is None:
            if self.whose_turn() == CAT:
                return "It's the cat's turn to move!"
            return "It's the owner's turn to move!"
        return f"Game over. The {w} wins!"

    def title(self) -> str:
        return TITLE
