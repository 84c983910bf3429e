from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional, Set

from .board import Coord
from .state import CAT, OWNER, GameState

# Failure kinds for rejected actions.
OFF_BOARD = "off_board"
NOT_ADJACENT = "not_adjacent"
CELL_BLOCKED = "cell_blocked"
CELL_OCCUPIED = "cell_occupied"
GAME_OVER = "game_over"

FAILURE_MESSAGES: Dict[str, str] = {
    OFF_BOARD: "That position is not on the board.",
    NOT_ADJACENT: (
        "The cat cannot teleport! The cat can only move to a "
        "non-blocked space adjacent to its current position. Try again!"
    ),
    CELL_BLOCKED: (
        "The cat is weak and cannot break through a blocker! The cat can "
        "only move to a non-blocked space adjacent to its current position. Try again!"
    ),
    CELL_OCCUPIED: "Blockers cannot be placed on top of the cat or on top of another blocker.",
    GAME_OVER: "The game is over, press reset to start a new game!",
}

LEFT = "left"
RIGHT = "right"


def can_escape(state: GameState) -> bool:
    """
    Breadth-first search from the cat over unblocked cells.
    Returns True as soon as a border cell is discovered next to the frontier.
    """
    board = state.board
    visited: Set[Coord] = {state.cat}
    queue: Deque[Coord] = deque([state.cat])
    while queue:
        current = queue.popleft()
        for nxt in board.neighbors(current):
            if nxt in visited or nxt in state.blocked:
                continue
            if board.is_border(nxt):
                return True
            visited.add(nxt)
            queue.append(nxt)
    return False


def is_terminal(state: GameState) -> bool:
    """The game ends when the cat stands on the border or can no longer reach it."""
    return state.board.is_border(state.cat) or not can_escape(state)


def winner(state: GameState) -> Optional[str]:
    """Returns CAT or OWNER for a finished game, None while it is still going."""
    if not is_terminal(state):
        return None
    if state.board.is_border(state.cat) or can_escape(state):
        return CAT
    return OWNER


def check_cat_move(state: GameState, dest: Coord) -> Optional[str]:
    """Returns the failure kind for moving the cat to dest, or None if the move is legal."""
    if not state.board.contains(dest):
        return OFF_BOARD
    if state.is_blocked(dest):
        return CELL_BLOCKED
    if dest not in state.board.neighbors(state.cat):
        return NOT_ADJACENT
    return None


def check_placement(state: GameState, dest: Coord) -> Optional[str]:
    """Returns the failure kind for blocking dest, or None if the placement is legal."""
    if not state.board.contains(dest):
        return OFF_BOARD
    if dest == state.cat or state.is_blocked(dest):
        return CELL_OCCUPIED
    return None


def apply_cat_move(state: GameState, dest: Coord) -> GameState:
    return GameState(state.board, dest, state.blocked, not state.cats_turn)


def apply_placement(state: GameState, dest: Coord) -> GameState:
    return GameState(state.board, state.cat, state.blocked | {dest}, not state.cats_turn)


def cat_facing(origin: Coord, dest: Coord, middle_row: int) -> str:
    """
    Which way the cat faces after a move. Column change decides it; for a
    same-column hop the tiling shears opposite ways above and below the
    middle row, so moving away from the middle row faces right.
    """
    o_row, o_col = origin
    d_row, d_col = dest
    if d_col > o_col:
        return RIGHT
    if d_col < o_col:
        return LEFT
    if (d_row > o_row and d_row > middle_row) or (d_row < o_row and d_row < middle_row):
        return RIGHT
    return LEFT


def legal_targets(state: GameState) -> List[Coord]:
    """All cells the side to move may act on, sorted. Empty once the game is over."""
    if is_terminal(state):
        return []
    if state.to_move() == CAT:
        return sorted(n for n in state.board.neighbors(state.cat) if not state.is_blocked(n))
    return [c for c in state.board.coords() if c != state.cat and not state.is_blocked(c)]
