from __future__ import annotations

import logging
import random
from collections import deque
from typing import Deque, Dict, List, Optional, Set, Tuple

from .board import Coord, HexBoard
from .moves import can_escape
from .state import GameState

logger = logging.getLogger(__name__)

STARTING_BLOCKERS = 11
MAX_DEAL_ATTEMPTS = 1000


def _scatter(board: HexBoard, cat: Coord, count: int, rng: random.Random) -> List[Coord]:
    placed: List[Coord] = []
    taken: Set[Coord] = set()
    for _ in range(count):
        while True:
            r = rng.randrange(board.height)
            c = rng.randrange(board.side)
            # Draws past the end of a short row, onto the cat or onto an
            # existing blocker are rolled again.
            if c >= board.row_length(r) or (r, c) == cat or (r, c) in taken:
                continue
            break
        taken.add((r, c))
        placed.append((r, c))
    return placed


def _escape_path_cells(board: HexBoard, start: Coord) -> int:
    """Cells on the shortest open route from start to the border, start excluded."""
    dist: Dict[Coord, int] = {start: 0}
    queue: Deque[Coord] = deque([start])
    while queue:
        current = queue.popleft()
        if board.is_border(current):
            return dist[current]
        for nxt in board.neighbors(current):
            if nxt not in dist:
                dist[nxt] = dist[current] + 1
                queue.append(nxt)
    return 0


def max_blockers(board: HexBoard) -> int:
    """Largest blocker count that can still leave the cat a route to the border."""
    return len(board) - 1 - _escape_path_cells(board, board.center)


def deal_start(
    board: HexBoard,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    blockers: int = STARTING_BLOCKERS,
    max_attempts: int = MAX_DEAL_ATTEMPTS,
) -> Tuple[GameState, List[Coord]]:
    """
    Creates a starting position: cat on the centre cell, owner to move and
    `blockers` random blockers. A batch that leaves the cat without a route
    to the border is thrown away as a whole and drawn again, at most
    `max_attempts` times.
    Returns the state and the blocker coordinates in the order they were drawn.
    """
    limit = max_blockers(board)
    if blockers < 0 or blockers > limit:
        raise ValueError(f"Invalid blocker count: {blockers} (must be 0-{limit})")
    rng = rng or random.Random(seed)
    cat = board.center
    for attempt in range(1, max_attempts + 1):
        placed = _scatter(board, cat, blockers, rng)
        state = GameState(board=board, cat=cat, blocked=frozenset(placed), cats_turn=False)
        if can_escape(state):
            return state, placed
        logger.debug("Discarding blocker batch %d: cat cannot escape", attempt)
    raise RuntimeError(
        f"No escapable layout with {blockers} blockers after {max_attempts} attempts"
    )
