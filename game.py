from __future__ import annotations

# Facade module that re-exports the Chat Noir core.
# The Flask app and the tests import from here; single-responsibility
# modules live under chatnoir_core/*.

from chatnoir_core.board import (  # noqa: F401
    Cell,
    Coord,
    HexBoard,
    SIDE,
    build_board,
)
from chatnoir_core.state import CAT, OWNER, GameState  # noqa: F401
from chatnoir_core.moves import (  # noqa: F401
    CELL_BLOCKED,
    CELL_OCCUPIED,
    FAILURE_MESSAGES,
    GAME_OVER,
    LEFT,
    NOT_ADJACENT,
    OFF_BOARD,
    RIGHT,
    apply_cat_move,
    apply_placement,
    can_escape,
    cat_facing,
    check_cat_move,
    check_placement,
    is_terminal,
    legal_targets,
    winner,
)
from chatnoir_core.deal import MAX_DEAL_ATTEMPTS, STARTING_BLOCKERS, deal_start, max_blockers  # noqa: F401
from chatnoir_core.events import (  # noqa: F401
    BlockerPlaced,
    CatMoved,
    CatPlaced,
    Event,
    GameReset,
    StatusChanged,
    event_to_json,
)
from chatnoir_core.engine import TITLE, ChatNoirGame, MoveResult, Outcome  # noqa: F401


def main() -> None:
    # CLI driver delegated to chatnoir_core.cli
    from chatnoir_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
