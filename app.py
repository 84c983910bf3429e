from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    ChatNoirGame,
    Coord,
    GameState,
    Event,
    build_board,
    event_to_json,
)

logging.basicConfig(
    level=os.getenv("CHATNOIR_LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# The graph never changes, so one instance serves every request.
BOARD = build_board()


def _default_seed() -> Optional[int]:
    raw = os.getenv("CHATNOIR_SEED")
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def _coord_to_json(c: Coord) -> List[int]:
    return [int(c[0]), int(c[1])]


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "cat": _coord_to_json(s.cat),
        "blocked": [_coord_to_json(c) for c in sorted(s.blocked)],
        "catsTurn": bool(s.cats_turn),
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    cats_turn = obj.get("catsTurn", False)
    if not isinstance(cats_turn, bool):
        raise ValueError("catsTurn must be a boolean")
    cat_r, cat_c = obj["cat"]
    blocked = frozenset((int(r), int(c)) for r, c in obj.get("blocked", []))
    return GameState(
        board=BOARD,
        cat=(int(cat_r), int(cat_c)),
        blocked=blocked,
        cats_turn=cats_turn,
    )


def _game_payload(game: ChatNoirGame, events: List[Event]) -> Dict[str, Any]:
    outcome = game.query_outcome()
    return {
        "ok": True,
        "state": state_to_json(game.state),
        "events": [event_to_json(e) for e in events],
        "status": outcome.text,
        "terminal": outcome.terminal,
        "winner": outcome.winner,
        "toMove": outcome.to_move,
        "legalMoves": [_coord_to_json(c) for c in game.legal_targets()],
    }


def _load_game(body: Dict[str, Any]) -> ChatNoirGame:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    game = ChatNoirGame()
    game.load(json_to_state(s_in))
    return game


def _json_body() -> Optional[Dict[str, Any]]:
    """The request body as a dict, {} when absent, None when it is not a JSON object."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        return None
    return body


def _bad_request(msg: str) -> Any:
    return jsonify({"ok": False, "error": msg}), 400


# ---------- Core Game API ----------

@app.get("/api/title")
def api_title() -> Any:
    return jsonify({"ok": True, "title": ChatNoirGame().title()})


@app.get("/api/board")
def api_board() -> Any:
    rows = []
    for row in BOARD.rows:
        rows.append([
            {
                "at": _coord_to_json(cell.coord),
                "border": cell.is_border,
                "neighbors": [_coord_to_json(n) for n in cell.neighbors],
            }
            for cell in row
        ])
    return jsonify({"ok": True, "side": BOARD.side, "rows": rows})


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("JSON object body required")
    seed = body.get("seed", None)
    if seed is None:
        try:
            seed = _default_seed()
        except ValueError:
            return _bad_request("CHATNOIR_SEED must be an integer")
    elif isinstance(seed, bool) or not isinstance(seed, int):
        return _bad_request("seed must be an integer")
    game = ChatNoirGame(seed=seed)
    events = game.initialize()
    return jsonify(_game_payload(game, events))


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("JSON object body required")
    try:
        game = _load_game(body)
        r, c = body["move"]
        move = (int(r), int(c))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad request: {e}")
    result = game.submit_move(*move)
    if not result.ok:
        return jsonify({
            "ok": False,
            "failure": result.failure,
            "error": result.message,
            "legalMoves": [_coord_to_json(c) for c in game.legal_targets()],
        }), 400
    return jsonify(_game_payload(game, list(result.events)))


@app.post("/api/status")
def api_status() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("JSON object body required")
    try:
        game = _load_game(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    outcome = game.query_outcome()
    return jsonify({
        "ok": True,
        "status": outcome.text,
        "terminal": outcome.terminal,
        "winner": outcome.winner,
        "toMove": outcome.to_move,
    })


@app.post("/api/legal")
def api_legal() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("JSON object body required")
    try:
        game = _load_game(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    return jsonify({"ok": True, "legalMoves": [_coord_to_json(c) for c in game.legal_targets()]})


if __name__ == "__main__":
    host = os.getenv("CHATNOIR_HOST", "127.0.0.1")
    port = int(os.getenv("CHATNOIR_PORT", "5000"))
    app.run(host=host, port=port, debug=False)
