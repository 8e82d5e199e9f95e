from __future__ import annotations

import os
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    Board,
    Color,
    Coord,
    GameSession,
    Move,
    MoveAction,
    NULL_MOVE,
    is_legal,
    legal_moves_from,
    parse_action,
)

app = Flask(__name__)


@dataclass
class _Entry:
    session: GameSession
    # Held for every read-modify-write so a move's legality check and mutation are atomic.
    lock: threading.Lock = field(default_factory=threading.Lock)


_GAMES: Dict[str, _Entry] = {}
_GAMES_LOCK = threading.Lock()
MAX_GAMES = int(os.getenv("PAWNS_MAX_GAMES", "1000"))


def _get_entry(game_id: str) -> Optional[_Entry]:
    with _GAMES_LOCK:
        return _GAMES.get(game_id)


def _register(session: GameSession) -> str:
    """Stores a new game, evicting finished games first and then the oldest once MAX_GAMES is reached."""
    game_id = uuid.uuid4().hex
    with _GAMES_LOCK:
        if len(_GAMES) >= MAX_GAMES:
            for gid in [gid for gid, e in _GAMES.items() if e.session.finished]:
                del _GAMES[gid]
        while _GAMES and len(_GAMES) >= MAX_GAMES:
            del _GAMES[next(iter(_GAMES))]
        _GAMES[game_id] = _Entry(session)
    return game_id


def _json_object() -> Optional[Dict[str, Any]]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _bad_body() -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": "expected a JSON object"}), 400


def state_to_json(s: GameSession) -> Dict[str, Any]:
    last = s.board.last_move
    return {
        "rows": s.board.rows(),
        "board": s.board.pretty(),
        "turn": s.turn.value,
        "lastMove": None if last == NULL_MOVE else last.notation,
        "outcome": s.outcome.value,
        "players": {"white": s.white_name, "black": s.black_name},
        "finished": s.finished,
    }


def _session_from_json(body: Dict[str, Any]) -> GameSession:
    white = str(body.get("white") or "White")
    black = str(body.get("black") or "Black")
    rows = body.get("rows")
    board = Board.initial() if rows is None else Board.from_rows([str(r) for r in rows])
    turn = Color(str(body.get("turn", Color.WHITE.value)))
    last = body.get("lastMove")
    if last:
        move = Move.parse(str(last))
        if board.at(move.dst).color is not turn.opposite():
            raise ValueError(f"lastMove {move} must end on a {turn.opposite().value} pawn")
        board.last_move = move
    return GameSession(white_name=white, black_name=black, board=board, turn=turn)


def _not_found(game_id: str) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": f"unknown game: {game_id}"}), 404


@app.post("/api/new")
def api_new() -> Any:
    body = _json_object()
    if body is None:
        return _bad_body()
    try:
        session = _session_from_json(body)
    except (ValueError, TypeError) as e:
        return jsonify({"ok": False, "error": f"bad state: {e}"}), 400
    game_id = _register(session)
    app.logger.info("new game %s: %s vs %s", game_id, session.white_name, session.black_name)
    return jsonify({"ok": True, "gameId": game_id, "state": state_to_json(session)})


@app.get("/api/games/<game_id>")
def api_get(game_id: str) -> Any:
    entry = _get_entry(game_id)
    if entry is None:
        return _not_found(game_id)
    with entry.lock:
        return jsonify({"ok": True, "state": state_to_json(entry.session)})


@app.post("/api/games/<game_id>/move")
def api_move(game_id: str) -> Any:
    entry = _get_entry(game_id)
    if entry is None:
        return _not_found(game_id)
    body = _json_object()
    if body is None:
        return _bad_body()
    line = str(body.get("move", body.get("input", "")))
    with entry.lock:
        session = entry.session
        if session.finished:
            return jsonify({"ok": False, "error": "game is finished", "state": state_to_json(session)}), 409
        report = session.submit(line)
        state = state_to_json(session)
    if report.rejected is not None:
        return jsonify({"ok": False, "error": report.rejected.message, "reason": report.rejected.reason.value,
                        "state": state}), 400
    if not report.board_changed and not report.finished:
        return jsonify({"ok": False, "error": "Invalid Input", "state": state}), 400
    app.logger.info("game %s: %r -> %s", game_id, line, session.outcome.value)
    return jsonify({"ok": True, "state": state, "messages": report.messages})


@app.post("/api/legal")
def api_legal() -> Any:
    body = _json_object()
    if body is None:
        return _bad_body()
    game_id = str(body.get("gameId", ""))
    entry = _get_entry(game_id)
    if entry is None:
        return _not_found(game_id)
    action = parse_action(str(body.get("move", "")))
    if not isinstance(action, MoveAction):
        return jsonify({"ok": False, "error": "Invalid Input"}), 400
    with entry.lock:
        legal = is_legal(entry.session.board, action.move)
    return jsonify({"ok": True, "legal": legal})


@app.get("/api/games/<game_id>/moves")
def api_moves(game_id: str) -> Any:
    entry = _get_entry(game_id)
    if entry is None:
        return _not_found(game_id)
    try:
        src = Coord.from_notation(request.args.get("from", ""))
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    with entry.lock:
        moves = legal_moves_from(entry.session.board, src)
    return jsonify({"ok": True, "moves": [m.notation for m in moves]})


@app.delete("/api/games/<game_id>")
def api_delete(game_id: str) -> Any:
    with _GAMES_LOCK:
        entry = _GAMES.pop(game_id, None)
    if entry is None:
        return _not_found(game_id)
    return jsonify({"ok": True})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host=os.getenv("PAWNS_HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=debug)
