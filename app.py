from __future__ import annotations

import logging
import os
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

from tictactoe_core.config import load_settings
from tictactoe_core.coords import parse_move
from tictactoe_core.engine import CellOccupied, GameEngine
from tictactoe_core.snapshot import board_to_json, state_to_json
from tictactoe_core.store import PersistenceUnavailable, load_or_fresh, load_state, save_state

log = logging.getLogger("app")

app = Flask(__name__)


def _open_engine() -> Tuple[GameEngine, str]:
    """Restores the game in progress from the session file."""
    settings = load_settings()
    state, _ = load_or_fresh(settings.session_file)
    return GameEngine(state), settings.session_file


def _engine_json(engine: GameEngine) -> Dict[str, Any]:
    return {
        "state": state_to_json(engine.snapshot()),
        "legalMoves": [[r, c] for (r, c) in engine.legal_moves()],
    }


def _write_failed(e: OSError, engine: GameEngine) -> Any:
    log.debug("write failed: %s", e)
    return jsonify({"ok": False, "error": f"Could not save game: {e}", **_engine_json(engine)}), 500


# ---------- Game API ----------

@app.get("/api/board")
def api_board() -> Any:
    engine, _ = _open_engine()
    return jsonify({"ok": True, **_engine_json(engine)})


@app.post("/api/new")
def api_new() -> Any:
    engine, session_file = _open_engine()
    engine.reset()
    try:
        save_state(session_file, engine.snapshot())
    except OSError as e:
        return _write_failed(e, engine)
    return jsonify({"ok": True, **_engine_json(engine)})


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        body = {}
    parsed = parse_move(str(body.get("move", "")))
    engine, session_file = _open_engine()
    if not parsed.ok:
        return jsonify({"ok": False, "error": parsed.error, **_engine_json(engine)}), 400
    try:
        result = engine.apply_move(parsed.row, parsed.col)
    except CellOccupied as e:
        return jsonify({"ok": False, "error": str(e), **_engine_json(engine)}), 400
    try:
        save_state(session_file, engine.snapshot())
    except OSError as e:
        return _write_failed(e, engine)
    return jsonify({
        "ok": True,
        "outcome": result.outcome.value,
        "winner": result.winner.value if result.winner else None,
        "finalBoard": board_to_json(result.board),
        **_engine_json(engine),
    })


@app.post("/api/save")
def api_save() -> Any:
    engine, _ = _open_engine()
    try:
        save_state(load_settings().save_file, engine.snapshot())
    except OSError as e:
        return _write_failed(e, engine)
    return jsonify({"ok": True, **_engine_json(engine)})


@app.post("/api/load")
def api_load() -> Any:
    settings = load_settings()
    engine, session_file = _open_engine()
    found = True
    try:
        engine.restore(load_state(settings.save_file))
    except PersistenceUnavailable as e:
        log.debug("%s", e)
        engine.reset()
        found = False
    try:
        save_state(session_file, engine.snapshot())
    except OSError as e:
        return _write_failed(e, engine)
    if not found:
        return jsonify({"ok": False, "error": "No saved game found. Starting a new game.", **_engine_json(engine)}), 404
    return jsonify({"ok": True, **_engine_json(engine)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=debug)
