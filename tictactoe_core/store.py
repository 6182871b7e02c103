from __future__ import annotations

import json
import logging
import os
from typing import Tuple

from .snapshot import json_to_state, state_to_json
from .state import GameState

log = logging.getLogger("store")


class PersistenceUnavailable(Exception):
    """The state file is missing, unreadable or does not hold a game."""


def _ensure_parent_dir(path: str) -> None:
    """Ensures the directory for the state file exists before writing."""
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def save_state(path: str, state: GameState) -> None:
    _ensure_parent_dir(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(state_to_json(state), f, indent=2)
    log.debug("saved game to %s", path)


def load_state(path: str) -> GameState:
    """Reads a saved game. Every failure surfaces as PersistenceUnavailable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        state = json_to_state(data)
    except (OSError, ValueError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError; very deep nesting overflows the decoder
        raise PersistenceUnavailable(f"cannot read {path}: {e}") from e
    log.debug("loaded game from %s", path)
    return state


def load_or_fresh(path: str) -> Tuple[GameState, bool]:
    """Returns (state, loaded). Falls back to a fresh game when the file is unusable."""
    try:
        return load_state(path), True
    except PersistenceUnavailable as e:
        log.debug("no usable game at %s: %s", path, e)
        return GameState.fresh(), False
