"""
Configuration for the Tic-Tac-Toe CLI and API.

Settings come from environment variables; command-line flags override them.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

SAVE_FILE_NAME = ".tic_tac_toe_game.json"
SESSION_FILE_NAME = ".tic_tac_toe_session.json"


def _home_dir(env: Mapping[str, str]) -> str:
    return env.get("TICTACTOE_HOME") or env.get("HOME") or env.get("USERPROFILE") or os.getcwd()


@dataclass(frozen=True)
class Settings:
    save_file: str
    session_file: str
    log_level: str = "WARNING"

    def override(self, save_file: Optional[str] = None, session_file: Optional[str] = None,
                 verbose: bool = False) -> "Settings":
        return replace(
            self,
            save_file=save_file or self.save_file,
            session_file=session_file or self.session_file,
            log_level="DEBUG" if verbose else self.log_level,
        )


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    home = _home_dir(env)
    return Settings(
        save_file=env.get("TICTACTOE_SAVE_FILE") or os.path.join(home, SAVE_FILE_NAME),
        session_file=env.get("TICTACTOE_SESSION_FILE") or os.path.join(home, SESSION_FILE_NAME),
        log_level=(env.get("TICTACTOE_LOG_LEVEL") or "WARNING").upper(),
    )
