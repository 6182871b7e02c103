from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import Settings, load_settings
from .coords import parse_move
from .engine import CellOccupied, GameEngine
from .rules import Outcome
from .state import GameState
from .store import PersistenceUnavailable, load_or_fresh, load_state, save_state

log = logging.getLogger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='tictactoe', description='Command-line Tic-Tac-Toe with saved games')
    parser.add_argument('--save-file', default=None, help='Path of the save slot used by save/load')
    parser.add_argument('--session-file', default=None, help='Path of the file holding the game in progress')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    sub = parser.add_subparsers(dest='command')
    p_move = sub.add_parser('move', help='Make a move using coordinates (e.g., 1,2)')
    p_move.add_argument('coordinates', help='row,col with each value in 1..3')
    sub.add_parser('board', help='Display the current board')
    sub.add_parser('save', help='Save the current game state')
    sub.add_parser('load', help='Load a saved game')
    sub.add_parser('new', help='Discard the game in progress and start over')
    return parser


def resolve_log_level(name: str) -> int:
    """Maps a level name such as 'DEBUG' to its number; unknown names give WARNING."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def show_board(state: GameState) -> None:
    print(state.pretty())


def _persist_session(engine: GameEngine, settings: Settings) -> None:
    try:
        save_state(settings.session_file, engine.snapshot())
    except OSError as e:
        print(f'Warning: could not keep the game in progress: {e}')


def cmd_move(engine: GameEngine, settings: Settings, coordinates: str) -> None:
    parsed = parse_move(coordinates)
    if not parsed.ok:
        print(parsed.error)
        return
    try:
        result = engine.apply_move(parsed.row, parsed.col)
    except CellOccupied:
        print('This cell is already taken! Choose another.')
        return
    _persist_session(engine, settings)
    if result.is_terminal:
        show_board(GameState(result.board, result.player))
        if result.outcome is Outcome.DRAW:
            print('Game is a draw!')
        else:
            print(f'Player {result.winner.value} wins!')
        return
    print('Move successful!')
    show_board(engine.snapshot())


def cmd_save(engine: GameEngine, settings: Settings) -> None:
    try:
        save_state(settings.save_file, engine.snapshot())
    except OSError as e:
        print(f'Could not save game: {e}')
        return
    print('Game saved successfully!')


def cmd_load(engine: GameEngine, settings: Settings) -> None:
    try:
        engine.restore(load_state(settings.save_file))
        print('Game loaded successfully!')
    except PersistenceUnavailable as e:
        log.debug('%s', e)
        engine.reset()
        print('No saved game found. Starting a new game.')
    _persist_session(engine, settings)
    show_board(engine.snapshot())


def cmd_new(engine: GameEngine, settings: Settings) -> None:
    engine.reset()
    _persist_session(engine, settings)
    show_board(engine.snapshot())


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings().override(args.save_file, args.session_file, args.verbose)
    logging.basicConfig(level=resolve_log_level(settings.log_level),
                        format='%(levelname)s %(name)s: %(message)s')

    state, _ = load_or_fresh(settings.session_file)
    engine = GameEngine(state)

    if args.command == 'move':
        cmd_move(engine, settings, args.coordinates)
    elif args.command == 'board':
        show_board(engine.snapshot())
    elif args.command == 'save':
        cmd_save(engine, settings)
    elif args.command == 'load':
        cmd_load(engine, settings)
    elif args.command == 'new':
        cmd_new(engine, settings)
    else:
        parser.print_help()
        show_board(engine.snapshot())
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
