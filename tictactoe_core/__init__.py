"""
Tic-Tac-Toe core Python package.

This package contains the game data structures and pure-logic helpers used
by the command-line front end (cli.py) and the Flask API (app.py).
Modules:
- board.py: Player, Cell, Board, Coord
- state.py: GameState
- rules.py: win/draw detection
- engine.py: GameEngine (sole mutator of the game state)
- coords.py, snapshot.py, store.py, config.py: CLI and persistence glue
"""
