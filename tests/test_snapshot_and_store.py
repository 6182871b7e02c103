import json
import os
import tempfile
import unittest

from tictactoe_core.board import Board, Cell, Player
from tictactoe_core.config import load_settings
from tictactoe_core.engine import GameEngine
from tictactoe_core.snapshot import board_from_json, json_to_state, state_to_json
from tictactoe_core.state import GameState
from tictactoe_core.store import PersistenceUnavailable, load_or_fresh, load_state, save_state


class TestSnapshotJson(unittest.TestCase):
    def test_given_fresh_state_when_to_json_then_schema_matches(self):
        self.assertEqual(state_to_json(GameState.fresh()), {
            "board": [[".", ".", "."], [".", ".", "."], [".", ".", "."]],
            "currentPlayer": "X",
        })

    def test_given_played_state_when_roundtrip_json_then_equal(self):
        engine = GameEngine()
        engine.apply_move(0, 2)
        engine.apply_move(1, 1)
        engine.apply_move(2, 0)
        s = engine.snapshot()
        sj = state_to_json(s)
        self.assertEqual(sj["board"][0], [".", ".", "X"])
        self.assertEqual(sj["board"][1], [".", "O", "."])
        self.assertEqual(sj["currentPlayer"], "O")
        self.assertEqual(json_to_state(json.loads(json.dumps(sj))), s)

    def test_given_malformed_json_when_decoding_then_value_error(self):
        bad = [
            [],
            {"board": [[".", ".", "."]] * 3},
            {"currentPlayer": "X"},
            {"board": [[".", "."]] * 3, "currentPlayer": "X"},
            {"board": [[".", ".", "."]] * 2, "currentPlayer": "X"},
            {"board": [[".", ".", "Z"]] * 3, "currentPlayer": "X"},
            {"board": [[".", ".", "."]] * 3, "currentPlayer": "Q"},
        ]
        for obj in bad:
            with self.assertRaises(ValueError):
                json_to_state(obj)

    def test_given_unbalanced_board_when_decoding_then_accepted(self):
        board = board_from_json([["X", "X", "X"], ["X", ".", "."], [".", ".", "."]])
        self.assertEqual(board.grid.count(Cell.X), 4)


class TestStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "nested", "game.json")

    def tearDown(self):
        self._tmp.cleanup()

    def test_given_state_when_saved_then_file_is_indented_json_and_loads_back(self):
        s = GameState(board=Board.empty().with_cell(1, 1, Cell.X), current=Player.O)
        save_state(self.path, s)
        with open(self.path, "r", encoding="utf-8") as f:
            text = f.read()
        self.assertIn('\n  "board"', text)
        self.assertEqual(load_state(self.path), s)
        self.assertEqual(load_or_fresh(self.path), (s, True))

    def test_given_missing_file_when_loading_then_persistence_unavailable(self):
        with self.assertRaises(PersistenceUnavailable):
            load_state(self.path)
        self.assertEqual(load_or_fresh(self.path), (GameState.fresh(), False))

    def test_given_deeply_nested_file_when_loading_then_persistence_unavailable(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("[" * 100000 + "]" * 100000)
        with self.assertRaises(PersistenceUnavailable):
            load_state(self.path)
        self.assertEqual(load_or_fresh(self.path), (GameState.fresh(), False))

    def test_given_corrupt_file_when_loading_then_persistence_unavailable(self):
        os.makedirs(os.path.dirname(self.path))
        for content in ["{not json", '{"board": 3, "currentPlayer": "X"}', "[]"]:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
            with self.assertRaises(PersistenceUnavailable):
                load_state(self.path)
            self.assertEqual(load_or_fresh(self.path), (GameState.fresh(), False))


class TestSettings(unittest.TestCase):
    def test_given_home_only_when_loading_settings_then_default_file_names(self):
        s = load_settings({"HOME": "/home/u"})
        self.assertEqual(s.save_file, os.path.join("/home/u", ".tic_tac_toe_game.json"))
        self.assertEqual(s.session_file, os.path.join("/home/u", ".tic_tac_toe_session.json"))
        self.assertEqual(s.log_level, "WARNING")

    def test_given_overrides_when_loading_settings_then_env_then_flags_win(self):
        env = {
            "HOME": "/home/u",
            "TICTACTOE_HOME": "/data",
            "TICTACTOE_SAVE_FILE": "/x/save.json",
            "TICTACTOE_LOG_LEVEL": "info",
        }
        s = load_settings(env)
        self.assertEqual(s.save_file, "/x/save.json")
        self.assertEqual(s.session_file, os.path.join("/data", ".tic_tac_toe_session.json"))
        self.assertEqual(s.log_level, "INFO")
        s2 = s.override(session_file="/y/session.json", verbose=True)
        self.assertEqual(s2.save_file, "/x/save.json")
        self.assertEqual(s2.session_file, "/y/session.json")
        self.assertEqual(s2.log_level, "DEBUG")


if __name__ == "__main__":
    unittest.main()
