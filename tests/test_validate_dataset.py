import io
import unittest
from contextlib import redirect_stdout

from player_stats.config import DEFAULT_CONFIG_PATH
from player_stats.data_loader import build_player_stats, load_player_stats
from player_stats.validate_dataset import partition_mismatch, validate


class ValidateDatasetTests(unittest.TestCase):
    def test_shipped_dataset_passes(self) -> None:
        stats = load_player_stats(DEFAULT_CONFIG_PATH)
        buf = io.StringIO()
        with redirect_stdout(buf):
            ok = validate(stats, target=60)
        self.assertTrue(ok, buf.getvalue())
        self.assertNotIn("[FAIL]", buf.getvalue())
        self.assertIsNone(partition_mismatch(stats))

    def test_inconsistent_prebaked_values_fail(self) -> None:
        cfg = {
            "player": {"name": "Test"},
            "estimator": {"enabled": False},
            "seasons": [
                {"season": "2024/25", "season_short": "24/25", "club": "A", "league": "L",
                 "matches": 10, "goals": 12, "hat_tricks": 5, "braces": 2},
            ],
        }
        buf = io.StringIO()
        with redirect_stdout(buf):
            ok = validate(build_player_stats(cfg), target=None)
        self.assertFalse(ok)
        self.assertIn("[FAIL] hat_tricks within 0..braces", buf.getvalue())

    def test_degraded_season_is_accepted_in_estimator_mode(self) -> None:
        cfg = {
            "player": {"name": "Test"},
            "estimator": {"enabled": True, "hat_trick_target": 5},
            "seasons": [
                {"season": "2024/25", "season_short": "24/25", "club": "A", "league": "L", "matches": 5, "goals": 50},
                {"season": "2023/24", "season_short": "23/24", "club": "B", "league": "L", "matches": 24, "goals": 40},
            ],
        }
        stats = build_player_stats(cfg)
        self.assertEqual([(r.hat_tricks, r.braces) for r in stats.records], [(0, 0), (5, 11)])
        buf = io.StringIO()
        with redirect_stdout(buf):
            ok = validate(stats, target=5)
        self.assertTrue(ok, buf.getvalue())
        self.assertIn("[PASS] braces is the minimal consistent count.", buf.getvalue())

    def test_infeasible_season_with_nonzero_values_fails(self) -> None:
        cfg = {
            "player": {"name": "Test"},
            "estimator": {"enabled": False},
            "seasons": [
                {"season": "2024/25", "season_short": "24/25", "club": "A", "league": "L",
                 "matches": 5, "goals": 50, "hat_tricks": 5, "braces": 5},
            ],
        }
        buf = io.StringIO()
        with redirect_stdout(buf):
            ok = validate(build_player_stats(cfg), target=None)
        self.assertFalse(ok)
        self.assertIn("[FAIL] braces is the minimal consistent count", buf.getvalue())


if __name__ == "__main__":
    unittest.main()
