import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from player_stats.config import CONFIG_ENV_VAR, load_config
from player_stats.data_loader import build_player_stats


def _cfg(**estimator) -> dict:
    return {
        "player": {"name": "Test", "number": 9, "contact_links": {"Instagram": "#"}},
        "estimator": estimator,
        "seasons": [
            {"season": "2024/25", "season_short": "24/25", "club": "A", "club_key": "A Fc", "league": "L",
             "matches": 24, "goals": 40, "assists": 3, "hat_tricks": 1, "braces": 7},
            {"season": "2023/24", "season_short": "23/24", "club": "B", "league": "L",
             "matches": 10, "goals": 4, "hat_tricks": 0, "braces": 1},
        ],
    }


class DataLoaderTests(unittest.TestCase):
    def test_estimator_overrides_authored_values(self) -> None:
        stats = build_player_stats(_cfg(enabled=True, hat_trick_target=4))
        self.assertEqual([(r.hat_tricks, r.braces) for r in stats.records], [(4, 12), (0, 0)])

    def test_prebaked_values_kept_when_estimator_disabled(self) -> None:
        stats = build_player_stats(_cfg(enabled=False))
        self.assertEqual([(r.hat_tricks, r.braces) for r in stats.records], [(1, 7), (0, 1)])

    def test_caller_can_override_config(self) -> None:
        stats = build_player_stats(_cfg(enabled=False), use_estimator=True, target=2)
        self.assertEqual(stats.records[0].hat_tricks, 2)

    def test_prebaked_mode_requires_literals(self) -> None:
        cfg = _cfg(enabled=False)
        del cfg["seasons"][1]["braces"]
        with self.assertRaises(ValueError):
            build_player_stats(cfg)

    def test_club_key_defaults_to_club(self) -> None:
        stats = build_player_stats(_cfg())
        self.assertEqual([r.club_key for r in stats.records], ["A Fc", "B"])
        self.assertEqual(stats.records[1].minutes, 0)
        self.assertEqual(stats.player.contact_links, {"Instagram": "#"})

    def test_bad_season_rows_rejected(self) -> None:
        cfg = _cfg()
        cfg["seasons"][0]["goals"] = -3
        with self.assertRaises(ValueError):
            build_player_stats(cfg)

        cfg = _cfg()
        del cfg["seasons"][0]["league"]
        with self.assertRaises(ValueError):
            build_player_stats(cfg)

    def test_player_name_required(self) -> None:
        cfg = _cfg()
        cfg["player"] = {}
        with self.assertRaises(ValueError):
            build_player_stats(cfg)

    def test_config_path_from_environment(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "player.yaml"
            path.write_text("player:\n  name: Env\nseasons: []\n", encoding="utf-8")
            with mock.patch.dict(os.environ, {CONFIG_ENV_VAR: str(path)}):
                self.assertEqual(load_config()["player"]["name"], "Env")

    def test_missing_config_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config(Path(tempfile.gettempdir()) / "does-not-exist-player.yaml")

    def test_fractional_counts_rejected(self) -> None:
        cfg = _cfg()
        cfg["seasons"][0]["goals"] = 10.7
        with self.assertRaises(ValueError):
            build_player_stats(cfg)

        cfg = _cfg()
        cfg["seasons"][0]["matches"] = "5.9"
        with self.assertRaises(ValueError):
            build_player_stats(cfg)

    def test_whole_float_and_boolean_counts(self) -> None:
        cfg = _cfg()
        cfg["seasons"][0]["goals"] = 40.0
        self.assertEqual(build_player_stats(cfg).records[0].goals, 40)

        cfg = _cfg()
        cfg["seasons"][0]["titles"] = True
        with self.assertRaises(ValueError):
            build_player_stats(cfg)

    def test_estimator_switch_must_be_boolean(self) -> None:
        with self.assertRaises(ValueError):
            build_player_stats(_cfg(enabled="false"))


if __name__ == "__main__":
    unittest.main()
