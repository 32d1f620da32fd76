import tempfile
import unittest
from pathlib import Path

import pandas as pd

from player_stats.config import DEFAULT_CONFIG_PATH
from player_stats.data_loader import load_player_stats
from player_stats.stats import to_frame
from player_stats.visualization.plots import plot_season_goals
from scripts.run_analysis import export_season_report


class ExportTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.stats = load_player_stats(DEFAULT_CONFIG_PATH)

    def test_report_writes_table_and_figure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            table_path, figure_path = export_season_report(self.stats, tmp, team="Juvenil Fc")
            self.assertTrue(table_path.exists())
            self.assertIsNotNone(figure_path)
            self.assertTrue(figure_path.exists())

            table = pd.read_csv(table_path, dtype={"season_short": str})
            self.assertEqual(table["season_short"].tolist(), ["20/21", "19/20"])
            self.assertEqual(int(table["goals"].sum()), 245)

    def test_empty_selection_skips_figure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            table_path, figure_path = export_season_report(self.stats, tmp, team="Cojos Fc", season="19/20")
            self.assertIsNone(figure_path)
            self.assertTrue(pd.read_csv(table_path).empty)
            self.assertFalse((Path(tmp) / "figures" / "season_goals.png").exists())

    def test_plot_returns_none_for_empty_frame(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(plot_season_goals(to_frame([]), Path(tmp) / "empty.png"))


if __name__ == "__main__":
    unittest.main()
