from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.append(str(REPO_ROOT))

from player_stats.data_loader import load_player_stats
from player_stats.models import ALL_TEAMS
from player_stats.stats import PlayerStats
from player_stats.visualization.plots import plot_season_goals


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Derive hat-tricks/braces and export the season table.")
    parser.add_argument("--config", default=None, help="Path to player YAML configuration file.")
    parser.add_argument("--team", default=ALL_TEAMS, help="Club key to filter on (default: all teams).")
    parser.add_argument("--season", default=None, help="Short season code to filter on, e.g. 24/25.")
    parser.add_argument("--target", type=int, default=None, help="Override the hat-trick target.")
    parser.add_argument("--output-dir", default="reports", help="Directory for tables/ and figures/.")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args()


def export_season_report(
    stats: PlayerStats,
    output_dir: str | Path,
    team: str = ALL_TEAMS,
    season: str | None = None,
) -> tuple[Path, Path | None]:
    """Write the filtered season table as CSV plus a per-season figure; return both paths."""
    selected = stats.filter(team, season)
    output_dir = Path(output_dir)
    tables_dir = output_dir / "tables"
    tables_dir.mkdir(parents=True, exist_ok=True)

    seasons_df = stats.to_frame(selected)
    seasons_path = tables_dir / "season_stats.csv"
    seasons_df.to_csv(seasons_path, index=False)
    figure_path = plot_season_goals(
        seasons_df, output_dir / "figures" / "season_goals.png", title=f"{stats.player.name} Goals by Season"
    )
    return seasons_path, figure_path


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    stats = load_player_stats(args.config, target=args.target)
    selected = stats.filter(args.team, args.season)
    totals = stats.aggregate(selected)
    seasons_path, figure_path = export_season_report(stats, args.output_dir, args.team, args.season)

    print(f"Player: {stats.player.name} | seasons selected: {len(selected)}")
    print(
        f"Totals: {totals.matches} matches, {totals.goals} goals, {totals.assists} assists, "
        f"{totals.hat_tricks} hat-tricks, {totals.braces} braces, {totals.titles} titles"
    )
    print(f"Wrote table: {seasons_path}")
    if figure_path is not None:
        print(f"Wrote figure: {figure_path}")
    else:
        print("No seasons matched the filter; figure skipped.")


if __name__ == "__main__":
    main()
