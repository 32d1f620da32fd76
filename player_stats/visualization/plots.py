from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd


def plot_season_goals(seasons_df: pd.DataFrame, output_path: str | Path, title: str = "Goals by Season") -> Path | None:
    """Save a grouped bar chart of goals, braces and hat-tricks per season."""
    if seasons_df.empty:
        return None

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    ordered = seasons_df.iloc[::-1].reset_index(drop=True)
    labels = ordered["season_short"] + "\n" + ordered["club"]
    positions = range(len(ordered))
    width = 0.27

    fig, ax = plt.subplots(figsize=(10, 4.5))
    ax.bar([p - width for p in positions], ordered["goals"], width=width, label="Goals", color="#ec4899")
    ax.bar(list(positions), ordered["braces"], width=width, label="Braces", color="#a855f7")
    ax.bar([p + width for p in positions], ordered["hat_tricks"], width=width, label="Hat-tricks", color="#1f2937")
    ax.set_xticks(list(positions))
    ax.set_xticklabels(labels, fontsize=8)
    ax.set_title(title)
    ax.set_ylabel("Count")
    ax.legend()
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
