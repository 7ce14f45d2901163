from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import numpy as np
import pandas as pd

from census_mortality.seasons import COLD, WARM

logger = logging.getLogger(__name__)

SEASON_COLORS = {COLD: "tab:blue", WARM: "tab:orange"}


def get_pyplot(disable_plots: bool = False):
    """
    Return matplotlib.pyplot with a safe backend/config for local or headless runs.
    """
    if "MPLCONFIGDIR" not in os.environ:
        mpl_dir = Path(tempfile.gettempdir()) / "census_mortality_mpl"
        mpl_dir.mkdir(parents=True, exist_ok=True)
        os.environ["MPLCONFIGDIR"] = str(mpl_dir)

    import matplotlib

    if disable_plots and "MPLBACKEND" not in os.environ:
        matplotlib.use("Agg", force=True)
    elif "DISPLAY" not in os.environ and "MPLBACKEND" not in os.environ:
        matplotlib.use("Agg", force=True)

    import matplotlib.pyplot as plt

    return plt


def plot_age_histogram(
    age_table: pd.DataFrame,
    out_path: Path,
    dpi: int = 150,
    headless: bool = True,
) -> Path:
    """
    Bar chart of deaths per death age (x = age, y = deaths), saved as PNG.
    """
    plt = get_pyplot(disable_plots=headless)

    plt.figure(figsize=(10, 5))
    plt.bar(age_table["death_age"], age_table["deaths"], width=0.9, color="tab:gray")
    plt.title("Deaths by age at death")
    plt.xlabel("Age at death")
    plt.ylabel("Deaths")
    plt.savefig(out_path, dpi=dpi, bbox_inches="tight")
    plt.close()

    logger.info("Saved age histogram: %s", out_path)
    return Path(out_path)


def _reveal_frames(n_points: int, frame_step: int) -> list[int]:
    # number of points visible in each frame; the last frame shows them all
    frames = list(range(frame_step, n_points, frame_step))
    frames.append(n_points)
    return frames


def animate_date_series(
    series: pd.DataFrame,
    out_path: Path,
    fps: int = 10,
    frame_step: int = 1,
    dpi: int = 100,
    headless: bool = True,
) -> Path:
    """
    Animated line/point chart of monthly deaths.

    Points are coloured by season and revealed left to right along the
    date axis, one frame per `frame_step` dates. Saved as a looping GIF.
    """
    if series.empty:
        raise ValueError("series must contain at least one date")
    if fps < 1:
        raise ValueError("fps must be >= 1")
    if frame_step < 1:
        raise ValueError("frame_step must be >= 1")

    plt = get_pyplot(disable_plots=headless)
    import matplotlib.dates as mdates
    from matplotlib.animation import FuncAnimation, PillowWriter
    from matplotlib.lines import Line2D

    x = mdates.date2num(series["death_date"].to_numpy())
    y = series["total"].to_numpy(dtype=float)
    colors = [SEASON_COLORS[s] for s in series["season"].astype(str)]
    labels = series["death_date"].dt.strftime("%Y-%m").tolist()

    fig, ax = plt.subplots(figsize=(10, 5))
    pad = max((x.max() - x.min()) * 0.02, 15.0)
    ax.set_xlim(x.min() - pad, x.max() + pad)
    ax.set_ylim(0.0, y.max() * 1.1)
    ax.xaxis.set_major_locator(mdates.AutoDateLocator())
    ax.xaxis.set_major_formatter(mdates.DateFormatter("%Y"))
    ax.set_xlabel("Month of death")
    ax.set_ylabel("Deaths")
    ax.legend(
        handles=[
            Line2D([], [], marker="o", linestyle="", color=c, label=s)
            for s, c in SEASON_COLORS.items()
        ],
        loc="upper left",
    )

    (line,) = ax.plot([], [], color="lightgray", linewidth=1.0)
    points = ax.scatter([], [], s=14)

    def update(k: int):
        line.set_data(x[:k], y[:k])
        points.set_offsets(np.column_stack([x[:k], y[:k]]))
        points.set_facecolor(colors[:k])
        points.set_edgecolor(colors[:k])
        ax.set_title(f"Monthly deaths through {labels[k - 1]}")
        return line, points

    anim = FuncAnimation(fig, update, frames=_reveal_frames(len(series), frame_step), blit=False)
    anim.save(str(out_path), writer=PillowWriter(fps=fps), dpi=dpi)
    plt.close(fig)

    logger.info("Saved animation: %s", out_path)
    return Path(out_path)
