#!/usr/bin/env python3
"""
Biorhythm chart generator.

Produces a 2-panel chart:
  1. Physical, emotional and intellectual cycles with critical days shaded
  2. Lunar illumination with new/full moon markers

Usage:
    python scripts/plot_biorhythm.py --birth 1990-01-01
    python scripts/plot_biorhythm.py \\
        --birth 1990-01-01 \\
        --start 2024-01-01 \\
        --days  60 \\
        --title "Early 2024" \\
        --out   logs/biorhythm_early_2024.png
"""

import argparse
import sys
from datetime import date
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless; we only save to file

import matplotlib.dates as mdates
import matplotlib.gridspec as gridspec
import matplotlib.pyplot as plt
import pandas as pd
from loguru import logger

# ── Allow importing from project root ─────────────────────────────────────────
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

import config
from scripts.export_period import build_frame

# ── Colour palette (dark theme) ────────────────────────────────────────────────
BG       = "#0d1117"
SURFACE  = "#161b22"
BORDER   = "#30363d"
TEXT     = "#e6edf3"
MUTED    = "#8b949e"
BLUE     = "#58a6ff"
GREEN    = "#3fb950"
RED      = "#f85149"
ORANGE   = "#d29922"
PURPLE   = "#bc8cff"

CYCLE_COLORS = {
    "physical":     RED,
    "emotional":    GREEN,
    "intellectual": BLUE,
}


def _style_axis(ax):
    ax.set_facecolor(SURFACE)
    for spine in ax.spines.values():
        spine.set_color(BORDER)
    ax.tick_params(colors=MUTED, labelsize=8)
    ax.grid(color=BORDER, linewidth=0.5, alpha=0.6)


# ─────────────────────────────────────────────────────────────────────────────
def make_chart(df: pd.DataFrame, title: str, out_path: Path) -> Path:
    dates = pd.to_datetime(df["date"])

    fig = plt.figure(figsize=(14, 8), facecolor=BG)
    gs = gridspec.GridSpec(2, 1, height_ratios=[3, 1], hspace=0.08)
    ax_bio = fig.add_subplot(gs[0])
    ax_moon = fig.add_subplot(gs[1], sharex=ax_bio)
    for ax in (ax_bio, ax_moon):
        _style_axis(ax)

    # ── Panel 1: cycles ───────────────────────────────────────────────────────
    for category in config.BIORHYTHM_CATEGORIES:
        ax_bio.plot(dates, df[category], color=CYCLE_COLORS[category],
                    linewidth=1.6, label=category.title())
    ax_bio.axhline(0, color=MUTED, linewidth=0.8)
    ax_bio.axhspan(-config.CRITICAL_THRESHOLD, config.CRITICAL_THRESHOLD,
                   color=ORANGE, alpha=0.12)

    for d in dates[df["critical_day"].astype(bool)]:
        ax_bio.axvline(d, color=ORANGE, linewidth=0.8, alpha=0.5, linestyle="--")

    ax_bio.set_ylim(-110, 110)
    ax_bio.set_ylabel("Cycle value", fontsize=9, color=TEXT)
    ax_bio.set_title(title, fontsize=13, color=TEXT, pad=12)
    ax_bio.legend(loc="upper right", fontsize=8, facecolor=SURFACE,
                  edgecolor=BORDER, labelcolor=TEXT)
    ax_bio.tick_params(labelbottom=False)

    # ── Panel 2: moon ─────────────────────────────────────────────────────────
    ax_moon.fill_between(dates, df["illumination"], color=PURPLE, alpha=0.35)
    ax_moon.plot(dates, df["illumination"], color=PURPLE, linewidth=1.2)
    full = df["lunar_phase"] == "full-moon"
    new = df["lunar_phase"] == "new-moon"
    ax_moon.scatter(dates[full], df.loc[full, "illumination"], color=TEXT, s=18, zorder=3)
    ax_moon.scatter(dates[new], df.loc[new, "illumination"], color=MUTED, s=18, zorder=3)
    ax_moon.set_ylim(0, 105)
    ax_moon.set_ylabel("Illum. %", fontsize=9, color=TEXT)
    ax_moon.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))

    # ── Summary stats box ──────────────────────────────────────────────────────
    txt = (
        f"Days: {len(df)}    "
        f"Critical days: {int(df['critical_day'].sum())}    "
        + "    ".join(
            f"Avg {c}: {df[c].mean():+.1f}" for c in config.BIORHYTHM_CATEGORIES
        )
    )
    fig.text(0.5, 0.965, txt, ha="center", va="top", fontsize=9.5,
             color=TEXT, fontfamily="monospace",
             parse_math=False,
             bbox=dict(facecolor=SURFACE, edgecolor=BORDER, boxstyle="round,pad=0.4"))

    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=BG)
    plt.close(fig)
    print(f"\n✓  Chart saved → {out_path.resolve()}")
    return out_path


# ─────────────────────────────────────────────────────────────────────────────
def main():
    parser = argparse.ArgumentParser(description="Cosmic Cycles biorhythm chart generator")
    parser.add_argument("--birth", required=True, help="Birth date (YYYY-MM-DD)")
    parser.add_argument("--start", default=date.today().isoformat(), help="First day of the chart")
    parser.add_argument("--days",  type=int, default=30, help="Number of days to plot")
    parser.add_argument("--title", default="Biorhythm", help="Chart title")
    parser.add_argument("--out",   default="",          help="Output PNG path (auto if blank)")
    args = parser.parse_args()

    birth = date.fromisoformat(args.birth)
    start = date.fromisoformat(args.start)
    if start < birth:
        parser.error("--start cannot be before --birth")
    if args.days < 1:
        parser.error("--days must be at least 1")

    out_path = (
        Path(args.out)
        if args.out
        else ROOT / config.LOG_DIR / f"chart_{args.title.replace(' ', '_').lower()}_{start}.png"
    )

    print(f"Computing {args.days} days from {start} for birth date {birth}")
    df = build_frame(birth, start, args.days)
    make_chart(df, args.title, out_path)


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    main()
