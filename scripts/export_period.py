"""
Export — per-day biorhythm and moon values over a date range.

Usage:
    python scripts/export_period.py --birth 1990-01-01 --start 2024-01-01 --days 30
    python scripts/export_period.py --birth 1990-01-01 --start 2024-01-01 --days 90 --out logs/q1.csv

Results are summarised on the console and saved to
logs/period_{birth}_{start}_{days}d.csv
"""
import argparse
import sys
from datetime import date, datetime, time, timezone
from pathlib import Path

import pandas as pd
from loguru import logger

sys.path.insert(0, str(Path(__file__).parent.parent))

import config
from core import lunar
from core.cycle_engine import evaluate_day
from core.period import date_range

COLUMNS = [
    "date", "physical", "emotional", "intellectual", "average",
    "critical_cycles", "critical_day", "advice_key",
    "lunar_phase", "illumination", "lunar_age",
]


def build_frame(birth_date: date, start: date, number_of_days: int) -> pd.DataFrame:
    """One row per day; the moon is sampled at the calendar sample hour (UTC)."""
    sample_time = time(config.CALENDAR_SAMPLE_HOUR_UTC, 0)
    rows = []
    for d in date_range(start, number_of_days):
        day = evaluate_day(birth_date, d)
        moon = lunar.evaluate(datetime.combine(d, sample_time, tzinfo=timezone.utc))
        rows.append({
            "date":            d.isoformat(),
            "physical":        day.physical,
            "emotional":       day.emotional,
            "intellectual":    day.intellectual,
            "average":         day.average,
            "critical_cycles": "|".join(day.critical_cycles),
            "critical_day":    day.critical_day,
            "advice_key":      day.advice_key,
            "lunar_phase":     moon.phase,
            "illumination":    moon.illumination,
            "lunar_age":       moon.lunar_age,
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def run_export(birth_date: date, start: date, number_of_days: int, out_path: Path) -> pd.DataFrame:
    df = build_frame(birth_date, start, number_of_days)

    print(f"\n{'='*60}")
    print(f"PERIOD EXPORT — born {birth_date} ({start} + {number_of_days} days)")
    print(f"{'='*60}")
    print(f"Days:                  {len(df)}")
    print(f"Critical days:         {int(df['critical_day'].sum())}")
    for category in config.BIORHYTHM_CATEGORIES:
        best = df.loc[df[category].idxmax()]
        print(f"Best {category:<13}    {best['date']}  ({best[category]:+.2f})")
    print(f"Full-moon days:        {int((df['lunar_phase'] == 'full-moon').sum())}")
    print(f"New-moon days:         {int((df['lunar_phase'] == 'new-moon').sum())}")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)
    print(f"\nFull results saved to: {out_path}")
    return df


def main():
    parser = argparse.ArgumentParser(description="Cosmic Cycles period export")
    parser.add_argument("--birth", type=str, required=True, help="Birth date (YYYY-MM-DD)")
    parser.add_argument("--start", type=str, default=date.today().isoformat())
    parser.add_argument("--days", type=int, default=30)
    parser.add_argument("--out", type=str, default="", help="Output CSV path (auto if blank)")
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
        else Path(config.LOG_DIR) / f"period_{birth}_{start}_{args.days}d.csv"
    )
    run_export(birth, start, args.days, out_path)


if __name__ == "__main__":
    # Suppress info logs during export
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    main()
