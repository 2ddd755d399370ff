"""
Period Aggregator — folds per-day results over a date range.

Provides:
  - Biorhythm period summary (best day per category, averages, critical count)
  - Critical days with a severity level
  - Lunar calendar for a calendar month
  - Numerology day energies for a calendar month
"""
import calendar
from datetime import date, datetime, time, timedelta, timezone

import numpy as np
from loguru import logger

import config
from core import lunar
from core.cycle_engine import evaluate_day, raw_values, round2, severity_for
from core.models import (
    CriticalDayInfo,
    LunarCalendarDay,
    LunarCalendarMonth,
    NumerologyDay,
    PeriodSummary,
)
from core.numerology import combined_energy, is_master_number, universal_day_number


def date_range(start: date, number_of_days: int) -> list[date]:
    """Dates in [start, start + number_of_days)."""
    if number_of_days < 1:
        raise ValueError(f"a period needs at least one day, got {number_of_days}")
    return [start + timedelta(days=i) for i in range(number_of_days)]


# ── Biorhythm ─────────────────────────────────────────────────────────────────

def aggregate(birth_date: date, start: date, number_of_days: int) -> PeriodSummary:
    """
    Summarise a person's biorhythm over a window (7 or 30 days in practice).

    Best days and averages are computed on unrounded values; only the
    returned averages are rounded. On ties the earliest date wins.
    """
    dates = date_range(start, number_of_days)
    days = tuple(evaluate_day(birth_date, d) for d in dates)

    categories = config.BIORHYTHM_CATEGORIES
    rows = (raw_values(birth_date, d) for d in dates)
    raw = np.array([[row[c] for c in categories] for row in rows], dtype=float)
    overall = raw.mean(axis=1)

    # argmax returns the first maximum, so a later equal value never replaces it
    best = {c: dates[int(np.argmax(raw[:, i]))] for i, c in enumerate(categories)}
    best["overall"] = dates[int(np.argmax(overall))]

    totals = raw.sum(axis=0)
    averages = {c: round2(float(totals[i]) / len(dates)) for i, c in enumerate(categories)}

    summary = PeriodSummary(
        start=start,
        days=days,
        best_date_per_category=best,
        critical_day_count=sum(1 for d in days if d.critical_day),
        average_per_category=averages,
    )
    logger.debug(
        f"Biorhythm period {start.isoformat()} +{number_of_days}d: "
        f"{summary.critical_day_count} critical day(s), averages {averages}"
    )
    return summary


def find_critical(birth_date: date, start: date, number_of_days: int) -> list[CriticalDayInfo]:
    """Critical days in the window, using the same predicate as a single-day reading."""
    critical_days = []
    for d in date_range(start, number_of_days):
        day = evaluate_day(birth_date, d)
        if not day.critical_day:
            continue
        critical_days.append(CriticalDayInfo(
            date=day.date,
            critical_cycles=day.critical_cycles,
            physical=day.physical,
            emotional=day.emotional,
            intellectual=day.intellectual,
            severity=severity_for(len(day.critical_cycles)),
        ))

    logger.debug(
        f"{len(critical_days)} critical day(s) in {number_of_days} days "
        f"from {start.isoformat()}"
    )
    return critical_days


# ── Lunar ─────────────────────────────────────────────────────────────────────

def lunar_calendar(year: int, month: int) -> LunarCalendarMonth:
    """Phase and illumination for every day of a month, sampled at noon UTC."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")

    days_in_month = calendar.monthrange(year, month)[1]
    sample_time = time(config.CALENDAR_SAMPLE_HOUR_UTC, 0)

    days = []
    for day_of_month in range(1, days_in_month + 1):
        moment = datetime.combine(date(year, month, day_of_month), sample_time, tzinfo=timezone.utc)
        age = lunar.lunar_age(moment)
        phase = lunar.phase_for_age(age)
        days.append(LunarCalendarDay(
            date=moment.date(),
            day_of_month=day_of_month,
            phase=phase,
            illumination=lunar.illumination(age),
            is_waxing=lunar.is_waxing(age),
            is_new_moon=phase == "new-moon",
            is_full_moon=phase == "full-moon",
        ))

    logger.debug(f"Lunar calendar for {year}-{month:02d}: {days_in_month} days")
    return LunarCalendarMonth(
        year=year,
        month=month,
        days=tuple(days),
        new_moons=tuple(d for d in days if d.is_new_moon),
        full_moons=tuple(d for d in days if d.is_full_moon),
    )


# ── Numerology ────────────────────────────────────────────────────────────────

def numerology_calendar(year: int, month: int, personal_number: int) -> list[NumerologyDay]:
    """Universal day number and combined energy for every day of a month."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")

    days = []
    for day_of_month in range(1, calendar.monthrange(year, month)[1] + 1):
        d = date(year, month, day_of_month)
        energy = combined_energy(personal_number, d)
        days.append(NumerologyDay(
            date=d,
            universal_day=universal_day_number(d),
            combined_energy=energy,
            is_master=is_master_number(energy),
        ))
    return days
