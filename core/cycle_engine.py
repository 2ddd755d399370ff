"""
Cycle Evaluator — biorhythm cycles.

Each cycle is a sinusoid keyed by the whole days elapsed since birth:

    value = sin(2π · days / period) · 100

Outputs:
  - One CycleSample per cycle
  - A BiorhythmDay combining physical, emotional and intellectual cycles,
    with the critical-day flags and the general advice key for the day
"""
import math
from datetime import date, datetime
from typing import Optional

import config
from core.models import BiorhythmDay, CycleDefinition, CycleSample


# ── Numeric helpers ───────────────────────────────────────────────────────────

def round2(value: float) -> float:
    """Round half up to 2 decimals. Applied once, when a value leaves the engine."""
    return math.floor(value * 100 + 0.5) / 100


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def days_since_origin(origin: date, target: date) -> int:
    """Whole days between two midnight-normalized dates."""
    days = (_as_date(target) - _as_date(origin)).days
    if days < 0:
        raise ValueError(
            f"target date {_as_date(target).isoformat()} precedes origin "
            f"{_as_date(origin).isoformat()}"
        )
    return days


def cycle_value(days: float, period: float) -> float:
    """Unrounded cycle value in [-100, 100]."""
    return math.sin(2 * math.pi * days / period) * 100


# ── Classification ────────────────────────────────────────────────────────────

def is_critical(value: float, threshold: float = config.CRITICAL_THRESHOLD) -> bool:
    """A cycle is critical when it is near its zero crossing."""
    return abs(value) < threshold


def severity_for(critical_count: int) -> str:
    if critical_count >= 3:
        return "high"
    if critical_count == 2:
        return "medium"
    if critical_count == 1:
        return "low"
    raise ValueError("a day with no critical cycle has no severity")


def get_cycle(cycle_id: str) -> CycleDefinition:
    try:
        return config.BIORHYTHM_CYCLES[cycle_id]
    except KeyError:
        raise ValueError(f"unknown cycle id: {cycle_id!r}") from None


def advice_key(values: dict, critical_count: int) -> str:
    """
    Pick the general advice key for a day.

    Critical counts win over highs and lows; a single high cycle gets its own key.
    """
    high = [c for c, v in values.items() if v > config.HIGH_THRESHOLD]
    low = [c for c, v in values.items() if v < -config.HIGH_THRESHOLD]

    if critical_count == 3:
        return "all_critical"
    if critical_count == 2:
        return "double_critical"
    if len(high) == 3:
        return "all_high"
    if len(low) == 3:
        return "all_low"
    if len(high) == 1:
        return f"{high[0]}_high"
    if high or low:
        return "mixed"
    return "balanced"


# ── Evaluation ────────────────────────────────────────────────────────────────

def evaluate(cycle: CycleDefinition, days: int, on: Optional[date] = None) -> CycleSample:
    """Evaluate one cycle `days` after its origin."""
    if days < 0:
        raise ValueError(f"negative day count: {days}")
    value = round2(cycle_value(days, cycle.period_days))
    return CycleSample(
        date=on,
        cycle_id=cycle.id,
        days_since_origin=days,
        value=value,
        critical=is_critical(value, cycle.critical_threshold),
    )


def raw_values(birth_date: date, target_date: date) -> dict:
    """Unrounded value of every biorhythm cycle on a date."""
    days = days_since_origin(birth_date, target_date)
    return {
        cycle_id: cycle_value(days, cycle.period_days)
        for cycle_id, cycle in config.BIORHYTHM_CYCLES.items()
    }


def evaluate_day(birth_date: date, target_date: date) -> BiorhythmDay:
    """
    Full biorhythm for one person on one date.

    Example — born 1990-01-01, evaluated 1990-01-24:
      23 days → physical = sin(2π)·100 = 0 → critical
    """
    target = _as_date(target_date)
    days = days_since_origin(birth_date, target)
    samples = {
        cycle_id: evaluate(cycle, days, target)
        for cycle_id, cycle in config.BIORHYTHM_CYCLES.items()
    }
    raw = raw_values(birth_date, target)
    values = {cycle_id: s.value for cycle_id, s in samples.items()}
    critical = tuple(cycle_id for cycle_id, s in samples.items() if s.critical)

    return BiorhythmDay(
        date=target,
        physical=values["physical"],
        emotional=values["emotional"],
        intellectual=values["intellectual"],
        average=round2(sum(raw.values()) / len(raw)),
        critical_cycles=critical,
        critical_day=len(critical) > 0,
        triple_critical=len(critical) == len(samples),
        advice_key=advice_key(values, len(critical)),
    )
