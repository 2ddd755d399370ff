"""
Lunar Engine — mean synodic-month phase model.

Lunar age is the time since the reference New Moon folded into
[0, SYNODIC_MONTH_DAYS). Illumination is a cosine approximation and the
phase is read from PHASE_BOUNDARIES, the single table used both for the
current phase and for "days until next phase".

This is a mean-motion model, not an ephemeris.
"""
import math
from datetime import datetime, time, timedelta, timezone

from loguru import logger

import config
from core.cycle_engine import round2
from core.models import LunarSample

SYNODIC = config.LUNAR_CYCLE.period_days
PHASE_UNIT = SYNODIC / config.PHASE_UNIT_DIVISOR

# Boundaries past the month length are capped at it; such phases are empty.
PHASE_BOUNDARIES = tuple(
    min(PHASE_UNIT * m, SYNODIC) if m is not None else SYNODIC
    for m in config.PHASE_END_MULTIPLIERS
)


# ── Time helpers ──────────────────────────────────────────────────────────────

def to_utc(moment) -> datetime:
    """Dates become 00:00 UTC; naive datetimes are taken as UTC."""
    if not isinstance(moment, datetime):
        return datetime.combine(moment, time(0, 0), tzinfo=timezone.utc)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def days_from_reference(moment) -> float:
    delta = to_utc(moment) - config.REFERENCE_NEW_MOON
    return delta.total_seconds() / 86400.0


# ── Age & illumination ────────────────────────────────────────────────────────

def normalize_age(days: float) -> float:
    age = days % SYNODIC
    # a tiny negative offset can round up to the month length
    return 0.0 if age >= SYNODIC else age


def lunar_age(moment) -> float:
    """Days since the most recent New Moon, in [0, SYNODIC_MONTH_DAYS)."""
    return normalize_age(days_from_reference(moment))


def illumination(age: float) -> int:
    """Illuminated fraction in percent: 0 at New Moon, 100 at Full Moon."""
    fraction = (1 - math.cos(2 * math.pi * normalize_age(age) / SYNODIC)) / 2
    return int(math.floor(fraction * 100 + 0.5))


def is_waxing(age: float) -> bool:
    return age < SYNODIC / 2


# ── Phase table ───────────────────────────────────────────────────────────────

def phase_index(age: float) -> int:
    """Index (0–7) of the phase containing `age`."""
    age = normalize_age(age)
    for index, boundary in enumerate(PHASE_BOUNDARIES):
        if age < boundary:
            return index
    return len(PHASE_BOUNDARIES) - 1


def phase_for_index(index: int) -> str:
    if not 0 <= index < len(config.LUNAR_PHASES_ORDER):
        raise IndexError(f"phase index out of range: {index}")
    return config.LUNAR_PHASES_ORDER[index]


def phase_for_age(age: float) -> str:
    return phase_for_index(phase_index(age))


def phase_end_age(index: int) -> float:
    """Lunar age at which the phase with this index ends."""
    phase_for_index(index)
    return PHASE_BOUNDARIES[index]


def days_until_next_phase(age: float) -> float:
    """Unrounded days from `age` to the end of its phase."""
    age = normalize_age(age)
    remaining = phase_end_age(phase_index(age)) - age
    if remaining <= 0:
        remaining += SYNODIC
    return remaining


def next_phase(index: int) -> str:
    """
    Phase that begins when the phase at `index` ends.

    This is the following phase in order, skipping phases whose range is
    empty; the last phase hands over to "new-moon" at the month length.
    """
    return phase_for_age(phase_end_age(index))


# ── Evaluation ────────────────────────────────────────────────────────────────

def evaluate(moment) -> LunarSample:
    """
    Lunar state at a moment.

    Example — at the reference New Moon (2024-01-11 11:57 UTC):
      age 0 → "new-moon", illumination 0
    """
    moment = to_utc(moment)
    age = lunar_age(moment)
    index = phase_index(age)
    sample = LunarSample(
        moment=moment,
        lunar_age=round2(age),
        phase=phase_for_index(index),
        phase_index=index,
        illumination=illumination(age),
        is_waxing=is_waxing(age),
        next_phase=next_phase(index),
        days_until_next_phase=round2(days_until_next_phase(age)),
    )
    logger.debug(
        f"Lunar phase at {moment.isoformat()}: {sample.phase} "
        f"({sample.illumination}% illumination)"
    )
    return sample


def next_full_moon(moment) -> tuple:
    """(moment of the next Full Moon, unrounded days until it)."""
    moment = to_utc(moment)
    age = lunar_age(moment)
    full_age = SYNODIC / 2
    if age < full_age:
        days = full_age - age
    else:
        days = (SYNODIC - age) + full_age
    return moment + timedelta(days=days), days


def next_new_moon(moment) -> tuple:
    """(moment of the next New Moon, unrounded days until it)."""
    moment = to_utc(moment)
    days = SYNODIC - lunar_age(moment)
    return moment + timedelta(days=days), days
