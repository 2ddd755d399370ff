"""
Value objects produced by the engine.

Every result is an immutable dataclass created per call and never persisted.
to_dict() gives a JSON-friendly view (dates as ISO strings) for display and export.
"""
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Optional


def _plain(value):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, _Record):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class _Record:
    def to_dict(self) -> dict:
        return {f.name: _plain(getattr(self, f.name)) for f in fields(self)}


# ── Cycles ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CycleDefinition(_Record):
    id: str
    period_days: float
    critical_threshold: float


@dataclass(frozen=True)
class CycleSample(_Record):
    date: Optional[date]
    cycle_id: str
    days_since_origin: int
    value: float
    critical: bool


@dataclass(frozen=True)
class BiorhythmDay(_Record):
    date: date
    physical: float
    emotional: float
    intellectual: float
    average: float
    critical_cycles: tuple
    critical_day: bool
    triple_critical: bool
    advice_key: str

    def value(self, category: str) -> float:
        return getattr(self, category)


@dataclass(frozen=True)
class CriticalDayInfo(_Record):
    date: date
    critical_cycles: tuple
    physical: float
    emotional: float
    intellectual: float
    severity: str


@dataclass(frozen=True)
class LunarSample(_Record):
    moment: datetime
    lunar_age: float
    phase: str
    phase_index: int
    illumination: int
    is_waxing: bool
    next_phase: str
    days_until_next_phase: float


@dataclass(frozen=True)
class LunarCalendarDay(_Record):
    date: date
    day_of_month: int
    phase: str
    illumination: int
    is_waxing: bool
    is_new_moon: bool
    is_full_moon: bool


@dataclass(frozen=True)
class LunarCalendarMonth(_Record):
    year: int
    month: int
    days: tuple
    new_moons: tuple
    full_moons: tuple


# ── Numerology ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ReductionResult(_Record):
    input: int
    value: int
    is_master: bool


@dataclass(frozen=True)
class NumerologyProfile(_Record):
    name: str
    birth_date: date
    life_path: int
    destiny: int
    soul_urge: int
    personality: int
    birthday: int
    personal_year: int
    has_master_number: bool


@dataclass(frozen=True)
class NumerologyDay(_Record):
    date: date
    universal_day: int
    combined_energy: int
    is_master: bool


# ── Picks & scores ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TarotDraw(_Record):
    date: date
    identity: str
    seed: int
    card_index: int
    card_id: str
    arcana: str
    reversed: bool


@dataclass(frozen=True)
class DailySignReading(_Record):
    date: date
    sign: str
    seed: int
    mood: str
    lucky_number: int
    lucky_color: str
    lucky_time: str


@dataclass(frozen=True)
class CompatibilityScore(_Record):
    per_category: dict = field(hash=False)
    overall: float
    rating: str


@dataclass(frozen=True)
class PeriodSummary(_Record):
    start: date
    days: tuple
    best_date_per_category: dict = field(hash=False)
    critical_day_count: int = 0
    average_per_category: dict = field(default_factory=dict, hash=False)
