"""
Deterministic Seed Generator.

Turns a string key (date + identity) into a stable integer and derives
"random-looking" but reproducible picks from it: the daily tarot card,
its orientation, lucky numbers and daily horoscope selections.

Not cryptographic. The hash reproduces 32-bit signed overflow exactly so
the same key gives the same seed on every run and platform.
"""
import struct
from datetime import date
from typing import Optional

from loguru import logger

import config
from core.models import DailySignReading, TarotDraw

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - 0x100000000 if value & _INT32_SIGN else value


def _utf16_units(text: str) -> tuple:
    data = text.encode("utf-16-le")
    return struct.unpack(f"<{len(data) // 2}H", data)


# ── Seeds ─────────────────────────────────────────────────────────────────────

def seed(key: str) -> int:
    """
    Polynomial rolling hash: h = h·31 + UTF-16 code unit, wrapped to 32 bits.

    Characters outside the Basic Multilingual Plane count as their two
    surrogate units. The running value wraps as a signed 32-bit integer after
    every step and the absolute value is returned, so the result lies in
    [0, 2**31].
    """
    h = 0
    for unit in _utf16_units(key):
        h = _to_int32(h * 31 + unit)
    return abs(h)


def daily_key(on: date, identity: Optional[str] = None) -> str:
    return f"{on.isoformat()}-{identity or config.DEFAULT_IDENTITY}"


def lucky_key(on: date, identity: Optional[str] = None) -> str:
    """Lucky-number key: identity immediately followed by the ISO date."""
    return f"{identity or config.DEFAULT_IDENTITY}{on.isoformat()}"


def daily_sign_seed(on: date, sign: str) -> int:
    """Horoscope seed: day of year + year + 100 · sign index."""
    if sign not in config.ZODIAC_SIGN_ORDER:
        raise ValueError(f"unknown zodiac sign: {sign!r}")
    day_of_year = on.timetuple().tm_yday
    return day_of_year + on.year + config.ZODIAC_SIGN_ORDER.index(sign) * 100


# ── Picks ─────────────────────────────────────────────────────────────────────

def pick_index(seed_value: int, size: int) -> int:
    if size <= 0:
        raise ValueError(f"cannot pick from {size} items")
    return seed_value % size


def select(items, seed_value: int):
    return items[pick_index(seed_value, len(items))]


def is_reversed(seed_value: int) -> bool:
    """Roughly one card in three comes out reversed."""
    return seed_value % 3 == 0


def lcg_next(current: int) -> int:
    return (current * config.LCG_MULTIPLIER + config.LCG_INCREMENT) & config.LCG_MASK


def lucky_numbers(
    seed_value: int,
    count: int = config.LUCKY_NUMBER_COUNT,
    low: int = config.LUCKY_NUMBER_RANGE[0],
    high: int = config.LUCKY_NUMBER_RANGE[1],
) -> list[int]:
    """
    `count` distinct numbers in [low, high], sorted ascending.

    The LCG is stepped from the seed and every state is mapped into the range
    until enough distinct values have been collected.
    """
    span = high - low + 1
    if count > span:
        raise ValueError(f"cannot draw {count} distinct numbers from {span}")

    picked = set()
    current = seed_value
    while len(picked) < count:
        current = lcg_next(current)
        picked.add(low + current % span)
    return sorted(picked)


def daily_lucky_numbers(on: date, identity: Optional[str] = None) -> list[int]:
    return lucky_numbers(seed(lucky_key(on, identity)))


# ── Tarot ─────────────────────────────────────────────────────────────────────

def arcana_of(card_index: int) -> str:
    return "major" if card_index < len(config.MAJOR_ARCANA) else "minor"


def daily_card(on: date, identity: Optional[str] = None) -> TarotDraw:
    """
    Card of the day for an identity.

    The same (date, identity) pair always draws the same card and orientation.
    """
    identity = identity or config.DEFAULT_IDENTITY
    seed_value = seed(daily_key(on, identity))
    index = pick_index(seed_value, len(config.TAROT_DECK))
    draw = TarotDraw(
        date=on,
        identity=identity,
        seed=seed_value,
        card_index=index,
        card_id=config.TAROT_DECK[index],
        arcana=arcana_of(index),
        reversed=is_reversed(seed_value),
    )
    logger.debug(f"Daily card for {identity} on {on.isoformat()}: {draw.card_id}")
    return draw


# ── Daily sign reading ────────────────────────────────────────────────────────

def daily_sign_reading(on: date, sign: str) -> DailySignReading:
    """
    Mood, lucky number, colour and time of day for a sign on a date.

    Each pick reads the sign's daily seed shifted by its own offset, so the
    picks vary independently while staying fixed for the day.

    Example: aries on 2024-01-01 (seed 2025)
      mood "dynamic", lucky number 1 + 5 = 6, colour "red", time "10:00"
    """
    sign_seed = daily_sign_seed(on, sign)
    offsets = config.DAILY_PICK_OFFSETS
    element = config.SIGN_ELEMENT[sign]

    reading = DailySignReading(
        date=on,
        sign=sign,
        seed=sign_seed,
        mood=select(config.ELEMENT_MOODS[element], sign_seed + offsets["mood"]),
        lucky_number=select(config.SIGN_LUCKY_NUMBERS[sign], sign_seed) + sign_seed % 10,
        lucky_color=select(config.SIGN_LUCKY_COLORS[sign], sign_seed + offsets["lucky_color"]),
        lucky_time=select(config.LUCKY_TIMES, sign_seed + offsets["lucky_time"]),
    )
    logger.debug(f"Daily reading for {sign} on {on.isoformat()}: {reading.mood}")
    return reading
