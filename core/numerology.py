"""
Numerology Engine — Pythagorean system calculations.

Provides:
  - Digit reduction, with and without master-number preservation
  - Life Path, Destiny, Soul Urge, Personality and Birthday numbers
  - Personal Year and Universal Day numbers
  - Combined daily energy and the lucky-hour keys derived from it
"""
import unicodedata
from datetime import date

from loguru import logger

import config
from core.models import NumerologyProfile, ReductionResult


# ── Reduction ─────────────────────────────────────────────────────────────────

def digit_sum(n: int) -> int:
    """Sum of the base-10 digits of a non-negative integer."""
    return sum(int(d) for d in str(n))


def is_master_number(n: int) -> bool:
    return n in config.MASTER_NUMBERS


def reduce(n: int) -> int:
    """
    Reduce an integer to a single digit (1–9), preserving master numbers.

    The master check runs before every fold, so 11, 22 and 33 are never
    reduced further:
      1990 → 19 → 10 → 1
      29   → 11
    """
    if n < 0:
        raise ValueError(f"cannot reduce a negative number: {n}")
    while n > 9 and not is_master_number(n):
        n = digit_sum(n)
    return n


def reduce_strict(n: int) -> int:
    """Reduce an integer to a single digit (1–9) with no master-number exception."""
    if n < 0:
        raise ValueError(f"cannot reduce a negative number: {n}")
    while n > 9:
        n = digit_sum(n)
    return n


def reduction_result(n: int) -> ReductionResult:
    value = reduce(n)
    return ReductionResult(input=n, value=value, is_master=is_master_number(value))


# ── Name numbers ──────────────────────────────────────────────────────────────

def _letters(name: str) -> str:
    """Accent-stripped, lower-case, letters-only form of a name."""
    decomposed = unicodedata.normalize("NFD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return "".join(ch for ch in stripped.lower() if ch in config.PYTHAGOREAN_MAP)


def _letter_total(letters: str) -> int:
    return sum(config.PYTHAGOREAN_MAP[ch] for ch in letters)


def destiny_number(name: str) -> int:
    """
    Destiny (Expression) Number from the full name.

    Example — "John":  J=1, O=6, H=8, N=5 → 20 → 2
    """
    return reduce(_letter_total(_letters(name)))


def soul_urge_number(name: str) -> int:
    """Soul Urge Number: vowels (A, E, I, O, U) only."""
    vowels = "".join(ch for ch in _letters(name) if ch in config.VOWELS)
    return reduce(_letter_total(vowels))


def personality_number(name: str) -> int:
    """Personality Number: consonants only."""
    consonants = "".join(ch for ch in _letters(name) if ch not in config.VOWELS)
    return reduce(_letter_total(consonants))


# ── Date numbers ──────────────────────────────────────────────────────────────

def life_path_number(birth_date: date) -> int:
    """
    Compute the Life Path Number with the traditional component method.

    Day, month and year are each folded to a single digit first (no master
    exception), then the total is reduced preserving master numbers.

    Example — 1990-03-15:
      day 15 → 6, month 3 → 3, year 1990 → 1;  6 + 3 + 1 = 10 → 1
    """
    total = (
        reduce_strict(birth_date.day)
        + reduce_strict(birth_date.month)
        + reduce_strict(birth_date.year)
    )
    return reduce(total)


def birthday_number(birth_date: date) -> int:
    """Days 1–9 stay as they are; later days are reduced, keeping 11 and 22."""
    day = birth_date.day
    if day <= 9:
        return day
    return reduce(day)


def _date_total(day: int, month: int, year: int) -> int:
    return digit_sum(day) + digit_sum(month) + digit_sum(year)


def personal_year_number(birth_date: date, year: int) -> int:
    """Personal Year = birth day + birth month + the given calendar year."""
    return reduce(_date_total(birth_date.day, birth_date.month, year))


def universal_day_number(d: date) -> int:
    """
    Universal Day Number (UDN) for a given date.

    Example — Feb 23, 2026:
      23 → 5, 2 → 2, 2026 → 10;  5 + 2 + 10 = 17 → 8
    """
    return reduce(_date_total(d.day, d.month, d.year))


def combined_energy(personal_number: int, d: date) -> int:
    """Energy of the day for a person: personal number + UDN, reduced."""
    return reduce(personal_number + universal_day_number(d))


# ── Lookups ───────────────────────────────────────────────────────────────────

def compatible_numbers(life_path: int) -> tuple:
    return config.COMPATIBLE_NUMBERS.get(life_path, config.DEFAULT_COMPATIBLE_NUMBERS)


def lucky_hours(energy: int) -> list[int]:
    """Three clock hours (1–12) favoured by a daily energy."""
    base = energy % 12 or 12
    return [base, (base + 6) % 12 or 12, (base + 9) % 12 or 12]


# ── Full profile ──────────────────────────────────────────────────────────────

def numerology_profile(name: str, birth_date: date, year: int) -> NumerologyProfile:
    """
    Generate the core numbers for a person.

    `year` is the calendar year the Personal Year is computed for.
    """
    numbers = {
        "life_path": life_path_number(birth_date),
        "destiny": destiny_number(name),
        "soul_urge": soul_urge_number(name),
        "personality": personality_number(name),
        "birthday": birthday_number(birth_date),
    }
    profile = NumerologyProfile(
        name=name,
        birth_date=birth_date,
        personal_year=personal_year_number(birth_date, year),
        has_master_number=any(is_master_number(n) for n in numbers.values()),
        **numbers,
    )
    logger.debug(f"Numerology profile for {birth_date.isoformat()}: {numbers}")
    return profile
