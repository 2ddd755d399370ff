"""
Input validation for the calling layer.

The engine assumes well-formed input. Everything typed by a user goes through
these functions first; each returns a Validated result instead of raising.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from dateutil.parser import isoparse

import config


@dataclass(frozen=True)
class Validated:
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _fail(message: str) -> Validated:
    return Validated(error=message)


def validate_date(raw: Optional[str], today: date, field: str = "date") -> Validated:
    """ISO-8601 date between EARLIEST_DATE and today (inclusive)."""
    if not raw:
        return _fail(f"{field} is required")
    try:
        parsed = isoparse(raw.strip()).date()
    except (ValueError, OverflowError):
        return _fail(f"{field} must be an ISO date (YYYY-MM-DD), got {raw!r}")

    earliest = date.fromisoformat(config.EARLIEST_DATE)
    if parsed < earliest:
        return _fail(f"{field} must be on or after {config.EARLIEST_DATE}")
    if parsed > today:
        return _fail(f"{field} cannot be in the future")
    return Validated(value=parsed)


def validate_target_date(raw: Optional[str], today: date) -> Validated:
    """Optional target date; defaults to today, any ISO date on or after EARLIEST_DATE."""
    if not raw:
        return Validated(value=today)
    try:
        parsed = isoparse(raw.strip()).date()
    except (ValueError, OverflowError):
        return _fail(f"date must be an ISO date (YYYY-MM-DD), got {raw!r}")
    if parsed < date.fromisoformat(config.EARLIEST_DATE):
        return _fail(f"date must be on or after {config.EARLIEST_DATE}")
    return Validated(value=parsed)


def validate_range_length(raw) -> Validated:
    try:
        length = int(raw)
    except (TypeError, ValueError):
        return _fail(f"range length must be a whole number, got {raw!r}")
    if length not in config.ALLOWED_RANGE_LENGTHS:
        allowed = ", ".join(str(n) for n in config.ALLOWED_RANGE_LENGTHS)
        return _fail(f"range length must be one of {allowed}")
    return Validated(value=length)


def validate_month(raw: Optional[str]) -> Validated:
    """YYYY-MM → (year, month)."""
    if not raw:
        return _fail("month is required (YYYY-MM)")
    try:
        year_text, month_text = raw.strip().split("-")
        year, month = int(year_text), int(month_text)
    except ValueError:
        return _fail(f"month must look like YYYY-MM, got {raw!r}")
    if not 1 <= month <= 12:
        return _fail(f"month must be between 01 and 12, got {month_text}")
    if year < date.fromisoformat(config.EARLIEST_DATE).year:
        return _fail(f"year must be {config.EARLIEST_DATE[:4]} or later")
    return Validated(value=(year, month))


def validate_sign(raw: Optional[str]) -> Validated:
    sign = (raw or "").strip().lower()
    if sign not in config.ZODIAC_SIGN_ORDER:
        return _fail(f"unknown zodiac sign {raw!r}")
    return Validated(value=sign)


def validate_name(raw: Optional[str]) -> Validated:
    name = (raw or "").strip()
    if not any(ch.isalpha() for ch in name):
        return _fail("name must contain at least one letter")
    return Validated(value=name)
