"""
Compatibility Scorer.

Two strategies feed the same aggregation:
  - numeric difference, for continuous values such as biorhythm cycles
        similarity = 100 − |a − b| / 2, clamped to [0, 100]
  - static affinity tables, for categorical identities such as zodiac signs

The overall score is the mean of the per-category scores and is bucketed into
excellent / good / moderate / challenging.
"""
from datetime import date

from loguru import logger

import config
from core.cycle_engine import raw_values, round2
from core.models import CompatibilityScore


# ── Shared aggregation ────────────────────────────────────────────────────────

def rating_for(score: float) -> str:
    """Bucket a score. A score equal to a bound belongs to the higher bucket."""
    for lower_bound, rating in config.RATING_BUCKETS:
        if score >= lower_bound:
            return rating
    return config.LOWEST_RATING


def aggregate(per_category: dict) -> CompatibilityScore:
    """Mean + rating over unrounded per-category scores, rounded once."""
    if not per_category:
        raise ValueError("no categories to score")
    overall = sum(per_category.values()) / len(per_category)
    return CompatibilityScore(
        per_category={k: round2(v) for k, v in per_category.items()},
        overall=round2(overall),
        rating=rating_for(overall),
    )


# ── Numeric strategy ──────────────────────────────────────────────────────────

def category_similarity(a: float, b: float) -> float:
    return min(100.0, max(0.0, 100.0 - abs(a - b) / 2))


def score(values_a: dict, values_b: dict) -> CompatibilityScore:
    """
    Compare two identities category by category.

    Example — physical +80 vs +80 → 100;  +80 vs −20 → 50
    """
    if set(values_a) != set(values_b):
        raise ValueError(
            f"category mismatch: {sorted(values_a)} vs {sorted(values_b)}"
        )
    per_category = {
        category: category_similarity(values_a[category], values_b[category])
        for category in sorted(values_a)
    }
    return aggregate(per_category)


def biorhythm_compatibility(birth_a: date, birth_b: date, on: date) -> CompatibilityScore:
    """Biorhythm synchrony of two people on a date."""
    result = score(raw_values(birth_a, on), raw_values(birth_b, on))
    logger.debug(
        f"Biorhythm compatibility {birth_a.isoformat()} / {birth_b.isoformat()} "
        f"on {on.isoformat()}: {result.overall} ({result.rating})"
    )
    return result


# ── Affinity strategy ─────────────────────────────────────────────────────────

def affinity(table, a: str, b: str) -> float:
    """Symmetric lookup: the table is keyed by the unordered pair {a, b}."""
    try:
        return float(table[frozenset({a, b})])
    except KeyError:
        raise ValueError(f"no affinity entry for {a!r} and {b!r}") from None


def _check_sign(sign: str):
    if sign not in config.ZODIAC_SIGN_ORDER:
        raise ValueError(f"unknown zodiac sign: {sign!r}")


def sign_distance(sign_a: str, sign_b: str) -> int:
    """Shortest distance between two signs around the zodiac wheel (0–6)."""
    steps = abs(
        config.ZODIAC_SIGN_ORDER.index(sign_a) - config.ZODIAC_SIGN_ORDER.index(sign_b)
    )
    return min(steps, 12 - steps)


def sign_compatibility(sign_a: str, sign_b: str) -> CompatibilityScore:
    """Element, modality and aspect affinity between two sun signs."""
    _check_sign(sign_a)
    _check_sign(sign_b)
    per_category = {
        "element": affinity(
            config.ELEMENT_AFFINITY,
            config.SIGN_ELEMENT[sign_a], config.SIGN_ELEMENT[sign_b],
        ),
        "modality": affinity(
            config.MODALITY_AFFINITY,
            config.SIGN_MODALITY[sign_a], config.SIGN_MODALITY[sign_b],
        ),
        "aspect": float(config.ASPECT_AFFINITY[sign_distance(sign_a, sign_b)]),
    }
    return aggregate(per_category)


def zodiac_sign(birth_date: date) -> str:
    """Tropical sun sign for a birth date."""
    key = (birth_date.month, birth_date.day)
    sign = config.SIGN_START_DATES[-1][1]  # capricorn until Jan 20
    for start, name in config.SIGN_START_DATES:
        if key >= start:
            sign = name
    return sign


# ── Interpretation keys ───────────────────────────────────────────────────────

def synergy_levels(result: CompatibilityScore) -> dict:
    """Rating key per category."""
    return {category: rating_for(value) for category, value in result.per_category.items()}


def shared_activity_keys(result: CompatibilityScore) -> list[str]:
    """Categories strong enough to suggest shared activities for."""
    strong = [
        category for category, value in result.per_category.items()
        if value >= config.SHARED_ACTIVITY_THRESHOLD
    ]
    return strong or ["relaxing"]
