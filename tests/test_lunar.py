from datetime import date, datetime, timedelta, timezone

import pytest

import config
from core import lunar

REF = config.REFERENCE_NEW_MOON
S = config.SYNODIC_MONTH_DAYS


def test_reference_moment_is_new_moon():
    sample = lunar.evaluate(REF)
    assert sample.lunar_age == 0.0
    assert sample.phase == "new-moon"
    assert sample.phase_index == 0
    assert sample.illumination == 0
    assert sample.is_waxing is True
    assert sample.next_phase == "waxing-crescent"
    assert sample.days_until_next_phase == 1.85


def test_age_wraps_before_reference():
    # one day before the reference new moon
    age = lunar.lunar_age(REF - timedelta(days=1))
    assert age == pytest.approx(S - 1)
    assert 0 <= age < S


def test_age_is_periodic():
    moment = datetime(2031, 5, 17, 8, 30, tzinfo=timezone.utc)
    later = moment + timedelta(days=S * 3)
    assert lunar.lunar_age(later) == pytest.approx(lunar.lunar_age(moment), abs=1e-6)


def test_naive_datetimes_and_dates_are_utc():
    naive = datetime(2024, 3, 1, 0, 0)
    aware = datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc)
    assert lunar.lunar_age(naive) == lunar.lunar_age(aware)
    assert lunar.lunar_age(date(2024, 3, 1)) == lunar.lunar_age(aware)


def test_illumination_peaks_mid_month():
    assert lunar.illumination(0) == 0
    assert lunar.illumination(S / 2) == 100
    assert lunar.illumination(S / 4) == 50


@pytest.mark.parametrize(
    "days, phase",
    [
        (0.0, "new-moon"),
        (1.0, "new-moon"),
        (2.0, "waxing-crescent"),
        (14.0, "first-quarter"),
        (20.0, "waxing-gibbous"),
        (28.0, "full-moon"),
    ],
)
def test_phase_for_age(days, phase):
    assert lunar.phase_for_age(days) == phase


def test_phase_partition_is_total():
    steps = 5000
    for i in range(steps):
        age = S * i / steps
        index = lunar.phase_index(age)
        assert 0 <= index < 8
        lower = lunar.PHASE_BOUNDARIES[index - 1] if index else 0.0
        assert lower <= age < lunar.PHASE_BOUNDARIES[index]


def test_boundaries_are_ordered_and_end_at_month_length():
    bounds = lunar.PHASE_BOUNDARIES
    assert len(bounds) == 8
    assert list(bounds) == sorted(bounds)
    assert bounds[-1] == S


def test_phase_for_index_out_of_range():
    with pytest.raises(IndexError):
        lunar.phase_for_index(8)
    with pytest.raises(IndexError):
        lunar.phase_for_index(-1)


def test_days_until_next_phase_lands_on_a_phase_change():
    for age in (0.0, 1.0, 7.0, 13.0, 20.0, 28.0, 29.5):
        remaining = lunar.days_until_next_phase(age)
        assert remaining > 0
        index = lunar.phase_index(age)
        assert lunar.phase_index(lunar.normalize_age(age + remaining)) != index
        assert lunar.phase_for_age(age + remaining) == lunar.next_phase(index)


def test_full_moon_hands_over_to_new_moon():
    sample = lunar.evaluate(REF + timedelta(days=28))
    assert sample.phase == "full-moon"
    assert sample.next_phase == "new-moon"
    assert sample.is_waxing is False


def test_next_full_and_new_moon():
    at, days = lunar.next_full_moon(REF)
    assert days == pytest.approx(S / 2)
    assert at == REF + timedelta(days=S / 2)

    at, days = lunar.next_new_moon(REF + timedelta(days=10))
    assert days == pytest.approx(S - 10)
    age = lunar.lunar_age(at)
    assert min(age, S - age) < 1e-6

    _, days = lunar.next_full_moon(REF + timedelta(days=20))
    assert days == pytest.approx(S - 20 + S / 2)
