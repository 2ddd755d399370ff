from datetime import date, timedelta

import pytest

import config
from core import period
from core.cycle_engine import evaluate_day, raw_values, round2


def test_date_range():
    days = period.date_range(date(2024, 2, 27), 4)
    assert days == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]
    with pytest.raises(ValueError):
        period.date_range(date(2024, 1, 1), 0)


@pytest.mark.parametrize("length", config.ALLOWED_RANGE_LENGTHS)
def test_aggregate_window(birth, length):
    start = date(2024, 5, 1)
    summary = period.aggregate(birth, start, length)

    assert summary.start == start
    assert len(summary.days) == length
    assert [d.date for d in summary.days] == period.date_range(start, length)
    assert set(summary.best_date_per_category) == set(config.BIORHYTHM_CATEGORIES) | {"overall"}
    assert set(summary.average_per_category) == set(config.BIORHYTHM_CATEGORIES)


def test_aggregate_best_days_and_averages_use_unrounded_values(birth):
    start = date(2024, 5, 1)
    dates = period.date_range(start, 30)
    summary = period.aggregate(birth, start, 30)

    raws = [raw_values(birth, d) for d in dates]
    for category in config.BIORHYTHM_CATEGORIES:
        best_index = 0
        for i, raw in enumerate(raws):
            if raw[category] > raws[best_index][category]:
                best_index = i
        assert summary.best_date_per_category[category] == dates[best_index]

        mean = sum(raw[category] for raw in raws) / len(raws)
        assert summary.average_per_category[category] == pytest.approx(round2(mean), abs=0.01)


def test_critical_count_matches_find_critical(birth):
    start = date(2024, 5, 1)
    summary = period.aggregate(birth, start, 30)
    critical = period.find_critical(birth, start, 30)
    assert summary.critical_day_count == len(critical)


def test_find_critical_returns_exactly_the_critical_days(birth):
    start = date(2023, 11, 1)
    critical = period.find_critical(birth, start, 30)
    critical_dates = {info.date for info in critical}

    for d in period.date_range(start, 30):
        assert (d in critical_dates) == evaluate_day(birth, d).critical_day

    for info in critical:
        assert info.critical_cycles
        assert info.severity == {1: "low", 2: "medium", 3: "high"}[len(info.critical_cycles)]


def test_find_critical_on_birth_day_is_high(birth):
    critical = period.find_critical(birth, birth, 7)
    assert critical[0].date == birth
    assert critical[0].severity == "high"


def test_lunar_calendar_has_one_entry_per_day():
    month = period.lunar_calendar(2024, 2)
    assert len(month.days) == 29
    assert [d.day_of_month for d in month.days] == list(range(1, 30))
    assert all(0 <= d.illumination <= 100 for d in month.days)
    assert all(d.is_new_moon for d in month.new_moons)
    assert all(d.is_full_moon for d in month.full_moons)


def test_lunar_calendar_finds_reference_new_moon():
    month = period.lunar_calendar(2024, 1)
    assert date(2024, 1, 11) in [d.date for d in month.new_moons]


def test_lunar_calendar_rejects_bad_month():
    with pytest.raises(ValueError):
        period.lunar_calendar(2024, 13)


def test_numerology_calendar():
    days = period.numerology_calendar(2026, 2, 8)
    assert len(days) == 28
    day = days[22]
    assert day.date == date(2026, 2, 23)
    assert day.universal_day == 8
    assert day.combined_energy == 7
    assert day.is_master is False


def test_summary_to_dict(birth):
    summary = period.aggregate(birth, date(2024, 5, 1), 7)
    data = summary.to_dict()
    assert data["start"] == "2024-05-01"
    assert len(data["days"]) == 7
    assert data["days"][0]["date"] == "2024-05-01"
    assert isinstance(data["best_date_per_category"]["overall"], str)


def test_aggregate_is_deterministic(birth):
    start = date(2024, 5, 1)
    first = period.aggregate(birth, start, 7)
    second = period.aggregate(birth, start + timedelta(days=0), 7)
    assert first == second


def test_best_day_ties_keep_the_earliest_date(birth, monkeypatch):
    start = date(2024, 5, 1)
    peaks = {start + timedelta(days=2), start + timedelta(days=5)}

    def fake_raw_values(_birth, d):
        value = 80.0 if d in peaks else 10.0
        return {c: value for c in config.BIORHYTHM_CATEGORIES}

    monkeypatch.setattr(period, "raw_values", fake_raw_values)
    summary = period.aggregate(birth, start, 7)

    for category in config.BIORHYTHM_CATEGORIES + ("overall",):
        assert summary.best_date_per_category[category] == start + timedelta(days=2)


def test_best_day_of_a_flat_window_is_its_first_day(birth, monkeypatch):
    monkeypatch.setattr(
        period, "raw_values", lambda _b, _d: {c: 0.0 for c in config.BIORHYTHM_CATEGORIES}
    )
    start = date(2024, 5, 1)
    summary = period.aggregate(birth, start, 30)
    assert set(summary.best_date_per_category.values()) == {start}
