from datetime import date

import pytest

from core import numerology


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, 0),
        (7, 7),
        (10, 1),
        (1990, 1),
        (29, 11),
        (38, 11),
        (11, 11),
        (22, 22),
        (33, 33),
        (499, 22),   # 4+9+9 = 22
        (99, 9),     # 18 → 9
    ],
)
def test_reduce(n, expected):
    assert numerology.reduce(n) == expected


def test_reduce_range_and_idempotence():
    allowed = set(range(10)) | {11, 22, 33}
    for n in range(0, 5000):
        value = numerology.reduce(n)
        assert value in allowed
        assert numerology.reduce(value) == value


def test_reduce_rejects_negative():
    with pytest.raises(ValueError):
        numerology.reduce(-1)
    with pytest.raises(ValueError):
        numerology.reduce_strict(-5)


def test_reduce_strict_ignores_master_numbers():
    assert numerology.reduce_strict(29) == 2
    assert numerology.reduce_strict(22) == 4
    assert numerology.reduce_strict(1990) == 1


def test_reduction_result():
    result = numerology.reduction_result(29)
    assert result.input == 29
    assert result.value == 11
    assert result.is_master is True
    assert numerology.reduction_result(1990).is_master is False


def test_name_numbers():
    # J=1 O=6 H=8 N=5
    assert numerology.destiny_number("John") == 2
    assert numerology.soul_urge_number("John") == 6
    assert numerology.personality_number("John") == 5


def test_name_numbers_ignore_case_accents_and_punctuation():
    assert numerology.destiny_number("José") == numerology.destiny_number("jose")
    assert numerology.destiny_number("Mary-Ann O'Neil") == numerology.destiny_number("maryannoneil")


def test_life_path_component_method():
    # 15 → 6, 3 → 3, 1990 → 1
    assert numerology.life_path_number(date(1990, 3, 15)) == 1
    # 9 + 1 + 1 = 11 stays a master number
    assert numerology.life_path_number(date(1990, 1, 9)) == 11


@pytest.mark.parametrize(
    "day, expected",
    [(5, 5), (9, 9), (11, 11), (22, 22), (28, 1), (29, 11)],
)
def test_birthday_number(day, expected):
    assert numerology.birthday_number(date(2000, 1, day)) == expected


def test_universal_day_number():
    # 23 → 5, 2 → 2, 2026 → 10;  17 → 8
    assert numerology.universal_day_number(date(2026, 2, 23)) == 8


def test_personal_year_number():
    # 1+5 + 3 + 2+0+2+4 = 17 → 8
    assert numerology.personal_year_number(date(1990, 3, 15), 2024) == 8


def test_combined_energy():
    assert numerology.combined_energy(8, date(2026, 2, 23)) == 7


@pytest.mark.parametrize(
    "energy, expected",
    [(7, [7, 1, 4]), (12, [12, 6, 9]), (6, [6, 12, 3]), (11, [11, 5, 8])],
)
def test_lucky_hours(energy, expected):
    assert numerology.lucky_hours(energy) == expected


def test_compatible_numbers():
    assert numerology.compatible_numbers(1) == (1, 5, 7)
    assert numerology.compatible_numbers(33) == (6, 33, 11)
    assert numerology.compatible_numbers(0) == (1, 2, 3)


def test_numerology_profile():
    profile = numerology.numerology_profile("John", date(1990, 1, 9), 2024)
    assert profile.life_path == 11
    assert profile.destiny == 2
    assert profile.birthday == 9
    assert profile.has_master_number is True
    assert profile.to_dict()["birth_date"] == "1990-01-09"
