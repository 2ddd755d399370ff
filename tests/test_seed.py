from datetime import date

import pytest

import config
from core import seed


@pytest.mark.parametrize(
    "key, expected",
    [
        ("", 0),
        ("a", 97),
        ("ab", 97 * 31 + 98),
        ("hello", 99162322),
        # wraps to the 32-bit minimum, whose absolute value is 2**31
        ("polygenelubricants", 2 ** 31),
    ],
)
def test_seed_known_values(key, expected):
    assert seed.seed(key) == expected


def test_seed_wraps_like_a_signed_32_bit_hash():
    # "Aa" and "BB" collide under h*31 + c
    assert seed.seed("Aa") == seed.seed("BB")
    for key in ("2024-01-01-anonymous", "a" * 200, "日本語のテキスト"):
        assert 0 <= seed.seed(key) <= 2 ** 31


def test_daily_key():
    assert seed.daily_key(date(2024, 1, 1), "ada") == "2024-01-01-ada"
    assert seed.daily_key(date(2024, 1, 1)) == "2024-01-01-anonymous"


def test_daily_sign_seed():
    assert seed.daily_sign_seed(date(2024, 1, 1), "aries") == 1 + 2024
    assert seed.daily_sign_seed(date(2024, 1, 1), "taurus") == 1 + 2024 + 100
    assert seed.daily_sign_seed(date(2024, 12, 31), "pisces") == 366 + 2024 + 1100


def test_pick_index():
    assert seed.pick_index(97, 78) == 19
    assert seed.select(["a", "b", "c"], 5) == "c"
    with pytest.raises(ValueError):
        seed.pick_index(5, 0)


def test_is_reversed():
    assert seed.is_reversed(9) is True
    assert seed.is_reversed(10) is False


def test_lcg_next():
    assert seed.lcg_next(0) == 12345
    assert seed.lcg_next(1) == (1103515245 + 12345) & 0x7FFFFFFF


def test_lucky_numbers_are_distinct_sorted_and_in_range():
    for key in ("2024-01-01-anonymous", "2024-06-15-ada", "x"):
        numbers = seed.lucky_numbers(seed.seed(key))
        assert len(numbers) == 3
        assert len(set(numbers)) == 3
        assert numbers == sorted(numbers)
        assert all(1 <= n <= 99 for n in numbers)


def test_lucky_numbers_are_deterministic():
    assert seed.lucky_numbers(12345) == seed.lucky_numbers(12345)


def test_lucky_numbers_custom_range():
    assert seed.lucky_numbers(42, count=1, low=5, high=5) == [5]
    with pytest.raises(ValueError):
        seed.lucky_numbers(42, count=4, low=1, high=3)


def test_deck_layout():
    assert len(config.TAROT_DECK) == 78
    assert len(set(config.TAROT_DECK)) == 78
    assert config.TAROT_DECK[0] == "the-fool"
    assert config.TAROT_DECK[22] == "ace-of-wands"
    assert config.TAROT_DECK[-1] == "king-of-pentacles"


def test_daily_card_is_stable():
    first = seed.daily_card(date(2024, 3, 1), "ada")
    again = seed.daily_card(date(2024, 3, 1), "ada")
    assert first == again
    assert first.seed == seed.seed("2024-03-01-ada")
    assert first.card_index == first.seed % 78
    assert first.card_id == config.TAROT_DECK[first.card_index]
    assert first.arcana == ("major" if first.card_index < 22 else "minor")
    assert first.reversed == (first.seed % 3 == 0)


def test_daily_card_defaults_to_anonymous():
    draw = seed.daily_card(date(2024, 3, 1))
    assert draw.identity == "anonymous"
    assert draw == seed.daily_card(date(2024, 3, 1), "anonymous")


def test_seed_hashes_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert seed.seed("😀") == 0xD83D * 31 + 0xDE00 == 1772899
    assert seed.seed("😀") != 0x1F600
    assert seed.seed("2024-03-01-ana😀") == 1678626472


def test_lucky_key_has_no_separator():
    assert seed.lucky_key(date(2024, 6, 1), "ada") == "ada2024-06-01"
    assert seed.lucky_key(date(2024, 6, 1)) == "anonymous2024-06-01"


def test_daily_lucky_numbers_use_the_lucky_key():
    on = date(2024, 6, 1)
    assert seed.daily_lucky_numbers(on, "ada") == seed.lucky_numbers(seed.seed("ada2024-06-01"))
    assert seed.daily_lucky_numbers(on) == seed.daily_lucky_numbers(on, "anonymous")


def test_daily_sign_seed_rejects_unknown_sign():
    with pytest.raises(ValueError):
        seed.daily_sign_seed(date(2024, 1, 1), "ophiuchus")


def test_select():
    assert seed.select(("a", "b", "c"), 7) == "b"
    with pytest.raises(ValueError):
        seed.select((), 7)


def test_daily_sign_reading_aries_new_year():
    reading = seed.daily_sign_reading(date(2024, 1, 1), "aries")
    assert reading.seed == 2025
    assert reading.mood == "dynamic"
    assert reading.lucky_number == 1 + 5
    assert reading.lucky_color == "red"
    assert reading.lucky_time == "10:00"


def test_daily_sign_reading_is_stable_and_uses_sign_tables():
    for sign in config.ZODIAC_SIGN_ORDER:
        reading = seed.daily_sign_reading(date(2024, 6, 1), sign)
        assert reading == seed.daily_sign_reading(date(2024, 6, 1), sign)
        assert reading.mood in config.ELEMENT_MOODS[config.SIGN_ELEMENT[sign]]
        assert reading.lucky_color in config.SIGN_LUCKY_COLORS[sign]
        assert reading.lucky_time in config.LUCKY_TIMES
        assert reading.lucky_number - reading.seed % 10 in config.SIGN_LUCKY_NUMBERS[sign]
        assert reading.to_dict()["date"] == "2024-06-01"


def test_daily_sign_reading_rejects_unknown_sign():
    with pytest.raises(ValueError):
        seed.daily_sign_reading(date(2024, 1, 1), "ophiuchus")
