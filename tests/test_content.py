import config
from core import content


def test_every_phase_has_a_name_and_guidance():
    for phase in config.LUNAR_PHASES_ORDER:
        assert phase in content.PHASE_NAMES
        assert content.phase_guidance(phase) != content.FALLBACK


def test_every_advice_key_has_text():
    keys = ["all_critical", "double_critical", "all_high", "all_low", "mixed", "balanced"]
    keys += [f"{cycle}_high" for cycle in config.BIORHYTHM_CATEGORIES]
    for key in keys:
        assert content.general_advice(key) != content.FALLBACK


def test_every_reduced_number_has_a_theme():
    for number in list(range(1, 10)) + sorted(config.MASTER_NUMBERS):
        assert content.number_theme(number) != content.FALLBACK


def test_ratings_and_severities():
    for rating in ("excellent", "good", "moderate", "challenging"):
        assert content.rating_label(rating) != content.FALLBACK
    for severity in ("low", "medium", "high"):
        assert content.severity_label(severity) != content.FALLBACK


def test_cycle_advice_prefers_critical():
    critical = content.cycle_advice("physical", 80.0, critical=True)
    assert critical == content.CYCLE_ADVICE["physical"]["critical"]
    assert content.cycle_advice("physical", 80.0, critical=False) == content.CYCLE_ADVICE["physical"]["high"]
    assert content.cycle_advice("physical", -80.0, critical=False) == content.CYCLE_ADVICE["physical"]["low"]


def test_unknown_keys_fall_back():
    assert content.general_advice("cosmic_alignment") == content.FALLBACK
    assert content.number_theme(44) == content.FALLBACK
    assert content.cycle_advice("spiritual", 10.0, critical=False) == content.FALLBACK
    assert content.activity("skydiving") == content.FALLBACK
    assert "blood-moon" in content.phase_name("blood-moon")
    assert content.cycle_name("element") == "Element"


def test_every_mood_has_text():
    for moods in config.ELEMENT_MOODS.values():
        for mood in moods:
            assert content.mood_text(mood) != content.FALLBACK
    assert content.mood_text("grumpy") == content.FALLBACK


def test_color_name():
    assert content.color_name("navy-blue") == "Navy Blue"
    assert content.color_name("red") == "Red"
