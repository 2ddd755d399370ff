"""
Central configuration for Cosmic Cycles.
All tunable parameters and static tables live here. Loaded from environment where applicable.
"""
import os
from datetime import datetime, timezone
from types import MappingProxyType

from dotenv import load_dotenv

from core.models import CycleDefinition

load_dotenv()

# ── Biorhythm cycles ──────────────────────────────────────────────────────────
# A cycle is critical on a day when |value| < CRITICAL_THRESHOLD.
# The periods are part of the contract with the content tables: do not tune them.
CRITICAL_THRESHOLD = float(os.getenv("CRITICAL_THRESHOLD", "5"))

# Values above +HIGH_THRESHOLD are "high", below -HIGH_THRESHOLD are "low"
# when picking the general advice key for a day.
HIGH_THRESHOLD = 20.0

BIORHYTHM_CYCLES = MappingProxyType({
    "physical":     CycleDefinition("physical",     23.0, CRITICAL_THRESHOLD),
    "emotional":    CycleDefinition("emotional",    28.0, CRITICAL_THRESHOLD),
    "intellectual": CycleDefinition("intellectual", 33.0, CRITICAL_THRESHOLD),
})

BIORHYTHM_CATEGORIES = tuple(BIORHYTHM_CYCLES)

# ── Lunar cycle ───────────────────────────────────────────────────────────────
SYNODIC_MONTH_DAYS = 29.53058867

# January 11, 2024 at 11:57 UTC was a New Moon
REFERENCE_NEW_MOON = datetime(2024, 1, 11, 11, 57, tzinfo=timezone.utc)

LUNAR_CYCLE = CycleDefinition("lunar", SYNODIC_MONTH_DAYS, 0.0)

LUNAR_PHASES_ORDER = (
    "new-moon",
    "waxing-crescent",
    "first-quarter",
    "waxing-gibbous",
    "full-moon",
    "waning-gibbous",
    "last-quarter",
    "waning-crescent",
)

# Phase end boundaries in units of SYNODIC_MONTH_DAYS / PHASE_UNIT_DIVISOR,
# indexed by phase order. The last phase always ends at the month length (None).
# The partition is asymmetric on purpose: keep these multipliers as they are.
PHASE_UNIT_DIVISOR = 8
PHASE_END_MULTIPLIERS = (0.5, 3.5, 4.5, 7.5, 8.5, 11.5, 12.5, None)

# Lunar month grids are sampled at this UTC hour
CALENDAR_SAMPLE_HOUR_UTC = 12

# ── Numerology ────────────────────────────────────────────────────────────────
MASTER_NUMBERS = frozenset({11, 22, 33})

PYTHAGOREAN_MAP = MappingProxyType({
    'a': 1, 'b': 2, 'c': 3, 'd': 4, 'e': 5, 'f': 6, 'g': 7, 'h': 8, 'i': 9,
    'j': 1, 'k': 2, 'l': 3, 'm': 4, 'n': 5, 'o': 6, 'p': 7, 'q': 8, 'r': 9,
    's': 1, 't': 2, 'u': 3, 'v': 4, 'w': 5, 'x': 6, 'y': 7, 'z': 8,
})

VOWELS = frozenset("aeiou")

COMPATIBLE_NUMBERS = MappingProxyType({
    1: (1, 5, 7),
    2: (2, 4, 8),
    3: (3, 6, 9),
    4: (2, 4, 8),
    5: (1, 5, 7),
    6: (3, 6, 9),
    7: (1, 5, 7),
    8: (2, 4, 8),
    9: (3, 6, 9),
    11: (2, 11, 22),
    22: (4, 22, 33),
    33: (6, 33, 11),
})
DEFAULT_COMPATIBLE_NUMBERS = (1, 2, 3)

# ── Deterministic picks ───────────────────────────────────────────────────────
DEFAULT_IDENTITY = os.getenv("DEFAULT_IDENTITY", "anonymous")

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF

LUCKY_NUMBER_COUNT = 3
LUCKY_NUMBER_RANGE = (1, 99)

# ── Tarot deck ────────────────────────────────────────────────────────────────
MAJOR_ARCANA = (
    "the-fool", "the-magician", "the-high-priestess", "the-empress",
    "the-emperor", "the-hierophant", "the-lovers", "the-chariot",
    "strength", "the-hermit", "wheel-of-fortune", "justice",
    "the-hanged-man", "death", "temperance", "the-devil",
    "the-tower", "the-star", "the-moon", "the-sun",
    "judgement", "the-world",
)

TAROT_SUITS = ("wands", "cups", "swords", "pentacles")
TAROT_RANKS = (
    "ace", "two", "three", "four", "five", "six", "seven",
    "eight", "nine", "ten", "page", "knight", "queen", "king",
)

# 22 Major Arcana followed by the 56 Minor Arcana, suit by suit
TAROT_DECK = MAJOR_ARCANA + tuple(
    f"{rank}-of-{suit}" for suit in TAROT_SUITS for rank in TAROT_RANKS
)

# ── Zodiac ────────────────────────────────────────────────────────────────────
ZODIAC_SIGN_ORDER = (
    "aries", "taurus", "gemini", "cancer", "leo", "virgo",
    "libra", "scorpio", "sagittarius", "capricorn", "aquarius", "pisces",
)

SIGN_ELEMENT = MappingProxyType(dict(zip(
    ZODIAC_SIGN_ORDER,
    ("fire", "earth", "air", "water") * 3,
)))

SIGN_MODALITY = MappingProxyType(dict(zip(
    ZODIAC_SIGN_ORDER,
    ("cardinal", "fixed", "mutable") * 4,
)))

# (month, day) on which each sign starts; capricorn wraps the year end
SIGN_START_DATES = (
    ((1, 20), "aquarius"),
    ((2, 19), "pisces"),
    ((3, 21), "aries"),
    ((4, 20), "taurus"),
    ((5, 21), "gemini"),
    ((6, 21), "cancer"),
    ((7, 23), "leo"),
    ((8, 23), "virgo"),
    ((9, 23), "libra"),
    ((10, 23), "scorpio"),
    ((11, 22), "sagittarius"),
    ((12, 22), "capricorn"),
)

# ── Daily sign reading ────────────────────────────────────────────────────────
# Offsets added to the sign's daily seed before each pick
DAILY_PICK_OFFSETS = MappingProxyType({
    "mood": 4,
    "lucky_color": 6,
    "lucky_time": 7,
})

ELEMENT_MOODS = MappingProxyType({
    "fire":  ("energetic", "passionate", "inspired", "determined", "enthusiastic", "confident", "dynamic"),
    "earth": ("stable", "centered", "practical", "productive", "serene", "resilient", "focused"),
    "air":   ("curious", "communicative", "light", "sociable", "creative", "versatile", "inspired"),
    "water": ("intuitive", "sensitive", "reflective", "empathetic", "dreamy", "deep", "connected"),
})

SIGN_LUCKY_NUMBERS = MappingProxyType({
    "aries":       (1, 8, 17, 9, 27),
    "taurus":      (2, 6, 9, 12, 24),
    "gemini":      (3, 5, 7, 12, 23),
    "cancer":      (2, 7, 11, 16, 20),
    "leo":         (1, 4, 10, 13, 19),
    "virgo":       (5, 14, 15, 23, 32),
    "libra":       (4, 6, 13, 15, 24),
    "scorpio":     (8, 11, 18, 22, 29),
    "sagittarius": (3, 7, 9, 12, 21),
    "capricorn":   (4, 8, 13, 22, 26),
    "aquarius":    (4, 7, 11, 22, 29),
    "pisces":      (3, 9, 12, 15, 18),
})

SIGN_LUCKY_COLORS = MappingProxyType({
    "aries":       ("red", "orange", "yellow"),
    "taurus":      ("green", "pink", "white"),
    "gemini":      ("yellow", "light-green", "orange"),
    "cancer":      ("white", "silver", "pale-blue"),
    "leo":         ("gold", "orange", "red"),
    "virgo":       ("green", "brown", "beige"),
    "libra":       ("pink", "light-blue", "green"),
    "scorpio":     ("dark-red", "black", "purple"),
    "sagittarius": ("purple", "royal-blue", "turquoise"),
    "capricorn":   ("brown", "black", "grey"),
    "aquarius":    ("electric-blue", "turquoise", "silver"),
    "pisces":      ("violet", "navy-blue", "aqua-green"),
})

LUCKY_TIMES = (
    "06:00", "08:30", "10:00", "11:11", "12:00", "14:00", "15:30",
    "16:00", "17:17", "18:00", "19:30", "20:00", "21:00", "22:22",
)

# Symmetric affinity tables, keyed by unordered pairs
ELEMENT_AFFINITY = MappingProxyType({
    frozenset({"fire"}): 90,
    frozenset({"earth"}): 85,
    frozenset({"air"}): 85,
    frozenset({"water"}): 90,
    frozenset({"fire", "earth"}): 50,
    frozenset({"fire", "air"}): 80,
    frozenset({"fire", "water"}): 40,
    frozenset({"earth", "air"}): 45,
    frozenset({"earth", "water"}): 75,
    frozenset({"air", "water"}): 55,
})

MODALITY_AFFINITY = MappingProxyType({
    frozenset({"cardinal"}): 60,
    frozenset({"fixed"}): 65,
    frozenset({"mutable"}): 75,
    frozenset({"cardinal", "fixed"}): 75,
    frozenset({"cardinal", "mutable"}): 80,
    frozenset({"fixed", "mutable"}): 70,
})

# Zodiac-wheel distance (in signs, 0..6) → aspect score
ASPECT_AFFINITY = MappingProxyType({
    0: 85,   # Conjunction
    1: 65,   # Semi-sextile
    2: 80,   # Sextile
    3: 55,   # Square
    4: 90,   # Trine
    5: 65,   # Quincunx
    6: 70,   # Opposition
})

# ── Compatibility ratings ─────────────────────────────────────────────────────
# (lower bound, rating); a score equal to the bound belongs to that rating
RATING_BUCKETS = (
    (80.0, "excellent"),
    (60.0, "good"),
    (40.0, "moderate"),
)
LOWEST_RATING = "challenging"

SHARED_ACTIVITY_THRESHOLD = 70.0

# ── Calling layer ─────────────────────────────────────────────────────────────
EARLIEST_DATE = "1900-01-01"
ALLOWED_RANGE_LENGTHS = (7, 30)
CRITICAL_WINDOW_DAYS = 30

DIGEST_HOUR_UTC = int(os.getenv("DIGEST_HOUR_UTC", "0"))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")
