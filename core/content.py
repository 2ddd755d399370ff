"""
Content lookup — engine keys to display prose.

The engine only ever returns ids and bucket keys; the calling layer turns them
into text here. Unknown keys fall back to a generic line instead of raising.
"""
from types import MappingProxyType

FALLBACK = "No reading available for this combination."

# ── Lunar phases ──────────────────────────────────────────────────────────────
PHASE_NAMES = MappingProxyType({
    "new-moon":        ("New Moon",        "🌑"),
    "waxing-crescent": ("Waxing Crescent", "🌒"),
    "first-quarter":   ("First Quarter",   "🌓"),
    "waxing-gibbous":  ("Waxing Gibbous",  "🌔"),
    "full-moon":       ("Full Moon",       "🌕"),
    "waning-gibbous":  ("Waning Gibbous",  "🌖"),
    "last-quarter":    ("Last Quarter",    "🌗"),
    "waning-crescent": ("Waning Crescent", "🌘"),
})

PHASE_GUIDANCE = MappingProxyType({
    "new-moon":        "Set intentions and plant new beginnings.",
    "waxing-crescent": "Plan, gather resources and take the first small steps.",
    "first-quarter":   "Act on decisions and push through early obstacles.",
    "waxing-gibbous":  "Refine and adjust. Patience pays off now.",
    "full-moon":       "Celebrate results and release what no longer serves you.",
    "waning-gibbous":  "Share what you have learned and give thanks.",
    "last-quarter":    "Let go, forgive and clear space.",
    "waning-crescent": "Rest, reflect and recover before the next cycle.",
})

# ── Biorhythm ─────────────────────────────────────────────────────────────────
CYCLE_NAMES = MappingProxyType({
    "physical":     "Physical",
    "emotional":    "Emotional",
    "intellectual": "Intellectual",
    "overall":      "Overall",
})

CYCLE_ADVICE = MappingProxyType({
    "physical": {
        "high":     "Energy and stamina are up. Good day for exercise and demanding tasks.",
        "low":      "Your body asks for recovery. Keep workouts light and sleep well.",
        "critical": "Coordination may be off. Take extra care with physical risks.",
    },
    "emotional": {
        "high":     "Mood and empathy are strong. Reach out to the people you care about.",
        "low":      "Feelings run quieter. Give yourself room and avoid heated talks.",
        "critical": "Emotions can swing quickly. Pause before reacting.",
    },
    "intellectual": {
        "high":     "Sharp focus. Tackle analysis, study and complex problems.",
        "low":      "Concentration dips. Stick to routine work and double-check details.",
        "critical": "Judgement may slip. Postpone important decisions if you can.",
    },
})

GENERAL_ADVICE = MappingProxyType({
    "all_critical":      "All three cycles are critical. Slow down and keep the day simple.",
    "double_critical":   "Two cycles are critical. Be extra careful and avoid hasty decisions.",
    "all_high":          "All cycles are high. An excellent day to go after what you want.",
    "all_low":           "All cycles are low. Rest and recharge, tomorrow is another day.",
    "physical_high":     "Your body leads today. Channel it into movement and hands-on work.",
    "emotional_high":    "Your heart leads today. Connect, create and share.",
    "intellectual_high": "Your mind leads today. Learn, plan and solve.",
    "mixed":             "Mixed energies. Lean on the high cycles and go easy on the low ones.",
    "balanced":          "Your cycles are balanced. A steady day for everyday activities.",
})

SEVERITY_LABELS = MappingProxyType({
    "low":    "Low: one cycle crossing zero",
    "medium": "Medium: two cycles crossing zero",
    "high":   "High: all three cycles crossing zero",
})

# ── Numerology ────────────────────────────────────────────────────────────────
NUMBER_THEMES = MappingProxyType({
    1:  "Leadership, independence and new starts.",
    2:  "Cooperation, balance and partnership.",
    3:  "Creativity, expression and joy.",
    4:  "Structure, discipline and hard work.",
    5:  "Freedom, change and adventure.",
    6:  "Care, responsibility and home.",
    7:  "Reflection, study and inner wisdom.",
    8:  "Ambition, power and material success.",
    9:  "Completion, compassion and letting go.",
    11: "Master number: intuition and inspiration.",
    22: "Master number: the master builder, big plans made real.",
    33: "Master number: the master teacher, service and healing.",
})

# ── Compatibility ─────────────────────────────────────────────────────────────
RATING_LABELS = MappingProxyType({
    "excellent":   "Excellent: you move in step",
    "good":        "Good: plenty of common ground",
    "moderate":    "Moderate: some effort needed",
    "challenging": "Challenging: different rhythms today",
})

ACTIVITIES = MappingProxyType({
    "physical":     "Sports, hiking or dancing together",
    "emotional":    "A deep conversation or a shared creative project",
    "intellectual": "Games, study or planning something together",
    "element":      "Doing what you both naturally enjoy",
    "modality":     "Tackling a shared project with a clear plan",
    "aspect":       "Spending unstructured time together",
    "relaxing":     "Something low-key: a film, a walk or a meal",
})

# ── Daily sign reading ────────────────────────────────────────────────────────
MOOD_TEXT = MappingProxyType({
    "energetic":     "Energetic: your spark is easy to find today.",
    "passionate":    "Passionate: follow what excites you.",
    "inspired":      "Inspired: ideas arrive quickly, write them down.",
    "determined":    "Determined: push one goal over the line.",
    "enthusiastic":  "Enthusiastic: your mood is contagious.",
    "confident":     "Confident: speak up and take the lead.",
    "dynamic":       "Dynamic: keep moving and keep options open.",
    "stable":        "Stable: a steady pace gets the most done.",
    "centered":      "Centered: you stay calm while others rush.",
    "practical":     "Practical: solve the problem in front of you.",
    "productive":    "Productive: clear the backlog.",
    "serene":        "Serene: slow down and enjoy simple things.",
    "resilient":     "Resilient: setbacks roll off you today.",
    "focused":       "Focused: one task at a time pays off.",
    "curious":       "Curious: ask questions and explore.",
    "communicative": "Communicative: a good day for conversations.",
    "light":         "Light: keep things playful.",
    "sociable":      "Sociable: reach out and meet people.",
    "creative":      "Creative: make something new.",
    "versatile":     "Versatile: switch between tasks with ease.",
    "intuitive":     "Intuitive: trust your gut.",
    "sensitive":     "Sensitive: protect your energy.",
    "reflective":    "Reflective: look back before moving forward.",
    "empathetic":    "Empathetic: you understand others easily.",
    "dreamy":        "Dreamy: let your imagination wander.",
    "deep":          "Deep: skip small talk, go for what matters.",
    "connected":     "Connected: lean on the people close to you.",
})


def _lookup(table, key) -> str:
    return table.get(key, FALLBACK)


def phase_name(phase_id: str) -> str:
    name, emoji = PHASE_NAMES.get(phase_id, (phase_id, "🌙"))
    return f"{emoji} {name}"


def phase_guidance(phase_id: str) -> str:
    return _lookup(PHASE_GUIDANCE, phase_id)


def cycle_name(cycle_id: str) -> str:
    return CYCLE_NAMES.get(cycle_id, cycle_id.title())


def cycle_advice(cycle_id: str, value: float, critical: bool, high_threshold: float = 0.0) -> str:
    """Advice for one cycle: critical beats high/low, sign of the value picks the rest."""
    advice = CYCLE_ADVICE.get(cycle_id)
    if advice is None:
        return FALLBACK
    if critical:
        return advice["critical"]
    return advice["high"] if value > high_threshold else advice["low"]


def general_advice(key: str) -> str:
    return _lookup(GENERAL_ADVICE, key)


def severity_label(severity: str) -> str:
    return _lookup(SEVERITY_LABELS, severity)


def number_theme(number: int) -> str:
    return _lookup(NUMBER_THEMES, number)


def rating_label(rating: str) -> str:
    return _lookup(RATING_LABELS, rating)


def activity(key: str) -> str:
    return _lookup(ACTIVITIES, key)


def mood_text(mood: str) -> str:
    return _lookup(MOOD_TEXT, mood)


def color_name(color: str) -> str:
    return color.replace("-", " ").title()
