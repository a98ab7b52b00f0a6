"""Coaching tips for workouts, matched on exercise names."""

import re

DEFAULT_TIP = (
    "Focus on proper form, controlled movements, and consistent breathing "
    "throughout the exercise."
)

# Keyword -> tip. First keyword found in the normalized name wins.
EXERCISE_TIPS: dict[str, str] = {
    "bench": (
        "Keep your feet flat on the floor, shoulder blades pinched together, "
        "and lower the bar to mid-chest with control."
    ),
    "squat": (
        "Keep your core tight, chest up, and push your knees out over your toes "
        "as you descend to parallel."
    ),
    "deadlift": (
        "Maintain a neutral spine, drive through your heels, and keep the bar "
        "close to your body throughout the lift."
    ),
    "press": (
        "Engage your core, avoid arching your back excessively, and press in a "
        "slight arc path for shoulder health."
    ),
    "curl": (
        "Keep your elbows stationary, avoid swinging, and focus on squeezing at "
        "the top of the movement."
    ),
    "row": (
        "Retract your shoulder blades, pull to your lower chest or upper abdomen, "
        "and avoid using momentum."
    ),
    "pull": (
        "Initiate with your lats, not your arms, and focus on pulling your elbows "
        "down and back."
    ),
    "lunge": (
        "Keep your front knee tracking over your toes and maintain an upright "
        "torso throughout the movement."
    ),
    "plank": (
        "Keep your body in a straight line from head to heels, engage your core, "
        "and breathe steadily."
    ),
}

ABBREVIATIONS = {
    "bb": "barbell",
    "db": "dumbbell",
    "kb": "kettlebell",
    "ohp": "overhead press",
    "rdl": "romanian deadlift",
    "bss": "bulgarian split squat",
}


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for keyword matching.

    Converts to lowercase, collapses whitespace and expands common
    abbreviations (BB, DB, OHP, ...).
    """
    normalized = re.sub(r"\s+", " ", name.lower().strip())

    for abbrev, full in ABBREVIATIONS.items():
        normalized = re.sub(rf"\b{abbrev}\b", full, normalized)

    return normalized


def suggest_tip(workout_name: str) -> str:
    """Pick a coaching tip for a workout by name."""
    name = normalize_exercise_name(workout_name)
    for keyword, tip in EXERCISE_TIPS.items():
        if keyword in name:
            return tip
    return DEFAULT_TIP
