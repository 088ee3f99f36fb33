"""
Display labels for plan identifiers.

Every lookup passes unknown keys through unchanged, so a value the engine
does not recognize is still shown as the user entered it.
"""

from types import MappingProxyType
from typing import Mapping

FOCUS_AREA_LABELS: Mapping[str, str] = MappingProxyType({
    "fullBody": "Full Body",
    "upperBody": "Upper Body",
    "lowerBody": "Lower Body",
    "core": "Core",
    "glutes": "Glutes",
})

FITNESS_LEVEL_LABELS: Mapping[str, str] = MappingProxyType({
    "beginner": "Beginner",
    "intermediate": "Intermediate",
    "advanced": "Advanced",
})

FITNESS_GOAL_LABELS: Mapping[str, str] = MappingProxyType({
    "weightLoss": "Weight Loss",
    "muscleGain": "Muscle Gain",
    "endurance": "Endurance",
    "strength": "Strength",
    "toning": "Toning",
})

# Workout split (focus area trained on a given day)
SPLIT_LABELS: Mapping[str, str] = MappingProxyType({
    "fullBody": "Full Body Workout",
    "upperBody": "Upper Body Workout",
    "lowerBody": "Lower Body Workout",
    "core": "Core Workout",
    "glutes": "Glutes Workout",
})

WORKOUT_TYPE_LABELS: Mapping[str, str] = MappingProxyType({
    "strength": "Strength",
    "cardio": "Cardio",
    "hiit": "HIIT",
    "flexibility": "Flexibility",
    "recovery": "Recovery",
})

DIFFICULTY_LABELS: Mapping[str, str] = MappingProxyType({
    "beginner": "Beginner",
    "intermediate": "Intermediate",
    "advanced": "Advanced",
})

INTENSITY_LABELS: Mapping[str, str] = MappingProxyType({
    "very_light": "Very Light",
    "light": "Light",
    "moderate": "Moderate",
    "high": "High",
    "deload": "Deload",
})

PRIORITY_LABELS: Mapping[str, str] = MappingProxyType({
    "essential": "Essential",
    "recommended": "Recommended",
    "optional": "Optional",
})


def _lookup(table: Mapping[str, str], key: str) -> str:
    return table.get(key, key)


def label_for_focus_area(key: str) -> str:
    return _lookup(FOCUS_AREA_LABELS, key)


def label_for_fitness_level(key: str) -> str:
    return _lookup(FITNESS_LEVEL_LABELS, key)


def label_for_goal(key: str) -> str:
    return _lookup(FITNESS_GOAL_LABELS, key)


def label_for_split(key: str) -> str:
    return _lookup(SPLIT_LABELS, key)


def label_for_workout_type(key: str) -> str:
    return _lookup(WORKOUT_TYPE_LABELS, key)


def label_for_difficulty(key: str) -> str:
    return _lookup(DIFFICULTY_LABELS, key)


def label_for_intensity(key: str) -> str:
    return _lookup(INTENSITY_LABELS, key)


def label_for_priority(key: str) -> str:
    return _lookup(PRIORITY_LABELS, key)
