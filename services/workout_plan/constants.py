"""
Constants for workout plan generation.

Fixed rule tables used by the composer, tuner and rest-day selector.
Reference content (exercises, activities, supplements) lives in data/*.yaml.
"""

from enum import Enum
from typing import Dict, List, Tuple


class FitnessLevel(str, Enum):
    """Training experience tier. Also the exercise difficulty tier."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class FitnessGoal(str, Enum):
    """Primary objective declared on the profile."""
    WEIGHT_LOSS = "weightLoss"
    MUSCLE_GAIN = "muscleGain"
    ENDURANCE = "endurance"
    STRENGTH = "strength"
    TONING = "toning"


class FocusArea(str, Enum):
    """Body region a plan (or a single workout) emphasizes."""
    FULL_BODY = "fullBody"
    UPPER_BODY = "upperBody"
    LOWER_BODY = "lowerBody"
    CORE = "core"
    GLUTES = "glutes"


class WeekFocus(str, Enum):
    """Weekly training theme."""
    VOLUME = "Volume"
    INTENSITY = "Intensity"
    TECHNIQUE = "Technique"
    MUSCULAR_ENDURANCE = "Muscular Endurance"
    RECOVERY = "Recovery"  # Deload week only


class WorkoutType(str, Enum):
    """Workout modality."""
    STRENGTH = "strength"
    CARDIO = "cardio"
    HIIT = "hiit"
    FLEXIBILITY = "flexibility"
    RECOVERY = "recovery"


class Intensity(str, Enum):
    """Intensity tags for workouts and rest-day activities."""
    VERY_LIGHT = "very_light"
    LIGHT = "light"
    MODERATE = "moderate"
    HIGH = "high"
    DELOAD = "deload"


class SupplementPriority(str, Enum):
    """Supplement importance tier."""
    ESSENTIAL = "essential"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"


# Plan shape
TOTAL_WEEKS = 9
DELOAD_WEEK = 9
DAYS_IN_WEEK = 7
MAX_TRAINING_DAYS = 6

# Rotating theme for training weeks, indexed by (week_number - 1) % 4
WEEK_FOCUS_ROTATION: Tuple[WeekFocus, ...] = (
    WeekFocus.VOLUME,
    WeekFocus.INTENSITY,
    WeekFocus.TECHNIQUE,
    WeekFocus.MUSCULAR_ENDURANCE,
)

WEEK_FOCUS_DESCRIPTIONS: Dict[WeekFocus, str] = {
    WeekFocus.VOLUME: "Volume focus with moderate sets and repetitions.",
    WeekFocus.INTENSITY: "Intensity focus with heavier loads and fewer repetitions.",
    WeekFocus.TECHNIQUE: "Technique focus on movement control with prescribed tempos.",
    WeekFocus.MUSCULAR_ENDURANCE: "Muscular endurance focus with more repetitions and less rest.",
    WeekFocus.RECOVERY: (
        "Recovery week with reduced volume and intensity to allow adaptation "
        "and recovery."
    ),
}

# Training days (0 = Monday) by weekly training-day count, anchored on Monday
TRAINING_DAY_SCHEDULE: Dict[int, List[int]] = {
    1: [0],
    2: [0, 3],
    3: [0, 2, 4],
    4: [0, 1, 3, 4],
    5: [0, 1, 2, 3, 4],
    6: [0, 1, 2, 3, 4, 5],
    7: [0, 1, 2, 3, 4, 5, 6],
}

DAY_NAMES: Tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

# Target muscle labels by workout split
TARGET_MUSCLES: Dict[FocusArea, List[str]] = {
    FocusArea.FULL_BODY: ["full body"],
    FocusArea.UPPER_BODY: ["chest", "back", "shoulders", "arms"],
    FocusArea.LOWER_BODY: ["quadriceps", "hamstrings", "glutes", "calves"],
    FocusArea.CORE: ["abdominals", "obliques", "lower back", "stabilizers"],
    FocusArea.GLUTES: ["glutes", "hamstrings", "quadriceps"],
}

# Split policy. Shares are expressed as fractions num/den for ceiling division.
FOCUS_DAY_SHARE = (3, 5)       # ~60% of days on the chosen area
GLUTES_LOWER_SHARE = (1, 5)    # ~20% lower-body days on a glutes plan
ROTATION_AREAS: Tuple[FocusArea, ...] = (
    FocusArea.FULL_BODY,
    FocusArea.UPPER_BODY,
    FocusArea.LOWER_BODY,
    FocusArea.CORE,
)

# Exercises
DEFAULT_EXERCISES_PER_WORKOUT = 5
DELOAD_EXERCISE_REDUCTION = 2
MIN_DELOAD_EXERCISES = 3

# Exercise tuning bounds
TUNING_LIMITS = {
    "min_sets": 2,
    "max_sets": 5,
    "max_sets_compound": 6,     # Muscle gain, first two exercises
    "compound_slots": 2,
    "deload_max_reps": 15,
    "volume_max_reps": 15,
    "intensity_min_reps": 6,
    "endurance_week_max_reps": 20,
    "strength_min_reps": 5,
    "endurance_goal_max_reps": 20,
    "hypertrophy_min_reps": 8,
    "hypertrophy_max_reps": 12,
    "min_rest": 30,
    "max_rest": 120,
    "strength_max_rest": 180,
    "hypertrophy_rest": 90,
}

TECHNIQUE_TEMPO = "3-1-3-0"
HYPERTROPHY_TEMPO = "2-1-2-0"

WARMUP_TEMPLATE: Tuple[str, ...] = (
    "5 minutes of light cardio (jogging in place, jumping jacks)",
    "Dynamic stretching for the major muscle groups",
    "Joint rotations (shoulders, wrists, ankles)",
)

COOLDOWN_TEMPLATE: Tuple[str, ...] = (
    "Static stretching for the muscle groups trained",
    "Deep breathing exercises",
    "5 minutes of easy walking",
)

DELOAD_WORKOUT_NOTE = (
    "Deload week: focus on recovery, use lighter loads and prioritize technique."
)

WEEK_FOCUS_NOTES: Dict[WeekFocus, str] = {
    WeekFocus.VOLUME: "Concentrate on completing every set and rep with good form.",
    WeekFocus.INTENSITY: "Use heavier loads while keeping proper technique.",
    WeekFocus.TECHNIQUE: "Focus on flawless execution and controlling the tempo of each rep.",
    WeekFocus.MUSCULAR_ENDURANCE: "Minimize rest periods and keep a steady pace.",
}

GOAL_NOTES: Dict[FitnessGoal, str] = {
    FitnessGoal.MUSCLE_GAIN: "For hypertrophy, focus on muscular contraction and time under tension.",
    FitnessGoal.STRENGTH: "For strength, concentrate on explosive concentric movements.",
    FitnessGoal.ENDURANCE: "For endurance, keep rest intervals short and the pace steady.",
}

PLAN_NOTES = (
    "This plan varies volume and intensity across the weeks, with a deload week "
    "placed at the end to maximize recovery and results. Adjust loads as needed "
    "to keep the challenge appropriate. Do not neglect rest days: they are "
    "essential for recovery and progress."
)

# Rest-day activities
CARDIO_ACTIVITY_IDS: Tuple[str, ...] = (
    "walking", "cycling", "swimming", "light_elliptical", "hiking",
)
RECOVERY_ACTIVITY_IDS: Tuple[str, ...] = (
    "stretching", "yoga", "mobility", "foam_rolling", "meditation",
)
SIMILAR_ACTIVITY_GROUPS: Tuple[frozenset, ...] = (
    frozenset({"walking", "hiking"}),
    frozenset({"yoga", "stretching", "mobility"}),
    frozenset({"cycling", "light_elliptical"}),
)
SIMILARITY_LOOKBACK_DAYS = 2

REST_COMBINATION_RULES = {
    "min_selected": 3,              # Selected activities needed to try a combination
    "combination_threshold": 0.3,   # Draw must exceed this to combine
    "cardio_threshold": 0.5,        # Draw must exceed this for a cardio combo
    "max_parts": 3,
    "cardio_minutes_per_part": 20,
    "cardio_max_minutes": 60,
    "recovery_minutes_per_part": 15,
    "recovery_max_minutes": 45,
    "pairing_minutes": 40,
}
DEFAULT_REST_ACTIVITY_MINUTES = 30
WEIGHT_LOSS_MIN_REST_MINUTES = 30
RECOVERY_BENEFIT_KEYWORD = "recovery"

PRIORITY_RANK: Dict[SupplementPriority, int] = {
    SupplementPriority.ESSENTIAL: 0,
    SupplementPriority.RECOMMENDED: 1,
    SupplementPriority.OPTIONAL: 2,
}

# Sleep thresholds (hours)
MIN_RECOMMENDED_SLEEP_HOURS = 7
MAX_SLEEP_SCHEDULE_GAP_HOURS = 2
