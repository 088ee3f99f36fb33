"""
Exercise Tuner

Adjusts catalog exercise prescriptions (sets, reps, rest, tempo) for:
- Deload weeks
- The weekly focus theme
- The athlete's goal

Every step returns a new Exercise via dataclasses.replace; the catalog
entry passed in is never modified. Week-focus adjustments always run
before goal adjustments since both clamp the same fields.

Usage:
    tuned = tune_exercise(
        exercise,
        week_focus="Volume",
        goal="strength",
        position=0,
        is_deload=False,
    )
"""

from dataclasses import replace
from typing import Optional

from .constants import (
    FitnessGoal,
    HYPERTROPHY_TEMPO,
    TECHNIQUE_TEMPO,
    TUNING_LIMITS,
    WeekFocus,
)
from .models import Exercise, Reps

LIMITS = TUNING_LIMITS


def _is_numeric(reps: Reps) -> bool:
    # bool is an int subclass
    return isinstance(reps, int) and not isinstance(reps, bool)


def _shift_reps(reps: Reps, delta: int, low: Optional[int] = None, high: Optional[int] = None) -> Reps:
    if not _is_numeric(reps):
        return reps
    value = reps + delta
    if low is not None:
        value = max(value, low)
    if high is not None:
        value = min(value, high)
    return value


def _shift_rest(rest: Optional[int], delta: int, low: Optional[int] = None, high: Optional[int] = None) -> Optional[int]:
    # Exercises without a prescribed rest keep none
    if not rest:
        return rest
    value = rest + delta
    if low is not None:
        value = max(value, low)
    if high is not None:
        value = min(value, high)
    return value


def tune_for_deload(exercise: Exercise) -> Exercise:
    """Fewer sets, a few more (lighter) reps, longer rest."""
    return replace(
        exercise,
        sets=max(exercise.sets - 1, LIMITS["min_sets"]),
        reps=_shift_reps(exercise.reps, 2, high=LIMITS["deload_max_reps"]),
        rest_between_sets=_shift_rest(exercise.rest_between_sets, 30, high=LIMITS["max_rest"]),
    )


def tune_for_week_focus(exercise: Exercise, week_focus: str) -> Exercise:
    """Apply the weekly theme. Unknown themes leave the exercise unchanged."""
    if week_focus == WeekFocus.VOLUME:
        return replace(
            exercise,
            sets=min(exercise.sets + 1, LIMITS["max_sets"]),
            reps=_shift_reps(exercise.reps, 2, high=LIMITS["volume_max_reps"]),
        )
    elif week_focus == WeekFocus.INTENSITY:
        return replace(
            exercise,
            reps=_shift_reps(exercise.reps, -2, low=LIMITS["intensity_min_reps"]),
            rest_between_sets=_shift_rest(exercise.rest_between_sets, 30, high=LIMITS["max_rest"]),
        )
    elif week_focus == WeekFocus.TECHNIQUE:
        return replace(exercise, tempo=exercise.tempo or TECHNIQUE_TEMPO)
    elif week_focus == WeekFocus.MUSCULAR_ENDURANCE:
        return replace(
            exercise,
            reps=_shift_reps(exercise.reps, 4, high=LIMITS["endurance_week_max_reps"]),
            rest_between_sets=_shift_rest(exercise.rest_between_sets, -15, low=LIMITS["min_rest"]),
        )
    return exercise


def tune_for_goal(exercise: Exercise, goal: str, position: int = 0) -> Exercise:
    """
    Apply goal-specific adjustments on top of the weekly theme.

    Args:
        exercise: Exercise already tuned for the week
        goal: Profile fitness goal
        position: Index of the exercise within the workout. The first two
                  slots are treated as compound lifts for muscle gain.
    """
    if goal == FitnessGoal.STRENGTH:
        return replace(
            exercise,
            reps=_shift_reps(exercise.reps, -2, low=LIMITS["strength_min_reps"]),
            sets=min(exercise.sets + 1, LIMITS["max_sets"]),
            rest_between_sets=_shift_rest(exercise.rest_between_sets, 30, high=LIMITS["strength_max_rest"]),
        )
    elif goal == FitnessGoal.ENDURANCE:
        return replace(
            exercise,
            reps=_shift_reps(exercise.reps, 5, high=LIMITS["endurance_goal_max_reps"]),
            rest_between_sets=_shift_rest(exercise.rest_between_sets, -15, low=LIMITS["min_rest"]),
        )
    elif goal == FitnessGoal.MUSCLE_GAIN:
        sets = min(exercise.sets + 1, LIMITS["max_sets"])
        if position < LIMITS["compound_slots"]:
            sets = min(sets + 1, LIMITS["max_sets_compound"])
        # Hypertrophy range clamp
        reps = _shift_reps(
            exercise.reps, 0,
            low=LIMITS["hypertrophy_min_reps"],
            high=LIMITS["hypertrophy_max_reps"],
        )
        return replace(
            exercise,
            sets=sets,
            reps=reps,
            tempo=exercise.tempo or HYPERTROPHY_TEMPO,
            rest_between_sets=LIMITS["hypertrophy_rest"],
        )
    return exercise


def tune_exercise(
    exercise: Exercise,
    week_focus: str,
    goal: str,
    position: int = 0,
    is_deload: bool = False,
) -> Exercise:
    """
    Tune a catalog exercise for one workout slot.

    Deload weeks only get the deload pass. Other weeks get the week-focus
    pass followed by the goal pass.
    """
    if is_deload:
        return tune_for_deload(exercise)
    return tune_for_goal(tune_for_week_focus(exercise, week_focus), goal, position)
