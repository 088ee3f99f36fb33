"""
Workout Composer

Builds the training-day workouts of one week:
- Training-day schedule (fixed table, anchored on Monday)
- Split policy (which focus area is trained each day)
- Exercise selection from the level-filtered catalog pool
- Exercise tuning for the week focus and goal

Usage:
    composer = WorkoutComposer(catalog, rng)
    workouts = composer.compose_week(
        profile,
        training_days=3,
        week_number=1,
        is_deload=False,
        week_focus="Volume",
    )
"""

import logging
import random
from collections import OrderedDict
from typing import List, Sequence

from core.config import settings
from schemas import UserProfile

from .catalogs import ReferenceCatalog
from .constants import (
    COOLDOWN_TEMPLATE,
    DAY_NAMES,
    DELOAD_EXERCISE_REDUCTION,
    DELOAD_WORKOUT_NOTE,
    FOCUS_DAY_SHARE,
    FitnessGoal,
    FitnessLevel,
    FocusArea,
    GLUTES_LOWER_SHARE,
    GOAL_NOTES,
    Intensity,
    MAX_TRAINING_DAYS,
    MIN_DELOAD_EXERCISES,
    ROTATION_AREAS,
    TARGET_MUSCLES,
    TRAINING_DAY_SCHEDULE,
    WARMUP_TEMPLATE,
    WEEK_FOCUS_NOTES,
    WeekFocus,
    WorkoutType,
)
from .exercise_tuner import tune_exercise
from .labels import label_for_split
from .models import Exercise, Workout

logger = logging.getLogger(__name__)

# Difficulty tiers each level may draw from
LEVEL_DIFFICULTIES = {
    FitnessLevel.BEGINNER: {FitnessLevel.BEGINNER.value},
    FitnessLevel.INTERMEDIATE: {FitnessLevel.BEGINNER.value, FitnessLevel.INTERMEDIATE.value},
}


def _ceil_share(days: int, share: tuple) -> int:
    num, den = share
    return -(-days * num // den)


def clamp_training_days(workouts_per_week: int) -> int:
    """Weekly training days, capped so at least one rest day remains."""
    return max(0, min(workouts_per_week, MAX_TRAINING_DAYS))


def training_day_indexes(training_days: int) -> List[int]:
    """Day-of-week indexes (0 = Monday) for a weekly training-day count."""
    return list(TRAINING_DAY_SCHEDULE.get(training_days, []))


def filter_by_level(exercises: Sequence[Exercise], fitness_level: str) -> List[Exercise]:
    """
    Keep the exercises a level may perform.

    Beginners get beginner exercises, intermediates add intermediate ones.
    Advanced (and any unrecognized level) get everything.
    """
    try:
        allowed = LEVEL_DIFFICULTIES.get(FitnessLevel(fitness_level))
    except ValueError:
        allowed = None
    if allowed is None:
        return list(exercises)
    return [e for e in exercises if e.difficulty in allowed]


def distribute_workout_types(types: Sequence[str]) -> List[str]:
    """
    Reorder split labels so the same label is not trained on consecutive days.

    Greedy: each slot takes the first label (in order of first appearance)
    that still has quota and differs from the previous slot. When only the
    previous label has quota left it repeats.
    """
    remaining = OrderedDict()
    for split in types:
        remaining[split] = remaining.get(split, 0) + 1

    result: List[str] = []
    last = None
    for _ in range(len(types)):
        choice = next(
            (s for s, count in remaining.items() if count > 0 and s != last),
            None,
        )
        if choice is None:
            choice = next(s for s, count in remaining.items() if count > 0)
        remaining[choice] -= 1
        result.append(choice)
        last = choice
    return result


def build_split_sequence(focus_area: str, training_days: int) -> List[str]:
    """
    Focus area trained on each training day, in schedule order.

    - fullBody: every day full body
    - glutes: ~60% glutes, ~20% lower body, rest upper body
    - other areas: ~60% on the area, rest round-robin over the other
      rotation areas
    """
    if training_days <= 0:
        return []

    try:
        area = FocusArea(focus_area)
    except ValueError:
        logger.warning(f"Unrecognized focus area '{focus_area}', composing full body workouts")
        area = FocusArea.FULL_BODY

    if area == FocusArea.FULL_BODY:
        return [FocusArea.FULL_BODY.value] * training_days

    focus_days = _ceil_share(training_days, FOCUS_DAY_SHARE)

    if area == FocusArea.GLUTES:
        lower_days = min(_ceil_share(training_days, GLUTES_LOWER_SHARE), training_days - focus_days)
        upper_days = training_days - focus_days - lower_days
        sequence = (
            [FocusArea.GLUTES.value] * focus_days
            + [FocusArea.LOWER_BODY.value] * lower_days
            + [FocusArea.UPPER_BODY.value] * upper_days
        )
    else:
        others = [a.value for a in ROTATION_AREAS if a != area]
        remaining_days = training_days - focus_days
        sequence = [area.value] * focus_days + [
            others[i % len(others)] for i in range(remaining_days)
        ]

    return distribute_workout_types(sequence)


def exercises_per_workout(profile: UserProfile, is_deload: bool) -> int:
    requested = profile.exercises_per_workout or settings.DEFAULT_EXERCISES_PER_WORKOUT
    if is_deload:
        return max(MIN_DELOAD_EXERCISES, requested - DELOAD_EXERCISE_REDUCTION)
    return requested


def workout_intensity(is_deload: bool, week_focus: str) -> str:
    if is_deload:
        return Intensity.DELOAD.value
    if week_focus == WeekFocus.INTENSITY:
        return Intensity.HIGH.value
    if week_focus == WeekFocus.VOLUME:
        return Intensity.MODERATE.value
    return Intensity.LIGHT.value


def workout_notes(is_deload: bool, week_focus: str, goal: str) -> str:
    """Deload guidance, or the week focus guidance plus goal emphasis."""
    if is_deload:
        return DELOAD_WORKOUT_NOTE

    try:
        guidance = WEEK_FOCUS_NOTES.get(WeekFocus(week_focus), "")
    except ValueError:
        guidance = ""

    if guidance:
        try:
            goal_note = GOAL_NOTES.get(FitnessGoal(goal))
        except ValueError:
            goal_note = None
        if goal_note:
            guidance = f"{guidance} {goal_note}"
    return f"Week focus: {week_focus}. {guidance}".rstrip()


class WorkoutComposer:
    """
    Compose the weekly training-day workouts.

    Every random decision uses the injected rng so a seeded
    random.Random yields the same week twice.
    """

    def __init__(self, catalog: ReferenceCatalog, rng: random.Random):
        self.catalog = catalog
        self.rng = rng

    def select_exercises(
        self,
        pool: Sequence[Exercise],
        count: int,
        is_deload: bool,
    ) -> List[Exercise]:
        """
        Random selection of `count` exercises from the pool.

        When the pool is too small, the rest of the catalog (every focus
        area of the same regular/deload kind) is shuffled in behind it.
        """
        shuffled = list(pool)
        self.rng.shuffle(shuffled)

        if len(shuffled) < count:
            seen = {e.name for e in shuffled}
            extras = []
            for exercise in self.catalog.all_exercises(deload=is_deload):
                if exercise.name not in seen:
                    seen.add(exercise.name)
                    extras.append(exercise)
            self.rng.shuffle(extras)
            shuffled.extend(extras)

            if len(shuffled) < count:
                logger.warning(
                    f"Exercise catalog has {len(shuffled)} exercises, {count} requested"
                )

        return shuffled[:count]

    def compose_week(
        self,
        profile: UserProfile,
        training_days: int,
        week_number: int,
        is_deload: bool,
        week_focus: str,
    ) -> List[Workout]:
        """
        Build the workouts for one week.

        Args:
            profile: Validated user profile
            training_days: Training days this week (clamped to 0..6)
            week_number: 1-indexed week number
            is_deload: Deload week flag
            week_focus: Weekly theme label ("Volume", "Recovery", ...)

        Returns:
            Workouts sorted by day of week. Empty when training_days is 0.
        """
        training_days = clamp_training_days(training_days)
        if training_days == 0:
            return []

        pool = filter_by_level(
            self.catalog.exercise_pool(profile.focus_areas, deload=is_deload),
            profile.fitness_level,
        )
        days = training_day_indexes(training_days)
        splits = build_split_sequence(profile.focus_areas, training_days)
        count = exercises_per_workout(profile, is_deload)
        time_per_exercise = profile.time_per_workout // count

        workout_type = (
            WorkoutType.CARDIO.value
            if profile.fitness_goals == FitnessGoal.ENDURANCE
            else WorkoutType.STRENGTH.value
        )
        intensity = workout_intensity(is_deload, week_focus)
        notes = workout_notes(is_deload, week_focus, profile.fitness_goals)

        logger.debug(
            f"Week {week_number}: {training_days} workouts, splits={splits}, "
            f"pool={len(pool)}, exercises={count}"
        )

        workouts = []
        for day, split in zip(days, splits):
            selected = self.select_exercises(pool, count, is_deload)
            exercises = [
                tune_exercise(
                    exercise,
                    week_focus=week_focus,
                    goal=profile.fitness_goals,
                    position=index,
                    is_deload=is_deload,
                )
                for index, exercise in enumerate(selected)
            ]
            split_label = label_for_split(split)

            workouts.append(Workout(
                name=f"{DAY_NAMES[day]}: {split_label}",
                description=f"{split_label} - Week {week_number} ({week_focus})",
                workout_type=workout_type,
                split=split,
                target_muscle_groups=list(TARGET_MUSCLES[FocusArea(split)]),
                estimated_duration=profile.time_per_workout,
                time_per_exercise=time_per_exercise,
                intensity=intensity,
                warmup=list(WARMUP_TEMPLATE),
                exercises=exercises,
                cooldown=list(COOLDOWN_TEMPLATE),
                notes=notes,
                day_of_week=day,
            ))

        workouts.sort(key=lambda w: w.day_of_week)
        return workouts
