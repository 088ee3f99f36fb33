"""
Tests for the workout composer

Day schedule, split policy, redistribution, level filtering, exercise
selection with top-up, and the assembled workout records.
"""
import random
from collections import Counter

import pytest

from services.workout_plan.constants import COOLDOWN_TEMPLATE, WARMUP_TEMPLATE
from services.workout_plan.workout_composer import (
    WorkoutComposer,
    build_split_sequence,
    clamp_training_days,
    distribute_workout_types,
    exercises_per_workout,
    filter_by_level,
    training_day_indexes,
    workout_intensity,
    workout_notes,
)


def names(exercises):
    return {e.name for e in exercises}


class TestSchedule:
    """Training day table"""

    @pytest.mark.parametrize("days,expected", [
        (1, [0]),
        (2, [0, 3]),
        (3, [0, 2, 4]),
        (4, [0, 1, 3, 4]),
        (5, [0, 1, 2, 3, 4]),
        (6, [0, 1, 2, 3, 4, 5]),
        (7, [0, 1, 2, 3, 4, 5, 6]),
    ])
    def test_training_day_indexes(self, days, expected):
        assert training_day_indexes(days) == expected

    def test_zero_days(self):
        assert training_day_indexes(0) == []

    @pytest.mark.parametrize("requested,expected", [(0, 0), (3, 3), (6, 6), (7, 6), (-1, 0)])
    def test_clamp_training_days(self, requested, expected):
        assert clamp_training_days(requested) == expected


class TestDistributeWorkoutTypes:
    """Redistribution avoiding back-to-back repeats"""

    def test_alternates_when_possible(self):
        assert distribute_workout_types(["a", "a", "b", "b"]) == ["a", "b", "a", "b"]

    def test_repeats_when_no_alternative_remains(self):
        assert distribute_workout_types(["a", "a", "a", "b"]) == ["a", "b", "a", "a"]

    def test_preserves_counts(self):
        types = ["glutes"] * 4 + ["lowerBody"] * 2
        assert Counter(distribute_workout_types(types)) == Counter(types)

    def test_empty(self):
        assert distribute_workout_types([]) == []


class TestSplitSequence:
    """Split policy by focus area"""

    def test_full_body_every_day(self):
        assert build_split_sequence("fullBody", 4) == ["fullBody"] * 4

    def test_glutes_five_days(self):
        """3 glutes, 1 lower body, 1 upper body"""
        assert build_split_sequence("glutes", 5) == [
            "glutes", "lowerBody", "glutes", "upperBody", "glutes",
        ]

    @pytest.mark.parametrize("days,glutes,lower,upper", [
        (1, 1, 0, 0),
        (2, 2, 0, 0),
        (3, 2, 1, 0),
        (4, 3, 1, 0),
        (6, 4, 2, 0),
    ])
    def test_glutes_counts(self, days, glutes, lower, upper):
        counts = Counter(build_split_sequence("glutes", days))
        assert counts["glutes"] == glutes
        assert counts["lowerBody"] == lower
        assert counts["upperBody"] == upper
        assert sum(counts.values()) == days

    def test_other_focus_round_robin(self):
        """4 upper body days: 3 on focus, 1 on the first other area"""
        assert build_split_sequence("upperBody", 4) == [
            "upperBody", "fullBody", "upperBody", "upperBody",
        ]

    def test_core_five_days(self):
        assert build_split_sequence("core", 5) == [
            "core", "fullBody", "core", "upperBody", "core",
        ]

    def test_unknown_focus_uses_full_body(self, caplog):
        assert build_split_sequence("arms", 3) == ["fullBody"] * 3
        assert "Unrecognized focus area" in caplog.text

    def test_zero_days(self):
        assert build_split_sequence("glutes", 0) == []


class TestLevelFilter:
    """Difficulty tiers by fitness level"""

    def test_beginner(self, catalog):
        pool = filter_by_level(catalog.exercise_pool("fullBody"), "beginner")
        assert pool
        assert {e.difficulty for e in pool} == {"beginner"}

    def test_intermediate(self, catalog):
        pool = filter_by_level(catalog.exercise_pool("fullBody"), "intermediate")
        assert {e.difficulty for e in pool} == {"beginner", "intermediate"}

    def test_advanced_gets_everything(self, catalog):
        full = catalog.exercise_pool("fullBody")
        assert filter_by_level(full, "advanced") == full

    def test_unknown_level_gets_everything(self, catalog):
        full = catalog.exercise_pool("fullBody")
        assert filter_by_level(full, "elite") == full


class TestWorkoutParameters:
    """Exercise count, intensity and notes"""

    def test_requested_exercise_count(self, make_profile):
        assert exercises_per_workout(make_profile(exercises_per_workout=7), False) == 7

    def test_default_exercise_count(self, make_profile):
        assert exercises_per_workout(make_profile(exercises_per_workout=None), False) == 5

    @pytest.mark.parametrize("requested,expected", [(3, 3), (4, 3), (5, 3), (8, 6)])
    def test_deload_exercise_count(self, make_profile, requested, expected):
        assert exercises_per_workout(make_profile(exercises_per_workout=requested), True) == expected

    @pytest.mark.parametrize("deload,focus,expected", [
        (True, "Recovery", "deload"),
        (False, "Intensity", "high"),
        (False, "Volume", "moderate"),
        (False, "Technique", "light"),
        (False, "Muscular Endurance", "light"),
    ])
    def test_intensity(self, deload, focus, expected):
        assert workout_intensity(deload, focus) == expected

    def test_deload_notes(self):
        assert workout_notes(True, "Recovery", "strength").startswith("Deload week")

    def test_notes_with_goal_emphasis(self):
        notes = workout_notes(False, "Volume", "muscleGain")
        assert notes.startswith("Week focus: Volume. ")
        assert notes.endswith("For hypertrophy, focus on muscular contraction and time under tension.")

    def test_notes_without_goal_emphasis(self):
        assert workout_notes(False, "Technique", "toning") == (
            "Week focus: Technique. Focus on flawless execution and controlling the tempo of each rep."
        )


class TestComposeWeek:
    """Assembled weekly workouts"""

    def test_beginner_full_body_week(self, catalog, rng, profile):
        composer = WorkoutComposer(catalog, rng)
        workouts = composer.compose_week(profile, 3, week_number=1, is_deload=False, week_focus="Volume")

        beginner_names = names(filter_by_level(catalog.exercise_pool("fullBody"), "beginner"))
        assert [w.day_of_week for w in workouts] == [0, 2, 4]
        assert [w.name for w in workouts] == [
            "Monday: Full Body Workout",
            "Wednesday: Full Body Workout",
            "Friday: Full Body Workout",
        ]
        for workout in workouts:
            assert len(workout.exercises) == 5
            assert names(workout.exercises) <= beginner_names
            assert len(names(workout.exercises)) == 5
            assert workout.target_muscle_groups == ["full body"]
            assert workout.workout_type == "strength"
            assert workout.intensity == "moderate"
            assert workout.time_per_exercise == 12
            assert workout.estimated_duration == 60
            assert workout.warmup == list(WARMUP_TEMPLATE)
            assert workout.cooldown == list(COOLDOWN_TEMPLATE)
            assert workout.description == "Full Body Workout - Week 1 (Volume)"

    def test_deload_week_uses_deload_pool(self, catalog, rng, profile):
        composer = WorkoutComposer(catalog, rng)
        workouts = composer.compose_week(profile, 3, week_number=9, is_deload=True, week_focus="Recovery")

        deload_names = names(catalog.exercise_pool("fullBody", deload=True))
        for workout in workouts:
            assert len(workout.exercises) == 3
            assert names(workout.exercises) <= deload_names
            assert workout.intensity == "deload"

    def test_zero_training_days(self, catalog, rng, profile):
        composer = WorkoutComposer(catalog, rng)
        assert composer.compose_week(profile, 0, 1, False, "Volume") == []

    def test_top_up_from_other_areas(self, catalog, rng, make_profile):
        """12 exercises from a 6-exercise beginner pool pulls in other areas"""
        profile = make_profile(exercises_per_workout=12)
        composer = WorkoutComposer(catalog, rng)
        workouts = composer.compose_week(profile, 1, 1, False, "Volume")

        exercises = workouts[0].exercises
        beginner_names = names(filter_by_level(catalog.exercise_pool("fullBody"), "beginner"))
        assert len(exercises) == 12
        assert len(names(exercises)) == 12
        assert beginner_names <= names(exercises)

    def test_endurance_workouts_are_cardio(self, catalog, rng, make_profile):
        composer = WorkoutComposer(catalog, rng)
        workouts = composer.compose_week(make_profile(fitness_goals="endurance"), 2, 1, False, "Volume")
        assert {w.workout_type for w in workouts} == {"cardio"}

    def test_glutes_target_muscles(self, catalog, rng, make_profile):
        composer = WorkoutComposer(catalog, rng)
        workouts = composer.compose_week(make_profile(focus_areas="glutes"), 5, 1, False, "Volume")
        assert [w.split for w in workouts] == ["glutes", "lowerBody", "glutes", "upperBody", "glutes"]
        assert workouts[0].target_muscle_groups == ["glutes", "hamstrings", "quadriceps"]
        assert workouts[3].name == "Thursday: Upper Body Workout"

    def test_workouts_sorted_by_day(self, catalog, rng, make_profile):
        composer = WorkoutComposer(catalog, rng)
        workouts = composer.compose_week(make_profile(focus_areas="core"), 6, 2, False, "Intensity")
        days = [w.day_of_week for w in workouts]
        assert days == sorted(days)

    def test_same_seed_same_selection(self, catalog, profile):
        first = WorkoutComposer(catalog, random.Random(7)).compose_week(profile, 3, 1, False, "Volume")
        second = WorkoutComposer(catalog, random.Random(7)).compose_week(profile, 3, 1, False, "Volume")
        assert [w.to_dict() for w in first] == [w.to_dict() for w in second]

    def test_catalog_pool_unchanged(self, catalog, rng, make_profile):
        before = catalog.exercise_pool("fullBody")
        composer = WorkoutComposer(catalog, rng)
        composer.compose_week(make_profile(fitness_goals="muscleGain"), 6, 1, False, "Volume")
        assert catalog.exercise_pool("fullBody") == before
