"""
Tests for display labels
"""
import pytest

from services.workout_plan.labels import (
    FOCUS_AREA_LABELS,
    INTENSITY_LABELS,
    label_for_difficulty,
    label_for_fitness_level,
    label_for_focus_area,
    label_for_goal,
    label_for_intensity,
    label_for_priority,
    label_for_split,
    label_for_workout_type,
)


class TestLabels:
    """Lookup with passthrough for unknown keys"""

    @pytest.mark.parametrize("lookup,key,label", [
        (label_for_focus_area, "fullBody", "Full Body"),
        (label_for_fitness_level, "intermediate", "Intermediate"),
        (label_for_goal, "muscleGain", "Muscle Gain"),
        (label_for_split, "lowerBody", "Lower Body Workout"),
        (label_for_workout_type, "hiit", "HIIT"),
        (label_for_difficulty, "advanced", "Advanced"),
        (label_for_intensity, "very_light", "Very Light"),
        (label_for_priority, "essential", "Essential"),
    ])
    def test_known_key(self, lookup, key, label):
        assert lookup(key) == label

    @pytest.mark.parametrize("lookup", [
        label_for_focus_area,
        label_for_fitness_level,
        label_for_goal,
        label_for_split,
        label_for_workout_type,
        label_for_difficulty,
        label_for_intensity,
        label_for_priority,
    ])
    def test_unknown_key_passes_through(self, lookup):
        assert lookup("somethingElse") == "somethingElse"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            FOCUS_AREA_LABELS["fullBody"] = "Whole Body"
        with pytest.raises(TypeError):
            INTENSITY_LABELS["extreme"] = "Extreme"
