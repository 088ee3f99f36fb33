"""
Week Planner

Lays out the 9 plan weeks:
- Weeks 1-8 rotate Volume, Intensity, Technique and Muscular Endurance
- Week 9 is the deload (Recovery) week

Each week delegates to the WorkoutComposer for training days and to the
RestDaySelector for rest days.
"""

import logging
from dataclasses import dataclass
from typing import List

from schemas import UserProfile

from .constants import (
    DELOAD_WEEK,
    TOTAL_WEEKS,
    WEEK_FOCUS_DESCRIPTIONS,
    WEEK_FOCUS_ROTATION,
    WeekFocus,
)
from .models import WorkoutWeek
from .rest_day_selector import RestDaySelector
from .workout_composer import WorkoutComposer

logger = logging.getLogger(__name__)


@dataclass
class WeekOutline:
    """Theme of a single week, before workouts are composed."""
    week_number: int
    focus: WeekFocus
    description: str
    is_deload: bool


def describe_week(week_number: int) -> WeekOutline:
    """Focus and description for a 1-indexed week number."""
    if week_number == DELOAD_WEEK:
        focus = WeekFocus.RECOVERY
    else:
        focus = WEEK_FOCUS_ROTATION[(week_number - 1) % len(WEEK_FOCUS_ROTATION)]
    return WeekOutline(
        week_number=week_number,
        focus=focus,
        description=WEEK_FOCUS_DESCRIPTIONS[focus],
        is_deload=week_number == DELOAD_WEEK,
    )


class WeekPlanner:
    """Build every week of a plan."""

    def __init__(self, composer: WorkoutComposer, rest_selector: RestDaySelector):
        self.composer = composer
        self.rest_selector = rest_selector

    def build_week(self, profile: UserProfile, outline: WeekOutline, training_days: int, rest_days: int) -> WorkoutWeek:
        workouts = self.composer.compose_week(
            profile,
            training_days=training_days,
            week_number=outline.week_number,
            is_deload=outline.is_deload,
            week_focus=outline.focus.value,
        )
        activities = self.rest_selector.select(profile, rest_days, outline.is_deload)

        logger.debug(
            f"Week {outline.week_number} ({outline.focus.value}): "
            f"{len(workouts)} workouts, {len(activities)} rest activities"
        )

        return WorkoutWeek(
            week_number=outline.week_number,
            focus=outline.focus.value,
            description=outline.description,
            is_deload_week=outline.is_deload,
            workouts=workouts,
            rest_days=rest_days,
            rest_day_activities=activities,
        )

    def build_weeks(self, profile: UserProfile, training_days: int, rest_days: int) -> List[WorkoutWeek]:
        return [
            self.build_week(profile, describe_week(n), training_days, rest_days)
            for n in range(1, TOTAL_WEEKS + 1)
        ]
