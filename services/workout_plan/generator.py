"""
Plan Generator

Main orchestrator for workout plan generation.
Coordinates all components to produce a complete 9-week plan.

Usage:
    generator = PlanGenerator(rng=random.Random(42))
    plan = generator.generate(profile)

    # Or in one call, from a validated profile or raw profile data
    plan = generate_workout_plan({"age": 30, ...})
"""

import logging
import random
from typing import Any, Mapping, Optional, Union

from core.config import settings
from schemas import UserProfile, load_profile
from services.body_metrics import calculate_body_metrics

from .catalogs import ReferenceCatalog
from .constants import DAYS_IN_WEEK, PLAN_NOTES, TOTAL_WEEKS
from .labels import label_for_fitness_level, label_for_focus_area, label_for_goal
from .models import WorkoutPlan
from .rest_day_selector import RestDaySelector
from .sleep_advisor import generate_sleep_recommendations
from .supplements import recommend_supplements
from .week_planner import WeekPlanner
from .workout_composer import WorkoutComposer, clamp_training_days

logger = logging.getLogger(__name__)


class PlanGenerator:
    """
    Assemble a workout plan from a profile.

    Args:
        catalog: Reference catalogs. Defaults to the YAML catalogs
                 loaded by ConfigService.
        rng: Random source for every selection. Defaults to
             random.Random(settings.PLAN_RANDOM_SEED).
    """

    def __init__(self, catalog: ReferenceCatalog = None, rng: random.Random = None):
        self.catalog = catalog or ReferenceCatalog.from_config()
        self.rng = rng or random.Random(settings.PLAN_RANDOM_SEED)
        self.composer = WorkoutComposer(self.catalog, self.rng)
        self.rest_selector = RestDaySelector(self.catalog, self.rng)
        self.week_planner = WeekPlanner(self.composer, self.rest_selector)

    def generate(self, profile: UserProfile) -> WorkoutPlan:
        """Generate a complete plan. Never raises for a validated profile."""
        training_days = clamp_training_days(profile.workouts_per_week)
        rest_days = DAYS_IN_WEEK - training_days

        logger.info(
            f"Generating plan: {profile.focus_areas} {profile.fitness_level} "
            f"{profile.fitness_goals} {training_days}d/{rest_days}r"
        )

        weeks = self.week_planner.build_weeks(profile, training_days, rest_days)

        focus_label = label_for_focus_area(profile.focus_areas)
        level_label = label_for_fitness_level(profile.fitness_level)
        goal_label = label_for_goal(profile.fitness_goals)

        plan = WorkoutPlan(
            name=f"{focus_label} {level_label} Plan - {TOTAL_WEEKS} Weeks",
            description=(
                f"A {TOTAL_WEEKS}-week workout plan ({TOTAL_WEEKS - 1} weeks + 1 deload) "
                f"focused on {focus_label} for {goal_label}"
            ),
            days_per_week=training_days,
            rest_days=rest_days,
            focus_area=focus_label,
            fitness_level=profile.fitness_level,
            total_weeks=TOTAL_WEEKS,
            current_week=1,
            weeks=weeks,
            body_metrics=calculate_body_metrics(profile),
            supplement_recommendations=recommend_supplements(profile, self.catalog),
            sleep_recommendations=generate_sleep_recommendations(profile),
            notes=PLAN_NOTES,
        )

        logger.info(
            f"Generated plan '{plan.name}': {len(weeks)} weeks, "
            f"{sum(len(w.workouts) for w in weeks)} workouts"
        )
        return plan


def generate_workout_plan(
    profile: Union[UserProfile, Mapping[str, Any]],
    rng: Optional[random.Random] = None,
    catalog: Optional[ReferenceCatalog] = None,
) -> WorkoutPlan:
    """
    Generate a workout plan.

    Args:
        profile: Validated UserProfile, or raw profile data to validate
        rng: Random source. Pass a seeded random.Random for repeatable plans.
        catalog: Reference catalogs override

    Raises:
        ProfileValidationError: raw profile data failed validation
    """
    if not isinstance(profile, UserProfile):
        profile = load_profile(profile)
    return PlanGenerator(catalog=catalog, rng=rng).generate(profile)
