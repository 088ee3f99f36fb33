# Workout Plan Generation
#
# Rule-based engine that turns a fitness profile into a 9-week plan
# (8 training weeks + 1 deload week).
#
# Architecture:
# - YAML reference catalogs (exercises, rest activities, supplements)
# - Week planner driving the workout composer and rest-day selector
# - Pure exercise tuning on immutable catalog entries
# - Injectable random source for repeatable plans

from .config import ConfigService
from .catalogs import ReferenceCatalog
from .models import (
    Exercise,
    RestDayActivity,
    SupplementRecommendation,
    BodyMetrics,
    Workout,
    WorkoutWeek,
    WorkoutPlan,
)
from .workout_composer import WorkoutComposer
from .rest_day_selector import RestDaySelector
from .week_planner import WeekPlanner
from .generator import PlanGenerator, generate_workout_plan
from .plan_export import ExportResult, export_plan, resolve_current_week
from .constants import FitnessLevel, FitnessGoal, FocusArea, WeekFocus

__all__ = [
    # Core services
    'ConfigService',
    'ReferenceCatalog',

    # Entities
    'Exercise',
    'RestDayActivity',
    'SupplementRecommendation',
    'BodyMetrics',
    'Workout',
    'WorkoutWeek',
    'WorkoutPlan',

    # Generator components
    'WorkoutComposer',
    'RestDaySelector',
    'WeekPlanner',

    # Main generator
    'PlanGenerator',
    'generate_workout_plan',

    # Export
    'ExportResult',
    'export_plan',
    'resolve_current_week',

    # Constants
    'FitnessLevel',
    'FitnessGoal',
    'FocusArea',
    'WeekFocus',
]
