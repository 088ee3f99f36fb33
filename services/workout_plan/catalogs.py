"""
Reference Catalogs

Typed, read-only view over the YAML catalogs loaded by ConfigService.

Usage:
    catalog = ReferenceCatalog.from_config()
    pool = catalog.exercise_pool("glutes", deload=False)
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

from core.exceptions import CatalogError

from .config import ConfigService
from .constants import FocusArea
from .models import (
    Exercise,
    RestActivityOption,
    RestDayActivity,
    SupplementRecommendation,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parse_entries(catalog: str, entries: Any, parser: Callable[[Dict[str, Any]], T]) -> List[T]:
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise CatalogError(catalog, f"expected a list, got {type(entries).__name__}")
    try:
        return [parser(entry) for entry in entries]
    except (KeyError, TypeError, ValueError) as e:
        raise CatalogError(catalog, f"malformed entry: {e}") from e


class ReferenceCatalog:
    """
    Exercise, rest-activity and supplement catalogs.

    Entries are frozen dataclasses; callers derive modified copies and
    never mutate what the catalog hands out.
    """

    def __init__(
        self,
        exercises: Mapping[str, Any],
        rest_activities: Mapping[str, Any],
        supplements: Mapping[str, Any],
    ):
        self._exercises: Dict[str, Dict[str, List[Exercise]]] = {}
        for pool_name in ("regular", "deload"):
            areas = exercises.get(pool_name) or {}
            self._exercises[pool_name] = {
                area: _parse_entries("exercises", entries, Exercise.from_dict)
                for area, entries in areas.items()
            }

        self._rest_activities = _parse_entries(
            "rest_activities", rest_activities.get("activities"), RestDayActivity.from_dict
        )
        self._rest_options = {
            option.id: option
            for option in _parse_entries(
                "rest_activities", rest_activities.get("options"), RestActivityOption.from_dict
            )
        }

        by_goal = supplements.get("by_goal") or {}
        self._goal_supplements = {
            goal: _parse_entries("supplements", entries, SupplementRecommendation.from_dict)
            for goal, entries in by_goal.items()
        }
        self._general_supplements = _parse_entries(
            "supplements", supplements.get("general"), SupplementRecommendation.from_dict
        )

    @classmethod
    def from_config(cls) -> "ReferenceCatalog":
        """Build from the catalogs currently loaded by ConfigService."""
        return cls(
            exercises=ConfigService.get("exercises", {}),
            rest_activities=ConfigService.get("rest_activities", {}),
            supplements=ConfigService.get("supplements", {}),
        )

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------

    def exercise_pool(self, focus_area: str, deload: bool = False) -> List[Exercise]:
        """
        Exercises for a focus area.

        Falls back to the full-body pool when the area has no dedicated entries.
        """
        pools = self._exercises["deload" if deload else "regular"]
        pool = pools.get(focus_area)
        if not pool:
            logger.debug(f"No exercises for focus area '{focus_area}', using full body pool")
            pool = pools.get(FocusArea.FULL_BODY.value, [])
        return list(pool)

    def all_exercises(self, deload: bool = False) -> List[Exercise]:
        """Every exercise of a pool, across focus areas, in catalog order."""
        pools = self._exercises["deload" if deload else "regular"]
        return [exercise for pool in pools.values() for exercise in pool]

    # ------------------------------------------------------------------
    # Rest days
    # ------------------------------------------------------------------

    def rest_day_activities(self) -> List[RestDayActivity]:
        return list(self._rest_activities)

    def rest_activity_option(self, activity_id: str) -> Optional[RestActivityOption]:
        return self._rest_options.get(activity_id)

    # ------------------------------------------------------------------
    # Supplements
    # ------------------------------------------------------------------

    def goal_supplements(self, goal: str) -> List[SupplementRecommendation]:
        return list(self._goal_supplements.get(goal, []))

    def general_supplements(self) -> List[SupplementRecommendation]:
        return list(self._general_supplements)
