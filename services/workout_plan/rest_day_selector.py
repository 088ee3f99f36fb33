"""
Rest-Day Activity Selector

Fills a week's rest days with recovery activities.

Two modes:
- Default: no rest activities selected on the profile. Activities come
  from the catalog, filtered for the deload week or the goal.
- Personalized: the user selected activities. Days get either a
  combination session (cardio combo, recovery session, or a cardio +
  recovery pairing) or a single selected activity with sampled duration
  and distance.

Usage:
    selector = RestDaySelector(catalog, rng)
    activities = selector.select(profile, rest_days=4, is_deload=False)
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from schemas import RestActivityPreference, UserProfile

from .catalogs import ReferenceCatalog
from .constants import (
    CARDIO_ACTIVITY_IDS,
    DEFAULT_REST_ACTIVITY_MINUTES,
    FitnessGoal,
    Intensity,
    RECOVERY_ACTIVITY_IDS,
    RECOVERY_BENEFIT_KEYWORD,
    REST_COMBINATION_RULES,
    SIMILAR_ACTIVITY_GROUPS,
    SIMILARITY_LOOKBACK_DAYS,
    WEIGHT_LOSS_MIN_REST_MINUTES,
)
from .models import RestActivityOption, RestDayActivity

logger = logging.getLogger(__name__)

RULES = REST_COMBINATION_RULES

CARDIO_COMBO_BENEFITS = (
    "Varied active recovery",
    "Light cardiovascular work",
    "Stimulus for different muscle groups",
    "Less monotony",
)
RECOVERY_SESSION_BENEFITS = (
    "Deep muscle recovery",
    "Improved flexibility",
    "Stress reduction",
    "Readiness for upcoming workouts",
)
PAIRING_BENEFITS = (
    "Active recovery",
    "Improved circulation",
    "Reduced muscle tension",
    "Balance between activity and recovery",
)


def are_similar_activities(first: str, second: str) -> bool:
    """True when both ids belong to the same similarity group."""
    return any(first in group and second in group for group in SIMILAR_ACTIVITY_GROUPS)


def _bounds(low, high, default_low, default_high) -> Optional[Tuple]:
    if low is not None and high is not None:
        return (low, high) if low <= high else (high, low)
    if default_low is not None and default_high is not None:
        return (default_low, default_high) if default_low <= default_high else (default_high, default_low)
    return None


class RestDaySelector:
    """Select one recovery activity per rest day."""

    def __init__(self, catalog: ReferenceCatalog, rng: random.Random):
        self.catalog = catalog
        self.rng = rng

    def select(self, profile: UserProfile, rest_days: int, is_deload: bool) -> List[RestDayActivity]:
        """
        Rest-day activities for one week.

        Returns at most `rest_days` activities. Personalized selections whose
        id is missing from the option catalog leave their day out.
        """
        if rest_days <= 0:
            return []

        selected = profile.selected_rest_activities
        if not selected:
            return self.select_defaults(profile.fitness_goals, rest_days, is_deload)
        return self.select_personalized(selected, profile.rest_activities, rest_days)

    # ------------------------------------------------------------------
    # Default mode
    # ------------------------------------------------------------------

    def select_defaults(self, goal: str, rest_days: int, is_deload: bool) -> List[RestDayActivity]:
        shuffled = self.catalog.rest_day_activities()
        self.rng.shuffle(shuffled)

        if is_deload:
            chosen = [a for a in shuffled if a.intensity == Intensity.VERY_LIGHT]
        elif goal == FitnessGoal.WEIGHT_LOSS:
            chosen = [
                a for a in shuffled
                if a.intensity == Intensity.LIGHT and a.duration >= WEIGHT_LOSS_MIN_REST_MINUTES
            ]
        elif goal == FitnessGoal.MUSCLE_GAIN:
            chosen = [
                a for a in shuffled
                if a.intensity == Intensity.VERY_LIGHT
                and any(RECOVERY_BENEFIT_KEYWORD in b.lower() for b in a.benefits)
            ]
        else:
            chosen = list(shuffled)
        chosen = chosen[:rest_days]

        # Top up from the rest of the shuffled catalog
        if len(chosen) < rest_days:
            remaining = [a for a in shuffled if a not in chosen]
            chosen.extend(remaining[:rest_days - len(chosen)])

        return chosen

    # ------------------------------------------------------------------
    # Personalized mode
    # ------------------------------------------------------------------

    def select_personalized(
        self,
        selected: Sequence[str],
        preferences: dict,
        rest_days: int,
    ) -> List[RestDayActivity]:
        known = [i for i in selected if self.catalog.rest_activity_option(i) is not None]
        cardio = [i for i in known if i in CARDIO_ACTIVITY_IDS]
        recovery = [i for i in known if i in RECOVERY_ACTIVITY_IDS]

        activities: List[RestDayActivity] = []
        # Activity id used on each rest day so far; None for combinations and skipped days
        history: List[Optional[str]] = []

        for day in range(rest_days):
            combination = None
            if len(selected) >= RULES["min_selected"] and self.rng.random() > RULES["combination_threshold"]:
                combination = self._build_combination(cardio, recovery)

            if combination is not None:
                activities.append(combination)
                history.append(None)
                continue

            activity_id = self._pick_single(selected, day, history)
            option = self.catalog.rest_activity_option(activity_id)
            if option is None:
                logger.warning(f"Rest activity '{activity_id}' not in catalog, day left empty")
                history.append(None)
                continue

            preference = preferences.get(activity_id) or RestActivityPreference()
            activities.append(self._build_single(option, preference))
            history.append(activity_id)

        return activities

    def _build_combination(self, cardio: List[str], recovery: List[str]) -> Optional[RestDayActivity]:
        if len(cardio) >= 2 and self.rng.random() > RULES["cardio_threshold"]:
            return self._cardio_combo(cardio)
        if len(recovery) >= 2:
            return self._recovery_session(recovery)
        if cardio and recovery:
            return self._pairing(cardio, recovery)
        return None

    def _labels(self, activity_ids: Sequence[str]) -> List[str]:
        return [self.catalog.rest_activity_option(i).label for i in activity_ids]

    def _cardio_combo(self, cardio: List[str]) -> RestDayActivity:
        picks = list(cardio)
        self.rng.shuffle(picks)
        picks = picks[:RULES["max_parts"]]
        names = self._labels(picks)

        total = min(RULES["cardio_max_minutes"], RULES["cardio_minutes_per_part"] * len(picks))
        per_activity = total // len(picks)
        is_triathlon = len(picks) >= 3

        summary = (
            "Light mini-triathlon: a combination of low-intensity cardio activities"
            if is_triathlon
            else "Combination of light cardio activities"
        )
        return RestDayActivity(
            name="Mini-Triathlon" if is_triathlon else f"Combo: {' + '.join(names)}",
            description=f"{summary}. Do {per_activity} minutes of each activity in sequence.",
            duration=total,
            intensity=Intensity.LIGHT.value,
            benefits=CARDIO_COMBO_BENEFITS,
            notes=(
                "Keep the intensity low in every activity. This is a recovery day, "
                f"not a training day. Suggested order: {' -> '.join(names)}."
            ),
        )

    def _recovery_session(self, recovery: List[str]) -> RestDayActivity:
        picks = list(recovery)
        self.rng.shuffle(picks)
        picks = picks[:RULES["max_parts"]]
        names = self._labels(picks)

        total = min(RULES["recovery_max_minutes"], RULES["recovery_minutes_per_part"] * len(picks))
        per_activity = total // len(picks)
        return RestDayActivity(
            name="Complete Recovery Session",
            description=(
                "Combination of recovery and mobility activities. "
                f"Spend {per_activity} minutes on each activity."
            ),
            duration=total,
            intensity=Intensity.VERY_LIGHT.value,
            benefits=RECOVERY_SESSION_BENEFITS,
            notes=(
                "Focus on the quality of each movement and on deep breathing. "
                f"Suggested sequence: {' -> '.join(names)}."
            ),
        )

    def _pairing(self, cardio: List[str], recovery: List[str]) -> RestDayActivity:
        cardio_name = self.catalog.rest_activity_option(self.rng.choice(cardio)).label
        recovery_name = self.catalog.rest_activity_option(self.rng.choice(recovery)).label
        return RestDayActivity(
            name=f"{cardio_name} + {recovery_name}",
            description="Light cardio followed by active recovery.",
            duration=RULES["pairing_minutes"],
            intensity=Intensity.LIGHT.value,
            benefits=PAIRING_BENEFITS,
            notes=(
                f"Start with 20-25 minutes of {cardio_name} at a light intensity, "
                f"followed by 15-20 minutes of {recovery_name}. Ideal for a complete recovery."
            ),
        )

    def _pick_single(self, selected: Sequence[str], day: int, history: List[Optional[str]]) -> str:
        """
        Round-robin over the selection, swapping out an activity similar to
        one used in the previous two rest days when a dissimilar one exists.
        """
        activity_id = selected[day % len(selected)]
        recent = [i for i in history[-SIMILARITY_LOOKBACK_DAYS:] if i is not None]

        if len(selected) > 1 and any(are_similar_activities(activity_id, r) for r in recent):
            alternatives = [
                i for i in selected
                if not any(are_similar_activities(i, r) for r in recent)
            ]
            if alternatives:
                return self.rng.choice(alternatives)
        return activity_id

    def _build_single(self, option: RestActivityOption, preference: RestActivityPreference) -> RestDayActivity:
        duration_bounds = _bounds(
            preference.min_duration, preference.max_duration,
            option.default_min_duration, option.default_max_duration,
        )
        duration = (
            self.rng.randint(int(duration_bounds[0]), int(duration_bounds[1]))
            if duration_bounds
            else DEFAULT_REST_ACTIVITY_MINUTES
        )

        distance_text = ""
        if option.has_distance:
            distance_bounds = _bounds(
                preference.min_distance, preference.max_distance,
                option.default_min_distance, option.default_max_distance,
            )
            if distance_bounds:
                distance = round(self.rng.uniform(*distance_bounds), 1)
                distance_text = f" ({distance} {option.unit or 'km'})"

        intensity_range = option.intensity_range.lower()
        intensity = (
            Intensity.VERY_LIGHT.value if "very light" in intensity_range else Intensity.LIGHT.value
        )

        return RestDayActivity(
            name=option.label,
            description=f"{option.description}{distance_text}",
            duration=duration,
            intensity=intensity,
            benefits=option.benefits,
            notes=(
                f"Keep the intensity {intensity_range} to ensure proper recovery. "
                "This activity was personalized from your preferences."
            ),
        )
