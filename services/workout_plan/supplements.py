"""
Supplement recommendations.

Goal-specific suggestions come first, then general ones. Duplicates by name
are dropped (first occurrence wins), supplements the user already takes are
excluded, and the result is stably sorted by priority.
"""

import logging
from typing import List

from schemas import UserProfile

from .catalogs import ReferenceCatalog
from .constants import PRIORITY_RANK, SupplementPriority
from .models import SupplementRecommendation

logger = logging.getLogger(__name__)

# Unknown priorities sort after optional
UNRANKED = len(PRIORITY_RANK)


def priority_rank(priority: str) -> int:
    try:
        return PRIORITY_RANK[SupplementPriority(priority)]
    except ValueError:
        return UNRANKED


def recommend_supplements(profile: UserProfile, catalog: ReferenceCatalog) -> List[SupplementRecommendation]:
    """
    Build the supplement list for a profile.

    A declared supplement matches a catalog entry by id or by name,
    ignoring case.
    """
    goal_specific = catalog.goal_supplements(profile.fitness_goals)
    if not goal_specific:
        logger.warning(f"No goal-specific supplements for goal '{profile.fitness_goals}'")

    taken = {s.strip().lower() for s in profile.supplements if s and s.strip()}

    seen_names = set()
    unique: List[SupplementRecommendation] = []
    for supplement in goal_specific + catalog.general_supplements():
        if supplement.name in seen_names:
            continue
        if supplement.name.lower() in taken or supplement.id.lower() in taken:
            continue
        seen_names.add(supplement.name)
        unique.append(supplement)

    # sorted() is stable: catalog order is kept within a priority tier
    return sorted(unique, key=lambda s: priority_rank(s.priority))
