"""
Sleep recommendations.

Order is meaningful: sleep-duration warnings, then goal, age and level
guidance, then the general hygiene tips which always close the list.
"""

from typing import List

from schemas import UserProfile

from .constants import (
    FitnessGoal,
    FitnessLevel,
    MAX_SLEEP_SCHEDULE_GAP_HOURS,
    MIN_RECOMMENDED_SLEEP_HOURS,
)

LOW_WEEKDAY_SLEEP = (
    "You are sleeping less than 7 hours on weeknights, which can compromise your "
    "recovery and results. Try to increase your sleep to 7-9 hours per night."
)
LOW_WEEKEND_SLEEP = (
    "Even on weekends you are sleeping less than recommended. Sleep is crucial for "
    "muscle recovery and anabolic hormones."
)
INCONSISTENT_SLEEP = (
    "There is a large difference between your weekday and weekend sleep. Try to keep "
    "a more consistent pattern to improve sleep quality and recovery."
)

GOAL_SLEEP_TIPS = {
    FitnessGoal.MUSCLE_GAIN: (
        "To maximize muscle gain, prioritize 8-9 hours of sleep per night. Growth "
        "hormone is released mainly during deep sleep.",
        "Suggested routine: go to bed 9 hours before you need to wake up. Keep the "
        "last 30 minutes before sleep screen-free for winding down.",
        "Consider a casein shake before bed to supply amino acids overnight, an "
        "important window for muscle recovery.",
    ),
    FitnessGoal.WEIGHT_LOSS: (
        "Good sleep is essential for weight loss. Sleep deprivation can increase "
        "hunger and lower your metabolism.",
        "Suggested routine: keep consistent sleep and wake times, even on weekends. "
        "Avoid heavy meals within 3 hours of bedtime.",
        "Studies show that sleeping less than 7 hours per night is associated with "
        "more difficulty losing weight and less healthy food choices.",
    ),
    FitnessGoal.ENDURANCE: (
        "To improve endurance, adequate sleep is fundamental for cardiovascular and "
        "muscular recovery.",
        "Suggested routine: prioritize 7-8 hours of quality sleep. Consider a short "
        "nap (20-30 minutes) on your hardest training days.",
        "Sleep quality directly affects how well you recover between sessions and "
        "your aerobic performance.",
    ),
    FitnessGoal.STRENGTH: (
        "Sleep is crucial for strength gains since most neural and muscular recovery "
        "happens during it.",
        "Suggested routine: prioritize 8 hours of sleep per night. Keep your bedroom "
        "cool (18-20°C) to improve deep sleep quality.",
        "Sleep deprivation can significantly reduce your maximal force output and "
        "slow your progress.",
    ),
}

YOUNG_ADULT_TIP = (
    "For young adults, 7-9 hours of sleep are recommended. Even when young, do not "
    "underestimate the importance of sleep for recovery and results."
)
MIDDLE_AGE_TIP = (
    "Between 30 and 50, sleep quality tends to decline naturally. Consider reducing "
    "blue light exposure at night and keeping your bedroom completely dark."
)
OLDER_ADULT_TIP = (
    "After 50 it is common to have more trouble sleeping. Consider relaxation "
    "techniques such as meditation or deep breathing before bed. Avoid alcohol: it "
    "may seem to help you fall asleep but it harms sleep quality."
)

ADVANCED_SLEEP_TIPS = (
    "As an advanced athlete your body needs optimized recovery. Consider tracking "
    "your sleep with an app or device to spot patterns and improve its quality.",
    "Advanced routine: keep consistent sleep cycles, practice deep breathing before "
    "bed, and consider natural aids such as magnesium or chamomile tea if you "
    "struggle to relax.",
)

GENERAL_SLEEP_TIPS = (
    "Establish a consistent sleep routine, going to bed and waking up at the same "
    "times every day.",
    "Avoid caffeine and alcohol in the 4-6 hours before bed.",
    "Create a dark, quiet and cool sleeping environment (ideal temperature between "
    "18-20°C).",
    "Avoid screens (phone, TV, computer) for at least 30-60 minutes before bed, since "
    "blue light suppresses melatonin.",
    "Consider a relaxing pre-sleep routine: reading, light stretching, meditation or "
    "a warm bath can signal your body that it is time to slow down.",
)


def _age_tip(age: int) -> str:
    if age < 30:
        return YOUNG_ADULT_TIP
    elif age < 50:
        return MIDDLE_AGE_TIP
    return OLDER_ADULT_TIP


def generate_sleep_recommendations(profile: UserProfile) -> List[str]:
    """Sleep guidance for a profile. Never empty."""
    recommendations: List[str] = []

    if profile.sleep_weekday < MIN_RECOMMENDED_SLEEP_HOURS:
        recommendations.append(LOW_WEEKDAY_SLEEP)
    if profile.sleep_weekend < MIN_RECOMMENDED_SLEEP_HOURS:
        recommendations.append(LOW_WEEKEND_SLEEP)
    if abs(profile.sleep_weekend - profile.sleep_weekday) > MAX_SLEEP_SCHEDULE_GAP_HOURS:
        recommendations.append(INCONSISTENT_SLEEP)

    try:
        goal = FitnessGoal(profile.fitness_goals)
    except ValueError:
        goal = None
    recommendations.extend(GOAL_SLEEP_TIPS.get(goal, ()))

    recommendations.append(_age_tip(profile.age))

    if profile.fitness_level == FitnessLevel.ADVANCED:
        recommendations.extend(ADVANCED_SLEEP_TIPS)

    recommendations.extend(GENERAL_SLEEP_TIPS)
    return recommendations
