"""
Body Metrics Service

Snapshot of body metrics taken when a workout plan is generated:
- BMI = weight_kg / (height_m)², with its category
- Basal metabolic rate (Mifflin-St Jeor)
- Daily calorie needs from weekly training frequency
- Rough body-fat estimate from BMI and age
- Waist-to-hip ratio when both circumferences are known
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from schemas import UserProfile

# Upper bounds (exclusive) of each BMI category
BMI_CATEGORIES = (
    (18.5, "Underweight"),
    (25.0, "Normal weight"),
    (30.0, "Overweight"),
    (35.0, "Obesity Class I"),
    (40.0, "Obesity Class II"),
)
BMI_TOP_CATEGORY = "Obesity Class III"

BODY_FAT_MIN = 5.0
BODY_FAT_MAX = 50.0

CIRCUMFERENCE_FIELDS = (
    "waist_circumference",
    "hip_circumference",
    "chest_circumference",
    "arm_circumference",
    "thigh_circumference",
    "calf_circumference",
)


@dataclass
class BodyMetrics:
    """Body metrics snapshot taken when a plan is generated."""
    bmi: float
    bmi_category: str
    basal_metabolic_rate: int  # kcal/day
    daily_calorie_needs: int  # kcal/day
    body_fat_percentage_estimate: float
    waist_to_hip_ratio: Optional[float] = None
    circumferences: Dict[str, float] = field(default_factory=dict)  # cm, keyed by body part

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bmi": self.bmi,
            "bmi_category": self.bmi_category,
            "basal_metabolic_rate": self.basal_metabolic_rate,
            "daily_calorie_needs": self.daily_calorie_needs,
            "body_fat_percentage_estimate": self.body_fat_percentage_estimate,
            "waist_to_hip_ratio": self.waist_to_hip_ratio,
            "circumferences": dict(self.circumferences),
        }


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate BMI from weight (kg) and height (cm).

    Returns:
        BMI rounded to 2 decimal places

    Examples:
        >>> calculate_bmi(70, 175)
        22.86
    """
    height_m = height_cm / 100.0
    return round(weight_kg / (height_m ** 2), 2)


def bmi_category(bmi: float) -> str:
    for upper, label in BMI_CATEGORIES:
        if bmi < upper:
            return label
    return BMI_TOP_CATEGORY


def calculate_bmr(weight_kg: float, height_cm: float, age: int, gender: str) -> int:
    """
    Basal metabolic rate in kcal/day (Mifflin-St Jeor).

    Men: 10w + 6.25h - 5a + 5. Everyone else uses the -161 offset.
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    offset = 5 if gender == "male" else -161
    return round(base + offset)


def activity_factor(workouts_per_week: int) -> float:
    """Calorie multiplier by weekly training frequency."""
    if workouts_per_week <= 0:
        return 1.2
    elif workouts_per_week <= 2:
        return 1.375
    elif workouts_per_week <= 5:
        return 1.55
    return 1.725


def estimate_body_fat(bmi: float, age: int, gender: str) -> float:
    """
    Body-fat percentage from BMI and age.

    Adult BMI formula, clamped to [5, 50]. Only a rough indication.
    """
    offset = 16.2 if gender == "male" else 5.4
    estimate = 1.2 * bmi + 0.23 * age - offset
    return round(min(max(estimate, BODY_FAT_MIN), BODY_FAT_MAX), 1)


def waist_to_hip_ratio(waist_cm: Optional[float], hip_cm: Optional[float]) -> Optional[float]:
    if not waist_cm or not hip_cm:
        return None
    return round(waist_cm / hip_cm, 2)


def calculate_body_metrics(profile: UserProfile) -> BodyMetrics:
    """Build the body-metrics snapshot for a profile."""
    bmi = calculate_bmi(profile.weight, profile.height)
    bmr = calculate_bmr(profile.weight, profile.height, profile.age, profile.gender)

    circumferences: Dict[str, float] = {}
    for field_name in CIRCUMFERENCE_FIELDS:
        value = getattr(profile, field_name)
        if value is not None:
            circumferences[field_name.replace("_circumference", "")] = value

    return BodyMetrics(
        bmi=bmi,
        bmi_category=bmi_category(bmi),
        basal_metabolic_rate=bmr,
        daily_calorie_needs=round(bmr * activity_factor(profile.workouts_per_week)),
        body_fat_percentage_estimate=estimate_body_fat(bmi, profile.age, profile.gender),
        waist_to_hip_ratio=waist_to_hip_ratio(profile.waist_circumference, profile.hip_circumference),
        circumferences=circumferences,
    )
