from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Literal, Mapping, Optional

from core.exceptions import ProfileValidationError


class RestActivityPreference(BaseModel):
    """User preference for one rest-day activity (keyed by activity id)."""
    type: Optional[str] = None
    selected: bool = False
    min_duration: Optional[int] = Field(default=None, ge=0)
    max_duration: Optional[int] = Field(default=None, ge=0)
    min_distance: Optional[float] = Field(default=None, ge=0)
    max_distance: Optional[float] = Field(default=None, ge=0)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserProfile(BaseModel):
    """
    Personal-fitness profile submitted once per plan generation.

    Ranges match the profile input form. Fitness level, goal and focus area
    stay free strings: the engine maps unrecognized values onto its defaults.
    """
    age: int = Field(ge=16, le=100)
    gender: Literal["male", "female", "other"]
    height: float = Field(ge=100, le=250)  # Height in centimeters
    weight: float = Field(ge=30, le=250)  # Weight in kilograms

    fitness_level: str = "beginner"
    fitness_goals: str = "toning"
    workouts_per_week: int = Field(ge=1, le=7)
    time_per_workout: int = Field(ge=15, le=120)  # Minutes per session
    exercises_per_workout: Optional[int] = Field(default=None, ge=3, le=12)
    focus_areas: str = "fullBody"

    health_conditions: Optional[str] = None
    training_experience: Optional[int] = Field(default=None, ge=0, le=50)  # Years
    preferred_equipment: List[str] = Field(default_factory=list)

    sleep_weekday: float = Field(ge=4, le=12)  # Hours per night
    sleep_weekend: float = Field(ge=4, le=12)
    supplements: List[str] = Field(default_factory=list)
    rest_activities: Dict[str, RestActivityPreference] = Field(default_factory=dict)

    # Optional body circumferences (cm)
    waist_circumference: Optional[float] = Field(default=None, ge=40, le=200)
    hip_circumference: Optional[float] = Field(default=None, ge=40, le=200)
    chest_circumference: Optional[float] = Field(default=None, ge=40, le=200)
    arm_circumference: Optional[float] = Field(default=None, ge=15, le=60)
    thigh_circumference: Optional[float] = Field(default=None, ge=30, le=100)
    calf_circumference: Optional[float] = Field(default=None, ge=20, le=60)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @property
    def selected_rest_activities(self) -> List[str]:
        """Ids of rest activities the user ticked, in declaration order."""
        return [
            activity_id
            for activity_id, preference in self.rest_activities.items()
            if preference.selected
        ]


def load_profile(data: Mapping[str, Any]) -> UserProfile:
    """
    Validate raw profile data (camelCase or snake_case keys).

    Raises:
        ProfileValidationError: first failing field, with a readable message
    """
    try:
        return UserProfile.model_validate(dict(data))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ProfileValidationError(
            detail=f"Invalid profile: {first.get('msg', 'validation failed')}",
            field=field,
        ) from e
