"""
Plan entities.

Catalog entities (Exercise, RestDayActivity, RestActivityOption,
SupplementRecommendation) are frozen: the engine derives new values with
dataclasses.replace and never touches the shared catalog objects.
Composite entities (Workout, WorkoutWeek, WorkoutPlan) are built fresh
for every generated plan.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from services.body_metrics import BodyMetrics

Reps = Union[int, str]


@dataclass(frozen=True)
class Exercise:
    """A single exercise prescription."""
    name: str
    description: str
    sets: int
    reps: Reps  # Numeric reps are tuned; text reps ("30 seconds") pass through
    difficulty: str
    target_muscles: Tuple[str, ...] = ()
    rest_between_sets: Optional[int] = None  # Seconds
    equipment: Optional[str] = None
    tempo: Optional[str] = None  # eccentric-pause-concentric-pause, e.g. "3-1-3-0"
    tips: Tuple[str, ...] = ()
    alternatives: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Exercise":
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            sets=int(data["sets"]),
            reps=data["reps"],
            difficulty=data.get("difficulty", "beginner"),
            target_muscles=tuple(data.get("target_muscles") or ()),
            rest_between_sets=data.get("rest_between_sets"),
            equipment=data.get("equipment"),
            tempo=data.get("tempo"),
            tips=tuple(data.get("tips") or ()),
            alternatives=tuple(data.get("alternatives") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "sets": self.sets,
            "reps": self.reps,
            "rest_between_sets": self.rest_between_sets,
            "difficulty": self.difficulty,
            "target_muscles": list(self.target_muscles),
            "equipment": self.equipment,
            "tempo": self.tempo,
            "tips": list(self.tips),
            "alternatives": list(self.alternatives),
        }


@dataclass(frozen=True)
class RestDayActivity:
    """Recovery activity scheduled on a rest day."""
    name: str
    description: str
    duration: int  # Minutes
    intensity: str  # very_light | light | moderate
    benefits: Tuple[str, ...] = ()
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RestDayActivity":
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            duration=int(data["duration"]),
            intensity=data.get("intensity", "light"),
            benefits=tuple(data.get("benefits") or ()),
            notes=data.get("notes"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "duration": self.duration,
            "intensity": self.intensity,
            "benefits": list(self.benefits),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class RestActivityOption:
    """Selectable rest activity with its default bounds."""
    id: str
    label: str
    description: str
    intensity_range: str
    has_duration: bool = True
    has_distance: bool = False
    default_min_duration: Optional[int] = None
    default_max_duration: Optional[int] = None
    default_min_distance: Optional[float] = None
    default_max_distance: Optional[float] = None
    unit: Optional[str] = None
    benefits: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RestActivityOption":
        return cls(
            id=data["id"],
            label=data["label"],
            description=data.get("description", ""),
            intensity_range=data.get("intensity_range", "Light"),
            has_duration=bool(data.get("has_duration", True)),
            has_distance=bool(data.get("has_distance", False)),
            default_min_duration=data.get("default_min_duration"),
            default_max_duration=data.get("default_max_duration"),
            default_min_distance=data.get("default_min_distance"),
            default_max_distance=data.get("default_max_distance"),
            unit=data.get("unit"),
            benefits=tuple(data.get("benefits") or ()),
        )


@dataclass(frozen=True)
class SupplementRecommendation:
    """Supplement suggestion."""
    id: str
    name: str
    description: str
    dosage: str
    timing: str
    priority: str  # essential | recommended | optional
    benefits: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SupplementRecommendation":
        return cls(
            id=data.get("id") or data["name"],
            name=data["name"],
            description=data.get("description", ""),
            dosage=data.get("dosage", ""),
            timing=data.get("timing", ""),
            priority=data.get("priority", "optional"),
            benefits=tuple(data.get("benefits") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "dosage": self.dosage,
            "timing": self.timing,
            "benefits": list(self.benefits),
            "priority": self.priority,
        }


@dataclass
class Workout:
    """One training-day session."""
    name: str
    description: str
    workout_type: str  # strength | cardio | hiit | flexibility | recovery
    split: str  # Focus area trained that day (fullBody, glutes, ...)
    target_muscle_groups: List[str]
    estimated_duration: int  # Minutes
    time_per_exercise: int  # Minutes, display only
    intensity: str  # light | moderate | high | deload
    warmup: List[str]
    exercises: List[Exercise]
    cooldown: List[str]
    notes: str
    day_of_week: int  # 0 = Monday

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "type": self.workout_type,
            "split": self.split,
            "target_muscle_groups": list(self.target_muscle_groups),
            "estimated_duration": self.estimated_duration,
            "time_per_exercise": self.time_per_exercise,
            "intensity": self.intensity,
            "warmup": list(self.warmup),
            "exercises": [e.to_dict() for e in self.exercises],
            "cooldown": list(self.cooldown),
            "notes": self.notes,
            "day_of_week": self.day_of_week,
        }


@dataclass
class WorkoutWeek:
    """A single week of the plan."""
    week_number: int
    focus: str
    description: str
    is_deload_week: bool
    workouts: List[Workout]
    rest_days: int
    rest_day_activities: List[RestDayActivity]

    @property
    def training_days(self) -> int:
        return len(self.workouts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "week_number": self.week_number,
            "focus": self.focus,
            "description": self.description,
            "is_deload_week": self.is_deload_week,
            "workouts": [w.to_dict() for w in self.workouts],
            "rest_days": self.rest_days,
            "rest_day_activities": [a.to_dict() for a in self.rest_day_activities],
        }


@dataclass
class WorkoutPlan:
    """Complete generated workout plan."""

    # Identification
    name: str
    description: str

    # Schedule
    days_per_week: int
    rest_days: int
    focus_area: str
    fitness_level: str
    total_weeks: int
    current_week: int

    # Structure
    weeks: List[WorkoutWeek]

    # Recommendations
    body_metrics: Optional[BodyMetrics]
    supplement_recommendations: List[SupplementRecommendation]
    sleep_recommendations: List[str]
    notes: str

    def get_week(self, week_num: int) -> Optional[WorkoutWeek]:
        """Get a specific week by number."""
        for week in self.weeks:
            if week.week_number == week_num:
                return week
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "days_per_week": self.days_per_week,
            "rest_days": self.rest_days,
            "focus_area": self.focus_area,
            "fitness_level": self.fitness_level,
            "total_weeks": self.total_weeks,
            "current_week": self.current_week,
            "weeks": [w.to_dict() for w in self.weeks],
            "body_metrics": self.body_metrics.to_dict() if self.body_metrics else None,
            "supplement_recommendations": [
                s.to_dict() for s in self.supplement_recommendations
            ],
            "sleep_recommendations": list(self.sleep_recommendations),
            "notes": self.notes,
        }
