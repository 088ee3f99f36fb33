"""
Pytest configuration and fixtures

Every test gets freshly loaded catalogs: ConfigService is reset after each
test, so in-memory overrides never leak between tests.
"""
import pytest
import sys
import os
import random

# Add the parent directory to the path so we can import from services
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from schemas import UserProfile, load_profile
from services.workout_plan.config import ConfigService
from services.workout_plan.catalogs import ReferenceCatalog


@pytest.fixture(autouse=True)
def _reset_catalogs():
    """Reload catalogs from disk for every test."""
    ConfigService.reset()
    yield
    ConfigService.reset()


@pytest.fixture
def profile_data():
    """Raw profile as submitted by the input form (camelCase keys)."""
    return {
        "age": 30,
        "gender": "male",
        "height": 175,
        "weight": 70,
        "fitnessLevel": "beginner",
        "fitnessGoals": "strength",
        "workoutsPerWeek": 3,
        "timePerWorkout": 60,
        "exercisesPerWorkout": 5,
        "focusAreas": "fullBody",
        "sleepWeekday": 7.5,
        "sleepWeekend": 8,
        "supplements": [],
        "restActivities": {},
    }


@pytest.fixture
def profile(profile_data) -> UserProfile:
    return load_profile(profile_data)


@pytest.fixture
def make_profile(profile_data):
    """Build a profile overriding fields of the base profile (snake_case)."""
    def _make(**overrides) -> UserProfile:
        base = load_profile(profile_data).model_dump()
        base.update(overrides)
        return UserProfile.model_validate(base)
    return _make


@pytest.fixture
def rng():
    """Seeded random source for repeatable selections."""
    return random.Random(1234)


@pytest.fixture
def catalog() -> ReferenceCatalog:
    return ReferenceCatalog.from_config()
