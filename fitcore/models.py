"""Domain records passed into and returned from the coaching engine.

Everything here is plain data. Callers build these from whatever store they
use; the engine only reads them.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum


class Sex(str, Enum):
    """Biological category used to pick the Mifflin-St Jeor offset."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Goal(str, Enum):
    """Declared fitness goal."""
    MAINTAIN = "maintain"
    TONE = "tone"
    BUILD_STRENGTH = "build_strength"


class Level(str, Enum):
    """Self-reported experience tier, lowest first."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Location(str, Enum):
    """Where a user trains or a routine can be done. EITHER matches both."""
    HOME = "home"
    GYM = "gym"
    EITHER = "either"


@dataclass(frozen=True)
class Profile:
    """Biometric and preference snapshot for one user. None means unset."""
    weight_kg: float | None = None
    height_cm: float | None = None
    birth_date: dt.date | None = None
    sex: Sex | None = None
    goal: Goal | None = None
    level: Level | None = None
    location: Location | None = None
    training_days_per_week: int = 0


@dataclass(frozen=True)
class RoutineCandidate:
    """A catalog routine that may be recommended."""
    id: str
    level: Level
    location: Location
    duration_min: int | None = None
    objective: str | None = None
    name: str = ""
    description: str | None = None


@dataclass(frozen=True)
class WorkoutLogEntry:
    """One completed session from the history feed (most recent first)."""
    date: dt.date | None
    effort: int | None = None       # perceived effort, 1-5
    duration_min: int | None = None
    routine_id: str | None = None
    calories_burned: int | None = None


@dataclass(frozen=True)
class Recommendation:
    routine: RoutineCandidate
    reason: str
    adjustment: str | None = None


@dataclass(frozen=True)
class CalorieTarget:
    """Daily calorie goal. calories is None when the profile is incomplete."""
    calories: int | None
    category: str
    description: str

    @property
    def computable(self) -> bool:
        return self.calories is not None


@dataclass(frozen=True)
class ActivityLevel:
    name: str
    factor: float
    description: str
