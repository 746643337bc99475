from __future__ import annotations

from datetime import date as dt_date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fitcore.models import (
    ActivityLevel,
    CalorieTarget,
    Goal,
    Level,
    Location,
    Profile,
    Recommendation,
    RoutineCandidate,
    Sex,
    WorkoutLogEntry,
)


class ProfileIn(BaseModel):
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    birth_date: Optional[dt_date] = None
    sex: Optional[Sex] = None
    goal: Optional[Goal] = None
    level: Optional[Level] = None
    location: Optional[Location] = None
    training_days_per_week: int = Field(default=0, ge=0)

    def to_domain(self) -> Profile:
        return Profile(**self.model_dump())


class RoutineIn(BaseModel):
    id: str
    name: str = ""
    description: Optional[str] = None
    level: Level
    location: Location
    duration_min: Optional[int] = Field(default=None, ge=0)
    objective: Optional[str] = None

    def to_domain(self) -> RoutineCandidate:
        return RoutineCandidate(**self.model_dump())


class WorkoutLogIn(BaseModel):
    date: Optional[dt_date] = None
    effort: Optional[int] = Field(default=None, ge=1, le=5)
    duration_min: Optional[int] = Field(default=None, ge=0)
    routine_id: Optional[str] = None
    calories_burned: Optional[int] = Field(default=None, ge=0)

    def to_domain(self) -> WorkoutLogEntry:
        return WorkoutLogEntry(**self.model_dump())


class FatigueRequest(BaseModel):
    history: list[WorkoutLogIn] = Field(default_factory=list)


class FatigueOut(BaseModel):
    score: int


class RecommendationRequest(BaseModel):
    profile: ProfileIn
    routines: list[RoutineIn] = Field(default_factory=list)
    history: list[WorkoutLogIn] = Field(default_factory=list)


class RoutineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str] = None
    level: Level
    location: Location
    duration_min: Optional[int] = None
    objective: Optional[str] = None


class RecommendationOut(BaseModel):
    routine: RoutineOut
    reason: str
    adjustment: Optional[str] = None

    @classmethod
    def from_domain(cls, rec: Recommendation) -> "RecommendationOut":
        return cls(routine=RoutineOut.model_validate(rec.routine), reason=rec.reason, adjustment=rec.adjustment)


class PrioritiesOut(BaseModel):
    focus: list[str]
    intensity: str


class RecommendationsOut(BaseModel):
    priorities: PrioritiesOut
    fatigue_score: int
    items: list[RecommendationOut]


class ActivityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    factor: float
    description: str

    @classmethod
    def from_domain(cls, level: ActivityLevel) -> "ActivityOut":
        return cls.model_validate(level)


class CalorieTargetOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    calories: Optional[int] = None
    category: str
    description: str

    @classmethod
    def from_domain(cls, target: CalorieTarget) -> "CalorieTargetOut":
        return cls.model_validate(target)


class BmiOut(BaseModel):
    bmi: Optional[float] = None
    category: str


class NutritionSummaryOut(BaseModel):
    bmr: Optional[int] = None
    tdee: Optional[int] = None
    target: CalorieTargetOut
    bmi: BmiOut
    activity: ActivityOut


class ProfilePreviewOut(BaseModel):
    profile: ProfileIn
    nutrition: NutritionSummaryOut
