"""Pydantic validation for the profile update form."""

from __future__ import annotations

import math
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from fitcore.models import Goal, Level, Location, Profile, Sex

MAX_TRAINING_DAYS = 14


class ProfileUpdateInput(BaseModel):
    full_name: Optional[str] = Field(default=None, max_length=120)
    sex: Optional[Sex] = None
    birth_date: Optional[date] = None
    goal: Optional[Goal] = None
    level: Optional[Level] = None
    location: Optional[Location] = None
    weight_kg: Optional[float] = Field(default=None, gt=0, le=500)
    height_cm: Optional[float] = Field(default=None, gt=0, le=300)
    training_days_per_week: int = Field(default=0, ge=0, le=MAX_TRAINING_DAYS)

    @field_validator("full_name", "sex", "goal", "level", "location", "birth_date", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("weight_kg", "height_cm", mode="before")
    @classmethod
    def blank_number_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("training_days_per_week", mode="before")
    @classmethod
    def floor_days(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return 0
        if isinstance(v, (int, float, str)):
            days = float(v)
            if not math.isfinite(days):
                raise ValueError("training_days_per_week must be a finite number")
            return math.floor(days)
        return v

    @field_validator("birth_date")
    @classmethod
    def reasonable_birth_date(cls, v):
        if v is None:
            return v
        if v >= date.today():
            raise ValueError("birth_date must be in the past")
        if v < date(1900, 1, 1):
            raise ValueError("birth_date must be after 1900")
        return v

    def to_profile(self) -> Profile:
        return Profile(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            birth_date=self.birth_date,
            sex=self.sex,
            goal=self.goal,
            level=self.level,
            location=self.location,
            training_days_per_week=self.training_days_per_week,
        )
