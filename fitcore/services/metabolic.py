"""Energy expenditure and body composition estimates.

BMR uses the Mifflin-St Jeor equation; TDEE scales it by an activity factor
picked from weekly training days. Every function here treats an incomplete
profile as a normal outcome and returns None (or a "Not computable"
CalorieTarget) instead of raising, so callers can prompt the user to finish
their profile.

Reference: Mifflin et al. (1990), Am J Clin Nutr 51(2):241-247.
"""

from __future__ import annotations

import math
from datetime import date

from fitcore.logging_config import get_logger
from fitcore.models import ActivityLevel, CalorieTarget, Goal, Level, Profile, Sex
from fitcore.services.goals import parse_goal

logger = get_logger(__name__)

MIN_AGE = 10
MAX_AGE = 100
GOAL_CALORIE_OFFSET = 400

_SEX_OFFSETS: dict[Sex, float] = {
    Sex.MALE: 5.0,
    Sex.FEMALE: -161.0,
    Sex.OTHER: (5.0 - 161.0) / 2,
}

# (max training days per week, activity level). Anything above the last
# bound is "Very active".
_ACTIVITY_TABLE: tuple[tuple[int, ActivityLevel], ...] = (
    (1, ActivityLevel("Sedentary", 1.2, "Little or no exercise")),
    (3, ActivityLevel("Light", 1.375, "1-3 days/week")),
    (5, ActivityLevel("Moderate", 1.55, "3-5 days/week")),
    (7, ActivityLevel("Active", 1.725, "6-7 days/week")),
)
_VERY_ACTIVE = ActivityLevel("Very active", 1.9, "Intense daily training")

# goal -> (calorie offset, category, description)
_GOAL_TARGETS: dict[Goal, tuple[int, str, str]] = {
    Goal.MAINTAIN: (0, "Maintenance", "Maintain your current weight"),
    Goal.TONE: (-GOAL_CALORIE_OFFSET, "Moderate deficit", "Moderate fat loss for definition"),
    Goal.BUILD_STRENGTH: (GOAL_CALORIE_OFFSET, "Caloric surplus", "Optimal muscle gain"),
}

NOT_COMPUTABLE = CalorieTarget(
    calories=None,
    category="Not computable",
    description="Complete your profile to calculate your calories",
)
BMI_PLACEHOLDER = "--"


def _sex_offset(sex: Sex | str) -> float:
    # any declared category outside male/female gets the mean offset
    try:
        return _SEX_OFFSETS[Sex(sex)]
    except ValueError:
        return _SEX_OFFSETS[Sex.OTHER]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def age_on(birth_date: date, today: date | None = None) -> int:
    """Whole years elapsed since birth_date, as of today."""
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def _activity_level(days_per_week: int) -> ActivityLevel:
    for max_days, level in _ACTIVITY_TABLE:
        if days_per_week <= max_days:
            return level
    return _VERY_ACTIVE


def activity_factor(days_per_week: int) -> float:
    """Activity multiplier for TDEE. Days per week is authoritative."""
    return _activity_level(days_per_week).factor


def compute_activity_descriptor(level: Level | None, days_per_week: int) -> ActivityLevel:
    """Named activity band for display.

    level is accepted for forward compatibility; it does not change the band.
    """
    return _activity_level(days_per_week)


def compute_resting_expenditure(profile: Profile, today: date | None = None) -> int | None:
    """Basal metabolic rate in kcal/day, or None if the profile is incomplete."""
    weight, height = profile.weight_kg, profile.height_cm
    if not weight or not height or weight <= 0 or height <= 0:
        logger.debug("bmr_not_computable", extra={"ctx_reason": "missing_weight_or_height"})
        return None
    if profile.birth_date is None or not profile.sex:
        logger.debug("bmr_not_computable", extra={"ctx_reason": "missing_birth_date_or_sex"})
        return None

    age = age_on(profile.birth_date, today)
    if age < MIN_AGE or age > MAX_AGE:
        logger.debug("bmr_not_computable", extra={"ctx_reason": "age_out_of_range", "ctx_age": age})
        return None

    bmr = 10 * weight + 6.25 * height - 5 * age + _sex_offset(profile.sex)
    return _round_half_up(bmr)


def compute_daily_expenditure(profile: Profile, today: date | None = None) -> int | None:
    """Total daily energy expenditure (BMR * activity factor)."""
    bmr = compute_resting_expenditure(profile, today)
    if bmr is None:
        return None
    return _round_half_up(bmr * activity_factor(profile.training_days_per_week))


def compute_calorie_target(profile: Profile, today: date | None = None) -> CalorieTarget:
    tdee = compute_daily_expenditure(profile, today)
    if tdee is None:
        return NOT_COMPUTABLE

    goal = parse_goal(profile.goal)
    if goal is None:
        return CalorieTarget(
            calories=tdee,
            category="Maintenance",
            description="Set a goal for a personalised calculation",
        )
    offset, category, description = _GOAL_TARGETS[goal]
    return CalorieTarget(calories=tdee + offset, category=category, description=description)


def compute_body_mass_index(weight_kg: float | None, height_cm: float | None) -> float | None:
    if not weight_kg or not height_cm or weight_kg <= 0 or height_cm <= 0:
        return None
    return weight_kg / ((height_cm / 100) ** 2)


def categorize_body_mass_index(bmi: float | None) -> str:
    if bmi is None:
        return BMI_PLACEHOLDER
    if bmi < 18.5:
        return "underweight"
    if bmi < 25:
        return "normal"
    if bmi < 30:
        return "overweight"
    return "obese"
