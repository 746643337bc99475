from __future__ import annotations

import logging
from datetime import date
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from fitapi.rate_limit import generic_rate_limit, profile_update_rate_limit
from fitapi.schemas import (
    ActivityOut,
    BmiOut,
    CalorieTargetOut,
    FatigueOut,
    FatigueRequest,
    NutritionSummaryOut,
    PrioritiesOut,
    ProfileIn,
    ProfilePreviewOut,
    RecommendationOut,
    RecommendationRequest,
    RecommendationsOut,
)
from fitcore.models import Level, Profile
from fitcore.services.fatigue import detect_fatigue
from fitcore.services.goals import analyze_goal
from fitcore.services.metabolic import (
    categorize_body_mass_index,
    compute_activity_descriptor,
    compute_body_mass_index,
    compute_calorie_target,
    compute_daily_expenditure,
    compute_resting_expenditure,
)
from fitcore.services.recommender import recommend
from fitcore.validators import ProfileUpdateInput

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1")


def _bmi_out(weight_kg: Optional[float], height_cm: Optional[float]) -> BmiOut:
    bmi = compute_body_mass_index(weight_kg, height_cm)
    return BmiOut(bmi=round(bmi, 2) if bmi is not None else None, category=categorize_body_mass_index(bmi))


def nutrition_summary(profile: Profile) -> NutritionSummaryOut:
    return NutritionSummaryOut(
        bmr=compute_resting_expenditure(profile),
        tdee=compute_daily_expenditure(profile),
        target=CalorieTargetOut.from_domain(compute_calorie_target(profile)),
        bmi=_bmi_out(profile.weight_kg, profile.height_cm),
        activity=ActivityOut.from_domain(compute_activity_descriptor(profile.level, profile.training_days_per_week)),
    )


@router.post("/nutrition/summary", response_model=NutritionSummaryOut, tags=["nutrition"])
def post_nutrition_summary(body: ProfileIn, _: Annotated[None, Depends(generic_rate_limit)]):
    return nutrition_summary(body.to_domain())


@router.get("/nutrition/activity", response_model=ActivityOut, tags=["nutrition"])
def get_activity(
    days_per_week: int = Query(0, ge=0),
    level: Optional[Level] = Query(None),
):
    return ActivityOut.from_domain(compute_activity_descriptor(level, days_per_week))


@router.get("/nutrition/bmi", response_model=BmiOut, tags=["nutrition"])
def get_bmi(
    weight_kg: Optional[float] = Query(None),
    height_cm: Optional[float] = Query(None),
):
    return _bmi_out(weight_kg, height_cm)


@router.post("/workouts/fatigue", response_model=FatigueOut, tags=["workouts"])
def post_fatigue(body: FatigueRequest):
    return FatigueOut(score=detect_fatigue([h.to_domain() for h in body.history]))


@router.post("/workouts/recommendations", response_model=RecommendationsOut, tags=["workouts"])
def post_recommendations(body: RecommendationRequest, _: Annotated[None, Depends(generic_rate_limit)]):
    profile = body.profile.to_domain()
    history = [h.to_domain() for h in body.history]
    today = date.today()
    priorities = analyze_goal(profile.goal)
    items = recommend(profile, [r.to_domain() for r in body.routines], history, today)
    logger.info(
        "recommendations_served",
        extra={"ctx_candidates": len(body.routines), "ctx_returned": len(items)},
    )
    return RecommendationsOut(
        priorities=PrioritiesOut(focus=list(priorities.focus), intensity=priorities.intensity),
        fatigue_score=detect_fatigue(history, today),
        items=[RecommendationOut.from_domain(r) for r in items],
    )


@router.post("/profile/preview", response_model=ProfilePreviewOut, tags=["profile"])
def post_profile_preview(body: ProfileUpdateInput, _: Annotated[None, Depends(profile_update_rate_limit)]):
    profile = body.to_profile()
    return ProfilePreviewOut(
        profile=ProfileIn(**body.model_dump(exclude={"full_name"})),
        nutrition=nutrition_summary(profile),
    )
