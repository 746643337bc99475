"""Routine recommendations from goal, experience, location and fatigue.

Candidates are first filtered for compatibility with the user's level and
training location. When fatigue is high only short routines survive and each
carries a load-reduction hint; otherwise the first few compatible routines
are returned in catalog order.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence

from fitcore.logging_config import get_logger
from fitcore.models import Goal, Level, Location, Profile, Recommendation, RoutineCandidate, WorkoutLogEntry
from fitcore.services.fatigue import detect_fatigue
from fitcore.services.goals import GoalPriorities, analyze_goal, parse_goal

logger = get_logger(__name__)

FATIGUE_THRESHOLD = 5
RECOVERY_MAX_DURATION_MIN = 30
MAX_RECOMMENDATIONS = 3

RECOVERY_REASON = "Recent fatigue detected. This routine is lighter for active recovery."
RECOVERY_ADJUSTMENT = "Reduce loads by 20%"


def level_compatible(routine: RoutineCandidate, level: Level | None) -> bool:
    # beginner routines are always a safe fallback
    return routine.level == Level.BEGINNER or (level is not None and routine.level == level)


def location_compatible(routine: RoutineCandidate, location: Location | None) -> bool:
    if routine.location == Location.EITHER or location == Location.EITHER:
        return True
    return location is not None and routine.location == location


def compatible_routines(profile: Profile, candidates: Sequence[RoutineCandidate]) -> list[RoutineCandidate]:
    return [
        r for r in candidates
        if level_compatible(r, profile.level) and location_compatible(r, profile.location)
    ]


def goal_reason(goal: Goal | str | None, priorities: GoalPriorities) -> str:
    parsed = parse_goal(goal)
    goal_text = parsed.value.replace("_", " ") if parsed is not None else "general fitness"
    return f"Aligned with your goal of {goal_text} (focus: {', '.join(priorities.focus)})"


def recommend(
    profile: Profile,
    candidates: Sequence[RoutineCandidate],
    history: Sequence[WorkoutLogEntry],
    today: dt.date | None = None,
) -> list[Recommendation]:
    priorities = analyze_goal(profile.goal)
    fatigue = detect_fatigue(history, today)
    eligible = compatible_routines(profile, candidates)

    if fatigue > FATIGUE_THRESHOLD:
        short = [
            r for r in eligible
            # a zero duration means the catalog never filled it in
            if r.duration_min and r.duration_min < RECOVERY_MAX_DURATION_MIN
        ]
        logger.debug(
            "recovery_recommendations",
            extra={"ctx_fatigue": fatigue, "ctx_eligible": len(eligible), "ctx_returned": len(short)},
        )
        return [Recommendation(routine=r, reason=RECOVERY_REASON, adjustment=RECOVERY_ADJUSTMENT) for r in short]

    # No per-routine tags exist yet, so catalog order stands in for ranking.
    reason = goal_reason(profile.goal, priorities)
    return [Recommendation(routine=r, reason=reason) for r in eligible[:MAX_RECOMMENDATIONS]]
