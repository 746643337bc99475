from __future__ import annotations

from dataclasses import dataclass

from fitcore.models import Goal


@dataclass(frozen=True)
class GoalPriorities:
    focus: tuple[str, ...]
    intensity: str   # "low", "medium", "high", "very_high"


GOAL_PRIORITIES: dict[Goal, GoalPriorities] = {
    Goal.MAINTAIN: GoalPriorities(focus=("cardio", "full_body"), intensity="medium"),
    Goal.TONE: GoalPriorities(focus=("full_body", "hiit", "legs"), intensity="high"),
    Goal.BUILD_STRENGTH: GoalPriorities(focus=("chest", "back", "legs", "strength"), intensity="very_high"),
}

GENERAL_FITNESS = GoalPriorities(focus=("full_body",), intensity="low")


def parse_goal(goal: Goal | str | None) -> Goal | None:
    """Goal for a raw tag, or None when unset or not a known goal."""
    if goal is None:
        return None
    try:
        return Goal(goal)
    except ValueError:
        return None


def analyze_goal(goal: Goal | str | None) -> GoalPriorities:
    """Focus areas and target intensity for a declared goal.

    Unset or unknown goals fall back to low-intensity general fitness.
    """
    parsed = parse_goal(goal)
    if parsed is None:
        return GENERAL_FITNESS
    return GOAL_PRIORITIES[parsed]
