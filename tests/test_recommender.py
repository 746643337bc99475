"""Tests for routine filtering and recommendation."""

from __future__ import annotations

from datetime import date, timedelta

from fitcore.models import Goal, Level, Location, Profile, RoutineCandidate, WorkoutLogEntry
from fitcore.services.recommender import (
    RECOVERY_ADJUSTMENT,
    compatible_routines,
    level_compatible,
    location_compatible,
    recommend,
)

TODAY = date(2026, 10, 19)

PROFILE = Profile(goal=Goal.BUILD_STRENGTH, level=Level.INTERMEDIATE, location=Location.GYM, training_days_per_week=4)

CATALOG = [
    RoutineCandidate(id="r1", level=Level.BEGINNER, location=Location.HOME, duration_min=20),
    RoutineCandidate(id="r2", level=Level.INTERMEDIATE, location=Location.GYM, duration_min=60),
    RoutineCandidate(id="r3", level=Level.ADVANCED, location=Location.GYM, duration_min=15),
    RoutineCandidate(id="r4", level=Level.BEGINNER, location=Location.EITHER, duration_min=25),
    RoutineCandidate(id="r5", level=Level.INTERMEDIATE, location=Location.EITHER, duration_min=None),
    RoutineCandidate(id="r6", level=Level.BEGINNER, location=Location.GYM, duration_min=30),
    RoutineCandidate(id="r7", level=Level.INTERMEDIATE, location=Location.GYM, duration_min=10),
]

TRAINED_TODAY = [WorkoutLogEntry(date=TODAY, effort=4, duration_min=50)]
RESTED = [WorkoutLogEntry(date=TODAY - timedelta(days=2), effort=4)]


def _ids(recs):
    return [r.routine.id for r in recs]


def test_level_compatibility():
    assert level_compatible(CATALOG[0], Level.ADVANCED)
    assert level_compatible(CATALOG[1], Level.INTERMEDIATE)
    assert not level_compatible(CATALOG[2], Level.INTERMEDIATE)
    assert not level_compatible(CATALOG[1], None)
    assert level_compatible(CATALOG[0], None)


def test_location_compatibility():
    assert location_compatible(CATALOG[1], Location.GYM)
    assert not location_compatible(CATALOG[0], Location.GYM)
    assert location_compatible(CATALOG[0], Location.EITHER)
    assert location_compatible(CATALOG[3], Location.HOME)
    assert location_compatible(CATALOG[3], None)
    assert not location_compatible(CATALOG[1], None)


def test_compatible_routines_filter():
    assert [r.id for r in compatible_routines(PROFILE, CATALOG)] == ["r2", "r4", "r5", "r6", "r7"]


def test_normal_path_first_three_in_catalog_order():
    recs = recommend(PROFILE, CATALOG, RESTED, today=TODAY)
    assert _ids(recs) == ["r2", "r4", "r5"]
    for rec in recs:
        assert rec.adjustment is None
        assert "build strength" in rec.reason


def test_normal_path_empty_history():
    recs = recommend(PROFILE, CATALOG, [], today=TODAY)
    assert len(recs) == 3


def test_unset_goal_reason():
    recs = recommend(Profile(level=Level.BEGINNER, location=Location.HOME), CATALOG, [], today=TODAY)
    assert _ids(recs) == ["r1", "r4"]
    assert all("general fitness" in r.reason for r in recs)


def test_fatigue_path_short_routines_only():
    recs = recommend(PROFILE, CATALOG, TRAINED_TODAY, today=TODAY)
    assert _ids(recs) == ["r4", "r7"]
    for rec in recs:
        assert rec.routine.duration_min is not None
        assert rec.routine.duration_min < 30
        assert rec.adjustment == RECOVERY_ADJUSTMENT


def test_fatigue_path_not_capped():
    catalog = [
        RoutineCandidate(id=f"s{i}", level=Level.BEGINNER, location=Location.EITHER, duration_min=15)
        for i in range(5)
    ]
    recs = recommend(PROFILE, catalog, TRAINED_TODAY, today=TODAY)
    assert len(recs) == 5


def test_residual_fatigue_triggers_recovery():
    history = [WorkoutLogEntry(date=TODAY - timedelta(days=1), effort=1)]
    recs = recommend(PROFILE, CATALOG, history, today=TODAY)
    assert all(r.adjustment for r in recs)


def test_never_returns_incompatible():
    for history in ([], TRAINED_TODAY, RESTED):
        for rec in recommend(PROFILE, CATALOG, history, today=TODAY):
            assert rec.routine.level in (Level.BEGINNER, PROFILE.level)
            assert rec.routine.location in (Location.EITHER, PROFILE.location)


def test_empty_catalog():
    assert recommend(PROFILE, [], RESTED, today=TODAY) == []
    assert recommend(PROFILE, [], TRAINED_TODAY, today=TODAY) == []


def test_raw_goal_tag_in_reason():
    profile = Profile(goal="tone", level=Level.BEGINNER, location=Location.HOME)
    recs = recommend(profile, CATALOG, [], today=TODAY)
    assert _ids(recs) == ["r1", "r4"]
    assert all("tone" in r.reason for r in recs)


def test_unknown_goal_falls_back_to_general_fitness():
    profile = Profile(goal="marathon", level=Level.BEGINNER, location=Location.HOME)
    recs = recommend(profile, CATALOG, [], today=TODAY)
    assert len(recs) == 2
    assert all("general fitness" in r.reason and "full_body" in r.reason for r in recs)


def test_fatigue_path_drops_zero_duration():
    catalog = [
        RoutineCandidate(id="z", level=Level.BEGINNER, location=Location.EITHER, duration_min=0),
        RoutineCandidate(id="s", level=Level.BEGINNER, location=Location.EITHER, duration_min=15),
    ]
    assert _ids(recommend(PROFILE, catalog, TRAINED_TODAY, today=TODAY)) == ["s"]
