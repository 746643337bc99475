"""Recovery-state heuristic from the most recent logged workout.

Only the first entry of the (most-recent-first) history is inspected. The
score gates which routines the recommender is allowed to suggest:

    10  already trained today
     7  trained yesterday and rated it hard (effort <= 2)
    -5  more than 3 days since the last session; encourage resuming
     0  anything else, including empty or unusable history
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence

from fitcore.logging_config import get_logger
from fitcore.models import WorkoutLogEntry

logger = get_logger(__name__)

TRAINED_TODAY = 10
RESIDUAL_FATIGUE = 7
NEUTRAL = 0
DECONDITIONING = -5

DEFAULT_EFFORT = 3
LOW_EFFORT_MAX = 2
REST_DAYS_BEFORE_DECONDITIONING = 3


def days_since(entry_date: dt.date | dt.datetime, today: dt.date) -> int:
    if isinstance(entry_date, dt.datetime):
        entry_date = entry_date.date()
    return (today - entry_date).days


def detect_fatigue(history: Sequence[WorkoutLogEntry], today: dt.date | None = None) -> int:
    if not history:
        return NEUTRAL

    last = history[0]
    if last.date is None:
        return NEUTRAL

    today = today or dt.date.today()
    diff = days_since(last.date, today)
    effort = last.effort if last.effort is not None else DEFAULT_EFFORT

    if diff == 0:
        score = TRAINED_TODAY
    elif diff == 1 and effort <= LOW_EFFORT_MAX:
        score = RESIDUAL_FATIGUE
    elif diff > REST_DAYS_BEFORE_DECONDITIONING:
        score = DECONDITIONING
    else:
        score = NEUTRAL

    logger.debug("fatigue_detected", extra={"ctx_days_since": diff, "ctx_effort": effort, "ctx_score": score})
    return score
