# exercise_tracker/api/exercises.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from exercise_tracker.api.payload import read_payload
from exercise_tracker.config import get_settings
from exercise_tracker.core import dates
from exercise_tracker.core.errors import DatabaseError, OperationFailure, UserNotFoundError
from exercise_tracker.core.log_filter import filter_log, normalize_log
from exercise_tracker.db import store
from exercise_tracker.models.exercises import ExerciseAdded, ExerciseLogOut, NewExercise

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["exercises"])


def _build_entry(new_exercise: NewExercise) -> dict:
    if new_exercise.date:
        entry_date = dates.parse_calendar_date(new_exercise.date)
    else:
        entry_date = dates.today(get_settings().timezone)

    return {
        "description": new_exercise.description,
        "duration": dates.parse_duration(new_exercise.duration),
        "date": dates.format_calendar_date(entry_date),
    }


@router.post("/{user_id}/exercises", response_model=ExerciseAdded)
def add_exercise(user_id: str, payload: dict = Depends(read_payload)) -> ExerciseAdded:
    """
    Append an exercise entry to a user's log.

    Returns the user's id and username plus the entry just added.
    """
    try:
        new_exercise = NewExercise.model_validate(payload)
    except ValidationError as e:
        logger.error("Error adding exercise: %s", e)
        raise OperationFailure("Unable to add exercise") from e

    # InvalidInputError (400) propagates for a bad duration or date
    entry = _build_entry(new_exercise)

    try:
        user = store.push_exercise(user_id, entry)
    except DatabaseError as e:
        logger.error("Error adding exercise: %s", e)
        raise OperationFailure("Unable to add exercise") from e

    if user is None:
        raise UserNotFoundError(user_id)

    return ExerciseAdded(
        id=user["id"],
        username=user["username"],
        description=entry["description"],
        duration=entry["duration"],
        date=entry["date"],
    )


@router.get("/{user_id}/logs", response_model=ExerciseLogOut)
def get_exercise_log(
    user_id: str,
    date_from: Optional[str] = Query(
        default=None,
        alias="from",
        description="Earliest entry date to include (e.g. 2023-01-15)",
    ),
    date_to: Optional[str] = Query(
        default=None,
        alias="to",
        description="Latest entry date to include; defaults to today when only 'from' is set",
    ),
    limit: Optional[int] = Query(default=None, ge=1),
) -> ExerciseLogOut:
    """
    Return a user's exercise log, optionally restricted to a date range
    and truncated to the first `limit` entries.
    """
    lower = dates.parse_optional_date(date_from, field="from")
    upper = dates.parse_optional_date(date_to, field="to")

    try:
        user = store.find_user_by_id(user_id)
    except DatabaseError as e:
        logger.error("Error retrieving logs: %s", e)
        raise OperationFailure("Unable to retrieve logs") from e

    if user is None:
        raise UserNotFoundError(user_id)

    log = filter_log(
        normalize_log(user["log"]),
        date_from=lower,
        date_to=upper,
        limit=limit,
        as_of=dates.today(get_settings().timezone),
    )

    return ExerciseLogOut(
        id=user["id"],
        username=user["username"],
        log=log,
        count=len(log),
    )
