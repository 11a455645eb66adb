# exercise_tracker/api/users.py

import logging
from typing import List

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from exercise_tracker.api.payload import read_payload
from exercise_tracker.core.errors import DatabaseError, OperationFailure
from exercise_tracker.db import store
from exercise_tracker.models.users import NewUser, UserCreated, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserCreated)
def create_user(payload: dict = Depends(read_payload)) -> UserCreated:
    """
    Create a user with an empty exercise log.
    """
    try:
        new_user = NewUser.model_validate(payload)
        user = store.create_user(new_user.username)
    except (ValidationError, DatabaseError) as e:
        logger.error("Error creating user: %s", e)
        raise OperationFailure("Unable to create user") from e

    return UserCreated(username=user["username"], id=user["id"])


@router.get("", response_model=List[UserOut])
def list_users() -> List[UserOut]:
    """
    Return every user, full log included, in creation order.
    """
    try:
        documents = store.find_all_users()
    except DatabaseError as e:
        logger.error("Error fetching users: %s", e)
        raise OperationFailure("Unable to fetch users") from e

    return [UserOut(id=doc["id"], username=doc["username"], log=doc["log"]) for doc in documents]
