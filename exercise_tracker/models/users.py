# exercise_tracker/models/users.py

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from exercise_tracker.models.exercises import ExerciseEntryOut


class NewUser(BaseModel):
    username: str


class UserCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(alias="_id")


class UserOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    log: List[ExerciseEntryOut] = []
