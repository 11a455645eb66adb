# exercise_tracker/models/exercises.py

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NewExercise(BaseModel):
    description: str
    # Coerced by parse_duration, which rejects values with no integer prefix
    duration: Any = Field(...)
    date: Optional[str] = None


class ExerciseEntryOut(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseAdded(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    description: str
    duration: int
    date: str


class ExerciseLogOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    log: List[ExerciseEntryOut]
    count: int
