# exercise_tracker/db/schema.py

from uuid import uuid4

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    ForeignKey, CheckConstraint, Text
)

metadata = MetaData()


def new_object_id() -> str:
    return uuid4().hex


users = Table(
    "users",
    metadata,
    # pk keeps creation order; id is the opaque identifier clients see
    Column("pk", Integer, primary_key=True, autoincrement=True),
    Column("id", String(32), nullable=False, unique=True, default=new_object_id),
    Column("username", Text, nullable=False),
    CheckConstraint("length(username) > 0", name="ck_users_username_nonempty"),
)

exercises = Table(
    "exercises",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_pk", Integer, ForeignKey("users.pk"), nullable=False, index=True),
    Column("description", Text, nullable=False),
    Column("duration", Integer, nullable=False),
    Column("date", String, nullable=False),
    CheckConstraint("length(description) > 0", name="ck_exercises_description_nonempty"),
)
