# exercise_tracker/db/store.py
"""
User document operations.

Every function returns user documents shaped as

    {"id": "...", "username": "...", "log": [
        {"description": "...", "duration": 30, "date": "Sun Jan 15 2023"},
        ...
    ]}

with the log in insertion order, or None when the id does not resolve.
"""

from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Connection

from exercise_tracker.db.engine import connection, transaction
from exercise_tracker.db.schema import exercises, new_object_id, users


def _load_documents(conn: Connection, user_rows) -> List[dict]:
    if not user_rows:
        return []

    pks = [row["pk"] for row in user_rows]
    stmt = (
        select(
            exercises.c.user_pk,
            exercises.c.description,
            exercises.c.duration,
            exercises.c.date,
        )
        .where(exercises.c.user_pk.in_(pks))
        .order_by(exercises.c.id)
    )

    logs: Dict[int, List[dict]] = {pk: [] for pk in pks}
    for row in conn.execute(stmt).mappings():
        logs[row["user_pk"]].append(
            {
                "description": row["description"],
                "duration": row["duration"],
                "date": row["date"],
            }
        )

    return [
        {"id": row["id"], "username": row["username"], "log": logs[row["pk"]]}
        for row in user_rows
    ]


def _find_row(conn: Connection, user_id: str):
    stmt = select(users.c.pk, users.c.id, users.c.username).where(users.c.id == user_id)
    return conn.execute(stmt).mappings().first()


def create_user(username: str) -> dict:
    user_id = new_object_id()
    with transaction() as conn:
        conn.execute(users.insert().values(id=user_id, username=username))
    return {"id": user_id, "username": username, "log": []}


def find_all_users() -> List[dict]:
    with connection() as conn:
        stmt = select(users.c.pk, users.c.id, users.c.username).order_by(users.c.pk)
        rows = conn.execute(stmt).mappings().all()
        return _load_documents(conn, rows)


def find_user_by_id(user_id: str) -> Optional[dict]:
    with connection() as conn:
        row = _find_row(conn, user_id)
        if row is None:
            return None
        return _load_documents(conn, [row])[0]


def push_exercise(user_id: str, entry: dict) -> Optional[dict]:
    """
    Append `entry` to the user's log and return the updated document.

    Lookup, insert and read-back share one transaction, so concurrent
    appends to the same user all land.
    """
    with transaction() as conn:
        row = _find_row(conn, user_id)
        if row is None:
            return None

        conn.execute(
            exercises.insert().values(
                user_pk=row["pk"],
                description=entry["description"],
                duration=entry["duration"],
                date=entry["date"],
            )
        )
        return _load_documents(conn, [row])[0]
