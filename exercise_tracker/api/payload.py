# exercise_tracker/api/payload.py

import json

from fastapi import Request


async def read_payload(request: Request) -> dict:
    """
    Request body as a plain dict, from either a JSON document or an
    HTML form post. Anything else (including an empty body) is {}.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        body = await request.body()
        if not body:
            return {}
        try:
            data = json.loads(body)
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    if content_type.startswith(
        ("application/x-www-form-urlencoded", "multipart/form-data")
    ):
        form = await request.form()
        return {key: value for key, value in form.items()}

    return {}
