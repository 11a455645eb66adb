# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --reload
    python app.py            # listens on $PORT (default 3000)
"""

import logging

import uvicorn

from exercise_tracker.config import get_settings
from exercise_tracker.logging_config import setup_logging
from exercise_tracker.main import app  # re-export FastAPI instance

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Your app is listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
