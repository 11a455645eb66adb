# scripts/init_db.py
"""
Drop and recreate the schema at DATABASE_URL.

Usage:
    python -m scripts.init_db
"""

import logging

from exercise_tracker.config import get_settings
from exercise_tracker.db.engine import dispose_db, init_db
from exercise_tracker.db.schema import metadata
from exercise_tracker.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    setup_logging(settings.log_level)

    engine = init_db(settings.database_url)
    if engine is None:
        raise SystemExit(1)

    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created.")
    dispose_db()


if __name__ == "__main__":
    main()
