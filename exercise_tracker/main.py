# exercise_tracker/main.py

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.exercises import router as exercises_router
from exercise_tracker.api.users import router as users_router
from exercise_tracker.config import get_settings
from exercise_tracker.db.engine import dispose_db, init_db, ping
from exercise_tracker.logging_config import setup_logging

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
VIEWS_DIR = PACKAGE_DIR / "views"
PUBLIC_DIR = PACKAGE_DIR / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level)
    init_db(settings.database_url)
    yield
    dispose_db()


app = FastAPI(
    title="Exercise Tracker API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/", include_in_schema=False)
def homepage():
    return FileResponse(VIEWS_DIR / "index.html")


@app.get("/health")
def health_check():
    return {"status": "ok", "database": "connected" if ping() else "unavailable"}


app.include_router(users_router)
app.include_router(exercises_router)

app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")
