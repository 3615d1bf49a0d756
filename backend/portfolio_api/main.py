import logging
import sqlite3
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio_api.config import settings
from portfolio_api.database import init_db
from portfolio_api.routers import profile, projects, skills, work_experience, search

logger = logging.getLogger("portfolio_api")

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create schema (idempotent) and integrity-check the database
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    try:
        init_db(settings.db_path)
        conn = sqlite3.connect(str(settings.db_path))
        result = conn.execute("PRAGMA integrity_check").fetchone()
        conn.close()
        if result and result[0] == "ok":
            logger.info("Database ready at %s, integrity check passed.", settings.db_path)
        else:
            logger.error("DATABASE INTEGRITY CHECK FAILED: %s", result)
    except sqlite3.Error as exc:
        logger.error("Could not initialise database at %s: %s", settings.db_path, exc)
    yield


app = FastAPI(
    title="Portfolio API",
    description="Profile, projects, skills and work experience with cross-entity search",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(profile.router, prefix=settings.api_prefix)
app.include_router(projects.router, prefix=settings.api_prefix)
app.include_router(skills.router, prefix=settings.api_prefix)
app.include_router(work_experience.router, prefix=settings.api_prefix)
app.include_router(search.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "version": VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Registered last so API routes take precedence over the frontend.
if settings.static_dir is not None and settings.static_dir.is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="frontend")


def run():
    import uvicorn

    uvicorn.run("portfolio_api.main:app", host=settings.host, port=settings.port)
