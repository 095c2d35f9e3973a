"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .database import create_tables, engine
from .logging_config import setup_logging
from .routers.api import router as api_router

API_VERSION = "1.0.0"

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Employee Management Backend", version=API_VERSION)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)


@app.on_event("startup")
async def on_startup() -> None:
    """Ensure database tables exist."""

    await create_tables(engine)
    logger.info("Record store ready at %s", engine.url.render_as_string(hide_password=True))


@app.get("/", tags=["system"])
async def index() -> dict:
    """Describe the API and where to send operations."""

    return {
        "message": "Employee Management System",
        "version": API_VERSION,
        "endpoints": {"api": "/api"},
    }


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    """Simple readiness probe for uptime checks."""

    return {"status": "ok"}
