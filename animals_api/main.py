"""Animals API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AnimalsApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Exactly one AnimalStore per app, created here and seeded at construction

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Store lives on app.state, not in a module global: routes reach it through
      a dependency, tests reset it through the same object

Run with: uvicorn animals_api.main:app --port 3000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from animals_api.api.error_handlers import register_error_handlers
from animals_api.api.openapi import install_openapi
from animals_api.api.routes import animals, health
from animals_api.config import get_settings
from animals_api.core.animal_store import AnimalStore
from animals_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "Animals API started",
        extra={"store_size": len(app.state.animal_store)},
    )
    yield
    logger.info("Animals API shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.app_title, version=settings.app_version,
    description=settings.app_description, lifespan=lifespan,
)
app.state.animal_store = AnimalStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(animals.router)

register_error_handlers(app)
install_openapi(app)
