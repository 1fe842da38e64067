"""Pizza API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PizzaApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Schema ensured and seeded on startup, before the first request is served

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Run with: uvicorn pizza_api.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pizza_api.api.error_handlers import register_error_handlers
from pizza_api.api.routes import health, pizzas
from pizza_api.config import get_settings
from pizza_api.infrastructure.database import init_db
from pizza_api.infrastructure.observability import setup_logging
from pizza_api.infrastructure.seed import create_db_if_not_exists

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.database_url, echo=settings.database_echo)
    await create_db_if_not_exists(manager, seed=settings.seed_on_startup)
    logger.info("Pizza API started")
    yield
    logger.info("Pizza API shutting down")
    await manager.dispose()


app = FastAPI(title="Pizza API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(pizzas.router)

register_error_handlers(app)
