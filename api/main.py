"""Main FastAPI application."""

import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api import auth_routes, diet_router, payment_routes, trainer_routes, user_routes, workout_router
from api.error_handlers import register_error_handlers
from config.settings import Settings, settings
from models.store import InMemoryStore
from services.auth_service import AuthService
from utils.helpers import format_response, utcnow
from utils.logger import setup_logger

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    # Startup
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.app_name} ({app_settings.node_env})...")
    if app_settings.seed_demo_user:
        AuthService(app.state.store, app_settings).seed_demo_user()
    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Application shut down")


def create_app(app_settings: Optional[Settings] = None, store: Optional[InMemoryStore] = None) -> FastAPI:
    """Build the app around its own settings and store."""
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="FitPulse fitness tracking API",
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else InMemoryStore()

    logger.info(f"CORS configured with origins: {app_settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """Log method, path, status and duration of every request."""
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {duration_ms:.1f}ms")
        return response

    register_error_handlers(app)

    app.include_router(auth_routes.router)
    app.include_router(user_routes.router)
    app.include_router(workout_router.router)
    app.include_router(diet_router.router)
    app.include_router(payment_routes.router)
    app.include_router(trainer_routes.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return format_response(
            data={"name": app_settings.app_name, "version": app_settings.app_version, "status": "running"},
            message="FitPulse API",
        )

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return format_response(
            data={"status": "healthy", "service": app_settings.app_name, "timestamp": utcnow().isoformat()},
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("api.main:app", host=settings.host, port=settings.port, reload=settings.is_development)
