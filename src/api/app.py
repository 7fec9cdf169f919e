"""
FastAPI application factory.

* Registers the Qibla and service routes under ``/api``.
* Applies per-IP rate limiting (slowapi) and open, GET-only CORS.
* Logs every request and flags automated-looking or rapid-fire clients.
* Swagger / OpenAPI UI available at ``/api/docs``.
"""

from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter, monitor_requests
from src.api.routes import qibla, service
from src.config import settings

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s %s started", settings.app_name, settings.app_version)
    yield
    logger.info("%s stopped", settings.app_name)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Read-only Islamic reference calculations.  Returns the Qibla "
            "bearing, compass direction and great-circle distance to the "
            "Kaaba from any point on Earth."
        ),
        version=settings.app_version,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.started_at = time.monotonic()

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET"],
        allow_headers=["Content-Type", "Authorization"],
    )
    if settings.monitor_requests:
        app.middleware("http")(monitor_requests)

    # Routers
    app.include_router(service.index_router)
    app.include_router(service.router, prefix="/api")
    app.include_router(qibla.router, prefix="/api")

    return app
