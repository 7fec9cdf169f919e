"""
Service / observability endpoints
=================================

GET /            -- service description and endpoint index (not rate limited)
GET /api/health  -- health check (not rate limited)
GET /api/limits  -- configured rate limits and the caller's IP
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from slowapi.util import get_remote_address

from src.api.middleware import API_LIMIT_SCOPE, API_LIMITS, limiter
from src.api.schemas import (
    HealthResponse,
    LimitsResponse,
    RateLimitInfo,
    ServiceIndexResponse,
)
from src.config import settings

router = APIRouter(tags=["service"])
index_router = APIRouter(tags=["service"])


@index_router.get("/", response_model=ServiceIndexResponse, summary="Service index")
async def index(request: Request):
    return ServiceIndexResponse(
        message=settings.app_name,
        description="Free Islamic reference calculations",
        services={"qibla": "Find prayer direction to Mecca from anywhere"},
        endpoints={
            "qibla": "/api/qibla?lat={latitude}&lng={longitude}",
            "health": "/api/health",
            "limits": "/api/limits",
            "interactive_docs": "/api/docs",
        },
        version=settings.app_version,
    )


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(request: Request):
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        uptime=time.monotonic() - request.app.state.started_at,
        version=settings.app_version,
    )


@router.get("/limits", response_model=LimitsResponse, summary="Rate limit status")
@limiter.shared_limit(API_LIMITS, scope=API_LIMIT_SCOPE)
async def limits(request: Request):
    return LimitsResponse(
        rate_limits={
            "general_api": RateLimitInfo(
                limit=settings.general_rate_limit,
                description="General API usage limit",
            ),
            "calculations": RateLimitInfo(
                limit=settings.calculation_rate_limit,
                description="Qibla calculation specific limit",
            ),
            "hourly_protection": RateLimitInfo(
                limit=settings.hourly_rate_limit,
                description="Hourly abuse protection limit",
            ),
        },
        current_ip=get_remote_address(request),
    )
