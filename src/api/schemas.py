"""Pydantic response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    latitude: float
    longitude: float


# ── Qibla ─────────────────────────────────────────────────────────────


class QiblaData(BaseModel):
    qibla_direction: float = Field(
        ..., ge=0, le=360, description="Bearing to the Kaaba, degrees from true north."
    )
    compass_bearing: str = Field(..., description="Nearest of the 16 compass points.")
    location: Coordinates
    kaaba_coordinates: Coordinates
    distance_km: float = Field(..., ge=0, description="Great-circle distance.")


class QiblaResponse(BaseModel):
    success: bool = True
    service: str = "qibla"
    data: QiblaData
    timestamp: datetime


# ── Service ───────────────────────────────────────────────────────────


class HealthResponse(BaseModel):
    success: bool = True
    status: str = "healthy"
    timestamp: datetime
    uptime: float
    version: str
    services: list[str] = ["qibla"]


class RateLimitInfo(BaseModel):
    limit: str
    description: str


class LimitsResponse(BaseModel):
    success: bool = True
    rate_limits: dict[str, RateLimitInfo]
    note: str = "Rate limits are applied per IP address"
    current_ip: str


class ServiceIndexResponse(BaseModel):
    message: str
    description: str
    services: dict[str, str]
    endpoints: dict[str, str]
    version: str