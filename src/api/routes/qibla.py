"""
Qibla endpoint
==============

GET /api/qibla?lat={latitude}&lng={longitude}
GET /api/qibla?latitude={latitude}&longitude={longitude}
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from src.api.middleware import API_LIMIT_SCOPE, API_LIMITS, limiter
from src.api.schemas import Coordinates, QiblaData, QiblaResponse
from src.config import settings
from src.domain.qibla import calculate_qibla
from src.domain.validation import validate_coordinates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["qibla"])


@router.get(
    "/qibla",
    response_model=QiblaResponse,
    summary="Direction and distance to the Kaaba",
    responses={
        400: {"description": "Missing, non-numeric or out-of-range coordinates."},
        429: {"description": "Rate limit exceeded."},
    },
)
@limiter.shared_limit(API_LIMITS, scope=API_LIMIT_SCOPE)
@limiter.limit(settings.calculation_rate_limit)
async def get_qibla(
    request: Request,
    lat: Optional[str] = Query(None, description="Latitude (-90 to 90)"),
    lng: Optional[str] = Query(None, description="Longitude (-180 to 180)"),
    latitude: Optional[str] = Query(None, description="Alias of ``lat``"),
    longitude: Optional[str] = Query(None, description="Alias of ``lng``"),
):
    raw_lat = lat or latitude
    raw_lng = lng or longitude

    if not raw_lat or not raw_lng:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Missing required parameters",
                "message": "Please provide both latitude and longitude",
                "example": "/api/qibla?lat=40.7128&lng=-74.0060",
            },
        )

    validation = validate_coordinates(raw_lat, raw_lng)
    if not validation.is_valid:
        logger.info(
            "Rejected coordinates lat=%r lng=%r: %s",
            raw_lat, raw_lng, validation.error.value,
        )
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Invalid coordinates",
                "code": validation.error.value,
                "message": validation.message,
                "provided": {"latitude": raw_lat, "longitude": raw_lng},
            },
        )

    result = calculate_qibla(validation.point)
    logger.debug(
        "Qibla from (%s, %s): %.6f deg %s, %.3f km",
        result.origin.latitude, result.origin.longitude,
        result.bearing_degrees, result.compass_label, result.distance_km,
    )

    return QiblaResponse(
        data=QiblaData(
            qibla_direction=result.rounded_bearing,
            compass_bearing=result.compass_label,
            location=Coordinates(
                latitude=result.origin.latitude,
                longitude=result.origin.longitude,
            ),
            kaaba_coordinates=Coordinates(
                latitude=result.reference_point.latitude,
                longitude=result.reference_point.longitude,
            ),
            distance_km=result.rounded_distance,
        ),
        timestamp=datetime.now(timezone.utc),
    )
