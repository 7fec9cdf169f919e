"""
Rate limiter and request-monitoring middleware.

Rate limits (per client IP)
---------------------------
* ``API_LIMITS`` -- general and hourly budgets shared by every limited
  ``/api`` route through one ``shared_limit`` scope, so a client cannot
  multiply its allowance by spreading requests over endpoints.
* ``settings.calculation_rate_limit`` -- per-route, on top of the shared
  budget, for calculation endpoints only.

``/api/health`` and ``/`` carry no limits.

Monitoring
----------
Every request is logged with method, path and client IP.  For ``/api``
paths the middleware also warns about automated-looking user agents and
about IPs exceeding ``rapid_request_threshold`` requests within
``rapid_request_window_seconds``.  Monitoring only logs; it never blocks.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Callable

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config import settings

logger = logging.getLogger(__name__)

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.rate_limit_storage_uri,
    enabled=settings.rate_limit_enabled,
)

API_LIMITS = ";".join([settings.general_rate_limit, settings.hourly_rate_limit])
API_LIMIT_SCOPE = "api"

_AUTOMATION_MARKERS = ("bot", "crawler", "spider", "scraper")


def is_suspicious(path: str, user_agent: str) -> bool:
    """Heuristic for automated clients hitting the API."""
    ua = user_agent.lower()
    if any(marker in ua for marker in _AUTOMATION_MARKERS):
        return True
    return "Mozilla" not in user_agent and path.startswith("/api/")


class RapidRequestMonitor:
    """
    Sliding-window request counter per IP.

    Each IP keeps a deque of its timestamps inside the window.  IPs with
    no request in the last window are swept at most once per window, so
    memory is bounded by the IPs active in roughly two windows.
    """

    def __init__(
        self,
        threshold: int = 10,
        window_seconds: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.threshold = threshold
        self.window = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = clock()

    def record(self, ip: str) -> int:
        """Register a request from *ip*; return its count inside the window."""
        now = self._clock()
        if now - self._last_sweep >= self.window:
            self._sweep(now)

        hits = self._hits.setdefault(ip, deque())
        while hits and now - hits[0] >= self.window:
            hits.popleft()
        hits.append(now)
        return len(hits)

    def is_rapid(self, count: int) -> bool:
        return count > self.threshold

    def tracked_ips(self) -> int:
        return len(self._hits)

    def reset(self) -> None:
        self._hits.clear()
        self._last_sweep = self._clock()

    def _sweep(self, now: float) -> None:
        idle = [ip for ip, hits in self._hits.items() if not hits or now - hits[-1] >= self.window]
        for ip in idle:
            del self._hits[ip]
        self._last_sweep = now


request_monitor = RapidRequestMonitor(
    threshold=settings.rapid_request_threshold,
    window_seconds=settings.rapid_request_window_seconds,
)


async def monitor_requests(request: Request, call_next):
    """Log (never block) every request, flagging automated-looking traffic."""
    ip = get_remote_address(request)
    path = request.url.path
    logger.info("%s %s - ip=%s", request.method, path, ip)

    if path.startswith("/api"):
        user_agent = request.headers.get("user-agent", "Unknown")
        if is_suspicious(path, user_agent):
            logger.warning(
                "Suspicious activity - ip=%s user_agent=%r path=%s",
                ip, user_agent, path,
            )
        count = request_monitor.record(ip)
        if request_monitor.is_rapid(count):
            logger.warning(
                "Rapid requests - ip=%s made %d requests in %gs",
                ip, count, request_monitor.window,
            )

    return await call_next(request)
