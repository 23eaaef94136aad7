import time
from typing import Any, Dict

import structlog
from django.core.cache import cache
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger(__name__)


def _timed(check) -> Dict[str, Any]:
    start = time.monotonic()
    check()
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def _check_database() -> None:
    with connections["default"].cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()


def _check_cache() -> None:
    cache.set("_health_check", "ok", 10)
    if cache.get("_health_check") != "ok":
        raise ConnectionError("Cache read failed")


def health_check(request: HttpRequest) -> JsonResponse:
    """Public liveness probe reporting database and cache status."""
    services: Dict[str, Dict[str, Any]] = {}

    try:
        services["database"] = _timed(_check_database)
    except DatabaseError as exc:
        services["database"] = {"status": "down"}
        logger.error("health_check.database_down", error=str(exc))

    try:
        services["cache"] = _timed(_check_cache)
    except Exception as exc:  # cache backends raise backend-specific errors
        services["cache"] = {"status": "down"}
        logger.error("health_check.cache_down", error=str(exc))

    healthy = all(s["status"] == "up" for s in services.values())
    logger.info("health_check.completed", healthy=healthy)

    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
