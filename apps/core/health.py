"""
Health check views and URLs for load balancers and uptime monitoring.
"""

import logging

from django.conf import settings
from django.db import connection
from django.http import JsonResponse
from django.urls import path
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)

SERVICE_NAME = "teras-pos"


def check_database():
    """
    Run a trivial query against the default database.

    Returns:
        Tuple of (healthy, message)
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False, str(e)
    return True, "ok"


@never_cache
@require_GET
def health_check(request) -> JsonResponse:
    """Liveness: the process is up and serving requests."""
    return JsonResponse(
        {
            "status": "ok",
            "service": SERVICE_NAME,
            "version": getattr(settings, "VERSION", "1.0.0"),
            "environment": getattr(settings, "ENVIRONMENT", "unknown"),
        }
    )


@never_cache
@require_GET
def readiness_probe(request) -> JsonResponse:
    """
    Readiness: the database answers, so orders can be taken.

    Returns 503 with the failure reason when the database is unreachable.
    """
    healthy, message = check_database()
    if not healthy:
        return JsonResponse(
            {"status": "not_ready", "checks": {"database": message}}, status=503
        )
    return JsonResponse({"status": "ready", "checks": {"database": message}})


urlpatterns = [
    path("", health_check, name="health"),
    path("ready/", readiness_probe, name="readiness"),
]
