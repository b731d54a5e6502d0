"""Health probe and JSON fallbacks for Django's error pages."""

from __future__ import annotations

import structlog
from django.db import DatabaseError, connection  # type: ignore
from django.http import JsonResponse  # type: ignore
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from shared.api.responses import envelope

logger = structlog.get_logger(__name__)


class HealthView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def get(self, request):  # type: ignore
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
        except DatabaseError as exc:
            logger.error("health.database_unreachable", error=str(exc))
            return envelope(
                {"status": "unhealthy", "database": "unreachable"},
                message="Database connection failed",
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
                success=False,
            )
        return envelope({"status": "ok", "database": "ok"}, message="Pan Logistics API is running")


def not_found(request, exception=None):  # type: ignore
    return JsonResponse({"success": False, "message": "Route not found"}, status=404)


def server_error(request):  # type: ignore
    return JsonResponse({"success": False, "message": "Internal server error"}, status=500)
