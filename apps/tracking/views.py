"""Public tracking endpoints."""

from __future__ import annotations

from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from apps.bookings import services
from shared.api.errors import NotFound
from shared.api.responses import envelope

from .projection import tracking_summary, validate_tracking_format


class TrackShipmentView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def get(self, request, tracking_number: str):  # type: ignore
        booking = services.find_by_tracking_number(tracking_number)
        if booking is None:
            raise NotFound("Shipment not found. Please check your tracking number.")
        return envelope(tracking_summary(booking))


class ValidateTrackingView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def get(self, request, tracking_number: str):  # type: ignore
        if not validate_tracking_format(tracking_number):
            return envelope({"valid": False, "exists": False, "message": "Invalid tracking number format"})

        exists = services.find_by_tracking_number(tracking_number) is not None
        return envelope(
            {
                "valid": True,
                "exists": exists,
                "message": "Tracking number found" if exists else "Tracking number not found",
            }
        )
