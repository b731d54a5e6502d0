"""API views for the booking domain.

Booking and lookup by tracking number are public; the list, statistics,
status changes and edits need a staff token; deletion is admin-only.
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from apps.users.permissions import IsAdmin, IsStaff
from shared.api.errors import NotFound, ValidationFailed
from shared.api.responses import envelope

from . import services
from .serializers import (
    BookingCreateSerializer,
    BookingListQuerySerializer,
    BookingSerializer,
    BookingStatusSerializer,
    BookingUpdateSerializer,
    missing_booking_fields,
)

logger = logging.getLogger(__name__)


class BookingCreateView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        missing = missing_booking_fields(request.data)
        if missing:
            raise ValidationFailed(f"Missing required fields: {', '.join(missing)}")

        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        receipt = services.create_booking(serializer.validated_data)
        return envelope(
            {
                "booking_id": receipt.id,
                "tracking_number": receipt.tracking_number,
                "estimated_delivery": receipt.estimated_delivery.isoformat(),
            },
            message="Booking created successfully",
            status=status.HTTP_201_CREATED,
        )


class BookingListView(APIView):
    permission_classes = [IsStaff]

    def get(self, request):  # type: ignore
        query = BookingListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page = services.find_all(**query.validated_data)
        return envelope(
            BookingSerializer(page.items, many=True).data,
            pagination=page.pagination(),
        )


class BookingStatsView(APIView):
    permission_classes = [IsStaff]

    def get(self, request):  # type: ignore
        return envelope({"stats": services.get_statistics()})


class BookingDetailView(APIView):
    """``GET`` looks a booking up by tracking number; ``PUT``/``DELETE`` address it by id."""

    def get_authenticators(self):  # type: ignore
        if getattr(self.request, "method", None) == "GET":
            return []
        return super().get_authenticators()

    def get_permissions(self):  # type: ignore
        method = getattr(self.request, "method", None)
        if method == "GET":
            return [AllowAny()]
        if method == "DELETE":
            return [IsAdmin()]
        return [IsStaff()]

    @staticmethod
    def _booking_id(key: str) -> int:
        try:
            return int(key)
        except (TypeError, ValueError):
            raise NotFound("Booking not found")

    def get(self, request, key: str):  # type: ignore
        booking = services.find_by_tracking_number(key)
        if booking is None:
            raise NotFound("Booking not found")
        return envelope({"booking": BookingSerializer(booking).data})

    def put(self, request, key: str):  # type: ignore
        serializer = BookingUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        booking = services.update_booking(self._booking_id(key), serializer.validated_data)
        logger.info(f"User {request.user.pk} updated booking {booking.pk}")
        return envelope({"booking": BookingSerializer(booking).data}, message="Booking updated successfully")

    def delete(self, request, key: str):  # type: ignore
        services.delete_booking(self._booking_id(key))
        logger.info(f"User {request.user.pk} deleted booking {key}")
        return envelope(message="Booking deleted successfully")


class BookingStatusView(APIView):
    permission_classes = [IsStaff]

    def put(self, request, pk: int):  # type: ignore
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.update_status(pk, serializer.validated_data["status"] or "")
        return envelope(message="Status updated successfully")
