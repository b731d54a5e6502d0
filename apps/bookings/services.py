"""Booking lifecycle services.

Tracking numbers, delivery estimates, status changes, listing and
statistics. Views call these functions with already validated data;
failures are raised as domain errors from :mod:`apps.bookings.exceptions`.
"""

from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Mapping

from django.conf import settings  # type: ignore
from django.db import IntegrityError  # type: ignore
from django.db.models import Count, Q  # type: ignore
from django.utils import timezone  # type: ignore

from shared.application.uow import DjangoUnitOfWork
from shared.infrastructure.gateway import Page, TableGateway

from .events import BookingCreated, BookingStatusChanged
from .exceptions import BookingNotFound, InvalidStatus, TrackingNumberGenerationExhausted
from .filters import BookingFilterSet
from .models import Booking

logger = logging.getLogger(__name__)

bookings: TableGateway[Booking] = TableGateway(Booking)

TRACKING_PREFIX = "PAN"
_BASE36_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

ShipmentType = Booking.ShipmentType
Priority = Booking.Priority
Status = Booking.Status

# Transit days per shipment type and priority
DELIVERY_DAYS: dict[str, dict[str, int]] = {
    ShipmentType.AIR_FREIGHT: {Priority.URGENT: 3, Priority.EXPRESS: 5, Priority.STANDARD: 7},
    ShipmentType.SEA_FREIGHT: {Priority.URGENT: 14, Priority.EXPRESS: 21, Priority.STANDARD: 30},
    ShipmentType.LAND_TRANSPORT: {Priority.URGENT: 1, Priority.EXPRESS: 3, Priority.STANDARD: 5},
}
DEFAULT_DELIVERY_DAYS = 7

IMMUTABLE_FIELDS = frozenset({"id", "tracking_number", "created_at"})


@dataclass(frozen=True)
class BookingReceipt:
    """What the public booking form gets back after a successful booking."""

    id: int
    tracking_number: str
    estimated_delivery: date


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def _candidate_tracking_number() -> str:
    millis = int(time.time() * 1000)
    return f"{TRACKING_PREFIX}-{_to_base36(millis)}-{secrets.token_hex(4).upper()}"


def _max_attempts() -> int:
    return max(1, int(getattr(settings, "TRACKING_NUMBER_MAX_ATTEMPTS", 10)))


def generate_tracking_number() -> str:
    """Return a tracking number that is not yet taken.

    Raises :class:`TrackingNumberGenerationExhausted` after
    ``TRACKING_NUMBER_MAX_ATTEMPTS`` consecutive collisions.
    """
    attempts = _max_attempts()
    for attempt in range(1, attempts + 1):
        candidate = _candidate_tracking_number()
        if not bookings.exists(tracking_number=candidate):
            return candidate
        logger.warning(f"Tracking number collision on {candidate} (attempt {attempt}/{attempts})")
    raise TrackingNumberGenerationExhausted()


def calculate_estimated_delivery(shipment_type: str, priority: str, today: date | None = None) -> date:
    """Delivery date for a shipment booked ``today`` (UTC date when omitted)."""
    if today is None:
        today = timezone.now().date()
    days_by_priority = DELIVERY_DAYS.get(shipment_type)
    if days_by_priority is None:
        days = DEFAULT_DELIVERY_DAYS
    else:
        days = days_by_priority.get(priority, days_by_priority[Priority.STANDARD])
    return today + timedelta(days=days)


def create_booking(data: Mapping[str, Any]) -> BookingReceipt:
    """Store a new shipment with status ``Booked``.

    ``data`` holds model field names. The unique constraint on
    ``tracking_number`` settles races between concurrent bookings; a
    losing insert retries with a fresh number.
    """
    fields = {key: value for key, value in data.items() if key not in IMMUTABLE_FIELDS}
    fields["estimated_delivery"] = calculate_estimated_delivery(
        fields.get("shipment_type", ""), fields.get("delivery_priority", "")
    )
    fields["status"] = Status.BOOKED

    attempts = _max_attempts()
    for attempt in range(1, attempts + 1):
        tracking_number = generate_tracking_number()
        try:
            with DjangoUnitOfWork() as uow:
                booking = bookings.insert({**fields, "tracking_number": tracking_number})
                uow.record(BookingCreated(booking_id=booking.pk, tracking_number=tracking_number))
        except IntegrityError:
            if not bookings.exists(tracking_number=tracking_number):
                raise
            logger.warning(f"Tracking number {tracking_number} taken concurrently (attempt {attempt}/{attempts})")
            continue

        logger.info(f"Booking {booking.pk} created with tracking number {tracking_number}")
        return BookingReceipt(
            id=booking.pk,
            tracking_number=booking.tracking_number,
            estimated_delivery=booking.estimated_delivery,
        )

    raise TrackingNumberGenerationExhausted()


def find_by_tracking_number(value: str) -> Booking | None:
    return bookings.first(tracking_number=(value or "").upper())


def find_by_id(booking_id: int) -> Booking | None:
    return bookings.first(pk=booking_id)


def update_status(booking_id: int, status: str) -> Booking:
    """Move a booking to ``status``. Any status may follow any other."""
    if status not in Status.values:
        raise InvalidStatus()

    with DjangoUnitOfWork() as uow:
        booking = find_by_id(booking_id)
        if booking is None:
            raise BookingNotFound()
        previous_status = booking.status
        booking = bookings.update(booking.pk, {"status": status})
        if previous_status != status:
            uow.record(
                BookingStatusChanged(booking_id=booking.pk, previous_status=previous_status, status=status)
            )

    logger.info(f"Booking {booking_id} status {previous_status} -> {status}")
    return booking


def update_booking(booking_id: int, data: Mapping[str, Any]) -> Booking:
    """Partial update; identity and creation columns are silently skipped."""
    changes = {key: value for key, value in data.items() if key not in IMMUTABLE_FIELDS}
    if "status" in changes and changes["status"] not in Status.values:
        raise InvalidStatus()

    with DjangoUnitOfWork() as uow:
        booking = find_by_id(booking_id)
        if booking is None:
            raise BookingNotFound()
        if not changes:
            return booking
        previous_status = booking.status
        booking = bookings.update(booking.pk, changes)
        if booking.status != previous_status:
            uow.record(
                BookingStatusChanged(booking_id=booking.pk, previous_status=previous_status, status=booking.status)
            )

    logger.info(f"Booking {booking_id} updated: {sorted(changes)}")
    return booking


def delete_booking(booking_id: int) -> None:
    if not bookings.delete(booking_id):
        raise BookingNotFound()
    logger.info(f"Booking {booking_id} deleted")


def find_all(
    page: int = 1,
    limit: int = 10,
    status: str | None = None,
    search: str | None = None,
) -> Page[Booking]:
    """Newest-first page of bookings, optionally filtered."""
    filterset = BookingFilterSet(
        data={"status": status or "", "search": search or ""},
        queryset=bookings.queryset(),
    )
    return bookings.paginate(filterset.qs, page=page, limit=limit)


def get_statistics() -> dict[str, int]:
    """Counts for the dashboard.

    ``pending`` covers Booked and Processing. At Warehouse and Out for
    Delivery are only part of ``total``.
    """
    return bookings.queryset().aggregate(
        total=Count("id"),
        delivered=Count("id", filter=Q(status=Status.DELIVERED)),
        in_transit=Count("id", filter=Q(status=Status.IN_TRANSIT)),
        pending=Count("id", filter=Q(status__in=[Status.BOOKED, Status.PROCESSING])),
    )
