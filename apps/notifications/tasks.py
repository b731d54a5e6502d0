"""Celery tasks that send transactional email."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from apps.bookings.models import Booking
from apps.contact.models import ContactMessage

from .services import (
    send_booking_confirmation_email,
    send_contact_confirmation_email,
    send_status_update_email,
)

logger = logging.getLogger(__name__)


@shared_task(name="notifications.send_booking_confirmation")
def send_booking_confirmation(booking_id: int) -> bool:
    try:
        booking = Booking.objects.get(pk=booking_id)
    except Booking.DoesNotExist:
        logger.warning(f"Booking {booking_id} no longer exists, confirmation not sent")
        return False
    return send_booking_confirmation_email(booking)


@shared_task(name="notifications.send_contact_confirmation")
def send_contact_confirmation(message_id: int) -> bool:
    try:
        message = ContactMessage.objects.get(pk=message_id)
    except ContactMessage.DoesNotExist:
        logger.warning(f"Contact message {message_id} no longer exists, confirmation not sent")
        return False
    return send_contact_confirmation_email(message)


@shared_task(name="notifications.send_status_update")
def send_status_update(booking_id: int) -> bool:
    try:
        booking = Booking.objects.get(pk=booking_id)
    except Booking.DoesNotExist:
        logger.warning(f"Booking {booking_id} no longer exists, status update not sent")
        return False
    return send_status_update_email(booking)
