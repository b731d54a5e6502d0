"""
Message bus handlers

Each handler turns a committed domain event into a Celery task. A broker
that cannot be reached costs the email, never the request.
"""

import logging

from apps.bookings.events import BookingCreated, BookingStatusChanged
from apps.contact.events import ContactMessageReceived
from shared.application.message_bus import MessageBus

from . import tasks

logger = logging.getLogger(__name__)


def _enqueue(task, *args) -> None:
    try:
        task.delay(*args)
    except Exception as e:
        logger.error(f"Could not enqueue {task.name}{args}: {e}", exc_info=True)


def on_booking_created(event: BookingCreated) -> None:
    _enqueue(tasks.send_booking_confirmation, event.booking_id)


def on_booking_status_changed(event: BookingStatusChanged) -> None:
    _enqueue(tasks.send_status_update, event.booking_id)


def on_contact_message_received(event: ContactMessageReceived) -> None:
    _enqueue(tasks.send_contact_confirmation, event.message_id)


def register_handlers(bus: MessageBus) -> None:
    bus.register_event_handler(BookingCreated, on_booking_created)
    bus.register_event_handler(BookingStatusChanged, on_booking_status_changed)
    bus.register_event_handler(ContactMessageReceived, on_contact_message_received)
