"""Read-only projection of a booking into what the tracking page shows.

Everything here is a pure function of the booking row, so the tracking
endpoints never write and the mapping can be tested without a database.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from apps.bookings.models import Booking

Status = Booking.Status

TRACKING_FORMAT = re.compile(r"PAN-[A-Z0-9]+-[A-Z0-9]+", re.IGNORECASE)

PROGRESS: dict[str, int] = {
    Status.BOOKED: 20,
    Status.PROCESSING: 35,
    Status.IN_TRANSIT: 50,
    Status.AT_WAREHOUSE: 70,
    Status.OUT_FOR_DELIVERY: 90,
    Status.DELIVERED: 100,
}

# (checkpoint, title, description, first status that completes it)
CHECKPOINTS: tuple[tuple[str, str, str, str], ...] = (
    ("Order Placed", "Order Booked", "Shipment order has been confirmed", Status.BOOKED),
    ("Processing", "Processing", "Shipment is being processed", Status.PROCESSING),
    ("In Transit", "In Transit", "Package is on its way", Status.IN_TRANSIT),
    ("At Warehouse", "At Warehouse", "Package arrived at distribution center", Status.AT_WAREHOUSE),
    ("Out for Delivery", "Out for Delivery", "Package is out for final delivery", Status.OUT_FOR_DELIVERY),
    ("Delivered", "Delivered", "Package has been delivered", Status.DELIVERED),
)

_STATUS_RANK = {value: rank for rank, value in enumerate(Status.values)}


def progress_percent(status: str) -> int:
    return PROGRESS.get(status, 0)


def validate_tracking_format(value: str) -> bool:
    return bool(value) and TRACKING_FORMAT.fullmatch(value) is not None


def _checkpoint_date(checkpoint: str, booking: Booking):
    if checkpoint == "Order Placed":
        return booking.created_at
    if checkpoint == "Processing" and booking.status != Status.BOOKED:
        return booking.updated_at
    if checkpoint == "Delivered" and booking.status == Status.DELIVERED:
        return booking.updated_at
    return None


def build_timeline(booking: Booking) -> list[dict[str, Any]]:
    """Six fixed checkpoints; reaching a status completes every earlier one.

    Only Order Placed, Processing and Delivered ever carry a date.
    """
    current = _STATUS_RANK.get(booking.status, -1)
    timeline = []
    for checkpoint, title, description, reached_at in CHECKPOINTS:
        completed = checkpoint == "Order Placed" or current >= _STATUS_RANK[reached_at]
        timeline.append(
            {
                "status": checkpoint,
                "title": title,
                "description": description,
                "completed": completed,
                "date": _checkpoint_date(checkpoint, booking),
            }
        )
    return timeline


def format_weight(weight: Decimal | float | None) -> str:
    if weight is None:
        return "N/A"
    if not isinstance(weight, Decimal):
        weight = Decimal(str(weight))
    return f"{format(weight.normalize(), 'f')} kg"


def tracking_summary(booking: Booking) -> dict[str, Any]:
    """Everything the public tracking page needs for one shipment."""
    return {
        "tracking_number": booking.tracking_number,
        "status": booking.status,
        "progress": progress_percent(booking.status),
        "shipment_details": {
            "type": booking.shipment_type,
            "cargo_type": booking.cargo_type,
            "weight": format_weight(booking.weight),
            "dimensions": booking.dimensions or "N/A",
            "priority": booking.delivery_priority,
        },
        "sender": {
            "name": booking.sender_name,
            "company": booking.sender_company,
            "address": booking.sender_address,
            "phone": booking.sender_phone,
            "email": booking.sender_email,
        },
        "receiver": {
            "name": booking.receiver_name,
            "address": booking.receiver_address,
            "country": booking.receiver_country,
            "phone": booking.receiver_phone,
        },
        "dates": {
            "pickup": booking.pickup_date,
            "estimated_delivery": booking.estimated_delivery,
            "last_updated": booking.updated_at,
        },
        "timeline": build_timeline(booking),
    }
