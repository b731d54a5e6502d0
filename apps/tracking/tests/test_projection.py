from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from apps.bookings.models import Booking
from apps.tracking.projection import (
    build_timeline,
    format_weight,
    progress_percent,
    tracking_summary,
    validate_tracking_format,
)

CREATED = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
UPDATED = datetime(2024, 3, 3, 15, 30, tzinfo=timezone.utc)


def make_booking(status, **fields):
    defaults = {
        "tracking_number": "PAN-LOYW3V28-0A1B2C3D",
        "sender_name": "Maple Imports",
        "sender_phone": "+1 416 555 0100",
        "sender_email": "shipping@maple.example",
        "sender_address": "1 Front St W, Toronto",
        "receiver_name": "Rotterdam Traders",
        "receiver_phone": "+31 10 555 0100",
        "receiver_address": "Wilhelminakade 1, Rotterdam",
        "receiver_country": "Netherlands",
        "shipment_type": "Air Freight",
        "weight": Decimal("12.50"),
        "cargo_type": "Electronics",
        "pickup_date": date(2024, 3, 1),
        "delivery_priority": "Urgent",
        "estimated_delivery": date(2024, 3, 4),
        "status": status,
        "created_at": CREATED,
        "updated_at": UPDATED,
    }
    defaults.update(fields)
    return Booking(**defaults)


@pytest.mark.parametrize(
    "status, expected",
    [
        ("Booked", 20),
        ("Processing", 35),
        ("In Transit", 50),
        ("At Warehouse", 70),
        ("Out for Delivery", 90),
        ("Delivered", 100),
        ("Lost", 0),
        ("", 0),
    ],
)
def test_progress_percent(status, expected):
    assert progress_percent(status) == expected


def test_timeline_in_transit():
    timeline = build_timeline(make_booking("In Transit"))

    assert [step["status"] for step in timeline] == [
        "Order Placed",
        "Processing",
        "In Transit",
        "At Warehouse",
        "Out for Delivery",
        "Delivered",
    ]
    assert [step["completed"] for step in timeline] == [True, True, True, False, False, False]
    assert timeline[0]["date"] == CREATED
    assert timeline[1]["date"] == UPDATED
    assert all(step["date"] is None for step in timeline[2:])


def test_timeline_booked_has_only_order_date():
    timeline = build_timeline(make_booking("Booked"))
    assert [step["completed"] for step in timeline] == [True, False, False, False, False, False]
    assert [step["date"] for step in timeline] == [CREATED, None, None, None, None, None]
    assert timeline[0]["title"] == "Order Booked"


def test_timeline_delivered():
    timeline = build_timeline(make_booking("Delivered"))
    assert all(step["completed"] for step in timeline)
    assert timeline[-1]["date"] == UPDATED
    assert timeline[3]["date"] is None


def test_timeline_unknown_status_only_order_placed():
    timeline = build_timeline(make_booking("Lost"))
    assert [step["completed"] for step in timeline] == [True, False, False, False, False, False]


@pytest.mark.parametrize(
    "value, valid",
    [
        ("PAN-LOYW3V28-0A1B2C3D", True),
        ("pan-abc-123", True),
        ("ABC123", False),
        ("PAN--123", False),
        ("PAN-ABC-123\n", False),
        ("PAN-ABC-12-3", False),
        ("PAN-AB C-123", False),
        ("", False),
    ],
)
def test_validate_tracking_format(value, valid):
    assert validate_tracking_format(value) is valid


def test_format_weight():
    assert format_weight(Decimal("12.50")) == "12.5 kg"
    assert format_weight(Decimal("100.00")) == "100 kg"
    assert format_weight(0.75) == "0.75 kg"


def test_summary_defaults_dimensions():
    summary = tracking_summary(make_booking("Booked"))
    assert summary["progress"] == 20
    assert summary["shipment_details"] == {
        "type": "Air Freight",
        "cargo_type": "Electronics",
        "weight": "12.5 kg",
        "dimensions": "N/A",
        "priority": "Urgent",
    }
    assert summary["dates"]["estimated_delivery"] == date(2024, 3, 4)
    assert summary["receiver"]["country"] == "Netherlands"
    assert len(summary["timeline"]) == 6
