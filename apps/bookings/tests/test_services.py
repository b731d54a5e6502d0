import re
from datetime import date, timedelta
from decimal import Decimal
from unittest import mock

import pytest
from django.test import override_settings
from django.utils import timezone

from apps.bookings import services
from apps.bookings.exceptions import BookingNotFound, InvalidStatus, TrackingNumberGenerationExhausted
from apps.bookings.models import Booking

TRACKING_RE = re.compile(r"^PAN-[A-Z0-9]+-[A-Z0-9]+$")
DAY = date(2024, 3, 1)


def booking_data(**overrides):
    data = {
        "sender_name": "Maple Imports",
        "sender_company": None,
        "sender_phone": "+1 416 555 0100",
        "sender_email": "shipping@maple.example",
        "sender_address": "1 Front St W, Toronto",
        "receiver_name": "Rotterdam Traders",
        "receiver_phone": "+31 10 555 0100",
        "receiver_address": "Wilhelminakade 1, Rotterdam",
        "receiver_country": "Netherlands",
        "shipment_type": Booking.ShipmentType.AIR_FREIGHT,
        "weight": Decimal("12.50"),
        "dimensions": None,
        "cargo_type": "Electronics",
        "pickup_date": DAY,
        "delivery_priority": Booking.Priority.URGENT,
        "special_instructions": None,
    }
    data.update(overrides)
    return data


@pytest.mark.parametrize(
    "shipment_type, priority, days",
    [
        ("Air Freight", "Urgent", 3),
        ("Air Freight", "Express", 5),
        ("Air Freight", "Standard", 7),
        ("Sea Freight", "Urgent", 14),
        ("Sea Freight", "Express", 21),
        ("Sea Freight", "Standard", 30),
        ("Land Transport", "Urgent", 1),
        ("Land Transport", "Express", 3),
        ("Land Transport", "Standard", 5),
    ],
)
def test_estimated_delivery_table(shipment_type, priority, days):
    result = services.calculate_estimated_delivery(shipment_type, priority, today=DAY)
    assert (result - DAY).days == days
    assert isinstance(result, date)


def test_unknown_shipment_type_defaults_to_a_week():
    for priority in ("Urgent", "Express", "Standard", "Overnight"):
        assert services.calculate_estimated_delivery("Rail", priority, today=DAY) == date(2024, 3, 8)


def test_unknown_priority_uses_standard_column():
    assert services.calculate_estimated_delivery("Sea Freight", "Whenever", today=DAY) == date(2024, 3, 31)


def test_base36_encoding():
    assert services._to_base36(0) == "0"
    assert services._to_base36(35) == "Z"
    assert services._to_base36(36) == "10"
    assert services._to_base36(1700000000000) == "LOYW3V28"


@pytest.mark.django_db
def test_generated_tracking_number_format():
    value = services.generate_tracking_number()
    assert TRACKING_RE.match(value)
    prefix, timestamp, random_part = value.split("-")
    assert prefix == "PAN"
    assert len(random_part) == 8


@pytest.mark.django_db
def test_tracking_number_retries_on_collision():
    taken = services.create_booking(booking_data()).tracking_number
    with mock.patch.object(
        services, "_candidate_tracking_number", side_effect=[taken, taken, "PAN-ABC-0000FFFF"]
    ):
        assert services.generate_tracking_number() == "PAN-ABC-0000FFFF"


@pytest.mark.django_db
@override_settings(TRACKING_NUMBER_MAX_ATTEMPTS=3)
def test_tracking_number_generation_is_bounded():
    taken = services.create_booking(booking_data()).tracking_number
    with mock.patch.object(services, "_candidate_tracking_number", return_value=taken) as candidate:
        with pytest.raises(TrackingNumberGenerationExhausted):
            services.generate_tracking_number()
    assert candidate.call_count == 3


@pytest.mark.django_db
def test_create_booking_retries_when_number_is_taken_on_insert():
    taken = services.create_booking(booking_data()).tracking_number
    with mock.patch.object(
        services, "generate_tracking_number", side_effect=[taken, "PAN-FRESH-0000AAAA"]
    ):
        receipt = services.create_booking(booking_data(sender_name="Second Sender"))

    assert receipt.tracking_number == "PAN-FRESH-0000AAAA"
    assert Booking.objects.count() == 2
    assert Booking.objects.get(pk=receipt.id).sender_name == "Second Sender"


@pytest.mark.django_db
@override_settings(TRACKING_NUMBER_MAX_ATTEMPTS=2)
def test_create_booking_gives_up_after_max_attempts():
    taken = services.create_booking(booking_data()).tracking_number
    with mock.patch.object(services, "generate_tracking_number", return_value=taken) as generate:
        with pytest.raises(TrackingNumberGenerationExhausted):
            services.create_booking(booking_data())

    assert generate.call_count == 2
    assert Booking.objects.count() == 1


@pytest.mark.django_db
def test_create_booking_stores_booked_row():
    with mock.patch.object(services, "calculate_estimated_delivery", return_value=date(2024, 3, 4)):
        receipt = services.create_booking(booking_data())

    booking = Booking.objects.get(pk=receipt.id)
    assert booking.status == Booking.Status.BOOKED
    assert booking.tracking_number == receipt.tracking_number
    assert booking.estimated_delivery == receipt.estimated_delivery == date(2024, 3, 4)


@pytest.mark.django_db
def test_create_booking_ignores_protected_fields():
    receipt = services.create_booking(booking_data(tracking_number="PAN-MINE-1", status="Delivered"))
    booking = Booking.objects.get(pk=receipt.id)
    assert booking.tracking_number != "PAN-MINE-1"
    assert booking.status == Booking.Status.BOOKED


@pytest.mark.django_db
def test_find_by_tracking_number_is_case_insensitive():
    receipt = services.create_booking(booking_data())
    assert services.find_by_tracking_number(receipt.tracking_number.lower()).pk == receipt.id
    assert services.find_by_tracking_number("PAN-NOPE-NOPE") is None


@pytest.mark.django_db
def test_update_status_rejects_unknown_status():
    receipt = services.create_booking(booking_data())
    with pytest.raises(InvalidStatus):
        services.update_status(receipt.id, "Lost")
    assert Booking.objects.get(pk=receipt.id).status == Booking.Status.BOOKED


@pytest.mark.django_db
def test_update_status_missing_booking():
    with pytest.raises(BookingNotFound):
        services.update_status(12345, Booking.Status.DELIVERED)


@pytest.mark.django_db
def test_any_status_may_follow_any_other():
    receipt = services.create_booking(booking_data())
    services.update_status(receipt.id, Booking.Status.DELIVERED)
    booking = services.update_status(receipt.id, Booking.Status.PROCESSING)
    assert booking.status == Booking.Status.PROCESSING


@pytest.mark.django_db
def test_update_booking_keeps_identity_columns():
    receipt = services.create_booking(booking_data())
    original = Booking.objects.get(pk=receipt.id)

    updated = services.update_booking(
        receipt.id,
        {"tracking_number": "PAN-X-Y", "created_at": None, "receiver_country": "Belgium"},
    )

    assert updated.receiver_country == "Belgium"
    assert updated.tracking_number == original.tracking_number
    assert updated.created_at == original.created_at


@pytest.mark.django_db
def test_delete_booking():
    receipt = services.create_booking(booking_data())
    services.delete_booking(receipt.id)
    assert not Booking.objects.filter(pk=receipt.id).exists()
    with pytest.raises(BookingNotFound):
        services.delete_booking(receipt.id)


@pytest.mark.django_db
def test_find_all_filters_and_paginates():
    for index in range(12):
        services.create_booking(booking_data(sender_name=f"Sender {index}"))
    services.create_booking(booking_data(receiver_name="Yukon Outfitters"))

    page = services.find_all(page=2, limit=5)
    assert page.pagination() == {"page": 2, "limit": 5, "total": 13, "totalPages": 3}
    assert len(page.items) == 5

    found = services.find_all(search="yukon")
    assert [b.receiver_name for b in found.items] == ["Yukon Outfitters"]

    assert services.find_all(status="Delivered").total == 0
    assert services.find_all(status="Booked").total == 13
    assert services.find_all(status="Lost").total == 0


@pytest.mark.django_db
def test_find_all_newest_first():
    first = services.create_booking(booking_data())
    second = services.create_booking(booking_data())
    Booking.objects.filter(pk=first.id).update(created_at=timezone.now() - timedelta(days=1))
    assert [b.pk for b in services.find_all().items] == [second.id, first.id]


@pytest.mark.django_db
def test_statistics_buckets():
    ids = [services.create_booking(booking_data()).id for _ in range(6)]
    services.update_status(ids[1], Booking.Status.PROCESSING)
    services.update_status(ids[2], Booking.Status.IN_TRANSIT)
    services.update_status(ids[3], Booking.Status.AT_WAREHOUSE)
    services.update_status(ids[4], Booking.Status.OUT_FOR_DELIVERY)
    services.update_status(ids[5], Booking.Status.DELIVERED)

    assert services.get_statistics() == {"total": 6, "delivered": 1, "in_transit": 1, "pending": 2}

    services.update_status(ids[0], Booking.Status.DELIVERED)
    assert services.get_statistics() == {"total": 6, "delivered": 2, "in_transit": 1, "pending": 1}
