"""Serializers for the booking domain."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rest_framework import serializers  # type: ignore

from .models import Booking

# camelCase keys the public booking form must send
REQUIRED_BOOKING_FIELDS = (
    "senderName",
    "senderPhone",
    "senderEmail",
    "senderAddress",
    "receiverName",
    "receiverPhone",
    "receiverAddress",
    "receiverCountry",
    "shipmentType",
    "weight",
    "cargoType",
    "pickupDate",
    "deliveryPriority",
)


def missing_booking_fields(data) -> list[str]:
    """Required form keys that are absent or empty, in form order."""
    return [name for name in REQUIRED_BOOKING_FIELDS if not data.get(name)]


class BookingCreateSerializer(serializers.Serializer):
    """Public booking form; maps camelCase input onto model columns."""

    senderName = serializers.CharField(
        source="sender_name",
        max_length=255,
        error_messages={"max_length": "Sender name must be less than 255 characters"},
    )
    senderCompany = serializers.CharField(
        source="sender_company", max_length=255, required=False, allow_blank=True, allow_null=True
    )
    senderPhone = serializers.CharField(source="sender_phone", max_length=50)
    senderEmail = serializers.EmailField(
        source="sender_email",
        max_length=255,
        error_messages={"invalid": "Please provide a valid email"},
    )
    senderAddress = serializers.CharField(source="sender_address")
    receiverName = serializers.CharField(source="receiver_name", max_length=255)
    receiverPhone = serializers.CharField(source="receiver_phone", max_length=50)
    receiverAddress = serializers.CharField(source="receiver_address")
    receiverCountry = serializers.CharField(source="receiver_country", max_length=100)
    shipmentType = serializers.ChoiceField(
        source="shipment_type",
        choices=Booking.ShipmentType.choices,
        error_messages={"invalid_choice": "Invalid shipment type"},
    )
    weight = serializers.FloatField(
        min_value=0.1,
        max_value=99999999.99,
        error_messages={
            "invalid": "Weight must be a positive number",
            "min_value": "Weight must be a positive number",
        },
    )
    dimensions = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    cargoType = serializers.CharField(source="cargo_type", max_length=100)
    pickupDate = serializers.DateField(
        source="pickup_date",
        error_messages={"invalid": "Invalid pickup date format"},
    )
    deliveryPriority = serializers.ChoiceField(
        source="delivery_priority",
        choices=Booking.Priority.choices,
        error_messages={"invalid_choice": "Invalid priority"},
    )
    specialInstructions = serializers.CharField(
        source="special_instructions", required=False, allow_blank=True, allow_null=True
    )

    def validate_weight(self, value: float) -> Decimal:
        return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    def validate(self, attrs):  # type: ignore
        # Optional text columns are stored as NULL rather than empty strings
        for field in ("sender_company", "dimensions", "special_instructions"):
            if not attrs.get(field):
                attrs[field] = None
        return attrs


class BookingSerializer(serializers.ModelSerializer):
    weight = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)

    class Meta:
        model = Booking
        fields = [
            "id",
            "tracking_number",
            "sender_name",
            "sender_company",
            "sender_phone",
            "sender_email",
            "sender_address",
            "receiver_name",
            "receiver_phone",
            "receiver_address",
            "receiver_country",
            "shipment_type",
            "weight",
            "dimensions",
            "cargo_type",
            "pickup_date",
            "delivery_priority",
            "estimated_delivery",
            "special_instructions",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BookingUpdateSerializer(serializers.ModelSerializer):
    """Back-office edit. Always used with ``partial=True``."""

    class Meta:
        model = Booking
        fields = [
            "sender_name",
            "sender_company",
            "sender_phone",
            "sender_email",
            "sender_address",
            "receiver_name",
            "receiver_phone",
            "receiver_address",
            "receiver_country",
            "shipment_type",
            "weight",
            "dimensions",
            "cargo_type",
            "pickup_date",
            "delivery_priority",
            "estimated_delivery",
            "special_instructions",
            "status",
        ]


class BookingStatusSerializer(serializers.Serializer):
    # Membership is checked by the lifecycle service so the message stays "Invalid status"
    status = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")


class BookingListQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=10)
    status = serializers.CharField(required=False, allow_blank=True)
    search = serializers.CharField(required=False, allow_blank=True)
