"""Shipment booking model for Pan Logistics."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore


class Booking(models.Model):
    """A shipment booked through the public booking form."""

    class ShipmentType(models.TextChoices):
        AIR_FREIGHT = "Air Freight", "Air Freight"
        SEA_FREIGHT = "Sea Freight", "Sea Freight"
        LAND_TRANSPORT = "Land Transport", "Land Transport"

    class Priority(models.TextChoices):
        STANDARD = "Standard", "Standard"
        EXPRESS = "Express", "Express"
        URGENT = "Urgent", "Urgent"

    class Status(models.TextChoices):
        # Declaration order is the order shipments move through
        BOOKED = "Booked", "Booked"
        PROCESSING = "Processing", "Processing"
        IN_TRANSIT = "In Transit", "In Transit"
        AT_WAREHOUSE = "At Warehouse", "At Warehouse"
        OUT_FOR_DELIVERY = "Out for Delivery", "Out for Delivery"
        DELIVERED = "Delivered", "Delivered"

    tracking_number = models.CharField(max_length=50, unique=True, editable=False)

    sender_name = models.CharField(max_length=255)
    sender_company = models.CharField(max_length=255, null=True, blank=True)
    sender_phone = models.CharField(max_length=50)
    sender_email = models.EmailField(max_length=255)
    sender_address = models.TextField()

    receiver_name = models.CharField(max_length=255)
    receiver_phone = models.CharField(max_length=50)
    receiver_address = models.TextField()
    receiver_country = models.CharField(max_length=100)

    shipment_type = models.CharField(max_length=50, choices=ShipmentType.choices)
    weight = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.1"))],
    )
    dimensions = models.CharField(max_length=100, null=True, blank=True)
    cargo_type = models.CharField(max_length=100)

    pickup_date = models.DateField()
    delivery_priority = models.CharField(max_length=20, choices=Priority.choices)
    estimated_delivery = models.DateField(null=True, blank=True)
    special_instructions = models.TextField(null=True, blank=True)

    status = models.CharField(
        max_length=50,
        choices=Status.choices,
        default=Status.BOOKED,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "bookings"
        verbose_name = "Booking"
        verbose_name_plural = "Bookings"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(shipment_type__in=["Air Freight", "Sea Freight", "Land Transport"]),
                name="bookings_shipment_type_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(delivery_priority__in=["Standard", "Express", "Urgent"]),
                name="bookings_priority_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(
                    status__in=[
                        "Booked",
                        "Processing",
                        "In Transit",
                        "At Warehouse",
                        "Out for Delivery",
                        "Delivered",
                    ]
                ),
                name="bookings_status_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(weight__gt=0),
                name="bookings_weight_positive",
            ),
        ]
        indexes = [
            models.Index(fields=["tracking_number"], name="idx_bookings_tracking"),
            models.Index(fields=["status"], name="idx_bookings_status"),
            models.Index(fields=["created_at"], name="idx_bookings_created"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.tracking_number} ({self.status})"
