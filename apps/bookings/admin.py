"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "tracking_number",
        "sender_name",
        "receiver_name",
        "receiver_country",
        "shipment_type",
        "delivery_priority",
        "status",
        "estimated_delivery",
        "created_at",
    )
    list_filter = ("status", "shipment_type", "delivery_priority", "pickup_date")
    search_fields = ("tracking_number", "sender_name", "receiver_name", "sender_email")
    readonly_fields = (
        "tracking_number",
        "estimated_delivery",
        "created_at",
        "updated_at",
    )
