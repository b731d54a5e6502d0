"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.core import mail
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.users.models import User


def booking_payload(**overrides) -> dict:
    payload = {
        "senderName": "Maple Imports",
        "senderCompany": "Maple Imports Ltd.",
        "senderPhone": "+1 416 555 0100",
        "senderEmail": "shipping@maple.example",
        "senderAddress": "1 Front St W, Toronto",
        "receiverName": "Rotterdam Traders",
        "receiverPhone": "+31 10 555 0100",
        "receiverAddress": "Wilhelminakade 1, Rotterdam",
        "receiverCountry": "Netherlands",
        "shipmentType": "Air Freight",
        "weight": 12.5,
        "cargoType": "Electronics",
        "pickupDate": "2024-03-01",
        "deliveryPriority": "Urgent",
    }
    payload.update(overrides)
    return payload


class BookingAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="admin@panlogistics.ca", password="AdminPass1", name="Admin", role=User.Role.ADMIN
        )
        self.staff = User.objects.create_user(email="staff@panlogistics.ca", password="StaffPass1", name="Staff")
        self.create_url = reverse("bookings:create")

    def _create(self, **overrides):
        response = self.client.post(self.create_url, booking_payload(**overrides), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return response.data["data"]

    def test_public_booking_returns_receipt(self) -> None:
        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(self.create_url, booking_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Booking created successfully")
        data = response.data["data"]
        self.assertRegex(data["tracking_number"], r"^PAN-[A-Z0-9]+-[A-Z0-9]+$")
        expected = timezone.now().date() + timedelta(days=3)
        self.assertEqual(data["estimated_delivery"], expected.isoformat())

        booking = Booking.objects.get(pk=data["booking_id"])
        self.assertEqual(booking.status, Booking.Status.BOOKED)
        self.assertEqual(booking.sender_company, "Maple Imports Ltd.")
        self.assertIsNone(booking.dimensions)

        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["shipping@maple.example"])
        self.assertIn(booking.tracking_number, mail.outbox[0].subject)

    def test_missing_fields_are_listed(self) -> None:
        payload = booking_payload(senderName="", weight=0)
        del payload["cargoType"]
        response = self.client.post(self.create_url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data,
            {"success": False, "message": "Missing required fields: senderName, weight, cargoType"},
        )
        self.assertEqual(Booking.objects.count(), 0)

    def test_field_validation_errors(self) -> None:
        response = self.client.post(
            self.create_url,
            booking_payload(senderEmail="nope", shipmentType="Teleport", weight=0.01),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Validation failed")
        errors = {error["field"]: error["message"] for error in response.data["errors"]}
        self.assertEqual(errors["senderEmail"], "Please provide a valid email")
        self.assertEqual(errors["shipmentType"], "Invalid shipment type")
        self.assertEqual(errors["weight"], "Weight must be a positive number")

    def test_lookup_by_tracking_number(self) -> None:
        created = self._create()
        response = self.client.get(reverse("bookings:detail", args=[created["tracking_number"].lower()]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        booking = response.data["data"]["booking"]
        self.assertEqual(booking["tracking_number"], created["tracking_number"])
        self.assertEqual(booking["weight"], 12.5)

    def test_lookup_unknown_tracking_number(self) -> None:
        response = self.client.get(reverse("bookings:detail", args=["PAN-NOPE-NOPE"]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"success": False, "message": "Booking not found"})

    def test_list_requires_staff_token(self) -> None:
        response = self.client.get(reverse("bookings:list"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_is_paginated(self) -> None:
        for index in range(3):
            self._create(senderName=f"Sender {index}")
        self.client.force_authenticate(self.staff)

        response = self.client.get(reverse("bookings:list"), {"page": 1, "limit": 2, "search": "sender"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["data"]), 2)
        self.assertEqual(response.data["pagination"], {"page": 1, "limit": 2, "total": 3, "totalPages": 2})

    def test_stats(self) -> None:
        created = self._create()
        self._create()
        self.client.force_authenticate(self.staff)
        self.client.put(
            reverse("bookings:status", args=[created["booking_id"]]), {"status": "Delivered"}, format="json"
        )

        response = self.client.get(reverse("bookings:stats"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data["data"]["stats"], {"total": 2, "delivered": 1, "in_transit": 0, "pending": 1}
        )

    def test_status_update_sends_email(self) -> None:
        created = self._create()
        mail.outbox.clear()
        self.client.force_authenticate(self.staff)
        url = reverse("bookings:status", args=[created["booking_id"]])

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.put(url, {"status": "In Transit"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["message"], "Status updated successfully")
        self.assertEqual(Booking.objects.get(pk=created["booking_id"]).status, "In Transit")
        self.assertEqual(len(mail.outbox), 1)
        self.assertIn("In Transit", mail.outbox[0].body)

    def test_invalid_status(self) -> None:
        created = self._create()
        self.client.force_authenticate(self.staff)
        response = self.client.put(
            reverse("bookings:status", args=[created["booking_id"]]), {"status": "Lost"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Invalid status")

    def test_status_of_missing_booking(self) -> None:
        self.client.force_authenticate(self.staff)
        response = self.client.put(reverse("bookings:status", args=[999]), {"status": "Delivered"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_partial_update_ignores_tracking_number(self) -> None:
        created = self._create()
        self.client.force_authenticate(self.staff)
        response = self.client.put(
            reverse("bookings:detail", args=[created["booking_id"]]),
            {"receiver_country": "Belgium", "tracking_number": "PAN-HACK-1"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        booking = Booking.objects.get(pk=created["booking_id"])
        self.assertEqual(booking.receiver_country, "Belgium")
        self.assertEqual(booking.tracking_number, created["tracking_number"])

    def test_delete_is_admin_only(self) -> None:
        created = self._create()
        url = reverse("bookings:detail", args=[created["booking_id"]])

        self.client.force_authenticate(self.staff)
        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["message"], "Access denied. Admin only.")

        self.client.force_authenticate(self.admin)
        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Booking.objects.filter(pk=created["booking_id"]).exists())

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
