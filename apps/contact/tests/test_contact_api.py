"""API tests for the contact form and staff inbox."""

from __future__ import annotations

from django.core import mail
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.contact import services
from apps.contact.models import ContactMessage
from apps.users.models import User


class ContactAPITests(APITestCase):
    def setUp(self) -> None:
        self.staff = User.objects.create_user(email="staff@panlogistics.ca", password="StaffPass1", name="Staff")

    def _submit(self, **overrides):
        payload = {"name": "Jane Doe", "email": "Jane@Example.com", "message": "Do you ship to Yukon?"}
        payload.update(overrides)
        return self.client.post(reverse("contact:submit"), payload, format="json")

    def test_submit_stores_lowercased_email_and_confirms(self) -> None:
        with self.captureOnCommitCallbacks(execute=True):
            response = self._submit(subject="Quote")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Message sent successfully. We will get back to you soon.")
        row = ContactMessage.objects.get(pk=response.data["data"]["message_id"])
        self.assertEqual(row.email, "jane@example.com")
        self.assertFalse(row.is_read)
        self.assertIsNone(row.phone)

        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["jane@example.com"])
        self.assertEqual(mail.outbox[0].subject, "Message Received - Pan Logistics")

    def test_submit_rejects_bad_email(self) -> None:
        response = self._submit(email="jane@localhost")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["errors"],
            [{"field": "email", "message": "Please provide a valid email address"}],
        )

    def test_submit_rejects_overlong_email(self) -> None:
        response = self._submit(email=("j" * 250) + "@example.com")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["errors"],
            [{"field": "email", "message": "Email must be less than 255 characters"}],
        )
        self.assertFalse(ContactMessage.objects.exists())

    def test_submit_requires_message(self) -> None:
        response = self._submit(message="")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"][0]["message"], "Message is required")

    def test_submit_limits_message_length(self) -> None:
        response = self._submit(message="x" * 5001)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"][0]["message"], "Message must be less than 5000 characters")

    def test_inbox_requires_staff(self) -> None:
        response = self.client.get(reverse("contact:messages"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["message"], "Access denied. No token provided.")

    def test_list_unread_only(self) -> None:
        first = services.submit_message({"name": "A", "email": "a@example.com", "message": "one"})
        services.submit_message({"name": "B", "email": "b@example.com", "message": "two"})
        services.mark_as_read(first.pk)
        self.client.force_authenticate(self.staff)

        response = self.client.get(reverse("contact:messages"), {"unreadOnly": "true"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([m["name"] for m in response.data["data"]], ["B"])
        self.assertEqual(response.data["pagination"], {"page": 1, "limit": 10, "total": 1, "totalPages": 1})

        response = self.client.get(reverse("contact:messages"))
        self.assertEqual(response.data["pagination"]["total"], 2)

    def test_unread_count_and_mark_read_is_idempotent(self) -> None:
        row = services.submit_message({"name": "A", "email": "a@example.com", "message": "one"})
        self.client.force_authenticate(self.staff)
        url = reverse("contact:message-read", args=[row.pk])

        self.assertEqual(self.client.get(reverse("contact:unread-count")).data["data"], {"count": 1})
        for _ in range(2):
            response = self.client.put(url)
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual(response.data["message"], "Message marked as read")

        row.refresh_from_db()
        self.assertTrue(row.is_read)
        self.assertEqual(self.client.get(reverse("contact:unread-count")).data["data"], {"count": 0})

    def test_mark_read_missing_message(self) -> None:
        self.client.force_authenticate(self.staff)
        response = self.client.put(reverse("contact:message-read", args=[404]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Message not found")

    def test_delete_message(self) -> None:
        row = services.submit_message({"name": "A", "email": "a@example.com", "message": "one"})
        self.client.force_authenticate(self.staff)
        url = reverse("contact:message-detail", args=[row.pk])

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(ContactMessage.objects.filter(pk=row.pk).exists())
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_404_NOT_FOUND)
