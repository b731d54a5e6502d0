"""URL routing for the contact form and inbox."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    ContactMessageDetailView,
    ContactMessageListView,
    ContactMessageReadView,
    ContactSubmitView,
    UnreadCountView,
)

# Mounted at /api/ like the bookings routes
app_name = "contact"

urlpatterns = [
    path("contact", ContactSubmitView.as_view(), name="submit"),
    path("contact/messages", ContactMessageListView.as_view(), name="messages"),
    path("contact/unread-count", UnreadCountView.as_view(), name="unread-count"),
    path("contact/messages/<int:pk>", ContactMessageDetailView.as_view(), name="message-detail"),
    path("contact/messages/<int:pk>/read", ContactMessageReadView.as_view(), name="message-read"),
]
