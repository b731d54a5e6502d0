"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    BookingCreateView,
    BookingDetailView,
    BookingListView,
    BookingStatsView,
    BookingStatusView,
)

app_name = "bookings"

# Mounted at /api/ so the collection has no trailing slash.
# Fixed segments come before the catch-all tracking number route.
urlpatterns = [
    path("bookings", BookingListView.as_view(), name="list"),
    path("bookings/create", BookingCreateView.as_view(), name="create"),
    path("bookings/stats", BookingStatsView.as_view(), name="stats"),
    path("bookings/<int:pk>/status", BookingStatusView.as_view(), name="status"),
    path("bookings/<str:key>", BookingDetailView.as_view(), name="detail"),
]
