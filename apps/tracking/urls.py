"""URL routing for shipment tracking."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import TrackShipmentView, ValidateTrackingView

app_name = "tracking"

urlpatterns = [
    path("validate/<str:tracking_number>", ValidateTrackingView.as_view(), name="validate"),
    path("<str:tracking_number>", TrackShipmentView.as_view(), name="track"),
]
