"""Booking domain errors."""

from shared.domain.exceptions import ConflictError, EntityNotFound, InvalidInput


class InvalidStatus(InvalidInput):
    default_message = "Invalid status"


class BookingNotFound(EntityNotFound):
    default_message = "Booking not found"


class TrackingNumberGenerationExhausted(ConflictError):
    default_message = "Could not generate a unique tracking number, please retry"
