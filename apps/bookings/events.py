"""
Booking Domain Events

Published on the message bus after the booking write commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass
class BookingCreated(DomainEvent):
    """
    Event: a shipment was booked

    Triggers:
    - Send booking confirmation email to the sender
    """
    booking_id: int
    tracking_number: str

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            'booking_id': self.booking_id,
            'tracking_number': self.tracking_number,
        }


@dataclass
class BookingStatusChanged(DomainEvent):
    """
    Event: staff moved a shipment to another status

    Triggers:
    - Send status update email to the sender
    """
    booking_id: int
    previous_status: str
    status: str

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            'booking_id': self.booking_id,
            'previous_status': self.previous_status,
            'status': self.status,
        }
