"""
Contact Domain Events
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass
class ContactMessageReceived(DomainEvent):
    """
    Event: a visitor submitted the contact form

    Triggers:
    - Send "message received" confirmation to the visitor
    """
    message_id: int

    def to_dict(self) -> dict:
        return {**super().to_dict(), 'message_id': self.message_id}
