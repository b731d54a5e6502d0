"""
Base Domain Classes

Domain events represent something that happened in one of the
bounded contexts (bookings, contact). They are collected while a write
is in progress and published once the database transaction commits.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass
class DomainEvent:
    """
    Base class for domain events

    Subclasses add the identifiers their handlers need to reload the
    affected row; events never carry mutable model instances.
    """
    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), kw_only=True
    )

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict:
        """Convert event to dictionary for serialization"""
        return {
            'event_id': str(self.event_id),
            'event_type': self.name,
            'occurred_at': self.occurred_at.isoformat(),
        }
