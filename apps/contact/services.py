"""Contact inbox services."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import EntityNotFound
from shared.infrastructure.gateway import Page, TableGateway

from .events import ContactMessageReceived
from .models import ContactMessage

logger = logging.getLogger(__name__)

messages: TableGateway[ContactMessage] = TableGateway(ContactMessage)


class MessageNotFound(EntityNotFound):
    default_message = "Message not found"


def submit_message(data: Mapping[str, Any]) -> ContactMessage:
    with DjangoUnitOfWork() as uow:
        row = messages.insert(
            {
                "name": data["name"],
                "email": data["email"].lower(),
                "phone": data.get("phone") or None,
                "subject": data.get("subject") or None,
                "message": data["message"],
                "is_read": False,
            }
        )
        uow.record(ContactMessageReceived(message_id=row.pk))
    logger.info(f"Contact message {row.pk} received")
    return row


def list_messages(page: int = 1, limit: int = 10, unread_only: bool = False) -> Page[ContactMessage]:
    queryset = messages.queryset()
    if unread_only:
        queryset = queryset.filter(is_read=False)
    return messages.paginate(queryset, page=page, limit=limit)


def unread_count() -> int:
    return messages.count(is_read=False)


def mark_as_read(message_id: int) -> ContactMessage:
    """Idempotent: marking an already read message again is not an error."""
    row = messages.update(message_id, {"is_read": True})
    if row is None:
        raise MessageNotFound()
    return row


def delete_message(message_id: int) -> None:
    if not messages.delete(message_id):
        raise MessageNotFound()
    logger.info(f"Contact message {message_id} deleted")
