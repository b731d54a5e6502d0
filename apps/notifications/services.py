"""Email notification services.

Each email is a Django template under ``notifications/emails/``; the
plain-text part is the rendered HTML with the tags stripped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.template.loader import render_to_string  # type: ignore
from django.utils.html import strip_tags  # type: ignore

if TYPE_CHECKING:  # pragma: no cover
    from apps.bookings.models import Booking
    from apps.contact.models import ContactMessage

logger = logging.getLogger(__name__)

SUPPORT_PHONE = "+1 (416) 555-0123"


# ============================================================================
# EMAIL NOTIFICATIONS
# ============================================================================

def send_email_notification(
    recipient_email: str,
    subject: str,
    template_name: str,
    context: dict[str, Any],
) -> bool:
    """
    Render ``template_name`` with ``context`` and mail it to one recipient.

    Returns:
        bool: True when the message was handed to the mail backend
    """
    try:
        html_message = render_to_string(template_name, context)
        send_mail(
            subject=subject,
            message=strip_tags(html_message),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient_email],
            html_message=html_message,
            fail_silently=False,
        )

        logger.info(f"Email sent successfully to {recipient_email}: {subject}")
        return True

    except Exception as e:
        logger.error(f"Failed to send email to {recipient_email}: {e}", exc_info=True)
        return False


def _tracking_link() -> str:
    return f"{settings.FRONTEND_URL.rstrip('/')}/tracking.html"


def send_booking_confirmation_email(booking: "Booking") -> bool:
    """Booking confirmation with the tracking number, sent to the sender."""
    return send_email_notification(
        recipient_email=booking.sender_email,
        subject=f"Booking Confirmed - Tracking #{booking.tracking_number}",
        template_name="notifications/emails/booking_confirmation.html",
        context={"booking": booking, "tracking_url": _tracking_link()},
    )


def send_contact_confirmation_email(message: "ContactMessage") -> bool:
    return send_email_notification(
        recipient_email=message.email,
        subject="Message Received - Pan Logistics",
        template_name="notifications/emails/contact_confirmation.html",
        context={"contact_message": message, "support_phone": SUPPORT_PHONE},
    )


def send_status_update_email(booking: "Booking") -> bool:
    """Tell the sender their shipment moved to a new status."""
    return send_email_notification(
        recipient_email=booking.sender_email,
        subject=f"Shipment Update - {booking.tracking_number}",
        template_name="notifications/emails/status_update.html",
        context={"booking": booking, "tracking_url": _tracking_link()},
    )
