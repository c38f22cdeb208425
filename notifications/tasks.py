# notifications/tasks.py
import logging

from celery import shared_task
from django.conf import settings

from .utils import log_notification, render_email_template, send_email

logger = logging.getLogger(__name__)

BOOKING_CONFIRMATION_TEMPLATE = 'notifications/email/booking_confirmation.html'


@shared_task
def send_booking_confirmation(booking_id):
    """Email the booker a confirmation. Returns True when the email went out."""
    from events.models import Booking

    try:
        booking = Booking.objects.select_related('event').get(id=booking_id)
    except Booking.DoesNotExist:
        logger.error(f"Booking {booking_id} not found")
        return False

    event = booking.event
    context = _get_booking_context(booking)
    subject = f"Booking confirmed: {event.title}"
    fallback = (
        f"You're booked for {event.title} on {event.date} at {event.time}, "
        f"{event.venue}, {event.location}."
    )
    rendered = render_email_template(BOOKING_CONFIRMATION_TEMPLATE, context, fallback_text=fallback)

    try:
        send_email(booking.email, subject, rendered['text_message'], rendered['html_message'])
    except Exception as e:
        log_notification(event, booking.email, booking=booking, success=False, error_message=str(e))
        return False

    log_notification(event, booking.email, booking=booking)
    return True


def _get_booking_context(booking):
    """Get context for the booking confirmation template."""
    event = booking.event
    return {
        'booking': booking,
        'event': event,
        'recipient_email': booking.email,
        'event_url': f"{settings.SITE_URL}/events/{event.slug}/",
    }
