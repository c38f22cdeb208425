# notifications/services.py
import logging

logger = logging.getLogger(__name__)


class NotificationService:
    """Dispatches notification tasks."""

    @staticmethod
    def send_booking_confirmation(booking):
        """Queue a confirmation email for a new booking."""
        from notifications.tasks import send_booking_confirmation

        try:
            send_booking_confirmation.delay(booking.pk)
        except Exception as e:
            # Fallback for development without a reachable broker
            logger.warning(f"Could not queue confirmation for booking {booking.pk}, sending inline: {e}")
            send_booking_confirmation(booking.pk)
