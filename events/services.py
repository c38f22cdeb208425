# events/services.py
import logging
from typing import Dict, Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from DevEventHub.database import connect_db
from .models import Event, Booking

logger = logging.getLogger(__name__)

EVENT_FIELDS = (
    'title', 'description', 'overview', 'image', 'venue', 'location',
    'date', 'time', 'mode', 'audience', 'agenda', 'organizer', 'tags',
)

DUPLICATE_BOOKING_MESSAGE = "You have already booked this event with this email address."
SLUG_TAKEN_MESSAGE = "An event with this slug already exists. Please try again."


class EventService:
    """Handles event creation, updates, and deletion."""

    @staticmethod
    def create_event(event_data: Dict) -> Event:
        """Create an event; raises ValidationError on invalid data."""
        connect_db()
        event = Event(**{field: value for field, value in event_data.items() if field in EVENT_FIELDS})
        EventService._save(event)
        logger.info(f"Created event {event.pk} with slug '{event.slug}'")
        return event

    @staticmethod
    def update_event(event: Event, event_data: Dict) -> Event:
        """Update an existing event through the same validation hooks."""
        connect_db()
        for field, value in event_data.items():
            if field in EVENT_FIELDS:
                setattr(event, field, value)
        EventService._save(event)
        return event

    @staticmethod
    def _save(event: Event):
        # Another request can claim the slug between the lookup and the insert;
        # save() picks a fresh slug on the second attempt.
        for attempt in range(2):
            try:
                with transaction.atomic():
                    event.save()
                return
            except IntegrityError:
                if attempt:
                    raise ValidationError({'slug': SLUG_TAKEN_MESSAGE})
                logger.warning(f"Slug '{event.slug}' was taken concurrently, regenerating")

    @staticmethod
    @transaction.atomic
    def delete_event(event: Event):
        """Delete an event together with its bookings."""
        logger.info(f"Deleting event {event.pk} ('{event.slug}')")
        event.delete()

    @staticmethod
    def list_featured(limit: Optional[int] = None) -> QuerySet:
        connect_db()
        return Event.objects.featured(limit or settings.FEATURED_EVENTS_LIMIT)

    @staticmethod
    def serialize(event: Event, include_booking_count: bool = False) -> Dict:
        data = {field: getattr(event, field) for field in EVENT_FIELDS}
        data.update({
            'id': event.pk,
            'slug': event.slug,
            'created_at': event.created_at.isoformat() if event.created_at else None,
            'updated_at': event.updated_at.isoformat() if event.updated_at else None,
        })
        if include_booking_count:
            data['booking_count'] = BookingService.get_booking_count(event)
        return data


class BookingService:
    """Handles event bookings."""

    @staticmethod
    def create_booking(event_id, email: str) -> Booking:
        """
        Book ``email`` onto the event with ``event_id``.

        Raises ValidationError when the email is invalid, the event does not
        exist, or the address already holds a booking for the event.
        """
        connect_db()
        booking = Booking(event_id=event_id, email=email)
        try:
            with transaction.atomic():
                booking.save()
        except IntegrityError:
            # Lost a race with a concurrent booking for the same pair
            logger.warning(f"Duplicate booking for event {event_id} rejected by the database")
            raise ValidationError({'email': DUPLICATE_BOOKING_MESSAGE})
        except ValidationError as e:
            logger.info(f"Booking for event {event_id} rejected: {e.messages}")
            raise

        logger.info(f"Booking {booking.pk} created for event {event_id}")

        from notifications.services import NotificationService
        NotificationService.send_booking_confirmation(booking)
        return booking

    @staticmethod
    def get_booking_count(event: Event) -> int:
        return Booking.objects.filter(event=event).count()

    @staticmethod
    def serialize(booking: Booking) -> Dict:
        return {
            'id': booking.pk,
            'event_id': booking.event_id,
            'email': booking.email,
            'created_at': booking.created_at.isoformat() if booking.created_at else None,
        }
