# events/models.py
import logging
import random
import re
import time
import uuid
from datetime import date

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone
from django.utils.text import slugify

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}\Z')
TIME_PATTERN = re.compile(
    r'^(?P<hours>[0-9]{1,2}):(?P<minutes>[0-9]{2})(?::[0-9]{2})?\s*(?P<meridiem>[AaPp]\.?[Mm]\.?)?\Z'
)

INVALID_DATE_FORMAT = "Invalid date format. Please provide date as YYYY-MM-DD."
INVALID_CALENDAR_DATE = "Invalid date. Please provide a real calendar date in YYYY-MM-DD format."
INVALID_TIME_FORMAT = "Invalid time format. Use HH:MM format (24-hour)."


def _required(message):
    return {'blank': message, 'null': message}


def validate_event_date(value):
    """Check that ``value`` is a real calendar date written as YYYY-MM-DD."""
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        raise ValidationError(INVALID_DATE_FORMAT)

    year, month, day = (int(part) for part in value.split('-'))
    try:
        date(year, month, day)
    except ValueError:
        raise ValidationError(INVALID_CALENDAR_DATE)
    return value


def normalize_event_time(value):
    """
    Normalize a time string to zero-padded 24-hour HH:MM.

    Accepts "9:05", "09:05", "21:05:00" and 12-hour values with an AM/PM
    suffix such as "9:05 pm". Minutes must always be two digits.
    """
    match = TIME_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValidationError(INVALID_TIME_FORMAT)

    hours = int(match.group('hours'))
    minutes = int(match.group('minutes'))
    meridiem = match.group('meridiem')

    if meridiem:
        if not 1 <= hours <= 12:
            raise ValidationError(INVALID_TIME_FORMAT)
        is_pm = meridiem[0].lower() == 'p'
        hours = hours % 12 + (12 if is_pm else 0)

    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValidationError(INVALID_TIME_FORMAT)
    return f"{hours:02d}:{minutes:02d}"


class TrackedFieldsMixin:
    """Remembers the values a row was loaded with, so saves can tell what changed."""

    tracked_fields = ()

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_values = {
            name: value for name, value in zip(field_names, values) if name in cls.tracked_fields
        }
        return instance

    def is_modified(self, field_name):
        if self._state.adding:
            return True
        loaded = getattr(self, '_loaded_values', {})
        if field_name not in loaded:
            return True
        return loaded[field_name] != getattr(self, field_name)

    def _remember_saved_values(self):
        self._loaded_values = {name: getattr(self, name) for name in self.tracked_fields}


class EventManager(models.Manager):
    """Custom manager for Event model with common queries."""

    def upcoming(self):
        """Get events scheduled for today or later."""
        today = timezone.localdate().isoformat()
        return self.filter(date__gte=today).order_by('date', 'time')

    def featured(self, limit=None):
        """Get the events shown on the home page."""
        events = self.upcoming()
        if limit:
            events = events[:limit]
        return events


class Event(TrackedFieldsMixin, models.Model):
    MODE_CHOICES = [
        ('online', 'Online'),
        ('offline', 'Offline'),
        ('hybrid', 'Hybrid'),
    ]

    tracked_fields = ('title', 'date', 'time')

    title = models.CharField(max_length=200, error_messages=_required("Event title is required"))
    slug = models.SlugField(max_length=250, unique=True, error_messages=_required("Slug is required"))
    description = models.TextField(error_messages=_required("Event description is required"))
    overview = models.TextField(error_messages=_required("Event overview is required"))
    image = models.CharField(max_length=500, error_messages=_required("Event image is required"))
    venue = models.CharField(max_length=200, error_messages=_required("Event venue is required"))
    location = models.CharField(max_length=200, error_messages=_required("Event location is required"))

    # Stored as strings: date is YYYY-MM-DD, time is 24-hour HH:MM
    date = models.CharField(max_length=10, error_messages=_required("Event date is required"))
    time = models.CharField(max_length=20, error_messages=_required("Event time is required"))

    mode = models.CharField(
        max_length=10,
        choices=MODE_CHOICES,
        error_messages={
            **_required("Event mode is required"),
            'invalid_choice': "Mode must be online, offline, or hybrid",
        },
    )
    audience = models.CharField(max_length=200, error_messages=_required("Event audience is required"))
    agenda = models.JSONField(default=list, error_messages=_required("Agenda must contain at least one item"))
    organizer = models.CharField(max_length=200, error_messages=_required("Event organizer is required"))
    tags = models.JSONField(default=list, error_messages=_required("Tags must contain at least one item"))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EventManager()

    class Meta:
        ordering = ['date', 'time']

    def __str__(self):
        return f"{self.title} - {self.date} {self.time}"

    def save(self, *args, **kwargs):
        self._strip_text_fields()
        if self.is_modified('title') or not self.slug:
            self.slug = self.generate_unique_slug()
        self.full_clean()
        super().save(*args, **kwargs)
        self._remember_saved_values()

    def _strip_text_fields(self):
        for name in ('title', 'description', 'overview', 'venue', 'location', 'audience', 'organizer'):
            value = getattr(self, name)
            if isinstance(value, str):
                setattr(self, name, value.strip())

    def generate_unique_slug(self):
        """Slugify the title, appending a timestamp and random suffix on collision."""
        base_slug = slugify(self.title or '')
        if not base_slug:  # If title has no valid characters for slug
            base_slug = f"event-{uuid.uuid4().hex[:8]}"

        slug = base_slug
        while Event.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base_slug}-{int(time.time() * 1000)}-{random.randint(0, 9999)}"
            logger.info(f"Slug '{base_slug}' already taken, retrying with '{slug}'")
        return slug

    def clean(self):
        errors = {}

        if self.is_modified('date') and self.date:
            try:
                validate_event_date(self.date)
            except ValidationError as e:
                errors['date'] = e.messages

        if self.is_modified('time') and self.time:
            try:
                self.time = normalize_event_time(self.time)
            except ValidationError as e:
                errors['time'] = e.messages

        for name, label in (('agenda', 'Agenda'), ('tags', 'Tags')):
            items = getattr(self, name)
            if not items:
                continue  # reported by field validation
            if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
                errors[name] = f"{label} must be a list of strings"
                continue
            cleaned = [item.strip() for item in items if item.strip()]
            if not cleaned:
                errors[name] = f"{label} must contain at least one item"
            setattr(self, name, cleaned)

        if errors:
            raise ValidationError(errors)

    @property
    def starts_on(self):
        """The event date as a ``datetime.date``."""
        return date.fromisoformat(self.date)


class Booking(TrackedFieldsMixin, models.Model):
    tracked_fields = ('event_id',)

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name='bookings',
        db_index=True,
        error_messages=_required("Event ID is required"),
    )
    email = models.EmailField(
        error_messages={
            **_required("Email is required"),
            'invalid': "Please provide a valid email address",
        },
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['event', 'email'], name='unique_booking_per_event_email'),
        ]

    def __str__(self):
        return f"{self.email} -> {self.event_id}"

    def save(self, *args, **kwargs):
        if isinstance(self.email, str):
            self.email = self.email.strip().lower()

        if self.event_id is not None and self.is_modified('event_id'):
            if not Event.objects.filter(pk=self.event_id).exists():
                raise ValidationError({'event': f"Event with ID {self.event_id} does not exist"})

        self.full_clean()
        super().save(*args, **kwargs)
        self._remember_saved_values()
