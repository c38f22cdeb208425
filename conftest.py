from datetime import timedelta

import pytest
from django.utils import timezone

from DevEventHub.database import reset_connection_cache


@pytest.fixture(autouse=True)
def _fresh_connection_cache():
    reset_connection_cache()
    yield
    reset_connection_cache()


@pytest.fixture
def event_data():
    """Valid payload for a new event, dated ten days from today."""
    return {
        'title': 'Python Web Summit',
        'description': 'A day of talks about the Python web ecosystem.',
        'overview': 'Frameworks, deployment and everything in between.',
        'image': '/images/event1.png',
        'venue': 'Convention Center',
        'location': 'Lisbon, Portugal',
        'date': (timezone.localdate() + timedelta(days=10)).isoformat(),
        'time': '09:30',
        'mode': 'hybrid',
        'audience': 'Python developers',
        'agenda': ['Registration', 'Keynote', 'Workshops'],
        'organizer': 'Python Portugal',
        'tags': ['python', 'web'],
    }


@pytest.fixture
def make_event(event_data):
    from events.models import Event

    def _make_event(**overrides):
        event = Event(**{**event_data, **overrides})
        event.save()
        return event

    return _make_event
