from datetime import timedelta

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand
from django.utils import timezone

from events.models import Event
from events.services import EventService

DEMO_EVENTS = [
    {
        'title': 'React Summit US 2025',
        'description': 'The biggest React conference in the US, with talks from core team members.',
        'overview': 'Two days of talks, workshops and networking around React and its ecosystem.',
        'image': '/images/event1.png',
        'venue': 'Pier 48',
        'location': 'San Francisco, CA, USA',
        'time': '09:00',
        'mode': 'hybrid',
        'audience': 'Frontend developers',
        'agenda': ['Keynote', 'Server components deep dive', 'Performance panel'],
        'organizer': 'GitNation',
        'tags': ['react', 'frontend', 'javascript'],
        'days_ahead': 14,
    },
    {
        'title': 'KubeCon + CloudNativeCon Europe',
        'description': 'The flagship conference of the Cloud Native Computing Foundation.',
        'overview': 'Adopters and technologists from leading open source and cloud native communities.',
        'image': '/images/event2.png',
        'venue': 'Messe Wien',
        'location': 'Vienna, Austria',
        'time': '10:00',
        'mode': 'offline',
        'audience': 'Platform engineers',
        'agenda': ['Opening keynote', 'Maintainer track', 'Lightning talks'],
        'organizer': 'CNCF',
        'tags': ['kubernetes', 'cloud', 'devops'],
        'days_ahead': 30,
    },
    {
        'title': 'Hack the Future: AI Hackathon',
        'description': 'A 48-hour hackathon building with open models.',
        'overview': 'Form a team, pick a challenge and ship a working demo in a weekend.',
        'image': '/images/event3.png',
        'venue': 'Online',
        'location': 'Worldwide',
        'time': '6:00 PM',
        'mode': 'online',
        'audience': 'Developers of all levels',
        'agenda': ['Team formation', 'Hacking', 'Demos and judging'],
        'organizer': 'DevEvent Hub',
        'tags': ['ai', 'hackathon'],
        'days_ahead': 45,
    },
    {
        'title': 'PyCon Meetup: Async Python',
        'description': 'An evening meetup about asyncio in production.',
        'overview': 'Three short talks followed by pizza and open discussion.',
        'image': '/images/event4.png',
        'venue': 'Tech Hub Community Space',
        'location': 'Berlin, Germany',
        'time': '18:30',
        'mode': 'offline',
        'audience': 'Python developers',
        'agenda': ['Intro to asyncio', 'Structured concurrency', 'Q&A'],
        'organizer': 'Python Berlin',
        'tags': ['python', 'meetup'],
        'days_ahead': 7,
    },
]


class Command(BaseCommand):
    help = 'Set up featured demo events for local development'

    def handle(self, *args, **options):
        self.stdout.write('Setting up demo events...')
        today = timezone.localdate()
        created = 0

        for demo in DEMO_EVENTS:
            data = {key: value for key, value in demo.items() if key != 'days_ahead'}
            if Event.objects.filter(title=data['title']).exists():
                self.stdout.write(f"  skipping '{data['title']}' (already exists)")
                continue

            data['date'] = (today + timedelta(days=demo['days_ahead'])).isoformat()
            try:
                event = EventService.create_event(data)
            except ValidationError as e:
                self.stderr.write(self.style.ERROR(f"  could not create '{data['title']}': {e.messages}"))
                continue

            created += 1
            self.stdout.write(f"  created '{event.title}' at /events/{event.slug}/")

        self.stdout.write(self.style.SUCCESS(f'Demo data ready: {created} event(s) created.'))
