# events/views.py
from django.conf import settings
from django.contrib import messages
from django.core.exceptions import ValidationError
from django.core.paginator import Paginator
from django.shortcuts import render, redirect, get_object_or_404

from .forms import BookingForm
from .models import Event
from .services import EventService, BookingService


def home(request):
    """Marketing page with the featured events."""
    events = EventService.list_featured(settings.FEATURED_EVENTS_LIMIT)
    return render(request, 'home.html', {'events': events})


def list_events(request):
    """List all upcoming events, optionally filtered by tag or mode."""
    events = Event.objects.upcoming()

    mode = request.GET.get('mode')
    if mode in dict(Event.MODE_CHOICES):
        events = events.filter(mode=mode)

    tag = request.GET.get('tag', '').strip()
    if tag:
        events = [event for event in events if tag.lower() in (t.lower() for t in event.tags)]

    paginator = Paginator(events, 12)
    page_obj = paginator.get_page(request.GET.get('page'))

    return render(request, 'events/list.html', {
        'page_obj': page_obj,
        'events': page_obj.object_list,
        'mode': mode,
        'tag': tag,
    })


def event_detail(request, slug):
    """Display event details and handle bookings."""
    event = get_object_or_404(Event, slug=slug)

    if request.method == 'POST':
        form = BookingForm(request.POST)
        if form.is_valid():
            try:
                BookingService.create_booking(event.pk, form.cleaned_data['email'])
            except ValidationError as e:
                for message in e.messages:
                    form.add_error(None, message)
            else:
                messages.success(request, f'You are booked for "{event.title}". See you there!')
                return redirect('events:detail', slug=event.slug)
        messages.error(request, 'Booking failed. Please check the details.')
    else:
        form = BookingForm()

    return render(request, 'events/detail.html', {
        'event': event,
        'form': form,
        'booking_count': BookingService.get_booking_count(event),
    })
