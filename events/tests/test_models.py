import pytest
from django.core.exceptions import ValidationError

from events.models import (
    Booking,
    Event,
    INVALID_CALENDAR_DATE,
    INVALID_DATE_FORMAT,
    INVALID_TIME_FORMAT,
    normalize_event_time,
    validate_event_date,
)


@pytest.mark.parametrize('value, expected', [
    ('09:30', '09:30'),
    ('9:05', '09:05'),
    ('0:00', '00:00'),
    ('23:59', '23:59'),
    ('18:30:00', '18:30'),
    ('9:05 pm', '21:05'),
    ('12:00 AM', '00:00'),
    ('12:15 p.m.', '12:15'),
    (' 7:45 ', '07:45'),
])
def test_normalize_event_time_accepts_and_pads(value, expected):
    assert normalize_event_time(value) == expected


@pytest.mark.parametrize('value', ['9:5', '24:00', '12:60', '13:00 pm', 'noon', '', '0930', '123:45', '٠٩:٣٠'])
def test_normalize_event_time_rejects_bad_values(value):
    with pytest.raises(ValidationError) as exc:
        normalize_event_time(value)
    assert exc.value.messages == [INVALID_TIME_FORMAT]


def test_validate_event_date_accepts_leap_day():
    assert validate_event_date('2024-02-29') == '2024-02-29'


@pytest.mark.parametrize('value, message', [
    ('2023-02-30', INVALID_CALENDAR_DATE),
    ('2023-02-29', INVALID_CALENDAR_DATE),
    ('2023-13-01', INVALID_CALENDAR_DATE),
    ('2023/02/01', INVALID_DATE_FORMAT),
    ('23-02-01', INVALID_DATE_FORMAT),
    ('2023-2-1', INVALID_DATE_FORMAT),
    ('٢٠٩٩-٠١-١٥', INVALID_DATE_FORMAT),
    ('2099-01-15\n', INVALID_DATE_FORMAT),
])
def test_validate_event_date_rejects_bad_values(value, message):
    with pytest.raises(ValidationError) as exc:
        validate_event_date(value)
    assert exc.value.messages == [message]


@pytest.mark.django_db
class TestEventSlug:

    def test_slug_is_derived_from_title(self, make_event):
        event = make_event(title='  Hello, World! Dev-Fest 2025  ')

        assert event.title == 'Hello, World! Dev-Fest 2025'
        assert event.slug == 'hello-world-dev-fest-2025'

    def test_colliding_titles_get_unique_slugs(self, make_event):
        first = make_event(title='Django Day')
        second = make_event(title='Django Day')
        third = make_event(title='django day!')

        assert first.slug == 'django-day'
        assert second.slug.startswith('django-day-')
        assert third.slug.startswith('django-day-')
        assert len({first.slug, second.slug, third.slug}) == 3

    def test_title_without_slug_characters_falls_back(self, make_event):
        event = make_event(title='!!!')

        assert event.slug.startswith('event-')
        assert len(event.slug) == len('event-') + 8

    def test_slug_follows_title_changes(self, make_event):
        event = make_event(title='Old Name')

        event.title = 'New Name'
        event.save()

        assert event.slug == 'new-name'

    def test_slug_kept_when_other_fields_change(self, make_event):
        event = make_event(title='Stable Title')
        original_slug = event.slug

        event = Event.objects.get(pk=event.pk)
        event.venue = 'Another Hall'
        event.save()

        assert event.slug == original_slug

    def test_resaving_same_title_does_not_collide_with_itself(self, make_event):
        event = make_event(title='Only One')

        event = Event.objects.get(pk=event.pk)
        event.title = 'Only One'
        event.save()

        assert event.slug == 'only-one'


@pytest.mark.django_db
class TestEventValidation:

    def test_time_is_normalized_on_save(self, make_event):
        event = make_event(time='6:15 pm')

        event.refresh_from_db()
        assert event.time == '18:15'

    def test_impossible_date_is_rejected(self, make_event):
        with pytest.raises(ValidationError) as exc:
            make_event(date='2023-02-30')

        assert exc.value.message_dict['date'] == [INVALID_CALENDAR_DATE]
        assert not Event.objects.exists()

    def test_non_ascii_digits_in_date_are_rejected(self, make_event):
        with pytest.raises(ValidationError) as exc:
            make_event(date='٢٠٩٩-٠١-١٥')

        assert exc.value.message_dict['date'] == [INVALID_DATE_FORMAT]
        assert not Event.objects.upcoming().exists()

    def test_badly_formatted_time_is_rejected(self, make_event):
        with pytest.raises(ValidationError) as exc:
            make_event(time='9:5')

        assert exc.value.message_dict['time'] == [INVALID_TIME_FORMAT]

    def test_unknown_mode_is_rejected(self, make_event):
        with pytest.raises(ValidationError) as exc:
            make_event(mode='in-person')

        assert exc.value.message_dict['mode'] == ['Mode must be online, offline, or hybrid']

    def test_missing_required_field_uses_field_message(self, make_event):
        with pytest.raises(ValidationError) as exc:
            make_event(venue='   ')

        assert exc.value.message_dict['venue'] == ['Event venue is required']

    @pytest.mark.parametrize('field, value, message', [
        ('agenda', [], 'Agenda must contain at least one item'),
        ('agenda', ['  '], 'Agenda must contain at least one item'),
        ('tags', [], 'Tags must contain at least one item'),
        ('tags', 'python', 'Tags must be a list of strings'),
    ])
    def test_list_fields_need_items(self, make_event, field, value, message):
        with pytest.raises(ValidationError) as exc:
            make_event(**{field: value})

        assert exc.value.message_dict[field] == [message]

    def test_list_items_are_trimmed(self, make_event):
        event = make_event(tags=[' python ', '', 'web'])

        assert event.tags == ['python', 'web']

    def test_unchanged_date_is_not_revalidated(self, make_event):
        event = make_event()
        Event.objects.filter(pk=event.pk).update(date='2023-02-30')

        event = Event.objects.get(pk=event.pk)
        event.venue = 'Annex'
        event.save()

        event.refresh_from_db()
        assert event.venue == 'Annex'
        assert event.date == '2023-02-30'

    def test_changed_date_is_revalidated(self, make_event):
        event = make_event()

        event = Event.objects.get(pk=event.pk)
        event.date = '2025-04-31'
        with pytest.raises(ValidationError):
            event.save()


@pytest.mark.django_db
class TestEventManager:

    def test_upcoming_excludes_past_events_and_orders_by_date(self, make_event):
        make_event(title='Past', date='2020-01-01')
        later = make_event(title='Later', date='2999-06-01')
        sooner = make_event(title='Sooner', date='2999-01-01', time='10:00')
        same_day_earlier = make_event(title='Early Bird', date='2999-01-01', time='08:00')

        assert list(Event.objects.upcoming()) == [same_day_earlier, sooner, later]

    def test_featured_respects_limit(self, make_event):
        for day in range(1, 5):
            make_event(title=f'Event {day}', date=f'2999-01-0{day}')

        assert Event.objects.featured(2).count() == 2


@pytest.mark.django_db
class TestBooking:

    def test_email_is_trimmed_and_lowercased(self, make_event):
        event = make_event()
        booking = Booking(event=event, email='  Ada@Example.COM ')
        booking.save()

        assert booking.email == 'ada@example.com'

    def test_booking_requires_existing_event(self):
        booking = Booking(event_id=999999, email='ada@example.com')

        with pytest.raises(ValidationError) as exc:
            booking.save()

        assert exc.value.message_dict['event'] == ['Event with ID 999999 does not exist']
        assert not Booking.objects.exists()

    def test_duplicate_booking_is_rejected(self, make_event):
        event = make_event()
        Booking(event=event, email='ada@example.com').save()

        with pytest.raises(ValidationError):
            Booking(event=event, email='ADA@example.com ').save()

        assert Booking.objects.filter(event=event).count() == 1

    def test_same_email_can_book_different_events(self, make_event):
        first = make_event(title='First')
        second = make_event(title='Second')

        Booking(event=first, email='ada@example.com').save()
        Booking(event=second, email='ada@example.com').save()

        assert Booking.objects.filter(email='ada@example.com').count() == 2

    def test_invalid_email_is_rejected(self, make_event):
        event = make_event()

        with pytest.raises(ValidationError) as exc:
            Booking(event=event, email='not-an-email').save()

        assert exc.value.message_dict['email'] == ['Please provide a valid email address']

    def test_missing_event_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Booking(email='ada@example.com').save()

        assert exc.value.message_dict['event'] == ['Event ID is required']

    def test_deleting_event_removes_bookings(self, make_event):
        event = make_event()
        Booking(event=event, email='ada@example.com').save()

        event.delete()

        assert not Booking.objects.exists()
