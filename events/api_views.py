import logging

from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.db import DatabaseError
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from DevEventHub.database import connect_db
from .models import Event
from .services import EventService, BookingService

logger = logging.getLogger(__name__)


def validation_error_response(error):
    """Turn a model ValidationError into a 400 with a field -> messages map."""
    if hasattr(error, 'error_dict'):
        errors = error.message_dict
    else:
        errors = {'__all__': error.messages}
    return Response({'errors': errors}, status=status.HTTP_400_BAD_REQUEST)


def non_object_body_response():
    return Response(
        {'errors': {'__all__': ['Request body must be a JSON object']}},
        status=status.HTTP_400_BAD_REQUEST,
    )


class EventListAPIView(APIView):

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAdminUser()]
        return [AllowAny()]

    def get(self, request):
        connect_db()
        events = Event.objects.all()

        mode = request.query_params.get('mode')
        if mode:
            events = events.filter(mode=mode)

        tag = request.query_params.get('tag', '').strip().lower()
        results = [
            EventService.serialize(event) for event in events
            if not tag or tag in (t.lower() for t in event.tags)
        ]
        return Response({'count': len(results), 'results': results})

    def post(self, request):
        if not isinstance(request.data, dict):
            return non_object_body_response()

        try:
            event = EventService.create_event(request.data)
        except ValidationError as e:
            return validation_error_response(e)

        return Response(EventService.serialize(event), status=status.HTTP_201_CREATED)


class EventDetailAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, slug):
        connect_db()
        event = get_object_or_404(Event, slug=slug)
        return Response(EventService.serialize(event, include_booking_count=True))


class EventBookingAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request, slug):
        connect_db()
        event = get_object_or_404(Event, slug=slug)

        if not isinstance(request.data, dict):
            return non_object_body_response()

        email = request.data.get('email')
        if not email:
            return Response({'errors': {'email': ['Email is required']}}, status=status.HTTP_400_BAD_REQUEST)

        try:
            booking = BookingService.create_booking(event.pk, email)
        except ValidationError as e:
            return validation_error_response(e)

        return Response({
            'message': 'Booking created successfully',
            'booking': BookingService.serialize(booking),
            'booking_count': BookingService.get_booking_count(event),
        }, status=status.HTTP_201_CREATED)


class HealthCheckAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        try:
            connection = connect_db()
        except (DatabaseError, ImproperlyConfigured) as e:
            logger.error(f"Health check failed: {e}")
            return Response({'status': 'error', 'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response({'status': 'ok', 'database': connection.vendor})
