from django.urls import path
from .api_views import EventListAPIView, EventDetailAPIView, EventBookingAPIView, HealthCheckAPIView

urlpatterns = [
    path('health/', HealthCheckAPIView.as_view(), name='health_api'),
    path('events/', EventListAPIView.as_view(), name='event_list_api'),
    path('events/<slug:slug>/', EventDetailAPIView.as_view(), name='event_detail_api'),
    path('events/<slug:slug>/bookings/', EventBookingAPIView.as_view(), name='event_bookings_api'),
]
