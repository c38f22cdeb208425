from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

from events import views as event_views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', event_views.home, name='home'),
    path('events/', include('events.urls')),
    path('api/', include('events.api_urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
