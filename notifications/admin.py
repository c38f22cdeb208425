from django.contrib import admin
from .models import NotificationLog


@admin.register(NotificationLog)
class NotificationLogAdmin(admin.ModelAdmin):
    list_display = ('email', 'event', 'notification_type', 'success', 'sent_at')
    list_filter = ('notification_type', 'success', 'sent_at')
    search_fields = ('email', 'event__title')
    readonly_fields = ('sent_at',)
