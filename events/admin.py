# events/admin.py
from django.contrib import admin
from .forms import EventForm
from .models import Event, Booking


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    readonly_fields = ('email', 'created_at')
    can_delete = True


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    form = EventForm
    list_display = ('title', 'date', 'time', 'mode', 'location', 'organizer', 'created_at')
    list_filter = ('mode', 'date')
    search_fields = ('title', 'slug', 'organizer', 'location')
    readonly_fields = ('slug', 'created_at', 'updated_at')
    inlines = [BookingInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('title', 'slug', 'description', 'overview', 'image', 'organizer', 'audience')
        }),
        ('Date & Place', {
            'fields': ('date', 'time', 'mode', 'venue', 'location')
        }),
        ('Programme', {
            'fields': ('agenda', 'tags')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ('email', 'event', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('email', 'event__title', 'event__slug')
    readonly_fields = ('created_at', 'updated_at')
    list_select_related = ('event',)
