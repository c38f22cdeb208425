from django.db import models


class NotificationLog(models.Model):
    """
    Logs all notifications sent through the system.
    One row per delivery attempt, successful or not.
    """
    NOTIFICATION_TYPES = [
        ('booking_confirmation', 'Booking confirmation'),
    ]

    booking = models.ForeignKey('events.Booking', on_delete=models.SET_NULL, null=True, blank=True)
    event = models.ForeignKey('events.Event', on_delete=models.CASCADE)
    email = models.EmailField()
    notification_type = models.CharField(max_length=30, choices=NOTIFICATION_TYPES)
    sent_at = models.DateTimeField(auto_now_add=True)
    success = models.BooleanField(default=True)
    error_message = models.TextField(blank=True)

    class Meta:
        ordering = ['-sent_at']

    def __str__(self):
        status = "sent" if self.success else "failed"
        return f"{self.get_notification_type_display()} to {self.email} for {self.event.title} ({status})"
