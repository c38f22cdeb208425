from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(error_messages={'blank': 'Event title is required', 'null': 'Event title is required'}, max_length=200)),
                ('slug', models.SlugField(error_messages={'blank': 'Slug is required', 'null': 'Slug is required'}, max_length=250, unique=True)),
                ('description', models.TextField(error_messages={'blank': 'Event description is required', 'null': 'Event description is required'})),
                ('overview', models.TextField(error_messages={'blank': 'Event overview is required', 'null': 'Event overview is required'})),
                ('image', models.CharField(error_messages={'blank': 'Event image is required', 'null': 'Event image is required'}, max_length=500)),
                ('venue', models.CharField(error_messages={'blank': 'Event venue is required', 'null': 'Event venue is required'}, max_length=200)),
                ('location', models.CharField(error_messages={'blank': 'Event location is required', 'null': 'Event location is required'}, max_length=200)),
                ('date', models.CharField(error_messages={'blank': 'Event date is required', 'null': 'Event date is required'}, max_length=10)),
                ('time', models.CharField(error_messages={'blank': 'Event time is required', 'null': 'Event time is required'}, max_length=20)),
                ('mode', models.CharField(choices=[('online', 'Online'), ('offline', 'Offline'), ('hybrid', 'Hybrid')], error_messages={'blank': 'Event mode is required', 'invalid_choice': 'Mode must be online, offline, or hybrid', 'null': 'Event mode is required'}, max_length=10)),
                ('audience', models.CharField(error_messages={'blank': 'Event audience is required', 'null': 'Event audience is required'}, max_length=200)),
                ('agenda', models.JSONField(default=list, error_messages={'blank': 'Agenda must contain at least one item', 'null': 'Agenda must contain at least one item'})),
                ('organizer', models.CharField(error_messages={'blank': 'Event organizer is required', 'null': 'Event organizer is required'}, max_length=200)),
                ('tags', models.JSONField(default=list, error_messages={'blank': 'Tags must contain at least one item', 'null': 'Tags must contain at least one item'})),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['date', 'time'],
            },
        ),
        migrations.CreateModel(
            name='Booking',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('email', models.EmailField(error_messages={'blank': 'Email is required', 'invalid': 'Please provide a valid email address', 'null': 'Email is required'}, max_length=254)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('event', models.ForeignKey(error_messages={'blank': 'Event ID is required', 'null': 'Event ID is required'}, on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to='events.event')),
            ],
            options={
                'ordering': ['-created_at'],
                'constraints': [models.UniqueConstraint(fields=('event', 'email'), name='unique_booking_per_event_email')],
            },
        ),
    ]
