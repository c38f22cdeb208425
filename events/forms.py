# events/forms.py
from django import forms
from .models import Event


def _split_items(value):
    """Split textarea input into a list, one item per line or comma."""
    items = []
    for line in (value or '').splitlines():
        items.extend(part.strip() for part in line.split(','))
    return [item for item in items if item]


class EventForm(forms.ModelForm):
    agenda = forms.CharField(
        widget=forms.Textarea(attrs={'rows': 4, 'class': 'form-control'}),
        help_text='One agenda item per line.',
    )
    tags = forms.CharField(
        widget=forms.TextInput(attrs={'class': 'form-control'}),
        help_text='Comma separated, e.g. "python, web".',
    )

    class Meta:
        model = Event
        fields = [
            'title', 'description', 'overview', 'image', 'venue', 'location',
            'date', 'time', 'mode', 'audience', 'agenda', 'organizer', 'tags',
        ]
        widgets = {
            'date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'time': forms.TimeInput(attrs={'type': 'time', 'class': 'form-control'}),
            'description': forms.Textarea(attrs={'rows': 4, 'class': 'form-control'}),
            'overview': forms.Textarea(attrs={'rows': 3, 'class': 'form-control'}),
            'title': forms.TextInput(attrs={'class': 'form-control'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk:
            self.initial['agenda'] = '\n'.join(self.instance.agenda or [])
            self.initial['tags'] = ', '.join(self.instance.tags or [])

    def clean_agenda(self):
        items = [line.strip() for line in self.cleaned_data['agenda'].splitlines() if line.strip()]
        if not items:
            raise forms.ValidationError("Agenda must contain at least one item")
        return items

    def clean_tags(self):
        items = _split_items(self.cleaned_data['tags'])
        if not items:
            raise forms.ValidationError("Tags must contain at least one item")
        return items


class BookingForm(forms.Form):
    email = forms.EmailField(
        error_messages={
            'required': "Email is required",
            'invalid': "Please provide a valid email address",
        },
        widget=forms.EmailInput(attrs={'class': 'form-control', 'placeholder': 'Enter your email address'}),
    )
