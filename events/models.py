from django.db import models

from authority.constants import CoordinatorType
from authority.models import ScopedResource


class Event(ScopedResource):
    TYPE_PRACTICE = 'PRACTICE'
    TYPE_GAME = 'GAME'
    TYPE_MEETING = 'MEETING'
    TYPE_CUSTOM = 'CUSTOM'
    EVENT_TYPE_CHOICES = [
        (TYPE_PRACTICE, 'Practice'),
        (TYPE_GAME, 'Game'),
        (TYPE_MEETING, 'Meeting'),
        (TYPE_CUSTOM, 'Custom'),
    ]

    team = models.ForeignKey('team.Team', on_delete=models.CASCADE, related_name='events')
    title = models.CharField(max_length=200)
    event_type = models.CharField(max_length=10, choices=EVENT_TYPE_CHOICES, default=TYPE_PRACTICE)
    start = models.DateTimeField()
    end = models.DateTimeField()
    location = models.CharField(max_length=255, blank=True)
    notes = models.TextField(blank=True)
    coordinator_type = models.CharField(max_length=2, choices=CoordinatorType.choices, null=True, blank=True)

    class Meta:
        ordering = ['start']

    def __str__(self):
        return f"{self.title} ({self.start:%Y-%m-%d})"


class CalendarSettings(models.Model):
    team = models.OneToOneField('team.Team', on_delete=models.CASCADE, related_name='calendar_settings')
    assistants_can_add_meetings = models.BooleanField(default=True)
    assistants_can_add_practices = models.BooleanField(default=False)

    def __str__(self):
        return f"Calendar settings for {self.team}"
