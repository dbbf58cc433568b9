from django.conf import settings
from django.db import models
from django.utils import timezone

from .templates import DEFENSE, OFFENSE, SPECIAL_TEAMS


class FormationTemplate(models.Model):
    SIDE_CHOICES = [
        (OFFENSE, 'Offense'),
        (DEFENSE, 'Defense'),
        (SPECIAL_TEAMS, 'Special Teams'),
    ]

    team = models.ForeignKey('team.Team', on_delete=models.CASCADE, related_name='formation_templates')
    name = models.CharField(max_length=100)
    side = models.CharField(max_length=20, choices=SIDE_CHOICES)
    shapes = models.JSONField(default=list, help_text="Eleven {kind, label, x, y} shapes in canvas percent.")
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, related_name='+')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = ('team', 'name')
        ordering = ['side', 'name']

    def __str__(self):
        return f"{self.name} ({self.get_side_display()})"
