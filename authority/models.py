from django.conf import settings
from django.db import models
from django.utils import timezone

from .constants import Unit, Visibility


class AuditLog(models.Model):
    team = models.ForeignKey('team.Team', on_delete=models.CASCADE, related_name='audit_logs')
    actor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='audit_logs')
    action = models.CharField(max_length=100)
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.team} - {self.action}"


class ScopedResource(models.Model):
    """
    Fields shared by events, documents and inventory. The first scoping
    dimension that is set decides admission: player ids, then position
    groups, then unit.
    """
    visibility = models.CharField(max_length=10, choices=Visibility.choices, default=Visibility.PLAYERS)
    scoped_unit = models.CharField(max_length=20, choices=Unit.choices, null=True, blank=True)
    scoped_position_groups = models.JSONField(null=True, blank=True)
    scoped_player_ids = models.JSONField(null=True, blank=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, related_name='+')
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def apply_scoping(self, scoping):
        for field, value in scoping.as_fields().items():
            setattr(self, field, value)
