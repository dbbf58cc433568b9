from django.db import models
from django.utils import timezone

from authority.constants import Unit


class DepthChartEntry(models.Model):
    # Empty formation / special team type are stored as '' so the unique key
    # holds on every database backend
    team = models.ForeignKey('team.Team', on_delete=models.CASCADE, related_name='depth_chart_entries')
    unit = models.CharField(max_length=20, choices=Unit.choices)
    position = models.CharField(max_length=20)
    string = models.PositiveSmallIntegerField()
    player = models.ForeignKey('team.Player', on_delete=models.CASCADE, related_name='depth_chart_entries')
    formation = models.CharField(max_length=50, blank=True, default='')
    special_team_type = models.CharField(max_length=30, blank=True, default='')
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = ('team', 'unit', 'position', 'string', 'formation', 'special_team_type')
        ordering = ['unit', 'special_team_type', 'position', 'string']
        verbose_name_plural = 'Depth Chart Entries'

    def __str__(self):
        return f"{self.team} {self.unit} {self.position}{self.string}: {self.player}"


class PositionLabel(models.Model):
    team = models.ForeignKey('team.Team', on_delete=models.CASCADE, related_name='position_labels')
    unit = models.CharField(max_length=20, choices=Unit.choices)
    position = models.CharField(max_length=20)
    special_team_type = models.CharField(max_length=30, blank=True, default='')
    label = models.CharField(max_length=30)

    class Meta:
        unique_together = ('team', 'unit', 'position', 'special_team_type')

    @property
    def lookup_key(self):
        if self.special_team_type:
            return f"{self.unit}-{self.position}-{self.special_team_type}"
        return f"{self.unit}-{self.position}"

    def __str__(self):
        return f"{self.lookup_key}: {self.label}"
