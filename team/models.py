from django.conf import settings
from django.db import models
from django.utils import timezone

from authority.constants import CoordinatorType, OrganizationType, Role
from authority.hierarchy import normalize_position_groups


# ORGANIZATION
class Organization(models.Model):
    name = models.CharField(max_length=150)
    type = models.CharField(max_length=20, choices=OrganizationType.choices, default=OrganizationType.SCHOOL)

    def __str__(self):
        return self.name


# TEAM
class Team(models.Model):
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name='teams', null=True, blank=True)
    name = models.CharField(max_length=100)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, related_name='created_teams')
    created_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return self.name

    @property
    def organization_type(self):
        organization = self.organization
        return organization.type if organization is not None else None


# TEAM MEMBERS
class Membership(models.Model):
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='memberships')
    role = models.CharField(max_length=20, choices=Role.choices)
    coordinator_type = models.CharField(max_length=2, choices=CoordinatorType.choices, null=True, blank=True)
    position_groups = models.JSONField(null=True, blank=True, help_text="Upper-case position group labels, e.g. [\"QB\", \"OL\"].")
    joined_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = ('team', 'user')

    def save(self, *args, **kwargs):
        groups = normalize_position_groups(self.position_groups)
        self.position_groups = list(groups) if groups else None
        # Only assistants carry a coordinator designation
        if self.role != Role.ASSISTANT_COACH:
            self.coordinator_type = None
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.user} in {self.team} as {self.get_role_display()}"


# ROSTER
class Player(models.Model):
    STATUS_ACTIVE = 'active'
    STATUS_INACTIVE = 'inactive'
    STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_INACTIVE, 'Inactive'),
    ]

    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name='players')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='player_profiles')
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50, blank=True)
    jersey_number = models.PositiveSmallIntegerField(null=True, blank=True)
    position_group = models.CharField(max_length=10, blank=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_ACTIVE)

    class Meta:
        ordering = ['last_name', 'first_name']

    def save(self, *args, **kwargs):
        self.position_group = (self.position_group or '').strip().upper()
        super().save(*args, **kwargs)

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self):
        return self.full_name
