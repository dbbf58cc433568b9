from django.conf import settings
from django.db import models
from django.utils import timezone

from authority.constants import Unit


class InventoryItem(models.Model):
    CONDITION_CHOICES = [
        ('new', 'New'),
        ('good', 'Good'),
        ('fair', 'Fair'),
        ('poor', 'Poor'),
        ('retired', 'Retired'),
    ]

    team = models.ForeignKey('team.Team', on_delete=models.CASCADE, related_name='inventory_items')
    name = models.CharField(max_length=150)
    category = models.CharField(max_length=50, blank=True)
    quantity = models.PositiveIntegerField(default=1)
    condition = models.CharField(max_length=10, choices=CONDITION_CHOICES, default='good')
    assigned_player = models.ForeignKey('team.Player', on_delete=models.SET_NULL, null=True, blank=True, related_name='inventory_items')
    scoped_unit = models.CharField(max_length=20, choices=Unit.choices, null=True, blank=True)
    notes = models.TextField(blank=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, related_name='+')
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class InventoryTransaction(models.Model):
    TYPE_ISSUE = 'ISSUE'
    TYPE_RETURN = 'RETURN'
    TYPE_CHOICES = [
        (TYPE_ISSUE, 'Issued'),
        (TYPE_RETURN, 'Returned'),
    ]

    item = models.ForeignKey(InventoryItem, on_delete=models.CASCADE, related_name='transactions')
    team = models.ForeignKey('team.Team', on_delete=models.CASCADE, related_name='inventory_transactions')
    transaction_type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    player = models.ForeignKey('team.Player', on_delete=models.SET_NULL, null=True, blank=True, related_name='inventory_transactions')
    performed_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, related_name='+')
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.get_transaction_type_display()} {self.item} ({self.player})"
