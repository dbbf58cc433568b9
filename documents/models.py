from django.conf import settings
from django.db import models
from django.utils import timezone

from authority.models import ScopedResource


class Document(ScopedResource):
    team = models.ForeignKey('team.Team', on_delete=models.CASCADE, related_name='documents')
    title = models.CharField(max_length=200)
    url = models.URLField(max_length=500, help_text="Link to the stored file; uploads are handled elsewhere.")
    category = models.CharField(max_length=50, blank=True)
    description = models.TextField(blank=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class DocumentEventLink(models.Model):
    document = models.ForeignKey(Document, on_delete=models.CASCADE, related_name='event_links')
    event = models.ForeignKey('events.Event', on_delete=models.CASCADE, related_name='document_links')
    linked_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, related_name='+')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = ('document', 'event')

    def __str__(self):
        return f"{self.document} -> {self.event}"
