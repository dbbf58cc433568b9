from rest_framework import serializers

from . import models


class AuditLogSerializer(serializers.ModelSerializer):
    actor_full_name = serializers.SerializerMethodField()

    class Meta:
        model = models.AuditLog
        fields = ['id', 'team', 'actor', 'actor_full_name', 'action', 'metadata', 'created_at']

    def get_actor_full_name(self, obj):
        return obj.actor.get_full_name() if obj.actor else None
