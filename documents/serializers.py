from rest_framework import serializers

from authority.hierarchy import normalize_position_groups

from . import models


class DocumentSerializer(serializers.ModelSerializer):
    class Meta:
        model = models.Document
        fields = [
            'id', 'team', 'title', 'url', 'category', 'description', 'visibility',
            'scoped_unit', 'scoped_position_groups', 'scoped_player_ids',
            'created_by', 'created_at', 'updated_at',
        ]
        read_only_fields = ['team', 'created_by', 'created_at', 'updated_at']

    def validate_scoped_position_groups(self, value):
        return list(normalize_position_groups(value)) or None

    def validate_scoped_player_ids(self, value):
        if value in (None, []):
            return None
        if not isinstance(value, list):
            raise serializers.ValidationError("scoped_player_ids must be a list.")
        return value


class DocumentLinkSerializer(serializers.Serializer):
    event_id = serializers.IntegerField()
