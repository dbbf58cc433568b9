from rest_framework import serializers

from . import models


class EventSerializer(serializers.ModelSerializer):
    created_by_name = serializers.SerializerMethodField()

    class Meta:
        model = models.Event
        fields = [
            'id', 'team', 'title', 'event_type', 'start', 'end', 'location', 'notes', 'visibility',
            'scoped_unit', 'scoped_position_groups', 'scoped_player_ids', 'coordinator_type',
            'created_by', 'created_by_name', 'created_at', 'updated_at',
        ]
        # Scoping is stamped from the creator's membership, never from the payload
        read_only_fields = [
            'team', 'scoped_unit', 'scoped_position_groups', 'scoped_player_ids', 'coordinator_type',
            'created_by', 'created_at', 'updated_at',
        ]

    def get_created_by_name(self, obj):
        return obj.created_by.get_full_name() if obj.created_by else None

    def validate(self, attrs):
        start = attrs.get('start', getattr(self.instance, 'start', None))
        end = attrs.get('end', getattr(self.instance, 'end', None))
        if start and end and end < start:
            raise serializers.ValidationError({'end': "End must be after start."})
        return attrs


class CalendarSettingsSerializer(serializers.ModelSerializer):
    class Meta:
        model = models.CalendarSettings
        fields = ['team', 'assistants_can_add_meetings', 'assistants_can_add_practices']
        read_only_fields = ['team']
