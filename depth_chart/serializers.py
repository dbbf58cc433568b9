from rest_framework import serializers

from authority.constants import Unit

from . import models
from .engine import SPECIAL_TEAM_TYPES, DepthChartUpdate, SlotKey


class DepthChartEntrySerializer(serializers.ModelSerializer):
    player_name = serializers.CharField(source='player.full_name', read_only=True)
    jersey_number = serializers.IntegerField(source='player.jersey_number', read_only=True)
    position_group = serializers.CharField(source='player.position_group', read_only=True)

    class Meta:
        model = models.DepthChartEntry
        fields = [
            'id', 'unit', 'position', 'string', 'player', 'player_name', 'jersey_number',
            'position_group', 'formation', 'special_team_type', 'updated_at',
        ]


class SlotSerializer(serializers.Serializer):
    unit = serializers.CharField()
    position = serializers.CharField(max_length=20)
    string = serializers.IntegerField()
    formation = serializers.CharField(allow_blank=True, allow_null=True, default=None)
    special_team_type = serializers.ChoiceField(
        choices=SPECIAL_TEAM_TYPES, allow_blank=True, allow_null=True, default=None,
    )

    def validate_unit(self, value):
        upper = value.strip().upper()
        if upper not in Unit.values:
            raise serializers.ValidationError(f"Unknown unit '{value}'.")
        return upper

    def slot_key(self):
        return slot_key_from(self.validated_data)


def slot_key_from(data):
    return SlotKey.of(
        data['unit'],
        data['position'],
        data['string'],
        data.get('formation'),
        data.get('special_team_type'),
    )


class DepthChartWriteSerializer(SlotSerializer):
    player_id = serializers.IntegerField(allow_null=True, default=None)


def to_update(data):
    return DepthChartUpdate(slot_key_from(data), data.get('player_id'))


class AssignSerializer(SlotSerializer):
    player_id = serializers.IntegerField()


class ReorderSerializer(SlotSerializer):
    to_string = serializers.IntegerField()


class PositionLabelSerializer(serializers.ModelSerializer):
    key = serializers.CharField(source='lookup_key', read_only=True)

    class Meta:
        model = models.PositionLabel
        fields = ['id', 'key', 'unit', 'position', 'special_team_type', 'label']

    def validate_unit(self, value):
        return value.upper()

    def validate_position(self, value):
        return value.strip().upper()
