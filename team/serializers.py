from rest_framework import serializers

from authority.constants import Role
from authority.hierarchy import normalize_position_groups

from . import models


class OrganizationSerializer(serializers.ModelSerializer):
    class Meta:
        model = models.Organization
        fields = ['id', 'name', 'type']


class TeamSerializer(serializers.ModelSerializer):
    members_count = serializers.SerializerMethodField()
    players_count = serializers.SerializerMethodField()

    class Meta:
        model = models.Team
        fields = ['id', 'name', 'organization', 'created_by', 'created_at', 'members_count', 'players_count']
        read_only_fields = ['created_by', 'created_at']

    def get_members_count(self, obj):
        return obj.memberships.count()

    def get_players_count(self, obj):
        return obj.players.filter(status=models.Player.STATUS_ACTIVE).count()


class MembershipSerializer(serializers.ModelSerializer):
    username = serializers.CharField(source='user.username', read_only=True)
    full_name = serializers.CharField(source='user.get_full_name', read_only=True)

    class Meta:
        model = models.Membership
        fields = ['id', 'team', 'user', 'username', 'full_name', 'role', 'coordinator_type', 'position_groups', 'joined_at']
        read_only_fields = ['team', 'user', 'joined_at']

    def validate_position_groups(self, value):
        if value is None:
            return None
        if not isinstance(value, list):
            raise serializers.ValidationError("position_groups must be a list of strings.")
        return list(normalize_position_groups(value)) or None

    def validate(self, attrs):
        role = attrs.get('role', getattr(self.instance, 'role', None))
        if attrs.get('coordinator_type') and role != Role.ASSISTANT_COACH:
            raise serializers.ValidationError({'coordinator_type': "Only assistant coaches can be coordinators."})
        return attrs


class PlayerSerializer(serializers.ModelSerializer):
    class Meta:
        model = models.Player
        fields = ['id', 'team', 'user', 'first_name', 'last_name', 'jersey_number', 'position_group', 'status']
        read_only_fields = ['team']
