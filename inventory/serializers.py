from rest_framework import serializers

from . import models


class InventoryItemSerializer(serializers.ModelSerializer):
    assigned_player_name = serializers.SerializerMethodField()

    class Meta:
        model = models.InventoryItem
        fields = [
            'id', 'team', 'name', 'category', 'quantity', 'condition', 'notes',
            'assigned_player', 'assigned_player_name', 'scoped_unit',
            'created_by', 'created_at', 'updated_at',
        ]
        # Assignment goes through the assign endpoint
        read_only_fields = ['team', 'assigned_player', 'scoped_unit', 'created_by', 'created_at', 'updated_at']

    def get_assigned_player_name(self, obj):
        return obj.assigned_player.full_name if obj.assigned_player else None


class AssignItemSerializer(serializers.Serializer):
    player_id = serializers.IntegerField(allow_null=True)


class InventoryTransactionSerializer(serializers.ModelSerializer):
    player_name = serializers.SerializerMethodField()
    performed_by_name = serializers.SerializerMethodField()

    class Meta:
        model = models.InventoryTransaction
        fields = [
            'id', 'item', 'transaction_type', 'player', 'player_name',
            'performed_by', 'performed_by_name', 'notes', 'created_at',
        ]

    def get_player_name(self, obj):
        return obj.player.full_name if obj.player else None

    def get_performed_by_name(self, obj):
        if obj.performed_by is None:
            return None
        return obj.performed_by.get_full_name() or obj.performed_by.username
