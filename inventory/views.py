import logging

from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authority import audit
from authority.inventory_permissions import (
    can_assign_to_player,
    can_delete_inventory_item,
    can_edit_inventory_item,
    can_view_inventory_item,
    get_inventory_permissions,
)
from authority.permissions import IsTeamMember, deny, get_team
from authority.roster import TeamRoster
from team.models import Player

from . import serializers
from .models import InventoryItem, InventoryTransaction

logger = logging.getLogger(__name__)


def _log_transaction(item, transaction_type, player, user):
    return InventoryTransaction.objects.create(
        item=item,
        team_id=item.team_id,
        transaction_type=transaction_type,
        player=player,
        performed_by=user,
    )


class InventoryListCreateView(generics.ListCreateAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.InventoryItemSerializer

    def get_queryset(self):
        return InventoryItem.objects.filter(team_id=self.kwargs['team_id']).select_related('assigned_player')

    def list(self, request, *args, **kwargs):
        team = get_team(self.kwargs['team_id'])
        roster = TeamRoster(team)
        items = [item for item in self.get_queryset() if can_view_inventory_item(request.membership, team, item, roster)]
        return Response(self.get_serializer(items, many=True).data, status=status.HTTP_200_OK)

    def perform_create(self, serializer):
        membership = self.request.membership
        team = get_team(self.kwargs['team_id'])
        capabilities = get_inventory_permissions(membership, team)
        if not capabilities.can_create:
            deny("You cannot add inventory items.", membership, action='create_inventory_item')
        item = serializer.save(team=team, created_by=self.request.user, scoped_unit=capabilities.scoped_unit)
        logger.info("Inventory item %s added to team %s", item.id, team.id)


class InventoryRetrieveUpdateDeleteView(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.InventoryItemSerializer

    def get_object(self):
        item = get_object_or_404(InventoryItem, id=self.kwargs['pk'], team_id=self.kwargs['team_id'])
        if not can_view_inventory_item(self.request.membership, item.team, item):
            deny("You do not have access to this item.", self.request.membership, item_id=item.id)
        return item

    def perform_update(self, serializer):
        membership = self.request.membership
        item = serializer.instance
        if not can_edit_inventory_item(membership, item.team, item):
            deny("You cannot edit this item.", membership, item_id=item.id)
        serializer.save()

    def perform_destroy(self, instance):
        membership = self.request.membership
        if not can_delete_inventory_item(membership, instance.team, instance):
            deny("Only the Head Coach can delete inventory items.", membership, item_id=instance.id)
        instance.delete()


class InventoryAssignView(APIView):
    """Check an item out to a player, or back in with ``player_id: null``."""
    permission_classes = [IsAuthenticated, IsTeamMember]

    def post(self, request, team_id, pk):
        membership = request.membership
        item = get_object_or_404(InventoryItem, id=pk, team_id=team_id)
        team = item.team
        serializer = serializers.AssignItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        player_id = serializer.validated_data['player_id']

        roster = TeamRoster(team)
        if not can_view_inventory_item(membership, team, item, roster):
            deny("You do not have access to this item.", membership, item_id=item.id)

        if not get_inventory_permissions(membership, team, roster).can_assign:
            deny("You cannot assign inventory.", membership, item_id=item.id)

        previous = item.assigned_player
        if player_id is None:
            if previous is not None and not can_assign_to_player(membership, team, previous.id, roster):
                deny("You cannot unassign this item.", membership, item_id=item.id)
            player = None
        else:
            player = get_object_or_404(Player, id=player_id, team_id=team_id, status=Player.STATUS_ACTIVE)
            if not can_assign_to_player(membership, team, player.id, roster):
                deny("You cannot assign items to this player.", membership, item_id=item.id, player_id=player.id)

        if player != previous:
            with transaction.atomic():
                if previous is not None:
                    _log_transaction(item, InventoryTransaction.TYPE_RETURN, previous, request.user)
                if player is not None:
                    _log_transaction(item, InventoryTransaction.TYPE_ISSUE, player, request.user)
                item.assigned_player = player
                item.save(update_fields=['assigned_player', 'updated_at'])
                audit.record(
                    team,
                    request.user,
                    'inventory_assigned',
                    item_id=item.id,
                    from_player_id=getattr(previous, 'id', None),
                    to_player_id=getattr(player, 'id', None),
                )
        return Response(serializers.InventoryItemSerializer(item).data, status=status.HTTP_200_OK)


class InventoryTransactionListView(generics.ListAPIView):
    """Check-out / check-in history of one item, latest first."""
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.InventoryTransactionSerializer

    def get_queryset(self):
        item = get_object_or_404(InventoryItem, id=self.kwargs['pk'], team_id=self.kwargs['team_id'])
        if not can_view_inventory_item(self.request.membership, item.team, item):
            deny("You do not have access to this item.", self.request.membership, item_id=item.id)
        return item.transactions.select_related('player', 'performed_by')
