import logging

from django.db import transaction
from django.shortcuts import get_object_or_404
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from authority import audit
from authority.constants import Role
from authority.permissions import IsHeadCoach, IsTeamMember, IsTeamStaff, get_team

from . import serializers
from .models import Membership, Player, Team

logger = logging.getLogger(__name__)


class TeamListCreateView(generics.ListCreateAPIView):
    """Teams the caller belongs to; creating a team makes the caller its Head Coach."""
    permission_classes = [IsAuthenticated]
    serializer_class = serializers.TeamSerializer

    def get_queryset(self):
        return Team.objects.filter(memberships__user=self.request.user).distinct().order_by('name')

    def perform_create(self, serializer):
        with transaction.atomic():
            team = serializer.save(created_by=self.request.user)
            Membership.objects.create(team=team, user=self.request.user, role=Role.HEAD_COACH)
        logger.info("Team %s created by user %s", team.id, self.request.user.id)


class MembershipListView(generics.ListAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.MembershipSerializer

    def get_queryset(self):
        return Membership.objects.filter(team_id=self.kwargs['team_id']).select_related('user').order_by('id')


class MembershipUpdateView(generics.UpdateAPIView):
    """Head Coach edits of a member's role, coordinator designation and position groups."""
    permission_classes = [IsAuthenticated, IsHeadCoach]
    serializer_class = serializers.MembershipSerializer

    def get_object(self):
        return get_object_or_404(Membership, id=self.kwargs['pk'], team_id=self.kwargs['team_id'])

    def perform_update(self, serializer):
        before = {
            'role': serializer.instance.role,
            'coordinator_type': serializer.instance.coordinator_type,
            'position_groups': serializer.instance.position_groups,
        }
        membership = serializer.save()
        audit.record(
            membership.team,
            self.request.user,
            'membership_updated',
            membership_id=membership.id,
            before=before,
            after={
                'role': membership.role,
                'coordinator_type': membership.coordinator_type,
                'position_groups': membership.position_groups,
            },
        )


class RosterListCreateView(generics.ListCreateAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.PlayerSerializer

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAuthenticated(), IsTeamStaff()]
        return super().get_permissions()

    def get_queryset(self):
        queryset = Player.objects.filter(team_id=self.kwargs['team_id'])
        player_status = self.request.query_params.get('status')
        if player_status:
            queryset = queryset.filter(status=player_status)
        return queryset

    def perform_create(self, serializer):
        serializer.save(team=get_team(self.kwargs['team_id']))
