from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from . import models, serializers
from .calendar_permissions import get_event_permissions
from .depth_chart_permissions import get_depth_chart_permissions
from .document_permissions import get_document_permissions
from .inventory_permissions import get_inventory_permissions
from .permissions import IsHeadCoach, IsTeamMember, get_team
from .roster import TeamRoster


class CapabilitiesView(APIView):
    """Every capability set the caller holds on a team, for UI gating."""
    permission_classes = [IsAuthenticated, IsTeamMember]

    def get(self, request, team_id):
        membership = request.membership
        team = get_team(team_id)
        roster = TeamRoster(team)
        return Response({
            'team_id': team.id,
            'role': membership.role,
            'coordinator_type': membership.coordinator_type,
            'position_groups': membership.position_groups or [],
            'events': get_event_permissions(membership, team, roster).as_dict(),
            'documents': get_document_permissions(membership, team, roster).as_dict(),
            'inventory': get_inventory_permissions(membership, team, roster).as_dict(),
            'depth_chart': get_depth_chart_permissions(membership).as_dict(),
        }, status=status.HTTP_200_OK)


class AuditLogListView(generics.ListAPIView):
    """Team audit trail, latest first. Head Coach only."""
    permission_classes = [IsAuthenticated, IsHeadCoach]
    serializer_class = serializers.AuditLogSerializer

    def get_queryset(self):
        queryset = models.AuditLog.objects.filter(team_id=self.kwargs['team_id']).select_related('actor')
        action = self.request.query_params.get('action')
        if action:
            queryset = queryset.filter(action=action)
        return queryset.order_by('-created_at')
