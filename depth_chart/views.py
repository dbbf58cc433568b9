from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authority.depth_chart_permissions import can_view_depth_chart
from authority.permissions import IsHeadCoach, IsTeamMember, deny, get_team

from . import serializers
from .exceptions import InvalidAssignment
from .models import DepthChartEntry, PositionLabel
from .services import handle_depth_chart_update, load_depth_chart


def _written(final):
    return [
        {**key.as_fields(), 'player_id': player_id}
        for key, player_id in final.items()
    ]


class DepthChartView(APIView):
    """GET the team's entries; POST a batch of absolute slot writes."""
    permission_classes = [IsAuthenticated, IsTeamMember]

    def get(self, request, team_id):
        if not can_view_depth_chart(request.membership):
            deny("Access denied", request.membership)
        entries = DepthChartEntry.objects.filter(team_id=team_id).select_related('player')
        unit = request.query_params.get('unit')
        if unit:
            entries = entries.filter(unit=unit.upper())
        formation = request.query_params.get('formation')
        if formation is not None:
            entries = entries.filter(formation=formation)
        data = serializers.DepthChartEntrySerializer(entries, many=True).data
        return Response({'entries': data}, status=status.HTTP_200_OK)

    def post(self, request, team_id):
        entries = request.data.get('entries')
        if not isinstance(entries, list):
            raise InvalidAssignment("Entries must be an array")
        serializer = serializers.DepthChartWriteSerializer(data=entries, many=True)
        serializer.is_valid(raise_exception=True)
        updates = [serializers.to_update(item) for item in serializer.validated_data]
        final = handle_depth_chart_update(get_team(team_id), request.membership, updates, actor=request.user)
        return Response({'success': True, 'entries': _written(final)}, status=status.HTTP_200_OK)


class _PlannedMoveView(APIView):
    """Plan a single gesture against the stored chart and write it as one batch."""
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = None

    def plan(self, chart, serializer):
        raise NotImplementedError

    def post(self, request, team_id):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        team = get_team(team_id)
        updates = self.plan(load_depth_chart(team), serializer)
        if not updates:
            return Response({'success': True, 'entries': []}, status=status.HTTP_200_OK)
        final = handle_depth_chart_update(team, request.membership, updates, actor=request.user)
        return Response({'success': True, 'entries': _written(final)}, status=status.HTTP_200_OK)


class AssignView(_PlannedMoveView):
    serializer_class = serializers.AssignSerializer

    def plan(self, chart, serializer):
        return chart.plan_assign(serializer.slot_key(), serializer.validated_data['player_id'])


class RemoveView(_PlannedMoveView):
    serializer_class = serializers.SlotSerializer

    def plan(self, chart, serializer):
        return chart.plan_remove(serializer.slot_key())


class ReorderView(_PlannedMoveView):
    serializer_class = serializers.ReorderSerializer

    def plan(self, chart, serializer):
        return chart.plan_reorder(serializer.slot_key(), serializer.validated_data['to_string'])


class PositionLabelView(generics.ListAPIView):
    """Custom display labels; any member reads them, the Head Coach renames."""
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.PositionLabelSerializer

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAuthenticated(), IsHeadCoach()]
        return super().get_permissions()

    def get_queryset(self):
        return PositionLabel.objects.filter(team_id=self.kwargs['team_id']).order_by('unit', 'position')

    def post(self, request, team_id):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        label, _ = PositionLabel.objects.update_or_create(
            team=get_team(team_id),
            unit=data['unit'],
            position=data['position'],
            special_team_type=data.get('special_team_type', ''),
            defaults={'label': data['label']},
        )
        return Response(self.get_serializer(label).data, status=status.HTTP_200_OK)
