import logging

from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authority.permissions import IsTeamMember, IsTeamStaff, get_team

from . import serializers
from .models import FormationTemplate
from .slots import FORMATIONS, get_formation, layout_formation
from .templates import validate_template_save

logger = logging.getLogger(__name__)


class FormationListView(APIView):
    """Built-in formations, optionally filtered by ``?unit=``."""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        unit = (request.query_params.get('unit') or '').upper()
        formations = [f.as_dict() for f in FORMATIONS if not unit or f.unit == unit]
        return Response(formations, status=status.HTTP_200_OK)


class FormationLayoutView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, formation_id):
        formation = get_formation(formation_id)
        if formation is None:
            return Response({'error': f"Unknown formation '{formation_id}'"}, status=status.HTTP_404_NOT_FOUND)
        slots, report = layout_formation(formation)
        return Response({
            'id': formation.id,
            'slots': [{'role': s.role, 'x_pct': s.x_pct, 'y_pct': s.y_pct} for s in slots],
            'valid': report.valid,
            'errors': list(report.errors),
        }, status=status.HTTP_200_OK)


class FormationTemplateListCreateView(generics.ListCreateAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.FormationTemplateSerializer

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsAuthenticated(), IsTeamStaff()]
        return super().get_permissions()

    def get_queryset(self):
        return FormationTemplate.objects.filter(team_id=self.kwargs['team_id'])

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        shapes = [dict(shape) for shape in data['shapes']]

        validation = validate_template_save(data['side'], shapes)
        if not validation.ok:
            return Response({'error': validation.reason}, status=status.HTTP_400_BAD_REQUEST)

        team = get_team(self.kwargs['team_id'])
        if FormationTemplate.objects.filter(team=team, name=data['name']).exists():
            return Response({"error": "A template with this name already exists"}, status=status.HTTP_400_BAD_REQUEST)

        template = FormationTemplate.objects.create(
            team=team,
            name=data['name'],
            side=data['side'],
            shapes=shapes,
            created_by=request.user,
        )
        logger.info("Formation template %s saved for team %s", template.id, template.team_id)
        return Response(self.get_serializer(template).data, status=status.HTTP_201_CREATED)
