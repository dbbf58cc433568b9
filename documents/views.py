import logging

from django.shortcuts import get_object_or_404
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authority.calendar_permissions import can_view_event
from authority.constants import Role
from authority.document_permissions import (
    can_delete_document,
    can_edit_document,
    can_view_document,
    get_document_permissions,
)
from authority.hierarchy import determine_event_scoping
from authority.permissions import IsTeamMember, deny, get_team
from authority.roster import TeamRoster
from events.models import Event

from . import serializers
from .models import Document, DocumentEventLink

logger = logging.getLogger(__name__)

SCOPING_FIELDS = ('scoped_unit', 'scoped_position_groups', 'scoped_player_ids')


class DocumentListCreateView(generics.ListCreateAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.DocumentSerializer

    def get_queryset(self):
        queryset = Document.objects.filter(team_id=self.kwargs['team_id'])
        category = self.request.query_params.get('category')
        if category:
            queryset = queryset.filter(category=category)
        return queryset

    def list(self, request, *args, **kwargs):
        team = get_team(self.kwargs['team_id'])
        roster = TeamRoster(team)
        documents = [doc for doc in self.get_queryset() if can_view_document(request.membership, team, doc, roster)]
        return Response(self.get_serializer(documents, many=True).data, status=status.HTTP_200_OK)

    def perform_create(self, serializer):
        membership = self.request.membership
        team = get_team(self.kwargs['team_id'])
        if not get_document_permissions(membership, team).can_create:
            deny("You cannot add documents to this team.", membership, action='create_document')

        extra = {}
        # Only the Head Coach chooses an arbitrary audience; everyone else is
        # stamped with their own scope
        if membership.role != Role.HEAD_COACH:
            for field in SCOPING_FIELDS:
                serializer.validated_data.pop(field, None)
            extra = determine_event_scoping(membership).as_fields()
        document = serializer.save(team=team, created_by=self.request.user, **extra)
        logger.info("Document %s added to team %s", document.id, team.id)


class DocumentRetrieveUpdateDeleteView(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.DocumentSerializer

    def get_object(self):
        document = get_object_or_404(Document, id=self.kwargs['pk'], team_id=self.kwargs['team_id'])
        if not can_view_document(self.request.membership, document.team, document):
            deny("You do not have access to this document.", self.request.membership, document_id=document.id)
        return document

    def perform_update(self, serializer):
        membership = self.request.membership
        document = serializer.instance
        if not can_edit_document(membership, document.team, document):
            deny("You cannot edit this document.", membership, document_id=document.id)
        if membership.role != Role.HEAD_COACH:
            for field in SCOPING_FIELDS:
                serializer.validated_data.pop(field, None)
        serializer.save()

    def perform_destroy(self, instance):
        membership = self.request.membership
        if not can_delete_document(membership, instance.team, instance):
            deny("Only the Head Coach can delete documents.", membership, document_id=instance.id)
        instance.delete()


class DocumentLinkView(APIView):
    """Attach a document to an event (POST) or detach it (DELETE ``?event_id=``)."""
    permission_classes = [IsAuthenticated, IsTeamMember]

    def _resolve(self, request, team_id, pk, event_id):
        membership = request.membership
        team = get_team(team_id)
        roster = TeamRoster(team)
        document = get_object_or_404(Document, id=pk, team_id=team_id)
        if not can_view_document(membership, team, document, roster):
            deny("You do not have access to this document.", membership, document_id=document.id)
        if not get_document_permissions(membership, team, roster).can_link:
            deny("You cannot link documents.", membership, document_id=document.id)
        event = get_object_or_404(Event, id=event_id, team_id=team_id)
        if not can_view_event(membership, team, event, roster):
            deny("You do not have access to this event.", membership, event_id=event.id)
        return document, event

    def post(self, request, team_id, pk):
        serializer = serializers.DocumentLinkSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        document, event = self._resolve(request, team_id, pk, serializer.validated_data['event_id'])
        _, created = DocumentEventLink.objects.get_or_create(
            document=document, event=event, defaults={'linked_by': request.user},
        )
        if created:
            logger.info("Document %s linked to event %s", document.id, event.id)
        return Response({'success': True}, status=status.HTTP_200_OK)

    def delete(self, request, team_id, pk):
        serializer = serializers.DocumentLinkSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        document, event = self._resolve(request, team_id, pk, serializer.validated_data['event_id'])
        DocumentEventLink.objects.filter(document=document, event=event).delete()
        return Response({'success': True}, status=status.HTTP_200_OK)


class EventDocumentListView(generics.ListAPIView):
    """Documents linked to an event that the caller may see."""
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.DocumentSerializer

    def list(self, request, *args, **kwargs):
        membership = request.membership
        team = get_team(self.kwargs['team_id'])
        roster = TeamRoster(team)
        event = get_object_or_404(Event, id=self.kwargs['pk'], team_id=team.id)
        if not can_view_event(membership, team, event, roster):
            deny("You do not have access to this event.", membership, event_id=event.id)
        linked = Document.objects.filter(event_links__event=event)
        documents = [doc for doc in linked if can_view_document(membership, team, doc, roster)]
        return Response(self.get_serializer(documents, many=True).data, status=status.HTTP_200_OK)
