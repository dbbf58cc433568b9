import logging

from django.shortcuts import get_object_or_404
from django.utils.dateparse import parse_datetime
from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authority.calendar_permissions import can_create_event, can_edit_event, can_remove_event, can_view_event
from authority.hierarchy import determine_event_scoping
from authority.permissions import IsHeadCoach, IsTeamMember, IsTeamStaff, deny, get_team
from authority.resolver import resource_scoping
from authority.roster import TeamRoster

from . import serializers
from .models import CalendarSettings, Event

logger = logging.getLogger(__name__)


def _parse_bound(name, value):
    try:
        parsed = parse_datetime(value)
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationError({name: f"'{value}' is not a valid ISO 8601 datetime."})
    return parsed


class EventListCreateView(generics.ListCreateAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.EventSerializer

    def get_queryset(self):
        queryset = Event.objects.filter(team_id=self.kwargs['team_id']).select_related('created_by')
        params = self.request.query_params
        start, end = params.get('start'), params.get('end')
        if start and end:
            queryset = queryset.filter(start__gte=_parse_bound('start', start), start__lte=_parse_bound('end', end))
        if params.get('event_type'):
            queryset = queryset.filter(event_type=params['event_type'])
        return queryset

    def list(self, request, *args, **kwargs):
        team = get_team(self.kwargs['team_id'])
        roster = TeamRoster(team)
        events = [event for event in self.get_queryset() if can_view_event(request.membership, team, event, roster)]
        serializer = self.get_serializer(events, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    def perform_create(self, serializer):
        membership = self.request.membership
        event_type = serializer.validated_data.get('event_type', Event.TYPE_PRACTICE)
        calendar_settings = CalendarSettings.objects.filter(team_id=membership.team_id).first()
        if not can_create_event(membership, event_type, calendar_settings):
            deny(f"You cannot add {event_type.lower()} events to this calendar.", membership, action='create_event')

        scoping = determine_event_scoping(membership)
        event = serializer.save(
            team=get_team(self.kwargs['team_id']),
            created_by=self.request.user,
            coordinator_type=scoping.coordinator_type,
            **scoping.as_fields(),
        )
        logger.info("Event %s created on team %s (scope=%s)", event.id, event.team_id, scoping.as_fields())


class EventRetrieveUpdateDeleteView(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.EventSerializer

    def get_object(self):
        event = get_object_or_404(Event, id=self.kwargs['pk'], team_id=self.kwargs['team_id'])
        membership = self.request.membership
        if not can_view_event(membership, get_team(self.kwargs['team_id']), event):
            deny("You do not have access to this event.", membership, event_id=event.id)
        return event

    def perform_update(self, serializer):
        membership = self.request.membership
        if not can_edit_event(membership, serializer.instance):
            deny("You cannot edit this event.", membership, event_id=serializer.instance.id)
        serializer.save()

    def perform_destroy(self, instance):
        membership = self.request.membership
        if not can_remove_event(membership, instance):
            deny("You cannot remove this event.", membership, event_id=instance.id)
        instance.delete()


class EventAudienceView(APIView):
    """Active player ids an event reaches through its scoping."""
    permission_classes = [IsAuthenticated, IsTeamStaff]

    def get(self, request, team_id, pk):
        event = get_object_or_404(Event, id=pk, team_id=team_id)
        team = get_team(team_id)
        roster = TeamRoster(team)
        if not can_view_event(request.membership, team, event, roster):
            deny("You do not have access to this event.", request.membership, event_id=event.id)
        return Response({
            'event_id': event.id,
            'player_ids': list(roster.audience_player_ids(resource_scoping(event))),
        }, status=status.HTTP_200_OK)


class CalendarSettingsView(generics.RetrieveUpdateAPIView):
    permission_classes = [IsAuthenticated, IsTeamMember]
    serializer_class = serializers.CalendarSettingsSerializer

    def get_permissions(self):
        if self.request.method in ('PUT', 'PATCH'):
            return [IsAuthenticated(), IsHeadCoach()]
        return super().get_permissions()

    def get_object(self):
        team = get_team(self.kwargs['team_id'])
        # Unsaved defaults until the Head Coach saves settings
        return CalendarSettings.objects.filter(team=team).first() or CalendarSettings(team=team)
