"""
Calendar rules. Event deletion deliberately differs from documents and
inventory: the assistant who created an event may remove it.
"""

from datetime import datetime, timezone

import pytest

from authority.calendar_permissions import (
    can_create_event,
    can_edit_event,
    can_remove_event,
    can_view_event,
    get_event_permissions,
)
from authority.constants import Role, Unit, Visibility
from events.models import CalendarSettings, Event

from .conftest import member


def event(**fields):
    fields.setdefault('visibility', Visibility.PLAYERS)
    fields.setdefault('created_by_id', 1)
    when = datetime(2026, 9, 4, 18, 0, tzinfo=timezone.utc)
    return Event(id=1, team_id=1, title='Practice', start=when, end=when, **fields)


def test_offensive_coordinator_cannot_edit_defense_event(offensive_coordinator):
    assert not can_edit_event(offensive_coordinator, event(scoped_unit=Unit.DEFENSE))


def test_coordinator_edits_own_unit(offensive_coordinator):
    assert can_edit_event(offensive_coordinator, event(scoped_unit=Unit.OFFENSE))


def test_position_coach_edits_overlapping_groups(wr_coach):
    assert can_edit_event(wr_coach, event(scoped_position_groups=['WR', 'TE']))
    assert not can_edit_event(wr_coach, event(scoped_position_groups=['QB']))
    assert not can_edit_event(wr_coach, event(scoped_unit=Unit.OFFENSE))


def test_creator_edits_and_removes(generic_assistant):
    mine = event(created_by_id=generic_assistant.user_id)
    assert can_edit_event(generic_assistant, mine)
    assert can_remove_event(generic_assistant, mine)


def test_remove_is_head_coach_or_creator(head_coach, offensive_coordinator, wr_player, parent):
    unit_event = event(scoped_unit=Unit.OFFENSE)
    assert can_remove_event(head_coach, unit_event)
    # A coordinator may edit their unit's events but not remove someone else's
    assert can_edit_event(offensive_coordinator, unit_event)
    assert not can_remove_event(offensive_coordinator, unit_event)
    assert not can_remove_event(wr_player, event(created_by_id=wr_player.user_id))
    assert not can_remove_event(parent, event(created_by_id=parent.user_id))


def test_players_and_parents_never_edit(wr_player, parent):
    assert not can_edit_event(wr_player, event(created_by_id=wr_player.user_id))
    assert not can_edit_event(parent, event())


def test_player_sees_unit_group_and_own_events(wr_player, team, roster):
    assert can_view_event(wr_player, team, event(), roster)
    assert can_view_event(wr_player, team, event(scoped_unit=Unit.OFFENSE), roster)
    assert can_view_event(wr_player, team, event(scoped_position_groups=['WR']), roster)
    assert can_view_event(wr_player, team, event(scoped_player_ids=[2]), roster)
    assert not can_view_event(wr_player, team, event(scoped_unit=Unit.DEFENSE), roster)
    assert not can_view_event(wr_player, team, event(scoped_player_ids=[3], scoped_unit=Unit.OFFENSE), roster)


def test_player_unit_comes_from_group(wr_player, team, roster):
    assert get_event_permissions(wr_player, team, roster).scoped_unit == Unit.OFFENSE


def test_coordinator_sees_unscoped_and_own_unit(defensive_coordinator, team, roster):
    assert can_view_event(defensive_coordinator, team, event(), roster)
    assert can_view_event(defensive_coordinator, team, event(scoped_unit=Unit.DEFENSE), roster)
    assert not can_view_event(defensive_coordinator, team, event(scoped_unit=Unit.OFFENSE), roster)
    assert not can_view_event(defensive_coordinator, team, event(scoped_position_groups=['WR']), roster)


def test_position_coach_view(wr_coach, team, roster):
    assert can_view_event(wr_coach, team, event(), roster)
    assert can_view_event(wr_coach, team, event(scoped_position_groups=['WR']), roster)
    assert not can_view_event(wr_coach, team, event(scoped_unit=Unit.OFFENSE), roster)


def test_staff_events_hidden_from_players(wr_player, generic_assistant, team, roster):
    staff_only = event(visibility=Visibility.STAFF)
    assert not can_view_event(wr_player, team, staff_only, roster)
    assert can_view_event(generic_assistant, team, staff_only, roster)


def test_parent_sees_only_shared_program_events(parent, team, roster):
    assert get_event_permissions(parent, team, roster).can_view
    assert not get_event_permissions(parent, team, roster).can_create
    assert can_view_event(parent, team, event(visibility=Visibility.ALL), roster)
    assert can_view_event(parent, team, event(visibility=Visibility.PARENTS), roster)
    assert not can_view_event(parent, team, event(visibility=Visibility.PLAYERS), roster)
    assert not can_view_event(parent, team, event(visibility=Visibility.ALL, scoped_unit=Unit.OFFENSE), roster)


def test_create_gate_follows_calendar_settings(head_coach, wr_coach, wr_player):
    settings = CalendarSettings(team_id=1, assistants_can_add_meetings=True, assistants_can_add_practices=False)
    assert can_create_event(head_coach, Event.TYPE_GAME, settings)
    assert can_create_event(wr_coach, Event.TYPE_GAME)
    assert can_create_event(wr_coach, Event.TYPE_MEETING, settings)
    assert not can_create_event(wr_coach, Event.TYPE_PRACTICE, settings)
    assert not can_create_event(wr_coach, Event.TYPE_GAME, settings)
    assert not can_create_event(wr_player, Event.TYPE_MEETING)


@pytest.mark.parametrize('role', [None, '', 'SCOUT'])
def test_unknown_role_fails_closed(role, team, roster):
    membership = member(role, user_id=1, coordinator_type='OC', position_groups=['WR'])
    any_event = event(visibility=Visibility.ALL, created_by_id=1)
    caps = get_event_permissions(membership, team, roster)
    assert not (caps.can_view or caps.can_create or caps.can_edit or caps.can_delete)
    assert not can_view_event(membership, team, any_event, roster)
    assert not can_create_event(membership, Event.TYPE_MEETING)
    assert not can_edit_event(membership, any_event)
    assert not can_remove_event(membership, any_event)


def test_parent_sees_only_head_coach_events(parent, generic_assistant, team, roster):
    shared_by_head = event(visibility=Visibility.PARENTS, created_by_id=1)
    shared_by_assistant = event(visibility=Visibility.PARENTS, created_by_id=generic_assistant.user_id)
    orphaned = event(visibility=Visibility.ALL, created_by_id=None)
    assert can_view_event(parent, team, shared_by_head, roster)
    assert not can_view_event(parent, team, shared_by_assistant, roster)
    assert not can_view_event(parent, team, orphaned, roster)


def test_coordinator_never_sees_player_targeted_events(offensive_coordinator, team, roster):
    # Players 1 and 2 are offense, still hidden
    assert not can_view_event(offensive_coordinator, team, event(scoped_player_ids=[1, 2]), roster)
    assert get_event_permissions(offensive_coordinator, team, roster).scoped_player_ids == ()
