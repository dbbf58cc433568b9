"""
Calendar event permissions.

Every member sees unscoped, program-wide events their visibility allows.
Coordinators additionally see events scoped to their unit, position coaches
events scoped to their groups, and players events scoped to their unit,
their group or themselves. Parents only ever see unscoped events the Head
Coach shared with parents.
"""

from .capabilities import FULL_ACCESS, NO_ACCESS, READ_ONLY, Capabilities
from .constants import Role, Visibility
from .hierarchy import role_of
from .resolver import (
    COORDINATOR,
    POSITION_COACH,
    admits,
    assistant_scope,
    coordinator_owns,
    is_creator,
    player_context,
    resource_scoping,
)
from .roster import TeamRoster

# Event types an assistant may add when calendar settings allow it
ASSISTANT_EVENT_SETTINGS = {
    'MEETING': 'assistants_can_add_meetings',
    'PRACTICE': 'assistants_can_add_practices',
}


def get_event_permissions(membership, team, roster=None):
    role = role_of(membership)

    if role == Role.HEAD_COACH:
        return FULL_ACCESS

    if role == Role.PARENT:
        return READ_ONLY

    roster = roster if roster is not None else TeamRoster(team)

    if role == Role.PLAYER:
        context = player_context(membership, roster)
        return Capabilities(
            can_view=True,
            scoped_unit=context.unit,
            scoped_position_groups=context.position_groups or None,
            scoped_player_ids=(context.player_id,) if context.player_id is not None else (),
        )

    if role == Role.ASSISTANT_COACH:
        scope = assistant_scope(membership)
        if scope.kind == COORDINATOR:
            return Capabilities(
                can_view=True,
                can_create=True,
                can_edit=True,
                can_view_all=True,
                scoped_unit=scope.unit,
                # Unit-wide or unscoped events only, never player-targeted ones
                scoped_player_ids=(),
            )
        if scope.kind == POSITION_COACH:
            return Capabilities(
                can_view=True,
                can_create=True,
                can_edit=True,
                can_view_all=True,
                scoped_position_groups=scope.position_groups,
                scoped_player_ids=roster.player_ids(scope.position_groups),
            )
        return Capabilities(can_view=True, can_create=True, can_view_all=True)

    return NO_ACCESS


def can_view_event(membership, team, event, roster=None):
    role = role_of(membership)
    if role == Role.PARENT:
        if getattr(event, 'visibility', None) not in (Visibility.PARENTS, Visibility.ALL):
            return False
        if resource_scoping(event).is_scoped:
            return False
        # Parents only see what the Head Coach publishes
        roster = roster if roster is not None else TeamRoster(team)
        return roster.is_head_coach(getattr(event, 'created_by_id', None))

    capabilities = get_event_permissions(membership, team, roster)
    player_id = None
    if role == Role.PLAYER and capabilities.scoped_player_ids:
        player_id = capabilities.scoped_player_ids[0]
    return admits(membership, capabilities, event, player_id=player_id)


def can_create_event(membership, event_type, calendar_settings=None):
    """
    Head Coaches add anything. Assistants add events unless the team's
    calendar settings withhold that event type; games and custom events are
    Head-Coach-only once settings exist.
    """
    role = role_of(membership)
    if role == Role.HEAD_COACH:
        return True
    if role != Role.ASSISTANT_COACH:
        return False
    if calendar_settings is None:
        return True
    flag = ASSISTANT_EVENT_SETTINGS.get(event_type)
    return flag is not None and bool(getattr(calendar_settings, flag, False))


def can_edit_event(membership, event):
    role = role_of(membership)
    if role == Role.HEAD_COACH:
        return True
    if role != Role.ASSISTANT_COACH:
        return False
    if is_creator(membership, event) or coordinator_owns(membership, event):
        return True
    scope = assistant_scope(membership)
    if scope.kind == POSITION_COACH:
        event_groups = resource_scoping(event).scoped_position_groups or ()
        return bool(set(scope.position_groups) & set(event_groups))
    return False


def can_remove_event(membership, event):
    """Head Coach, or the assistant who created the event."""
    role = role_of(membership)
    if role == Role.HEAD_COACH:
        return True
    if role == Role.ASSISTANT_COACH:
        return is_creator(membership, event)
    return False
