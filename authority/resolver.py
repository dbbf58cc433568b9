"""
Shared admission engine for scoped resources (events, documents, inventory).

A scoped resource carries ``visibility``, ``scoped_player_ids``,
``scoped_position_groups``, ``scoped_unit`` and ``created_by_id``. Exactly one
scoping dimension is authoritative, in this order: explicit player list,
position groups, unit, none (team-wide).
"""

from dataclasses import dataclass

from .constants import Role, Visibility
from .hierarchy import (
    Scoping,
    coordinator_type_for,
    coordinator_unit,
    membership_position_groups,
    normalize_position_groups,
    role_of,
    unit_for_position_group,
)

COORDINATOR = 'coordinator'
POSITION_COACH = 'position_coach'
GENERIC_ASSISTANT = 'generic_assistant'


@dataclass(frozen=True)
class StaffScope:
    kind: str
    unit: str = None
    position_groups: tuple = ()
    coordinator_type: str = None


@dataclass(frozen=True)
class PlayerContext:
    player_id: object = None
    position_groups: tuple = ()
    unit: str = None


def assistant_scope(membership):
    """Classify an assistant coach as coordinator, position coach or generic."""
    coordinator_type = coordinator_type_for(membership)
    if coordinator_type:
        return StaffScope(
            kind=COORDINATOR,
            unit=coordinator_unit(coordinator_type),
            coordinator_type=coordinator_type,
        )
    groups = membership_position_groups(membership)
    if groups:
        return StaffScope(kind=POSITION_COACH, position_groups=groups)
    return StaffScope(kind=GENERIC_ASSISTANT)


def player_context(membership, roster):
    """
    Resolve the player a PLAYER membership stands for.

    Position groups recorded on the membership win; otherwise the active
    roster record supplies the group.
    """
    player = roster.player_for_user(getattr(membership, 'user_id', None)) if roster is not None else None
    groups = membership_position_groups(membership)
    if not groups and player is not None:
        groups = normalize_position_groups([player.position_group])
    unit = None
    for group in groups:
        unit = unit_for_position_group(group)
        if unit:
            break
    return PlayerContext(
        player_id=player.pk if player is not None else None,
        position_groups=groups,
        unit=unit,
    )


def resource_scoping(resource):
    player_ids = getattr(resource, 'scoped_player_ids', None)
    if not isinstance(player_ids, (list, tuple, set, frozenset)):
        player_ids = None
    return Scoping(
        scoped_player_ids=tuple(player_ids) if player_ids else None,
        scoped_position_groups=normalize_position_groups(getattr(resource, 'scoped_position_groups', None)) or None,
        scoped_unit=getattr(resource, 'scoped_unit', None) or None,
    )


def visibility_permits(role, visibility):
    """Exact-match visibility gate applied before any scoping test."""
    if role == Role.HEAD_COACH:
        return True
    if visibility == Visibility.STAFF:
        return role == Role.ASSISTANT_COACH
    if visibility == Visibility.PLAYERS:
        return role in (Role.ASSISTANT_COACH, Role.PLAYER)
    if visibility == Visibility.PARENTS:
        return role == Role.PARENT
    if visibility == Visibility.ALL or not visibility:
        return role is not None
    return False


def _ids(values):
    return {str(value) for value in values}


def admits(membership, capabilities, resource, player_id=None):
    """
    Decide whether ``membership`` may see ``resource``.

    ``player_id`` is the requester's own roster id when the requester is a
    player. The first scoping dimension set on the resource decides alone.
    """
    role = role_of(membership)
    if role is None or not capabilities.can_view:
        return False
    if role == Role.HEAD_COACH:
        return True
    if not visibility_permits(role, getattr(resource, 'visibility', None)):
        return False

    scoping = resource_scoping(resource)

    if scoping.scoped_player_ids:
        if role == Role.PLAYER:
            return player_id is not None and str(player_id) in _ids(scoping.scoped_player_ids)
        if capabilities.scoped_player_ids is None:
            return capabilities.can_view_all
        return bool(_ids(scoping.scoped_player_ids) & _ids(capabilities.scoped_player_ids))

    if scoping.scoped_position_groups:
        allowed = set(capabilities.scoped_position_groups or ())
        return bool(set(scoping.scoped_position_groups) & allowed)

    if scoping.scoped_unit:
        return capabilities.scoped_unit is not None and capabilities.scoped_unit == scoping.scoped_unit

    return capabilities.can_view_all or role == Role.PLAYER


def is_creator(membership, resource):
    user_id = getattr(membership, 'user_id', None)
    return user_id is not None and getattr(resource, 'created_by_id', None) == user_id


def coordinator_owns(membership, resource):
    """True when the requester coordinates the unit the resource is scoped to."""
    if role_of(membership) != Role.ASSISTANT_COACH:
        return False
    unit = coordinator_unit(coordinator_type_for(membership))
    return unit is not None and getattr(resource, 'scoped_unit', None) == unit
