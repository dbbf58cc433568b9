"""
Inventory permissions.

Inventory is operational tracking only. Coordinators manage their unit's
equipment, position coaches hand out gear to their group, players see what
is checked out to them, parents see nothing. Deletion is Head-Coach-only.
"""

from .capabilities import FULL_ACCESS, NO_ACCESS, Capabilities
from .constants import Role
from .hierarchy import position_groups_for_unit, role_of
from .resolver import COORDINATOR, POSITION_COACH, assistant_scope, is_creator
from .roster import TeamRoster


def get_inventory_permissions(membership, team, roster=None):
    role = role_of(membership)

    if role == Role.HEAD_COACH:
        return FULL_ACCESS

    if role == Role.PLAYER:
        roster = roster if roster is not None else TeamRoster(team)
        player = roster.player_for_user(getattr(membership, 'user_id', None))
        return Capabilities(
            can_view=True,
            scoped_player_ids=(player.pk,) if player is not None else (),
        )

    if role == Role.ASSISTANT_COACH:
        scope = assistant_scope(membership)
        roster = roster if roster is not None else TeamRoster(team)
        if scope.kind == COORDINATOR:
            return Capabilities(
                can_view=True,
                can_create=True,
                can_edit=True,
                can_assign=True,
                scoped_unit=scope.unit,
                scoped_player_ids=roster.player_ids(position_groups_for_unit(scope.unit)),
            )
        if scope.kind == POSITION_COACH:
            return Capabilities(
                can_view=True,
                can_assign=True,
                scoped_position_groups=scope.position_groups,
                scoped_player_ids=roster.player_ids(scope.position_groups),
            )
        return Capabilities(can_view=True, can_view_all=True)

    # Parents have no inventory access
    return NO_ACCESS


def _assigned_player_id(item):
    return getattr(item, 'assigned_player_id', None)


def _in_scope(player_id, capabilities):
    if capabilities.scoped_player_ids is None:
        return True
    return str(player_id) in {str(pk) for pk in capabilities.scoped_player_ids}


def can_view_inventory_item(membership, team, item, roster=None):
    capabilities = get_inventory_permissions(membership, team, roster)
    if not capabilities.can_view:
        return False
    if capabilities.can_view_all:
        return True

    assigned = _assigned_player_id(item)
    role = role_of(membership)
    if role == Role.PLAYER:
        # Players never see unassigned stock
        return assigned is not None and _in_scope(assigned, capabilities)

    if role == Role.ASSISTANT_COACH:
        return assigned is None or _in_scope(assigned, capabilities)
    return False


def can_edit_inventory_item(membership, team, item, roster=None):
    capabilities = get_inventory_permissions(membership, team, roster)
    if not capabilities.can_edit:
        return False
    if role_of(membership) == Role.HEAD_COACH:
        return True
    if is_creator(membership, item):
        return True
    if capabilities.scoped_unit is None:
        return False
    item_unit = getattr(item, 'scoped_unit', None)
    if item_unit:
        return item_unit == capabilities.scoped_unit
    # Unscoped stock belongs to the unit of the player holding it
    assigned = _assigned_player_id(item)
    return assigned is not None and _in_scope(assigned, capabilities)


def can_delete_inventory_item(membership, team, item=None, roster=None):
    return role_of(membership) == Role.HEAD_COACH


def can_assign_to_player(membership, team, player_id, roster=None):
    capabilities = get_inventory_permissions(membership, team, roster)
    if not capabilities.can_assign:
        return False
    if role_of(membership) == Role.HEAD_COACH:
        return True
    return _in_scope(player_id, capabilities)
