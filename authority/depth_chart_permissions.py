"""
Depth chart editing authority.

- Head Coach: every unit
- OC / DC / ST: offense / defense / special teams
- Position coaches: positions that belong to their position groups
- Players and parents: read-only
"""

from .capabilities import NO_ACCESS, READ_ONLY, Capabilities
from .constants import Role, Unit
from .hierarchy import coordinator_type_for, coordinator_unit, membership_position_groups, role_of, unit_for_position_group

# Depth chart position labels each position group is responsible for
POSITION_GROUP_POSITIONS = {
    Unit.OFFENSE: {
        'OL': ('LT', 'LG', 'C', 'RG', 'RT'),
        'WR': ('WR', 'WRX', 'WRY', 'WRZ', 'WR1', 'WR2', 'WR3', 'WR4', 'X', 'Z'),
        'RB': ('RB', 'HB', 'FB'),
        'TE': ('TE', 'Y', 'H'),
        'QB': ('QB',),
    },
    Unit.DEFENSE: {
        'DL': ('DE', 'DT', 'DL', 'NT', 'LDE', 'RDE', 'LDT', 'RDT'),
        'LB': ('OLB', 'ILB', 'MLB', 'LB', 'SLB', 'WLB', 'LOLB', 'ROLB', 'LILB', 'RILB'),
        'DB': ('CB', 'S', 'FS', 'SS', 'DB', 'LCB', 'RCB', 'NCB', 'DCB', 'LSS', 'RSS'),
    },
    Unit.SPECIAL_TEAMS: {
        'K': ('K',),
        'P': ('P',),
        'LS': ('LS',),
    },
}


def normalize_unit(unit):
    """Accept ``OFFENSE`` as well as the lower-case ``offense`` form; unknown -> None."""
    if not isinstance(unit, str):
        return None
    upper = unit.strip().upper()
    return Unit(upper) if upper in Unit.values else None


def position_group_covers(position_group, unit, position):
    group = position_group.upper()
    label = position.strip().upper()
    if label == group:
        return True
    return label in POSITION_GROUP_POSITIONS.get(unit, {}).get(group, ())


def can_view_depth_chart(membership):
    return role_of(membership) is not None


def can_edit_depth_chart_unit(membership, unit):
    role = role_of(membership)
    target = normalize_unit(unit)
    if role is None or target is None:
        return False
    if role == Role.HEAD_COACH:
        return True
    if role != Role.ASSISTANT_COACH:
        return False

    if coordinator_unit(coordinator_type_for(membership)) == target:
        return True
    return any(unit_for_position_group(group) == target for group in membership_position_groups(membership))


def can_edit_depth_chart_position(membership, unit, position):
    if not can_edit_depth_chart_unit(membership, unit):
        return False
    role = role_of(membership)
    if role == Role.HEAD_COACH:
        return True
    target = normalize_unit(unit)
    if coordinator_unit(coordinator_type_for(membership)) == target:
        return True
    if not isinstance(position, str) or not position.strip():
        return False
    return any(position_group_covers(group, target, position) for group in membership_position_groups(membership))


def get_depth_chart_permissions(membership):
    role = role_of(membership)
    if role is None:
        return NO_ACCESS
    if role == Role.HEAD_COACH:
        return Capabilities(can_view=True, can_edit=True, can_assign=True, can_view_all=True)
    if role != Role.ASSISTANT_COACH:
        return READ_ONLY

    unit = coordinator_unit(coordinator_type_for(membership))
    if unit is not None:
        return Capabilities(can_view=True, can_edit=True, can_assign=True, can_view_all=True, scoped_unit=unit)
    groups = membership_position_groups(membership)
    if groups:
        return Capabilities(can_view=True, can_edit=True, can_assign=True, can_view_all=True, scoped_position_groups=groups)
    return Capabilities(can_view=True, can_view_all=True)
