"""
Unit / position-group hierarchy.

Fixed lookup tables that classify position groups into units and
coordinator designations into the unit they run, plus the creation-time
scoping rule shared by events and documents.

Hierarchy:
- Head Coach -> entire program (no scoping)
- OC / DC / ST -> offense / defense / special teams
- Position coaches -> their position group(s)
- Players / Parents -> consumers only
"""

from dataclasses import dataclass

from .constants import CoordinatorType, Role, Unit

OFFENSIVE_POSITION_GROUPS = ('QB', 'RB', 'WR', 'OL', 'TE', 'FB')
DEFENSIVE_POSITION_GROUPS = ('DL', 'LB', 'DB', 'DE', 'DT', 'CB', 'S', 'OLB', 'ILB', 'FS', 'SS')
SPECIAL_TEAMS_POSITION_GROUPS = ('K', 'P', 'LS', 'KR', 'PR')

UNIT_POSITION_GROUPS = {
    Unit.OFFENSE: OFFENSIVE_POSITION_GROUPS,
    Unit.DEFENSE: DEFENSIVE_POSITION_GROUPS,
    Unit.SPECIAL_TEAMS: SPECIAL_TEAMS_POSITION_GROUPS,
}

COORDINATOR_UNITS = {
    CoordinatorType.OC: Unit.OFFENSE,
    CoordinatorType.DC: Unit.DEFENSE,
    CoordinatorType.ST: Unit.SPECIAL_TEAMS,
}


def normalize_position_groups(groups):
    """
    Return ``groups`` as a tuple of upper-case labels.

    Anything that is not a list/tuple/set of strings collapses to an empty
    tuple so malformed membership data never widens a scope.
    """
    if not isinstance(groups, (list, tuple, set, frozenset)):
        return ()
    normalized = []
    for group in groups:
        if isinstance(group, str) and group.strip():
            label = group.strip().upper()
            if label not in normalized:
                normalized.append(label)
    return tuple(normalized)


def unit_for_position_group(position_group):
    if not isinstance(position_group, str) or not position_group:
        return None
    upper = position_group.strip().upper()
    for unit, groups in UNIT_POSITION_GROUPS.items():
        if upper in groups:
            return unit
    return None


def position_groups_for_unit(unit):
    return UNIT_POSITION_GROUPS.get(unit, ())


def role_of(membership):
    """The membership's role, or None when it is missing or unrecognized."""
    role = getattr(membership, 'role', None)
    if role in Role.values:
        return Role(role)
    return None


def coordinator_type_for(membership):
    coordinator_type = getattr(membership, 'coordinator_type', None)
    if coordinator_type in CoordinatorType.values:
        return CoordinatorType(coordinator_type)
    return None


def coordinator_unit(coordinator_type):
    return COORDINATOR_UNITS.get(coordinator_type)


def membership_position_groups(membership):
    return normalize_position_groups(getattr(membership, 'position_groups', None))


@dataclass(frozen=True)
class Scoping:
    scoped_player_ids: tuple = None
    scoped_position_groups: tuple = None
    scoped_unit: str = None
    coordinator_type: str = None

    @property
    def is_scoped(self):
        return bool(self.scoped_player_ids or self.scoped_position_groups or self.scoped_unit)

    def as_fields(self):
        return {
            'scoped_player_ids': list(self.scoped_player_ids) if self.scoped_player_ids else None,
            'scoped_position_groups': list(self.scoped_position_groups) if self.scoped_position_groups else None,
            'scoped_unit': self.scoped_unit,
        }


UNSCOPED = Scoping()


def determine_event_scoping(membership):
    """
    Scoping stamped onto a resource at creation time.

    Head Coach creations are program-wide, coordinators scope to their unit,
    position coaches to their position groups. Depends only on the creator's
    membership, never on existing resources.
    """
    role = role_of(membership)
    if role == Role.HEAD_COACH:
        return UNSCOPED

    if role == Role.ASSISTANT_COACH:
        coordinator_type = coordinator_type_for(membership)
        if coordinator_type:
            return Scoping(
                scoped_unit=coordinator_unit(coordinator_type),
                coordinator_type=coordinator_type,
            )

        groups = membership_position_groups(membership)
        if groups:
            return Scoping(scoped_position_groups=groups)

    return UNSCOPED
