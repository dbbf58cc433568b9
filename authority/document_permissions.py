"""
Document and resource permissions.

- Head Coach: full access to every document.
- Coordinators (OC/DC/ST): create, edit and link documents for their unit;
  they see their unit's materials, never the whole library.
- Position coaches: read-only access to their position groups' materials.
- Players: read-only access to documents scoped to them or their group.
- Parents: nothing, unless a document is explicitly shared with parents on a
  school-level organization.
"""

from .capabilities import FULL_ACCESS, NO_ACCESS, Capabilities
from .constants import OrganizationType, Role, Visibility
from .hierarchy import position_groups_for_unit, role_of
from .resolver import COORDINATOR, POSITION_COACH, admits, assistant_scope, is_creator, player_context
from .roster import TeamRoster


def _roster(team, roster):
    return roster if roster is not None else TeamRoster(team)


def _organization_type(team):
    return getattr(team, 'organization_type', None)


def get_document_permissions(membership, team, roster=None):
    role = role_of(membership)

    if role == Role.HEAD_COACH:
        return FULL_ACCESS

    if role == Role.PLAYER:
        context = player_context(membership, _roster(team, roster))
        return Capabilities(
            can_view=True,
            scoped_position_groups=context.position_groups or None,
            scoped_player_ids=(context.player_id,) if context.player_id is not None else (),
        )

    if role == Role.ASSISTANT_COACH:
        scope = assistant_scope(membership)
        if scope.kind == COORDINATOR:
            groups = position_groups_for_unit(scope.unit)
            return Capabilities(
                can_view=True,
                can_create=True,
                can_edit=True,
                can_link=True,
                scoped_unit=scope.unit,
                scoped_position_groups=groups,
                scoped_player_ids=_roster(team, roster).player_ids(groups),
            )
        if scope.kind == POSITION_COACH:
            return Capabilities(
                can_view=True,
                scoped_position_groups=scope.position_groups,
                scoped_player_ids=_roster(team, roster).player_ids(scope.position_groups),
            )
        return Capabilities(can_view=True, can_view_all=True)

    # Parents and unrecognized roles
    return NO_ACCESS


def can_view_document(membership, team, document, roster=None):
    role = role_of(membership)
    if role == Role.PARENT:
        # Only school-level programs share with parents, and only on request
        if _organization_type(team) != OrganizationType.SCHOOL:
            return False
        return getattr(document, 'visibility', None) in (Visibility.PARENTS, Visibility.ALL)

    roster = _roster(team, roster)
    capabilities = get_document_permissions(membership, team, roster)
    player_id = None
    if role == Role.PLAYER and capabilities.scoped_player_ids:
        player_id = capabilities.scoped_player_ids[0]
    return admits(membership, capabilities, document, player_id=player_id)


def can_edit_document(membership, team, document, roster=None):
    capabilities = get_document_permissions(membership, team, roster)
    if not capabilities.can_edit:
        return False
    if role_of(membership) == Role.HEAD_COACH:
        return True
    if capabilities.scoped_unit and getattr(document, 'scoped_unit', None) == capabilities.scoped_unit:
        return True
    return is_creator(membership, document)


def can_delete_document(membership, team, document=None, roster=None):
    """Deleting documents is reserved for the Head Coach, creators included."""
    return role_of(membership) == Role.HEAD_COACH
