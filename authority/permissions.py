from django.shortcuts import get_object_or_404
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import BasePermission

from team.models import Membership, Team

from .audit import log_permission_denial
from .constants import Role


def get_team(team_id):
    return get_object_or_404(Team.objects.select_related('organization'), id=team_id)


def get_membership(user, team_id):
    """The requester's membership on ``team_id``; non-members are rejected."""
    membership = Membership.objects.filter(team_id=team_id, user_id=user.id).select_related('team').first()
    if membership is None:
        log_permission_denial('not a team member', user_id=user.id, team_id=team_id)
        raise PermissionDenied("You are not a member of this team.")
    return membership


def deny(message, membership=None, **context):
    """Log a denial and raise a 403."""
    if membership is not None:
        context.setdefault('user_id', membership.user_id)
        context.setdefault('team_id', membership.team_id)
        context.setdefault('role', membership.role)
    log_permission_denial(message, **context)
    raise PermissionDenied(message)


class TeamRolePermission(BasePermission):
    """
    Grants access when the requester's membership on the URL's team has one of
    ``allowed_roles``. An empty list admits any member.
    """
    allowed_roles = []

    def has_permission(self, request, view):
        team_id = view.kwargs.get('team_id')
        if not request.user.is_authenticated or team_id is None:
            return False
        membership = getattr(request, 'membership', None)
        if membership is None or membership.team_id != int(team_id):
            membership = get_membership(request.user, team_id)
            request.membership = membership
        allowed_roles = getattr(self, 'allowed_roles', [])
        return not allowed_roles or membership.role in allowed_roles


class IsTeamMember(TeamRolePermission):
    allowed_roles = []


class IsHeadCoach(TeamRolePermission):
    allowed_roles = [Role.HEAD_COACH]


class IsTeamStaff(TeamRolePermission):
    allowed_roles = [Role.HEAD_COACH, Role.ASSISTANT_COACH]
