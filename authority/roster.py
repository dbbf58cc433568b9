from team.models import Membership, Player

from .constants import Role
from .hierarchy import normalize_position_groups, position_groups_for_unit


class TeamRoster:
    """
    Active-roster and Head Coach lookups for one team.

    Capability derivation turns a role/unit/position-group scope into
    concrete player ids through this object; results are memoized for the
    lifetime of the instance (one request).
    """

    def __init__(self, team):
        self.team_id = getattr(team, 'pk', team)
        self._players_by_user = {}
        self._ids_by_groups = {}
        self._head_coach_ids = None

    def _active(self):
        return Player.objects.filter(team_id=self.team_id, status=Player.STATUS_ACTIVE)

    def player_for_user(self, user_id):
        if user_id is None:
            return None
        if user_id not in self._players_by_user:
            self._players_by_user[user_id] = self._active().filter(user_id=user_id).first()
        return self._players_by_user[user_id]

    def player_ids(self, position_groups=None):
        """Ids of active players, optionally restricted to ``position_groups``."""
        key = None if position_groups is None else normalize_position_groups(position_groups)
        if key not in self._ids_by_groups:
            queryset = self._active()
            if key is not None:
                queryset = queryset.filter(position_group__in=key)
            self._ids_by_groups[key] = tuple(queryset.order_by('id').values_list('id', flat=True))
        return self._ids_by_groups[key]

    def is_active_player(self, player_id):
        return self._active().filter(id=player_id).exists()

    def is_head_coach(self, user_id):
        if self._head_coach_ids is None:
            self._head_coach_ids = set(
                Membership.objects.filter(team_id=self.team_id, role=Role.HEAD_COACH).values_list('user_id', flat=True)
            )
        return user_id is not None and user_id in self._head_coach_ids

    def audience_player_ids(self, scoping):
        """
        Expand a resource's scoping into the active player ids it reaches.

        Explicit player ids win, then position groups, then the unit's
        position groups; an unscoped resource reaches the whole roster.
        """
        if scoping.scoped_player_ids:
            return tuple(scoping.scoped_player_ids)
        if scoping.scoped_position_groups:
            return self.player_ids(scoping.scoped_position_groups)
        if scoping.scoped_unit:
            return self.player_ids(position_groups_for_unit(scoping.scoped_unit))
        return self.player_ids()
