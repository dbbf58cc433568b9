"""
Shared fixtures.

Permission tests run against unsaved model instances and an in-memory
roster, so they need no database. API tests use ``@pytest.mark.django_db``
and the ``api_team`` fixture below.
"""

import pytest
from rest_framework.test import APIClient

from authority.constants import OrganizationType, Role
from authority.hierarchy import normalize_position_groups, position_groups_for_unit
from team.models import Membership, Organization, Player, Team


class FakeRoster:
    """Drop-in for ``TeamRoster`` backed by a list of unsaved players."""

    def __init__(self, players=(), head_coach_ids=()):
        self.players = list(players)
        self.head_coach_ids = set(head_coach_ids)

    def _active(self):
        return [p for p in self.players if p.status == Player.STATUS_ACTIVE]

    def player_for_user(self, user_id):
        for player in self._active():
            if user_id is not None and player.user_id == user_id:
                return player
        return None

    def player_ids(self, position_groups=None):
        groups = None if position_groups is None else set(normalize_position_groups(position_groups))
        return tuple(
            p.pk for p in self._active()
            if groups is None or p.position_group in groups
        )

    def is_active_player(self, player_id):
        return any(p.pk == player_id for p in self._active())

    def is_head_coach(self, user_id):
        return user_id in self.head_coach_ids

    def audience_player_ids(self, scoping):
        if scoping.scoped_player_ids:
            return tuple(scoping.scoped_player_ids)
        if scoping.scoped_position_groups:
            return self.player_ids(scoping.scoped_position_groups)
        if scoping.scoped_unit:
            return self.player_ids(position_groups_for_unit(scoping.scoped_unit))
        return self.player_ids()


def make_team(org_type=OrganizationType.SCHOOL):
    return Team(id=1, name='Wildcats', organization=Organization(id=1, name='Central High', type=org_type))


def member(role, user_id=100, coordinator_type=None, position_groups=None):
    return Membership(
        team_id=1,
        user_id=user_id,
        role=role,
        coordinator_type=coordinator_type,
        position_groups=position_groups,
    )


# Players: id, user_id, position group
ROSTER = [
    (1, 11, 'QB'),
    (2, 12, 'WR'),
    (3, 13, 'WR'),
    (4, 14, 'OL'),
    (5, 15, 'DB'),
    (6, 16, 'LB'),
    (7, 17, 'K'),
]


@pytest.fixture
def team():
    return make_team()


@pytest.fixture
def university_team():
    return make_team(OrganizationType.UNIVERSITY)


@pytest.fixture
def roster():
    players = [
        Player(id=pk, team_id=1, user_id=user_id, first_name=f"P{pk}", position_group=group)
        for pk, user_id, group in ROSTER
    ]
    # user 1 is the head_coach fixture
    return FakeRoster(players, head_coach_ids=[1])


@pytest.fixture
def head_coach():
    return member(Role.HEAD_COACH, user_id=1)


@pytest.fixture
def offensive_coordinator():
    return member(Role.ASSISTANT_COACH, user_id=2, coordinator_type='OC')


@pytest.fixture
def defensive_coordinator():
    return member(Role.ASSISTANT_COACH, user_id=3, coordinator_type='DC')


@pytest.fixture
def wr_coach():
    return member(Role.ASSISTANT_COACH, user_id=4, position_groups=['WR'])


@pytest.fixture
def generic_assistant():
    return member(Role.ASSISTANT_COACH, user_id=5)


@pytest.fixture
def wr_player():
    # user 12 is roster player 2
    return member(Role.PLAYER, user_id=12, position_groups=['WR'])


@pytest.fixture
def parent():
    return member(Role.PARENT, user_id=50)


# API fixtures

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def api_team(django_user_model):
    """A saved team with one member per role and a small active roster."""
    organization = Organization.objects.create(name='Central High', type=OrganizationType.SCHOOL)
    users = {
        name: django_user_model.objects.create_user(email=f"{name}@example.com", password='pass12345', username=name)
        for name in ('head', 'oc', 'dc', 'wrcoach', 'assistant', 'player', 'parent')
    }
    team = Team.objects.create(name='Wildcats', organization=organization, created_by=users['head'])
    Membership.objects.create(team=team, user=users['head'], role=Role.HEAD_COACH)
    Membership.objects.create(team=team, user=users['oc'], role=Role.ASSISTANT_COACH, coordinator_type='OC')
    Membership.objects.create(team=team, user=users['dc'], role=Role.ASSISTANT_COACH, coordinator_type='DC')
    Membership.objects.create(team=team, user=users['wrcoach'], role=Role.ASSISTANT_COACH, position_groups=['wr'])
    Membership.objects.create(team=team, user=users['assistant'], role=Role.ASSISTANT_COACH)
    Membership.objects.create(team=team, user=users['player'], role=Role.PLAYER)
    Membership.objects.create(team=team, user=users['parent'], role=Role.PARENT)

    players = {
        'qb1': Player.objects.create(team=team, first_name='Alex', last_name='Starter', position_group='QB'),
        'qb2': Player.objects.create(team=team, first_name='Ben', last_name='Backup', position_group='QB'),
        'wr1': Player.objects.create(team=team, user=users['player'], first_name='Cal', last_name='Wide', position_group='WR'),
        'lt': Player.objects.create(team=team, first_name='Dan', last_name='Tackle', position_group='OL'),
        'cb': Player.objects.create(team=team, first_name='Eli', last_name='Corner', position_group='DB'),
        'gone': Player.objects.create(team=team, first_name='Fin', last_name='Former', position_group='QB', status=Player.STATUS_INACTIVE),
    }
    return {'team': team, 'users': users, 'players': players}
