import pytest

from authority.models import AuditLog
from depth_chart.models import DepthChartEntry, PositionLabel

pytestmark = pytest.mark.django_db


def url(team, suffix=''):
    return f"/api/teams/{team.id}/depth-chart{suffix}"


def as_user(api_client, api_team, name):
    api_client.force_authenticate(user=api_team['users'][name])
    return api_client


def slots(team, unit='OFFENSE'):
    return {
        (e.position, e.string): e.player_id
        for e in DepthChartEntry.objects.filter(team=team, unit=unit)
    }


def test_head_coach_writes_batch(api_client, api_team):
    team, players = api_team['team'], api_team['players']
    client = as_user(api_client, api_team, 'head')

    response = client.post(url(team), {'entries': [
        {'unit': 'OFFENSE', 'position': 'QB', 'string': 1, 'player_id': players['qb1'].id},
        {'unit': 'OFFENSE', 'position': 'QB', 'string': 2, 'player_id': players['qb2'].id},
        {'unit': 'DEFENSE', 'position': 'LCB', 'string': 1, 'player_id': players['cb'].id},
    ]}, format='json')

    assert response.status_code == 200
    assert response.data['success'] is True
    assert len(response.data['entries']) == 3
    assert slots(team) == {('QB', 1): players['qb1'].id, ('QB', 2): players['qb2'].id}

    log = AuditLog.objects.get(team=team, action='depth_chart_updated')
    assert log.actor == api_team['users']['head']
    assert log.metadata['entries_count'] == 3
    assert log.metadata['units'] == ['DEFENSE', 'OFFENSE']


def test_entries_must_be_a_list(api_client, api_team):
    client = as_user(api_client, api_team, 'head')
    response = client.post(url(api_team['team']), {'entries': {'unit': 'OFFENSE'}}, format='json')
    assert response.status_code == 400


def test_coordinator_blocked_outside_unit(api_client, api_team):
    team, players = api_team['team'], api_team['players']
    client = as_user(api_client, api_team, 'oc')

    response = client.post(url(team), {'entries': [
        {'unit': 'OFFENSE', 'position': 'QB', 'string': 1, 'player_id': players['qb1'].id},
        {'unit': 'DEFENSE', 'position': 'LCB', 'string': 1, 'player_id': players['cb'].id},
    ]}, format='json')

    assert response.status_code == 403
    assert 'DEFENSE' in str(response.data['detail'])
    # Nothing from a rejected batch is written
    assert not DepthChartEntry.objects.filter(team=team).exists()
    assert not AuditLog.objects.filter(team=team).exists()


def test_inactive_player_rejected(api_client, api_team):
    team, players = api_team['team'], api_team['players']
    client = as_user(api_client, api_team, 'head')

    response = client.post(url(team), {'entries': [
        {'unit': 'OFFENSE', 'position': 'QB', 'string': 1, 'player_id': players['gone'].id},
    ]}, format='json')

    assert response.status_code == 400
    assert not DepthChartEntry.objects.filter(team=team).exists()


def test_same_player_twice_in_unit_rejected(api_client, api_team):
    team, players = api_team['team'], api_team['players']
    client = as_user(api_client, api_team, 'head')

    response = client.post(url(team), {'entries': [
        {'unit': 'OFFENSE', 'position': 'QB', 'string': 1, 'player_id': players['qb1'].id},
        {'unit': 'OFFENSE', 'position': 'RB', 'string': 1, 'player_id': players['qb1'].id},
    ]}, format='json')

    assert response.status_code == 400


def test_assign_demotes_starter(api_client, api_team):
    team, players = api_team['team'], api_team['players']
    client = as_user(api_client, api_team, 'head')
    client.post(url(team), {'entries': [
        {'unit': 'OFFENSE', 'position': 'QB', 'string': 1, 'player_id': players['qb1'].id},
        {'unit': 'OFFENSE', 'position': 'QB', 'string': 2, 'player_id': players['qb2'].id},
    ]}, format='json')

    response = client.post(url(team, '/assign'), {
        'unit': 'OFFENSE', 'position': 'QB', 'string': 1, 'player_id': players['qb2'].id,
    }, format='json')

    assert response.status_code == 200
    assert slots(team) == {('QB', 1): players['qb2'].id, ('QB', 2): players['qb1'].id}


def test_reorder_and_remove(api_client, api_team):
    team, players = api_team['team'], api_team['players']
    client = as_user(api_client, api_team, 'oc')
    client.post(url(team), {'entries': [
        {'unit': 'OFFENSE', 'position': 'QB', 'string': 1, 'player_id': players['qb1'].id},
        {'unit': 'OFFENSE', 'position': 'QB', 'string': 2, 'player_id': players['qb2'].id},
    ]}, format='json')

    response = client.post(url(team, '/reorder'), {
        'unit': 'OFFENSE', 'position': 'QB', 'string': 2, 'to_string': 1,
    }, format='json')
    assert response.status_code == 200
    assert slots(team) == {('QB', 1): players['qb2'].id, ('QB', 2): players['qb1'].id}

    response = client.post(url(team, '/remove'), {'unit': 'OFFENSE', 'position': 'QB', 'string': 2}, format='json')
    assert response.status_code == 200
    assert slots(team) == {('QB', 1): players['qb2'].id}


def test_empty_slot_remove_is_a_no_op(api_client, api_team):
    client = as_user(api_client, api_team, 'head')
    response = client.post(url(api_team['team'], '/remove'), {
        'unit': 'OFFENSE', 'position': 'QB', 'string': 3,
    }, format='json')
    assert response.status_code == 200
    assert response.data['entries'] == []


def test_position_coach_limited_to_own_positions(api_client, api_team):
    team, players = api_team['team'], api_team['players']
    client = as_user(api_client, api_team, 'wrcoach')

    allowed = client.post(url(team, '/assign'), {
        'unit': 'OFFENSE', 'position': 'WR1', 'string': 1, 'player_id': players['wr1'].id,
    }, format='json')
    blocked = client.post(url(team, '/assign'), {
        'unit': 'OFFENSE', 'position': 'QB', 'string': 1, 'player_id': players['qb1'].id,
    }, format='json')

    assert allowed.status_code == 200
    assert blocked.status_code == 403
    assert slots(team) == {('WR1', 1): players['wr1'].id}


def test_player_reads_but_cannot_write(api_client, api_team):
    team, players = api_team['team'], api_team['players']
    DepthChartEntry.objects.create(team=team, unit='OFFENSE', position='WR1', string=1, player=players['wr1'])
    client = as_user(api_client, api_team, 'player')

    response = client.get(url(team), {'unit': 'offense'})
    assert response.status_code == 200
    assert [e['player_name'] for e in response.data['entries']] == ['Cal Wide']

    response = client.post(url(team, '/remove'), {'unit': 'OFFENSE', 'position': 'WR1', 'string': 1}, format='json')
    assert response.status_code == 403


def test_non_member_is_rejected(api_client, api_team, django_user_model):
    outsider = django_user_model.objects.create_user(email='x@example.com', password='pass12345', username='x')
    api_client.force_authenticate(user=outsider)
    assert api_client.get(url(api_team['team'])).status_code == 403


def test_position_labels(api_client, api_team):
    team = api_team['team']
    client = as_user(api_client, api_team, 'head')
    response = client.post(url(team, '/position-labels'), {
        'unit': 'OFFENSE', 'position': 'wrx', 'label': 'Split End',
    }, format='json')
    assert response.status_code == 200
    assert response.data['key'] == 'OFFENSE-WRX'

    client.post(url(team, '/position-labels'), {'unit': 'OFFENSE', 'position': 'WRX', 'label': 'X'}, format='json')
    assert PositionLabel.objects.get(team=team, position='WRX').label == 'X'

    client = as_user(api_client, api_team, 'oc')
    assert client.post(url(team, '/position-labels'), {
        'unit': 'OFFENSE', 'position': 'WRX', 'label': 'Nope',
    }, format='json').status_code == 403
    assert client.get(url(team, '/position-labels')).status_code == 200
