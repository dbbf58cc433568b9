import pytest

from authority.constants import Role, Unit
from authority.inventory_permissions import (
    can_assign_to_player,
    can_delete_inventory_item,
    can_edit_inventory_item,
    can_view_inventory_item,
    get_inventory_permissions,
)
from inventory.models import InventoryItem

from .conftest import member


def item(**fields):
    return InventoryItem(id=1, team_id=1, name='Helmet', **fields)


def test_coordinator_manages_but_never_views_all(offensive_coordinator, team, roster):
    caps = get_inventory_permissions(offensive_coordinator, team, roster)
    assert caps.can_create and caps.can_edit and caps.can_assign
    assert not caps.can_delete
    assert not caps.can_view_all
    assert set(caps.scoped_player_ids) == {1, 2, 3, 4}


def test_coordinator_sees_unit_items_and_unassigned(offensive_coordinator, team, roster):
    assert can_view_inventory_item(offensive_coordinator, team, item(), roster)
    assert can_view_inventory_item(offensive_coordinator, team, item(assigned_player_id=1), roster)
    assert not can_view_inventory_item(offensive_coordinator, team, item(assigned_player_id=5), roster)


def test_position_coach_assigns_within_group(wr_coach, team, roster):
    caps = get_inventory_permissions(wr_coach, team, roster)
    assert caps.can_assign and not caps.can_create and not caps.can_edit
    assert can_assign_to_player(wr_coach, team, 2, roster)
    assert not can_assign_to_player(wr_coach, team, 1, roster)
    assert can_view_inventory_item(wr_coach, team, item(assigned_player_id=3), roster)
    assert not can_view_inventory_item(wr_coach, team, item(assigned_player_id=4), roster)


def test_player_sees_only_own_gear(wr_player, team, roster):
    assert can_view_inventory_item(wr_player, team, item(assigned_player_id=2), roster)
    assert not can_view_inventory_item(wr_player, team, item(assigned_player_id=3), roster)
    assert not can_view_inventory_item(wr_player, team, item(), roster)
    assert not can_assign_to_player(wr_player, team, 2, roster)


def test_player_without_roster_record_sees_nothing(team, roster):
    stranger = member(Role.PLAYER, user_id=999)
    assert get_inventory_permissions(stranger, team, roster).scoped_player_ids == ()
    assert not can_view_inventory_item(stranger, team, item(assigned_player_id=1), roster)


def test_parent_has_no_inventory_access(parent, team, roster):
    caps = get_inventory_permissions(parent, team, roster)
    assert not caps.can_view
    assert not can_view_inventory_item(parent, team, item(), roster)


def test_head_coach_assigns_anyone(head_coach, team, roster):
    assert can_assign_to_player(head_coach, team, 7, roster)
    assert can_view_inventory_item(head_coach, team, item(assigned_player_id=7), roster)


def test_generic_assistant_views_all_but_cannot_assign(generic_assistant, team, roster):
    assert can_view_inventory_item(generic_assistant, team, item(assigned_player_id=7), roster)
    assert not can_assign_to_player(generic_assistant, team, 7, roster)


def test_edit_rules(head_coach, offensive_coordinator, defensive_coordinator, team, roster):
    offense_gear = item(scoped_unit=Unit.OFFENSE, created_by_id=99)
    assert can_edit_inventory_item(head_coach, team, offense_gear, roster)
    assert can_edit_inventory_item(offensive_coordinator, team, offense_gear, roster)
    assert not can_edit_inventory_item(defensive_coordinator, team, offense_gear, roster)
    own = item(scoped_unit=Unit.OFFENSE, created_by_id=defensive_coordinator.user_id)
    assert can_edit_inventory_item(defensive_coordinator, team, own, roster)


@pytest.mark.parametrize('membership', [
    member(Role.ASSISTANT_COACH, coordinator_type='OC'),
    member(Role.ASSISTANT_COACH, coordinator_type='DC'),
    member(Role.ASSISTANT_COACH, coordinator_type='ST'),
    member(Role.ASSISTANT_COACH, position_groups=['OL']),
    member(Role.ASSISTANT_COACH),
    member(Role.PLAYER),
    member(Role.PARENT),
    member(None),
])
def test_only_head_coach_deletes_inventory(membership, team, roster):
    assert not can_delete_inventory_item(membership, team, item(created_by_id=membership.user_id), roster)


def test_head_coach_deletes_inventory(head_coach, team, roster):
    assert can_delete_inventory_item(head_coach, team, item(), roster)


def test_unknown_role_fails_closed(team, roster):
    membership = member('TRAINER', coordinator_type='OC')
    assert not get_inventory_permissions(membership, team, roster).can_view
    assert not can_view_inventory_item(membership, team, item(), roster)
    assert not can_edit_inventory_item(membership, team, item(created_by_id=membership.user_id), roster)
    assert not can_assign_to_player(membership, team, 1, roster)


def test_coordinator_edits_unscoped_gear_held_in_unit(offensive_coordinator, defensive_coordinator, team, roster):
    # Head Coach stock has no unit; the holder decides
    with_receiver = item(assigned_player_id=2, created_by_id=1)
    assert can_edit_inventory_item(offensive_coordinator, team, with_receiver, roster)
    assert not can_edit_inventory_item(defensive_coordinator, team, with_receiver, roster)
    assert not can_edit_inventory_item(offensive_coordinator, team, item(created_by_id=1), roster)
    # An explicit unit wins over the holder
    tagged = item(scoped_unit=Unit.DEFENSE, assigned_player_id=2, created_by_id=1)
    assert not can_edit_inventory_item(offensive_coordinator, team, tagged, roster)
