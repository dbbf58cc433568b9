import logging

from django.conf import settings
from django.db import transaction

from authority import audit
from authority.depth_chart_permissions import can_edit_depth_chart_position, can_edit_depth_chart_unit
from authority.permissions import deny
from authority.roster import TeamRoster

from .engine import MAX_STRING, DepthChart
from .exceptions import InvalidAssignment
from .models import DepthChartEntry

logger = logging.getLogger(__name__)


def max_string():
    return getattr(settings, 'DEPTH_CHART_MAX_STRING', MAX_STRING)


def load_depth_chart(team):
    return DepthChart.from_entries(DepthChartEntry.objects.filter(team=team), max_string=max_string())


def check_edit_permission(membership, key):
    if not can_edit_depth_chart_unit(membership, key.unit):
        deny(f"You do not have permission to edit {key.unit} depth charts", membership, unit=key.unit)
    if not can_edit_depth_chart_position(membership, key.unit, key.position):
        deny(
            f"You do not have permission to edit {key.position} position in {key.unit}",
            membership,
            unit=key.unit,
            position=key.position,
        )


def handle_depth_chart_update(team, membership, updates, actor=None, roster=None):
    """
    Gate, validate and persist a batch of depth chart writes.

    Every write is checked before anything is touched; the batch is then
    applied inside one transaction. Returns the final write per key.
    """
    updates = list(updates)
    if not updates:
        raise InvalidAssignment("No depth chart entries supplied.")

    for update in updates:
        check_edit_permission(membership, update.key)

    roster = roster if roster is not None else TeamRoster(team)
    for player_id in {update.player_id for update in updates if update.player_id is not None}:
        if not roster.is_active_player(player_id):
            raise InvalidAssignment(f"Player {player_id} is not in the team roster or is inactive")

    with transaction.atomic():
        chart = load_depth_chart(team)
        final = chart.apply(updates)

        for key in final:
            DepthChartEntry.objects.filter(team=team, **key.as_fields()).delete()
        DepthChartEntry.objects.bulk_create([
            DepthChartEntry(team=team, player_id=player_id, **key.as_fields())
            for key, player_id in final.items()
            if player_id is not None
        ])

        units = sorted({key.unit for key in final})
        positions = sorted({key.position for key in final})
        audit.record(
            team,
            actor,
            'depth_chart_updated',
            entries_count=len(final),
            units=units,
            positions=positions,
        )

    audit.log_depth_chart_edit(
        user_id=getattr(actor, 'id', None),
        team_id=team.id,
        role=membership.role,
        entries_count=len(final),
        unit=units[0] if len(units) == 1 else None,
        position=positions[0] if len(positions) == 1 else None,
    )
    logger.debug("Depth chart for team %s now holds %s slots", team.id, len(chart))
    return final
