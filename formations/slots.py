"""
Formation slot geometry.

A formation is exactly 11 slots, each a uniquely named role anchored at
``(x_pct, y_pct)`` on the field canvas (0-100 on both axes, y grows down
the field away from the line of scrimmage). Slots are drawn as boxes
``SLOT_WIDTH`` x ``SLOT_HEIGHT`` percent; two slots overlap when their boxes
intersect.
"""

import logging
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

SLOTS_PER_FORMATION = 11

SLOT_WIDTH = 5.5
SLOT_HEIGHT = 7.0

MAX_RESOLVE_PASSES = 50


@dataclass(frozen=True)
class Slot:
    role: str
    x_pct: float
    y_pct: float


@dataclass(frozen=True)
class Formation:
    id: str
    name: str
    unit: str
    slots: tuple

    def as_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'unit': self.unit,
            'slots': [{'role': s.role, 'x_pct': s.x_pct, 'y_pct': s.y_pct} for s in self.slots],
        }


@dataclass(frozen=True)
class OverlapReport:
    valid: bool
    errors: tuple = ()


def overlaps(a, b):
    return abs(a.x_pct - b.x_pct) < SLOT_WIDTH and abs(a.y_pct - b.y_pct) < SLOT_HEIGHT


def validate_no_overlap(slots):
    errors = []
    for i, a in enumerate(slots):
        for b in slots[i + 1:]:
            if overlaps(a, b):
                errors.append(f"Slot overlap: {a.role} and {b.role} at ({a.x_pct}, {a.y_pct}) / ({b.x_pct}, {b.y_pct})")
    return OverlapReport(valid=not errors, errors=tuple(errors))


def _clamp(value):
    return min(100.0, max(0.0, value))


def resolve_collisions(slots, max_passes=MAX_RESOLVE_PASSES):
    """
    Nudge overlapping slots apart.

    Each colliding pair is pushed apart along the axis with the smaller
    penetration, half the distance each, then clamped to the canvas. Stops
    when a pass moves nothing or after ``max_passes``; the result may still
    overlap when slots are pinned against an edge.
    """
    placed = [replace(slot, x_pct=float(slot.x_pct), y_pct=float(slot.y_pct)) for slot in slots]
    for _ in range(max_passes):
        moved = False
        for i in range(len(placed)):
            for j in range(i + 1, len(placed)):
                a, b = placed[i], placed[j]
                if not overlaps(a, b):
                    continue
                dx = b.x_pct - a.x_pct
                dy = b.y_pct - a.y_pct
                push_x = SLOT_WIDTH - abs(dx)
                push_y = SLOT_HEIGHT - abs(dy)
                if push_x <= push_y:
                    shift = push_x / 2 + 0.01
                    sign = 1 if dx >= 0 else -1
                    placed[i] = replace(a, x_pct=_clamp(a.x_pct - sign * shift))
                    placed[j] = replace(b, x_pct=_clamp(b.x_pct + sign * shift))
                else:
                    shift = push_y / 2 + 0.01
                    sign = 1 if dy >= 0 else -1
                    placed[i] = replace(a, y_pct=_clamp(a.y_pct - sign * shift))
                    placed[j] = replace(b, y_pct=_clamp(b.y_pct + sign * shift))
                moved = True
        if not moved:
            break
    return placed


def layout_formation(formation):
    """Slots ready to render; overlap left after resolution is only warned about."""
    slots = resolve_collisions(formation.slots)
    report = validate_no_overlap(slots)
    if not report.valid:
        logger.warning("Formation %s still overlaps after resolution: %s", formation.id, '; '.join(report.errors))
    return slots, report


def _formation(id, name, unit, *slots):
    return Formation(id=id, name=name, unit=unit, slots=tuple(Slot(role, x, y) for role, x, y in slots))


OFFENSIVE_LINE = (('LT', 36, 45), ('LG', 43, 45), ('C', 50, 45), ('RG', 57, 45), ('RT', 64, 45))

CORNERS_AND_SAFETIES = (('LCB', 10, 45), ('RCB', 90, 45), ('FS', 40, 75), ('SS', 60, 75))

FORMATIONS = (
    # Offense
    _formation(
        'pro_style', 'Pro Style', 'OFFENSE', *OFFENSIVE_LINE,
        ('TE', 71, 45), ('WRX', 8, 45), ('WRZ', 92, 50), ('QB', 50, 58), ('FB', 44, 68), ('RB', 56, 72),
    ),
    _formation(
        'i_formation', 'I Formation', 'OFFENSE', *OFFENSIVE_LINE,
        ('TE', 71, 45), ('WRX', 8, 45), ('WRZ', 92, 50), ('QB', 50, 58), ('FB', 50, 68), ('RB', 50, 80),
    ),
    _formation(
        'shotgun_twins', 'Shotgun Twins', 'OFFENSE', *OFFENSIVE_LINE,
        ('QB', 50, 62), ('RB', 58, 62), ('H', 30, 52), ('Y', 71, 45), ('WR1', 8, 45), ('WR2', 84, 47),
    ),
    _formation(
        'spread', 'Spread', 'OFFENSE', *OFFENSIVE_LINE,
        ('QB', 50, 62), ('RB', 58, 62), ('WR1', 6, 45), ('WR2', 18, 48), ('WR3', 82, 48), ('WR4', 94, 45),
    ),
    _formation(
        'trips', 'Trips', 'OFFENSE', *OFFENSIVE_LINE,
        ('QB', 50, 58), ('RB', 50, 72), ('TE', 71, 45), ('WR1', 8, 45), ('WR2', 80, 48), ('WR3', 90, 45),
    ),

    # Defense
    _formation(
        '4-3', '4-3', 'DEFENSE',
        ('LDE', 36, 40), ('LDT', 45, 40), ('RDT', 55, 40), ('RDE', 64, 40),
        ('SLB', 30, 55), ('MLB', 50, 55), ('WLB', 70, 55), *CORNERS_AND_SAFETIES,
    ),
    _formation(
        '4-4', '4-4', 'DEFENSE',
        ('LDE', 36, 40), ('LDT', 45, 40), ('RDT', 55, 40), ('RDE', 64, 40),
        ('LOLB', 26, 52), ('LILB', 43, 55), ('RILB', 57, 55), ('ROLB', 74, 52),
        ('LCB', 10, 45), ('RCB', 90, 45), ('FS', 50, 75),
    ),
    _formation(
        '3-4', '3-4', 'DEFENSE',
        ('LDE', 40, 40), ('NT', 50, 40), ('RDE', 60, 40),
        ('LOLB', 28, 48), ('LILB', 44, 55), ('RILB', 56, 55), ('ROLB', 72, 48), *CORNERS_AND_SAFETIES,
    ),
    _formation(
        '3-3-5', '3-3-5', 'DEFENSE',
        ('LDE', 40, 40), ('NT', 50, 40), ('RDE', 60, 40),
        ('LOLB', 30, 55), ('MLB', 50, 55), ('ROLB', 70, 55),
        ('LCB', 10, 45), ('RCB', 90, 45), ('FS', 50, 78), ('LSS', 32, 70), ('RSS', 68, 70),
    ),
    _formation(
        '4-2-5', '4-2-5', 'DEFENSE',
        ('LDE', 36, 40), ('LDT', 45, 40), ('RDT', 55, 40), ('RDE', 64, 40),
        ('LILB', 43, 55), ('RILB', 57, 55), ('NCB', 24, 52), *CORNERS_AND_SAFETIES,
    ),
    _formation(
        'nickel', 'Nickel', 'DEFENSE',
        ('LDE', 36, 40), ('LDT', 45, 40), ('RDT', 55, 40), ('RDE', 64, 40),
        ('LILB', 43, 55), ('RILB', 57, 55), ('NCB', 24, 52), *CORNERS_AND_SAFETIES,
    ),
    _formation(
        'dime', 'Dime', 'DEFENSE',
        ('LDE', 36, 40), ('LDT', 45, 40), ('RDT', 55, 40), ('RDE', 64, 40),
        ('MLB', 50, 55), ('NCB', 24, 52), ('DCB', 76, 52), *CORNERS_AND_SAFETIES,
    ),

    # Special teams
    _formation(
        'kickoff', 'Kickoff', 'SPECIAL_TEAMS',
        ('L1', 8, 50), ('L2', 16, 50), ('L3', 24, 50), ('L4', 32, 50), ('L5', 40, 50), ('K', 50, 62),
        ('R1', 60, 50), ('R2', 68, 50), ('R3', 76, 50), ('R4', 84, 50), ('R5', 92, 50),
    ),
    _formation(
        'punt', 'Punt', 'SPECIAL_TEAMS', *OFFENSIVE_LINE,
        ('LWING', 29, 50), ('RWING', 71, 50), ('LGUN', 6, 45), ('RGUN', 94, 45), ('PP', 50, 60), ('P', 50, 80),
    ),
    _formation(
        'field_goal', 'Field Goal', 'SPECIAL_TEAMS', *OFFENSIVE_LINE,
        ('LTE', 29, 45), ('RTE', 71, 45), ('LWING', 23, 50), ('RWING', 77, 50), ('H', 46, 62), ('K', 54, 72),
    ),
)

FORMATIONS_BY_ID = {formation.id: formation for formation in FORMATIONS}


def get_formation(formation_id):
    return FORMATIONS_BY_ID.get(formation_id)


def formations_for_unit(unit):
    return [formation for formation in FORMATIONS if formation.unit == unit]
