"""
Depth chart assignment engine.

A depth chart maps ``(unit, position, string, formation, special_team_type)``
to a roster player. Coaches move players with three gestures that are planned
here as batches of absolute slot writes:

* assign a starter (string 1): the incoming player leaves every other slot in
  the same unit/formation scope and the current starter drops to string 2.
  The drop is a single level; whoever held string 2 leaves the chart.
* assign a backup (string 2 or 3): the incoming player leaves their prior
  slot; an occupant of the target slot moves into that prior slot, or leaves
  the chart when there was none.
* remove: clear one slot.

Reordering within a position is an assign at the new string. Applying the
same batch twice yields the same chart.
"""

from collections import OrderedDict
from dataclasses import dataclass, replace

from .exceptions import InvalidAssignment

STARTER = 1
MAX_STRING = 3

UNITS = ('OFFENSE', 'DEFENSE', 'SPECIAL_TEAMS')

SPECIAL_TEAM_TYPES = ('kickoff', 'field_goal', 'punt', 'kick_return', 'punt_return', 'field_goal_block')


@dataclass(frozen=True)
class SlotKey:
    unit: str
    position: str
    string: int
    formation: str = None
    special_team_type: str = None

    @classmethod
    def of(cls, unit, position, string, formation=None, special_team_type=None):
        """Build a key with upper-case unit/position and empty strings folded to None."""
        return cls(
            unit=(unit or '').strip().upper(),
            position=(position or '').strip().upper(),
            string=string,
            formation=formation or None,
            special_team_type=special_team_type or None,
        )

    @property
    def scope(self):
        return (self.unit, self.formation, self.special_team_type)

    def sort_key(self):
        return (self.unit, self.formation or '', self.special_team_type or '', self.position, self.string)

    def at(self, string):
        return replace(self, string=string)

    def as_fields(self):
        return {
            'unit': self.unit,
            'position': self.position,
            'string': self.string,
            'formation': self.formation or '',
            'special_team_type': self.special_team_type or '',
        }


@dataclass(frozen=True)
class DepthChartUpdate:
    key: SlotKey
    player_id: object = None


class DepthChart:
    """In-memory depth chart for one team."""

    def __init__(self, assignments=None, max_string=MAX_STRING):
        self.max_string = max_string
        self._slots = {}
        for key, player_id in (assignments or {}).items():
            if player_id is not None:
                self._slots[key] = player_id

    @classmethod
    def from_entries(cls, entries, max_string=MAX_STRING):
        assignments = {}
        for entry in entries:
            key = SlotKey.of(entry.unit, entry.position, entry.string, entry.formation, entry.special_team_type)
            assignments[key] = entry.player_id
        return cls(assignments, max_string=max_string)

    def __len__(self):
        return len(self._slots)

    def __contains__(self, key):
        return key in self._slots

    def player_at(self, key):
        return self._slots.get(key)

    def slots_of(self, player_id, scope=None):
        return sorted(
            (key for key, occupant in self._slots.items()
             if occupant == player_id and (scope is None or key.scope == scope)),
            key=SlotKey.sort_key,
        )

    def as_dict(self):
        return dict(self._slots)

    def plan_assign(self, key, player_id):
        if player_id is None:
            return self.plan_remove(key)
        if self._slots.get(key) == player_id:
            return []

        prior = [slot for slot in self.slots_of(player_id, key.scope) if slot != key]
        occupant = self._slots.get(key)

        writes = OrderedDict((slot, None) for slot in prior)
        if occupant is not None:
            if key.string == STARTER:
                writes[key.at(STARTER + 1)] = occupant
            elif prior:
                writes[prior[0]] = occupant
        writes[key] = player_id
        return [DepthChartUpdate(slot, value) for slot, value in writes.items()]

    def plan_remove(self, key):
        if key not in self._slots:
            return []
        return [DepthChartUpdate(key, None)]

    def plan_reorder(self, key, to_string):
        player_id = self._slots.get(key)
        if player_id is None or key.string == to_string:
            return []
        return self.plan_assign(key.at(to_string), player_id)

    def _check(self, key):
        if key.unit not in UNITS:
            raise InvalidAssignment(f"Unknown unit '{key.unit}'.")
        if not key.position:
            raise InvalidAssignment("Each entry must have a position.")
        if not isinstance(key.string, int) or isinstance(key.string, bool) or not 1 <= key.string <= self.max_string:
            raise InvalidAssignment(f"String must be between 1 and {self.max_string}, got {key.string!r}.")
        if key.special_team_type and key.unit != 'SPECIAL_TEAMS':
            raise InvalidAssignment("Special team types only apply to the special teams unit.")

    def collapse(self, updates):
        """Validate ``updates`` and fold them to the final write per key."""
        final = OrderedDict()
        for update in updates:
            self._check(update.key)
            previous = final.get(update.key)
            if previous is not None and update.player_id is not None and previous != update.player_id:
                raise InvalidAssignment(
                    f"Players {previous} and {update.player_id} were both written to "
                    f"{update.key.unit} {update.key.position} string {update.key.string}."
                )
            final[update.key] = update.player_id
        return final

    def apply(self, updates):
        """
        Apply a batch atomically; returns the final write per touched key.

        Nothing changes when the batch would leave a touched player holding two
        slots in one unit/formation scope.
        """
        final = self.collapse(updates)
        slots = dict(self._slots)
        for key, player_id in final.items():
            if player_id is None:
                slots.pop(key, None)
            else:
                slots[key] = player_id

        touched = {player_id for player_id in final.values() if player_id is not None}
        held = {}
        for key, player_id in slots.items():
            if player_id in touched:
                held.setdefault((player_id, key.scope), []).append(key)
        for (player_id, _), keys in held.items():
            if len(keys) > 1:
                names = ', '.join(f"{key.position}{key.string}" for key in sorted(keys, key=SlotKey.sort_key))
                raise InvalidAssignment(f"Player {player_id} would hold more than one slot ({names}).")

        self._slots = slots
        return final
