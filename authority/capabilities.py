from dataclasses import asdict, dataclass, replace


@dataclass(frozen=True)
class Capabilities:
    """
    What a membership may do with one kind of resource.

    ``scoped_*`` of ``None`` means "no restriction on that dimension"; it is
    only paired with ``can_view_all`` for Head Coaches and generic assistants.
    """

    can_view: bool = False
    can_create: bool = False
    can_edit: bool = False
    can_delete: bool = False
    can_assign: bool = False
    can_link: bool = False
    can_view_all: bool = False
    scoped_unit: str = None
    scoped_position_groups: tuple = None
    scoped_player_ids: tuple = None

    @property
    def scope(self):
        """None means the whole team; otherwise the restricting dimensions."""
        if self.scoped_unit is None and self.scoped_position_groups is None and self.scoped_player_ids is None:
            return None
        return {
            'unit': self.scoped_unit,
            'position_groups': list(self.scoped_position_groups) if self.scoped_position_groups is not None else None,
            'player_ids': list(self.scoped_player_ids) if self.scoped_player_ids is not None else None,
        }

    def evolve(self, **changes):
        return replace(self, **changes)

    def as_dict(self):
        data = asdict(self)
        for key in ('scoped_position_groups', 'scoped_player_ids'):
            if data[key] is not None:
                data[key] = list(data[key])
        data['scope'] = self.scope
        return data


NO_ACCESS = Capabilities()

READ_ONLY = Capabilities(can_view=True)

FULL_ACCESS = Capabilities(
    can_view=True,
    can_create=True,
    can_edit=True,
    can_delete=True,
    can_assign=True,
    can_link=True,
    can_view_all=True,
)
