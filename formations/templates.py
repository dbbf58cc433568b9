"""
Coach-authored formation templates.

Overlap is only warned about when a built-in formation renders, but a
template is refused at save time unless it has exactly 11 shapes of kinds
valid for its side, no duplicate labels and no overlapping shapes. Failures
come back as a ``TemplateValidation`` carrying a reason for the coach, not
as exceptions.
"""

from dataclasses import dataclass, field

from .slots import SLOTS_PER_FORMATION, Slot, validate_no_overlap

OFFENSE = 'OFFENSE'
DEFENSE = 'DEFENSE'
SPECIAL_TEAMS = 'SPECIAL_TEAMS'

CENTER_SQUARE = 'CENTER_SQUARE'
OFFENSE_CIRCLE = 'OFFENSE_CIRCLE'
DEFENSE_TRIANGLE = 'DEFENSE_TRIANGLE'
SPECIAL_TEAMS_SQUARE = 'SPECIAL_TEAMS_SQUARE'
SPECIAL_TEAMS_CIRCLE = 'SPECIAL_TEAMS_CIRCLE'

SHAPE_KINDS_BY_SIDE = {
    OFFENSE: (CENTER_SQUARE, OFFENSE_CIRCLE),
    DEFENSE: (DEFENSE_TRIANGLE,),
    SPECIAL_TEAMS: (OFFENSE_CIRCLE, SPECIAL_TEAMS_SQUARE, SPECIAL_TEAMS_CIRCLE, DEFENSE_TRIANGLE),
}

DRAFT_EMPTY = 'DRAFT_EMPTY'
DRAFT_IN_PROGRESS = 'DRAFT_IN_PROGRESS'
DRAFT_VALID = 'DRAFT_VALID'
SAVED = 'SAVED'


@dataclass(frozen=True)
class TemplateValidation:
    ok: bool
    reason: str = None


def is_valid_template_shape(side, kind):
    return kind in SHAPE_KINDS_BY_SIDE.get(side, ())


def _shape_value(shape, name):
    if isinstance(shape, dict):
        return shape.get(name)
    return getattr(shape, name, None)


def validate_template_save(side, shapes):
    if side not in SHAPE_KINDS_BY_SIDE:
        return TemplateValidation(False, f"Unknown side '{side}'.")
    shapes = list(shapes or [])
    if len(shapes) != SLOTS_PER_FORMATION:
        return TemplateValidation(
            False, f"Formation must have exactly {SLOTS_PER_FORMATION} players, found {len(shapes)}",
        )

    labels = set()
    slots = []
    for index, shape in enumerate(shapes, start=1):
        kind = _shape_value(shape, 'kind')
        if not is_valid_template_shape(side, kind):
            return TemplateValidation(False, f"Shape {index} ({kind}) is not allowed on a {side.lower()} template")
        label = (_shape_value(shape, 'label') or '').strip().upper()
        if not label:
            return TemplateValidation(False, f"Shape {index} needs a label")
        if label in labels:
            return TemplateValidation(False, f"Duplicate position label: {label}")
        labels.add(label)
        try:
            x, y = float(_shape_value(shape, 'x')), float(_shape_value(shape, 'y'))
        except (TypeError, ValueError):
            return TemplateValidation(False, f"Shape {label} has no position")
        if not (0 <= x <= 100 and 0 <= y <= 100):
            return TemplateValidation(False, f"Shape {label} is off the field")
        slots.append(Slot(label, x, y))

    if side == OFFENSE and sum(1 for s in shapes if _shape_value(s, 'kind') == CENTER_SQUARE) != 1:
        return TemplateValidation(False, "Offense templates need exactly one center")

    report = validate_no_overlap(slots)
    if not report.valid:
        return TemplateValidation(False, report.errors[0])
    return TemplateValidation(True)


@dataclass
class TemplateDraft:
    """
    Authoring session for one template.

    Every edit re-validates: a complete, valid draft is DRAFT_VALID and any
    edit that breaks it drops back to DRAFT_IN_PROGRESS.
    """

    side: str
    shapes: list = field(default_factory=list)
    state: str = DRAFT_EMPTY
    last_validation: TemplateValidation = None

    def __post_init__(self):
        self.shapes = list(self.shapes)
        self._refresh()

    def _refresh(self):
        if self.state == SAVED:
            return
        if not self.shapes:
            self.state = DRAFT_EMPTY
            self.last_validation = None
            return
        self.last_validation = validate_template_save(self.side, self.shapes)
        self.state = DRAFT_VALID if self.last_validation.ok else DRAFT_IN_PROGRESS

    def _editable(self):
        if self.state == SAVED:
            raise ValueError("Saved templates cannot be edited")

    def add_shape(self, shape):
        self._editable()
        if not is_valid_template_shape(self.side, _shape_value(shape, 'kind')):
            raise ValueError(f"Invalid shape for {self.side.lower()} template")
        self.shapes.append(shape)
        self._refresh()

    def remove_shape(self, label):
        self._editable()
        self.shapes = [s for s in self.shapes if (_shape_value(s, 'label') or '').upper() != label.upper()]
        self._refresh()

    def move_shape(self, label, x, y):
        self._editable()
        moved = []
        for shape in self.shapes:
            if (_shape_value(shape, 'label') or '').upper() == label.upper():
                shape = {**dict(shape), 'x': x, 'y': y}
            moved.append(shape)
        self.shapes = moved
        self._refresh()

    def save(self):
        """Finalize the draft; only a DRAFT_VALID draft may be saved."""
        if self.state != DRAFT_VALID:
            reason = self.last_validation.reason if self.last_validation else "Template has no shapes"
            return TemplateValidation(False, reason)
        self.state = SAVED
        return TemplateValidation(True)
