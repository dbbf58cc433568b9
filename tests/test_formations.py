import pytest

from formations.slots import (
    FORMATIONS,
    SLOTS_PER_FORMATION,
    Formation,
    Slot,
    formations_for_unit,
    get_formation,
    layout_formation,
    resolve_collisions,
    validate_no_overlap,
)
from formations.templates import (
    CENTER_SQUARE,
    DEFENSE,
    DEFENSE_TRIANGLE,
    DRAFT_EMPTY,
    DRAFT_IN_PROGRESS,
    DRAFT_VALID,
    OFFENSE,
    OFFENSE_CIRCLE,
    SAVED,
    SPECIAL_TEAMS,
    SPECIAL_TEAMS_SQUARE,
    TemplateDraft,
    validate_template_save,
)


def shapes_from(formation, kind_for=lambda role: OFFENSE_CIRCLE):
    return [{'kind': kind_for(s.role), 'label': s.role, 'x': s.x_pct, 'y': s.y_pct} for s in formation.slots]


def offense_kind(role):
    return CENTER_SQUARE if role == 'C' else OFFENSE_CIRCLE


@pytest.mark.parametrize('formation', FORMATIONS, ids=lambda f: f.id)
def test_built_in_formations_are_valid(formation):
    assert len(formation.slots) == SLOTS_PER_FORMATION
    assert len({slot.role for slot in formation.slots}) == SLOTS_PER_FORMATION
    assert all(0 <= slot.x_pct <= 100 and 0 <= slot.y_pct <= 100 for slot in formation.slots)
    report = validate_no_overlap(formation.slots)
    assert report.valid, report.errors


def test_expected_formations_ship():
    ids = {formation.id for formation in FORMATIONS}
    assert {'pro_style', 'i_formation', '4-3', '3-4', 'nickel', 'dime', 'kickoff', 'punt', 'field_goal'} <= ids
    assert get_formation('pro_style').unit == 'OFFENSE'
    assert get_formation('wishbone') is None
    assert {f.unit for f in formations_for_unit('DEFENSE')} == {'DEFENSE'}


def test_overlap_names_both_roles():
    report = validate_no_overlap([Slot('QB', 50, 50), Slot('RB', 52, 53), Slot('WR', 90, 45)])
    assert not report.valid
    assert len(report.errors) == 1
    assert 'QB' in report.errors[0] and 'RB' in report.errors[0]


def test_slots_touching_at_box_edge_do_not_overlap():
    assert validate_no_overlap([Slot('A', 10, 10), Slot('B', 15.5, 10)]).valid
    assert validate_no_overlap([Slot('A', 10, 10), Slot('B', 10, 17)]).valid


def test_resolve_collisions_separates_slots():
    crowded = [Slot('A', 50, 50), Slot('B', 51, 50), Slot('C', 50, 52)]
    resolved = resolve_collisions(crowded)
    assert [slot.role for slot in resolved] == ['A', 'B', 'C']
    assert validate_no_overlap(resolved).valid
    assert all(0 <= s.x_pct <= 100 and 0 <= s.y_pct <= 100 for s in resolved)


def test_resolve_collisions_leaves_clean_layout_alone():
    formation = get_formation('4-3')
    assert [(s.role, s.x_pct, s.y_pct) for s in resolve_collisions(formation.slots)] == \
        [(s.role, s.x_pct, s.y_pct) for s in formation.slots]


def test_layout_warns_when_overlap_remains(caplog):
    # Twenty slots on one row need more than the full canvas width
    pinned = Formation('pile', 'Pile', 'OFFENSE', tuple(Slot(f"P{i}", 0, 0) for i in range(20)))
    with caplog.at_level('WARNING', logger='formations.slots'):
        slots, report = layout_formation(pinned)
    assert not report.valid
    assert 'still overlaps' in caplog.text
    assert len(slots) == 20
    assert all(0 <= s.x_pct <= 100 for s in slots)


def test_template_needs_eleven_shapes():
    pro_style = shapes_from(get_formation('pro_style'), offense_kind)
    result = validate_template_save(OFFENSE, pro_style[:10])
    assert not result.ok
    assert result.reason == "Formation must have exactly 11 players, found 10"
    assert not validate_template_save(OFFENSE, pro_style + [{'kind': OFFENSE_CIRCLE, 'label': 'X', 'x': 2, 'y': 90}]).ok


def test_template_accepts_valid_offense():
    assert validate_template_save(OFFENSE, shapes_from(get_formation('pro_style'), offense_kind)).ok


def test_template_rejects_wrong_shape_kind():
    defense = shapes_from(get_formation('4-3'), lambda role: DEFENSE_TRIANGLE)
    assert validate_template_save(DEFENSE, defense).ok
    defense[3]['kind'] = OFFENSE_CIRCLE
    result = validate_template_save(DEFENSE, defense)
    assert not result.ok and 'not allowed' in result.reason


def test_special_teams_accepts_mixed_kinds():
    kinds = [OFFENSE_CIRCLE, SPECIAL_TEAMS_SQUARE, DEFENSE_TRIANGLE]
    shapes = shapes_from(get_formation('kickoff'))
    for index, shape in enumerate(shapes):
        shape['kind'] = kinds[index % len(kinds)]
    assert validate_template_save(SPECIAL_TEAMS, shapes).ok


def test_template_rejects_duplicate_labels():
    shapes = shapes_from(get_formation('spread'), offense_kind)
    shapes[-1]['label'] = 'wr1'
    result = validate_template_save(OFFENSE, shapes)
    assert not result.ok
    assert 'Duplicate' in result.reason


def test_template_rejects_overlap():
    shapes = shapes_from(get_formation('spread'), offense_kind)
    shapes[-1]['x'], shapes[-1]['y'] = shapes[-2]['x'] + 1, shapes[-2]['y']
    result = validate_template_save(OFFENSE, shapes)
    assert not result.ok and 'overlap' in result.reason


def test_template_rejects_unknown_side():
    assert not validate_template_save('SIDELINE', []).ok


def test_draft_state_machine():
    shapes = shapes_from(get_formation('pro_style'), offense_kind)
    draft = TemplateDraft(OFFENSE)
    assert draft.state == DRAFT_EMPTY
    assert not draft.save().ok

    for shape in shapes[:10]:
        draft.add_shape(shape)
    assert draft.state == DRAFT_IN_PROGRESS
    assert not draft.save().ok

    draft.add_shape(shapes[10])
    assert draft.state == DRAFT_VALID

    # Dragging a shape onto another breaks validity
    draft.move_shape('RB', 44, 68)
    assert draft.state == DRAFT_IN_PROGRESS
    draft.move_shape('RB', 56, 72)
    assert draft.state == DRAFT_VALID

    draft.remove_shape('TE')
    assert draft.state == DRAFT_IN_PROGRESS
    draft.add_shape(shapes[5])
    assert draft.state == DRAFT_VALID

    assert draft.save().ok
    assert draft.state == SAVED
    with pytest.raises(ValueError):
        draft.add_shape(shapes[0])


def test_draft_refuses_wrong_kind():
    draft = TemplateDraft(DEFENSE)
    with pytest.raises(ValueError):
        draft.add_shape({'kind': CENTER_SQUARE, 'label': 'C', 'x': 50, 'y': 45})
    assert draft.state == DRAFT_EMPTY
