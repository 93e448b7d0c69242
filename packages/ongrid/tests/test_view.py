"""Tests for the read-only renderer view."""

import dataclasses

import pytest
from ongrid import CellView, EntityKind, create_default_engine


def _by_pos(view):
    return {(c.x, c.y): c for c in view.cells}


def test_view_lists_occupied_cells_in_order():
    engine = create_default_engine()
    view = engine.view()
    assert (view.width, view.height) == (10, 10)
    assert [(c.x, c.y, c.kind) for c in view.cells] == [
        (0, 5, EntityKind.GENERATOR),
        (1, 5, EntityKind.MOTOR),
        (2, 5, EntityKind.PRODUCER),
    ]
    assert view.ledger_total == 0.0


def test_view_is_a_snapshot():
    engine = create_default_engine()
    engine.state.cursor.move_to(0.5, 5.5)
    engine.state.cursor.press()
    before = _by_pos(engine.view())
    engine.step(500)
    view = engine.view()
    after = _by_pos(view)
    assert before[(0, 5)].cycle_progress == 0.0
    assert after[(0, 5)].cycle_progress == pytest.approx(0.5)
    assert after[(2, 5)].current_rate == pytest.approx(0.4)
    assert view.ledger_total == pytest.approx(0.2)


def test_view_cells_are_frozen():
    view = create_default_engine().view()
    cell = view.cells[0]
    assert isinstance(cell, CellView)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cell.cycle_progress = 0.9


def test_empty_cells_not_in_view():
    view = create_default_engine().view()
    assert (5, 5) not in _by_pos(view)
