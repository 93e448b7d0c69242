"""Tests for row-major traversal."""

from ongrid import EntityKind, GridModel, occupied, positions


def test_positions_row_major_order():
    grid = GridModel(width=3, height=2)
    assert list(positions(grid)) == [
        (0, 0), (1, 0), (2, 0),
        (0, 1), (1, 1), (2, 1),
    ]


def test_positions_covers_every_cell_once():
    grid = GridModel(width=10, height=10)
    seen = list(positions(grid))
    assert len(seen) == 100
    assert len(set(seen)) == 100


def test_positions_is_lazy():
    grid = GridModel(width=1000, height=1000)
    it = positions(grid)
    assert next(it) == (0, 0)
    assert next(it) == (1, 0)


def test_positions_restartable():
    grid = GridModel(width=4, height=4)
    assert list(positions(grid)) == list(positions(grid))


def test_occupied_empty_grid_yields_nothing():
    grid = GridModel(width=5, height=5)
    assert list(occupied(grid)) == []


def test_occupied_skips_none_cells():
    grid = GridModel(width=10, height=10)
    grid.place(EntityKind.PRODUCER, 2, 5)
    grid.place(EntityKind.GENERATOR, 0, 5)
    grid.place(EntityKind.MOTOR, 1, 5)
    grid.place(EntityKind.MOTOR, 9, 0)

    result = [(x, y, e.kind) for x, y, e in occupied(grid)]
    assert result == [
        (9, 0, EntityKind.MOTOR),
        (0, 5, EntityKind.GENERATOR),
        (1, 5, EntityKind.MOTOR),
        (2, 5, EntityKind.PRODUCER),
    ]


def test_occupied_yields_live_entities():
    grid = GridModel(width=3, height=3)
    grid.place(EntityKind.GENERATOR, 1, 1)
    (x, y, entity), = list(occupied(grid))
    assert (x, y) == (1, 1)
    assert entity is grid.resolve(1, 1)


def test_occupied_x_before_y():
    grid = GridModel(width=2, height=2)
    for x, y in positions(grid):
        grid.place(EntityKind.MOTOR, x, y)
    assert [(x, y) for x, y, _ in occupied(grid)] == [(0, 0), (1, 0), (0, 1), (1, 1)]
