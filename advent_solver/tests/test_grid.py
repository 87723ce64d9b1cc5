import io
import operator

import numpy as np
import pytest

from advent_solver.src.core.grid import (
    Grid,
    GridBoundsError,
    GridShapeError,
    StaleReferenceError,
)


def sum_grid():
    return Grid.from_generator(4, 4, lambda x, y: x + y)


def test_from_generator_values():
    grid = Grid.from_generator(3, 2, lambda x, y: 10 * y + x)
    assert (grid.width, grid.height) == (3, 2)
    for y in range(2):
        for x in range(3):
            assert grid.get(x, y) == 10 * y + x


def test_from_flat_data_derives_height():
    grid = Grid.from_flat_data(list(range(6)), 3)
    assert grid.height == 2
    assert grid.get(2, 1) == 5


def test_from_flat_data_rejects_mismatched_length():
    with pytest.raises(GridShapeError):
        Grid.from_flat_data([1, 2, 3], 2)


def test_from_flat_data_empty():
    grid = Grid.from_flat_data([], 0)
    assert (grid.width, grid.height) == (0, 0)
    assert list(grid.points()) == []
    with pytest.raises(GridShapeError):
        Grid.from_flat_data([1], 0)


def test_get_out_of_range_is_fatal():
    grid = sum_grid()
    with pytest.raises(GridBoundsError):
        grid.get(4, 0)
    with pytest.raises(GridBoundsError):
        grid.get(0, 4)
    with pytest.raises(GridBoundsError):
        grid.get(-1, 0)
    with pytest.raises(GridBoundsError):
        grid.set(0, -1, 3)


def test_try_get_returns_none_outside():
    grid = sum_grid()
    assert grid.try_get(3, 3) == 6
    assert grid.try_get(4, 0) is None
    assert grid.try_get(-1, 2) is None
    assert grid.try_get(0, -1) is None


def test_set_and_fill():
    grid = Grid.filled(2, 2, 0)
    grid.set(1, 0, 5)
    assert grid.get(1, 0) == 5
    grid.fill(7)
    assert list(grid.cells()) == [7, 7, 7, 7]


def test_get_mut_allows_in_place_change():
    grid = Grid.from_generator(2, 1, lambda x, y: [])
    grid.get_mut(0, 0).append(1)
    assert grid.get(0, 0) == [1]
    assert grid.get(1, 0) == []


def test_filled_rejects_unshareable_value():
    with pytest.raises(TypeError):
        Grid.filled(2, 2, [])
    grid = Grid.filled(2, 2, 0)
    with pytest.raises(TypeError):
        grid.fill({})


def test_fill_rejects_hashable_type_holding_mutable_value():
    with pytest.raises(TypeError):
        Grid.filled(2, 1, (1, []))
    grid = Grid.filled(2, 2, (1, 2))
    with pytest.raises(TypeError):
        grid.fill((1, []))
    with pytest.raises(TypeError):
        grid.padded((0, {}), 1)
    assert grid.get(1, 1) == (1, 2)


def test_filled_like_copies_shape():
    source = Grid.from_generator(3, 5, lambda x, y: "x")
    grid = Grid.filled_like(source, None)
    assert (grid.width, grid.height) == (3, 5)
    assert set(grid.cells()) == {None}


def test_row_iteration():
    grid = sum_grid()
    assert list(grid.row_iter(0)) == [0, 1, 2, 3]
    assert list(grid.row_iter(1)) == [1, 2, 3, 4]
    assert list(grid.row_iter(2)) == [2, 3, 4, 5]
    assert list(grid.row_iter(3)) == [3, 4, 5, 6]

    assert list(reversed(grid.row_iter(0))) == [3, 2, 1, 0]
    assert list(reversed(grid.row_iter(3))) == [6, 5, 4, 3]


def test_col_iteration():
    grid = sum_grid()
    assert list(grid.col_iter(0)) == [0, 1, 2, 3]
    assert list(grid.col_iter(1)) == [1, 2, 3, 4]
    assert list(grid.col_iter(2)) == [2, 3, 4, 5]
    assert list(grid.col_iter(3)) == [3, 4, 5, 6]

    assert list(reversed(grid.col_iter(0))) == [3, 2, 1, 0]
    assert list(reversed(grid.col_iter(3))) == [6, 5, 4, 3]


def test_lines_on_non_square_grid():
    grid = Grid.from_generator(3, 2, lambda x, y: 10 * y + x)
    assert list(grid.row_iter(1)) == [10, 11, 12]
    assert list(grid.col_iter(0)) == [0, 10]
    assert list(grid.col_iter(2)) == [2, 12]
    assert list(reversed(grid.col_iter(2))) == [12, 2]
    assert len(grid.row_iter(0)) == 3
    assert len(grid.col_iter(1)) == 2
    assert grid.col_iter(2)[1] == 12


def test_line_cursor_reports_remaining():
    grid = sum_grid()
    cursor = iter(grid.col_iter(3))
    assert len(cursor) == 4
    next(cursor)
    assert len(cursor) == 3
    assert operator.length_hint(cursor) == 3

    back = reversed(grid.row_iter(1))
    assert next(back) == 4
    assert len(back) == 3
    assert list(back) == [3, 2, 1]
    assert len(back) == 0


def test_line_out_of_range():
    grid = sum_grid()
    with pytest.raises(GridBoundsError):
        grid.row_iter(4)
    with pytest.raises(GridBoundsError):
        grid.col_iter(-1)
    with pytest.raises(GridBoundsError):
        grid.row_iter(0)[4]


def test_mutable_lines_write_through():
    grid = Grid.filled(3, 3, 0)
    row = grid.row_iter_mut(1)
    row[0] = 4
    row[2] = 5
    col = grid.col_iter_mut(2)
    col[0] = 9
    assert list(grid.row_iter(1)) == [4, 0, 5]
    assert list(grid.col_iter(2)) == [9, 5, 0]
    with pytest.raises(GridBoundsError):
        col[3] = 1


def test_mutable_line_writes_back_while_iterating():
    grid = sum_grid()
    row = grid.row_iter_mut(0)
    for i, v in enumerate(row):
        row[i] = v + 10
    assert list(grid.row_iter(0)) == [10, 11, 12, 13]

    col = grid.col_iter_mut(3)
    for i, v in zip(range(3, -1, -1), reversed(col)):
        col[i] = -v
    assert list(grid.col_iter(3)) == [-13, -4, -5, -6]


def test_mutable_line_cursor_goes_stale_after_outside_write():
    grid = sum_grid()
    cursor = iter(grid.row_iter_mut(0))
    next(cursor)
    grid.set(0, 1, 7)
    with pytest.raises(StaleReferenceError):
        next(cursor)


def test_padded():
    grid = Grid.from_generator(2, 3, lambda x, y: (x, y))
    padded = grid.padded(None, 2)
    assert (padded.width, padded.height) == (6, 7)
    for p in padded.points():
        x, y = p.coords
        if 2 <= x < 4 and 2 <= y < 5:
            assert p.value == grid.get(x - 2, y - 2)
        else:
            assert p.value is None
    assert (grid.width, grid.height) == (2, 3)


def test_padded_zero_is_copy():
    grid = sum_grid()
    assert grid.padded(0, 0) == grid
    with pytest.raises(ValueError):
        grid.padded(0, -1)


def test_map_preserves_shape():
    grid = Grid.from_generator(3, 2, lambda x, y: x)
    mapped = grid.map(str)
    assert (mapped.width, mapped.height) == (3, 2)
    assert list(mapped.row_iter(1)) == ["0", "1", "2"]
    assert grid.get(2, 0) == 2


def test_map_composes():
    grid = sum_grid()

    def f(v):
        return v * 2

    def g(v):
        return v + 3

    assert grid.map(f).map(g) == grid.map(lambda v: g(f(v)))


def test_find_single_match():
    grid = Grid.filled(4, 3, ".")
    grid.set(2, 1, "*")
    found = list(grid.find("*"))
    assert len(found) == 1
    assert found[0].value == "*"
    assert found[0].coords == (2, 1)


def test_find_storage_order():
    grid = Grid.from_flat_data([1, 0, 1, 0, 0, 1], 3)
    assert [p.coords for p in grid.find(1)] == [(0, 0), (2, 0), (2, 1)]
    assert list(grid.find(5)) == []


def test_points_in_storage_order():
    grid = Grid.from_generator(2, 2, lambda x, y: (x, y))
    points = list(grid.points())
    assert [p.coords for p in points] == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert all(p.value == p.coords for p in points)
    assert [p.index for p in points] == [0, 1, 2, 3]


def test_cells_restartable_and_snapshot():
    grid = sum_grid()
    assert list(grid.cells()) == list(grid.cells())
    snapshot = grid.into_cells()
    grid.set(0, 0, 99)
    assert next(snapshot) == 0


def test_point_goes_stale_after_mutation():
    grid = sum_grid()
    point = grid.point(1, 1)
    assert point.value == 2
    grid.set(3, 3, 0)
    with pytest.raises(StaleReferenceError):
        point.value
    assert grid.point(1, 1).value == 2


def test_views_go_stale_after_mutation():
    grid = sum_grid()
    cells = grid.cells()
    row = grid.row_iter(0)
    grid.fill(1)
    with pytest.raises(StaleReferenceError):
        next(cells)
    with pytest.raises(StaleReferenceError):
        list(row)


def test_mutable_line_invalidates_other_views():
    grid = sum_grid()
    reader = grid.col_iter(0)
    writer = grid.row_iter_mut(0)
    writer[0] = 10
    writer[1] = 11
    with pytest.raises(StaleReferenceError):
        reader[0]


def test_numpy_roundtrip():
    arr = np.arange(6).reshape(2, 3)
    grid = Grid.from_array(arr)
    assert (grid.width, grid.height) == (3, 2)
    assert grid.get(2, 1) == 5
    assert np.array_equal(grid.to_array(), arr)


def test_from_array_requires_2d():
    with pytest.raises(GridShapeError):
        Grid.from_array(np.arange(4))


def test_bool_grid_display():
    grid = Grid.from_flat_data([True, False, False, True], 2)
    assert str(grid) == "\n# \n #\n"


def test_display_falls_back_to_repr():
    grid = sum_grid()
    assert str(grid) == repr(grid) == "Grid(width=4, height=4)"


def test_show_with_writes_rows():
    grid = Grid.from_generator(3, 2, lambda x, y: x == y)
    out = io.StringIO()
    grid.show_with(lambda v: "X" if v else ".", stream=out)
    assert out.getvalue() == "\nX..\n.X.\n"
