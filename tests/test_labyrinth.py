import pytest

from edakit.labyrinth import (
    DEFAULT_GRID,
    Cell,
    find_path,
    format_path,
    main,
    path_exists,
)

BLOCKED = [[1, 0], [0, 1]]


def _assert_valid_route(grid, path, start, end):
    assert path[0] == start
    assert path[-1] == end
    assert len(set(path)) == len(path)
    for cell in path[1:]:
        assert grid[cell.row][cell.col]
    for a, b in zip(path, path[1:]):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1


def test_source_route_to_corner_exists():
    assert path_exists(DEFAULT_GRID, Cell(1, 2), Cell(0, 0)) is True


def test_source_route_to_5_4_is_valid():
    start, end = Cell(1, 2), Cell(5, 4)
    path = find_path(DEFAULT_GRID, start, end)
    _assert_valid_route(DEFAULT_GRID, path, start, end)
    assert path_exists(DEFAULT_GRID, start, end) is True


def test_blocked_grid_has_no_route():
    assert path_exists(BLOCKED, Cell(0, 0), Cell(1, 1)) is False
    assert find_path(BLOCKED, Cell(0, 0), Cell(1, 1)) is None


def test_start_equals_end():
    assert find_path(BLOCKED, Cell(0, 0), Cell(0, 0)) == [Cell(0, 0)]
    assert path_exists(BLOCKED, Cell(0, 0), Cell(0, 0)) is True


def test_corridor_path():
    grid = [[1, 1, 1]]
    path = find_path(grid, Cell(0, 0), Cell(0, 2))
    assert path == [Cell(0, 0), Cell(0, 1), Cell(0, 2)]
    assert format_path(path) == "(0,0)-(0,1)-(0,2)-"


def test_end_outside_grid_is_unreachable():
    assert path_exists(BLOCKED, Cell(0, 0), Cell(5, 5)) is False


def test_start_outside_grid_raises():
    with pytest.raises(ValueError):
        path_exists(BLOCKED, Cell(-1, 0), Cell(0, 0))
    with pytest.raises(ValueError):
        find_path(BLOCKED, Cell(0, 9), Cell(0, 0))


def test_path_and_existence_agree_everywhere():
    start = Cell(1, 2)
    for row in range(8):
        for col in range(8):
            end = Cell(row, col)
            path = find_path(DEFAULT_GRID, start, end)
            assert (path is not None) == path_exists(DEFAULT_GRID, start, end)
            if path is not None:
                _assert_valid_route(DEFAULT_GRID, path, start, end)


def test_cell_str():
    assert str(Cell(1, 2)) == "(1,2)"


def test_main_default(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Existe Ruta"
    assert lines[1].startswith("(1,2)-")
    assert lines[1].endswith("(5,4)-")


def test_main_bad_arguments():
    assert main(["1", "2"]) == 2
    assert main(["a", "b", "c", "d"]) == 2