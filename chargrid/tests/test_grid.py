import pytest

from chargrid.src.core.grid import Grid, InvalidCellError, InvalidDimensionError


def test_new_grid_is_filled_with_spaces():
    grid = Grid(4, 3)
    assert grid.width == 4
    assert grid.height == 3
    assert len(grid.cells) == 12
    assert grid.count(" ") == 12
    assert grid.count("#") == 0


def test_shape_is_height_width():
    assert Grid(5, 8).shape() == (8, 5)


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2), (2, -5), (0, 0)])
def test_invalid_dimensions_rejected(width, height):
    with pytest.raises(InvalidDimensionError):
        Grid(width, height)


def test_invalid_dimension_is_value_error():
    with pytest.raises(ValueError):
        Grid(0, 1)


def test_set_then_get():
    grid = Grid(3, 3)
    for y in range(3):
        for x in range(3):
            grid.set(x, y, "abcdefghi"[y * 3 + x])
    for y in range(3):
        for x in range(3):
            assert grid.get(x, y) == "abcdefghi"[y * 3 + x]


def test_row_major_layout():
    grid = Grid(2, 3)
    grid.set(1, 2, "x")
    assert grid.cells[2 * 2 + 1] == "x"
    assert str(grid) == "  \n  \n x\n"


def test_get_out_of_bounds_returns_none():
    grid = Grid.filled_with(10, 10, ".")
    assert grid.get(200, 0) is None
    assert grid.get(10, 0) is None
    assert grid.get(0, 10) is None
    assert grid.get(-1, 0) is None
    assert grid.get(0, -1) is None


def test_set_out_of_bounds_is_noop():
    grid = Grid.filled_with(2, 2, ".")
    before = grid.copy()
    grid.set(2, 0, "@")
    grid.set(0, 2, "@")
    grid.set(-1, -1, "@")
    assert grid == before
    assert grid.count("@") == 0


def test_set_rejects_multi_character_value():
    grid = Grid(2, 2)
    with pytest.raises(InvalidCellError):
        grid.set(0, 0, "ab")
    with pytest.raises(InvalidCellError):
        grid.set(0, 0, "")


def test_fill_char_must_be_single_character():
    with pytest.raises(InvalidCellError):
        Grid(2, 2, "..")


def test_count_non_string_is_zero():
    assert Grid(2, 2).count(1) == 0


def test_filled_with_and_str():
    grid = Grid.filled_with(2, 2, "x")
    assert str(grid) == "xx\nxx\n"


def test_from_string():
    grid = Grid.from_string("#*#\n| |\n+-+")
    assert grid.width == 3
    assert grid.height == 3
    assert grid.get(1, 0) == "*"
    assert grid.get(1, 1) == " "
    assert str(grid) == "#*#\n| |\n+-+\n"


def test_from_string_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Grid.from_string("##\n#")


def test_from_string_rejects_empty_text():
    with pytest.raises(InvalidDimensionError):
        Grid.from_string("")


def test_copy_is_independent():
    grid = Grid.from_string("ab\ncd")
    clone = grid.copy()
    clone.set(0, 0, "z")
    assert grid.get(0, 0) == "a"
    assert clone.get(0, 0) == "z"


def test_equality():
    assert Grid.from_string("ab\ncd") == Grid.from_string("ab\ncd")
    assert Grid.from_string("ab\ncd") != Grid.from_string("ab\ncx")
    assert Grid.from_string("ab") != Grid.from_string("a\nb")


def test_to_list():
    assert Grid.from_string("#.\n##").to_list() == [["#", "."], ["#", "#"]]


def test_neighbours():
    grid = Grid(10, 10)
    assert grid.neighbours(5, 5) == [
        (5, 4), (6, 5), (5, 6), (4, 5), (6, 6), (6, 4), (4, 4), (4, 6)
    ]
    assert grid.neighbours(0, 0) == [(1, 0), (0, 1), (1, 1)]
    assert grid.neighbours(9, 9) == [(9, 8), (8, 9), (8, 8)]
    assert grid.neighbours(100, 100) == []
    assert grid.neighbours(0, 100) == []
    assert grid.neighbours(100, 0) == []


def test_visualize_and_repr(capsys):
    grid = Grid.from_string("#.\n##")
    grid.visualize()
    assert capsys.readouterr().out == "#.\n##\n"
    assert repr(grid) == "Grid(width=2, height=2)"


def test_nul_character_round_trips():
    grid = Grid(2, 2)
    grid.set(0, 0, "\x00")
    assert grid.get(0, 0) == "\x00"
    assert grid.count("\x00") == 1
    assert grid.count(" ") == 3


def test_nul_fill_char_and_from_string():
    grid = Grid.filled_with(2, 1, "\x00")
    assert grid.to_list() == [["\x00", "\x00"]]
    parsed = Grid.from_string("a\x00")
    assert parsed.get(1, 0) == "\x00"
    assert parsed.copy().get(1, 0) == "\x00"


def test_dimensions_are_read_only():
    grid = Grid(2, 2)
    with pytest.raises(AttributeError):
        grid.width = 3
    with pytest.raises(AttributeError):
        grid.height = 3
    assert grid.shape() == (2, 2)
    assert grid.to_list() == [[" ", " "], [" ", " "]]


@pytest.mark.parametrize("x,y", [(1.5, 0), (0, 1.0), ("1", 0), (None, 0)])
def test_non_integer_coordinates_are_out_of_bounds(x, y):
    grid = Grid.filled_with(3, 3, ".")
    assert not grid.in_bounds(x, y)
    assert grid.get(x, y) is None
    grid.set(x, y, "#")
    assert grid.count("#") == 0
    assert grid.fill(x, y, "#") == 0
    assert grid.neighbours(x, y) == []
