import pytest

from pushbox.grid import Flags, Grid


def test_grid_starts_filled():
    grid = Grid(3, 2, "x")
    assert list(grid) == ["x"] * 6
    assert len(grid) == 6


def test_grid_set_and_get_by_position():
    grid = Grid(4, 3, 0)
    grid[3, 2] = 7
    grid[0, 1] = 5
    assert grid[3, 2] == 7
    assert grid[0, 1] == 5
    assert grid[1, 1] == 0


def test_grid_iterates_row_major():
    grid = Grid(2, 2, None)
    grid[1, 0] = "b"
    grid[0, 1] = "c"
    assert list(grid) == [None, "b", "c", None]


@pytest.mark.parametrize("pos", [(4, 0), (0, 3), (-1, 0), (0, -1)])
def test_grid_rejects_positions_outside(pos):
    grid = Grid(4, 3, 0)
    with pytest.raises(IndexError) as read_error:
        grid[pos]
    assert read_error.type is IndexError
    with pytest.raises(IndexError) as write_error:
        grid[pos] = 1
    assert write_error.type is IndexError
    assert list(grid) == [0] * 12


def test_grid_rejects_negative_size():
    with pytest.raises(ValueError):
        Grid(-1, 2, 0)


def test_flags_set_check_reset():
    flags = Flags()
    flags.set(3)
    assert flags.check(3)
    assert not flags.check(2)
    flags.reset(3)
    assert not flags.check(3)
    assert int(flags) == 0


def test_flags_are_independent():
    flags = Flags()
    for flag in (0, 5, 7):
        flags.set(flag)
    flags.reset(5)
    assert [flags.check(flag) for flag in range(8)] == [
        True, False, False, False, False, False, False, True,
    ]


def test_flags_high_bit():
    flags = Flags()
    flags.set(7)
    assert int(flags) == 1 << 7
    assert flags.check(7)


@pytest.mark.parametrize("flag", [-1, 8])
def test_flags_reject_out_of_range(flag):
    flags = Flags()
    with pytest.raises(ValueError):
        flags.set(flag)
    with pytest.raises(ValueError):
        flags.check(flag)
    assert int(flags) == 0