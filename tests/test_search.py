import pytest

from rubikcube.cubiecube import CubieCube
from rubikcube.search import SolveError, solve


def test_solve_noop():
    assert solve("", 0) == []


def test_solve_depth_four_finds_four_quarter_turns():
    assert solve("", 4) == [0, 0, 0, 0]


def test_solution_brings_cube_back_to_solved():
    cube = CubieCube()
    for move in solve("", 4):
        cube.move(move)
    assert cube.is_solved()


@pytest.mark.parametrize("depth", [1, 2])
def test_no_solution_at_short_depth(depth):
    with pytest.raises(SolveError, match="no solution"):
        solve("", depth)


def test_non_empty_state_is_rejected():
    with pytest.raises(SolveError):
        solve("BBURUDBFUFFFRRFUUFLULUFUDLRRDBBDBDBLUDDFLLRRBRLLLBRDDF", 0)


def test_negative_depth_is_rejected():
    with pytest.raises(ValueError):
        solve("", -1)