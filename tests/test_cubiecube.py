import pytest

from rubikcube.cubiecube import Corner, CubieCube, Edge, cnk


def test_identity_is_solved():
    assert CubieCube().is_solved() is True


def test_solved_cube_follows_enum_order():
    c = CubieCube()
    assert c.cp == [int(corner) for corner in Corner]
    assert c.ep == [int(edge) for edge in Edge]
    assert c.ep[Edge.FR] == 8
    assert c.ep[Edge.BR] == 11


@pytest.mark.parametrize(
    "n, k, expected", [(11, 4, 330), (3, 4, 0), (5, 0, 1), (10, 6, 210), (12, 4, 495)]
)
def test_cnk(n, k, expected):
    assert cnk(n, k) == expected


def test_new_cube_has_zero_twist_and_flip():
    c = CubieCube()
    assert c.twist == 0
    assert c.flip == 0


def test_cubie_helpers():
    c = CubieCube()
    c.twist = 123
    assert c.twist == 123
    c.flip = 5
    assert c.flip == 5
    assert c.corner_parity() == 0
    assert c.edge_parity() == 0
    assert c.fr_to_br == 0
    c.fr_to_br = 0
    assert c.ep == list(range(12))
    c.multiply(CubieCube())
    assert c.twist == 123
    assert c.flip == 5


def test_twist_setter_keeps_total_twist_valid():
    c = CubieCube()
    c.twist = 2186
    assert sum(c.co) % 3 == 0


def test_flip_setter_keeps_total_flip_even():
    c = CubieCube()
    c.flip = 2047
    assert sum(c.eo) % 2 == 0


def test_move_r_from_solved():
    c = CubieCube()
    c.move(1)
    assert c.cp == [4, 1, 2, 0, 7, 5, 6, 3]
    assert c.co == [2, 0, 0, 1, 1, 0, 0, 2]
    assert c.ep == [8, 1, 2, 3, 11, 5, 6, 7, 4, 9, 10, 0]
    assert c.eo == [0] * 12


def test_move_f_flips_edges():
    c = CubieCube()
    c.move(2)
    assert c.eo == [0, 1, 0, 0, 0, 1, 0, 0, 1, 1, 0, 0]


@pytest.mark.parametrize("m", range(6))
def test_four_quarter_turns_restore(m):
    c = CubieCube()
    for _ in range(4):
        c.move(m)
    assert c.is_solved()


@pytest.mark.parametrize("m", range(6))
def test_single_move_not_solved_and_parities_odd(m):
    c = CubieCube()
    c.move(m)
    assert not c.is_solved()
    assert c.corner_parity() == 1
    assert c.edge_parity() == 1


def test_parities_agree_after_sequence():
    c = CubieCube()
    for m in [0, 1, 2, 2, 4, 5, 3]:
        c.move(m)
    assert c.corner_parity() == c.edge_parity()
    assert sum(c.co) % 3 == 0
    assert sum(c.eo) % 2 == 0


def test_invalid_move_raises():
    with pytest.raises(ValueError):
        CubieCube().move(6)


def test_solved_times_move_equals_move():
    r = CubieCube()
    r.move(1)
    c = CubieCube()
    c.multiply(r)
    assert c == r


def test_corner_multiply_matches_move():
    f = CubieCube()
    f.move(2)
    c = CubieCube()
    c.corner_multiply(f)
    assert c.cp == f.cp
    assert c.co == f.co
    assert c.ep == list(range(12))


@pytest.mark.parametrize("idx", [0, 1, 23, 24, 500, 5000, 11879])
def test_fr_to_br_round_trip(idx):
    c = CubieCube()
    c.fr_to_br = idx
    assert c.fr_to_br == idx
    assert sorted(c.ep) == list(range(12))


def test_fr_to_br_after_u_move_unchanged():
    c = CubieCube()
    c.move(0)
    assert c.fr_to_br == 0