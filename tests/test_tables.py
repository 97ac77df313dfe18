import pytest

from rubikcube.core import Cube
from rubikcube.tables import (
    Phase1Table,
    init_phase1_table,
    insert_phase1_table_item,
    load_phase1_table,
    save_phase1_table,
)


def test_init_phase1_table_is_zero():
    table = init_phase1_table(False)
    assert table.get(0, 0, 0) == 0
    assert table.get(2186, 2047, 494) == 0
    assert len(table) == 0


def test_insert_phase1_table_item():
    table = init_phase1_table(False)
    cube = Cube()
    insert_phase1_table_item(cube, 2, table)
    assert table.get(0, 0, 0) == 2
    cube.move("b", 1)
    cube.move("d", 1)
    insert_phase1_table_item(cube, 3, table)
    assert table.get(1314, 1048, 303) == 3


def test_set_zero_clears_cell():
    table = Phase1Table()
    table.set(1, 2, 3, 7)
    table.set(1, 2, 3, 0)
    assert table.get(1, 2, 3) == 0
    assert len(table) == 0


@pytest.mark.parametrize(
    "coords", [(2187, 0, 0), (0, 2048, 0), (0, 0, 495), (-1, 0, 0)]
)
def test_out_of_range_coordinates(coords):
    table = Phase1Table()
    with pytest.raises(IndexError):
        table.get(*coords)
    with pytest.raises(IndexError):
        table.set(*coords, 1)


@pytest.mark.parametrize("value", [-1, 256])
def test_value_must_fit_in_byte(value):
    with pytest.raises(ValueError):
        Phase1Table().set(0, 0, 0, value)


def test_save_load_round_trip(tmp_path):
    table = Phase1Table()
    table.set(0, 0, 0, 2)
    table.set(1314, 1048, 303, 3)
    table.set(2186, 2047, 494, 255)
    path = tmp_path / "phase1.bin"
    save_phase1_table(path, table)
    loaded = load_phase1_table(path)
    assert loaded == table
    assert loaded.get(2186, 2047, 494) == 255


def test_init_with_save_writes_file(tmp_path):
    path = tmp_path / "table.bin"
    table = init_phase1_table(True, path)
    assert path.exists()
    assert load_phase1_table(path) == table


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_phase1_table(tmp_path / "missing.bin")


def test_load_garbage_file(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(b"not a table at all, really")
    with pytest.raises(ValueError):
        load_phase1_table(path)


def test_load_truncated_file(tmp_path):
    table = Phase1Table()
    table.set(5, 5, 5, 9)
    path = tmp_path / "t.bin"
    save_phase1_table(path, table)
    path.write_bytes(path.read_bytes()[:-1])
    with pytest.raises(ValueError):
        load_phase1_table(path)