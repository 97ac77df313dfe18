# rubikcube

A small model of the 3×3×3 Rubik's cube. It provides:

- `rubikcube.core`: a cube state (`Cube`) with the six face turns and the
  phase-one coordinates used by two-phase solvers: corner orientation,
  edge orientation and UD-slice position;
- `rubikcube.cubiecube`: a cubie-level cube (`CubieCube`) with permutation
  multiplication, twist, flip, parity and FR-to-BR slice coordinates;
- `rubikcube.search`: a depth-limited search (`solve`) over face turns;
- `rubikcube.tables`: a phase-one lookup table (`Phase1Table`) that can be
  saved to and loaded from a file;
- `rubikcube.cli`: two commands.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
rubikcube
```

Prints the state and coordinates of a solved cube, then turns U twice and
R once and prints the state and coordinates again.

```
rubikcube-example [SCRAMBLE] [--depth N]
```

Passes a scramble (by default a built-in sample) to `solve` with the given
depth (default 0) and prints `Solution: [...]`. On an error it prints
`error: ...` to standard error and exits with status 1. Since `solve` only
accepts the empty state, any non-empty scramble, including the default,
ends with that error.

## Using the library

### Cube and coordinates

Faces are named `"r"`, `"l"`, `"u"`, `"d"`, `"f"` and `"b"`; the second
argument of `move` is how many quarter turns to apply. An unknown face
raises `ValueError`.

```python
from rubikcube.core import (
    Cube,
    comb,
    corner_orientation_coordinate,
    edge_orientation_coordinate,
    uds_coordinate,
    phase1_solved,
    print_cube,
    print_coordinates,
)

cube = Cube()
cube.move("r", 1)

corner_orientation_coordinate(cube)  # 276
edge_orientation_coordinate(cube)    # 0
uds_coordinate(cube)                 # 88
phase1_solved(cube)                  # False

print_cube(cube)
print_coordinates(cube)

comb(10, 4)                          # 210
```

`Cube` is a dataclass with the lists `corner_permutation`,
`corner_orientation`, `edge_permutation` and `edge_orientation`.

### Cubie-level cube

Moves are numbered 0 to 5 for U, R, F, D, L and B; any other number raises
`ValueError`. `Corner` and `Edge` are the integer enums naming the cubies.

```python
from rubikcube.cubiecube import CubieCube, cnk

cube = CubieCube()
cube.is_solved()      # True
cube.move(1)
cube.is_solved()      # False

cube.twist            # corner twist coordinate (0 .. 2186)
cube.flip             # edge flip coordinate (0 .. 2047)
cube.fr_to_br         # position and order of the slice edges (0 .. 11879)
cube.corner_parity()
cube.edge_parity()

cube.twist = 123      # the coordinates can also be assigned
cube.flip = 5
cube.fr_to_br = 0

cube.multiply(CubieCube())

cnk(11, 2)            # 55
```

### Search

```python
from rubikcube.search import solve, SolveError

solve("", 0)          # [] : the solved cube needs no moves

try:
    solve("BBURUDBFUFFFRRFUUFLULUFUDLRRDBBDBDBLUDDFLLRRBRLLLBRDDF", 0)
except SolveError as error:
    print(error)
```

`solve(state, depth)` looks for exactly `depth` quarter turns that leave the
cube solved. It raises `SolveError` when the state string is not empty or
when no such sequence exists, and `ValueError` for a negative depth.

### Phase-one table

The table is indexed by corner orientation (0–2186), edge orientation
(0–2047) and UD-slice coordinate (0–494) and holds a byte for each entry;
entries never set read as zero. Only the non-zero entries are kept in
memory and written to the file.

```python
from rubikcube.core import Cube
from rubikcube.tables import (
    Phase1Table,
    init_phase1_table,
    insert_phase1_table_item,
    save_phase1_table,
    load_phase1_table,
)

table = init_phase1_table(False)     # pass True to also write it to phase1.bin

cube = Cube()
cube.move("b", 1)
cube.move("d", 1)
insert_phase1_table_item(cube, 3, table)
table.get(1314, 1048, 303)           # 3
table.set(0, 0, 0, 2)

save_phase1_table("phase1.bin", table)
assert load_phase1_table("phase1.bin") == table
```

Coordinates out of range raise `IndexError`; values outside 0–255 raise
`ValueError`, as does loading a file that is not a table written by
`save_phase1_table`. Progress messages go to the `rubikcube.tables` logger.

## What the package does not do

- `solve` cannot read a cube from a facelet string; only the solved cube
  (the empty string) is accepted, so it does not solve scrambled cubes.
- Nothing fills the phase-one table with move counts; entries are only
  recorded one at a time with `insert_phase1_table_item` or `Phase1Table.set`.