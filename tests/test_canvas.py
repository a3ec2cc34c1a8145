#
# PROJECT: chargrid
# MODULE: tests/test_canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""CharGrid unit tests."""

import pytest

from chargrid.canvas import CharGrid, Ordering
from chargrid.errors import InvalidDimension, InvalidFillCharacter, StorageExhausted
from chargrid.rasterizer import DRAWING_GLYPHS
from chargrid.storage import make_storage


def assert_invariants(grid: CharGrid) -> None:
    data = grid.text()
    assert grid.cols >= 2
    assert len(data) == grid.rows * grid.cols
    for r in range(grid.rows):
        row = data[r * grid.cols:(r + 1) * grid.cols]
        assert row[-1] == '\n'
        for ch in row[:-1]:
            assert ch == grid.fill_char or ch in DRAWING_GLYPHS


@pytest.mark.parametrize(
    "rows, cols, fill",
    [(1, 2, ' '), (20, 20, ' '), (50, 168, '#'), (7, 3, '.'), (3, 100, 'x')],
)
def test_fresh_grid_invariants(make_grid, rows, cols, fill) -> None:
    """A new grid is filled and every row ends with a line break."""
    grid = make_grid(rows, cols, fill)
    assert (grid.rows, grid.cols, grid.fill_char) == (rows, cols, fill)
    assert len(grid) == rows * cols
    assert grid.text() == (fill * (cols - 1) + '\n') * rows
    assert_invariants(grid)


def test_defaults() -> None:
    """The default grid is 20 by 20 filled with spaces."""
    grid = CharGrid()
    assert (grid.rows, grid.cols, grid.fill_char) == (20, 20, ' ')
    assert grid.buffer == (b' ' * 19 + b'\n') * 20
    assert grid


def test_at_and_put(make_grid) -> None:
    """Cells are addressed as (x, y) with a row stride of cols."""
    grid = make_grid(3, 5, '.')
    grid.put(3, 2, '|')
    assert grid.at(3, 2) == '|'
    assert grid.buffer[2 * 5 + 3] == ord('|')
    assert grid.at(4, 0) == '\n'


def test_buffer_is_a_snapshot(make_grid) -> None:
    """The buffer view does not follow later changes."""
    grid = make_grid(2, 3, '.')
    snap = grid.buffer
    grid.put(0, 0, '-')
    assert snap == b'..\n..\n'
    assert isinstance(snap, bytes)


# ── Rows ────────────────────────────────────────────────────────────────
def test_set_rows_grow_and_shrink(make_grid) -> None:
    """New rows are filled and terminated; shrinking drops trailing rows."""
    grid = make_grid(2, 4, '.')
    grid.put(0, 0, '-')
    grid.put(2, 1, '|')

    grid.set_rows(4)
    assert grid.rows == 4
    assert grid.text() == "-..\n..|\n...\n...\n"
    assert_invariants(grid)

    grid.set_rows(1)
    assert grid.text() == "-..\n"
    assert_invariants(grid)


def test_set_rows_unchanged_is_noop(make_grid) -> None:
    """Setting the current row count leaves everything alone."""
    grid = make_grid(3, 4, '.')
    grid.put(1, 1, '/')
    before = grid.buffer
    grid.set_rows(3)
    assert grid.buffer == before


@pytest.mark.parametrize("rows", [0, 51, 1000, -1, 2.5, "5", True])
def test_set_rows_rejects_out_of_range(make_grid, rows) -> None:
    """Row counts outside 1..50 raise and leave the grid unchanged."""
    grid = make_grid(3, 4, '.')
    before = grid.buffer
    with pytest.raises(InvalidDimension):
        grid.set_rows(rows)
    assert grid.rows == 3
    assert grid.buffer == before


def test_set_rows_limits(make_grid) -> None:
    """Fifty rows is the largest allowed size."""
    grid = make_grid(3, 4, '.')
    grid.set_rows(50)
    assert grid.rows == 50
    assert_invariants(grid)
    with pytest.raises(InvalidDimension):
        grid.set_rows(51)
    grid.set_rows(1)
    assert grid.rows == 1


# ── Columns ─────────────────────────────────────────────────────────────
def test_set_cols_grow(make_grid) -> None:
    """Growing pads every row on the right with the fill character."""
    grid = make_grid(2, 4, '.')
    grid.put(0, 0, '-')
    grid.put(2, 1, '|')

    grid.set_cols(6)
    assert grid.cols == 6
    assert grid.text() == "-....\n..|..\n"
    assert_invariants(grid)


def test_set_cols_shrink(make_grid) -> None:
    """Shrinking keeps the left part of every row and drops the rest."""
    grid = make_grid(3, 6, '.')
    grid.put(0, 0, '-')
    grid.put(1, 0, '-')
    grid.put(4, 1, '/')
    grid.put(1, 2, '\\')

    grid.set_cols(3)
    assert grid.text() == "--\n..\n.\\\n"
    assert_invariants(grid)


def test_set_cols_grow_then_shrink_round_trip(make_grid) -> None:
    """Growing and shrinking back restores the original buffer."""
    grid = make_grid(4, 5, ' ')
    for x, y, ch in [(0, 0, '-'), (3, 0, '|'), (1, 2, '/'), (3, 3, '\\')]:
        grid.put(x, y, ch)
    before = grid.buffer

    grid.set_cols(9)
    assert_invariants(grid)
    for x, y in [(0, 0), (3, 0), (1, 2), (3, 3)]:
        assert grid.at(x, y) == chr(before[y * 5 + x])
    grid.set_cols(5)
    assert grid.buffer == before


def test_set_cols_shrink_then_grow_loses_tail(make_grid) -> None:
    """Cells cut off by a shrink come back as fill, not as their old content."""
    grid = make_grid(2, 6, '.')
    grid.put(0, 0, '-')
    grid.put(4, 0, '-')
    grid.put(3, 1, '|')

    grid.set_cols(3)
    grid.set_cols(6)
    assert grid.text() == "-....\n.....\n"
    assert_invariants(grid)


def test_set_cols_monotone_sequence(make_grid) -> None:
    """Several growth steps keep content at the same coordinates."""
    grid = make_grid(3, 2, '.')
    grid.put(0, 1, '|')
    for cols in (3, 10, 50, 168):
        grid.set_cols(cols)
        assert grid.at(0, 1) == '|'
        assert_invariants(grid)
    for cols in (100, 20, 2):
        grid.set_cols(cols)
        assert grid.at(0, 1) == '|'
        assert_invariants(grid)
    assert grid.text() == ".\n|\n.\n"


@pytest.mark.parametrize("cols", [0, 1, 169, 500, True])
def test_set_cols_rejects_out_of_range(make_grid, cols) -> None:
    """Column counts outside 2..168 raise and leave the grid unchanged."""
    grid = make_grid(2, 4, '.')
    before = grid.buffer
    with pytest.raises(InvalidDimension):
        grid.set_cols(cols)
    assert grid.cols == 4
    assert grid.buffer == before


# ── Fill character ──────────────────────────────────────────────────────
def test_set_fill_char_replaces_every_occurrence(make_grid) -> None:
    """Every cell holding the old fill value takes the new one."""
    grid = make_grid(2, 4, ' ')
    grid.put(1, 0, '-')
    grid.set_fill_char('.')
    assert grid.fill_char == '.'
    assert grid.text() == ".-.\n...\n"
    assert_invariants(grid)


@pytest.mark.parametrize("char", ['-', '\\', '/', '|', '\n', '', 'ab', '€', 5])
def test_set_fill_char_rejects(make_grid, char) -> None:
    """Drawing glyphs, the line break and anything but one byte are refused."""
    grid = make_grid(2, 4, ' ')
    grid.put(0, 0, '-')
    before = grid.buffer
    with pytest.raises(InvalidFillCharacter):
        grid.set_fill_char(char)
    assert grid.fill_char == ' '
    assert grid.buffer == before


def test_line_breaks_survive_fill_changes(make_grid) -> None:
    """Row terminators are never taken for fill cells."""
    grid = make_grid(2, 3, ' ')
    with pytest.raises(InvalidFillCharacter):
        grid.set_fill_char('\n')
    grid.set_fill_char('.')
    assert grid.buffer == b'..\n..\n'
    assert_invariants(grid)


def test_set_fill_char_unchanged_is_noop(make_grid) -> None:
    """Setting the current fill character does nothing."""
    grid = make_grid(2, 3, '#')
    before = grid.buffer
    grid.set_fill_char('#')
    assert grid.buffer == before


# ── Plotting ────────────────────────────────────────────────────────────
def test_plot_marks_both_endpoints(make_grid) -> None:
    """A related pair writes its glyph into both cells."""
    grid = make_grid(3, 4, '.')
    assert grid.plot((0, 2, 1, 1))
    assert grid.at(0, 2) == '/'
    assert grid.at(1, 1) == '/'
    assert grid.text() == "...\n./.\n/..\n"


def test_plot_smallest_grid(make_grid) -> None:
    """On a 1x2 grid the pair (0,0)-(1,0) leaves both cells as dashes."""
    grid = make_grid(1, 2, ' ')
    grid.plot((0, 0, 1, 0))
    assert grid.buffer == b'--'


def test_plot_same_point_is_noop(make_grid) -> None:
    """A point paired with itself has no relation."""
    grid = make_grid(10, 10, ' ')
    before = grid.buffer
    assert not grid.plot((5, 5, 5, 5))
    assert grid.buffer == before


def test_plot_unrelated_points_is_noop(make_grid) -> None:
    """Points more than one step apart draw nothing."""
    grid = make_grid(5, 5, ' ')
    before = grid.buffer
    assert not grid.plot((0, 0, 3, 3))
    assert grid.buffer == before


# ── Comparison ──────────────────────────────────────────────────────────
def test_equality_ignores_content() -> None:
    """Grids are equal when rows, cols and fill match."""
    a = CharGrid(3, 4, '.')
    b = CharGrid(3, 4, '.')
    b.plot((0, 0, 1, 0))
    assert a.equals(b)
    assert a == b
    assert hash(a) == hash(b)
    assert a != CharGrid(3, 4, ' ')
    assert a != CharGrid(4, 4, '.')
    assert a != "not a grid"


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ((1, 4, '.'), (2, 4, '.'), Ordering.LESS),
        ((5, 10, '.'), (2, 10, '.'), Ordering.GREATER),
        # Same area: the grid with fewer rows sorts first.
        ((2, 10, '.'), (4, 5, '.'), Ordering.LESS),
        ((4, 5, '.'), (2, 10, '.'), Ordering.GREATER),
        ((3, 4, '.'), (3, 4, '.'), Ordering.EQUIVALENT),
        ((3, 4, '.'), (3, 4, ' '), Ordering.UNORDERED),
    ],
)
def test_compare_area(left, right, expected) -> None:
    """Area first, then rows, then fill-character equivalence."""
    assert CharGrid(*left).compare_area(CharGrid(*right)) is expected


# ── Ownership ───────────────────────────────────────────────────────────
def test_release_leaves_source_empty(make_grid) -> None:
    """Moving a grid out leaves a zeroed, falsy source."""
    grid = make_grid(3, 4, '.')
    grid.plot((0, 0, 1, 0))
    before = grid.buffer

    moved = grid.release()
    assert moved.buffer == before
    assert (moved.rows, moved.cols, moved.fill_char) == (3, 4, '.')
    assert (grid.rows, grid.cols, grid.fill_char) == (0, 0, '\0')
    assert len(grid) == 0
    assert not grid


def test_take_moves_cells(make_grid) -> None:
    """take() adopts the other grid's cells and empties it."""
    dest = make_grid(2, 2, ' ')
    src = make_grid(4, 6, '*')
    src.put(1, 1, '|')

    assert dest.take(src) is dest
    assert dest.at(1, 1) == '|'
    assert dest.rows == 4
    assert not src
    assert dest.take(dest) is dest
    assert dest.rows == 4


# ── Storage strategies ──────────────────────────────────────────────────
def test_bounded_storage_exhaustion_is_atomic() -> None:
    """A resize that does not fit the arena raises and changes nothing."""
    grid = CharGrid(2, 4, '.', storage=make_storage('bounded', 8))
    grid.put(0, 0, '-')
    before = grid.buffer

    with pytest.raises(StorageExhausted):
        grid.set_rows(3)
    with pytest.raises(StorageExhausted):
        grid.set_cols(5)
    assert (grid.rows, grid.cols) == (2, 4)
    assert grid.buffer == before

    grid.set_cols(3)
    assert grid.text() == "-.\n..\n"
    grid.set_rows(2)
    grid.set_cols(4)
    assert grid.text() == "-..\n...\n"
