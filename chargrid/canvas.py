#
# PROJECT: chargrid
# MODULE: chargrid/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import enum
import logging

from .errors import InvalidDimension, InvalidFillCharacter
from .rasterizer import DRAWING_GLYPHS, GLYPH_ORDER, ROW_TERMINATOR, classify
from .storage import HeapStorage

log = logging.getLogger(__name__)

MIN_ROWS, MAX_ROWS = 1, 50
MIN_COLS, MAX_COLS = 2, 168

DEFAULT_ROWS = 20
DEFAULT_COLS = 20
DEFAULT_FILL = ' '

# Cells are single bytes; latin-1 maps every code point below 256 to one byte.
ENCODING = 'latin-1'

_TERMINATOR = ord(ROW_TERMINATOR)


class Ordering(enum.Enum):
    """Result of CharGrid.compare_area, a partial order."""
    LESS = -1
    EQUIVALENT = 0
    GREATER = 1
    UNORDERED = None


def check_rows(rows):
    if isinstance(rows, bool) or not isinstance(rows, int) or not MIN_ROWS <= rows <= MAX_ROWS:
        raise InvalidDimension('row', rows, MIN_ROWS, MAX_ROWS)


def check_cols(cols):
    if isinstance(cols, bool) or not isinstance(cols, int) or not MIN_COLS <= cols <= MAX_COLS:
        raise InvalidDimension('column', cols, MIN_COLS, MAX_COLS)


def check_fill_char(char):
    if (not isinstance(char, str) or len(char) != 1 or ord(char) > 0xFF
            or char in DRAWING_GLYPHS or char == ROW_TERMINATOR):
        raise InvalidFillCharacter(char, GLYPH_ORDER)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


class CharGrid:
    """
    Fixed-size character grid stored row-major in one contiguous buffer.

    Every row ends with a newline cell, so the buffer is already the text
    to print. Content cells of row y are y*cols .. y*cols + cols - 2 and
    hold either the fill character or a drawing glyph.

    The constructor trusts its arguments; range checks live in the setters
    and in chargrid.validation. Storage is injected as a factory called with
    (size, fill_byte), see chargrid.storage.
    """
    __slots__ = ('_rows', '_cols', '_fill', '_cells', '_storage')

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                 fill_char: str = DEFAULT_FILL, storage=HeapStorage):
        self._rows = rows
        self._cols = cols
        self._fill = fill_char
        self._storage = storage
        self._cells = storage(rows * cols, ord(fill_char))
        self._stamp_terminators(0)

    def _stamp_terminators(self, first_row: int):
        for last in range((first_row + 1) * self._cols - 1, len(self._cells), self._cols):
            self._cells.set(last, _TERMINATOR)

    # ── Accessors ───────────────────────────────────────────────────────
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def fill_char(self) -> str:
        return self._fill

    @property
    def storage(self):
        """Factory used to allocate this grid's cells."""
        return self._storage

    @property
    def buffer(self) -> bytes:
        """Immutable snapshot of every cell, terminators included."""
        return self._cells.tobytes()

    def __len__(self):
        return len(self._cells)

    def __bool__(self):
        return len(self._cells) > 0

    def __repr__(self):
        return f"CharGrid(rows={self._rows}, cols={self._cols}, fill_char={self._fill!r})"

    def at(self, x: int, y: int) -> str:
        """Cell at column x of row y. No bounds check."""
        return chr(self._cells.get(y * self._cols + x))

    def put(self, x: int, y: int, char: str):
        self._cells.set(y * self._cols + x, ord(char))

    def text(self) -> str:
        return self._cells.tobytes().decode(ENCODING)

    # ── Comparison ──────────────────────────────────────────────────────
    def equals(self, other: 'CharGrid') -> bool:
        """Same dimensions and fill character. Cell contents are ignored."""
        return (self._rows == other._rows and self._cols == other._cols
                and self._fill == other._fill)

    def compare_area(self, other: 'CharGrid') -> Ordering:
        """
        Orders grids by area, then by row count. Grids that tie on both are
        EQUIVALENT when their fill characters match and UNORDERED otherwise.
        """
        c = _cmp(self._rows * self._cols, other._rows * other._cols)
        if c == 0:
            c = _cmp(self._rows, other._rows)
        if c != 0:
            return Ordering(c)
        return Ordering.EQUIVALENT if self._fill == other._fill else Ordering.UNORDERED

    def __eq__(self, other):
        if not isinstance(other, CharGrid):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        h = 17
        h = 31 * h + hash(self._rows)
        h = 31 * h + hash(self._cols)
        h = 31 * h + hash(self._fill)
        return h

    # ── Ownership transfer ──────────────────────────────────────────────
    def _zero(self):
        self._rows = 0
        self._cols = 0
        self._fill = '\0'
        self._cells = self._storage(0, 0)

    def take(self, other: 'CharGrid') -> 'CharGrid':
        """Move other's cells into this grid, leaving other empty."""
        if other is not self:
            self._rows, self._cols, self._fill = other._rows, other._cols, other._fill
            self._cells, self._storage = other._cells, other._storage
            other._zero()
        return self

    def release(self) -> 'CharGrid':
        """Return a new grid owning this grid's cells; this grid becomes empty."""
        moved = CharGrid.__new__(CharGrid)
        moved._storage = self._storage
        moved._zero()
        return moved.take(self)

    # ── Mutation ────────────────────────────────────────────────────────
    def set_rows(self, rows: int):
        check_rows(rows)
        old = self._rows
        if rows == old:
            return
        if rows > old:
            self._cells.resize(rows * self._cols, ord(self._fill))
            self._stamp_terminators(old)
        else:
            # Rows are contiguous, dropping the tail drops whole rows.
            self._cells.resize(rows * self._cols)
        log.debug("rows %d -> %d", old, rows)
        self._rows = rows

    def set_cols(self, cols: int):
        """
        Re-lay every row for a new width.

        Content stays left-aligned. Growing pads each row with the fill
        character; shrinking silently drops what no longer fits.
        """
        check_cols(cols)
        old = self._cols
        if cols == old:
            return
        cells = self._cells
        rows = self._rows
        fill = ord(self._fill)

        if cols > old:
            cells.resize(rows * cols, fill)
            # Back to front so no row is overwritten before it has moved.
            for r in range(rows - 1, -1, -1):
                src, dst = r * old, r * cols
                cells.copy_within(src, dst, old - 1)
                cells.fill(dst + old - 1, cols - old, fill)
                cells.set(dst + cols - 1, _TERMINATOR)
        else:
            for r in range(rows):
                src, dst = r * old, r * cols
                cells.copy_within(src, dst, cols - 1)
                cells.set(dst + cols - 1, _TERMINATOR)
            cells.resize(rows * cols)

        log.debug("cols %d -> %d", old, cols)
        self._cols = cols

    def set_fill_char(self, fill_char: str):
        """Swap the fill character, rewriting every cell that held the old one."""
        check_fill_char(fill_char)
        if fill_char == self._fill:
            return
        self._cells.replace(ord(self._fill), ord(fill_char))
        self._fill = fill_char

    def plot(self, coords) -> bool:
        """
        Mark both endpoints of a validated (x1, y1, x2, y2) pair with the
        glyph joining them. Returns False when the points are unrelated.
        """
        x1, y1, x2, y2 = coords
        glyph = classify(x1, y1, x2, y2)
        if glyph is None or glyph not in DRAWING_GLYPHS:
            return False
        self.put(x1, y1, glyph)
        self.put(x2, y2, glyph)
        return True

    def _adopt(self, rows: int, cols: int, fill_char: str, data):
        """Install fully checked attributes and raw cells in one step."""
        self._cells.load(data)
        self._rows, self._cols, self._fill = rows, cols, fill_char
