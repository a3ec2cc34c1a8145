#
# PROJECT: chargrid
# MODULE: chargrid/record.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Binary persistence of a CharGrid.

Layout, no magic and no version field:

    rows   u32 little-endian
    cols   u32 little-endian
    fill   1 byte
    cells  rows * cols bytes, row terminators included
"""

import io
import logging
import struct

from .canvas import ENCODING, CharGrid, check_cols, check_fill_char, check_rows
from .errors import TruncatedRecord
from .storage import HeapStorage

log = logging.getLogger(__name__)

HEADER = struct.Struct('<IIc')


def dumps(grid: CharGrid) -> bytes:
    header = HEADER.pack(grid.rows, grid.cols, grid.fill_char.encode(ENCODING))
    return header + grid.buffer


def dump(grid: CharGrid, fp) -> int:
    """Write the record to a binary stream. Returns the number of bytes written."""
    data = dumps(grid)
    fp.write(data)
    log.debug("wrote %d byte record (%dx%d)", len(data), grid.rows, grid.cols)
    return len(data)


def _read_exact(fp, size: int, consumed: int) -> bytes:
    data = fp.read(size)
    if len(data) != size:
        raise TruncatedRecord(consumed + size, consumed + len(data))
    return data


def load(fp, grid: CharGrid = None) -> CharGrid:
    """
    Read a record from a binary stream into grid (a new grid when None).

    The record is read into a scratch grid first. Its dimensions and fill
    character then go through the same checks the setters apply, so a
    corrupt record raises InvalidDimension or InvalidFillCharacter and the
    destination is left untouched.
    """
    rows, cols, fill = HEADER.unpack(_read_exact(fp, HEADER.size, 0))
    fill_char = fill.decode(ENCODING)

    check_rows(rows)
    check_cols(cols)
    check_fill_char(fill_char)

    cells = _read_exact(fp, rows * cols, HEADER.size)

    storage = grid.storage if grid is not None else HeapStorage
    scratch = CharGrid(rows, cols, fill_char, storage=storage)
    scratch._adopt(rows, cols, fill_char, cells)

    if grid is None:
        return scratch
    return grid.take(scratch)


def loads(data: bytes, grid: CharGrid = None) -> CharGrid:
    return load(io.BytesIO(data), grid)


def save(grid: CharGrid, path) -> int:
    with open(path, 'wb') as f:
        return dump(grid, f)


def load_file(path, grid: CharGrid = None) -> CharGrid:
    with open(path, 'rb') as f:
        return load(f, grid)
