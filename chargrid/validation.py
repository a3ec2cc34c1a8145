#
# PROJECT: chargrid
# MODULE: chargrid/validation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Accept/reject checks for text typed by the user.

None of these raise on bad input and none of them touch the grid: a
rejected line is simply reported so the caller can ask again.
"""

from dataclasses import dataclass
from typing import Optional

from .canvas import MAX_COLS, MAX_ROWS, MIN_COLS, MIN_ROWS
from .rasterizer import DRAWING_GLYPHS, ROW_TERMINATOR

# The original input buffer held 169 bytes including its terminator.
MAX_LINE_LENGTH = 168

ATTRIBUTE_COUNT = 3
COORD_COUNT = 4


@dataclass(frozen=True)
class Validation:
    """Outcome of a validator: accepted flag plus the parsed value."""
    accepted: bool
    value: Optional[tuple] = None

    def __bool__(self):
        return self.accepted


REJECTED = Validation(False)


def tokenize(text: str, count: int, max_length: int = MAX_LINE_LENGTH):
    """Split a line into exactly count tokens, or return None."""
    if text is None or len(text) > max_length:
        return None
    tokens = text.split()
    if len(tokens) != count:
        return None
    return tokens


def parse_bounded_int(token: str, low: int, high: int) -> Optional[int]:
    """Plain decimal digits only; no sign, no whitespace, no underscores."""
    if not token.isascii() or not token.isdigit():
        return None
    value = int(token)
    if value < low or value > high:
        return None
    return value


def validate_attributes(text: str, max_length: int = MAX_LINE_LENGTH) -> Validation:
    """Parse 'rows cols fill' and accept it when every field is in range."""
    tokens = tokenize(text, ATTRIBUTE_COUNT, max_length)
    if tokens is None:
        return REJECTED

    rows = parse_bounded_int(tokens[0], MIN_ROWS, MAX_ROWS)
    cols = parse_bounded_int(tokens[1], MIN_COLS, MAX_COLS)
    fill = tokens[2]
    if rows is None or cols is None:
        return REJECTED
    if (len(fill) != 1 or ord(fill) > 0xFF or fill in DRAWING_GLYPHS
            or fill == ROW_TERMINATOR):
        return REJECTED
    return Validation(True, (rows, cols, fill))


def validate_coords(text: str, grid, max_length: int = MAX_LINE_LENGTH) -> Validation:
    """
    Parse 'x1 y1 x2 y2' against the grid's current content area:
    x in [0, cols - 2], y in [0, rows - 1].
    """
    tokens = tokenize(text, COORD_COUNT, max_length)
    if tokens is None:
        return REJECTED

    max_x = grid.cols - 2
    max_y = grid.rows - 1
    coords = []
    for i, token in enumerate(tokens):
        high = max_x if i % 2 == 0 else max_y
        value = parse_bounded_int(token, 0, high)
        if value is None:
            return REJECTED
        coords.append(value)
    return Validation(True, tuple(coords))


def max_line_count(grid) -> int:
    return (grid.rows * (grid.cols - 1)) // 2


def validate_line_count(text: str, grid, max_length: int = MAX_LINE_LENGTH) -> Validation:
    """Accept how many coordinate lines will follow, 0 up to half the content cells."""
    tokens = tokenize(text, 1, max_length)
    if tokens is None:
        return REJECTED
    count = parse_bounded_int(tokens[0], 0, max_line_count(grid))
    if count is None:
        return REJECTED
    return Validation(True, (count,))
