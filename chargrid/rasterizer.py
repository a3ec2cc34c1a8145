#
# PROJECT: chargrid
# MODULE: chargrid/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from typing import Optional

DASH = '-'
BACKSLASH = '\\'
FORWARD_SLASH = '/'
VERTICAL_BAR = '|'

# Ordered for error messages; membership tests use the frozenset.
GLYPH_ORDER = (DASH, BACKSLASH, FORWARD_SLASH, VERTICAL_BAR)
DRAWING_GLYPHS = frozenset(GLYPH_ORDER)

ROW_TERMINATOR = '\n'


def classify(x1: int, y1: int, x2: int, y2: int) -> Optional[str]:
    """
    Maps two grid positions to the glyph joining them.

    Horizontal neighbours give a dash, vertical neighbours a bar. Diagonal
    neighbours give '/' when x grows while y shrinks (or the reverse) and
    '\\' when both move the same way. Anything else has no relation and
    returns None.
    """
    dx1 = abs(x1 - x2) == 1
    dy1 = abs(y1 - y2) == 1

    if dx1 and y1 == y2:
        return DASH
    if dy1 and x1 == x2:
        return VERTICAL_BAR
    if dx1 and dy1:
        if (x1 < x2 and y1 > y2) or (x1 > x2 and y1 < y2):
            return FORWARD_SLASH
        return BACKSLASH
    return None


def plot_path(grid, points) -> int:
    """
    Plots every consecutive pair of a point sequence onto the grid.
    points is an iterable of (x, y) tuples already validated against the grid.
    Returns the number of pairs that produced a glyph.
    """
    drawn = 0
    prev = None
    for pt in points:
        if prev is not None:
            if grid.plot((prev[0], prev[1], pt[0], pt[1])):
                drawn += 1
        prev = pt
    return drawn
