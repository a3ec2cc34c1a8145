#
# PROJECT: chargrid
# MODULE: chargrid/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import io
import logging

from .canvas import ENCODING, CharGrid
from .log import ScopedTimer

log = logging.getLogger(__name__)


class Renderer:
    """
    Writes a grid to an output sink.

    draw() sends the raw buffer, terminators included, to a binary or text
    stream. draw_curses() paints the same cells onto a curses window.
    Neither adds anything the buffer does not already hold.
    """

    def __init__(self, timed: bool = False):
        self.timed = timed

    def draw(self, grid: CharGrid, stream) -> int:
        """Write the buffer to stream and return the number of cells written."""
        data = grid.buffer
        if self.timed:
            with ScopedTimer("draw"):
                self._write(stream, data)
        else:
            self._write(stream, data)
        log.info("Finished.")
        return len(data)

    @staticmethod
    def _write(stream, data: bytes):
        if isinstance(stream, io.TextIOBase):
            stream.write(data.decode(ENCODING))
        else:
            stream.write(data)
        stream.flush()

    def draw_curses(self, stdscr, grid: CharGrid, title: str = ""):
        """
        Paint the grid below a one-line header. Does NOT call refresh();
        the caller does that after any overlay.
        """
        th, tw = stdscr.getmaxyx()
        stdscr.erase()

        hdr = f" {grid.rows}x{grid.cols - 1} fill:{grid.fill_char!r} {title}".rstrip() + " "
        try:
            stdscr.addstr(0, 0, hdr.center(max(tw - 1, 0), '='), curses.A_BOLD)
        except curses.error:
            pass

        # The terminator column is not painted; curses moves lines itself.
        for y in range(min(th - 1, grid.rows)):
            row = ''.join(grid.at(x, y) for x in range(min(tw - 1, grid.cols - 1)))
            try:
                stdscr.addstr(y + 1, 0, row)
            except curses.error:
                # Writing into the bottom-right cell raises after the write.
                pass
