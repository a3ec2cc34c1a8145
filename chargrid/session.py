#
# PROJECT: chargrid
# MODULE: chargrid/session.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging
import sys

from .canvas import CharGrid
from .config import GridConfig
from .record import load_file, save
from .renderer import Renderer
from .log import ScopedTimer
from .validation import validate_attributes, validate_coords, validate_line_count

log = logging.getLogger(__name__)


class DrawingSession:
    """
    Line-oriented driver around a CharGrid.

    Reads grid attributes, a line count and that many coordinate pairs from
    a text stream, asking again whenever a validator rejects a line, then
    renders the grid. The grid itself never sees unvalidated input.
    """

    def __init__(self, config: GridConfig = None, instream=None, outstream=None,
                 prompts=None):
        self.config = config or GridConfig()
        self.instream = instream if instream is not None else sys.stdin
        self.outstream = outstream if outstream is not None else sys.stdout
        # Prompts only make sense when someone is typing.
        if prompts is None:
            isatty = getattr(self.instream, 'isatty', None)
            prompts = sys.stderr if isatty is not None and isatty() else None
        self.prompts = prompts
        self.renderer = Renderer(timed=self.config.debug)
        self.grid = None
        self.rejected = 0

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def _prompt(self, text: str):
        if self.prompts is not None:
            self.prompts.write(text)
            self.prompts.flush()

    def read_line(self) -> str:
        line = self.instream.readline()
        if not line:
            raise EOFError("input ended before the drawing was complete")
        return line.rstrip('\r\n')

    def _ask(self, prompt: str, validate):
        """Repeat until validate accepts a line; return its parsed value."""
        while True:
            self._prompt(prompt)
            line = self.read_line()
            result = validate(line)
            if result:
                return result.value
            self.rejected += 1
            log.debug("rejected input %r", line)

    def prompt_attributes(self):
        max_len = self.config.max_line_length
        return self._ask("rows cols fill> ",
                         lambda s: validate_attributes(s, max_len))

    def prompt_line_count(self) -> int:
        max_len = self.config.max_line_length
        (count,) = self._ask("lines> ",
                             lambda s: validate_line_count(s, self.grid, max_len))
        return count

    def prompt_coords(self):
        max_len = self.config.max_line_length
        return self._ask("x1 y1 x2 y2> ",
                         lambda s: validate_coords(s, self.grid, max_len))

    # ────────────────────────────────────────────────────────────────────
    # Main flow
    # ────────────────────────────────────────────────────────────────────
    def build_grid(self, prompt: bool = True) -> CharGrid:
        """Create the grid; prompt=False skips asking for its attributes."""
        config = self.config
        if config.full_input and prompt:
            rows, cols, fill = self.prompt_attributes()
        else:
            rows, cols, fill = config.rows, config.cols, config.fill_char
        self.grid = CharGrid(rows, cols, fill, storage=config.storage_factory())
        log.debug("created %r with %s storage", self.grid, config.storage)
        return self.grid

    def collect_coords(self) -> int:
        """Read the line count and plot that many pairs. Returns glyphs drawn."""
        count = self.prompt_line_count()
        drawn = 0
        for _ in range(count):
            if self.grid.plot(self.prompt_coords()):
                drawn += 1
        log.debug("%d of %d pairs drew a glyph", drawn, count)
        return drawn

    def run(self, load_path=None, save_path=None, view: bool = False) -> CharGrid:
        # A loaded record decides the shape, so there is nothing to ask for.
        grid = self.build_grid(prompt=not load_path)
        if load_path:
            load_file(load_path, grid)
            log.info("loaded %r from %s", grid, load_path)

        with ScopedTimer("input"):
            self.collect_coords()

        if save_path:
            save(grid, save_path)
            log.info("saved %r to %s", grid, save_path)

        if view and self.config.use_curses:
            curses.wrapper(self.view)
        else:
            self.renderer.draw(grid, self.outstream)
        return grid

    def view(self, stdscr):
        """Show the grid in curses until 'q' is pressed."""
        curses.curs_set(0)
        while True:
            self.renderer.draw_curses(stdscr, self.grid, "[q] quit")
            stdscr.refresh()
            if stdscr.getch() in (ord('q'), 27):
                break
