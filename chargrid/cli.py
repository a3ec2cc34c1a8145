#
# PROJECT: chargrid
# MODULE: chargrid/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import contextlib
import logging
import sys

from .canvas import check_cols, check_fill_char, check_rows
from .config import GridConfig
from .log import setup_logs
from .session import DrawingSession
from .storage import STRATEGIES

log = logging.getLogger(__name__)


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
input format:
  [rows cols fill]     only with --full-input, e.g. "10 40 ."
  count                number of coordinate lines that follow
  x1 y1 x2 y2          one pair per line; neighbours become - | / \\

examples:
  %(prog)s drawing.txt                          Draw from a file onto a 20x20 grid
  %(prog)s --full-input                         Type the grid size, then the lines
  %(prog)s drawing.txt --save art.bin           Keep the grid as a binary record
  %(prog)s --load art.bin --view < more.txt     Add lines to a saved grid, view in curses
  %(prog)s drawing.txt --storage bounded -o out.txt
"""
    parser = argparse.ArgumentParser(
        prog="chargrid",
        description="ASCII line-art on a character grid",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("input", nargs='?',
                        help="Read input lines from this file instead of stdin")
    parser.add_argument("--full-input", action="store_true",
                        help="Read 'rows cols fill' from the input first")
    parser.add_argument("--rows", type=int, default=None,
                        help="Grid rows, 1-50 (default: 20)")
    parser.add_argument("--cols", type=int, default=None,
                        help="Grid columns including the line break, 2-168 (default: 20)")
    parser.add_argument("--fill", default=None,
                        help="Fill character (default: space)")
    parser.add_argument("--storage", choices=STRATEGIES, default=None,
                        help="Cell storage strategy (default: heap)")
    parser.add_argument("--load", metavar="PATH",
                        help="Start from a saved binary record")
    parser.add_argument("--save", metavar="PATH",
                        help="Save the finished grid as a binary record")
    parser.add_argument("-o", "--output", metavar="PATH",
                        help="Write the drawing to a file instead of stdout")
    parser.add_argument("--view", action="store_true",
                        help="Show the result in a curses screen")
    parser.add_argument("--debug", action="store_true",
                        help="Log debug messages and timings to stderr")
    return parser.parse_args(argv)


def build_config(args) -> GridConfig:
    config = GridConfig.detect()
    if args.rows is not None:
        config.rows = args.rows
    if args.cols is not None:
        config.cols = args.cols
    if args.fill is not None:
        config.fill_char = args.fill
    if args.storage is not None:
        config.storage = args.storage
    if args.full_input:
        config.full_input = True
    if args.debug:
        config.debug = True
    return config


def check_config(config: GridConfig):
    """Command line attributes go through the same checks as typed ones."""
    check_rows(config.rows)
    check_cols(config.cols)
    check_fill_char(config.fill_char)


def run(args) -> int:
    config = build_config(args)
    setup_logs(config.debug)
    log.debug("config: %r", config)
    check_config(config)

    with contextlib.ExitStack() as stack:
        instream = stack.enter_context(open(args.input, 'r')) if args.input else sys.stdin
        outstream = stack.enter_context(open(args.output, 'wb')) if args.output else sys.stdout.buffer
        session = DrawingSession(config, instream, outstream)
        session.run(load_path=args.load, save_path=args.save, view=args.view)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        return 130
    except (ValueError, OSError, EOFError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
