#
# PROJECT: chargrid
# MODULE: chargrid/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass

from .canvas import DEFAULT_COLS, DEFAULT_FILL, DEFAULT_ROWS, MAX_COLS, MAX_ROWS
from .storage import STRATEGIES, make_storage
from .validation import MAX_LINE_LENGTH

_TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass
class GridConfig:
    """Settings for a drawing session."""
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    fill_char: str = DEFAULT_FILL
    storage: str = 'heap'
    full_input: bool = False
    use_curses: bool = True
    debug: bool = False
    max_line_length: int = MAX_LINE_LENGTH

    def __post_init__(self):
        if self.storage not in STRATEGIES:
            raise ValueError(f"Unknown storage strategy {self.storage!r}; expected one of {STRATEGIES}")

    @property
    def storage_capacity(self) -> int:
        """Arena size for the bounded strategy; any legal grid fits in it."""
        return MAX_ROWS * MAX_COLS

    def storage_factory(self):
        return make_storage(self.storage, self.storage_capacity)

    @classmethod
    def detect(cls, environ=None) -> 'GridConfig':
        """
        Default config from the environment.
        TERM decides whether the curses viewer can be used;
        CHARGRID_DEBUG and CHARGRID_STORAGE override the defaults.
        """
        env = os.environ if environ is None else environ
        term = env.get('TERM', '').lower()
        is_dumb = term in ('', 'dumb', 'unknown')

        return cls(
            storage=env.get('CHARGRID_STORAGE', 'heap').lower(),
            use_curses=not is_dumb,
            debug=env.get('CHARGRID_DEBUG', '').lower() in _TRUTHY,
        )
