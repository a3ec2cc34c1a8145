#
# PROJECT: chargrid
# MODULE: tests/conftest.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""Shared fixtures for the chargrid tests."""

import logging

import pytest

from chargrid.canvas import CharGrid
from chargrid.storage import make_storage


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logs() so caplog keeps seeing package records."""
    logger = logging.getLogger('chargrid')
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture(params=['heap', 'bounded'])
def storage(request):
    """Every storage strategy, with room for any legal grid."""
    return make_storage(request.param, 50 * 168)


@pytest.fixture
def make_grid(storage):
    def _make(rows=20, cols=20, fill=' '):
        return CharGrid(rows, cols, fill, storage=storage)
    return _make


class FakeScreen:
    """Records what a curses window would have been asked to draw."""

    def __init__(self, height=24, width=80, keys=(ord('q'),)):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.calls = []
        self.refreshed = 0

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.calls.clear()

    def addstr(self, y, x, text, attr=0):
        self.calls.append((y, x, text))

    def refresh(self):
        self.refreshed += 1

    def getch(self):
        return self.keys.pop(0) if self.keys else ord('q')


@pytest.fixture
def screen():
    return FakeScreen()
