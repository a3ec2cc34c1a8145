#
# PROJECT: chargrid
# MODULE: chargrid/log.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import sys
import time

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logs(debug: bool = False, stream=None):
    """Attach one stderr handler to the package logger."""
    logger = logging.getLogger('chargrid')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger


class ScopedTimer:
    """Logs how long the enclosed block took, at DEBUG level."""

    def __init__(self, label: str = "block", logger=None):
        self.label = label
        self.logger = logger or log
        self.start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self):
        self.start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed_ms = (time.time() - self.start) * 1000
        self.logger.debug("%s took %.3fms", self.label, self.elapsed_ms)
        return False
