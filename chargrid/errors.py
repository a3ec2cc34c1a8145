#
# PROJECT: chargrid
# MODULE: chargrid/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class GridError(ValueError):
    """Base class for every error raised by the grid core."""


class InvalidDimension(GridError):
    """A row or column count lies outside its allowed range."""

    def __init__(self, axis: str, value, low: int, high: int):
        self.axis = axis
        self.value = value
        self.low = low
        self.high = high
        super().__init__(
            f"Invalid {axis} count {value!r}: must be between {low} and {high}."
        )


class InvalidFillCharacter(GridError):
    """The requested fill character is reserved or not a single byte."""

    def __init__(self, char, reserved):
        self.char = char
        self.reserved = tuple(reserved)
        listed = ", ".join(f"'{ch}'" for ch in self.reserved)
        super().__init__(
            f"Invalid fill character {char!r}: it must be a single byte and "
            f"is not allowed to be the line break or one of {{ {listed} }}."
        )


class StorageExhausted(GridError):
    """A bounded storage arena cannot hold the requested number of cells."""

    def __init__(self, requested: int, capacity: int):
        self.requested = requested
        self.capacity = capacity
        super().__init__(
            f"Storage exhausted: {requested} cells requested, capacity is {capacity}."
        )


class TruncatedRecord(GridError):
    """A serialized grid ended before the size its header declares."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Truncated grid record: expected {expected} bytes, got {got}.")
