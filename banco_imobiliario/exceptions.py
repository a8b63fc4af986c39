"""
Exception hierarchy for the game engine.

Play-time invalid actions (buying an owned property, building without
funds) are reported through boolean results and never raise. Exceptions
are reserved for setup mistakes and internal defects.
"""


class BancoError(Exception):
    """Base exception for all engine errors."""


class OutOfRangeError(BancoError, IndexError):
    """A board index fell outside the fixed board."""

    def __init__(self, index: int, size: int):
        super().__init__(f"board index {index} outside [0, {size})")
        self.index = index
        self.size = size


class GameSetupError(BancoError, ValueError):
    """The game was configured or seated incorrectly."""
