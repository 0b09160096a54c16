from __future__ import annotations


class PuzzleError(Exception):
    """Base class for puzzle core errors."""
    pass


class UnknownLevelError(PuzzleError):
    """Level number has no registered configuration."""

    def __init__(self, level: int):
        self.level = level
        super().__init__(f"Unknown level: {level}")
