from __future__ import annotations


class VideoPokerError(ValueError):
    """Base class for input validation failures raised by the engine."""


class InvalidHand(VideoPokerError):
    """Hand is not exactly 5 distinct cards."""


class InvalidHoldPattern(VideoPokerError):
    """Hold pattern is not an integer in [0, 31]."""


class InvalidPayTable(VideoPokerError):
    """Pay table is missing a category or carries a negative multiplier."""
