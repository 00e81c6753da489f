"""
Exceptions raised by the board engine.

Ordinary rejected moves (occupied cell, finished game) are reported with a
False return value. Everything here is a caller bug.
"""


class GameError(Exception):
    pass


class InvalidCoordinatesError(GameError, IndexError):
    pass


class NoStrategyError(GameError):
    pass


class InvalidStrategyMoveError(GameError, ValueError):
    pass


class IllegalReentryError(GameError, RuntimeError):
    pass


class GameFinishedError(GameError):
    pass
