"""
Engine enumerations used at the host boundary.

Values mirror the engine's own numbering so they can be compared directly
against what the host reports.
"""

from enum import IntEnum


class ModCallback(IntEnum):
    """Engine callbacks the recorder listens to."""
    POST_RENDER = 2
    POST_GAME_STARTED = 15
    POST_NEW_LEVEL = 18


class RoomShape(IntEnum):
    SHAPE_1x1 = 1
    SHAPE_IH = 2
    SHAPE_IV = 3
    SHAPE_1x2 = 4
    SHAPE_IIV = 5
    SHAPE_2x1 = 6
    SHAPE_IIH = 7
    SHAPE_2x2 = 8
    SHAPE_LTL = 9
    SHAPE_LTR = 10
    SHAPE_LBL = 11
    SHAPE_LBR = 12


class Difficulty(IntEnum):
    NORMAL = 0
    HARD = 1
    GREED = 2
    GREEDIER = 3


class Challenge(IntEnum):
    NULL = 0


class PlayerType(IntEnum):
    ISAAC = 0
    MAGDALENE = 1
    CAIN = 2


class SeedEffect(IntEnum):
    PREVENT_ALL_CURSES = 70
