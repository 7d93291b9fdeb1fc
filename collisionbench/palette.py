"""Named colours used when drawing entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class AvailableColor(Enum):
    PADDLE = auto()
    BACKGROUND = auto()
    BALL = auto()
    BRICK = auto()
    WALL = auto()
    TEXT = auto()
    SCORE = auto()
    DARKGREEN = auto()
    GREEN = auto()
    LIGHTGREEN = auto()
    DARKBLUE = auto()
    BLUE = auto()
    LIGHTBLUE = auto()
    DARKRED = auto()
    RED = auto()
    LIGHTRED = auto()
    DARKYELLOW = auto()
    YELLOW = auto()
    LIGHTYELLOW = auto()
    BLACK = auto()
    BARRIER = auto()
    PEAR = auto()
    EMERALD = auto()


@dataclass(frozen=True)
class Color:
    """An sRGB colour with alpha, components in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


_PALETTE: dict[AvailableColor, Color] = {
    AvailableColor.PADDLE: Color(0.3, 0.3, 0.7),
    AvailableColor.BACKGROUND: Color(0.9, 0.9, 0.9),
    AvailableColor.BALL: Color(1.0, 0.5, 0.5),
    AvailableColor.BRICK: Color(0.5, 0.5, 1.0),
    AvailableColor.WALL: Color(0.8, 0.8, 0.8),
    AvailableColor.TEXT: Color(0.5, 0.5, 1.0),
    AvailableColor.SCORE: Color(1.0, 0.5, 0.5),
    AvailableColor.DARKGREEN: Color(0.0, 0.5, 0.0),
    AvailableColor.GREEN: Color(0.0, 1.0, 0.0),
    AvailableColor.LIGHTGREEN: Color(0.5, 1.0, 0.5),
    AvailableColor.DARKBLUE: Color(0.0, 0.0, 0.5),
    AvailableColor.BLUE: Color(0.0, 0.0, 1.0),
    AvailableColor.LIGHTBLUE: Color(0.5, 0.5, 1.0),
    AvailableColor.DARKRED: Color(0.5, 0.0, 0.0),
    AvailableColor.RED: Color(1.0, 0.0, 0.0),
    AvailableColor.LIGHTRED: Color(1.0, 0.5, 0.5),
    AvailableColor.DARKYELLOW: Color(0.5, 0.5, 0.0),
    AvailableColor.YELLOW: Color(1.0, 1.0, 0.0),
    AvailableColor.LIGHTYELLOW: Color(1.0, 1.0, 0.5),
    AvailableColor.BLACK: Color(0.0, 0.0, 0.0),
    AvailableColor.BARRIER: Color(0.1, 0.1, 0.1, 1.0),
    AvailableColor.EMERALD: Color(
        0.047058823529411764, 0.807843137254902, 0.4196078431372549, 1.0
    ),
    AvailableColor.PEAR: Color(0.8627450980392157, 0.9294117647058824, 0.19215686274509, 1.0),
}


def color_for(color: AvailableColor) -> Color:
    """The colour value for a named colour."""
    return _PALETTE[color]